"""Configuration file loading."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..errors import (
    ConfigSourceNotFoundError,
    InvalidConfigRootError,
    UnsupportedConfigFormatError,
)

logger = logging.getLogger(__name__)


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load a configuration root from a YAML or JSON file.

    Empty files load as an empty mapping.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

    Returns:
        The parsed configuration mapping.

    Raises:
        ConfigSourceNotFoundError: If the file does not exist.
        UnsupportedConfigFormatError: If the suffix is not YAML or JSON.
        InvalidConfigRootError: If the file root is not a mapping.
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise ConfigSourceNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise UnsupportedConfigFormatError(f"Unsupported configuration format: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootError(
            f"Configuration root must be a mapping, got {type(data).__name__}"
        )

    logger.debug(f"Loaded configuration from {path}")
    return data
