"""Binder settings."""

import json
import os
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Pattern, Union

import yaml

DEFAULT_PREFIX = "CFG"

# Members that start with an underscore are private by convention
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (r"^_",)

PatternLike = Union[str, Pattern[str]]


def compile_patterns(patterns: Iterable[PatternLike]) -> tuple[Pattern[str], ...]:
    """Compile string patterns, passing already compiled ones through.

    Raises:
        re.error: If a string pattern is not a valid regular expression.
    """
    return tuple(
        pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
        for pattern in patterns
    )


@dataclass
class ObjectBinderSettings:
    """Settings for binding one configuration object.

    Attributes:
        prefix: Key prefix; the root object is bound to exactly this key.
            ``None`` or a blank string falls back to ``"CFG"``.
        debug: Log one line per binding when enabled. Lines are emitted at
            INFO on the ``configinject.binder.flattener`` logger; configure
            logging (``logging.basicConfig(level=logging.INFO)``) to see them.
        exclude_patterns: Regular expressions tested against each property
            name; a match excludes the property and everything below it.
            ``None`` means the defaults (underscore-prefixed names).
    """
    prefix: Optional[str] = DEFAULT_PREFIX
    debug: bool = False
    exclude_patterns: Optional[tuple[PatternLike, ...]] = None

    def __post_init__(self):
        if self.exclude_patterns is None:
            self.exclude_patterns = DEFAULT_EXCLUDE_PATTERNS
        self.exclude_patterns = compile_patterns(self.exclude_patterns)
        self.debug = bool(self.debug)

    @property
    def effective_prefix(self) -> str:
        """Prefix actually used for keys."""
        return (self.prefix and self.prefix.strip()) or DEFAULT_PREFIX

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ObjectBinderSettings":
        """Create settings from a mapping, filling in absent options."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown binder settings: {sorted(unknown)}")

        options = dict(data)
        patterns = options.get("exclude_patterns")
        if isinstance(patterns, str):
            options["exclude_patterns"] = (patterns,)
        elif patterns is not None:
            options["exclude_patterns"] = tuple(patterns)
        if options.get("debug") is None:
            options.pop("debug", None)
        return cls(**options)

    @classmethod
    def from_file(cls, path: str | Path) -> "ObjectBinderSettings":
        """Load settings from a YAML or JSON file.

        A missing file yields the default settings.
        """
        path = Path(path).expanduser()
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_env(cls, prefix: str = "CONFIGINJECT") -> "ObjectBinderSettings":
        """Load settings from environment variables.

        Environment variables:
            {prefix}_PREFIX: Key prefix
            {prefix}_DEBUG: true|1|yes enables binding logs
            {prefix}_EXCLUDE: Comma separated exclusion patterns
        """
        def get(key: str, default: str = None) -> Optional[str]:
            return os.environ.get(f"{prefix}_{key}", default)

        debug = get("DEBUG")
        exclude = get("EXCLUDE")

        return cls(
            prefix=get("PREFIX", DEFAULT_PREFIX),
            debug=debug is not None and debug.lower() in ("true", "1", "yes"),
            exclude_patterns=(
                tuple(p.strip() for p in exclude.split(",") if p.strip())
                if exclude is not None else None
            ),
        )

    @classmethod
    def coerce(
        cls,
        settings: Union["ObjectBinderSettings", Mapping[str, Any], None],
    ) -> "ObjectBinderSettings":
        """Normalize ``None``, a mapping, or a settings object into settings."""
        if settings is None:
            return cls()
        if isinstance(settings, ObjectBinderSettings):
            return settings
        return cls.from_dict(settings)


@dataclass
class DecoratorObjectBinderSettings(ObjectBinderSettings):
    """Settings for a class registered through the ``config`` decorator.

    Attributes:
        service_identifier: Identifier the class is bound under in the
            container. Defaults to the class itself.
    """
    service_identifier: Any = field(default=None)
