"""Tests for container modules that bind configuration objects."""

import re
from unittest.mock import MagicMock, call, patch

import pytest

from configinject.binder.modules import build_auto_injection_module, build_injection_module
from configinject.config import DecoratorObjectBinderSettings, ObjectBinderSettings
from configinject.container import Container
from configinject.decorators import ConfigMetadataRegistry
from configinject.interfaces import ConfigObjectMetadata


class Config:
    @property
    def settings(self):
        return {"a": 1, "b": "name"}

    @property
    def other_settings(self):
        return {"c": 1.2, "d": {"many_things": [1, 2, 3]}}


class Config2:
    @property
    def foo(self):
        return "bar"

    @property
    def x_foo(self):
        return "baz"


@pytest.fixture
def configs():
    return ConfigMetadataRegistry()


class TestInjectionModule:
    """Tests for build_injection_module."""

    def test_resolves_config_values(self, test_config):
        container = Container()

        container.load(build_injection_module(test_config, {"debug": False, "prefix": "CFG"}))

        assert container.get("CFG.other_settings.c") == 1.2
        assert container.get("CFG.settings") == {"a": 1, "b": "name"}

    def test_handles_nulls(self):
        container = Container()

        container.load(build_injection_module({"settings": {"thing": None}}))

        assert container.get("CFG.settings") is not None
        assert container.get("CFG.settings.thing") is None

    def test_binds_all_valid_types(self, test_config, bind_func):
        module = build_injection_module(test_config)
        module.registry(bind_func)

        for key in [
            "CFG",
            "CFG.settings",
            "CFG.settings.a",
            "CFG.settings.b",
            "CFG.other_settings",
            "CFG.other_settings.c",
            "CFG.other_settings.d",
            "CFG.other_settings.d.many_things",
        ]:
            bind_func.assert_any_call(key)
        assert bind_func.call_count == 8

        to_constant_value = bind_func.return_value.to_constant_value
        assert to_constant_value.call_count == 8
        to_constant_value.assert_any_call(test_config)
        to_constant_value.assert_any_call(test_config["settings"])
        to_constant_value.assert_any_call(test_config["settings"]["a"])

    def test_registry_is_deferred(self, test_config, bind_func):
        """Test that nothing is bound until the module is loaded."""
        build_injection_module(test_config)

        bind_func.assert_not_called()

    def test_class_instance(self, bind_func):
        config = Config()

        build_injection_module(config, ObjectBinderSettings(prefix="APP")).registry(bind_func)

        assert bind_func.call_count == 8
        bind_func.assert_any_call("APP.other_settings.d.many_things")
        bind_func.return_value.to_constant_value.assert_any_call(config)

    def test_default_settings_not_shared(self, test_config):
        """Test that custom settings for one module do not leak into the next."""
        first, second = Container(), Container()

        first.load(build_injection_module(test_config, {"prefix": "ONE"}))
        second.load(build_injection_module(test_config))

        assert second.is_bound("CFG.settings")
        assert not second.is_bound("ONE.settings")


class TestAutoInjectionModule:
    """Tests for build_auto_injection_module."""

    def test_binds_class_and_properties(self):
        container = Container()
        metadata = [ConfigObjectMetadata(Config)]

        container.load(build_auto_injection_module(container.get, metadata))

        assert isinstance(container.get(Config), Config)
        assert container.get("CFG.settings") == {"a": 1, "b": "name"}

    def test_root_key_is_the_singleton(self):
        container = Container()

        container.load(build_auto_injection_module(container.get, [ConfigObjectMetadata(Config)]))

        assert container.get("CFG") is container.get(Config)

    def test_service_identifier_and_custom_settings(self):
        container = Container()
        settings = DecoratorObjectBinderSettings(
            prefix="CFG2",
            exclude_patterns=(re.compile(r"^x"),),
            service_identifier="Config2",
        )

        with patch.object(container, "bind", wraps=container.bind) as bind_spy:
            container.load(build_auto_injection_module(
                container.get, [ConfigObjectMetadata(Config2, settings)]
            ))

        assert isinstance(container.get("Config2"), Config2)
        assert container.get("CFG2.foo") == "bar"
        assert call("CFG2.x_foo") not in bind_spy.call_args_list
        assert not container.is_bound(Config2)

    def test_resolver_called_with_identifier(self):
        instance = Config2()
        resolver = MagicMock(return_value=instance)
        bind_func = MagicMock()

        module = build_auto_injection_module(
            resolver, [ConfigObjectMetadata(Config2, DecoratorObjectBinderSettings(service_identifier="c2"))]
        )
        module.registry(bind_func)

        resolver.assert_called_once_with("c2")
        bind_func.assert_any_call("c2")
        bind_func.return_value.to.assert_any_call(Config2)
        bind_func.return_value.to.return_value.in_singleton_scope.assert_called()
        bind_func.return_value.to_constant_value.assert_any_call(instance)

    def test_default_settings_exclude_underscore(self):
        class WithPrivate:
            _token = "secret"
            name = "svc"

        container = Container()
        container.load(build_auto_injection_module(container.get, [ConfigObjectMetadata(WithPrivate)]))

        assert container.get("CFG.name") == "svc"
        assert not container.is_bound("CFG._token")


class TestDecoratorRegistry:
    """Tests for ConfigMetadataRegistry."""

    def test_decorator_records_and_returns_class(self, configs):
        @configs.config()
        class Settings:
            level = "info"

        assert len(configs) == 1
        assert configs.entries[0].implementation_type is Settings
        assert configs.entries[0].settings is None
        assert Settings.level == "info"

    def test_keyword_options(self, configs):
        @configs.config(prefix="CFG2", exclude_patterns=[r"^x"], service_identifier="Config2")
        class Decorated(Config2):
            pass

        entry = configs.entries[0]
        assert entry.settings.prefix == "CFG2"
        assert entry.service_identifier == "Config2"

    def test_settings_and_options_are_exclusive(self, configs):
        with pytest.raises(TypeError):
            configs.config(DecoratorObjectBinderSettings(), prefix="X")

    def test_resolves_decorated_class(self, configs):
        @configs.config()
        class Decorated(Config):
            pass

        container = Container()
        container.load(configs.build_module(container.get))

        assert isinstance(container.get(Decorated), Decorated)
        assert container.get("CFG.settings") == {"a": 1, "b": "name"}

    def test_resolves_multiple_configs(self, configs):
        @configs.config()
        class First(Config):
            pass

        @configs.config(prefix="CFG2", exclude_patterns=[r"^x"], service_identifier="Config2")
        class Second(Config2):
            pass

        container = Container()
        with patch.object(container, "bind", wraps=container.bind) as bind_spy:
            container.load(configs.build_module(container.get))

        assert isinstance(container.get(First), First)
        assert container.get("CFG.settings") == {"a": 1, "b": "name"}
        assert isinstance(container.get("Config2"), Second)
        assert container.get("CFG2.foo") == "bar"
        assert call("CFG2.x_foo") not in bind_spy.call_args_list

    def test_registries_are_independent(self, configs):
        other = ConfigMetadataRegistry()

        @configs.config()
        class Only(Config):
            pass

        assert len(configs) == 1
        assert len(other) == 0

    def test_clear(self, configs):
        @configs.config()
        class Temporary:
            pass

        configs.clear()

        assert list(configs) == []
