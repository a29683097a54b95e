"""Import validation tests for the public package surface.

Catches import failures and stale exports left behind when modules are
reorganized.
"""

import importlib

import pytest


class TestCriticalImports:
    """Test imports used by the entry points."""

    def test_cli_entry_point_imports(self):
        from patterndemo.bootstrap import Application, create_application
        from patterndemo.cli.main import main
        from patterndemo.domain.core.exceptions import DomainException
        from patterndemo.infrastructure.logging.logger import get_logger

        assert all([Application, create_application, main, DomainException, get_logger])

    @pytest.mark.parametrize("module_name", [
        "patterndemo",
        "patterndemo.config",
        "patterndemo.config.schemas",
        "patterndemo.application",
        "patterndemo.domain",
    ])
    def test_exported_names_resolve(self, module_name):
        module = importlib.import_module(module_name)

        for name in getattr(module, "__all__", []):
            assert hasattr(module, name), f"{module_name} exports missing name {name}"


class TestPublicSurface:
    """Test that only live names are exported."""

    def test_config_exports(self):
        import patterndemo.config as config

        assert set(config.__all__) == {
            "AppConfig",
            "LoggingConfig",
            "PaymentConfig",
            "PrototypeConfig",
            "DocumentTemplateConfig",
            "ConfigurationManager",
            "ConfigurationLoader",
            "get_config_manager",
            "reset_config_manager",
        }

    def test_package_metadata(self):
        import patterndemo
        from patterndemo import _package

        assert patterndemo.__version__ == "1.0.0"
        assert {name for name in vars(_package) if not name.startswith("__")} == {"PACKAGE_NAME"}

    def test_dto_has_no_inbound_constructor(self):
        from patterndemo.application.dto import BaseDTO

        assert not hasattr(BaseDTO, "from_dict")

    def test_manager_keeps_only_validated_config(self):
        from patterndemo.config import ConfigurationManager

        manager = ConfigurationManager()
        manager.get("environment")

        assert not hasattr(manager, "_raw_config")
