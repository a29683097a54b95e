import os
import pytest
from unittest.mock import patch

from patterndemo.application.runner import PatternDemoRunner
from patterndemo.bootstrap import register_prototypes, register_services
from patterndemo.config import AppConfig, PrototypeConfig
from patterndemo.infrastructure.patterns.singleton_registry import SingletonRegistry
from patterndemo.infrastructure.registry.prototype_registry import PrototypeRegistry
from patterndemo.infrastructure.registry.service_registry import ServiceRegistry


@pytest.fixture(autouse=True)
def clean_environment():
    """Keep PATTERNDEMO_* overrides from leaking into tests."""
    cleaned = {k: v for k, v in os.environ.items() if not k.startswith("PATTERNDEMO_")}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture(autouse=True)
def reset_process_singletons():
    """Give every test a fresh process-wide singleton registry."""
    SingletonRegistry.reset_instance()
    yield
    SingletonRegistry.reset_instance()


@pytest.fixture
def singleton_registry():
    return SingletonRegistry()


@pytest.fixture
def prototype_registry():
    registry = PrototypeRegistry()
    register_prototypes(registry, PrototypeConfig())
    return registry


@pytest.fixture
def service_registry():
    registry = ServiceRegistry()
    register_services(registry)
    return registry


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def runner(app_config, singleton_registry, prototype_registry, service_registry):
    return PatternDemoRunner(
        config=app_config,
        singleton_registry=singleton_registry,
        prototype_registry=prototype_registry,
        service_registry=service_registry,
    )
