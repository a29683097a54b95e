"""Application bootstrap - wires configuration, logging and registries."""

from __future__ import annotations

from typing import Optional

from patterndemo.application.runner import PatternDemoRunner
from patterndemo.config import AppConfig, ConfigurationManager, PrototypeConfig
from patterndemo.domain.document import Document, default_templates
from patterndemo.domain.notification import EmailNotifier, SmsNotifier
from patterndemo.infrastructure.logging.logger import get_logger, setup_logging
from patterndemo.infrastructure.patterns.singleton_registry import SingletonRegistry
from patterndemo.infrastructure.registry.prototype_registry import PrototypeRegistry
from patterndemo.infrastructure.registry.service_registry import ServiceRegistry


def register_prototypes(registry: PrototypeRegistry, prototype_config: PrototypeConfig) -> None:
    """
    Register the built-in document templates plus those from configuration.

    A configured template whose key matches a built-in one replaces it.
    """
    templates = default_templates()
    for key, template in prototype_config.templates.items():
        if key in templates:
            get_logger(__name__).info("Configured template replaces built-in", key=key)
        templates[key] = Document(
            title=template.title, content=template.content, metadata=dict(template.metadata)
        )
    for key, document in templates.items():
        registry.register(key, document)


def register_services(registry: ServiceRegistry) -> None:
    """Register the built-in notification services."""
    registry.register("email", EmailNotifier)
    registry.register("sms", SmsNotifier)


class Application:
    """Application context with lazily created runner."""

    def __init__(self, config_path: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None,
                 singleton_registry: Optional[SingletonRegistry] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._config_manager = config_manager
        self._singleton_registry = singleton_registry
        self._runner: Optional[PatternDemoRunner] = None
        self._initialized = False

        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            self._config_manager = ConfigurationManager(self.config_path)
        return self._config_manager

    def initialize(self) -> bool:
        """
        Load configuration, configure logging and build the registries.

        Raises:
            ConfigurationError: If configuration cannot be loaded or is invalid
        """
        if self._initialized:
            return True

        app_config = self.config_manager.get_typed(AppConfig)
        setup_logging(app_config.logging)

        prototype_registry = PrototypeRegistry()
        register_prototypes(prototype_registry, app_config.prototype)

        service_registry = ServiceRegistry()
        register_services(service_registry)

        self._runner = PatternDemoRunner(
            config=app_config,
            singleton_registry=self._singleton_registry,
            prototype_registry=prototype_registry,
            service_registry=service_registry,
        )
        self._initialized = True
        self.logger.info(
            "Application initialized",
            environment=app_config.environment,
            prototypes=prototype_registry.keys(),
            services=service_registry.names(),
        )
        return True

    @property
    def runner(self) -> PatternDemoRunner:
        if not self._initialized:
            self.initialize()
        return self._runner


def create_application(config_path: Optional[str] = None) -> Application:
    """Create and initialize an application."""
    app = Application(config_path)
    app.initialize()
    return app
