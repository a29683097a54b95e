"""Pattern demonstration runner.

Builds the illustrative object graph for a creational pattern, exercises it
and returns the trace lines a reader of the pattern documentation would see.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pydantic

from patterndemo.application.dto.responses import DemoResultDTO
from patterndemo.config.schemas import AppConfig
from patterndemo.domain.base.value_objects import Selector
from patterndemo.domain.connection import DatabaseConnection
from patterndemo.domain.core.exceptions import ValidationError
from patterndemo.domain.database import get_database_factory
from patterndemo.domain.document import Document
from patterndemo.domain.payment import Amount, PaymentProcessor
from patterndemo.domain.transport import get_logistics
from patterndemo.domain.ui import get_gui_factory
from patterndemo.infrastructure.logging.logger import get_logger
from patterndemo.infrastructure.patterns.singleton_registry import SingletonRegistry
from patterndemo.infrastructure.registry.prototype_registry import PrototypeRegistry
from patterndemo.infrastructure.registry.service_registry import ServiceRegistry

SINGLETON_SLOT = "singleton"
DEFAULT_MESSAGE = "Hello from the service registry"


class PatternName(Selector):
    FACTORY_METHOD = "factory-method"
    PAYMENT = "payment"
    SINGLETON = "singleton"
    PROTOTYPE = "prototype"
    ABSTRACT_FACTORY = "abstract-factory"
    DATABASE_FACTORY = "database-factory"
    PROTOTYPES = "prototypes"
    SERVICE = "service"

    @classmethod
    def selector_name(cls) -> str:
        return "pattern"


class PatternDemoRunner:
    """Runs one demonstration per pattern family."""

    def __init__(self,
                 config: Optional[AppConfig] = None,
                 singleton_registry: Optional[SingletonRegistry] = None,
                 prototype_registry: Optional[PrototypeRegistry] = None,
                 service_registry: Optional[ServiceRegistry] = None):
        self._config = config or AppConfig()
        self._singletons = singleton_registry or SingletonRegistry.get_instance()
        self._prototypes = prototype_registry or PrototypeRegistry()
        self._services = service_registry or ServiceRegistry()
        self._payments = PaymentProcessor(
            currency_symbol=self._config.payment.currency_symbol,
            allow_negative_amounts=self._config.payment.allow_negative_amounts,
        )
        self._logger = get_logger(__name__)

    @property
    def singleton_registry(self) -> SingletonRegistry:
        return self._singletons

    @property
    def prototype_registry(self) -> PrototypeRegistry:
        return self._prototypes

    @property
    def service_registry(self) -> ServiceRegistry:
        return self._services

    def run_factory_method(self, kind: str) -> List[str]:
        """
        Plan a delivery with the creator selected by kind.

        Raises:
            UnsupportedKindError: If kind is not 'road' or 'sea'
        """
        logistics = get_logistics(kind)
        self._logger.debug(f"Selected creator {type(logistics).__name__} for kind '{kind}'")
        return [logistics.plan_delivery()]

    def run_payment_factory(self, method: str, amount: Amount) -> str:
        """
        Process a payment with the method selected by name.

        Raises:
            UnsupportedKindError: If method is not 'credit_card' or 'paypal'
            ValidationError: If negative amounts are disabled and amount < 0
        """
        return self._payments.process(method, amount)

    def get_connection(self, host: str, user: str) -> DatabaseConnection:
        """Get-or-create the process-wide connection; later arguments are ignored."""
        return self._singletons.get(SINGLETON_SLOT, DatabaseConnection, host, user)

    def run_singleton_demo(self, configs: Iterable[Tuple[str, str]]) -> List[str]:
        """
        Request the shared connection once per (host, user) pair.

        Only the call that constructs the connection emits the initialization
        line. Every request line reports the connection's held host and user.
        """
        lines: List[str] = []
        handles: List[DatabaseConnection] = []
        for request_number, (host, user) in enumerate(configs, start=1):
            connection, created = self._singletons.get_or_create(
                SINGLETON_SLOT, DatabaseConnection, host, user
            )
            if created:
                lines.append(connection.initialization_message)
            lines.append(f"Request {request_number}: {connection.describe()}")
            handles.append(connection)

        if len(handles) > 1:
            same_instance = all(handle is handles[0] for handle in handles)
            lines.append(f"Same instance: {same_instance}")
        return lines

    def run_prototype_demo(self, base_title: str, base_content: str,
                           edits: Mapping[str, Any],
                           metadata: Optional[Mapping[str, Any]] = None) -> Tuple[List[str], List[str]]:
        """
        Clone a template, edit only the clone and describe both.

        Raises:
            UnsupportedKindError: If an edit names an unknown field
            ValidationError: If the template or an edit has a value of the wrong type
        """
        try:
            original = Document(title=base_title, content=base_content, metadata=dict(metadata or {}))
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid document template: {e.error_count()} error(s)",
                                  details={"errors": e.errors()}) from e
        clone = original.clone()
        clone.apply_edits(edits)
        return original.describe(), clone.describe()

    def run_abstract_factory_demo(self, family: str) -> List[str]:
        """
        Render one button and one checkbox of a single widget family.

        Raises:
            UnsupportedKindError: If family is not 'windows' or 'macos'
        """
        factory = get_gui_factory(family)
        button = factory.create_button()
        checkbox = factory.create_checkbox()
        return [button.render(), checkbox.render()]

    def run_database_factory_demo(self, engine: str) -> List[str]:
        """
        Describe one connection and one statement of a single driver family.

        Raises:
            UnsupportedKindError: If engine is not 'mysql' or 'postgresql'
        """
        factory = get_database_factory(engine)
        connection = factory.create_connection()
        statement = factory.create_statement()
        return [connection.describe(), statement.describe()]

    def run_prototype_registry_demo(self, key: str) -> List[str]:
        """
        Clone a registered template and describe the clone.

        Raises:
            NotFoundError: If key is not registered
        """
        document = self._prototypes.clone(key)
        return [f"Cloned prototype '{key}'"] + document.describe()

    def run_service_lookup(self, name: str, message: str = DEFAULT_MESSAGE) -> str:
        """
        Resolve a notification service by name and send a message.

        Raises:
            NotFoundError: If name is not registered
        """
        service = self._services.resolve(name)
        return service.send(message)

    def run(self, pattern: str, variant: Optional[str] = None, **options: Any) -> DemoResultDTO:
        """
        Dispatch to the demonstration for a pattern identifier.

        Raises:
            UnsupportedKindError: If pattern or variant is not recognized
            ValidationError: If a required option is missing
        """
        pattern_name = PatternName.parse(pattern)
        self._logger.info(f"Running {pattern_name.value} demonstration", variant=variant)

        if pattern_name is PatternName.SINGLETON:
            return DemoResultDTO(
                pattern=pattern_name.value,
                lines=self.run_singleton_demo(self._require(options, "configs")),
            )

        if pattern_name is PatternName.PROTOTYPE:
            original, clone = self.run_prototype_demo(
                self._require(options, "title"),
                self._require(options, "content"),
                options.get("edits") or {},
                options.get("metadata"),
            )
            return DemoResultDTO(
                pattern=pattern_name.value,
                lines=[f"Original {line}" for line in original] + [f"Clone {line}" for line in clone],
                original=original,
                clone=clone,
            )

        if variant is None:
            raise ValidationError(f"Pattern '{pattern_name.value}' requires a variant")

        if pattern_name is PatternName.FACTORY_METHOD:
            lines = self.run_factory_method(variant)
        elif pattern_name is PatternName.PAYMENT:
            lines = [self.run_payment_factory(variant, self._require(options, "amount"))]
        elif pattern_name is PatternName.ABSTRACT_FACTORY:
            lines = self.run_abstract_factory_demo(variant)
        elif pattern_name is PatternName.DATABASE_FACTORY:
            lines = self.run_database_factory_demo(variant)
        elif pattern_name is PatternName.PROTOTYPES:
            lines = self.run_prototype_registry_demo(variant)
        else:
            lines = [self.run_service_lookup(variant, options.get("message") or DEFAULT_MESSAGE)]

        return DemoResultDTO(pattern=pattern_name.value, variant=variant, lines=lines)

    @staticmethod
    def _require(options: Dict[str, Any], name: str) -> Any:
        if options.get(name) is None:
            raise ValidationError(f"Missing required option '{name}'", details={"option": name})
        return options[name]

    def available_patterns(self) -> Sequence[str]:
        return PatternName.values()
