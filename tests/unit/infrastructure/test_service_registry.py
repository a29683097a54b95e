"""Tests for the service registry."""

from unittest.mock import Mock

import pytest

from patterndemo.domain.core.exceptions import ConfigurationError, NotFoundError
from patterndemo.domain.notification import EmailNotifier, SmsNotifier
from patterndemo.infrastructure.registry import ServiceRegistry


class TestServiceRegistry:
    """Test service registration and resolution."""

    def setup_method(self):
        self.registry = ServiceRegistry()

    def test_resolve_calls_factory(self):
        factory = Mock(return_value="service_instance")
        self.registry.register("mock", factory)

        assert self.registry.resolve("mock", 1, key="v") == "service_instance"
        factory.assert_called_once_with(1, key="v")

    def test_resolve_creates_new_instance_each_time(self):
        self.registry.register("email", EmailNotifier)

        first = self.registry.resolve("email")
        second = self.registry.resolve("email")

        assert isinstance(first, EmailNotifier)
        assert first is not second

    def test_unregistered_name_raises_not_found(self):
        self.registry.register("email", EmailNotifier)

        with pytest.raises(NotFoundError) as exc_info:
            self.registry.resolve("pager")

        assert exc_info.value.resource_type == "Service"
        assert exc_info.value.key == "pager"

    def test_duplicate_name_rejected(self):
        self.registry.register("sms", SmsNotifier)

        with pytest.raises(ConfigurationError, match="already registered"):
            self.registry.register("sms", EmailNotifier)

    def test_non_callable_factory_rejected(self):
        with pytest.raises(ConfigurationError, match="not callable"):
            self.registry.register("broken", "EmailNotifier")

    def test_names_and_clear(self):
        self.registry.register("email", EmailNotifier)
        self.registry.register("sms", SmsNotifier)

        assert self.registry.names() == ["email", "sms"]
        assert self.registry.is_registered("sms")

        self.registry.clear()

        assert self.registry.names() == []

    def test_notifier_output(self):
        assert SmsNotifier().send("hi") == "Sending SMS notification: hi"
        assert EmailNotifier().send("hi") == "Sending email notification: hi"
