"""Tests for the singleton registry and access function."""

import threading
from unittest.mock import Mock

from patterndemo.domain.connection import DatabaseConnection
from patterndemo.infrastructure.patterns import SingletonRegistry, get_singleton


class TestSingletonRegistry:
    """Test slot lifecycle."""

    def setup_method(self):
        self.registry = SingletonRegistry()

    def test_first_access_constructs_instance(self):
        instance, created = self.registry.get_or_create("db", DatabaseConnection, "db1", "admin")

        assert created is True
        assert instance.host == "db1"
        assert self.registry.is_initialized("db")

    def test_later_arguments_are_ignored(self):
        first = self.registry.get("db", DatabaseConnection, "db1", "admin")
        second, created = self.registry.get_or_create("db", DatabaseConnection, "db2", "guest")

        assert created is False
        assert second is first
        assert second.host == "db1"
        assert second.user == "admin"

    def test_factory_called_once(self):
        factory = Mock(return_value=object())

        self.registry.get("slot", factory, 1)
        self.registry.get("slot", factory, 2)

        factory.assert_called_once_with(1)

    def test_slots_are_independent(self):
        first = self.registry.get("a", DatabaseConnection, "h1", "u1")
        second = self.registry.get("b", DatabaseConnection, "h2", "u2")

        assert first is not second
        assert sorted(self.registry.keys()) == ["a", "b"]

    def test_unset_slot(self):
        assert not self.registry.is_initialized("db")
        assert self.registry.keys() == []

    def test_registries_do_not_share_slots(self):
        other = SingletonRegistry()

        first = self.registry.get("db", DatabaseConnection, "h1", "u1")
        second = other.get("db", DatabaseConnection, "h2", "u2")

        assert first is not second

    def test_clear(self):
        self.registry.get("db", DatabaseConnection, "h1", "u1")

        self.registry.clear()

        assert not self.registry.is_initialized("db")

    def test_concurrent_first_access_constructs_once(self):
        calls = []
        barrier = threading.Barrier(8)

        def factory(number):
            calls.append(number)
            return DatabaseConnection(f"host-{number}", "user")

        results = []

        def worker(number):
            barrier.wait()
            results.append(self.registry.get("db", factory, number))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert all(result is results[0] for result in results)


class TestProcessWideRegistry:
    """Test the process-wide registry accessors."""

    def test_get_instance_is_stable(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_reset_instance(self):
        before = SingletonRegistry.get_instance()

        SingletonRegistry.reset_instance()

        assert SingletonRegistry.get_instance() is not before

    def test_get_singleton_uses_class_name_slot(self):
        connection = get_singleton(DatabaseConnection, "db1", "admin")
        again = get_singleton(DatabaseConnection, "db2", "guest")

        assert again is connection
        assert SingletonRegistry.get_instance().is_initialized("DatabaseConnection")

    def test_get_singleton_with_injected_registry(self):
        registry = SingletonRegistry()

        connection = get_singleton(DatabaseConnection, "db1", "admin", registry=registry)

        assert registry.get("DatabaseConnection", DatabaseConnection, "x", "y") is connection
        assert not SingletonRegistry.get_instance().is_initialized("DatabaseConnection")
