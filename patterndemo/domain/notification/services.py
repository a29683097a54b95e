"""Notification services."""
from abc import ABC, abstractmethod


class NotificationService(ABC):
    """Delivers a message over one channel."""

    @abstractmethod
    def send(self, message: str) -> str:
        """Send a message and return the delivery line."""


class EmailNotifier(NotificationService):
    def send(self, message: str) -> str:
        return f"Sending email notification: {message}"


class SmsNotifier(NotificationService):
    def send(self, message: str) -> str:
        return f"Sending SMS notification: {message}"
