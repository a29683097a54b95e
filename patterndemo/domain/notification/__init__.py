"""Notification bounded context - services resolved through the service registry."""

from .services import EmailNotifier, NotificationService, SmsNotifier

__all__: list[str] = ["NotificationService", "EmailNotifier", "SmsNotifier"]
