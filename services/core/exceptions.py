"""Custom exception hierarchy for Chirper application.

Exception Hierarchy:
    ChirperError (base for all custom exceptions)
    ├── NotificationError (base for notification errors)
    │   ├── UnsupportedChannelError
    │   ├── MissingRecipientError
    │   └── NotificationDeliveryError
    └── ConfigurationError

Usage:
    from services.core.exceptions import UnsupportedChannelError

    if channel not in self.channels:
        raise UnsupportedChannelError(channel=channel, supported=self.channels)
"""

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class ChirperError(Exception):
    """Base exception for all Chirper custom exceptions.

    Allows catching all application-specific exceptions with a single except clause.
    """

    pass


# =============================================================================
# Notification Exceptions
# =============================================================================


class NotificationError(ChirperError):
    """Base exception for errors raised while routing or delivering notifications."""

    pass


class UnsupportedChannelError(NotificationError):
    """Raised when a notification asks for a channel nobody can deliver.

    Attributes:
        channel: Channel name returned by the notification's via()
        supported: Channel names the service knows about
    """

    def __init__(self, channel: str, supported: list[str] | tuple[str, ...]) -> None:
        self.channel = channel
        self.supported = list(supported)
        super().__init__(
            f"Notification channel '{channel}' is not supported "
            f"(supported: {', '.join(self.supported) or 'none'})"
        )


class MissingRecipientError(NotificationError):
    """Raised when a notifiable has no address for the requested channel.

    Attributes:
        notifiable: Object that was supposed to receive the notification
        channel: Channel that needed an address
    """

    def __init__(self, notifiable: Any, channel: str) -> None:
        self.notifiable = notifiable
        self.channel = channel
        notifiable_id = getattr(notifiable, "pk", None)
        super().__init__(
            f"{type(notifiable).__name__} {notifiable_id} has no route for channel '{channel}'"
        )


class NotificationDeliveryError(NotificationError):
    """Raised when a channel gave up delivering a notification.

    Attributes:
        channel: Channel that failed
        recipient: Address the channel tried to reach
    """

    def __init__(self, channel: str, recipient: str, reason: str | None = None) -> None:
        self.channel = channel
        self.recipient = recipient
        self.reason = reason
        message = f"Failed to deliver '{channel}' notification to {recipient}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(ChirperError):
    """Raised when a required setting is missing or unusable.

    Attributes:
        setting: Name of the offending setting
    """

    def __init__(self, setting: str, message: str | None = None) -> None:
        self.setting = setting
        super().__init__(message or f"Setting {setting} is missing or invalid")
