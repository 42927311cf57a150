"""
Domain events raised by Chirps.

Events are plain immutable objects dispatched on a Django ``Signal``.
Listeners connect to the signal and receive the event as the ``event``
keyword argument:

    @receiver(chirp_created)
    def on_chirp_created(sender, event, **kwargs):
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from django.dispatch import Signal

if TYPE_CHECKING:
    from chirps.models import Chirp

chirp_created = Signal()


@dataclass(frozen=True)
class ChirpCreated:
    """A Chirp was created."""

    chirp: Chirp

    signal: ClassVar[Signal] = chirp_created

    @property
    def sender(self):
        return type(self.chirp)


def dispatch(event, sender=None) -> list:
    """
    Send ``event`` on its signal; returns ``(receiver, response)`` pairs.

    ``sender`` defaults to the event's own ``sender`` attribute, or None for
    events that declare none.
    """
    if sender is None:
        sender = getattr(event, "sender", None)
    return event.signal.send(sender=sender, event=event)
