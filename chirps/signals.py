"""
Bridge from Django model lifecycle signals to Chirp domain events.

A model lists the events it raises in ``dispatches_events``; only the
"created" entry is dispatched, once, when a row is first inserted.
"""

from django.db.models.signals import post_save
from django.dispatch import receiver

from chirps.events import dispatch
from chirps.models import Chirp


@receiver(post_save, sender=Chirp, dispatch_uid="chirps.dispatch_saved_events")
def dispatch_saved_events(sender, instance, created, raw=False, **kwargs):
    # Fixture loading saves raw rows; those are not new Chirps
    if raw or not created:
        return
    event_class = getattr(sender, "dispatches_events", {}).get("created")
    if event_class is not None:
        dispatch(event_class(instance), sender=sender)
