"""
Listeners reacting to Chirp domain events.

``send_chirp_created_notifications`` is a queued listener: it hands the work
to a Celery worker once the surrounding transaction commits, so the request
that created the Chirp never waits on email delivery.
"""

from django.conf import settings
from django.db import transaction
from django.dispatch import receiver

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

from chirps import tasks
from chirps.events import chirp_created
from services.core.logging import get_logger
from services.core.utils.logging_utils import log_error_with_context

logger = get_logger(__name__)


@receiver(chirp_created, dispatch_uid="chirps.send_chirp_created_notifications")
def send_chirp_created_notifications(sender, event, **kwargs):
    """Queue the notification job for a new Chirp."""
    chirp_id = event.chirp.pk

    def enqueue():
        result = tasks.send_chirp_created_notifications.delay(chirp_id)
        logger.info(f"Chirp {chirp_id}: queued notification job {result.id}")

    transaction.on_commit(enqueue)


@receiver(chirp_created, dispatch_uid="chirps.broadcast_chirp_created")
def broadcast_chirp_created(sender, event, **kwargs):
    """Push a new Chirp to open feed pages."""
    chirp = event.chirp
    transaction.on_commit(lambda: publish_to_feed(chirp))


def publish_to_feed(chirp) -> bool:
    """
    Send ``chirp`` to the live feed group.

    Returns:
        bool: True if the message reached the channel layer
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        logger.warning(f"Chirp {chirp.pk}: No channel layer configured, skipping live feed")
        return False

    try:
        async_to_sync(channel_layer.group_send)(
            settings.CHIRPS_FEED_GROUP,
            {"type": "chirp.created", "chirp": chirp.to_payload()},
        )
    except Exception as e:
        # The feed is best-effort; the Chirp is already saved
        log_error_with_context("publish_to_feed", e, context={"chirp_id": chirp.pk})
        return False

    logger.debug(f"Chirp {chirp.pk}: published to {settings.CHIRPS_FEED_GROUP}")
    return True
