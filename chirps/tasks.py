"""
Chirps Tasks - Celery background jobs for Chirp notifications
"""

from django.conf import settings
from django.contrib.auth import get_user_model

from celery import shared_task

from chirps.models import Chirp
from chirps.notifications import NewChirp
from services.core.logging import get_logger
from services.monitoring.task_metrics import monitor_task
from services.notifications import NotificationService

User = get_user_model()
logger = get_logger(__name__)


@shared_task(
    bind=True,
    max_retries=3,
    soft_time_limit=600,  # 10 minutes
    time_limit=900,  # 15 minutes hard limit
    acks_late=True,
    reject_on_worker_lost=True,
)
@monitor_task
def send_chirp_created_notifications(self, chirp_id: int) -> dict:
    """
    Email every other active user about a new Chirp.

    Recipients are streamed from the database in chunks of
    NOTIFICATION_CURSOR_CHUNK_SIZE rows, so memory use does not grow with the
    number of users. A Chirp deleted before the job ran is skipped, not retried;
    any other error, including one while loading the Chirp, retries the job.
    """
    try:
        try:
            chirp = Chirp.objects.select_related("user").get(pk=chirp_id)
        except Chirp.DoesNotExist:
            logger.warning(f"Chirp {chirp_id}: no longer exists, skipping notifications")
            return {"chirp_id": chirp_id, "skipped": True, "recipients": 0, "sent": 0, "failed": 0}

        recipients = (
            User.objects.notifiable()
            .exclude(pk=chirp.user_id)
            .order_by("pk")
            .iterator(chunk_size=settings.NOTIFICATION_CURSOR_CHUNK_SIZE)
        )
        results = NotificationService().notify_many(recipients, NewChirp(chirp))
    except Exception as e:
        logger.error(
            f"Chirp {chirp_id}: notification fan-out failed: {e}",
            extra={"chirp_id": chirp_id, "attempt": self.request.retries + 1},
            exc_info=True,
        )

        if self.request.retries < self.max_retries:
            countdown = 60 * (2**self.request.retries)  # 1min, 2min, 4min
            logger.info(f"Retrying send_chirp_created_notifications in {countdown}s")
            raise self.retry(exc=e, countdown=countdown)
        raise

    logger.info(
        f"Chirp {chirp_id}: notified {results['sent']}/{results['recipients']} users "
        f"({results['failed']} failed)"
    )
    return {"chirp_id": chirp_id, "skipped": False, **results}
