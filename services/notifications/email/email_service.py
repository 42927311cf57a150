"""
Email delivery with retry.

All notification mail leaves through ``EmailService``, which sends one
message per recipient through Django's configured email backend and retries
transient failures with exponential backoff.
"""

import time

from django.conf import settings
from django.core.mail import send_mail as django_send_mail

from asgiref.sync import sync_to_async

from services.core.logging import get_logger

logger = get_logger(__name__)


class EmailService:
    """
    Send plain-text email (with an optional HTML alternative), retrying failures.

    Example:
        EmailService().send_email(
            subject="New Chirp from Ada",
            body="Hello",
            html_body="<p>Hello</p>",
            recipient="grace@example.com",
        )
    """

    MAX_RETRIES = 3
    RETRY_DELAY = 1.0  # seconds before the second attempt
    RETRY_BACKOFF = 2.0
    MAX_DELAY = 10.0

    def __init__(self, default_from_email: str | None = None):
        self.default_from_email = default_from_email or getattr(
            settings, "DEFAULT_FROM_EMAIL", "noreply@example.com"
        )

    def backoff_delay(self, attempt: int) -> float:
        """Seconds to wait after failed ``attempt`` (1-based)."""
        return min(self.RETRY_DELAY * self.RETRY_BACKOFF ** (attempt - 1), self.MAX_DELAY)

    def send_email(
        self,
        subject: str,
        body: str,
        recipient: str,
        html_body: str | None = None,
        from_email: str | None = None,
        fail_silently: bool = True,
    ) -> bool:
        """
        Send one email to ``recipient``.

        Args:
            subject: Subject line
            body: Plain-text body
            recipient: Single recipient address
            html_body: HTML alternative of ``body``
            from_email: Sender; defaults to ``default_from_email``
            fail_silently: Return False instead of raising once every attempt failed

        Returns:
            True if the backend accepted the message
        """
        from_email = from_email or self.default_from_email
        context = {"recipient": recipient, "subject": subject}

        for attempt in range(1, self.MAX_RETRIES + 1):
            try:
                django_send_mail(
                    subject=subject,
                    message=body,
                    from_email=from_email,
                    recipient_list=[recipient],
                    fail_silently=False,
                    html_message=html_body,
                )
            except Exception as e:
                error = {"error": str(e), "error_type": type(e).__name__}
                if attempt == self.MAX_RETRIES:
                    logger.error(
                        f"Failed to send email to {recipient} after {attempt} attempts: {e}",
                        extra={**context, **error},
                        exc_info=not fail_silently,
                    )
                    if fail_silently:
                        return False
                    raise

                delay = self.backoff_delay(attempt)
                logger.warning(
                    f"Email to {recipient} failed (attempt {attempt}/{self.MAX_RETRIES}), "
                    f"retrying in {delay}s: {e}",
                    extra={**context, **error, "attempt": attempt},
                )
                time.sleep(delay)
                continue

            logger.info(
                f"Email sent to {recipient}",
                extra={**context, "attempt": attempt},
            )
            return True

        return False

    async def asend_email(
        self,
        subject: str,
        body: str,
        recipient: str,
        html_body: str | None = None,
        from_email: str | None = None,
        fail_silently: bool = True,
    ) -> bool:
        """Async version of send_email."""
        return await sync_to_async(self.send_email)(
            subject=subject,
            body=body,
            recipient=recipient,
            html_body=html_body,
            from_email=from_email,
            fail_silently=fail_silently,
        )

    def send_batch(self, emails: list[dict], fail_silently: bool = True) -> dict:
        """
        Send several emails, one message each.

        Args:
            emails: Dicts with ``subject``, ``body`` and ``recipient``, and
                optionally ``html_body`` and ``from_email``

        Returns:
            Dict with 'sent' and 'failed' counts
        """
        results = {"sent": 0, "failed": 0}
        for email in emails:
            sent = self.send_email(
                subject=email["subject"],
                body=email["body"],
                recipient=email["recipient"],
                html_body=email.get("html_body"),
                from_email=email.get("from_email"),
                fail_silently=fail_silently,
            )
            results["sent" if sent else "failed"] += 1
        return results
