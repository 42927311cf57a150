from django.conf import settings
from django.db import models
from django.utils import timezone

from chirps.events import ChirpCreated


class Chirp(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="chirps"
    )
    message = models.CharField(max_length=255)

    # Set in save() so a fresh Chirp has identical timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(editable=False)

    # Model lifecycle event -> domain event dispatched by chirps.signals
    dispatches_events = {
        "created": ChirpCreated,
    }

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [models.Index(fields=["-created_at"], name="chirp_created_at_idx")]

    def __str__(self):
        return f"Chirp {self.pk} by {self.user_id}"

    def save(self, *args, **kwargs):
        if self._state.adding:
            self.updated_at = self.created_at
        else:
            self.updated_at = timezone.now()
            update_fields = kwargs.get("update_fields")
            if update_fields is not None and "updated_at" not in update_fields:
                kwargs["update_fields"] = [*update_fields, "updated_at"]
        super().save(*args, **kwargs)

    @property
    def was_edited(self):
        return self.updated_at != self.created_at

    def to_payload(self):
        """JSON-safe representation pushed to the live feed."""
        return {
            "id": self.pk,
            "message": self.message,
            "author": self.user.display_name,
            "created_at": self.created_at.isoformat(),
        }
