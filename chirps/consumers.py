"""
WebSocket consumer for the live Chirp feed.

Authenticated clients join the feed group and receive every new Chirp as
``{"type": "chirp_created", "chirp": {...}}``.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from services.core.logging import get_logger

logger = get_logger(__name__)


class ChirpFeedConsumer(AsyncJsonWebsocketConsumer):
    """Pushes newly created Chirps to connected browsers."""

    group_name: str | None = None

    async def connect(self) -> None:
        user = self.scope.get("user")
        if user is None or not user.is_authenticated:
            await self.close()
            return

        self.group_name = settings.CHIRPS_FEED_GROUP
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()

        logger.debug(f"User {user.pk}: joined live feed ({self.channel_name})")

    async def disconnect(self, close_code: int) -> None:
        # Connection was rejected before joining the group
        if self.group_name is None:
            return
        await self.channel_layer.group_discard(self.group_name, self.channel_name)

    async def receive_json(self, content: Any, **kwargs: Any) -> None:
        message_type = content.get("type") if isinstance(content, dict) else None
        if message_type == "ping":
            await self.send_json({"type": "pong", "timestamp": content.get("timestamp")})
        else:
            await self.send_json(
                {"type": "error", "message": f"Unknown message type: {message_type}"}
            )

    async def chirp_created(self, event: dict) -> None:
        """Handle ``chirp.created`` group messages."""
        await self.send_json({"type": "chirp_created", "chirp": event["chirp"]})
