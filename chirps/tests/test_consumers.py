"""
Tests for the live Chirp feed WebSocket consumer.
"""

from types import SimpleNamespace
from unittest.mock import Mock

from django.conf import settings
from django.contrib.auth.models import AnonymousUser
from django.test import TransactionTestCase

from asgiref.sync import sync_to_async
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator

from chirps.consumers import ChirpFeedConsumer
from chirps.listeners import publish_to_feed


class ChirpFeedConsumerTests(TransactionTestCase):
    """Tests for ChirpFeedConsumer WebSocket behavior."""

    async def connect(self, user=None):
        communicator = WebsocketCommunicator(ChirpFeedConsumer.as_asgi(), "/ws/chirps/")
        communicator.scope["user"] = user or SimpleNamespace(pk=1, is_authenticated=True)
        connected, _subprotocol = await communicator.connect()
        return communicator, connected

    async def test_unauthenticated_connection_rejected(self):
        communicator, connected = await self.connect(user=AnonymousUser())
        assert not connected, "Unauthenticated connection should be rejected"
        await communicator.disconnect()

    async def test_connection_without_user_rejected(self):
        communicator = WebsocketCommunicator(ChirpFeedConsumer.as_asgi(), "/ws/chirps/")
        connected, _subprotocol = await communicator.connect()
        assert not connected
        await communicator.disconnect()

    async def test_authenticated_connection_success(self):
        communicator, connected = await self.connect()
        assert connected, "Authenticated connection should succeed"
        await communicator.disconnect()

    async def test_ping_pong_message(self):
        communicator, _ = await self.connect()

        await communicator.send_json_to({"type": "ping", "timestamp": 1234567890})

        message = await communicator.receive_json_from()
        assert message == {"type": "pong", "timestamp": 1234567890}
        await communicator.disconnect()

    async def test_unknown_message_type(self):
        communicator, _ = await self.connect()

        await communicator.send_json_to({"type": "subscribe"})

        message = await communicator.receive_json_from()
        assert message == {"type": "error", "message": "Unknown message type: subscribe"}
        await communicator.disconnect()

    async def test_receives_group_messages(self):
        communicator, _ = await self.connect()

        await get_channel_layer().group_send(
            settings.CHIRPS_FEED_GROUP,
            {"type": "chirp.created", "chirp": {"id": 1, "message": "Hello"}},
        )

        message = await communicator.receive_json_from()
        assert message == {"type": "chirp_created", "chirp": {"id": 1, "message": "Hello"}}
        await communicator.disconnect()

    async def test_published_chirp_reaches_feed(self):
        communicator, _ = await self.connect()
        chirp = Mock(pk=7)
        chirp.to_payload.return_value = {"id": 7, "message": "Live", "author": "Ada"}

        delivered = await sync_to_async(publish_to_feed)(chirp)

        assert delivered is True
        message = await communicator.receive_json_from()
        assert message["chirp"]["message"] == "Live"
        await communicator.disconnect()

    async def test_disconnected_client_stops_receiving(self):
        communicator, _ = await self.connect()
        await communicator.disconnect()

        await get_channel_layer().group_send(
            settings.CHIRPS_FEED_GROUP,
            {"type": "chirp.created", "chirp": {"id": 2}},
        )

        assert await communicator.receive_nothing()
