from django.urls import re_path

from .consumers import ChirpFeedConsumer

websocket_urlpatterns = [
    re_path(r"ws/chirps/$", ChirpFeedConsumer.as_asgi()),
]
