"""Video publishers and followers that exchange video URLs as messages."""

from __future__ import annotations

from topicboard.core import Broker, Publisher, Subscriber

VOLUME_MIN = 0
VOLUME_MAX = 100
DEFAULT_VOLUME = 50


class VideoPublisher(Publisher):
    """Publishes each non-empty line of text entered by the user."""

    def submit(self, text: str) -> bool:
        """Publish the text unless it is empty; returns whether it was sent."""
        if not text:
            return False
        self.publish(text)
        return True


class VideoFollower(Subscriber):
    """Remembers the latest URL and a shared playback volume."""

    def __init__(self, name: str, topic_name: str) -> None:
        super().__init__(name, topic_name)
        self.last_url = ""
        self.button_text = name
        self.volume = DEFAULT_VOLUME

    def update(self, message: str) -> None:
        self.last_url = message
        self.button_text = message

    def set_volume(self, value: int) -> int:
        """Set the volume, clamped to 0..100; returns the value kept."""
        self.volume = max(VOLUME_MIN, min(VOLUME_MAX, int(value)))
        return self.volume

    @property
    def audio_volume(self) -> float:
        """Volume as the fraction an audio output expects."""
        return self.volume / VOLUME_MAX

    def can_play(self) -> bool:
        return bool(self.last_url)


__all__ = ["Broker", "VideoFollower", "VideoPublisher"]