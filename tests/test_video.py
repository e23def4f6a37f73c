import pytest

from topicboard.core import Broker
from topicboard.video import VideoFollower, VideoPublisher


def make_pair():
    broker = Broker()
    follower = VideoFollower("screen", "clips")
    broker.subscribe(follower)
    return VideoPublisher("desk", broker, "clips"), follower


def test_follower_starts_with_name_and_default_volume():
    follower = VideoFollower("screen", "clips")
    assert follower.button_text == "screen"
    assert follower.volume == 50
    assert follower.audio_volume == 0.5
    assert not follower.can_play()


def test_submit_delivers_url():
    publisher, follower = make_pair()
    assert publisher.submit("http://localhost/clip.mp4") is True
    assert follower.last_url == "http://localhost/clip.mp4"
    assert follower.button_text == "http://localhost/clip.mp4"
    assert follower.can_play()


def test_submit_empty_is_ignored():
    publisher, follower = make_pair()
    assert publisher.submit("") is False
    assert follower.last_url == ""
    assert not follower.can_play()


def test_latest_message_wins():
    publisher, follower = make_pair()
    publisher.submit("first")
    publisher.submit("second")
    assert follower.last_url == "second"


def test_follower_on_other_topic_untouched():
    broker = Broker()
    other = VideoFollower("other", "music")
    broker.subscribe(other)
    VideoPublisher("desk", broker, "clips").submit("clip")
    assert other.last_url == ""


@pytest.mark.parametrize("value, kept", [(0, 0), (100, 100), (-5, 0), (250, 100), (30, 30)])
def test_set_volume_clamps(value, kept):
    follower = VideoFollower("screen", "clips")
    assert follower.set_volume(value) == kept
    assert follower.volume == kept
    assert follower.audio_volume == kept / 100