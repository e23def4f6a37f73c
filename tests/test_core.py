import pytest

from topicboard.core import Broker, Component, Publisher, Subscriber, Topic


class Recorder(Subscriber):
    def __init__(self, name, topic_name):
        super().__init__(name, topic_name)
        self.messages = []

    def update(self, message):
        self.messages.append(message)


def test_component_keeps_name_and_topic():
    component = Component("car", "route")
    assert (component.name, component.topic_name) == ("car", "route")


def test_subscriber_is_abstract():
    with pytest.raises(TypeError):
        Subscriber("s", "t")


def test_topic_has_name():
    topic = Topic("news")
    assert topic.has_name("news")
    assert not topic.has_name("other")


def test_topic_notifies_in_subscription_order():
    topic = Topic("news")
    order = []

    class Tagged(Recorder):
        def update(self, message):
            super().update(message)
            order.append((self.name, message))

    first = Tagged("a", "news")
    second = Tagged("b", "news")
    topic.subscribe(first)
    topic.subscribe(second)
    assert topic.subscribers == (first, second)
    topic.notify("hello")
    assert [s.name for s in topic.subscribers] == ["a", "b"]
    assert first.messages == ["hello"]
    assert second.messages == ["hello"]
    assert order == [("a", "hello"), ("b", "hello")]


def test_create_topic_returns_same_topic_for_same_name():
    broker = Broker()
    first = broker.create_topic("news")
    second = broker.create_topic("news")
    assert first is second
    assert len(broker.topics) == 1


def test_create_topic_distinguishes_names():
    broker = Broker()
    assert broker.create_topic("a") is not broker.create_topic("b")
    assert [t.name for t in broker.topics] == ["a", "b"]


def test_subscribe_none_is_rejected():
    broker = Broker()
    assert broker.subscribe(None) is False
    assert broker.topics == ()


def test_subscribe_creates_topic_and_attaches():
    broker = Broker()
    recorder = Recorder("r", "news")
    assert broker.subscribe(recorder) is True
    topic = broker.create_topic("news")
    assert topic.subscribers == (recorder,)


def test_publisher_reaches_only_its_topic():
    broker = Broker()
    on_topic = Recorder("a", "news")
    off_topic = Recorder("b", "sport")
    broker.subscribe(on_topic)
    broker.subscribe(off_topic)
    publisher = Publisher("p", broker, "news")
    publisher.publish("one")
    publisher.publish("two")
    assert on_topic.messages == ["one", "two"]
    assert off_topic.messages == []


def test_subscriber_added_after_publisher_still_receives():
    broker = Broker()
    publisher = Publisher("p", broker, "news")
    recorder = Recorder("r", "news")
    broker.subscribe(recorder)
    publisher.publish("late")
    assert recorder.messages == ["late"]
    assert publisher.topic is broker.create_topic("news")