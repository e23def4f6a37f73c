"""Publish/subscribe core: components, topics and the broker that owns them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component:
    """Something with a name that is attached to a named topic."""

    def __init__(self, name: str, topic_name: str) -> None:
        self.name = name
        self.topic_name = topic_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, topic_name={self.topic_name!r})"


class Subscriber(Component, ABC):
    """A component that receives every message published on its topic."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Handle one message published on the subscribed topic."""


class Topic:
    """A named channel that fans messages out to its subscribers in order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscribers: list[Subscriber] = []

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def notify(self, message: str) -> None:
        for subscriber in list(self._subscribers):
            if subscriber is not None:
                subscriber.update(message)

    def has_name(self, name: str) -> bool:
        return self.name == name

    def __repr__(self) -> str:
        return f"Topic({self.name!r}, subscribers={len(self._subscribers)})"


class Broker:
    """Keeps the topics, creating each one the first time it is named."""

    def __init__(self) -> None:
        self._topics: list[Topic] = []

    @property
    def topics(self) -> tuple[Topic, ...]:
        return tuple(self._topics)

    def _find_topic(self, topic_name: str) -> Topic | None:
        return next((topic for topic in self._topics if topic.has_name(topic_name)), None)

    def create_topic(self, topic_name: str) -> Topic:
        """Return the topic with this name, creating it if it does not exist."""
        topic = self._find_topic(topic_name)
        if topic is None:
            topic = Topic(topic_name)
            self._topics.append(topic)
        return topic

    def subscribe(self, subscriber: Subscriber | None) -> bool:
        """Attach a subscriber to its topic; returns False when there is none."""
        if subscriber is None:
            return False
        self.create_topic(subscriber.topic_name).subscribe(subscriber)
        return True


class Publisher(Component):
    """A component that sends messages to one topic of a broker."""

    def __init__(self, name: str, broker: Broker, topic_name: str) -> None:
        super().__init__(name, topic_name)
        self.topic = broker.create_topic(topic_name)

    def publish(self, message: str) -> None:
        self.topic.notify(message)