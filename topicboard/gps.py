"""GPS publishers and subscribers that exchange "t x y" position messages."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Iterable, Sequence

from topicboard.core import Broker, Publisher, Subscriber

PUBLISH_INTERVAL_MS = 1000
SCENE_SIZE = (400.0, 400.0)
MARKER_SIZE = 10.0
WAITING_TEXT = "Waiting..."

Point = tuple[float, float]


@dataclass(frozen=True)
class GPSReading:
    """One position sample: time and coordinates."""

    t: float
    x: float
    y: float


def format_number(value: float) -> str:
    """Format a number the way position labels and messages show it."""
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value == int(value) and abs(value) < 1e6:
        return str(int(value))
    return format(value, "g")


def read_points(lines: Iterable[str]) -> list[Point]:
    """Read "t x y" triples from text and return the (x, y) points.

    Tokens may be spread over lines freely; an incomplete trailing triple is
    ignored. A token that is not a number raises ValueError.
    """
    tokens = [token for line in lines for token in line.split()]
    numbers = [float(token) for token in tokens]
    return [(x, y) for _, x, y in zip(*[iter(numbers)] * 3)]


def load_points(path: str | os.PathLike[str]) -> list[Point]:
    """Read the points of a GPS text file."""
    with open(path, encoding="utf-8") as handle:
        return read_points(handle)


def parse_reading(message: str) -> GPSReading | None:
    """Parse the first three numbers of a message, or None if it has fewer."""
    parts = message.split()
    if len(parts) < 3:
        return None
    try:
        t, x, y = (float(part) for part in parts[:3])
    except ValueError:
        return None
    return GPSReading(t, x, y)


class GPSCarPublisher(Publisher):
    """Replays a list of points, one message per timer tick.

    The owner drives the timer: while ``active`` is true it should call
    ``publish_next`` every ``interval_ms`` milliseconds.
    """

    interval_ms = PUBLISH_INTERVAL_MS

    def __init__(
        self,
        name: str,
        broker: Broker,
        topic_name: str,
        points: Sequence[Point] = (),
    ) -> None:
        super().__init__(name, broker, topic_name)
        self.points: list[Point] = list(points)
        self.index = 0
        self.active = False

    def start(self) -> str | None:
        """Restart the replay from the first point and publish it."""
        self.active = False
        self.index = 0
        return self.publish_next()

    def publish_next(self) -> str | None:
        """Publish the next point; at the end, stop and rewind. Returns the message."""
        if self.index < len(self.points):
            x, y = self.points[self.index]
            self.index += 1
            message = f"{self.index} {format_number(x)} {format_number(y)}"
            self.publish(message)
            self.active = True
            return message
        self.active = False
        self.index = 0
        return None


class GPSCarSubscriber(Subscriber):
    """Shows the latest time and coordinates as three labels."""

    def __init__(self, name: str, topic_name: str) -> None:
        super().__init__(name, topic_name)
        self.time_text = "t=0"
        self.x_text = "x=0"
        self.y_text = "y=0"

    def update(self, message: str) -> None:
        reading = parse_reading(message)
        if reading is None:
            return
        self.time_text = f"t={format_number(reading.t)}"
        self.x_text = f"x={format_number(reading.x)}"
        self.y_text = f"y={format_number(reading.y)}"


class GPSFollower(Subscriber):
    """Tracks the latest position as a marker on a fixed-size scene."""

    def __init__(self, name: str, topic_name: str) -> None:
        super().__init__(name, topic_name)
        self.info = WAITING_TEXT
        self.scene_size = SCENE_SIZE
        self.marker = (0.0, 0.0, MARKER_SIZE, MARKER_SIZE)

    def update(self, message: str) -> None:
        reading = parse_reading(message)
        if reading is None:
            return
        self.info = (
            f"t={format_number(reading.t)} "
            f"x={format_number(reading.x)} "
            f"y={format_number(reading.y)}"
        )
        self.marker = (reading.x, reading.y, MARKER_SIZE, MARKER_SIZE)