"""Console front end: menus to add publishers and subscribers on one broker."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Sequence, TextIO

from topicboard.core import Broker, Publisher, Subscriber
from topicboard.gps import (
    GPSCarPublisher,
    GPSCarSubscriber,
    GPSFollower,
    Point,
    format_number,
    load_points,
)
from topicboard.video import VideoFollower, VideoPublisher

HELP_TEXT = """\
Commands:
  publisher video|gps      add a publisher (asks for name and topic)
  subscriber video|gps     add a subscriber (asks for name and topic)
  send N TEXT              publish TEXT from video publisher N
  start N                  replay the points of GPS publisher N
  volume N VALUE           set the volume (0-100) of video subscriber N
  show                     list publishers and subscribers
  help                     show this text
  quit                     leave"""


class UsageError(Exception):
    """A console command that cannot be carried out as typed."""


class Stage(Enum):
    """Which GPS subscriber the "Subscriber > GPS" menu creates."""

    STAGE1 = 1
    STAGE3 = 3

    @property
    def gps_subscriber_class(self) -> type[Subscriber]:
        return GPSFollower if self is Stage.STAGE1 else GPSCarSubscriber


@dataclass
class Workspace:
    """A broker with publishers on the left and subscribers on the right."""

    stage: Stage = Stage.STAGE1
    broker: Broker = field(default_factory=Broker)
    publishers: list[Publisher] = field(default_factory=list)
    subscribers: list[Subscriber] = field(default_factory=list)

    def add_video_publisher(self, name: str, topic: str) -> VideoPublisher:
        publisher = VideoPublisher(name, self.broker, topic)
        self.publishers.append(publisher)
        return publisher

    def add_gps_publisher(
        self, name: str, topic: str, points: Sequence[Point] = ()
    ) -> GPSCarPublisher:
        publisher = GPSCarPublisher(name, self.broker, topic, points)
        self.publishers.append(publisher)
        return publisher

    def _add_subscriber(self, subscriber: Subscriber) -> Subscriber | None:
        if self.broker.subscribe(subscriber):
            self.subscribers.append(subscriber)
            return subscriber
        return None

    def add_video_subscriber(self, name: str, topic: str) -> VideoFollower | None:
        return self._add_subscriber(VideoFollower(name, topic))

    def add_gps_subscriber(self, name: str, topic: str) -> Subscriber | None:
        return self._add_subscriber(self.stage.gps_subscriber_class(name, topic))


def _describe(component: object) -> str:
    if isinstance(component, VideoPublisher):
        return f"{component.name} [video, topic {component.topic_name!r}]"
    if isinstance(component, GPSCarPublisher):
        return (
            f"{component.name} [gps, topic {component.topic_name!r}, "
            f"{len(component.points)} points]"
        )
    if isinstance(component, VideoFollower):
        return f"[{component.button_text}] volume={component.volume}"
    if isinstance(component, GPSFollower):
        x, y, width, height = component.marker
        return (
            f"{component.info} marker=({format_number(x)}, {format_number(y)}, "
            f"{format_number(width)}, {format_number(height)})"
        )
    if isinstance(component, GPSCarSubscriber):
        return f"{component.name}: {component.time_text} {component.x_text} {component.y_text}"
    return repr(component)


class MainWindow:
    """Line-oriented main window reading commands from a text stream."""

    def __init__(
        self,
        workspace: Workspace | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.workspace = workspace if workspace is not None else Workspace()
        self._lines: Iterator[str] = iter(stdin if stdin is not None else sys.stdin)
        self._output = stdout if stdout is not None else sys.stdout
        self._sleep = sleep
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "publisher": self._add_publisher,
            "subscriber": self._add_subscriber,
            "send": self._send,
            "start": self._start,
            "volume": self._volume,
            "show": lambda _args: self._say(self.render()),
            "help": lambda _args: self._say(HELP_TEXT),
        }

    def _say(self, text: str) -> None:
        print(text, file=self._output)

    def _ask(self, prompt: str) -> str:
        print(prompt, end=" ", file=self._output)
        line = next(self._lines, None)
        return "" if line is None else line.rstrip("\r\n")

    def render(self) -> str:
        lines = ["Publishers:"]
        lines += [f"  {n}. {_describe(p)}" for n, p in enumerate(self.workspace.publishers, 1)]
        lines.append("Subscribers:")
        lines += [f"  {n}. {_describe(s)}" for n, s in enumerate(self.workspace.subscribers, 1)]
        return "\n".join(lines)

    def _show_subscribers(self) -> None:
        for number, subscriber in enumerate(self.workspace.subscribers, 1):
            self._say(f"  {number}. {_describe(subscriber)}")

    @staticmethod
    def _kind(args: list[str]) -> str:
        kind = args[0].lower() if args else ""
        if kind not in ("video", "gps"):
            raise UsageError("expected 'video' or 'gps'")
        return kind

    @staticmethod
    def _pick(items: Sequence, args: list[str], kind: type, label: str):
        if not args:
            raise UsageError(f"expected the number of a {label}")
        try:
            number = int(args[0])
        except ValueError:
            raise UsageError(f"not a number: {args[0]}") from None
        if not 1 <= number <= len(items) or not isinstance(items[number - 1], kind):
            raise UsageError(f"no {label} number {number}")
        return items[number - 1]

    def _add_publisher(self, args: list[str]) -> None:
        kind = self._kind(args)
        title = "Video" if kind == "video" else "GPS"
        name = self._ask(f"{title} Publisher Name:")
        topic = self._ask(f"{title} Publisher Topic:")
        if kind == "video":
            self.workspace.add_video_publisher(name, topic)
            return
        path = self._ask("Open GPS file:")
        points: list[Point] = []
        if path:
            try:
                points = load_points(path)
            except (OSError, ValueError) as error:
                self._say(f"could not read {path}: {error}")
        self.workspace.add_gps_publisher(name, topic, points)

    def _add_subscriber(self, args: list[str]) -> None:
        kind = self._kind(args)
        title = "Video" if kind == "video" else "GPS"
        name = self._ask(f"{title} Subscriber Name:")
        topic = self._ask(f"{title} Subscriber Topic:")
        if kind == "video":
            self.workspace.add_video_subscriber(name, topic)
        else:
            self.workspace.add_gps_subscriber(name, topic)

    def _send(self, args: list[str]) -> None:
        publisher = self._pick(self.workspace.publishers, args, VideoPublisher, "video publisher")
        text = args[1] if len(args) > 1 else ""
        if publisher.submit(text):
            self._show_subscribers()

    def _start(self, args: list[str]) -> None:
        publisher = self._pick(self.workspace.publishers, args, GPSCarPublisher, "GPS publisher")
        if publisher.start() is None:
            return
        self._show_subscribers()
        while publisher.active:
            self._sleep(publisher.interval_ms / 1000)
            if publisher.publish_next() is not None:
                self._show_subscribers()

    def _volume(self, args: list[str]) -> None:
        follower = self._pick(self.workspace.subscribers, args, VideoFollower, "video subscriber")
        if len(args) < 2:
            raise UsageError("expected a volume")
        try:
            value = int(args[1])
        except ValueError:
            raise UsageError(f"not a number: {args[1]}") from None
        follower.set_volume(value)

    def run(self) -> int:
        """Read and carry out commands until "quit" or the end of input."""
        self._say(HELP_TEXT)
        for line in self._lines:
            words = line.strip().split(maxsplit=2)
            if not words:
                continue
            command = words[0].lower()
            if command in ("quit", "exit"):
                break
            handler = self._commands.get(command)
            if handler is None:
                self._say(f"unknown command: {command}")
                continue
            try:
                handler(words[1:])
            except UsageError as error:
                self._say(str(error))
        return 0


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="topicboard", description="Publish and follow topics on a shared broker."
    )
    parser.add_argument(
        "--stage",
        type=int,
        choices=[stage.value for stage in Stage],
        default=Stage.STAGE1.value,
        help="1: GPS subscribers draw a marker; 3: they show labels",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    return MainWindow(Workspace(Stage(args.stage))).run()