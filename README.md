# topicboard

A small publish/subscribe toolkit built around named topics, with a
console front end for trying it out.

A `Broker` keeps one `Topic` per name. A `Publisher` sends text messages to
its topic. Every `Subscriber` registered on that topic receives each message
through its `update` method, in the order the subscribers were added.

The package has three modules:

- `topicboard.core`: `Component`, `Subscriber`, `Publisher`, `Topic` and `Broker`.
- `topicboard.video`: `VideoPublisher` and `VideoFollower`.
- `topicboard.gps`: `GPSCarPublisher`, `GPSCarSubscriber`, `GPSFollower`, `GPSReading`
  and the helper functions `format_number`, `read_points`, `load_points` and
  `parse_reading`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from topicboard.core import Broker, Publisher, Subscriber


class Printer(Subscriber):
    def update(self, message):
        print(f"{self.name} got: {message}")


broker = Broker()
broker.subscribe(Printer("printer", "news"))

publisher = Publisher("desk", broker, "news")
publisher.publish("hello")   # prints "printer got: hello"
```

`Broker.create_topic(name)` returns the topic with that name and creates it
first if it does not exist. Creating a publisher and subscribing both do this,
so a publisher and a subscriber are connected when they use the same topic
name. `Broker.subscribe` returns `False` only when it is given `None`.

### Video

`VideoPublisher.submit(text)` publishes the text unless it is empty, and
returns whether it sent anything. `VideoFollower` stores the latest message in
`last_url` and `button_text`. Its `volume` starts at 50.
`set_volume(value)` clamps the value to the range 0–100. `audio_volume`
returns the volume as a fraction from 0.0 to 1.0. `can_play()` returns whether
an address has been received.

### GPS

A GPS track file is plain text that holds three numbers per position: time,
x and y. The numbers can be split across lines in any way. An incomplete
triple at the end of the file is ignored, and a token that is not a number
raises `ValueError`. `load_points(path)` reads a file, and
`read_points(lines)` reads lines you already have. Both return only the
`(x, y)` points.

`GPSCarPublisher` takes the points and replays them. `start()` rewinds and
publishes the first point. Each call to `publish_next()` publishes the next
point and sets `active` to true. After the last point, the next call sets
`active` to false and rewinds. Messages have the form `"<n> <x> <y>"`, where
`n` is the 1-based position in the list. The publisher does not schedule
itself: while `active` is true, the caller calls `publish_next()` every
`interval_ms` (1000) milliseconds.

`parse_reading(message)` returns a `GPSReading(t, x, y)` built from the first
three numbers of a message. It returns `None` when the message does not start
with three numbers, and both GPS subscribers ignore such messages.
`GPSCarSubscriber` keeps the texts `time_text`, `x_text` and `y_text`, for
example `"t=1"`. `GPSFollower` keeps an `info` line and a `marker` rectangle
`(x, y, 10, 10)` on a 400×400 `scene_size`.

## The console application

The `topicboard` command reads commands from standard input:

```
topicboard
topicboard --stage 3
```

`--stage 1` is the default. With it, GPS subscribers are `GPSFollower`s. With
`--stage 3` they are `GPSCarSubscriber`s.

| Command | Effect |
|---|---|
| `publisher video\|gps` | add a publisher; prompts for its name and topic, and for a GPS publisher also for a track file |
| `subscriber video\|gps` | add a subscriber; prompts for its name and topic |
| `send N TEXT` | publish TEXT from video publisher N |
| `start N` | replay the points of GPS publisher N, one per second |
| `volume N VALUE` | set the volume (0–100) of video subscriber N |
| `show` | list the publishers and subscribers |
| `help` | show the command list |
| `quit` / `exit` | leave |

After `send`, and after each point during `start`, the command prints the
state of every subscriber. `start` blocks until the replay ends.

## What it does not do

There is no graphical window. Videos are never played: `VideoFollower` only
records the address and a volume setting. `GPSFollower` stores the marker
position but draws nothing. Messages are delivered in-process only. Nothing is
sent over a network or saved between runs.