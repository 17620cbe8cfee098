# codekata

A collection of small, self-contained algorithms and design exercises,
written as plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                 | Contents                                                                 |
|------------------------|--------------------------------------------------------------------------|
| `codekata.heap`        | `MinHeap` and `MaxHeap` with `push`, `peek`, `pop` and `len()`           |
| `codekata.linkedlist`  | `ListNode`, `from_iterable`, `to_list`, `delete_duplicates`, `rotate_right`, `merge_k_lists` |
| `codekata.regex`       | `is_match` for patterns with `.` and `*`                                 |
| `codekata.digits`      | `plus_one` for numbers stored as lists of digits                         |
| `codekata.compression` | `compressed_string`, run-length encoding with runs capped at nine        |
| `codekata.trie`        | `Trie`, `find_substrings` and a command-line entry point                 |
| `codekata.scoring`     | `max_k_elements`                                                         |
| `codekata.lru`         | `LRUCache` with a fixed capacity                                         |
| `codekata.pipeline`    | `Pipeline`, a chain of typed processing steps, and `PipelineTypeError`   |
| `codekata.builder`     | `ServerConfig`, the `with_*` options and `PacketServer`                  |
| `codekata.parking`     | `Vehicle`, `VehicleType`, `Spot`, `ParkingLevel`, `ParkingLot`, `UnsupportedVehicleError` |
| `codekata.pubsub`      | Length-prefixed framing (`encode_frame`, `read_frame`, `FrameError`) and `Topic` |

## Examples

Heaps (`peek` and `pop` raise `IndexError` on an empty heap):

```python
from codekata.heap import MinHeap

heap = MinHeap()
for value in (3, 2, 1):
    heap.push(value)
heap.peek()   # 1
heap.pop()    # 1
len(heap)     # 2
```

Linked lists:

```python
from codekata.linkedlist import from_iterable, merge_k_lists, rotate_right, to_list

merged = merge_k_lists([from_iterable([1, 4, 5]), from_iterable([1, 3, 4]), from_iterable([2, 6])])
to_list(merged)                                           # [1, 1, 2, 3, 4, 4, 5, 6]
to_list(rotate_right(from_iterable([1, 2, 3, 4, 5]), 2))  # [4, 5, 1, 2, 3]
```

Small puzzles:

```python
from codekata.regex import is_match
from codekata.digits import plus_one
from codekata.compression import compressed_string
from codekata.scoring import max_k_elements

is_match("aa", "a*")                       # True
plus_one([9])                              # [1, 0]
compressed_string("aaaaaaaaaaaaaabb")      # "9a5a2b"
max_k_elements([1, 10, 3, 3, 3], 3)        # 17
```

LRU cache (`get` returns a default for a missing key, `cache[key]` raises
`KeyError`):

```python
from codekata.lru import LRUCache

cache = LRUCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.put("c", 3)      # evicts "a"
"a" in cache           # False
cache.get("b")         # 2
cache.keys()           # ["b", "c"], most recently used first
```

Pipelines pass each step's output to the next; a step receiving a value
that is not exactly its declared input type raises `PipelineTypeError`:

```python
from codekata.pipeline import Pipeline

pipeline = Pipeline()
pipeline.add(len, str)
pipeline.add(lambda n: f"Length = {n}", int)
pipeline.process("Hello, World!")   # "Length = 13"
```

Parking lot:

```python
from codekata.parking import ParkingLevel, ParkingLot, Vehicle

lot = ParkingLot([ParkingLevel.with_spots(0, 1, 0, 0)])
car = Vehicle.car("TEST-001")
lot.join(car)                       # True
lot.join(Vehicle.car("TEST-002"))   # False, no free car spot
lot.leave(car)                      # True
```

Framing and topics:

```python
import io
from codekata.pubsub import Topic, encode_frame, read_frame

frame = encode_frame(b"hello")      # b"\x00\x00\x00\x05hello"
read_frame(io.BytesIO(frame))       # b"hello"

topic = Topic("default")
sink = io.BytesIO()
topic.add_subscriber(sink)
topic.broadcast(b"hello")           # 1; sink now holds b"hello\n"
```

## Command-line tools

Print every word from a list that occurs as a substring of a text, ordered
by start position and then by length:

```
codekata-find-substrings <text> <word> [<word> ...]
```

Start a packet server that logs every datagram it receives (UDP on
127.0.0.1, port 3000):

```
codekata-packet-server
```

## What it does not do

- `codekata.pubsub` offers only the message framing and the in-memory
  `Topic` that broadcasts to writable subscribers. There is no pub/sub
  network server, no client and no message schema.
- `PacketServer` only handles datagram protocols (`udp`, `udp4`, `udp6`);
  `serve` raises `ValueError` for anything else, including the default
  `tcp` of `ServerConfig`. The configured `origins` are stored but not used.