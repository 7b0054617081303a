# dmrlink

Building blocks for software that relays DMR (Digital Mobile Radio) traffic
between a hotspot or repeater and one or more networks.

## What is included

- `dmrlink.defines`: frame sizes, sync patterns, CRC masks, data types
  (`DT_*`), data packet formats (`DPF_*`), `VERSION` and the `FLCO`
  enumeration used across DMR frames.
- `dmrlink.sync`: `add_dmr_data_sync(data, duplex)` and
  `add_dmr_audio_sync(data, duplex)` write the base-station (duplex) or
  mobile-station sync pattern into bytes 13 to 19 of a frame held in a
  `bytearray`, in place, and return it. A frame shorter than 20 bytes
  raises `ValueError`.
- `dmrlink.utils`: bit and byte conversion (`byte_to_bits_be`,
  `byte_to_bits_le`, `bits_to_byte_be`, `bits_to_byte_le`), hex and ASCII
  dumps (`hex_dump_lines` yields the lines; `dump` and `dump_bits` send them
  to the `logging` module, at DEBUG level unless told otherwise) and
  `create_timestamp()` for UTC timestamps with millisecond precision.
- `dmrlink.timer`: `Timer`, a tick-driven timeout counter.
- `dmrlink.stopwatch`: `StopWatch`, which measures elapsed milliseconds on
  the monotonic clock; `time()` gives wall-clock milliseconds.
- `dmrlink.sha256`: `SHA256`, an incremental SHA-256 hasher, and
  `sha256_digest(data)`.
- `dmrlink.ringbuffer`: `RingBuffer`, a fixed-size FIFO holding at most
  `length - 1` items. Adding too much clears the buffer and raises
  `BufferOverflowError`; asking for more than it holds raises
  `BufferUnderflowError`.
- `dmrlink.thread`: `Worker`, an abstract base class whose `entry()` runs on
  a daemon thread started by `run()` and joined by `wait()`, and `sleep(ms)`.
- `dmrlink.udpsocket`: `UDPSocket` for non-blocking datagram I/O, usable as
  a context manager, with `SocketAddress`, `lookup`, `match`, `is_none` and
  `IPMatchType` for working with addresses.

## Installation

```
pip install .
```

## Examples

Adding sync to a frame:

```python
from dmrlink.sync import add_dmr_audio_sync

frame = bytearray(33)
add_dmr_audio_sync(frame, duplex=True)
```

Driving a timer from a main loop:

```python
from dmrlink.timer import Timer

timer = Timer(1000, 5)      # 1000 ticks per second, 5 second timeout
timer.start()
timer.clock(6000)
assert timer.has_expired()
```

Hashing:

```python
from dmrlink.sha256 import SHA256, sha256_digest

hasher = SHA256()
hasher.process_bytes(b"hello ")
hasher.process_bytes(b"world")
assert hasher.finish() == sha256_digest(b"hello world")
```

Buffering:

```python
from dmrlink.ringbuffer import RingBuffer

ring = RingBuffer(10, "modem")
ring.add_data(b"\x01\x02\x03")
assert ring.get_data(2) == [1, 2]
```

Sending and receiving datagrams:

```python
from dmrlink.udpsocket import UDPSocket, lookup

with UDPSocket("127.0.0.1", 0) as sock:
    peer = lookup("127.0.0.1", 62031)
    sock.write(b"\x00" * 55, peer)
    received = sock.read(500)   # None when nothing is waiting
```

A socket given a local port above zero is bound to it with `SO_REUSEADDR`;
with port 0 it is left unbound until the first send. Failures in lookup,
binding, polling, receiving and sending are logged and raised as `OSError`
(lookup failures as `socket.gaierror`).

## What this package does not do

It is a library of parts, not a gateway. There is no command to run, no
configuration file reader, no network or modem protocol handling, no
talkgroup or ID rewriting rules and no voice announcements. Those are left
to the program that uses these parts.

## Running the tests

```
pip install .[test]
pytest
```