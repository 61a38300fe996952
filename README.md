# icommon

A small library of general-purpose building blocks for reading binary data,
logging, and keeping fixed-size collections.

## What is in it

- **Binary streams** (`icommon.datastream`): `DataStream` is the abstract base;
  it reads and writes 8/16/32/64-bit unsigned integers and 32-bit floats
  (little-endian, or big-endian when `swap_bytes` is set), NUL-terminated
  strings, peeks without moving, and restores its offset with the
  `saved_position()` context manager. `DataSubStream` is a window onto part of
  another stream; `copy_streams` and `copy_sub_streams` copy data in chunks.
- **Concrete streams**: `BufferStream` (`icommon.bufferstream`) over a fixed-size
  `bytearray`; `FileStream` (`icommon.filestream`) over a file opened with
  `open()` or created with `create()`, usable as a context manager, along with
  `make_all_dirs` and `extract_file_name`; `SegmentStream`
  (`icommon.segmentstream`), a read-only stream stitched together from segments
  of a parent stream.
- **Text parsing** (`icommon.textparser`): `TextParser` reads lines and
  whitespace-separated tokens from any stream.
- **Debug logging** (`icommon.debuglog`): `DebugLog` writes indented lines with
  a `[source]` prefix and logical blocks; `LogLevel` decides what is written to
  the file and what is printed to standard output. The module-level
  `fatal_error`, `error`, `warning`, `message`, `verbose_message` and
  `debug_message` log through `default_log`.
- **Errors** (`icommon.errors`): `check()` and `halt()` log a fatal error and
  raise `HaltError`.
- **Containers**: `Fifo` (`icommon.fifo`), a fixed-capacity byte ring buffer;
  `RangeMap` (`icommon.rangemap`), non-overlapping integer ranges with data;
  `Database` (`icommon.database`), objects under nonzero 60-bit keys with
  automatic key allocation; `MemPool`, `BasicMemPool` and
  `ThreadSafeBasicMemPool` (`icommon.mempool`), fixed-capacity object pools;
  `Link` and `LinkedList` (`icommon.linkedlist`), an intrusive doubly linked
  list.
- **Values** (`icommon.types`): `Bitfield`, `Bitstring`, `Time`, `Vector2`,
  `Vector3`, plus byte-swap, sign-extension, char-code, version-code and colour
  helpers.
- **Threads and timing**: `Thread` (`icommon.thread`) runs one procedure in the
  background with cooperative stopping; `Timer` (`icommon.timer`) measures
  elapsed seconds, cross-checked against a second clock; `Singleton`
  (`icommon.singleton`) allows one live instance per subclass;
  `DirectoryIterator` (`icommon.directory`) walks directory entries matching a
  wildcard.

## Example

```python
from icommon.bufferstream import BufferStream
from icommon.textparser import TextParser

stream = BufferStream(bytearray(16))
stream.write32(0x12345678)
stream.write_string("hi")
stream.rewind()
assert stream.read32() == 0x12345678
assert stream.read_string(16) == "hi"

parser = TextParser(BufferStream(bytearray(b"alpha beta\ngamma")))
assert parser.read_token(32) == "alpha"
```

```python
from icommon.rangemap import RangeMap

ranges = RangeMap(32)
ranges.add(0x1000, 0x100, "text")
entry = ranges.lookup(0x1080)
print(entry.start, entry.length, entry.data)
```

Errors are raised rather than returned: a `Fifo` that is full or short of data
raises `BufferError`, a full pool raises `MemoryError`, an overlapping
`RangeMap.add` raises `ValueError`, and a failed `check()` raises `HaltError`.

## What it does not do

- It has no locking primitives of its own (critical sections, events,
  mutexes, read-write locks, atomic counters); use the `threading` module.
  Only `ThreadSafeBasicMemPool` serialises its own operations.
- It has no command-line tool; it is a library only.

## Running the tests

```
pip install icommon[test]
pytest
```