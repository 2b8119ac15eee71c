# sckit

sckit is a set of small building blocks for Python 3.10 and later. It has no dependencies outside the standard library.

| Module              | Contents                                                                  |
|---------------------|---------------------------------------------------------------------------|
| `sckit.buffer`      | `Buffer`, a growable byte buffer with separate read and write positions and little-endian encoding |
| `sckit.buflen`      | `str_len` and `blob_len`, which give the encoded size of a string or blob in a `Buffer` |
| `sckit.crc32`       | `crc32c`, a CRC-32C (Castagnoli) checksum that can be computed in parts   |
| `sckit.heap`        | `Heap`, a min-heap of `HeapItem(key, data)` entries                       |
| `sckit.ini`         | `parse_string`, `parse_file` and `parse_lines`, a callback-driven INI parser |
| `sckit.linkedlist`  | `LinkedList` and `ListNode`, a doubly linked list of explicit nodes       |
| `sckit.log`         | `Logger`, which writes to stdout, to a rotating file and to a callback    |
| `sckit.cond`        | `Cond`, which passes one value from one thread to a waiting thread        |
| `sckit.array`       | `Array`, a dynamic array with ordered and unordered deletion and an optional size cap |

sckit is a library only. It has no command-line tool.

## Installation

```
pip install .
```

## Examples

### Buffer

```python
from sckit.buffer import Buffer

buf = Buffer(1024)
buf.put_32(16)
buf.put_str("test")
buf.put_fmt("value is %d", 3)

assert buf.get_32() == 16
assert buf.get_str() == "test"
assert buf.get_str() == "value is 3"
```

A string is stored as an 8-byte length, then its UTF-8 bytes, then a zero byte. `put_str(None)` stores only the length, and `get_str()` then returns `None`.

The buffer raises two errors, both subclasses of `BufError`:

- `BufCorruptError` comes from reading past the written data, or from writing past the capacity with `set_*`.
- `BufFullError` comes from a `put_*` call when the buffer cannot grow. This happens when the buffer is fixed or when growing would exceed `limit`.

`Buffer.wrap(data, fixed=True, filled=True)` builds a buffer over existing bytes.

`sckit.buflen.str_len` and `blob_len` tell you how many bytes `put_str` and `put_blob` will write.

### CRC-32C

```python
from sckit.crc32 import crc32c

whole = crc32c(b"hello world", 0)
part = crc32c(b"hello ", 0)
assert crc32c(b"world", part) == whole
```

### Heap

```python
from sckit.heap import Heap

heap = Heap()
for priority, name in [(1, "first"), (4, "fourth"), (2, "second")]:
    heap.add(priority, name)

while (item := heap.pop()) is not None:
    print(item.key, item.data)
```

`peek()` and `pop()` return `None` when the heap is empty. To get a max-heap, negate the keys when you add them.

### INI parsing

```python
from sckit.ini import parse_string

def on_item(line, section, key, value):
    print(line, section, key, value)

parse_string("[Network]\nhostname = example.com\nport = 443\n", on_item)
```

A line that starts with whitespace right after a key line continues that key. The callback receives the same key again with the new value.

The parser stops at the first problem and raises an error that carries the line number in its `line` attribute:

- A malformed line raises `IniSyntaxError`.
- An exception raised by the callback is wrapped in `IniCallbackError`.

`parse_file` raises `OSError` if the file cannot be read.

### Linked list

```python
from sckit.linkedlist import LinkedList, ListNode

items = LinkedList()
a, b = ListNode("a"), ListNode("b")
items.add_tail(a)
items.add_head(b)
print([node.value for node in items])  # ['b', 'a']
```

If you add a node that is already linked, it is first removed from where it was. You can remove nodes while iterating, in either direction.

### Logger

```python
from sckit.log import Logger, set_thread_name

set_thread_name("main")
with Logger() as log:
    log.info("Hello %s\n", "world")
    log.set_file("log.0.txt", "log-latest.txt")
    log.set_level("DEBUG")
    log.debug("written to stdout and to log-latest.txt\n")
```

Each line starts with a header of the form `[date time][LEVEL][thread name]`.

Where lines go:

- By default, lines go to stdout. ERROR lines go to stderr.
- `set_stdout(False)` turns console output off.
- `set_callback(fn)` also calls `fn(level, message)` for each logged line.

When the current log file grows past `FILE_SIZE_LIMIT`, which is 2 MiB, it is renamed to the previous-file name and a new current file is started.

`set_level` raises `ValueError` for an unknown level name. Logging after `close()` raises `RuntimeError`.

### Condition

```python
import threading
from sckit.cond import Cond

cond = Cond()
threading.Thread(target=cond.signal, args=("done",)).start()
assert cond.wait() == "done"
```

### Array

```python
from sckit.array import Array

arr = Array([3, 1, 2])
arr.add(0)
arr.sort()
print(list(arr))  # [0, 1, 2, 3]
```

If you give `Array(max_size=n)`, `add` raises `MemoryError` once the array holds `n` elements.

## Running the tests

```
pip install .[test]
pytest
```