# portkit

Small, dependency-free helpers for code that deals with low-level data and
system services. It is a library only: it installs no command-line tool.

## Modules

### `portkit.endian`

- `swap16`, `swap32`, `swap64`: reverse the byte order of a 16-, 32- or
  64-bit value (the input is masked to that width first).
- `reverse4`, `reverse8`, `reverse16`, `reverse32`, `reverse64`: reverse the
  bit order of a value of that width.
- `load_uint(data, size, byteorder, offset=0)`: read an unsigned integer of
  2, 3, 4, 6 or 8 bytes from `data`, with `byteorder` `"little"` or `"big"`.
  Raises `ValueError` for other sizes, a bad byte order, a negative offset or
  too few bytes.
- `store_uint(value, size, byteorder)`: encode the low `size` bytes of `value`
  (same sizes as above) and return them as `bytes`.
- `host_to_big`, `big_to_host`, `host_to_little`, `little_to_host`: convert a
  16-, 32- or 64-bit value (`bits` argument) between host byte order and
  big-endian (network) or little-endian order.

### `portkit.date_time`

- `DateTime`: a dataclass with `year`, `month`, `day`, `day_of_week`
  (1 = Monday … 7 = Sunday, 0 = unknown), `hours`, `minutes`, `seconds`,
  `milliseconds`.
- `unix_time_to_date(t)` / `date_to_unix_time(date)`: convert between Unix
  timestamps (seconds, UTC) and `DateTime`. Negative timestamps map to the
  epoch.
- `day_of_week(year, month, day)`: day of week by Zeller's congruence.
- `compare_date_time(date1, date2)`: returns -1, 0 or 1; the day of week is
  ignored.
- `format_system_time(ms)`: a duration in milliseconds as text, e.g.
  `"1h 02min 03s 004ms"`, `"5s 250ms"`, `"42ms"`.
- `format_date(date)`: e.g. `"Friday, January 5, 2024 03:04:05"`; the
  weekday is left out when `day_of_week` is 0.
- `current_unix_time()`, `current_date()`: the current time.

### `portkit.debug`

- `TraceLevel`: `OFF`, `FATAL`, `ERROR`, `WARNING`, `INFO`, `DEBUG`, `VERBOSE`.
- `format_array(prepend, data)`: hex dump, 16 bytes per line, each line
  starting with `prepend` and ending in `"\r\n"`.
- `display_array(stream, prepend, data)`: write that dump to `stream`
  (standard error when `stream` is `None`).

### `portkit.filesystem`

Operations on the host file system that raise `FileSystemError` (a subclass
of `OSError`) on failure:

- `file_exists`, `dir_exists`: `True`/`False`, never raise.
- `get_file_stat(path)` → `FileStat` (`attributes`, `size`, `modified`);
  `get_file_size(path)`.
- `rename_file`, `delete_file`, `create_dir`, `remove_dir`.
- `open_file(path, mode)`: binary file opened `"wb"` when `mode` contains
  `FileMode.WRITE`, otherwise `"rb"`.
- `seek_file(file, offset, origin)` with `SeekOrigin.SET`, `CUR` or `END`;
  `write_file(file, data)`; `read_file(file, size)`, which raises `EOFError`
  when nothing is left to read.
- `open_dir(path)` → `Directory`, whose `read()` returns `DirEntry` objects
  (starting with `.` and `..`) and `None` at the end. A `Directory` can also
  be iterated and used as a context manager; `close()` ends it.

### `portkit.rtos`

Task-style primitives on top of Python threads. Timeouts are in
milliseconds; `None` (`INFINITE_DELAY`) waits forever.

- `create_task(name, code, arg=None, params=None)`: run `code(arg)` in a new
  daemon thread. `TaskParameters` (`stack_size`, `priority`) is checked but
  does not affect scheduling.
- `delay_task(ms)`, `switch_task()`, `system_time()` (milliseconds since
  start-up, wrapping at 32 bits).
- `scheduler_lock()`: a reentrant, process-wide critical section used as a
  context manager.
- `Event`: auto-reset event with `set`, `reset`, `wait(timeout)`,
  `set_from_isr` (always returns `False`).
- `Semaphore(count)`: `wait(timeout)` and `release()`; the count starts at,
  and never exceeds, `count`.
- `Mutex`: non-recursive; `acquire`, `release`, `locked`, and usable with
  `with`.

## Install

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from portkit.endian import swap32, load_uint, store_uint

swap32(0x12345678)                       # 0x78563412
load_uint(b"\x01\x02\x03", 3, "big", 0)  # 0x010203
store_uint(0xABCD, 2, "little")          # b"\xcd\xab"
```

```python
from portkit.date_time import unix_time_to_date, format_date

date = unix_time_to_date(0)
print(format_date(date))  # Thursday, January 1, 1970 00:00:00
```

```python
import sys
from portkit.debug import display_array

display_array(sys.stderr, "  ", b"\x00\x01\x02")
```

```python
from portkit.filesystem import open_dir

with open_dir(".") as directory:
    for entry in directory:
        print(entry.name, entry.size)
```

```python
from portkit.rtos import Event

event = Event()
event.set()
event.wait(100)  # True
```

## What it does not do

- The file system layer works only on the host operating system's files; it
  has no drivers for flash or embedded file systems.
- The task primitives are ordinary Python threads: there are no real
  priorities, stacks or interrupt contexts.
- Dates are plain UTC records; there is no time-zone handling.