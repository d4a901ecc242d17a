"""Task, event, semaphore and mutex primitives built on host threads."""

from __future__ import annotations

import threading
import time as _time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

# Timeout value meaning "wait forever".
INFINITE_DELAY: Optional[int] = None

TASK_PRIORITY_NORMAL = 24
TASK_PRIORITY_HIGH = 32

_SYSTIME_MASK = 0xFFFFFFFF
_START = _time.monotonic()
_scheduler_lock = threading.RLock()

TaskCode = Callable[[Any], None]


@dataclass(frozen=True)
class TaskParameters:
    """Stack size (in 32-bit words) and priority requested for a task."""

    stack_size: int = 256
    priority: int = TASK_PRIORITY_NORMAL


DEFAULT_TASK_PARAMS = TaskParameters()


def _seconds(timeout: Optional[int]) -> Optional[float]:
    if timeout is None:
        return None
    if timeout < 0:
        raise ValueError("timeout must not be negative")
    return timeout / 1000.0


def create_task(
    name: str,
    code: TaskCode,
    arg: Any = None,
    params: TaskParameters | None = None,
) -> threading.Thread:
    """Start ``code(arg)`` in a new daemon thread and return the thread.

    Host threads have no priorities, so ``params`` is accepted for
    compatibility but does not change scheduling.
    """
    if not callable(code):
        raise TypeError("task code must be callable")
    if params is None:
        params = DEFAULT_TASK_PARAMS
    if params.stack_size <= 0:
        raise ValueError("stack size must be positive")
    thread = threading.Thread(target=code, args=(arg,), name=name, daemon=True)
    thread.start()
    return thread


def delay_task(delay: int) -> None:
    """Block the calling task for ``delay`` milliseconds."""
    if delay < 0:
        raise ValueError("delay must not be negative")
    _time.sleep(delay / 1000.0)


def switch_task() -> None:
    """Yield control to another ready task."""
    _time.sleep(0)


@contextmanager
def scheduler_lock() -> Iterator[None]:
    """Run a critical section exclusive of every other ``scheduler_lock`` holder.

    The lock is reentrant, so critical sections may nest.
    """
    with _scheduler_lock:
        yield


def system_time() -> int:
    """Return milliseconds elapsed since start-up, wrapping at 32 bits."""
    return int((_time.monotonic() - _START) * 1000) & _SYSTIME_MASK


class Event:
    """Auto-reset event: a successful wait returns it to the nonsignaled state."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._signaled = False

    def set(self) -> None:
        """Put the event in the signaled state."""
        with self._cond:
            self._signaled = True
            self._cond.notify()

    def reset(self) -> None:
        """Put the event in the nonsignaled state."""
        with self._cond:
            self._signaled = False

    def wait(self, timeout: Optional[int] = INFINITE_DELAY) -> bool:
        """Wait up to ``timeout`` ms for the event; return False on timeout."""
        seconds = _seconds(timeout)
        with self._cond:
            if not self._cond.wait_for(lambda: self._signaled, seconds):
                return False
            self._signaled = False
            return True

    def set_from_isr(self) -> bool:
        """Signal the event from interrupt context; the result is always False."""
        self.set()
        return False


class Semaphore:
    """Counting semaphore whose count starts at, and never exceeds, ``count``."""

    def __init__(self, count: int) -> None:
        if count <= 0:
            raise ValueError("semaphore count must be greater than zero")
        self._cond = threading.Condition(threading.Lock())
        self._max = count
        self._count = count

    @property
    def count(self) -> int:
        """Number of tokens currently available."""
        with self._cond:
            return self._count

    def wait(self, timeout: Optional[int] = INFINITE_DELAY) -> bool:
        """Take one token, waiting up to ``timeout`` ms; return False on timeout."""
        seconds = _seconds(timeout)
        with self._cond:
            if not self._cond.wait_for(lambda: self._count > 0, seconds):
                return False
            self._count -= 1
            return True

    def release(self) -> None:
        """Return one token; releases beyond the maximum count are ignored."""
        with self._cond:
            if self._count < self._max:
                self._count += 1
                self._cond.notify()


class Mutex:
    """Non-recursive mutex owned by the thread that acquired it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._owner: Optional[int] = None

    def acquire(self) -> None:
        """Take ownership, blocking until the mutex is free."""
        me = threading.get_ident()
        if self._owner == me:
            raise RuntimeError("mutex is already held by this thread")
        self._lock.acquire()
        self._owner = me

    def release(self) -> None:
        """Give up ownership."""
        if self._owner != threading.get_ident():
            raise RuntimeError("mutex is not held by this thread")
        self._owner = None
        self._lock.release()

    @property
    def locked(self) -> bool:
        """True while some thread holds the mutex."""
        return self._lock.locked()

    def __enter__(self) -> Mutex:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()