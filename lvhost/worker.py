"""A worker for running a plugin's non-realtime tasks, in a thread or inline."""

from __future__ import annotations

import enum
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from .log import LogLevel, log_message

#: Capacity in bytes of each request and response ring.
MAX_PACKET_SIZE = 4096

_SIZE_HEADER = 4


class WorkerError(Exception):
    """Raised when work cannot be scheduled or a response cannot be queued."""


@dataclass(frozen=True)
class WorkerInterface:
    """The worker entry points a plugin provides.

    `work(handle, respond, data)` does the work, calling `respond(bytes)` for
    each response; `work_response(handle, data)` receives a response in the
    audio thread; `end_run(handle)`, if given, is called at the end of a cycle.
    """

    work: Callable[[Any, Callable[[bytes], None], bytes], Any]
    work_response: Callable[[Any, bytes], Any]
    end_run: Callable[[Any], Any] | None = None


class _State(enum.Enum):
    SINGLE_THREADED = enum.auto()
    STOPPED = enum.auto()
    LAUNCHED = enum.auto()
    MUST_EXIT = enum.auto()


class _PacketRing:
    """A bounded FIFO of size-prefixed packets, safe between two threads."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._packets: deque[bytes] = deque()
        self._used = 0
        self._lock = threading.Lock()

    def write(self, data: bytes) -> None:
        needed = _SIZE_HEADER + len(data)
        with self._lock:
            if self._used + needed > self._capacity - 1:
                raise WorkerError(
                    f"no space for a {len(data)} byte packet in the worker ring"
                )
            self._packets.append(data)
            self._used += needed

    def read(self) -> bytes | None:
        with self._lock:
            if not self._packets:
                return None
            data = self._packets.popleft()
            self._used -= _SIZE_HEADER + len(data)
            return data


class Worker:
    """Runs plugin work either in its own thread or immediately when scheduled."""

    def __init__(self, lock: Any = None, threaded: bool = False) -> None:
        self._lock = lock if lock is not None else threading.Lock()
        self._requests = _PacketRing(MAX_PACKET_SIZE)
        self._responses = _PacketRing(MAX_PACKET_SIZE)
        self._sem = threading.Semaphore(0)
        self._state = _State.STOPPED if threaded else _State.SINGLE_THREADED
        self._thread: threading.Thread | None = None
        self._iface: WorkerInterface | None = None
        self._handle: Any = None

    @property
    def running(self) -> bool:
        """Whether the worker thread is running."""
        return self._state is _State.LAUNCHED

    def launch(self) -> None:
        """Start the worker thread if this is a stopped threaded worker."""
        if self._state is not _State.STOPPED:
            return
        self._sem = threading.Semaphore(0)
        self._thread = threading.Thread(
            target=self._thread_main, name="lv2-worker", daemon=True
        )
        self._state = _State.LAUNCHED
        self._thread.start()

    def exit(self) -> None:
        """Stop the worker thread if it is running, waiting for it to finish."""
        if self._state is _State.LAUNCHED and self._thread is not None:
            self._state = _State.MUST_EXIT
            self._sem.release()
            self._thread.join()
            self._thread = None

    def attach(self, iface: WorkerInterface, handle: Any) -> None:
        """Attach the worker to a plugin instance's worker interface."""
        self._iface = iface
        self._handle = handle

    def schedule(self, data: bytes) -> Any:
        """Schedule work: queue it for the thread, or do it now if unthreaded."""
        if not data or self._state is _State.STOPPED:
            raise WorkerError("cannot schedule work on this worker")

        if self._state is _State.LAUNCHED:
            self._requests.write(bytes(data))
            self._sem.release()
            return None

        if self._state is _State.SINGLE_THREADED:
            if self._iface is None:
                raise WorkerError("worker is not attached to a plugin")
            with self._lock:
                return self._iface.work(self._handle, self.respond, bytes(data))

        return None

    def respond(self, data: bytes) -> None:
        """Queue a response for delivery to the plugin in the audio thread."""
        self._responses.write(bytes(data))

    def emit_responses(self, handle: Any) -> None:
        """Deliver every pending response to the plugin."""
        while (packet := self._responses.read()) is not None:
            if self._iface is not None:
                self._iface.work_response(handle, packet)

    def end_run(self) -> None:
        """Tell the plugin that the run cycle has finished."""
        if self._iface is not None and self._iface.end_run is not None:
            self._iface.end_run(self._handle)

    def close(self) -> None:
        """Stop the worker thread if necessary."""
        self.exit()

    def __enter__(self) -> Worker:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def _thread_main(self) -> None:
        while True:
            self._sem.acquire()
            if self._state is _State.MUST_EXIT:
                break

            data = self._requests.read()
            if data is None or self._iface is None:
                continue

            with self._lock:
                try:
                    self._iface.work(self._handle, self.respond, data)
                except Exception as exc:  # keep the worker alive for later requests
                    log_message(LogLevel.ERR, "Worker failed (%s)\n", exc)

        self._state = _State.STOPPED