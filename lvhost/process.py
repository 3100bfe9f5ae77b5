"""State and code used in the realtime process thread."""

from __future__ import annotations

import contextlib
import queue
import threading
from dataclasses import dataclass, field
from typing import Any

from .evbuf import BufferFullError, EventBuffer
from .log import LogLevel, log_message
from .model import PortFlow, PortType, RunState
from .worker import Worker

# Port index and atom header that precede the body of a transferred event.
_EVENT_TRANSFER_HEADER = 12


class ProcessError(Exception):
    """Raised when a message from the UI cannot be applied."""


@dataclass(frozen=True)
class ControlChange:
    """A new value for a control port."""

    port_index: int
    value: float


@dataclass(frozen=True)
class EventTransfer:
    """An atom event to deliver to an event port."""

    port_index: int
    type: int
    data: bytes


@dataclass(frozen=True)
class StateRequest:
    """A request for the plugin to report its state."""


@dataclass(frozen=True)
class RunStateChange:
    """A change of the process run state."""

    state: RunState


@dataclass
class ProcessPort:
    """Port state used in the process thread."""

    type: PortType = PortType.UNKNOWN
    flow: PortFlow = PortFlow.UNKNOWN
    sys_port: Any = None
    symbol: str | None = None
    label: str | None = None
    evbuf: EventBuffer | None = None
    buf_size: int = 0
    reports_latency: bool = False
    is_primary: bool = False
    supports_midi: bool = False


@dataclass
class Process:
    """Everything the process thread touches, kept apart from the UI side."""

    instance: Any = None
    ports: list[ProcessPort] = field(default_factory=list)
    controls_buf: list[float] = field(default_factory=list)
    worker: Worker | None = None
    state_worker: Worker | None = None
    get_msg_type: int = 0
    get_msg_body: bytes = b""
    process_msg_size: int = 1024
    run_state: RunState = RunState.PAUSED
    control_in: int | None = None
    pending_frames: int = 0
    update_frames: int = 0
    plugin_latency: int = 0
    position: int = 0
    bpm: float = 120.0
    rolling: bool = False
    has_ui: bool = False
    ui_to_plugin: queue.SimpleQueue = field(default_factory=queue.SimpleQueue)
    plugin_to_ui: queue.SimpleQueue = field(default_factory=queue.SimpleQueue)
    paused: threading.Semaphore = field(
        default_factory=lambda: threading.Semaphore(0)
    )

    def __post_init__(self) -> None:
        missing = len(self.ports) - len(self.controls_buf)
        if missing > 0:
            self.controls_buf.extend([0.0] * missing)

    @property
    def num_ports(self) -> int:
        """Total number of ports on the plugin."""
        return len(self.ports)

    def send(self, message: Any) -> None:
        """Queue a message from the UI for the process thread."""
        self.ui_to_plugin.put(message)

    def _port(self, index: int) -> ProcessPort:
        if not 0 <= index < self.num_ports:
            raise ProcessError(f"Port index {index} is out of range")
        return self.ports[index]

    def apply_ui_events(self, nframes: int) -> None:
        """Apply the messages queued by the UI, stamping events at `nframes`."""
        pending = self.ui_to_plugin.qsize()
        for _ in range(pending):
            try:
                message = self.ui_to_plugin.get_nowait()
            except queue.Empty:
                raise ProcessError("Failed to read header from UI ring") from None

            if isinstance(message, ControlChange):
                self._port(message.port_index)
                self.controls_buf[message.port_index] = message.value

            elif isinstance(message, EventTransfer):
                if _EVENT_TRANSFER_HEADER + len(message.data) > self.process_msg_size:
                    raise ProcessError("Event from UI ring is too large")
                port = self._port(message.port_index)
                if port.evbuf is None:
                    raise ProcessError(
                        f"Port {message.port_index} has no event buffer"
                    )
                with contextlib.suppress(BufferFullError):
                    port.evbuf.end().write(nframes, 0, message.type, message.data)

            elif isinstance(message, StateRequest):
                if self.control_in is None:
                    raise ProcessError("Plugin has no control input port")
                port = self._port(self.control_in)
                if (
                    port.type is not PortType.EVENT
                    or port.flow is not PortFlow.INPUT
                    or port.evbuf is None
                ):
                    raise ProcessError("Control input is not an event input port")
                with contextlib.suppress(BufferFullError):
                    port.evbuf.end().write(
                        nframes, 0, self.get_msg_type, self.get_msg_body
                    )

            elif isinstance(message, RunStateChange):
                self.run_state = message.state
                if message.state is RunState.PAUSED:
                    self.paused.release()

            else:
                raise ProcessError("Unknown message type received from UI ring")

    def _apply_ui_events_logged(self, nframes: int) -> None:
        try:
            self.apply_ui_events(nframes)
        except ProcessError as exc:
            log_message(LogLevel.ERR, "%s\n", exc)

    def run(self, nframes: int) -> bool:
        """Run the plugin for a block; return whether to send UI updates now."""
        self._apply_ui_events_logged(nframes)

        self.instance.run(nframes)

        handle = getattr(self.instance, "handle", self.instance)
        if self.state_worker is not None:
            self.state_worker.emit_responses(handle)
        if self.worker is not None:
            self.worker.emit_responses(handle)
            self.worker.end_run()

        self.pending_frames += nframes
        if self.update_frames and self.pending_frames > self.update_frames:
            self.pending_frames = 0
            return True
        return False

    def bypass(self, nframes: int) -> None:
        """Skip running the plugin for a block, applying UI messages only."""
        self._apply_ui_events_logged(nframes)