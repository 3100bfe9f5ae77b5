"""Setting up process thread state: ports, buffers and communication queues."""

from __future__ import annotations

import queue
import struct
from dataclasses import dataclass, field
from typing import Any

from .evbuf import EventBuffer
from .model import PortFlow, PortType, RunState, Settings
from .nodes import Nodes
from .process import Process, ProcessPort
from .query import port_has_designation
from .urids import URIDs

# Body of an atom object: id, otype.
_OBJECT_BODY = struct.Struct("=II")

_DEFAULT_PROCESS_MSG_SIZE = 1024


class PortError(Exception):
    """Raised when a plugin port cannot be used by the host."""


@dataclass(frozen=True)
class PortInfo:
    """What a plugin description says about one port.

    `classes` holds the nodes the port is an instance of, `properties` its
    port properties, `designations` its designations, `minimum_size` its
    requested buffer size (any value; only integers are used) and
    `supported_events` the event types it supports.
    """

    symbol: str | None = None
    name: str | None = None
    classes: frozenset[Any] = field(default_factory=frozenset)
    properties: frozenset[Any] = field(default_factory=frozenset)
    designations: tuple[Any, ...] = ()
    minimum_size: Any = None
    supported_events: frozenset[Any] = field(default_factory=frozenset)


def init_process(urids: URIDs, update_frames: int) -> Process:
    """Return fresh, paused process state sending UI updates every `update_frames`."""
    return Process(
        get_msg_type=urids.atom_Object,
        get_msg_body=_OBJECT_BODY.pack(0, urids.patch_Get),
        process_msg_size=_DEFAULT_PROCESS_MSG_SIZE,
        run_state=RunState.PAUSED,
        control_in=None,
        pending_frames=0,
        update_frames=update_frames,
        position=0,
        bpm=120.0,
        rolling=False,
        has_ui=False,
    )


def _connect(instance: Any, index: int, buffer: Any) -> None:
    if instance is not None:
        instance.connect_port(index, buffer)


def activate_process(
    proc: Process, urids: URIDs, instance: Any, settings: Settings
) -> None:
    """Allocate event buffers, connect them to `instance` and prepare to run."""
    proc.instance = instance

    for index, port in enumerate(proc.ports):
        if port.type is not PortType.EVENT:
            continue

        size = port.buf_size or settings.midi_buf_size
        port.evbuf = EventBuffer(size, urids.atom_Chunk, urids.atom_Sequence)
        port.evbuf.reset(port.flow is PortFlow.INPUT)
        _connect(instance, index, port.evbuf.buffer())

        if port.flow is PortFlow.INPUT:
            proc.process_msg_size = max(proc.process_msg_size, port.buf_size)

    proc.ui_to_plugin = queue.SimpleQueue()
    proc.plugin_to_ui = queue.SimpleQueue()


def deactivate_process(proc: Process) -> None:
    """Drop every event buffer and disconnect every port of the instance."""
    for index, port in enumerate(proc.ports):
        port.evbuf = None
        _connect(proc.instance, index, None)


def init_process_port(nodes: Nodes, info: PortInfo) -> ProcessPort:
    """Return the process state for a port described by `info`."""
    optional = nodes.lv2_connectionOptional in info.properties
    shown = info.symbol if info.symbol is not None else ""

    if nodes.lv2_InputPort in info.classes:
        flow = PortFlow.INPUT
    elif nodes.lv2_OutputPort in info.classes:
        flow = PortFlow.OUTPUT
    elif not optional:
        raise PortError(f'Mandatory port "{shown}" is neither input nor output')
    else:
        flow = PortFlow.UNKNOWN

    if nodes.lv2_ControlPort in info.classes:
        type_ = PortType.CONTROL
    elif nodes.lv2_AudioPort in info.classes:
        type_ = PortType.AUDIO
    elif nodes.lv2_CVPort in info.classes:
        type_ = PortType.CV
    elif nodes.atom_AtomPort in info.classes:
        type_ = PortType.EVENT
    elif not optional:
        raise PortError(f'Mandatory port "{shown}" has unknown data type')
    else:
        type_ = PortType.UNKNOWN

    buf_size = 0
    min_size = info.minimum_size
    if isinstance(min_size, int) and not isinstance(min_size, bool):
        buf_size = max(min_size, 0)

    reports_latency = (
        flow is PortFlow.OUTPUT
        and type_ is PortType.CONTROL
        and (
            nodes.lv2_reportsLatency in info.properties
            or port_has_designation(info.designations, nodes.lv2_latency)
        )
    )

    return ProcessPort(
        type=type_,
        flow=flow,
        symbol=info.symbol,
        label=info.name,
        evbuf=None,
        buf_size=buf_size,
        reports_latency=reports_latency,
        supports_midi=nodes.midi_MidiEvent in info.supported_events,
    )