"""Cached RDF nodes for the URIs the host queries plugin data with."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable

_ATOM = "http://lv2plug.in/ns/ext/atom#"
_CORE = "http://lv2plug.in/ns/lv2core#"
_MIDI = "http://lv2plug.in/ns/ext/midi#"
_PORT_GROUPS = "http://lv2plug.in/ns/ext/port-groups#"
_PORT_PROPS = "http://lv2plug.in/ns/ext/port-props#"
_PRESETS = "http://lv2plug.in/ns/ext/presets#"
_RDFS = "http://www.w3.org/2000/01/rdf-schema#"
_RESIZE_PORT = "http://lv2plug.in/ns/ext/resize-port#"
_STATE = "http://lv2plug.in/ns/ext/state#"
_UI = "http://lv2plug.in/ns/extensions/ui#"
_WORKER = "http://lv2plug.in/ns/ext/worker#"

#: URI of every cached node, by field name, in field order.
NODE_URIS: dict[str, str] = {
    "atom_AtomPort": _ATOM + "AtomPort",
    "atom_Chunk": _ATOM + "Chunk",
    "atom_Float": _ATOM + "Float",
    "atom_Path": _ATOM + "Path",
    "atom_Sequence": _ATOM + "Sequence",
    "lv2_AudioPort": _CORE + "AudioPort",
    "lv2_CVPort": _CORE + "CVPort",
    "lv2_ControlPort": _CORE + "ControlPort",
    "lv2_InputPort": _CORE + "InputPort",
    "lv2_OutputPort": _CORE + "OutputPort",
    "lv2_connectionOptional": _CORE + "connectionOptional",
    "lv2_control": _CORE + "control",
    "lv2_default": _CORE + "default",
    "lv2_designation": _CORE + "designation",
    "lv2_enumeration": _CORE + "enumeration",
    "lv2_extensionData": _CORE + "extensionData",
    "lv2_integer": _CORE + "integer",
    "lv2_latency": _CORE + "latency",
    "lv2_maximum": _CORE + "maximum",
    "lv2_minimum": _CORE + "minimum",
    "lv2_name": _CORE + "name",
    "lv2_reportsLatency": _CORE + "reportsLatency",
    "lv2_sampleRate": _CORE + "sampleRate",
    "lv2_symbol": _CORE + "symbol",
    "lv2_toggled": _CORE + "toggled",
    "midi_MidiEvent": _MIDI + "MidiEvent",
    "pg_group": _PORT_GROUPS + "group",
    "pprops_logarithmic": _PORT_PROPS + "logarithmic",
    "pprops_notOnGUI": _PORT_PROPS + "notOnGUI",
    "pprops_rangeSteps": _PORT_PROPS + "rangeSteps",
    "pset_Preset": _PRESETS + "Preset",
    "pset_bank": _PRESETS + "bank",
    "rdfs_comment": _RDFS + "comment",
    "rdfs_label": _RDFS + "label",
    "rdfs_range": _RDFS + "range",
    "rsz_minimumSize": _RESIZE_PORT + "minimumSize",
    "state_threadSafeRestore": _STATE + "threadSafeRestore",
    "ui_showInterface": _UI + "showInterface",
    "work_interface": _WORKER + "interface",
    "work_schedule": _WORKER + "schedule",
}


@dataclass(frozen=True)
class Nodes:
    """Nodes made once for the URIs the host looks plugin data up by."""

    atom_AtomPort: Any
    atom_Chunk: Any
    atom_Float: Any
    atom_Path: Any
    atom_Sequence: Any
    lv2_AudioPort: Any
    lv2_CVPort: Any
    lv2_ControlPort: Any
    lv2_InputPort: Any
    lv2_OutputPort: Any
    lv2_connectionOptional: Any
    lv2_control: Any
    lv2_default: Any
    lv2_designation: Any
    lv2_enumeration: Any
    lv2_extensionData: Any
    lv2_integer: Any
    lv2_latency: Any
    lv2_maximum: Any
    lv2_minimum: Any
    lv2_name: Any
    lv2_reportsLatency: Any
    lv2_sampleRate: Any
    lv2_symbol: Any
    lv2_toggled: Any
    midi_MidiEvent: Any
    pg_group: Any
    pprops_logarithmic: Any
    pprops_notOnGUI: Any
    pprops_rangeSteps: Any
    pset_Preset: Any
    pset_bank: Any
    rdfs_comment: Any
    rdfs_label: Any
    rdfs_range: Any
    rsz_minimumSize: Any
    state_threadSafeRestore: Any
    ui_showInterface: Any
    work_interface: Any
    work_schedule: Any

    def values(self) -> tuple[Any, ...]:
        """Return every node, in field order."""
        return tuple(getattr(self, f.name) for f in fields(self))


def init_nodes(factory: Callable[[str], Any] = str) -> Nodes:
    """Make every cached node by calling `factory` with its URI."""
    return Nodes(**{name: factory(uri) for name, uri in NODE_URIS.items()})