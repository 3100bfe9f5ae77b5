"""The cached URIDs of the LV2 vocabulary used by the host."""

from __future__ import annotations

from dataclasses import dataclass

from .mapper import Mapper

_ATOM = "http://lv2plug.in/ns/ext/atom#"
_BUF_SIZE = "http://lv2plug.in/ns/ext/buf-size#"
_LOG = "http://lv2plug.in/ns/ext/log#"
_MIDI = "http://lv2plug.in/ns/ext/midi#"
_PARAMETERS = "http://lv2plug.in/ns/ext/parameters#"
_PATCH = "http://lv2plug.in/ns/ext/patch#"
_TIME = "http://lv2plug.in/ns/ext/time#"
_UI = "http://lv2plug.in/ns/extensions/ui#"

# Mapping order is significant: it fixes the URIDs a fresh mapper assigns.
_URIS: dict[str, str] = {
    "atom_Chunk": _ATOM + "Chunk",
    "atom_Float": _ATOM + "Float",
    "atom_Int": _ATOM + "Int",
    "atom_Object": _ATOM + "Object",
    "atom_Path": _ATOM + "Path",
    "atom_Sequence": _ATOM + "Sequence",
    "atom_String": _ATOM + "String",
    "atom_eventTransfer": _ATOM + "eventTransfer",
    "bufsz_maxBlockLength": _BUF_SIZE + "maxBlockLength",
    "bufsz_minBlockLength": _BUF_SIZE + "minBlockLength",
    "bufsz_sequenceSize": _BUF_SIZE + "sequenceSize",
    "log_Error": _LOG + "Error",
    "log_Trace": _LOG + "Trace",
    "log_Warning": _LOG + "Warning",
    "midi_MidiEvent": _MIDI + "MidiEvent",
    "param_sampleRate": _PARAMETERS + "sampleRate",
    "patch_Get": _PATCH + "Get",
    "patch_Put": _PATCH + "Put",
    "patch_Set": _PATCH + "Set",
    "patch_body": _PATCH + "body",
    "patch_property": _PATCH + "property",
    "patch_value": _PATCH + "value",
    "time_Position": _TIME + "Position",
    "time_bar": _TIME + "bar",
    "time_barBeat": _TIME + "barBeat",
    "time_beatUnit": _TIME + "beatUnit",
    "time_beatsPerBar": _TIME + "beatsPerBar",
    "time_beatsPerMinute": _TIME + "beatsPerMinute",
    "time_frame": _TIME + "frame",
    "time_speed": _TIME + "speed",
    "ui_scaleFactor": _UI + "scaleFactor",
    "ui_updateRate": _UI + "updateRate",
}


@dataclass(frozen=True)
class URIDs:
    """URIDs of the URIs the host refers to by number."""

    atom_Chunk: int
    atom_Float: int
    atom_Int: int
    atom_Object: int
    atom_Path: int
    atom_Sequence: int
    atom_String: int
    atom_eventTransfer: int
    bufsz_maxBlockLength: int
    bufsz_minBlockLength: int
    bufsz_sequenceSize: int
    log_Error: int
    log_Trace: int
    log_Warning: int
    midi_MidiEvent: int
    param_sampleRate: int
    patch_Get: int
    patch_Put: int
    patch_Set: int
    patch_body: int
    patch_property: int
    patch_value: int
    time_Position: int
    time_bar: int
    time_barBeat: int
    time_beatUnit: int
    time_beatsPerBar: int
    time_beatsPerMinute: int
    time_frame: int
    time_speed: int
    ui_scaleFactor: int
    ui_updateRate: int


def init_urids(mapper: Mapper) -> URIDs:
    """Map every URI of the host vocabulary with `mapper`."""
    return URIDs(**{name: mapper.map_uri(uri) for name, uri in _URIS.items()})