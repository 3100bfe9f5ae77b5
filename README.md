# lvhost

Building blocks for hosting LV2 audio plugins, in plain Python with no
dependencies outside the standard library.

## What is in it

- `lvhost.symap.Symap`: a string interner. `map` gives each new string the next
  ID, starting at 1. `try_map` only looks a string up. `unmap` turns an ID back
  into its string, or returns `None`.
- `lvhost.mapper.Mapper`: a URI ↔ URID mapper built on `Symap`. A lock guards it,
  so threads can share one (`map_uri`, `unmap_uri`).
- `lvhost.urids`: `init_urids(mapper)` maps the host vocabulary (atom, buf-size,
  log, MIDI, parameters, patch, time and UI URIs) and returns them as a frozen
  `URIDs` dataclass.
- `lvhost.model`: the `RunState`, `PortFlow` and `PortType` enums, and the
  `Settings`, `Options` and `Port` dataclasses.
- `lvhost.nodes`: `init_nodes(factory)` calls `factory` on each URI the host
  queries plugin data with, and returns the results as `Nodes`. By default the
  factory is `str`. `Nodes.values()` lists every node in field order.
- `lvhost.log`: `log_message(level, fmt, *args)` writes a printf-style message
  to stderr. Errors, warnings and debug messages get an `error: `, `warning: `
  or `trace: ` prefix, with ANSI colour when stderr is a terminal. `Log.printf`
  picks the level from the URID of an LV2 log type. Trace messages appear only
  when `tracing` is set.
- `lvhost.evbuf`: `EventBuffer`, a fixed-capacity atom sequence kept in a byte
  array. `EventIterator` reads and writes events through `get`, `next` and
  `write`. When an event does not fit, `write` raises `BufferFullError`.
  Iterating over a buffer yields `Event` objects.
- `lvhost.query`: `port_has_designation(designations, designation)` and
  `ui_is_resizable(ui_features)`. A UI is not resizable if its features include
  the fixedSize or noUserResize URI, or if there is no UI (`None`).
- `lvhost.worker`: `Worker` runs a plugin's non-realtime work through a
  `WorkerInterface`. A threaded worker runs it in its own thread once `launch`
  is called. Otherwise the work runs at once inside `schedule`. `respond`
  queues responses, which `emit_responses` later hands to the plugin. `Worker`
  is a context manager that stops its thread on exit. Failures raise
  `WorkerError`.
- `lvhost.process`: `Process` is the state of the realtime side. `send` queues
  the UI messages `ControlChange`, `EventTransfer`, `StateRequest` and
  `RunStateChange`. `apply_ui_events` applies them, and raises `ProcessError`
  if a message is bad. `run(nframes)` applies the UI messages, runs the plugin
  instance, delivers worker responses, and returns whether it is time to send
  updates to the UI. `bypass(nframes)` applies the UI messages without running
  the plugin.
- `lvhost.process_setup`: `init_process(urids, update_frames)` creates paused
  process state. `activate_process` allocates an event buffer for each event
  port and connects it. `deactivate_process` drops the buffers and disconnects
  the ports. `init_process_port(nodes, info)` builds a `ProcessPort` from a
  `PortInfo` description, and raises `PortError` for a mandatory port with no
  flow or no known type.
- `lvhost.layout`: `FlowLayout` places items of a given `Size` left to right
  and wraps them onto new rows. `set_geometry(rect)` records each item's `Rect`
  in `geometries`. `height_for_width` returns the height the items need.
- `lvhost.controls`: `ControlModel` maps a control port value described by a
  `ControlSpec` to an integer dial position. It handles linear, integer,
  toggled, enumerated and logarithmic controls, and labels values with their
  scale points. `sort_by_group` and `group_controls` arrange controls into the
  boxes of a generic UI.

## Plugin instances

The package does not load plugins. `Process` and `activate_process` work with
any object you give them as the instance:

- `run(nframes)` is called once per block.
- `connect_port(index, buffer)` is called to connect or disconnect a port.
- An optional `handle` attribute is passed to worker responses. Without it,
  the instance itself is passed.

## Example

```python
from lvhost.mapper import Mapper
from lvhost.urids import init_urids
from lvhost.evbuf import EventBuffer

mapper = Mapper()
urids = init_urids(mapper)

buf = EventBuffer(4096, urids.atom_Chunk, urids.atom_Sequence)
buf.reset(True)
it = buf.end()
it.write(0, 0, urids.midi_MidiEvent, bytes([0x90, 60, 100]))

for event in buf:
    print(event.frames, mapper.unmap_uri(event.type), event.data)
```

## What it does not do

lvhost is a library of parts, not a complete host. It has:

- no command to run;
- no audio or MIDI backend;
- no loading of plugin bundles or RDF data;
- no saving or restoring of plugin state or presets;
- no graphical window.

The layout and control classes are toolkit-free models. Drawing them is left
to the caller.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```