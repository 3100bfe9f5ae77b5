"""Basic types shared by the host: run state, port kinds, settings and options."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

VERSION = "1.6.9"


class RunState(enum.Enum):
    """Process thread running state."""

    RUNNING = 0
    PAUSED = 1


class PortFlow(enum.Enum):
    """Direction of data through a plugin port."""

    UNKNOWN = 0
    INPUT = 1
    OUTPUT = 2


class PortType(enum.Enum):
    """Data type of a plugin port."""

    UNKNOWN = 0
    CONTROL = 1
    AUDIO = 2
    EVENT = 3
    CV = 4


@dataclass
class Settings:
    """System and configuration settings for the execution process."""

    sample_rate: float = 0.0
    block_length: int = 0
    midi_buf_size: int = 0
    ring_size: int = 0
    ui_update_hz: float = 0.0
    ui_scale_factor: float = 0.0


@dataclass
class Options:
    """Program options."""

    name: str | None = None
    name_exact: bool = False
    load: str | None = None
    preset: str | None = None
    controls: list[str] = field(default_factory=list)
    ring_size: int = 0
    update_rate: float = 0.0
    scale_factor: float = 0.0
    dump: bool = False
    trace: bool = False
    generic_ui: bool = False
    show_hidden: bool = False
    no_menu: bool = False
    show_ui: bool = False
    print_controls: bool = False
    non_interactive: bool = False
    ui_uri: str | None = None


@dataclass
class Port:
    """Application-side state of a plugin port."""

    index: int
    type: PortType = PortType.UNKNOWN
    flow: PortFlow = PortFlow.UNKNOWN
    description: Any = None
    widget: Any = None