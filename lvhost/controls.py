"""The model behind a generic control dial: value mapping, labels and grouping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

#: Width in pixels of a control in the generic UI.
CONTROL_WIDTH = 150

#: Number of dial steps for a continuous control without rangeSteps.
DIAL_STEPS = 10000


@dataclass(frozen=True)
class ControlSpec:
    """What a plugin description says about one control port."""

    name: str
    index: int = 0
    minimum: float = 0.0
    maximum: float = 1.0
    default: float | None = None
    steps: Any = None
    scale_points: Sequence[tuple[Any, str]] = ()
    logarithmic: bool = False
    integer: bool = False
    enumeration: bool = False
    toggled: bool = False
    comment: str | None = None
    group: str | None = None
    group_label: str | None = None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ControlModel:
    """An integer dial standing for a control port value, with its label.

    `on_change(value)` is called whenever the dial moves, once the model is
    built, including moves caused by `set_value`.
    """

    def __init__(
        self,
        spec: ControlSpec,
        current: float = 0.0,
        on_change: Callable[[float], Any] | None = None,
    ) -> None:
        self.spec = spec
        self.title = spec.name
        self.tooltip = spec.comment
        self.label_text = ""
        self.dial_min = 0
        self.dial_max = 99
        self.dial_value = 0
        self._min = 0.0
        self._max = 1.0
        self._connected = False
        self._on_change = on_change

        if _is_number(spec.steps) and isinstance(spec.steps, int):
            self.steps = max(spec.steps, 2)
        else:
            self.steps = DIAL_STEPS

        self.scale_points: list[float] = []
        self.scale_map: dict[float, str] = {}
        for point, text in spec.scale_points:
            if not _is_number(point):
                continue
            value = float(point)
            self.scale_points.append(value)
            self.scale_map[value] = text

        self.is_logarithmic = spec.logarithmic
        self.is_integer = spec.integer
        self.is_enum = spec.enumeration
        if spec.toggled:
            self.is_integer = True
            if not self.scale_map.get(0.0):
                self.scale_map[0.0] = "Off"
            if not self.scale_map.get(1.0):
                self.scale_map[1.0] = "On"

        default = spec.default if spec.default is not None else current
        self.set_range(spec.minimum, spec.maximum)
        self.set_value(default)
        self._connected = True

    def _set_dial(self, step: float) -> None:
        if math.isnan(step):
            target = self.dial_min
        elif math.isinf(step):
            target = self.dial_max if step > 0 else self.dial_min
        else:
            target = int(step)
        target = min(max(target, self.dial_min), self.dial_max)

        changed = target != self.dial_value
        self.dial_value = target
        if changed and self._connected:
            self._emit()

    def _emit(self) -> float:
        value = self.value()
        self.label_text = self.label(value)
        if self._on_change is not None:
            self._on_change(value)
        return value

    def set_range(self, minimum: float, maximum: float) -> None:
        """Set the value range and the matching dial range."""
        self._min = minimum
        self._max = maximum

        if self.is_logarithmic:
            low, high = 1.0, float(self.steps)
        elif self.is_enum:
            low, high = 0.0, float(len(self.scale_points) - 1)
        elif not self.is_integer:
            low, high = minimum * self.steps, maximum * self.steps
        else:
            low, high = minimum, maximum

        self.dial_min = int(low)
        self.dial_max = max(self.dial_min, int(high))
        self._set_dial(float(self.dial_value))

    def set_value(self, value: float) -> None:
        """Move the dial to show `value` and label it."""
        if self.is_integer:
            step = float(value)
        elif self.is_enum:
            try:
                step = float(self.scale_points.index(value))
            except ValueError:
                step = float(len(self.scale_points))
        elif self.is_logarithmic:
            try:
                step = (
                    self.steps
                    * math.log(value / self._min)
                    / math.log(self._max / self._min)
                )
            except (ValueError, ZeroDivisionError):
                step = math.nan
        else:
            step = value * self.steps

        self._set_dial(step)
        self.label_text = self.label(value)

    def value(self) -> float:
        """Return the control value the dial position stands for."""
        if self.is_enum:
            return self.scale_points[self.dial_value]
        if self.is_integer:
            return float(self.dial_value)
        if self.is_logarithmic:
            try:
                return self._min * (self._max / self._min) ** (
                    self.dial_value / (self.steps - 1)
                )
            except ZeroDivisionError:
                return math.nan
        return self.dial_value / self.steps

    def label(self, value: float) -> str:
        """Return the text shown for `value`: its scale point label or the number."""
        text = self.scale_map.get(value)
        if text:
            return text
        return f"{value:g}"

    def dial_changed(self, step: int) -> float:
        """Handle the user turning the dial to `step`; return the new value."""
        self.dial_value = min(max(int(step), self.dial_min), self.dial_max)
        return self._emit()


def sort_by_group(specs: Iterable[ControlSpec]) -> list[ControlSpec]:
    """Return controls ordered with ungrouped ones first, then by group."""
    return sorted(specs, key=lambda s: (s.group is not None, s.group or ""))


def group_controls(
    specs: Iterable[ControlSpec],
) -> list[tuple[str | None, list[ControlSpec]]]:
    """Return the boxes of a generic UI, in order.

    Each box is `(title, controls)`.  Ungrouped controls each get a box of
    their own with title None; consecutive controls of one group share a box
    titled with the group label, or the group itself if it has no label.
    """
    boxes: list[tuple[str | None, list[ControlSpec]]] = []
    current: list[ControlSpec] | None = None
    last_group: str | None = None

    for spec in sort_by_group(specs):
        if spec.group is not None:
            if current is None or spec.group != last_group:
                title = spec.group_label if spec.group_label else spec.group
                current = []
                boxes.append((title, current))
            current.append(spec)
        else:
            boxes.append((None, [spec]))
        last_group = spec.group

    return boxes