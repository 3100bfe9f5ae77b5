"""Queries on plugin and UI descriptions."""

from __future__ import annotations

from typing import Any, Iterable

FIXED_SIZE = "http://lv2plug.in/ns/extensions/ui#fixedSize"
NO_USER_RESIZE = "http://lv2plug.in/ns/extensions/ui#noUserResize"


def port_has_designation(designations: Iterable[Any], designation: Any) -> bool:
    """Return whether `designation` is among a port's designations."""
    return any(node == designation for node in designations)


def ui_is_resizable(ui_features: Iterable[str] | None) -> bool:
    """Return whether a UI with these optional features may be resized.

    `ui_features` is None when there is no UI, which is never resizable.
    """
    if ui_features is None:
        return False
    features = set(ui_features)
    return FIXED_SIZE not in features and NO_USER_RESIZE not in features