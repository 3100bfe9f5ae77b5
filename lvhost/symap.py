"""A simple symbol map (string interner) with stable integer IDs."""

from __future__ import annotations


class Symap:
    """Map strings to small positive integers and back.

    IDs are assigned in order of first mapping, starting at 1.  Zero is
    never a valid ID, so it can stand for "no symbol".
    """

    def __init__(self) -> None:
        self._symbols: list[str] = []
        self._ids: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._symbols)

    def try_map(self, sym: str) -> int | None:
        """Return the ID of `sym` if it is already mapped, otherwise None."""
        return self._ids.get(sym)

    def map(self, sym: str) -> int:
        """Return the ID of `sym`, assigning a new one if necessary."""
        if not isinstance(sym, str):
            raise TypeError(f"symbol must be a string, not {type(sym).__name__}")

        existing = self._ids.get(sym)
        if existing is not None:
            return existing

        self._symbols.append(sym)
        new_id = len(self._symbols)
        self._ids[sym] = new_id
        return new_id

    def unmap(self, id: int) -> str | None:
        """Return the symbol for `id`, or None if it is not mapped."""
        if 1 <= id <= len(self._symbols):
            return self._symbols[id - 1]
        return None