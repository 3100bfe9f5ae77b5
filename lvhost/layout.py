"""A flow layout that places items left to right, wrapping onto new rows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: int = 0
    height: int = 0

    def expanded_to(self, other: Size) -> Size:
        """Return the larger of each dimension of this size and `other`."""
        return Size(max(self.width, other.width), max(self.height, other.height))

    def __add__(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)


@dataclass(frozen=True)
class Rect:
    """An integer rectangle; `right` and `bottom` are inclusive edges."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def adjusted(self, dx1: int, dy1: int, dx2: int, dy2: int) -> Rect:
        """Return this rectangle with its edges moved by the given amounts."""
        return Rect(
            self.x + dx1,
            self.y + dy1,
            self.width - dx1 + dx2,
            self.height - dy1 + dy2,
        )


class FlowLayout:
    """Lay out items of fixed preferred size in rows that wrap at the edge.

    A negative spacing means "ask the parent": `parent_spacing` if given,
    otherwise `style_spacing` is used when items are placed.  A negative
    margin counts as no margin.
    """

    def __init__(
        self,
        margin: int = 0,
        h_spacing: int = -1,
        v_spacing: int = -1,
        *,
        parent_spacing: int | None = None,
        style_spacing: int = 0,
    ) -> None:
        self.margin = max(margin, 0)
        self._h_space = h_spacing
        self._v_space = v_spacing
        self._parent_spacing = parent_spacing
        self._style_spacing = style_spacing
        self._items: list[Size] = []
        self.geometries: list[Rect | None] = []
        self.geometry: Rect | None = None

    def add_item(self, size: Size) -> None:
        """Append an item with preferred size `size`."""
        self._items.append(size)
        self.geometries.append(None)

    def count(self) -> int:
        """Return the number of items."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def item_at(self, index: int) -> Size | None:
        """Return the item at `index`, or None if there is none."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def take_at(self, index: int) -> Size | None:
        """Remove and return the item at `index`, or None if there is none."""
        if 0 <= index < len(self._items):
            del self.geometries[index]
            return self._items.pop(index)
        return None

    def _smart_spacing(self) -> int:
        return self._parent_spacing if self._parent_spacing is not None else -1

    def horizontal_spacing(self) -> int:
        """Return the space between items in a row, or -1 for the style default."""
        if self._h_space >= 0:
            return self._h_space
        return self._smart_spacing()

    def vertical_spacing(self) -> int:
        """Return the space between rows, or -1 for the style default."""
        if self._v_space >= 0:
            return self._v_space
        return self._smart_spacing()

    def height_for_width(self, width: int) -> int:
        """Return the height the items need when laid out in `width`."""
        return self._do_layout(Rect(0, 0, width, 0), test_only=True)

    def set_geometry(self, rect: Rect) -> None:
        """Place every item within `rect`, recording each in `geometries`."""
        self.geometry = rect
        self._do_layout(rect, test_only=False)

    def minimum_size(self) -> Size:
        """Return the size of the largest item plus the margins."""
        size = Size()
        for item in self._items:
            size = size.expanded_to(item)
        return size + Size(2 * self.margin, 2 * self.margin)

    def size_hint(self) -> Size:
        """Return the preferred size, which is the minimum size."""
        return self.minimum_size()

    def _do_layout(self, rect: Rect, test_only: bool) -> int:
        m = self.margin
        effective = rect.adjusted(m, m, -m, -m)
        x = effective.x
        y = effective.y
        line_height = 0

        for index, item in enumerate(self._items):
            space_x = self.horizontal_spacing()
            if space_x == -1:
                space_x = self._style_spacing
            space_y = self.vertical_spacing()
            if space_y == -1:
                space_y = self._style_spacing

            next_x = x + item.width + space_x
            if next_x - space_x > effective.right and line_height > 0:
                x = effective.x
                y = y + line_height + space_y
                next_x = x + item.width + space_x
                line_height = 0

            if not test_only:
                self.geometries[index] = Rect(x, y, item.width, item.height)

            x = next_x
            line_height = max(line_height, item.height)

        return y + line_height - rect.y + m