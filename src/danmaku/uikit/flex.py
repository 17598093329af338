"""
# Flex layout

A Flex is a view handler that lays out the children of its view
following the CSS flexbox algorithm
(https://www.w3.org/TR/css-flexbox-1/#layout-algorithm).

Only single line layouts (`FlexWrap.NoWrap`) are implemented.
Children are neither grown nor shrunk, their current size along the main axis
is their flex base size and stays their size. Free space is only used to
justify the children along the main axis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import auto

from danmaku.types import Coordinate, Enum
from danmaku.uikit.view import LayoutView, View
from danmaku.utils import round_half_up


class Direction(Enum):
    """The direction in which flex items are laid out"""

    Row = auto()
    Column = auto()


class Justify(Enum):
    """
    Aligns items along the main axis.

    https://www.w3.org/TR/css-flexbox-1/#justify-content-property
    """

    Start = auto()  # pack to start of line
    End = auto()  # pack to end of line
    Center = auto()  # pack to center of line
    SpaceBetween = auto()  # even spacing
    SpaceAround = auto()  # even spacing, half-size on each end


class AlignItem(Enum):
    """Aligns items along the cross axis."""

    Start = auto()
    End = auto()
    Center = auto()


class FlexWrap(Enum):
    """
    Controls whether the container is single- or multi-line,
    and the direction in which the lines are laid out.
    """

    NoWrap = auto()
    Wrap = auto()
    WrapReverse = auto()


class AlignContent(Enum):
    """
    Aligns container lines when there is extra space on the cross-axis.
    Only matters for multi line layouts, so it isn't used yet.
    """

    Stretch = auto()
    Start = auto()
    End = auto()
    Center = auto()
    SpaceBetween = auto()
    SpaceAround = auto()


class UnsupportedLayoutOption(ValueError):
    """
    A flex container is configured with an option the layout can't handle.
    This is a bug in how the tree was built and not something to recover from.
    """

    def __init__(self, option: str, value, container):
        self.option = option
        self.value = value
        self.container = container
        super().__init__(f"Unsupported flex {option} {value!r} in {container!r}")


@dataclass
class _Element:
    view: LayoutView
    flex_base_size: float
    main_size: float = 0
    main_offset: float = 0
    cross_size: float = 0
    cross_offset: float = 0


@dataclass
class _Line:
    main_size: float = 0
    cross_size: float = 0
    cross_offset: float = 0
    children: list[_Element] = field(default_factory=list)


class Flex:
    """
    A container handler that lays out the children of its view in a row or a column.

    ```py
    menu = View(Flex(200, 300, direction=Direction.Column))
    menu.add_child(button)
    menu.load()
    menu.layout()
    ```
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        *,
        direction: Direction = Direction.Row,
        wrap: FlexWrap = FlexWrap.NoWrap,
        justify: Justify = Justify.Center,
        align_items: AlignItem = AlignItem.Center,
        align_content: AlignContent = AlignContent.Center,
    ):
        self.direction = direction
        self.wrap = wrap
        self.justify = justify
        self.align_items = align_items
        self.align_content = align_content
        self.width = width
        self.height = height

    def __repr__(self):
        return f"Flex({self.direction!r}, {self.justify!r}, {self.align_items!r})"

    def on_load(self, view: View):
        view.set_size(self.width, self.height)

    def on_layout(self, view: LayoutView):
        layout(view, self)

    # axis helpers

    def main_size(self, size: Coordinate) -> float:
        match self.direction:
            case Direction.Row:
                return size[0]
            case Direction.Column:
                return size[1]
        raise UnsupportedLayoutOption("direction", self.direction, self)

    def cross_size(self, size: Coordinate) -> float:
        match self.direction:
            case Direction.Row:
                return size[1]
            case Direction.Column:
                return size[0]
        raise UnsupportedLayoutOption("direction", self.direction, self)

    def flex_base_size(self, view: LayoutView) -> float:
        return self.main_size(view.rect.size)

    def check(self, container: LayoutView):
        """
        Raises an UnsupportedLayoutOption if the layout can't handle this configuration
        """
        if not isinstance(self.direction, Direction):
            raise UnsupportedLayoutOption("direction", self.direction, container)
        if self.wrap is not FlexWrap.NoWrap:
            raise UnsupportedLayoutOption("wrap", self.wrap, container)
        if not isinstance(self.justify, Justify):
            raise UnsupportedLayoutOption("justify", self.justify, container)
        if not isinstance(self.align_items, AlignItem):
            raise UnsupportedLayoutOption("align_items", self.align_items, container)


def justify_line(justify: Justify, container_main_size: float, line: _Line):
    """
    Sets the main offsets of the elements in the line
    """
    count = len(line.children)
    rem_free = container_main_size - sum(child.main_size for child in line.children)
    off, spacing = 0.0, 0.0
    match justify:
        case Justify.Start:
            pass
        case Justify.End:
            off = rem_free
        case Justify.Center:
            off = rem_free / 2
        case Justify.SpaceBetween:
            # a single element is packed to the start
            if count > 1:
                spacing = rem_free / (count - 1)
        case Justify.SpaceAround:
            if count:
                spacing = rem_free / count
                off = spacing / 2
        case _:
            raise UnsupportedLayoutOption("justify", justify, line)
    for child in line.children:
        child.main_offset = off
        off += spacing + child.main_size


def align_line(align_items: AlignItem, line: _Line):
    """
    Sets the cross offsets of the elements in the line
    """
    for child in line.children:
        child.cross_offset = line.cross_offset
        if child.cross_size == line.cross_size:
            continue
        diff = line.cross_size - child.cross_size
        match align_items:
            case AlignItem.Start:
                pass
            case AlignItem.End:
                child.cross_offset = line.cross_offset + diff
            case AlignItem.Center:
                child.cross_offset = line.cross_offset + diff / 2
            case _:
                raise UnsupportedLayoutOption("align_items", align_items, line)


def layout(container: LayoutView, flex: Flex):
    """
    Lays out the children of `container` as configured by `flex`.
    Every child gets a new rect (relative to the container) and is then layouted itself.
    """
    flex.check(container)

    children = [
        _Element(view=c, flex_base_size=flex.flex_base_size(c))
        for c in container.children
    ]
    container_size = container.rect.size
    container_main_size = flex.main_size(container_size)

    line = _Line(children=children)
    line.main_size = sum(child.flex_base_size for child in children)
    lines = [line]

    for line in lines:
        free_space = container_main_size - line.main_size
        logging.debug(
            f"Flex layout of {container!r}: {len(line.children)} children, free space {free_space}"
        )
        # no growing or shrinking
        for child in line.children:
            child.main_size = child.flex_base_size
            child.cross_size = flex.cross_size(child.view.rect.size)

    # single line: the line takes the whole cross size of the container
    lines[0].cross_size = flex.cross_size(container_size)

    off = 0.0
    for line in lines:
        line.cross_offset = off
        off += line.cross_size

    for line in lines:
        justify_line(flex.justify, container_main_size, line)
        align_line(flex.align_items, line)

    for line in lines:
        for child in line.children:
            main_start = child.main_offset
            main_end = child.main_offset + child.main_size
            cross_start = child.cross_offset
            cross_end = child.cross_offset + child.cross_size
            match flex.direction:
                case Direction.Row:
                    edges = (main_start, cross_start, main_end, cross_end)
                case Direction.Column:
                    edges = (cross_start, main_start, cross_end, main_end)
                case _:
                    raise UnsupportedLayoutOption("direction", flex.direction, container)
            child.view.set_rect(*map(round_half_up, edges))
            child.view.layout()
