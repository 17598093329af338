"""
The View is the node of the ui tree.

A View only knows its rectangle, its parent and its children.
Everything else (how it is laid out, what happens when it is loaded)
is delegated to its handler. Rects of children are relative to the
top left corner of their parent, `abs_rect` gives the screen position.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from danmaku.types import Rect
from danmaku.utils import log_error, noop, not_neg


class ViewHandler(Protocol):
    def on_load(self, view: View):
        """
        Called once when the view is loaded
        """

    def on_layout(self, view: View):
        """
        Called whenever the view should layout its children
        """


class ViewHandlerFuncs:
    """
    Default handler. Layouting a view just layouts its children in place.
    """

    on_load = noop

    def on_layout(self, view: View):
        for child in view.children:
            child.layout()


class LayoutView(Protocol):
    """
    The capabilities a layout needs from the nodes it lays out
    """

    @property
    def rect(self) -> Rect:
        ...

    def set_rect(self, x0: int, y0: int, x1: int, y1: int):
        ...

    @property
    def children(self) -> Sequence[LayoutView]:
        ...

    def layout(self):
        ...


class View:
    parent: View | None = None
    loaded: bool = False

    def __init__(self, handler: ViewHandler | None = None):
        self.handler: ViewHandler = (
            ViewHandlerFuncs() if handler is None else handler
        )
        self._rect = Rect(0, 0, 0, 0)
        self._children: list[View] = []

    def __repr__(self):
        return f"<View {type(self.handler).__name__} {self._rect.span}>"

    @property
    def rect(self) -> Rect:
        return Rect(self._rect)

    @property
    def abs_rect(self) -> Rect:
        if self.parent is None:
            return self.rect
        return Rect(self._rect.move(self.parent.abs_rect.topleft))

    @property
    def children(self) -> Sequence[View]:
        return tuple(self._children)

    def set_rect(self, x0: int, y0: int, x1: int, y1: int):
        self._rect = Rect.from_span((x0, y0), (x1, y1))

    def set_size(self, width: int, height: int):
        """
        Resizes the view, the top left corner stays where it is
        """
        self._rect.size = (not_neg(width), not_neg(height))

    def add_child(self, child: View):
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self._children.append(child)
        if self.loaded:
            child.load()

    def remove_child(self, child: View):
        if child.parent is not self:
            log_error("Tried to remove a view that isn't a child", child, self)
            return
        self._children.remove(child)
        child.parent = None

    def load(self):
        if self.loaded:
            return
        self.handler.on_load(self)
        self.loaded = True
        for child in self._children:
            child.load()

    def layout(self):
        self.handler.on_layout(self)
