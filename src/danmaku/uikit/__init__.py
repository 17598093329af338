from .flex import (AlignContent, AlignItem, Direction, Flex, FlexWrap, Justify,
                   UnsupportedLayoutOption, layout)
from .view import LayoutView, View, ViewHandler, ViewHandlerFuncs

__all__ = [
    # view
    "View",
    "ViewHandler",
    "ViewHandlerFuncs",
    "LayoutView",
    # flex
    "Flex",
    "layout",
    "Direction",
    "FlexWrap",
    "Justify",
    "AlignItem",
    "AlignContent",
    "UnsupportedLayoutOption",
]
