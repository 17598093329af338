import os
from contextlib import redirect_stdout

with open(os.devnull, "w") as f, redirect_stdout(f):
    import pygame as pg

from .config import g, set_config, setup_logging
from .input import Input
from .shot import Field, HitEffect, Shot
from .uikit import Flex, View

__all__ = [
    # config
    "g",
    "set_config",
    "setup_logging",
    # ui
    "View",
    "Flex",
    # game
    "Input",
    "Shot",
    "Field",
    "HitEffect",
]

del pg
