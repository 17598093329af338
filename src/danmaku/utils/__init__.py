"""
Utilities for all kinds of needs
"""
import logging

from .func import deg_to_rad, noop, not_neg, round_half_up


def log_error(*args):
    """
    Logs a non fatal error
    """
    logging.error(" ".join(map(str, args)))


__all__ = [
    "deg_to_rad",
    "noop",
    "not_neg",
    "round_half_up",
    "log_error",
]
