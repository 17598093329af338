import math


########################## Misc #########################
def noop(*args, **kws):
    """A no operation function"""
    return None


def not_neg(x: float):
    """
    return the maximum of x and 0
    """
    return max(0, x)


def round_half_up(x: float) -> int:
    """
    Rounds to the nearest integer, halves go up (`round_half_up(24.5) == 25`).
    Unlike the builtin `round`, this doesn't round halves to even.
    """
    return math.floor(x + 0.5)


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180
