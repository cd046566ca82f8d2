"""Easing curves mapping progress in [0, 1] to eased progress."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable


def ease_in_sine(x: float) -> float:
    return 1 - math.cos((x * math.pi) / 2)


def ease_out_sine(x: float) -> float:
    return math.sin((x * math.pi) / 2)


def ease_in_out_sine(x: float) -> float:
    return -(math.cos(math.pi * x) - 1) / 2


def ease_in_quad(x: float) -> float:
    return x * x


def ease_out_quad(x: float) -> float:
    return 1 - (1 - x) * (1 - x)


def ease_in_out_quad(x: float) -> float:
    return 2 * x * x if x < 0.5 else 1 - (-2 * x + 2) ** 2 / 2


def ease_in_cubic(x: float) -> float:
    return x**3


def ease_out_cubic(x: float) -> float:
    return 1 - (1 - x) ** 3


def ease_in_out_cubic(x: float) -> float:
    return 4 * x**3 if x < 0.5 else 1 - (-2 * x + 2) ** 3 / 2


def ease_in_quart(x: float) -> float:
    return x**4


def ease_out_quart(x: float) -> float:
    return 1 - (1 - x) ** 4


def ease_in_out_quart(x: float) -> float:
    return 8 * x**4 if x < 0.5 else 1 - (-2 * x + 2) ** 4 / 2


def ease_in_quint(x: float) -> float:
    return x**5


def ease_out_quint(x: float) -> float:
    return 1 - (1 - x) ** 5


def ease_in_out_quint(x: float) -> float:
    return 16 * x**5 if x < 0.5 else 1 - (-2 * x + 2) ** 5 / 2


def ease_in_expo(x: float) -> float:
    return 0.0 if x == 0 else 2 ** (10 * x - 10)


def ease_out_expo(x: float) -> float:
    return 1.0 if x == 1 else 1 - 2 ** (-10 * x)


def ease_in_out_expo(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x < 0.5:
        return 2 ** (20 * x - 10) / 2
    return (2 - 2 ** (-20 * x + 10)) / 2


def ease_in_circ(x: float) -> float:
    return 1 - math.sqrt(1 - x**2)


def ease_out_circ(x: float) -> float:
    return math.sqrt(1 - (x - 1) ** 2)


def ease_in_out_circ(x: float) -> float:
    if x < 0.5:
        return (1 - math.sqrt(1 - (2 * x) ** 2)) / 2
    return (math.sqrt(1 - (-2 * x + 2) ** 2) + 1) / 2


_C1 = 1.70158
_C2 = _C1 * 1.525
_C3 = _C1 + 1
_C4 = (2 * math.pi) / 3
_C5 = (2 * math.pi) / 4.5


def ease_in_back(x: float) -> float:
    return _C3 * x**3 - _C1 * x * x


def ease_out_back(x: float) -> float:
    return 1 + _C3 * (x - 1) ** 3 + _C1 * (x - 1) ** 2


def ease_in_out_back(x: float) -> float:
    if x < 0.5:
        return ((2 * x) ** 2 * ((_C2 + 1) * 2 * x - _C2)) / 2
    return ((2 * x - 2) ** 2 * ((_C2 + 1) * (x * 2 - 2) + _C2) + 2) / 2


def ease_in_elastic(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return -(2 ** (10 * x - 10)) * math.sin((x * 10 - 10.75) * _C4)


def ease_out_elastic(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return 2 ** (-10 * x) * math.sin((x * 10 - 0.75) * _C4) + 1


def ease_in_out_elastic(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    wave = math.sin((20 * x - 11.125) * _C5)
    if x < 0.5:
        return -(2 ** (20 * x - 10) * wave) / 2
    return (2 ** (-20 * x + 10) * wave) / 2 + 1


def ease_out_bounce(x: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if x < 1 / d1:
        return n1 * x * x
    if x < 2 / d1:
        x -= 1.5 / d1
        return n1 * x * x + 0.75
    if x < 2.5 / d1:
        x -= 2.25 / d1
        return n1 * x * x + 0.9375
    x -= 2.625 / d1
    return n1 * x * x + 0.984375


def ease_in_bounce(x: float) -> float:
    return 1 - ease_out_bounce(1 - x)


def ease_in_out_bounce(x: float) -> float:
    if x < 0.5:
        return (1 - ease_out_bounce(1 - 2 * x)) / 2
    return (1 + ease_out_bounce(2 * x - 1)) / 2


class Ease(Enum):
    """The available easing curves."""

    IN_SINE = 0
    OUT_SINE = 1
    IN_OUT_SINE = 2
    IN_QUAD = 3
    OUT_QUAD = 4
    IN_OUT_QUAD = 5
    IN_CUBIC = 6
    OUT_CUBIC = 7
    IN_OUT_CUBIC = 8
    IN_QUART = 9
    OUT_QUART = 10
    IN_OUT_QUART = 11
    IN_QUINT = 12
    OUT_QUINT = 13
    IN_OUT_QUINT = 14
    IN_EXPO = 15
    OUT_EXPO = 16
    IN_OUT_EXPO = 17
    IN_CIRC = 18
    OUT_CIRC = 19
    IN_OUT_CIRC = 20
    IN_BACK = 21
    OUT_BACK = 22
    IN_OUT_BACK = 23
    IN_ELASTIC = 24
    OUT_ELASTIC = 25
    IN_OUT_ELASTIC = 26
    IN_BOUNCE = 27
    OUT_BOUNCE = 28
    IN_OUT_BOUNCE = 29

    @property
    def function(self) -> Callable[[float], float]:
        """The curve this member names."""
        return _CURVES[self]


_CURVES: dict[Ease, Callable[[float], float]] = {
    Ease.IN_SINE: ease_in_sine,
    Ease.OUT_SINE: ease_out_sine,
    Ease.IN_OUT_SINE: ease_in_out_sine,
    Ease.IN_QUAD: ease_in_quad,
    Ease.OUT_QUAD: ease_out_quad,
    Ease.IN_OUT_QUAD: ease_in_out_quad,
    Ease.IN_CUBIC: ease_in_cubic,
    Ease.OUT_CUBIC: ease_out_cubic,
    Ease.IN_OUT_CUBIC: ease_in_out_cubic,
    Ease.IN_QUART: ease_in_quart,
    Ease.OUT_QUART: ease_out_quart,
    Ease.IN_OUT_QUART: ease_in_out_quart,
    Ease.IN_QUINT: ease_in_quint,
    Ease.OUT_QUINT: ease_out_quint,
    Ease.IN_OUT_QUINT: ease_in_out_quint,
    Ease.IN_EXPO: ease_in_expo,
    Ease.OUT_EXPO: ease_out_expo,
    Ease.IN_OUT_EXPO: ease_in_out_expo,
    Ease.IN_CIRC: ease_in_circ,
    Ease.OUT_CIRC: ease_out_circ,
    Ease.IN_OUT_CIRC: ease_in_out_circ,
    Ease.IN_BACK: ease_in_back,
    Ease.OUT_BACK: ease_out_back,
    Ease.IN_OUT_BACK: ease_in_out_back,
    Ease.IN_ELASTIC: ease_in_elastic,
    Ease.OUT_ELASTIC: ease_out_elastic,
    Ease.IN_OUT_ELASTIC: ease_in_out_elastic,
    Ease.IN_BOUNCE: ease_in_bounce,
    Ease.OUT_BOUNCE: ease_out_bounce,
    Ease.IN_OUT_BOUNCE: ease_in_out_bounce,
}


def ease(kind: Ease, start: float, end: float, x: float) -> float:
    """Return the value between ``start`` and ``end`` at progress ``x`` along ``kind``."""
    return start + (end - start) * _CURVES[kind](x)