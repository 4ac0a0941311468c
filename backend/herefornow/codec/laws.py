"""Interpolation laws — standalone functions registered via decorator:

    @interpolation("ease_out", description="quadratic ease-out")
    def ease_out(i: int, intervals: int, span: int) -> int:
        ...

A law returns the offset of line ``i`` from ``y_top`` given ``intervals =
total_lines - 1`` and the band ``span``. All arithmetic is integer with
truncating division so results are bit-exact across platforms.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from herefornow.codec.errors import InvalidInputError

logger = logging.getLogger(__name__)

InterpolationFn = Callable[[int, int, int], int]

# Fixed-point scale for the normalized position t in [0, 1000]
_T_SCALE = 1000
_T_SCALE_SQ = _T_SCALE * _T_SCALE


@dataclass(frozen=True)
class InterpolationSpec:
    name: str
    fn: InterpolationFn
    description: str = ""


class InterpolationRegistry:
    """Registry of named interpolation laws."""

    def __init__(self) -> None:
        self._laws: dict[str, InterpolationSpec] = {}

    def register(self, spec: InterpolationSpec) -> None:
        if spec.name in self._laws:
            raise ValueError(f"Duplicate interpolation law: {spec.name}")
        self._laws[spec.name] = spec
        logger.debug("Registered interpolation law %s", spec.name)

    def get(self, name: str) -> InterpolationSpec:
        try:
            return self._laws[name]
        except KeyError:
            known = ", ".join(sorted(self._laws))
            raise InvalidInputError(
                f"Unknown interpolation law {name!r} (known: {known})"
            ) from None

    def names(self) -> list[str]:
        return sorted(self._laws)


_registry = InterpolationRegistry()


def get_registry() -> InterpolationRegistry:
    return _registry


def interpolation(name: str, *, description: str = ""):
    """Decorator to register an interpolation law."""

    def decorator(fn: InterpolationFn) -> InterpolationFn:
        _registry.register(InterpolationSpec(name=name, fn=fn, description=description))
        return fn

    return decorator


@interpolation("ease_out", description="Quadratic ease-out, lines bunch toward the bottom")
def ease_out(i: int, intervals: int, span: int) -> int:
    t = i * _T_SCALE // intervals
    inv_t = _T_SCALE - t
    return span - (span * inv_t * inv_t) // _T_SCALE_SQ


@interpolation("linear", description="Even spacing, rounded half up")
def linear(i: int, intervals: int, span: int) -> int:
    return (span * i + (intervals >> 1)) // intervals
