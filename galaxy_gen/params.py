"""Galaxy generation parameters."""

import math
import numbers
from dataclasses import dataclass, asdict, fields, replace as _replace
from typing import Dict, Tuple, Any, Union

from matplotlib.colors import to_rgb

from galaxy_gen.errors import InvalidParameter

Color = Union[str, Tuple[float, float, float]]

# (min, max, step) as exposed by the parameter panel
PARAMETER_BOUNDS: Dict[str, Tuple[float, float, float]] = {
    "count": (100, 1_000_000, 100),
    "size": (0.0, 2.0, 0.001),
    "radius": (0.01, 20.0, 0.01),
    "branches": (2, 20, 1),
    "spin": (-5.0, 5.0, 0.001),
    "randomness": (0.0, 2.0, 0.001),
    "randomness_power": (1.0, 10.0, 0.001),
}

INTEGER_FIELDS = ("count", "branches")
COLOR_FIELDS = ("inside_color", "outside_color")


def parse_color(field: str, value: Color) -> Tuple[float, float, float]:
    """Convert a color spec ('#ff6030', 'white', (r, g, b)) to RGB floats in [0, 1]."""
    try:
        return tuple(float(c) for c in to_rgb(value))
    except (ValueError, TypeError) as exc:
        raise InvalidParameter(field, value, "not a color") from exc


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_finite(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


@dataclass
class GalaxyParameters:
    """Parameter set driving galaxy generation.

    Mutable so a parameter panel can edit it in place; every completed edit
    triggers a full regeneration with the whole record.

    Note: ``randomness`` is exposed for tuning but the offset formula only
    uses ``randomness_power``.
    """
    count: int = 100000
    size: float = 0.01
    radius: float = 5.0
    branches: int = 6
    spin: float = 0.909
    randomness: float = 0.2
    randomness_power: float = 3.0
    inside_color: Color = "#ff6030"
    outside_color: Color = "#1b3984"

    @property
    def inside_rgb(self) -> Tuple[float, float, float]:
        return parse_color("inside_color", self.inside_color)

    @property
    def outside_rgb(self) -> Tuple[float, float, float]:
        return parse_color("outside_color", self.outside_color)

    def replace(self, **changes) -> "GalaxyParameters":
        """Return a copy with the given fields changed."""
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            name = sorted(unknown)[0]
            raise InvalidParameter(name, changes[name], "unknown parameter")
        return _replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> "GalaxyParameters":
        """Check the values generation needs to be well defined.

        Raises:
            InvalidParameter: If a value would make generation fail
                (non-positive count, modulo by zero branches, divide by
                zero radius, ...)
        """
        if not _is_integer(self.count) or self.count < 1:
            raise InvalidParameter("count", self.count, "must be an integer >= 1")
        if not _is_integer(self.branches) or self.branches < 1:
            raise InvalidParameter("branches", self.branches, "must be an integer >= 1")
        if not _is_finite(self.radius) or self.radius <= 0:
            raise InvalidParameter("radius", self.radius, "must be > 0")
        if not _is_finite(self.randomness_power) or self.randomness_power < 0:
            raise InvalidParameter("randomness_power", self.randomness_power, "must be >= 0")
        if not _is_finite(self.size) or self.size < 0:
            raise InvalidParameter("size", self.size, "must be >= 0")
        for name in ("spin", "randomness"):
            if not _is_finite(getattr(self, name)):
                raise InvalidParameter(name, getattr(self, name), "must be a finite number")
        for name in COLOR_FIELDS:
            parse_color(name, getattr(self, name))
        return self

    def check_bounds(self) -> "GalaxyParameters":
        """Validate and enforce the tuning-panel bounds for every field."""
        self.validate()
        for name, (low, high, _step) in PARAMETER_BOUNDS.items():
            value = getattr(self, name)
            if not low <= value <= high:
                raise InvalidParameter(name, value, f"must be within [{low}, {high}]")
        return self
