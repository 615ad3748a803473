"""Parameter-panel bindings.

Each binding ties one GalaxyParameters field to its panel bounds and to a
commit callback. Widgets call :meth:`ParameterBinding.commit` once an edit
is complete (slider released, Return pressed, color picked); the callback
receives the whole candidate parameter set.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from galaxy_gen.errors import InvalidParameter
from galaxy_gen.params import (
    GalaxyParameters, PARAMETER_BOUNDS, INTEGER_FIELDS, COLOR_FIELDS, parse_color
)

FIELD_LABELS = {
    "count": "Count",
    "size": "Size",
    "radius": "Radius",
    "branches": "Branches",
    "spin": "Spin",
    "randomness": "Randomness",
    "randomness_power": "Randomness power",
    "inside_color": "Inside color",
    "outside_color": "Outside color",
}


@dataclass(frozen=True)
class ParameterBinding:
    field: str
    label: str
    kind: str  # "int", "float" or "color"
    bounds: Optional[Tuple[float, float]]
    step: Optional[float]
    on_commit: Callable[[GalaxyParameters], Any]

    def coerce(self, value: Any) -> Any:
        """Convert raw widget input to the field's type."""
        try:
            if self.kind == "int":
                number = float(value)
                # Sliders deliver floats; snap to the step grid
                step = int(self.step or 1)
                return int(round(number / step)) * step
            if self.kind == "float":
                return float(value)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidParameter(self.field, value, "expected a number") from exc
        if isinstance(value, str):
            value = value.strip()
        parse_color(self.field, value)
        return value

    def commit(self, params: GalaxyParameters, value: Any) -> GalaxyParameters:
        """Apply a completed edit and trigger the commit callback.

        Args:
            params: Current parameter set (left unchanged)
            value: Raw widget value

        Returns:
            The committed parameter set

        Raises:
            InvalidParameter: If the value is rejected; nothing is committed
        """
        candidate = params.replace(**{self.field: self.coerce(value)})
        candidate.check_bounds()
        self.on_commit(candidate)
        return candidate


def build_bindings(on_commit: Callable[[GalaxyParameters], Any]) -> List[ParameterBinding]:
    """One binding per parameter, in panel order."""
    bindings = []
    for name, (low, high, step) in PARAMETER_BOUNDS.items():
        kind = "int" if name in INTEGER_FIELDS else "float"
        bindings.append(ParameterBinding(name, FIELD_LABELS[name], kind, (low, high), step, on_commit))
    for name in COLOR_FIELDS:
        bindings.append(ParameterBinding(name, FIELD_LABELS[name], "color", None, None, on_commit))
    return bindings
