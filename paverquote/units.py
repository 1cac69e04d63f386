# Unit conversion to canonical feet / square feet.
#
# Areal units reuse the linear factor (sqm -> x3.281, not x3.281^2). Quotes
# already issued were computed this way, so it stays until the storefront
# decides otherwise.

from .schemas import AreaUnit, LengthUnit

FEET_PER_UNIT = {
    LengthUnit.FT: 1.0,
    LengthUnit.IN: 1 / 12,
    LengthUnit.M: 3.281,
    LengthUnit.CM: 30.48,
}

SQFT_PER_UNIT = {
    AreaUnit.SQFT: 1.0,
    AreaUnit.SQIN: 1 / 12,
    AreaUnit.SQM: 3.281,
    AreaUnit.SQCM: 30.48,
}


def to_feet(value: float, unit) -> float:
    """Convert a length to feet."""
    return value * FEET_PER_UNIT[LengthUnit(unit)]


def to_sqft(value: float, unit) -> float:
    """Convert an area to square feet.

    Accepts length units too: project areas are measured in the
    measurement unit (e.g. width x length in metres).
    """
    unit = unit.value if isinstance(unit, (LengthUnit, AreaUnit)) else unit
    if unit in {u.value for u in LengthUnit}:
        return to_feet(value, unit)
    return value * SQFT_PER_UNIT[AreaUnit(unit)]


def to_canonical(value: float, unit) -> float:
    """Feet for length units, square feet for area units."""
    unit = unit.value if isinstance(unit, (LengthUnit, AreaUnit)) else unit
    if unit in {u.value for u in AreaUnit}:
        return to_sqft(value, unit)
    return to_feet(value, unit)
