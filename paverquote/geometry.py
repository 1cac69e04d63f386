"""
Project geometry — area and perimeter of the paved shape, in canonical units.
"""

import math

from .schemas import Measurements, Shape
from .units import to_feet, to_sqft


def project_area(shape: Shape, measurements: Measurements) -> float:
    """Square feet covered by the project."""
    unit = measurements.unit
    if shape == Shape.RECT:
        return to_sqft(measurements.width * measurements.length, unit)
    if shape == Shape.CIRCLE:
        return to_sqft(math.pi * measurements.radius ** 2, unit)
    return to_sqft(measurements.area, unit)


def project_perimeter(shape: Shape, measurements: Measurements) -> float:
    """Running feet around the project; used when the border length is 'auto'."""
    unit = measurements.unit
    if shape == Shape.RECT:
        return to_feet(2 * (measurements.width + measurements.length), unit)
    if shape == Shape.CIRCLE:
        return to_feet(2 * math.pi * measurements.radius, unit)
    return to_feet(measurements.running_length, unit)
