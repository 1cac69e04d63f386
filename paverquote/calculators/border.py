"""
Border allocator — 1-D patterns along the running length of the border.

Key differences from infill:
- Capacity is running feet, not sqft
- Stone length = quantity x conversion factor of the *opposite* orientation
- Stone area  = length x conversion factor of the laying orientation
- Only stones with conversion_factors can be used
"""

from ..errors import InvalidBorderStoneError
from ..schemas import BORDER_COVERAGE_UNITS, BorderOrientation, Signature, StoneMetadata
from .base import CoverageAllocator, logger


class BorderAllocator(CoverageAllocator):

    SIGNATURE = Signature.BORDER
    ALLOWED_UNITS = BORDER_COVERAGE_UNITS + ["unit"]  # "unit" = pattern repeats

    def __init__(self, orientation: BorderOrientation = BorderOrientation.SOLDIER_ROW):
        self.orientation = BorderOrientation(orientation)

    def validate_stone(self, metadata: StoneMetadata) -> None:
        if metadata.details.conversion_factors is None:
            logger.warning("Stone %s has no border conversion factors", metadata.sku_id)
            raise InvalidBorderStoneError(metadata.sku_id)

    def stone_size(self, metadata: StoneMetadata, quantity: float) -> float:
        factors = metadata.details.conversion_factors
        return quantity * factors.for_orientation(self.orientation.opposite)

    def coverage_sqft(self, metadata: StoneMetadata, size: float) -> float:
        factors = metadata.details.conversion_factors
        return size * factors.for_orientation(self.orientation)

    def realized_area(self, capacity: float, items: list) -> float:
        return sum(item.sqft_coverage for item in items)
