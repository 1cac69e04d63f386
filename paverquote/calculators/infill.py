"""
Infill allocator — 2-D patterns over the project area left inside the border.

Stone size is area: quantity / pcs_per_sqft.
"""

from ..schemas import INFILL_COVERAGE_UNITS, Signature, StoneMetadata
from .base import CoverageAllocator


class InfillAllocator(CoverageAllocator):

    SIGNATURE = Signature.INFILL
    ALLOWED_UNITS = INFILL_COVERAGE_UNITS

    def stone_size(self, metadata: StoneMetadata, quantity: float) -> float:
        return quantity / metadata.details.pcs_per_sqft

    def coverage_sqft(self, metadata: StoneMetadata, size: float) -> float:
        return size

    def realized_area(self, capacity: float, items: list) -> float:
        return max(0.0, capacity)
