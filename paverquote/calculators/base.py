"""
Abstract base class for coverage allocators.

Input: a capacity (sqft for infill, running feet for border) + list of Patterns
Output: Allocation, the realized area plus one StoneCoverage per stone per pattern

Fixed patterns are carved out first; whatever capacity is left is shared by
the fractional ("fr") patterns in proportion to their weights. Every
fractional pattern draws from the same post-fixed capacity.
"""

import logging
from abc import ABC, abstractmethod

from ..errors import DegeneratePatternError, MissingStoneMetadataError, QuoteInputError
from ..schemas import Allocation, Pattern, Signature, StoneCoverage, StoneMetadata
from ..units import to_canonical

logger = logging.getLogger(__name__)


class CoverageAllocator(ABC):
    """Infill and border allocators inherit from this."""

    SIGNATURE: Signature
    ALLOWED_UNITS: list = []

    # --- Per-dimension formulas ---

    @abstractmethod
    def stone_size(self, metadata: StoneMetadata, quantity: float) -> float:
        """Intrinsic size of `quantity` pieces of one stone (sqft or running ft)."""

    def target_size(self, value: float, unit: str) -> float:
        """Convert a fixed coverage amount to the allocator's canonical unit."""
        return to_canonical(value, unit)

    @abstractmethod
    def coverage_sqft(self, metadata: StoneMetadata, size: float) -> float:
        """Square feet of stone needed to realize `size`."""

    @abstractmethod
    def realized_area(self, capacity: float, items: list) -> float:
        pass

    def validate_stone(self, metadata: StoneMetadata) -> None:
        """Hook for dimension-specific stone checks. Raise QuoteInputError to reject."""

    # --- Algorithm ---

    def allocate(self, capacity: float, patterns: list, catalog) -> Allocation:
        """
        Args:
            capacity: total space available, in the allocator's canonical unit
            patterns: list of Pattern
            catalog: anything with .get(sku_id) -> StoneMetadata | None

        Returns:
            Allocation(area, items)
        """
        # Resolve every stone before allocating anything
        resolved = [(p, self._resolve_stones(p, catalog)) for p in patterns]

        fixed = [(p, stones) for p, stones in resolved if not p.is_fractional]
        fractional = [(p, stones) for p, stones in resolved if p.is_fractional]

        items = []
        remaining = capacity

        for pattern, stones in fixed:
            intrinsic = sum(size for _, size in stones)
            if pattern.coverage.unit == "unit":
                target = pattern.coverage.value * intrinsic
            else:
                target = self.target_size(pattern.coverage.value, pattern.coverage.unit)

            items.extend(self._scale(stones, target, intrinsic))
            remaining -= target

        remaining = max(0.0, remaining)
        fractional_total = sum(p.coverage.value for p, _ in fractional)

        for pattern, stones in fractional:
            if remaining <= 0 or fractional_total <= 0:
                break
            segment = remaining * (pattern.coverage.value / fractional_total)
            intrinsic = sum(size for _, size in stones)
            items.extend(self._scale(stones, segment, intrinsic))

        area = self.realized_area(capacity, items)
        logger.debug(
            "%s allocation: capacity=%.4f remaining=%.4f area=%.4f items=%d",
            self.SIGNATURE.value, capacity, remaining, area, len(items),
        )
        return Allocation(area=area, items=items)

    # --- Helpers ---

    def _resolve_stones(self, pattern: Pattern, catalog) -> list:
        """[(metadata, intrinsic size)] for each stone in the pattern."""
        unit = pattern.coverage.unit
        if unit not in self.ALLOWED_UNITS:
            logger.warning("Coverage unit %s not allowed for %s patterns", unit, self.SIGNATURE.value)
            raise QuoteInputError(
                f"Coverage unit '{unit}' can not be used for {self.SIGNATURE.value} patterns. "
                f"Available: {self.ALLOWED_UNITS}",
                {"unit": unit},
            )

        stones = []
        for ref in pattern.contents:
            metadata = catalog.get(ref.sku_id)
            if metadata is None:
                logger.warning("No stone metadata for %s", ref.sku_id)
                raise MissingStoneMetadataError(ref.sku_id)
            self.validate_stone(metadata)
            stones.append((metadata, self.stone_size(metadata, ref.quantity)))
        return stones

    def _scale(self, stones: list, target: float, intrinsic: float) -> list:
        """Scale every stone by target/intrinsic and tag it with this allocator's signature."""
        if intrinsic <= 0:
            if target == 0:
                return []
            sku_ids = [m.sku_id for m, _ in stones]
            logger.warning("Degenerate %s pattern %s (target %.4f)", self.SIGNATURE.value, sku_ids, target)
            raise DegeneratePatternError(sku_ids, target)

        scale_factor = target / intrinsic
        return [
            StoneCoverage(
                sku_id=metadata.sku_id,
                sqft_coverage=self.coverage_sqft(metadata, size * scale_factor),
                signatures=[self.SIGNATURE],
            )
            for metadata, size in stones
        ]
