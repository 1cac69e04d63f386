"""
Quote aggregation — merge duplicate stones before splitting, sum totals after.
"""

from .config import settings
from .rounding import round_fraction_digits
from .schemas import MergedItem, QuoteDetails


class QuoteAggregator:

    def __init__(self, tax_rate: float = None):
        if tax_rate is None:
            tax_rate = settings.TAX_RATE
        self.tax_rate = tax_rate

    def merge_items(self, coverages: list, catalog) -> list:
        """
        One MergedItem per sku_id, in first-seen order.
        Coverage is summed; signatures are unioned (at most infill + border).
        """
        merged: dict[str, MergedItem] = {}

        for coverage in coverages:
            existing = merged.get(coverage.sku_id)
            if existing is None:
                metadata = catalog.get(coverage.sku_id)
                merged[coverage.sku_id] = MergedItem(
                    sku_id=coverage.sku_id,
                    display_name=metadata.display_name,
                    price=metadata.price,
                    details=metadata.details,
                    sqft_coverage=coverage.sqft_coverage,
                    signatures=list(coverage.signatures),
                )
                continue

            existing.sqft_coverage += coverage.sqft_coverage
            for signature in coverage.signatures:
                if signature not in existing.signatures:
                    existing.signatures.append(signature)

        return list(merged.values())

    def aggregate_totals(self, items: list) -> QuoteDetails:
        """Totals over QuoteItems. Area counts only items that carry one (stones, not add-ons)."""
        total_area = sum(item.area for item in items if item.area is not None)
        total_weight = sum(item.weight for item in items)
        subtotal = round_fraction_digits(sum(item.cost for item in items), 2)
        tax = round_fraction_digits(subtotal * self.tax_rate, 2)

        return QuoteDetails(
            total_area=round_fraction_digits(total_area, 2),
            total_weight=round_fraction_digits(total_weight, 2),
            subtotal=subtotal,
            tax=tax,
            total=round_fraction_digits(subtotal + tax, 2),
        )
