"""
Quote Engine — project + stone catalog -> priced Quote.

Pure math, no I/O. Same (project, catalog) in, same Quote out; callers that
recompute on every form change can memoize on input equality.

Pipeline:
1. Project area from shape + measurements
2. Border allocation over the running length
3. Infill allocation over project area minus border area
4. Merge duplicate stones across infill and border
5. Area overage (optional)
6. Factory / showroom split per stone
7. Sealant / polymeric sand (optional, sized from project area)
8. Totals + tax
"""

import logging
import math

from .aggregator import QuoteAggregator
from .calculators.addons import AddonComputer
from .calculators.border import BorderAllocator
from .calculators.fulfillment import FulfillmentSplitter
from .calculators.infill import InfillAllocator
from .catalog import as_lookup
from .config import Settings, settings as default_settings
from .errors import QuoteInputError
from .geometry import project_area, project_perimeter
from .rounding import format_number, format_price
from .schemas import AddonId, Project, Quote
from .units import to_feet

logger = logging.getLogger(__name__)


class QuoteEngine:
    """
    Composes the allocators, splitter, add-ons and aggregator.
    Holds configuration only. No state carries between compute_quote calls.
    """

    def __init__(self, config: Settings = None):
        config = config or default_settings
        self.infill_allocator = InfillAllocator()
        self.splitter = FulfillmentSplitter(showroom_markup=config.SHOWROOM_MARKUP_PER_UNIT)
        self.addons = AddonComputer(overage_multiplier=config.AREA_OVERAGE_MULTIPLIER)
        self.aggregator = QuoteAggregator(tax_rate=config.TAX_RATE)

    def compute_quote(self, project: Project, catalog) -> Quote:
        """
        Args:
            project: Project from the form layer
            catalog: .get(sku_id) -> StoneMetadata | None (dict, StoneCatalog),
                     a lookup function, or a list of StoneMetadata

        Returns:
            Quote(items, details)

        Raises:
            QuoteInputError subclasses for missing metadata, non-border stones
            in a border, zero-size patterns with a non-zero target, and
            measurements too large to price.
        """
        area = self.project_area(project)
        merged = self.stone_coverage(project, catalog)
        reduce_pickups = project.addon_enabled(AddonId.REDUCE_PICKUPS)

        # --- Fulfillment ---
        items = []
        for item in merged:
            items.extend(self.splitter.split(item, reduce_pickups))

        if project.addon_enabled(AddonId.SEALANT):
            items.extend(self.addons.sealant(area))
        if project.addon_enabled(AddonId.POLYMERIC):
            items.append(self.addons.polymeric_sand(area))

        details = self.aggregator.aggregate_totals(items)
        logger.info(
            "Quote: %d items, %s sqft, total %s",
            len(items), format_number(details.total_area), format_price(details.total),
        )
        return Quote(items=items, details=details)

    def stone_coverage(self, project: Project, catalog) -> list:
        """
        Merged square feet per stone across border and infill, with the
        area overage applied when enabled. This is what the splitter prices.
        """
        lookup = as_lookup(catalog)
        area = self.project_area(project)

        # --- Allocation ---
        border_allocator = BorderAllocator(project.border.orientation)
        border = border_allocator.allocate(
            self.border_running_feet(project), project.border.contents, lookup,
        )
        infill = self.infill_allocator.allocate(
            max(0.0, area - border.area), project.infill.contents, lookup,
        )

        merged = self.aggregator.merge_items(infill.items + border.items, lookup)

        if project.addon_enabled(AddonId.AREA_OVERAGE):
            merged = self.addons.apply_overage(merged)
        return merged

    def project_area(self, project: Project) -> float:
        area = project_area(project.shape, project.measurements)
        _require_finite("area", area)
        return area

    def border_running_feet(self, project: Project) -> float:
        """Border length in feet; 'auto' follows the perimeter of the shape."""
        running_length = project.border.running_length
        if running_length.unit == "auto":
            feet = project_perimeter(project.shape, project.measurements)
        else:
            feet = to_feet(running_length.value, running_length.unit)
        _require_finite("border running length", feet)
        return feet


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        logger.warning("Project %s overflows: %s", name, value)
        raise QuoteInputError(f"Project {name} is too large to quote", {name: value})


def compute_quote(project: Project, catalog) -> Quote:
    """Compute a Quote with the default configuration."""
    return QuoteEngine().compute_quote(project, catalog)
