"""
Fulfillment Splitter — turns one stone's total coverage into pickup line items.

Two channels:
1. Factory: sold by the half pallet at list price
2. Showroom: sold by the piece at list price + flat markup per sqft

Reduce-pickups rounds pallets UP so everything comes from the factory.
"""

import logging
import math

from ..config import settings
from ..rounding import round_fraction_digits, round_to
from ..schemas import MergedItem, PickupLocation, QuoteItem, QuoteUnit

logger = logging.getLogger(__name__)


class FulfillmentSplitter:

    def __init__(self, showroom_markup: float = None):
        if showroom_markup is None:
            showroom_markup = settings.SHOWROOM_MARKUP_PER_UNIT
        self.showroom_markup = showroom_markup

    def split(self, item: MergedItem, reduce_pickups: bool = False) -> list:
        """
        Returns 0-2 QuoteItems: FACTORY (pal) and/or SHOWROOM (pcs).
        """
        details = item.details
        half_pallet = details.sqft_per_pallet / 2

        # --- Pallet portion ---
        if reduce_pickups:
            half_pallets = math.ceil(item.sqft_coverage / half_pallet)
        else:
            half_pallets = math.floor(item.sqft_coverage / half_pallet)
        half_pallets = max(0, half_pallets)
        pallet_area = round_fraction_digits(half_pallets * half_pallet, 2)
        pallet_count = half_pallets / 2

        # --- Piece portion ---
        if reduce_pickups:
            piece_area = 0.0
        else:
            remainder = max(0.0, item.sqft_coverage - pallet_area)
            piece_area = round_fraction_digits(
                round_to(remainder, 1 / details.pcs_per_sqft, "up"), 2,
            )
        piece_count = round(piece_area * details.pcs_per_sqft)

        factory_cost = round_fraction_digits(pallet_area * item.price, 2)
        showroom_cost = round_fraction_digits(piece_area * (item.price + self.showroom_markup), 2)

        logger.debug(
            "%s: coverage=%.4f pallets=%.1f (%.2f sqft) pieces=%d (%.2f sqft)",
            item.sku_id, item.sqft_coverage, pallet_count, pallet_area, piece_count, piece_area,
        )

        quote_items = []

        if factory_cost > 0:
            quote_items.append(QuoteItem(
                sku_id=item.sku_id,
                pickup_location_id=PickupLocation.FACTORY,
                display_name=item.display_name,
                cost=factory_cost,
                area=pallet_area,
                quantity=pallet_count,
                unit=QuoteUnit.PALLET,
                weight=pallet_count * details.pcs_per_pallet * details.lbs_per_unit,
                signatures=item.signatures,
            ))

        if not reduce_pickups and showroom_cost > 0:
            quote_items.append(QuoteItem(
                sku_id=item.sku_id,
                pickup_location_id=PickupLocation.SHOWROOM,
                display_name=item.display_name,
                cost=showroom_cost,
                area=piece_area,
                quantity=piece_count,
                unit=QuoteUnit.PIECES,
                weight=piece_count * details.lbs_per_unit,
                signatures=item.signatures,
            ))

        return quote_items
