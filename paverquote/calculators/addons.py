"""
Add-on items — sealant, polymeric sand, and the area-overage inflation.

Sealant and sand are sized from the project area (before overage).
Reduce-pickups produces no items; FulfillmentSplitter consumes the flag.
"""

from ..config import settings
from ..rounding import round_fraction_digits, round_to
from ..schemas import PickupLocation, QuoteItem, QuoteUnit


class AddonComputer:

    # Oil-based sealant: 5 gal covers 500 sqft, 1 gal covers 100 sqft
    FIVE_GAL_SEALANT_SQFT = 500
    FIVE_GAL_SEALANT_PRICE = 25826.09
    FIVE_GAL_SEALANT_LBS = 25
    ONE_GAL_SEALANT_SQFT = 100
    ONE_GAL_SEALANT_PRICE = 5913.04
    ONE_GAL_SEALANT_LBS = 5

    # Polymeric sand: one 50 lb bag per 100 sqft
    POLYMERIC_BAG_SQFT = 100
    POLYMERIC_BAG_PRICE = 2695.65
    POLYMERIC_BAG_LBS = 50

    def __init__(self, overage_multiplier: float = None):
        if overage_multiplier is None:
            overage_multiplier = settings.AREA_OVERAGE_MULTIPLIER
        self.overage_multiplier = overage_multiplier

    def apply_overage(self, items: list) -> list:
        """Inflate every merged item's coverage. Returns new items; inputs untouched."""
        return [
            item.model_copy(update={"sqft_coverage": item.sqft_coverage * self.overage_multiplier})
            for item in items
        ]

    def sealant(self, area: float) -> list:
        """5-gallon pails from the factory, topped up with 1-gallon cans from the showroom."""
        five_gal_coverage = round_to(area, self.FIVE_GAL_SEALANT_SQFT, "down")
        five_gal_quantity = five_gal_coverage / self.FIVE_GAL_SEALANT_SQFT
        one_gal_coverage = round_to(area - five_gal_coverage, self.ONE_GAL_SEALANT_SQFT, "up")
        one_gal_quantity = one_gal_coverage / self.ONE_GAL_SEALANT_SQFT

        five_gal_price = round_fraction_digits(self.FIVE_GAL_SEALANT_PRICE * five_gal_quantity, 2)
        one_gal_price = round_fraction_digits(self.ONE_GAL_SEALANT_PRICE * one_gal_quantity, 2)

        items = []
        if five_gal_price:
            items.append(QuoteItem(
                sku_id="oil_sealant:five_gallon",
                pickup_location_id=PickupLocation.FACTORY,
                display_name="DYNA Oil-Based Sealant (5 gallon)",
                cost=five_gal_price,
                quantity=five_gal_quantity,
                unit=QuoteUnit.UNIT,
                weight=five_gal_quantity * self.FIVE_GAL_SEALANT_LBS,
            ))
        if one_gal_price:
            items.append(QuoteItem(
                sku_id="oil_sealant:one_gallon",
                pickup_location_id=PickupLocation.SHOWROOM,
                display_name="DYNA Oil-Based Sealant (1 gallon)",
                cost=one_gal_price,
                quantity=one_gal_quantity,
                unit=QuoteUnit.UNIT,
                weight=one_gal_quantity * self.ONE_GAL_SEALANT_LBS,
            ))
        return items

    def polymeric_sand(self, area: float) -> QuoteItem:
        """Always one factory line, even for a zero-area project."""
        coverage = round_to(area, self.POLYMERIC_BAG_SQFT, "up")
        quantity = coverage / self.POLYMERIC_BAG_SQFT

        return QuoteItem(
            sku_id="polymeric_sand:fifty_pound",
            pickup_location_id=PickupLocation.FACTORY,
            display_name="DYNA Polymeric Sand (50 pound)",
            cost=round_fraction_digits(self.POLYMERIC_BAG_PRICE * quantity, 2),
            quantity=quantity,
            unit=QuoteUnit.UNIT,
            weight=quantity * self.POLYMERIC_BAG_LBS,
        )
