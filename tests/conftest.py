"""
Shared test fixtures — stone metadata and catalogs.

Figures match the storefront catalog (Colonial Classic Grey, Banjo Grey).
"""

import pytest

from paverquote.schemas import ConversionFactors, PaverDetails, StoneMetadata


def _stone(sku_id, display_name, price, pcs_per_sqft, sqft_per_pallet,
           pcs_per_pallet, lbs_per_unit, conversion_factors=None):
    return StoneMetadata(
        sku_id=sku_id,
        display_name=display_name,
        price=price,
        details=PaverDetails(
            lbs_per_unit=lbs_per_unit,
            sqft_per_pallet=sqft_per_pallet,
            pcs_per_pallet=pcs_per_pallet,
            pcs_per_sqft=pcs_per_sqft,
            conversion_factors=conversion_factors,
        ),
    )


@pytest.fixture
def colonial():
    """Border-capable stone: 4.66 pcs/sqft, 128.75 sqft/pallet, $203/sqft."""
    return _stone(
        "colonial_classic:grey", "Colonial Classic Grey", 203,
        pcs_per_sqft=4.66, sqft_per_pallet=128.75, pcs_per_pallet=600, lbs_per_unit=5,
        conversion_factors=ConversionFactors(SOLDIER_ROW=0.675, TIP_TO_TIP=0.338),
    )


@pytest.fixture
def banjo():
    """Infill-only stone — no conversion factors."""
    return _stone(
        "banjo:grey", "Banjo Grey", 219,
        pcs_per_sqft=3.5, sqft_per_pallet=128.57, pcs_per_pallet=450, lbs_per_unit=6.67,
    )


@pytest.fixture
def big_pallet():
    """Same piece size as colonial, but a half pallet (125 sqft) exceeds 100 sqft."""
    return _stone(
        "big_pallet:grey", "Big Pallet Grey", 203,
        pcs_per_sqft=4.66, sqft_per_pallet=250, pcs_per_pallet=1165, lbs_per_unit=5,
        conversion_factors=ConversionFactors(SOLDIER_ROW=0.675, TIP_TO_TIP=0.338),
    )


@pytest.fixture
def catalog(colonial, banjo, big_pallet):
    """Plain dict lookup — the engine only needs .get(sku_id)."""
    return {s.sku_id: s for s in (colonial, banjo, big_pallet)}
