"""
Fulfillment splitter tests — half pallets from the factory, pieces from the showroom.
"""

import pytest

from paverquote.calculators.fulfillment import FulfillmentSplitter
from paverquote.rounding import round_fraction_digits, round_to
from paverquote.schemas import MergedItem, PickupLocation, QuoteUnit, Signature


def _merged(stone, sqft_coverage, signatures=(Signature.INFILL,)):
    return MergedItem(
        sku_id=stone.sku_id,
        display_name=stone.display_name,
        price=stone.price,
        details=stone.details,
        sqft_coverage=sqft_coverage,
        signatures=list(signatures),
    )


def _by_location(items):
    return {item.pickup_location_id: item for item in items}


def test_100_sqft_splits_half_pallet_and_pieces(colonial):
    """100 sqft of colonial: one half pallet (64.375 sqft) + the rest as pieces."""
    items = _by_location(FulfillmentSplitter().split(_merged(colonial, 100)))

    factory = items[PickupLocation.FACTORY]
    assert factory.unit == QuoteUnit.PALLET
    assert factory.quantity == 0.5
    assert factory.area == pytest.approx(64.38)
    assert factory.cost == pytest.approx(13069.14)
    assert factory.weight == pytest.approx(0.5 * 600 * 5)

    showroom = items[PickupLocation.SHOWROOM]
    assert showroom.unit == QuoteUnit.PIECES
    assert showroom.area == pytest.approx(35.62)
    assert showroom.quantity == 166
    assert showroom.cost == pytest.approx(35.62 * 223, abs=0.01)
    assert showroom.weight == pytest.approx(166 * 5)


def test_below_half_pallet_is_showroom_only(big_pallet):
    """Half pallet of 125 sqft > 100 sqft: no pallets, everything by the piece."""
    items = FulfillmentSplitter().split(_merged(big_pallet, 100))

    assert len(items) == 1
    showroom = items[0]
    expected_area = round_fraction_digits(round_to(100, 1 / 4.66, "up"), 2)
    assert showroom.pickup_location_id == PickupLocation.SHOWROOM
    assert showroom.area == pytest.approx(expected_area)
    assert showroom.quantity == round(expected_area * 4.66)
    assert showroom.cost == pytest.approx(round_fraction_digits(expected_area * 223, 2))


def test_reduce_pickups_rounds_pallets_up(colonial):
    """Reduce pickups: 100 sqft becomes two half pallets, no showroom line."""
    items = FulfillmentSplitter().split(_merged(colonial, 100), reduce_pickups=True)

    assert len(items) == 1
    factory = items[0]
    assert factory.pickup_location_id == PickupLocation.FACTORY
    assert factory.quantity == 1.0
    assert factory.area == pytest.approx(128.75)
    assert factory.cost == pytest.approx(26136.25)


@pytest.mark.parametrize("coverage", [0.1, 10, 64.375, 100, 250.3, 1000])
def test_pallet_and_piece_cover_the_stone(colonial, coverage):
    """palletArea + pieceArea >= coverage (to the cent), both non-negative."""
    items = _by_location(FulfillmentSplitter().split(_merged(colonial, coverage)))
    pallet_area = items[PickupLocation.FACTORY].area if PickupLocation.FACTORY in items else 0
    piece_area = items[PickupLocation.SHOWROOM].area if PickupLocation.SHOWROOM in items else 0

    assert pallet_area >= 0
    assert piece_area >= 0
    assert pallet_area + piece_area >= coverage - 0.01


@pytest.mark.parametrize("coverage", [0.1, 64.375, 100, 250.3])
def test_reduce_pickups_never_has_pieces(colonial, coverage):
    items = FulfillmentSplitter().split(_merged(colonial, coverage), reduce_pickups=True)
    assert all(item.pickup_location_id == PickupLocation.FACTORY for item in items)
    assert sum(item.area for item in items) >= coverage


def test_zero_coverage_has_no_items(colonial):
    assert FulfillmentSplitter().split(_merged(colonial, 0)) == []


def test_unit_implies_location(colonial):
    for item in FulfillmentSplitter().split(_merged(colonial, 300)):
        if item.unit == QuoteUnit.PALLET:
            assert item.pickup_location_id == PickupLocation.FACTORY
        else:
            assert item.unit == QuoteUnit.PIECES
            assert item.pickup_location_id == PickupLocation.SHOWROOM


def test_signatures_carry_through(colonial):
    items = FulfillmentSplitter().split(
        _merged(colonial, 100, signatures=(Signature.INFILL, Signature.BORDER)),
    )
    for item in items:
        assert item.signatures == [Signature.INFILL, Signature.BORDER]


def test_showroom_markup_is_configurable(colonial):
    items = _by_location(FulfillmentSplitter(showroom_markup=0).split(_merged(colonial, 100)))
    showroom = items[PickupLocation.SHOWROOM]
    assert showroom.cost == pytest.approx(round_fraction_digits(showroom.area * 203, 2))


def test_pallet_count_survives_cent_rounding(banjo):
    """Half pallet of 64.285 sqft rounds to cents below itself; the half pallet still counts."""
    items = _by_location(FulfillmentSplitter().split(_merged(banjo, 100)))

    factory = items[PickupLocation.FACTORY]
    assert factory.quantity == 0.5
    assert factory.area == pytest.approx(64.285, abs=0.01)
    assert factory.weight == pytest.approx(0.5 * 450 * 6.67)
