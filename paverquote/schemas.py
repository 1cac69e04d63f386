"""
Data contracts for the quote engine.

Input: Project (from the form layer) + StoneMetadata (from the data layer)
Output: Quote (to the summary/rendering layer and any persistence collaborator)

Coverage is a tagged union: FixedCoverage (absolute units or pattern repeats)
vs FractionalCoverage ("fr" weights that share whatever space is left).
"""

import enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# --- Enums ---

class Shape(str, enum.Enum):
    RECT = "rect"
    CIRCLE = "circle"
    OTHER = "other"


class LengthUnit(str, enum.Enum):
    FT = "ft"
    IN = "in"
    M = "m"
    CM = "cm"


class AreaUnit(str, enum.Enum):
    SQFT = "sqft"
    SQIN = "sqin"
    SQM = "sqm"
    SQCM = "sqcm"


class BorderOrientation(str, enum.Enum):
    SOLDIER_ROW = "SOLDIER_ROW"
    TIP_TO_TIP = "TIP_TO_TIP"

    @property
    def opposite(self) -> "BorderOrientation":
        if self is BorderOrientation.SOLDIER_ROW:
            return BorderOrientation.TIP_TO_TIP
        return BorderOrientation.SOLDIER_ROW


class AddonId(str, enum.Enum):
    SEALANT = "sealant"
    POLYMERIC = "polymeric"
    AREA_OVERAGE = "area_overage"
    REDUCE_PICKUPS = "reduce_pickups"


class PickupLocation(str, enum.Enum):
    FACTORY = "STT_FACTORY"
    SHOWROOM = "KNG_SHOWROOM"


class QuoteUnit(str, enum.Enum):
    PALLET = "pal"
    PIECES = "pcs"
    UNIT = "unit"


class Signature(str, enum.Enum):
    INFILL = "infill"
    BORDER = "border"


# --- Coverage vocabulary surfaced to pattern pickers ---

BORDER_COVERAGE_UNITS = ["fr", "ft", "in", "m", "cm"]
INFILL_COVERAGE_UNITS = ["fr", "sqft", "sqin", "sqm", "sqcm", "unit"]

FixedUnit = Literal["ft", "in", "m", "cm", "sqft", "sqin", "sqm", "sqcm", "unit"]


class FixedCoverage(BaseModel):
    """An absolute amount: a length, an area, or a count of pattern repeats."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    value: float = Field(ge=0)
    unit: FixedUnit


class FractionalCoverage(BaseModel):
    """A dimensionless weight against the capacity left after fixed patterns."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    value: float = Field(ge=0)
    unit: Literal["fr"] = "fr"


Coverage = Annotated[Union[FixedCoverage, FractionalCoverage], Field(discriminator="unit")]


# --- Project (input) ---

class StoneRef(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    sku_id: str
    quantity: float = Field(default=1, ge=0)  # pieces per repeat of the pattern


class Pattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    coverage: Coverage
    contents: List[StoneRef] = []

    @property
    def is_fractional(self) -> bool:
        return isinstance(self.coverage, FractionalCoverage)


class Measurements(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    unit: LengthUnit = LengthUnit.FT
    width: float = Field(default=0, ge=0)
    length: float = Field(default=0, ge=0)
    radius: float = Field(default=0, ge=0)
    area: float = Field(default=0, ge=0)
    running_length: float = Field(default=0, ge=0)


class Infill(BaseModel):
    model_config = ConfigDict(frozen=True)

    contents: List[Pattern] = []


class BorderRunningLength(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    value: float = Field(default=0, ge=0)
    unit: Union[LengthUnit, Literal["auto"]] = "auto"


class Border(BaseModel):
    model_config = ConfigDict(frozen=True)

    running_length: BorderRunningLength = BorderRunningLength()
    orientation: BorderOrientation = BorderOrientation.SOLDIER_ROW
    contents: List[Pattern] = []


class Addon(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: AddonId
    enabled: bool = False
    display_name: str = ""
    description: str = ""


DEFAULT_ADDONS = [
    Addon(
        id=AddonId.SEALANT,
        display_name="Add Sealant",
        description="Enhance the color of your stones. Protect them from the elements.",
    ),
    Addon(
        id=AddonId.POLYMERIC,
        display_name="Add Polymeric Sand",
        description="Prevent your pavers from shifting. Reduce weed growth between them.",
    ),
    Addon(
        id=AddonId.AREA_OVERAGE,
        display_name="5% Overage",
        description="For repairs and adjustments; Future batches may not match exactly.",
    ),
    Addon(
        id=AddonId.REDUCE_PICKUPS,
        display_name="Reduce Pickups",
        description="Order items from a single location and reduce the amount of pickups required.",
    ),
]


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: Shape
    measurements: Measurements = Measurements()
    infill: Infill = Infill()
    border: Border = Border()
    addons: List[Addon] = []

    def addon_enabled(self, addon_id: AddonId) -> bool:
        return any(a.id == addon_id and a.enabled for a in self.addons)


def default_project(shape: Shape = Shape.RECT) -> Project:
    """Empty project as the quote form seeds it: no patterns, every add-on off."""
    return Project(shape=shape, addons=list(DEFAULT_ADDONS))


# --- Catalog metadata (resolved externally) ---

class ConversionFactors(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    SOLDIER_ROW: float = Field(gt=0)
    TIP_TO_TIP: float = Field(gt=0)

    def for_orientation(self, orientation: BorderOrientation) -> float:
        return getattr(self, orientation.value)


class PaverDetails(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    type: Literal["paver"] = "paver"
    lbs_per_unit: float = Field(ge=0)
    sqft_per_pallet: float = Field(gt=0)
    pcs_per_pallet: float = Field(ge=0)
    pcs_per_sqft: float = Field(gt=0)
    conversion_factors: Optional[ConversionFactors] = None


class StoneMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    sku_id: str
    display_name: str
    price: float = Field(ge=0)  # per sqft
    unit: str = "sqft"
    details: PaverDetails


# --- Intermediate allocation results ---

class StoneCoverage(BaseModel):
    """One allocator contribution: sqft of a single stone, tagged by caller."""
    sku_id: str
    sqft_coverage: float
    signatures: List[Signature]


class Allocation(BaseModel):
    area: float
    items: List[StoneCoverage] = []


class MergedItem(BaseModel):
    """All coverage for one SKU across infill and border, joined with its metadata."""
    sku_id: str
    display_name: str
    price: float
    details: PaverDetails
    sqft_coverage: float
    signatures: List[Signature]


# --- Quote (output) ---

class QuoteItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku_id: str
    pickup_location_id: PickupLocation
    display_name: str
    cost: float
    area: Optional[float] = None
    quantity: float
    unit: QuoteUnit
    weight: float
    signatures: List[Signature] = []


class QuoteDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_area: float = 0.0
    total_weight: float = 0.0
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: List[QuoteItem] = []
    details: QuoteDetails = QuoteDetails()
