from .catalog import StoneCatalog, load_catalog
from .errors import (
    DegeneratePatternError,
    InvalidBorderStoneError,
    MissingStoneMetadataError,
    QuoteInputError,
)
from .pricing_engine import QuoteEngine, compute_quote
from .schemas import Project, Quote, QuoteItem, StoneMetadata, default_project

__all__ = [
    "DegeneratePatternError",
    "InvalidBorderStoneError",
    "MissingStoneMetadataError",
    "Project",
    "Quote",
    "QuoteEngine",
    "QuoteInputError",
    "QuoteItem",
    "StoneCatalog",
    "StoneMetadata",
    "compute_quote",
    "default_project",
    "load_catalog",
]
