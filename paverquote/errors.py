"""
Input validation errors raised out of compute_quote.

None of these are transient: the caller fixes the project or the catalog
and calls again.
"""

from typing import Any, Dict, Optional


class QuoteInputError(ValueError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingStoneMetadataError(QuoteInputError):
    def __init__(self, sku_id: str) -> None:
        super().__init__(
            f"Stone with the id '{sku_id}' not found in the catalog.",
            {"sku_id": sku_id},
        )
        self.sku_id = sku_id


class InvalidBorderStoneError(QuoteInputError):
    def __init__(self, sku_id: str) -> None:
        super().__init__(
            f"Stone {sku_id} can not be used as a border",
            {"sku_id": sku_id},
        )
        self.sku_id = sku_id


class DegeneratePatternError(QuoteInputError):
    def __init__(self, sku_ids: list, target: float) -> None:
        super().__init__(
            f"Pattern of {sku_ids or 'no stones'} has zero size but must cover {target:g}. "
            f"Give at least one stone a quantity above zero.",
            {"sku_ids": list(sku_ids), "target": target},
        )
        self.sku_ids = list(sku_ids)
        self.target = target
