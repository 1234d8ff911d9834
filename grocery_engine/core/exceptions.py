"""
Errors raised by the grocery engine.

Almost every ambiguous input degrades to a best-effort result instead of
raising; the empty batch is the one caller error that is refused.
"""


class GroceryEngineError(Exception):
    """Base class for engine errors."""


class EmptyIngredientBatchError(GroceryEngineError, ValueError):
    """Raised when aggregation is asked to process no ingredients at all."""

    def __init__(self, message: str = "No ingredients to aggregate: empty input"):
        super().__init__(message)
