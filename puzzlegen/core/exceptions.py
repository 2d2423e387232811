"""Custom exception hierarchy for puzzle generation."""


class PuzzleError(Exception):
    """Base exception for generator failures."""


class InvalidShapeError(PuzzleError):
    """Raised when a number-grid shape cannot describe a solvable board."""


class UnsolvableBoardError(PuzzleError):
    """Raised when backtracking exhausts every candidate without a full board."""


class InvalidGridSizeError(PuzzleError):
    """Raised when a search grid is smaller than the supported minimum."""


class InvalidWordError(PuzzleError):
    """Raised when the requested word list cannot be used for a search grid."""


class ValidationError(PuzzleError):
    """Raised when a generated board fails its integrity checks."""


class StoreError(PuzzleError):
    """Raised when a stored puzzle document is missing or unreadable."""
