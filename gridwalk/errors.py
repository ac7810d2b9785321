"""Exceptions raised for grid configuration misuse."""


class GridConfigError(ValueError):
    """Raised when a grid is configured or loaded inconsistently.

    Examples are dimensions above the configured maximum, reconfiguring a
    loaded grid to a different extent, or a load source that runs out of
    symbols before every cell is filled.
    """
