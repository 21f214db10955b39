class ExtractError(Exception):
    """Raised when the supplied text does not look like a unified diff."""
