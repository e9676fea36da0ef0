class FormatError(ValueError):
    """Raised when a value cannot be read as a birth number."""
