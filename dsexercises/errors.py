class InvalidArgument(ValueError):
    """Raised when a caller passes an argument the routine cannot work with."""
