class DatasetLoadFailure(Exception):
    """Raised when the cell dataset cannot be fetched or parsed."""
    pass
