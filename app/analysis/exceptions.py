class CatalogError(Exception):
    """Raised when the document type catalog cannot be loaded or is malformed."""
