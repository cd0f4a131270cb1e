class MalformedDocumentError(ValueError):
    """Raised when JSON Feed data is not an object of the expected shape."""
