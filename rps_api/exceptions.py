class StorageUnavailableError(RuntimeError):
    """The database could not be reached or failed while handling a request."""
