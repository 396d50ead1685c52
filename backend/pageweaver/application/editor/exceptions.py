class PersistenceError(Exception):
    """The document store could not be read or written."""
