"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StoreError(PersistenceError):
    """The database failed to carry out a statement.

    The message stays generic; the underlying SQLAlchemy error is chained
    as ``__cause__`` for logs.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Database error during {operation}")
