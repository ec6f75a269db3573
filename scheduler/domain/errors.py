class SchedulerError(Exception):
    """Base class for errors raised by the review scheduler."""


class InvalidInput(SchedulerError, ValueError):
    """Rating outside 1-4 or a missing identifier."""


class NotFound(SchedulerError, LookupError):
    """A user or flashcard reference could not be resolved."""


class PersistenceFailure(SchedulerError):
    """The database rejected or failed a read or write."""
