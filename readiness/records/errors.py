"""Error types for the load record source."""


class SourceUnavailableError(RuntimeError):
    """Raised when the record store cannot be read (connectivity, query error).

    Readiness computations do not catch or retry this; it reaches the
    caller unchanged and is translated at the HTTP boundary.
    """
