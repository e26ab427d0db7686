class EphemcoreError(Exception):
    """Base error."""

class InvalidBodyError(EphemcoreError):
    """Raised when a body is not supported by the requested operation."""
    def __init__(self, body=None):
        msg = "Invalid astronomical body." if body is None else f"Invalid astronomical body: {body}"
        super().__init__(msg)

class EarthNotAllowedError(InvalidBodyError):
    """Raised when the Earth is passed where an observed body is required."""
    def __init__(self):
        EphemcoreError.__init__(self, "The Earth is not allowed as the body.")

class InvalidArgumentError(EphemcoreError, ValueError):
    """Out-of-range angle, hour angle, axis selector or search limit."""

class DateTimeFormatError(EphemcoreError, ValueError):
    def __init__(self, text: str):
        super().__init__(f'The date/time string is not valid: "{text}"')

class BadVectorError(EphemcoreError):
    """Vector is too small to have a direction."""
    def __init__(self, msg: str = "Vector is too small to have a direction."):
        super().__init__(msg)

class TimeMismatchError(EphemcoreError):
    """Arithmetic between vectors valid at different instants."""

class NoConvergeError(EphemcoreError):
    """A numeric solver exceeded its iteration ceiling."""
    def __init__(self, msg: str = "Numeric solver did not converge."):
        super().__init__(msg)

class InternalError(EphemcoreError):
    """An internal invariant was violated."""
    def __init__(self, msg: str = "Internal error."):
        super().__init__(msg)
