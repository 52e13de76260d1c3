"""
Error types raised by the separation models.
"""


class InvalidInstance(ValueError):
    """
    Raised when an instance cannot be loaded: missing or unreadable source,
    zero points, a declared count that does not match the pairs supplied,
    or coordinates outside the first quadrant.
    """

    def __init__(self, reason: str, instance=None):
        self.reason = reason
        self.instance = instance
        super().__init__(self._message())

    def _message(self):
        if self.instance is None:
            return self.reason
        return f"instance {self.instance}: {self.reason}"

    def with_instance(self, instance):
        """Return a copy of this error tagged with an instance name."""
        return InvalidInstance(self.reason, instance)


class ConnectivityInvariantError(AssertionError):
    """
    The connectivity bookkeeping disagrees with itself.
    This is a bug, never a data problem, and is not meant to be caught.
    """
