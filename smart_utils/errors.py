"""
Error Taxonomy.

Only InvalidArgumentError reaches callers. Capability failures are
recovered into sentinel values by the public helpers.
"""


class SmartUtilsError(Exception):
    """Base class for all smart_utils errors."""

    pass


class InvalidArgumentError(SmartUtilsError, ValueError):
    """Raised for caller-fixable precondition violations."""

    def __init__(self, name: str, value: object, message: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid argument {name}={value!r}: {message}")


class UnavailableCapabilityError(SmartUtilsError):
    """Raised when a host platform or device query cannot be answered."""

    pass
