"""Error types raised while resolving JDBC table connection metadata.

Configuration errors mean the caller has to fix its DDL properties or its
resource definitions and try again. Capability errors mean the remote
protocol cannot honour what the session asked for. Neither is retried.
"""

from __future__ import annotations

from enum import Enum


class ConfigErrorKind(str, Enum):
    """Classification of configuration failures."""

    MISSING_PROPERTY = "MISSING_PROPERTY"
    UNKNOWN_RESOURCE = "UNKNOWN_RESOURCE"
    WRONG_RESOURCE_KIND = "WRONG_RESOURCE_KIND"
    CONFLICTING_PROPERTIES = "CONFLICTING_PROPERTIES"
    MALFORMED_URI = "MALFORMED_URI"
    INVALID_RESOURCE_FILE = "INVALID_RESOURCE_FILE"


class ConfigurationError(ValueError):
    """Raised when table or resource configuration is incomplete or invalid."""

    def __init__(
        self, message: str, *, kind: ConfigErrorKind, key: str | None = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.key = key


class MissingPropertyError(ConfigurationError):
    """Raised when a required property is absent or empty."""

    def __init__(self, key: str, *, context: str | None = None) -> None:
        message = f"Missing '{key}' in properties."
        if context:
            message = f"Missing '{key}' in properties ({context})."
        super().__init__(message, kind=ConfigErrorKind.MISSING_PROPERTY, key=key)


class UnknownResourceError(ConfigurationError):
    """Raised when a named resource does not exist in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Resource '{name}' does not exist.",
            kind=ConfigErrorKind.UNKNOWN_RESOURCE,
            key=name,
        )
        self.name = name


class WrongResourceKindError(ConfigurationError):
    """Raised when a named resource exists but is not a JDBC resource."""

    def __init__(self, name: str, actual: str, expected: str) -> None:
        super().__init__(
            f"Resource '{name}' is of type {actual}, expected {expected}.",
            kind=ConfigErrorKind.WRONG_RESOURCE_KIND,
            key=name,
        )
        self.name = name
        self.actual = actual
        self.expected = expected


class UnsupportedCapabilityError(RuntimeError):
    """Raised when a JDBC protocol cannot propagate session variables."""

    def __init__(self, protocol: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            f"{protocol} protocol currently does not support session variable "
            "propagation via JDBC external table. "
            f"Supported protocols are: {', '.join(supported)}"
        )
        self.protocol = protocol
        self.supported = supported
