"""Domain exceptions for field types.

Defines domain-level exceptions raised when callers hand a field type a
value of the wrong shape, or ask the registry for a type it does not hold.
The hosting platform maps them to its own error responses.
"""

from typing import Any


class RepositoryException(Exception):
    """Base exception for all field type errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging by the hosting platform.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. argument_name, identifier).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentException(RepositoryException):
    """Raised when an argument passed to a field type operation is invalid."""

    def __init__(
        self,
        argument_name: str,
        message: str,
        error_code: str = "INVALID_ARGUMENT",
        details_extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending argument name and a message.

        Args:
            argument_name: Name of the argument (e.g. 'input_value').
            message: Description of why the argument is invalid.
            error_code: Machine-readable code; subclasses narrow it.
            details_extra: Optional keys merged into details.
        """
        details = {"argument_name": argument_name, **(details_extra or {})}
        super().__init__(
            f"Argument '{argument_name}' is invalid: {message}", error_code, details
        )


class InvalidArgumentType(InvalidArgumentException):
    """Raised when an argument is not of the type an operation accepts."""

    def __init__(self, argument_name: str, expected_type: str, value: Any) -> None:
        """Initialize with argument name, expected type, and the received value.

        Args:
            argument_name: Name of the argument that was rejected.
            expected_type: Human-readable accepted type (e.g. 'int|str').
            value: The value actually received; only its type is reported.
        """
        actual_type = type(value).__name__
        super().__init__(
            argument_name,
            f"expected value to be of type '{expected_type}', got '{actual_type}'",
            "INVALID_ARGUMENT_TYPE",
            {"expected_type": expected_type, "actual_type": actual_type},
        )


class FieldTypeNotFoundException(RepositoryException):
    """Raised when no field type is registered for an identifier."""

    def __init__(self, identifier: str) -> None:
        """Initialize with the unknown identifier.

        Args:
            identifier: Field type identifier that was looked up.
        """
        super().__init__(
            f"Field type not found: {identifier}",
            "FIELD_TYPE_NOT_FOUND",
            {"identifier": identifier},
        )


class FieldTypeAlreadyRegisteredException(RepositoryException):
    """Raised when registering a field type whose identifier is taken."""

    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"Field type '{identifier}' is already registered",
            "FIELD_TYPE_ALREADY_REGISTERED",
            {"identifier": identifier},
        )
