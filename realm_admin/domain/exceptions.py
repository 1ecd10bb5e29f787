"""Domain exceptions for the realm administration service.

Defines domain-level exceptions that represent business rule violations
and collaborator failures. These exceptions are independent of
infrastructure concerns. Presentation layer maps them to HTTP responses
in exception handlers.
"""

from typing import Any


class RealmAdminException(Exception):
    """Base exception for all realm-admin application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
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

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RealmAdminException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(RealmAdminException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(RealmAdminException):
    """Raised when the acting user may not administer the realm."""

    def __init__(
        self,
        realm_id: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional realm and message.

        Args:
            realm_id: Realm the user attempted to act on.
            message: Human-readable message.
        """
        details: dict[str, Any] = {}
        if realm_id:
            message = f"Permission denied for realm {realm_id}"
            details["realm_id"] = realm_id
        super().__init__(message, "PERMISSION_DENIED", details)


class RealmNotFoundException(RealmAdminException):
    """Raised when a requested realm is not found."""

    def __init__(self, realm_id: str) -> None:
        super().__init__(
            f"Realm not found: {realm_id}",
            "REALM_NOT_FOUND",
            {"realm_id": realm_id},
        )


class ResourceNotFoundException(RealmAdminException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user', 'realm').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SqlNotConfiguredException(RealmAdminException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class IdentityProviderNotConfiguredException(RealmAdminException):
    """Raised when the Firebase service account is missing or failed to load."""

    def __init__(self) -> None:
        super().__init__(
            message="Identity provider is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class UserLookupException(RealmAdminException):
    """Raised when finding a user by email fails for a reason other than not-found."""

    def __init__(self, email: str, reason: str) -> None:
        super().__init__(
            f"failed to look up user {email}: {reason}",
            "USER_LOOKUP_FAILED",
            {"email": email, "reason": reason},
        )


class IdentityProvisioningException(RealmAdminException):
    """Raised when the external identity account could not be checked or created."""

    def __init__(self, email: str, reason: str) -> None:
        super().__init__(
            f"failed to provision identity account for {email}: {reason}",
            "IDENTITY_PROVISIONING_FAILED",
            {"email": email, "reason": reason},
        )


class CredentialNotificationException(RealmAdminException):
    """Raised when the credential-reset notification could not be sent."""

    def __init__(self, email: str, reason: str) -> None:
        super().__init__(
            f"failed to send password reset to {email}: {reason}",
            "CREDENTIAL_NOTIFICATION_FAILED",
            {"email": email, "reason": reason},
        )


class UserPersistenceException(RealmAdminException):
    """Raised when saving a user and its audit entry did not commit."""

    def __init__(self, email: str, reason: str) -> None:
        super().__init__(
            f"failed to save user {email}: {reason}",
            "USER_PERSISTENCE_FAILED",
            {"email": email, "reason": reason},
        )


class UnknownAuditKindException(RealmAdminException):
    """Raised when an audit entry references a target/source kind with no loader."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"unknown polymorphic association {kind!r}",
            "UNKNOWN_AUDIT_KIND",
            {"kind": kind},
        )
