"""
Grievances module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)


class GrievanceNotFoundError(NotFoundError):
    """Raised when a grievance is not found."""

    def __init__(self, grievance_id: str):
        super().__init__(
            f"Grievance not found: {grievance_id}",
            code="GRIEVANCE_NOT_FOUND",
            details={"grievance_id": grievance_id},
        )


class GrievanceAccessDeniedError(AuthorizationError):
    """Raised when someone other than the reporter tries to delete a grievance."""

    def __init__(self, grievance_id: str, user_id: str):
        super().__init__(
            f"Access denied to grievance: {grievance_id}",
            code="GRIEVANCE_ACCESS_DENIED",
            details={"grievance_id": grievance_id, "user_id": user_id},
        )


class InvalidTransitionError(ValidationError):
    """Raised when the staff workflow does not offer a status change."""

    def __init__(self, grievance_id: str, current: str, requested: str):
        super().__init__(
            f"Cannot move grievance {grievance_id} from {current} to {requested}",
            code="INVALID_TRANSITION",
            details={
                "grievance_id": grievance_id,
                "current": current,
                "requested": requested,
            },
        )


class InvalidLocationError(ValidationError):
    """Raised when a grievance names a ward outside the municipality."""

    def __init__(self, ward: str):
        super().__init__(
            f"Unknown ward: {ward}",
            code="INVALID_LOCATION",
            details={"ward": ward},
        )
