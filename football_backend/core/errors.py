# errors.py
# Domain error taxonomy. Services raise these; the HTTP layer maps ErrorKind -> status code.

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


class DomainError(Exception):
    """Base class for every error a service can surface to the API boundary."""
    kind: ErrorKind = ErrorKind.VALIDATION
    message: str = "Domain error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


# =========================================
# NotFound family
# =========================================
class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND
    message = "Resource not found"


class TeamNotFound(NotFoundError):
    message = "Team not found"


class PlayerNotFound(NotFoundError):
    message = "Player not found"


class MatchNotFound(NotFoundError):
    message = "Match not found"


class UserNotFound(NotFoundError):
    message = "User not found"


# =========================================
# Validation family
# =========================================
class ValidationError(DomainError):
    kind = ErrorKind.VALIDATION
    message = "Invalid input"


class SameTeamMatch(ValidationError):
    message = "Home team and away team cannot be the same"


class InvalidPosition(ValidationError):
    message = "Invalid player position"


class InvalidJerseyNumber(ValidationError):
    message = "Jersey number must be between 1 and 99"


class InvalidMatchStatus(ValidationError):
    message = "Invalid match status"


class InvalidStatusTransition(ValidationError):
    message = "Match status transition is not allowed"

    def __init__(self, current: str = None, requested: str = None):
        detail = None
        if current is not None and requested is not None:
            detail = f"Cannot change match status from '{current}' to '{requested}'"
        super().__init__(detail)
        self.current = current
        self.requested = requested


# =========================================
# Conflict family
# =========================================
class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT
    message = "Resource already exists"


class JerseyNumberTaken(ConflictError):
    message = "Jersey number is already taken by another player in this team"


class UserAlreadyExists(ConflictError):
    message = "User with this email already exists"


# =========================================
# Auth family
# =========================================
class AuthError(DomainError):
    kind = ErrorKind.UNAUTHORIZED
    message = "Not authenticated"


class InvalidCredentials(AuthError):
    message = "Invalid email or password"


class InvalidToken(AuthError):
    message = "Invalid token"


class ExpiredToken(AuthError):
    message = "Token has expired"


class AdminRequired(DomainError):
    kind = ErrorKind.FORBIDDEN
    message = "Admin access required"
