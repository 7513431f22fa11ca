"""
Service-layer error taxonomy

Each family maps to one HTTP status at the API boundary:
NotFoundError -> 404, ConflictError -> 409, ValidationError -> 400,
AuthorizationError -> 403.
"""


class BookingServiceError(Exception):
    """Base exception for booking service errors"""
    status_code = 500


class NotFoundError(BookingServiceError):
    status_code = 404


class ConflictError(BookingServiceError):
    status_code = 409


class ValidationError(BookingServiceError):
    status_code = 400


class AuthorizationError(BookingServiceError):
    status_code = 403


class FlightNotFoundError(NotFoundError):
    """Raised when flight doesn't exist"""


class SeatNotFoundError(NotFoundError):
    """Raised when a seat doesn't exist on the flight being booked"""


class BookingNotFoundError(NotFoundError):
    """Raised when booking doesn't exist"""


class SeatAlreadyTakenError(ConflictError):
    """Raised when at least one requested seat is no longer available"""


class PNRGenerationError(ConflictError):
    """Raised when no unique PNR could be generated within the retry bound"""


class FlightNotBookableError(ValidationError):
    """Raised when the flight is not in scheduled status"""


class SeatClassMismatchError(ValidationError):
    """Raised when a seat's cabin class differs from the requested one"""


class SeatPassengerMismatchError(ValidationError):
    """Raised when seat count and passenger count differ"""


class InvalidBookingTransitionError(ValidationError):
    """Raised when a status change is not allowed from the current status"""


class BookingAccessDeniedError(AuthorizationError):
    """Raised when the requester is neither the owner nor an admin"""
