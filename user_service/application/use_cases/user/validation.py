# Local application imports
from ....domain.exceptions import UserValidationError


EMAIL_REQUIRED = "email is required"
NAME_REQUIRED = "name is required"


def validate_email(email: str) -> None:
    """Reject an empty email"""
    if email == "":
        raise UserValidationError(EMAIL_REQUIRED)


def validate_user_fields(email: str, name: str) -> None:
    """
    Reject an empty email or name, checking email first

    Raises:
        UserValidationError: With EMAIL_REQUIRED or NAME_REQUIRED
    """
    validate_email(email)
    if name == "":
        raise UserValidationError(NAME_REQUIRED)
