"""
Input validation rules for user records.

Pure functions only: each rule is a compiled regular expression matched against
the whole string. `validate_user_input` collects the failures keyed by the
wire field name so the API layer can return them unchanged.
"""

# Standard library imports
import re
from typing import Dict, Optional

# Local application imports
from ..domain.constants import UserFields


EMAIL_PATTERN = re.compile(
    r'(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@"
    r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)
# Letter runs joined by a separator plus a letter or space. Written without an
# optional group inside the repetition so failing input cannot backtrack exponentially.
FULL_NAME_PATTERN = re.compile(r"[a-zA-Z]+(?:[',. -][a-zA-Z ][a-zA-Z]*)*")
PASSWORD_PATTERN = re.compile(r"(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z]).{8,}")

EMAIL_ERROR = "Invalid email format"
FULL_NAME_ERROR = "Full name can only contain letters, spaces, apostrophes, hyphens, and periods"
PASSWORD_ERROR = (
    "Password must contain at least 8 characters, including one uppercase letter, "
    "one lowercase letter, and one number"
)


def is_valid_email(email: Optional[str]) -> bool:
    return EMAIL_PATTERN.fullmatch(email or "") is not None


def is_valid_full_name(full_name: Optional[str]) -> bool:
    return FULL_NAME_PATTERN.fullmatch(full_name or "") is not None


def is_valid_password(password: Optional[str]) -> bool:
    return PASSWORD_PATTERN.fullmatch(password or "") is not None


def validate_user_input(
    email: Optional[str],
    full_name: Optional[str],
    password: Optional[str],
) -> Dict[str, str]:
    """
    Check email, full name and password against their format rules.

    Args:
        email: Email address to check
        full_name: Full name to check
        password: Plain password to check

    Returns:
        Mapping of wire field name to error message; empty when all fields are valid
    """
    errors: Dict[str, str] = {}
    if not is_valid_email(email):
        errors[UserFields.EMAIL] = EMAIL_ERROR
    if not is_valid_full_name(full_name):
        errors[UserFields.FULL_NAME] = FULL_NAME_ERROR
    if not is_valid_password(password):
        errors[UserFields.PASSWORD] = PASSWORD_ERROR
    return errors
