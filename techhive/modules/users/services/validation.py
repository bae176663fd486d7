"""
User Request Validation

Presence and format checks for create/update payloads. These are pure
functions and never touch the repository.
"""
import re
from typing import Dict, List, Optional

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email.strip()) is not None


def validate_create(request) -> Dict[str, List[str]]:
    """
    Check a create request.

    Returns a mapping of field name to error messages; an empty mapping
    means the request is valid.
    """
    errors: Dict[str, List[str]] = {}

    if is_blank(request.first_name):
        errors["FirstName"] = ["FirstName is required."]

    if is_blank(request.last_name):
        errors["LastName"] = ["LastName is required."]

    if is_blank(request.email):
        errors["Email"] = ["Email is required."]
    elif not is_valid_email(request.email):
        errors["Email"] = ["Email format is invalid."]

    return errors


def validate_update(request) -> Dict[str, List[str]]:
    """Only a provided, non-blank email is checked on update."""
    errors: Dict[str, List[str]] = {}

    if not is_blank(request.email) and not is_valid_email(request.email):
        errors["Email"] = ["Email format is invalid."]

    return errors
