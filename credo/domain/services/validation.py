"""Structural input checks shared by registration and password reset."""

from typing import Dict, Optional, Tuple

from credo.core.exceptions import ValidationError
from credo.domain.value_objects.email import Email
from credo.domain.value_objects.password import Password
from credo.utils.i18n import get_translated_message


def check_email(email: str, errors: Dict[str, str], field: str = "email") -> Optional[Email]:
    try:
        return Email(email or "")
    except ValueError as e:
        errors[field] = str(e)
        return None


def check_new_password(
    password: str,
    confirm_password: str,
    errors: Dict[str, str],
    field: str = "password",
    confirm_field: str = "confirm_password",
) -> Optional[Password]:
    """Applies the length policy and the confirmation-equality check."""
    candidate = None
    try:
        candidate = Password(password)
    except ValueError as e:
        errors[field] = str(e)
    if password != confirm_password:
        errors[confirm_field] = "passwords_do_not_match"
    return candidate


def raise_if_invalid(errors: Dict[str, str], language: str) -> None:
    """Raises one `ValidationError` naming every failing field."""
    if not errors:
        return
    message = "; ".join(get_translated_message(key, language) for key in errors.values())
    raise ValidationError(message, fields=list(errors))


def validate_registration(
    email: str, password: str, confirm_password: str, language: str
) -> Tuple[Email, Password]:
    errors: Dict[str, str] = {}
    email_vo = check_email(email, errors)
    password_vo = check_new_password(password, confirm_password, errors)
    raise_if_invalid(errors, language)
    return email_vo, password_vo
