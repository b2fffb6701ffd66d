"""Password strength policy for new accounts."""

import re

from folio.domain.error import ValidationError

MIN_PASSWORD_LENGTH = 8


def password_errors(password: str) -> list[str]:
    """Collect every rule the password breaks, in display order."""
    errors = []
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append("Password must be at least 8 characters long")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"\d", password):
        errors.append("Password must contain at least one number")
    return errors


def check_password(password: str | None) -> None:
    """Raise on the first broken rule.

    Raises:
        ValidationError: With field ``password``
    """
    if not password:
        raise ValidationError("Password is required", field="password")
    errors = password_errors(password)
    if errors:
        raise ValidationError(errors[0], field="password")
