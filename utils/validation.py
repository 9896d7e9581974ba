"""Input validation utilities"""
import re
from typing import Any, Dict, Optional

from services.results import ErrorKind, ValidationResult, WaitlistKind

EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')
CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')

MAX_EMAIL_LENGTH = 254
MAX_NAME_LENGTH = 200

MESSAGES = {
    'email_required': "Please enter your email",
    'name_required': "Please enter your name",
    'fields_required': "Please fill in all required fields",
    'email_invalid': "Please enter a valid email address",
    'name_invalid': f"Please enter a name of at most {MAX_NAME_LENGTH} characters",
    'cafe_invalid': f"Please enter a cafe name of at most {MAX_NAME_LENGTH} characters",
}


def trim(value: Any) -> Optional[str]:
    """Strip surrounding whitespace; blank values become None"""
    if value is None:
        return None
    trimmed = str(value).strip()
    return trimmed or None


def is_blank(value: Any) -> bool:
    return trim(value) is None


def validate_email(email: str) -> bool:
    """Validate email format"""
    if not email or len(email) > MAX_EMAIL_LENGTH:
        return False
    if CONTROL_CHARS.search(email):
        return False
    return bool(EMAIL_PATTERN.fullmatch(email))


def validate_text(value: Any) -> bool:
    """Free text fits a column once trimmed and holds no control characters"""
    trimmed = trim(value)
    if trimmed is None:
        return True
    return len(trimmed) <= MAX_NAME_LENGTH and not CONTROL_CHARS.search(trimmed)


def validate(kind: WaitlistKind, fields: Dict[str, Any], require_name: bool = False) -> ValidationResult:
    """Check a sign-up form, stopping at the first rule that fails.

    User sign-ups need an email, and a name when require_name is set.
    Partner sign-ups need both an email and a cafe name. The email must then
    look like local@domain.tld, and free-text fields must fit their columns,
    so a passing form is stored exactly as entered apart from trimming.
    """
    email = fields.get('email')

    if kind is WaitlistKind.PARTNER:
        if is_blank(email) or is_blank(fields.get('cafe')):
            return ValidationResult.failure(ErrorKind.MISSING_FIELD, MESSAGES['fields_required'])
    else:
        if is_blank(email):
            return ValidationResult.failure(ErrorKind.MISSING_FIELD, MESSAGES['email_required'])
        if require_name and is_blank(fields.get('name')):
            return ValidationResult.failure(ErrorKind.MISSING_FIELD, MESSAGES['name_required'])

    if not validate_email(str(email)):
        return ValidationResult.failure(ErrorKind.INVALID_FORMAT, MESSAGES['email_invalid'])

    if kind is WaitlistKind.PARTNER:
        if not validate_text(fields.get('cafe')):
            return ValidationResult.failure(ErrorKind.INVALID_FORMAT, MESSAGES['cafe_invalid'])
    elif not validate_text(fields.get('name')):
        return ValidationResult.failure(ErrorKind.INVALID_FORMAT, MESSAGES['name_invalid'])

    return ValidationResult.success()
