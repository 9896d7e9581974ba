"""Value types shared by validation, submission and count reading"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class WaitlistKind(Enum):
    """Which audience a sign-up belongs to"""
    USER = "user"
    PARTNER = "partner"


class ErrorKind(Enum):
    MISSING_FIELD = "MissingField"
    INVALID_FORMAT = "InvalidFormat"
    STORE_FAILURE = "StoreFailure"
    UNEXPECTED_FAILURE = "UnexpectedFailure"


@dataclass(frozen=True)
class FormState:
    """Raw values of a sign-up form as the visitor typed them"""
    email: str = ""
    name: Optional[str] = None
    cafe: Optional[str] = None
    beta: Optional[bool] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "FormState":
        """Build from a JSON body, ignoring unknown keys"""
        beta = data.get('beta')
        if beta is not None and not isinstance(beta, bool):
            beta = str(beta).strip().lower() in ('1', 'true', 'yes', 'on')
        return cls(
            email=_as_text(data.get('email')) or "",
            name=_as_text(data.get('name')),
            cafe=_as_text(data.get('cafe')),
            beta=beta,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'email': self.email, 'name': self.name, 'cafe': self.cafe, 'beta': self.beta}


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class ValidationResult:
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ValidationResult":
        return cls(error_kind=kind, message=message)


@dataclass(frozen=True)
class SuccessNotice:
    """Tells the site what to show and where to go after a sign-up.

    Navigation is left to the caller; redirect_after_seconds is the delay
    the success message stays on screen.
    """
    message: str
    redirect_to: str
    redirect_after_seconds: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'message': self.message,
            'redirect_to': self.redirect_to,
            'redirect_after_seconds': self.redirect_after_seconds,
        }


@dataclass(frozen=True)
class SubmissionResult:
    notice: Optional[SuccessNotice] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""
    # Store error code when the store supplied one (e.g. '23505')
    code: Optional[str] = None
    row: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, notice: SuccessNotice, row: Dict[str, Any]) -> "SubmissionResult":
        return cls(notice=notice, message=notice.message, row=row)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, code: Optional[str] = None) -> "SubmissionResult":
        return cls(error_kind=kind, message=message, code=code)
