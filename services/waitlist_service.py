"""Waitlist sign-up business logic"""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Union

import httpx
from postgrest.exceptions import APIError

from config import settings
from config.database import get_supabase
from services.results import ErrorKind, FormState, SubmissionResult, SuccessNotice, WaitlistKind
from utils.logger import log_error, log_info, log_warning, mask_email
from utils.validation import trim, validate

STORE_FAILURE_MESSAGE = "Failed to submit form. Please try again."
UNEXPECTED_FAILURE_MESSAGE = "An unexpected error occurred. Please try again."

SUCCESS = {
    WaitlistKind.USER: (
        "Thank you for joining our waitlist! We'll be in touch soon with updates.",
        "waitlist_joined",
    ),
    WaitlistKind.PARTNER: (
        "Thank you for your interest in partnering with us! Our team will contact you shortly.",
        "partner_request_submitted",
    ),
}


def table_for(kind: WaitlistKind) -> str:
    if kind is WaitlistKind.PARTNER:
        return settings.PARTNERS_WAITLIST_TABLE
    return settings.USERS_WAITLIST_TABLE


def build_row(kind: WaitlistKind, fields: Dict[str, Any], created_at: datetime) -> Dict[str, Any]:
    """Trim the submitted fields into the row stored for this kind"""
    row = {'email': trim(fields.get('email'))}

    if kind is WaitlistKind.PARTNER:
        row['cafe'] = trim(fields.get('cafe'))
        # Only some forms ask about beta interest
        if fields.get('beta') is not None:
            row['beta'] = bool(fields['beta'])
    else:
        row['name'] = trim(fields.get('name'))

    row['created_at'] = created_at.isoformat()
    return row


def success_notice(kind: WaitlistKind) -> SuccessNotice:
    message, success_param = SUCCESS[kind]
    separator = '&' if '?' in settings.LANDING_ROUTE else '?'
    return SuccessNotice(
        message=message,
        redirect_to=f"{settings.LANDING_ROUTE}{separator}success={success_param}",
        redirect_after_seconds=settings.REDIRECT_DELAY_SECONDS,
    )


def submit(
    kind: WaitlistKind,
    fields: Union[FormState, Dict[str, Any]],
    require_name: bool = False,
    client=None,
    now: Optional[Callable[[], datetime]] = None,
) -> SubmissionResult:
    """Validate a sign-up and insert it into the matching waitlist table.

    Makes at most one insert and never retries. Every failure is returned as
    a SubmissionResult; nothing is raised to the caller. Duplicate emails are
    not checked here, a repeated sign-up is inserted again unless the table
    itself rejects it.
    """
    if isinstance(fields, FormState):
        fields = fields.to_dict()

    validation = validate(kind, fields, require_name=require_name)
    if not validation.ok:
        return SubmissionResult.failure(validation.error_kind, validation.message)

    try:
        created_at = now() if now else datetime.now(timezone.utc)
        row = build_row(kind, fields, created_at)

        supabase = client if client is not None else get_supabase()
        if not supabase:
            raise RuntimeError("Supabase client not initialized")

        table = table_for(kind)
        supabase.table(table).insert(row).execute()
    except APIError as e:
        log_warning(f"Store rejected {kind.value} sign-up for {mask_email(fields.get('email'))}: "
                    f"code={e.code} message={e.message}")
        return SubmissionResult.failure(
            ErrorKind.STORE_FAILURE,
            e.message or STORE_FAILURE_MESSAGE,
            code=str(e.code) if e.code else None,
        )
    except httpx.HTTPError as e:
        log_error(f"Network error submitting {kind.value} sign-up", error=e)
        return SubmissionResult.failure(ErrorKind.STORE_FAILURE, str(e) or STORE_FAILURE_MESSAGE)
    except Exception as e:
        log_error(f"Unexpected error submitting {kind.value} sign-up", error=e)
        return SubmissionResult.failure(ErrorKind.UNEXPECTED_FAILURE, UNEXPECTED_FAILURE_MESSAGE)

    log_info(f"Added {mask_email(row['email'])} to {table}")
    return SubmissionResult.success(success_notice(kind), row)
