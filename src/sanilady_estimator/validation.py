"""
Checks the quote and contact forms apply before a submission is stored.
"""

import logging
import re
from typing import Any, Mapping

from .models import QuoteSubmission, ServiceType
from .normalize import parse_service_type

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')

FACILITY_SERVICES = (ServiceType.WASTE_MANAGEMENT, ServiceType.BOTH)


class EstimatorError(Exception):
    """Base class for errors raised by this package."""


class SubmissionError(EstimatorError, ValueError):
    """A form submission is missing or has invalid required fields."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.message = message
        self.field = field


def validate_quote_submission(submission: QuoteSubmission) -> None:
    """Raise SubmissionError with the user-facing message if the quote request is incomplete."""
    if not submission.customer_name or not submission.customer_email:
        raise SubmissionError("Please provide your name and email", field="customer_name")

    if not _EMAIL_PATTERN.match(submission.customer_email):
        raise SubmissionError("Please provide a valid email address", field="customer_email")

    service_type = submission.inputs.service_type
    if service_type is None:
        raise SubmissionError("Please select a service type", field="service_type")

    if service_type in FACILITY_SERVICES and submission.inputs.facility_size is None:
        raise SubmissionError(
            "Please select facility size for waste management services",
            field="facility_size",
        )

    logger.debug(f"Quote submission from {submission.customer_email} is valid")


def validate_contact_submission(form: Mapping[str, Any]) -> None:
    """Raise SubmissionError if a contact form (general or quote) is incomplete."""
    for key in ("name", "email", "message"):
        if not str(form.get(key) or "").strip():
            raise SubmissionError("Please fill in all required fields", field=key)

    if str(form.get("type") or "general") == "quote" and parse_service_type(form.get("service_type")) is None:
        raise SubmissionError("Please select a service type", field="service_type")
