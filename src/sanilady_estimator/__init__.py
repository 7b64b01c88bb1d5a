"""
SaniLady Quote Estimator

Monthly price estimates for period dignity and sanitary waste services.
"""

__version__ = "1.0.0"

from .estimator import CONFIGURATIONS, CONTACT_FORM, WASTE_SERVICES_PAGE, PROPERTY_CLEANING, estimate
from .models import ContactSubmission, PropertyCleaningInputs, QuoteEstimate, QuoteInputs, QuoteSubmission
from .validation import EstimatorError, SubmissionError

__all__ = [
    "estimate",
    "CONFIGURATIONS",
    "CONTACT_FORM",
    "WASTE_SERVICES_PAGE",
    "PROPERTY_CLEANING",
    "QuoteInputs",
    "PropertyCleaningInputs",
    "QuoteEstimate",
    "QuoteSubmission",
    "ContactSubmission",
    "EstimatorError",
    "SubmissionError",
]
