"""
Normalization of raw form values into estimator inputs.

Form fields arrive as strings, numbers, checkbox booleans or nothing at all.
Everything here is forgiving: bad counts become zero and unknown choices
become None, so a half-filled form still produces a running estimate.
"""

import logging
import re
from typing import Any, Mapping, Optional

from .models import (
    CleaningFrequency,
    CollectionFrequency,
    ContactSubmission,
    FacilitySize,
    PropertyCleaningInputs,
    PropertyType,
    QuoteInputs,
    QuoteSubmission,
    ServiceType,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')

SERVICE_TYPE_ALIASES = {
    "dignity-at-work": ServiceType.PERIOD_DIGNITY,
    "individual-subscription": ServiceType.INDIVIDUAL,
    "period dignity": ServiceType.PERIOD_DIGNITY,
    "waste management": ServiceType.WASTE_MANAGEMENT,
}

COLLECTION_FREQUENCY_ALIASES = {
    "bi-weekly": CollectionFrequency.FORTNIGHTLY,
    "biweekly": CollectionFrequency.FORTNIGHTLY,
}

CLEANING_FREQUENCY_ALIASES = {
    "biweekly": CleaningFrequency.BI_WEEKLY,
    "fortnightly": CleaningFrequency.BI_WEEKLY,
    "once": CleaningFrequency.ONE_TIME,
}


def coerce_count(value: Any) -> int:
    """
    Coerce a form value to a non-negative integer count.

    Strings are read the way a browser's parseInt reads them: "12 bins" is 12
    and "3.7" is 3. Anything unreadable or negative counts as zero.
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if value != value or value in (float('inf'), float('-inf')):
            return 0
        count = int(value)
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            logger.debug(f"Unreadable count {value!r}, using 0")
            return 0
        try:
            count = int(match.group(1))
        except ValueError:
            # Longer than the interpreter will convert from a string
            logger.warning(f"Count with {len(match.group(1))} digits is too long, using 0")
            return 0

    return max(count, 0)


def coerce_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def _parse_choice(value: Any, enum_type, aliases: Optional[Mapping] = None):
    text = _clean(value)
    if not text:
        return None
    if aliases and text in aliases:
        return aliases[text]
    try:
        return enum_type(text)
    except ValueError:
        logger.debug(f"Unknown {enum_type.__name__} {value!r}, treating as unselected")
        return None


def parse_service_type(value: Any) -> Optional[ServiceType]:
    return _parse_choice(value, ServiceType, SERVICE_TYPE_ALIASES)


def parse_facility_size(value: Any) -> Optional[FacilitySize]:
    """Facility size band; the stored placeholder "N/A" means no size."""
    if _clean(value) == "n/a":
        return None
    return _parse_choice(value, FacilitySize)


def parse_property_size(value: Any) -> Optional[FacilitySize]:
    return parse_facility_size(value)


def parse_property_type(value: Any) -> Optional[PropertyType]:
    return _parse_choice(value, PropertyType)


def parse_collection_frequency(value: Any) -> CollectionFrequency:
    frequency = _parse_choice(value, CollectionFrequency, COLLECTION_FREQUENCY_ALIASES)
    return frequency or CollectionFrequency.MONTHLY


def parse_cleaning_frequency(value: Any) -> Optional[CleaningFrequency]:
    return _parse_choice(value, CleaningFrequency, CLEANING_FREQUENCY_ALIASES)


def count_additional_services(value: Any) -> int:
    """Additional services arrive either as the list of ticked names or as a count."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return len([name for name in value if str(name).strip()])
    return coerce_count(value)


def _first(form: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if form.get(key) not in (None, ""):
            return form[key]
    return None


def quote_inputs_from_form(form: Mapping[str, Any]) -> QuoteInputs:
    """Build QuoteInputs from raw quote form fields."""
    return QuoteInputs(
        service_type=parse_service_type(form.get("service_type")),
        facility_size=parse_facility_size(_first(form, "facility_size", "property_size")),
        employee_count=coerce_count(form.get("employee_count")),
        bin_count=coerce_count(_first(form, "bin_count", "number_of_bins")),
        collection_frequency=parse_collection_frequency(
            _first(form, "bin_collection_frequency", "collection_frequency")
        ),
        additional_services_count=count_additional_services(form.get("additional_services")),
        needs_bin_rental=coerce_flag(form.get("needs_bin_rental")),
    )


def property_inputs_from_form(form: Mapping[str, Any]) -> PropertyCleaningInputs:
    """Build PropertyCleaningInputs from the legacy cleaning quote form."""
    return PropertyCleaningInputs(
        property_type=parse_property_type(form.get("property_type")),
        property_size=parse_property_size(form.get("property_size")),
        cleaning_frequency=parse_cleaning_frequency(form.get("cleaning_frequency")),
        bedrooms=coerce_count(form.get("bedrooms")),
        bathrooms=coerce_count(form.get("bathrooms")),
        additional_services_count=count_additional_services(form.get("additional_services")),
    )


def submission_from_form(form: Mapping[str, Any]) -> QuoteSubmission:
    additional = form.get("additional_services") or ()
    if not isinstance(additional, (list, tuple)):
        additional = ()

    return QuoteSubmission(
        inputs=quote_inputs_from_form(form),
        customer_name=str(form.get("customer_name") or "").strip(),
        customer_email=str(form.get("customer_email") or "").strip(),
        customer_phone=str(form.get("customer_phone") or "").strip(),
        company_name=str(form.get("company_name") or "").strip(),
        special_requirements=str(form.get("special_requirements") or "").strip(),
        additional_services=tuple(str(name).strip() for name in additional if str(name).strip()),
    )


def contact_from_form(form: Mapping[str, Any]) -> ContactSubmission:
    """Build a ContactSubmission; the subject only applies to general enquiries, the service type only to quotes."""
    is_quote = _clean(form.get("type")) == "quote"

    def text(key: str) -> str:
        return str(form.get(key) or "").strip()

    return ContactSubmission(
        type="quote" if is_quote else "general",
        name=text("name"),
        email=text("email"),
        phone=text("phone"),
        company=text("company"),
        subject="" if is_quote else text("subject"),
        message=text("message"),
        service_type=parse_service_type(form.get("service_type")) if is_quote else None,
    )
