"""
Values handed to the external collaborators: the rows stored for quotes and
contact messages, the bodies posted to the notification endpoints, and the
message text built from them. Nothing here talks to the network or a database.
"""

import logging
from typing import Any, Dict, List, Optional

from .models import ContactSubmission, QuoteEstimate, QuoteSubmission
from .money import format_gbp

logger = logging.getLogger(__name__)

NOT_APPLICABLE = "N/A"
NOT_PROVIDED = "Not provided"
DEFAULT_CLEANING_FREQUENCY = "monthly"


def service_type_display(value: Optional[str]) -> str:
    """waste-management -> Waste Management"""
    if not value:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in value.replace("-", " ").split())


def _service_type_value(submission: QuoteSubmission) -> str:
    service_type = submission.inputs.service_type
    return service_type.value if service_type else ""


def _facility_size_value(submission: QuoteSubmission) -> str:
    facility_size = submission.inputs.facility_size
    return facility_size.value if facility_size else NOT_APPLICABLE


def build_quote_record(submission: QuoteSubmission, estimate: QuoteEstimate,
                       user_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the row stored in the quotes table.

    The estimated cost is written unchanged; Decimal is converted to a string
    so the row stays JSON serializable without losing precision.
    """
    inputs = submission.inputs
    record = {
        'customer_name': submission.customer_name,
        'customer_email': submission.customer_email,
        'customer_phone': submission.customer_phone,
        'company_name': submission.company_name,
        'property_type': _service_type_value(submission),
        'property_size': _facility_size_value(submission),
        'cleaning_frequency': DEFAULT_CLEANING_FREQUENCY,
        'employee_count': inputs.employee_count,
        'number_of_bins': inputs.bin_count,
        'bin_collection_frequency': inputs.collection_frequency.value,
        'needs_bin_rental': inputs.needs_bin_rental,
        'additional_services': list(submission.additional_services),
        'special_requirements': submission.special_requirements,
        'estimated_cost': str(estimate.as_money().amount),
        'status': 'pending',
    }
    if user_id:
        record['user_id'] = user_id
    return record


def build_notification_payload(submission: QuoteSubmission, estimate: QuoteEstimate,
                               quote_id: Optional[str] = None) -> Dict[str, Any]:
    """Build the JSON body posted to the quote-notification endpoint."""
    inputs = submission.inputs
    quote = {
        'customer_name': submission.customer_name,
        'customer_email': submission.customer_email,
        'customer_phone': submission.customer_phone,
        'company_name': submission.company_name,
        'service_type': _service_type_value(submission),
        'property_size': _facility_size_value(submission),
        'employee_count': inputs.employee_count,
        'bin_count': inputs.bin_count,
        'bin_collection_frequency': inputs.collection_frequency.value,
        'needs_bin_rental': inputs.needs_bin_rental,
        'estimated_cost': str(estimate.as_money().amount),
        'special_requirements': submission.special_requirements,
        'additional_services': list(submission.additional_services),
    }
    if quote_id:
        quote['id'] = quote_id
    return {'quote': quote}


def notification_subject(quote: Dict[str, Any]) -> str:
    sender = quote.get('customer_name') or quote.get('customer_email') or "Customer"
    return f"New Quote Request from {sender}"


def render_notification_text(quote: Dict[str, Any]) -> str:
    """Render the human-readable message body for a quote notification."""
    lines: List[str] = [
        "New Quote Request!",
        "",
        "Customer Information",
        f"Name: {quote.get('customer_name') or NOT_PROVIDED}",
        f"Email: {quote.get('customer_email') or NOT_PROVIDED}",
        f"Phone: {quote.get('customer_phone') or NOT_PROVIDED}",
        f"Company: {quote.get('company_name') or NOT_PROVIDED}",
        "",
        "Service Details",
        f"Service Type: {service_type_display(quote.get('service_type'))}",
    ]

    property_size = quote.get('property_size') or NOT_APPLICABLE
    if property_size != NOT_APPLICABLE:
        lines.append(f"Facility Size: {property_size}")

    if int(quote.get('employee_count') or 0) > 0:
        lines.append(f"Number of Employees: {quote['employee_count']}")

    if int(quote.get('bin_count') or 0) > 0:
        lines.append(f"Number of Bins: {quote['bin_count']}")

    additional = quote.get('additional_services') or []
    if additional:
        lines.append(f"Additional Services: {', '.join(additional)}")

    if quote.get('special_requirements'):
        lines.append("Special Requirements:")
        lines.append(quote['special_requirements'])

    lines.append("")
    lines.append(f"{format_gbp(quote.get('estimated_cost') or 0)}/month")

    if quote.get('id'):
        lines.append(f"Quote ID: {quote['id']}")

    return "\n".join(lines)


QUOTE_TYPE_LABEL = "Quote Request"
GENERAL_TYPE_LABEL = "General Enquiry"


def build_contact_record(contact: ContactSubmission) -> Dict[str, Any]:
    """Build the row stored in the contact_submissions table."""
    return {
        'type': contact.type,
        'name': contact.name,
        'email': contact.email,
        'phone': contact.phone,
        'company': contact.company,
        'subject': '' if contact.is_quote else contact.subject,
        'message': contact.message,
        'service_type': contact.service_type.value if contact.is_quote and contact.service_type else '',
        'status': 'pending',
    }


def build_contact_notification_payload(contact: ContactSubmission,
                                       submission_id: Optional[str] = None) -> Dict[str, Any]:
    """Build the JSON body posted to the contact-notification endpoint."""
    body = build_contact_record(contact)
    body.pop('status')
    if submission_id:
        body['id'] = submission_id
    return {'contact': body}


def contact_notification_subject(contact: Dict[str, Any]) -> str:
    if contact.get('type') == 'quote':
        return f"New Quote Request from {contact.get('name') or contact.get('email')}"
    return f"New Contact: {contact.get('subject') or GENERAL_TYPE_LABEL}"


def render_contact_notification_text(contact: Dict[str, Any]) -> str:
    """Render the message body for a contact notification; empty optional fields are left out."""
    is_quote = contact.get('type') == 'quote'
    lines: List[str] = [
        "New Quote Request!" if is_quote else "New Contact Submission!",
        f"You have received a new {'quote request' if is_quote else 'general enquiry'} "
        f"from {'a potential customer' if is_quote else 'a visitor'}",
        "",
        "Contact Information",
        f"Name: {contact.get('name', '')}",
        f"Email: {contact.get('email', '')}",
    ]

    for key, label in (('phone', "Phone"), ('company', "Company"),
                       ('subject', "Subject"), ('service_type', "Service Type")):
        if contact.get(key):
            lines.append(f"{label}: {contact[key]}")

    lines.extend(["", "Message", contact.get('message', ''), ""])

    if contact.get('id'):
        lines.append(f"Submission ID: {contact['id']}")
    lines.append(f"Type: {QUOTE_TYPE_LABEL if is_quote else GENERAL_TYPE_LABEL}")

    return "\n".join(lines)
