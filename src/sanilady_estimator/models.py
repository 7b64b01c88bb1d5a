"""
Data models for the SaniLady quote estimator.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from prices import Money

CURRENCY = "GBP"


class ServiceType(str, Enum):
    PERIOD_DIGNITY = "period-dignity"
    WASTE_MANAGEMENT = "waste-management"
    BOTH = "both"
    INDIVIDUAL = "individual"


class FacilitySize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"


class CollectionFrequency(str, Enum):
    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    OFFICE = "office"
    COMMERCIAL = "commercial"


class CleaningFrequency(str, Enum):
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    ONE_TIME = "one-time"


class RoundingMode(str, Enum):
    """How the final monthly figure is rounded before it leaves the estimator."""
    NONE = "none"
    NEAREST_UNIT = "nearest-unit"


@dataclass(frozen=True)
class QuoteInputs:
    """Normalized selections from a sanitary-services quote form."""
    service_type: Optional[ServiceType] = None
    facility_size: Optional[FacilitySize] = None
    employee_count: int = 0
    bin_count: int = 0
    collection_frequency: CollectionFrequency = CollectionFrequency.MONTHLY
    additional_services_count: int = 0
    needs_bin_rental: bool = False


@dataclass(frozen=True)
class PropertyCleaningInputs:
    """Normalized selections from the legacy property-cleaning quote page."""
    property_type: Optional[PropertyType] = None
    property_size: Optional[FacilitySize] = None
    cleaning_frequency: Optional[CleaningFrequency] = None
    bedrooms: int = 0
    bathrooms: int = 0
    additional_services_count: int = 0


@dataclass(frozen=True)
class QuoteEstimate:
    """Estimated recurring monthly price."""
    monthly_cost_gbp: Decimal
    strategy: str
    per_employee_cost_gbp: Optional[Decimal] = None

    def as_money(self) -> Money:
        return Money(self.monthly_cost_gbp, CURRENCY)

    def per_employee_money(self) -> Optional[Money]:
        if self.per_employee_cost_gbp is None:
            return None
        return Money(self.per_employee_cost_gbp, CURRENCY)


@dataclass(frozen=True)
class QuoteSubmission:
    """A quote request as entered by a customer, ready to be validated and stored."""
    inputs: QuoteInputs
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    company_name: str = ""
    special_requirements: str = ""
    additional_services: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ContactSubmission:
    """A message from the contact page, either a general enquiry or a quote enquiry."""
    name: str
    email: str
    message: str
    type: str = "general"
    phone: str = ""
    company: str = ""
    subject: str = ""
    service_type: Optional[ServiceType] = None

    @property
    def is_quote(self) -> bool:
        return self.type == "quote"
