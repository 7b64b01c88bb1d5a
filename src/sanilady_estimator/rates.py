"""
Rate tables for each pricing strategy.

Every strategy owns its own table. The combined ("both") table is deliberately
not derived from the standalone ones: its bundle prices are set independently.
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from .models import CleaningFrequency, CollectionFrequency, FacilitySize


def _table(values: dict) -> Mapping:
    return MappingProxyType({key: Decimal(str(value)) for key, value in values.items()})


@dataclass(frozen=True)
class PeriodDignityRates:
    per_employee: Decimal = Decimal("60")
    surcharge_per_service: Decimal = Decimal("25")


@dataclass(frozen=True)
class WasteManagementRates:
    facility_base: Mapping[FacilitySize, Decimal]
    frequency_multipliers: Mapping[CollectionFrequency, Decimal]
    per_bin: Decimal = Decimal("15")
    bin_rental_per_bin: Decimal = Decimal("10")
    surcharge_per_service: Decimal = Decimal("25")


@dataclass(frozen=True)
class CombinedRates:
    facility_base: Mapping[FacilitySize, Decimal]
    per_employee: Decimal = Decimal("55")
    per_bin: Decimal = Decimal("12")
    bin_rental_per_bin: Decimal = Decimal("10")
    surcharge_per_service: Decimal = Decimal("25")


@dataclass(frozen=True)
class PropertyCleaningRates:
    size_base: Mapping[FacilitySize, Decimal]
    frequency_multipliers: Mapping[CleaningFrequency, Decimal]
    per_bedroom: Decimal = Decimal("10")
    per_bathroom: Decimal = Decimal("15")
    surcharge_per_service: Decimal = Decimal("20")


PERIOD_DIGNITY_RATES = PeriodDignityRates()

WASTE_MANAGEMENT_RATES = WasteManagementRates(
    facility_base=_table({
        FacilitySize.SMALL: 50,
        FacilitySize.MEDIUM: 75,
        FacilitySize.LARGE: 120,
        FacilitySize.EXTRA_LARGE: 180,
    }),
    frequency_multipliers=_table({
        CollectionFrequency.WEEKLY: "1.5",
        CollectionFrequency.FORTNIGHTLY: "1.2",
        CollectionFrequency.MONTHLY: "1.0",
    }),
)

COMBINED_RATES = CombinedRates(
    facility_base=_table({
        FacilitySize.SMALL: 40,
        FacilitySize.MEDIUM: 60,
        FacilitySize.LARGE: 100,
        FacilitySize.EXTRA_LARGE: 150,
    }),
)

# Visits per month; one-time and unknown frequencies count once.
PROPERTY_CLEANING_RATES = PropertyCleaningRates(
    size_base=_table({
        FacilitySize.SMALL: 40,
        FacilitySize.MEDIUM: 60,
        FacilitySize.LARGE: 90,
        FacilitySize.EXTRA_LARGE: 120,
    }),
    frequency_multipliers=_table({
        CleaningFrequency.WEEKLY: 4,
        CleaningFrequency.BI_WEEKLY: 2,
        CleaningFrequency.MONTHLY: 1,
        CleaningFrequency.ONE_TIME: 1,
    }),
)


@dataclass(frozen=True)
class UnpricedRates:
    """Service types with no base price still pay for add-ons."""
    surcharge_per_service: Decimal = Decimal("25")


UNPRICED_RATES = UnpricedRates()
