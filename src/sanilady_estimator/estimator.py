#!/usr/bin/env python3
"""
Quote Estimator
Computes an estimated recurring monthly price from normalized form selections.

Each service type is priced by its own named strategy. A configuration maps
service types to strategies, so the contact-form and waste-services-page
behaviours can be selected explicitly instead of being merged.
"""

import logging
from dataclasses import dataclass, fields
from decimal import Decimal, ROUND_HALF_UP, localcontext
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .models import (
    PropertyCleaningInputs,
    QuoteEstimate,
    QuoteInputs,
    RoundingMode,
    ServiceType,
)
from .money import working_precision
from .rates import (
    COMBINED_RATES,
    PERIOD_DIGNITY_RATES,
    PROPERTY_CLEANING_RATES,
    UNPRICED_RATES,
    WASTE_MANAGEMENT_RATES,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")

PROPERTY_CLEANING_KIND = "property-cleaning"
UNPRICED_KIND = "unpriced"


@dataclass(frozen=True)
class PricingStrategy:
    """One named pricing formula with its rate table and rounding rule."""
    name: str
    kind: str
    rates: Any
    rounding: RoundingMode = RoundingMode.NONE
    apply_frequency: bool = False
    apply_bin_rental: bool = False
    per_employee_billing: bool = False


def _price_period_dignity(inputs: QuoteInputs, strategy: PricingStrategy) -> Decimal:
    rates = strategy.rates
    total = inputs.employee_count * rates.per_employee
    return total + inputs.additional_services_count * rates.surcharge_per_service


def _price_waste_management(inputs: QuoteInputs, strategy: PricingStrategy) -> Decimal:
    rates = strategy.rates
    total = rates.facility_base.get(inputs.facility_size, ZERO)
    total += inputs.bin_count * rates.per_bin

    if strategy.apply_bin_rental and inputs.needs_bin_rental:
        total += inputs.bin_count * rates.bin_rental_per_bin

    total += inputs.additional_services_count * rates.surcharge_per_service

    # Applied last so rental and add-ons are scaled by collection frequency too
    if strategy.apply_frequency:
        total *= rates.frequency_multipliers.get(inputs.collection_frequency, ONE)

    return total


def _price_combined(inputs: QuoteInputs, strategy: PricingStrategy) -> Decimal:
    rates = strategy.rates
    total = inputs.employee_count * rates.per_employee
    total += rates.facility_base.get(inputs.facility_size, ZERO)
    total += inputs.bin_count * rates.per_bin

    if strategy.apply_bin_rental and inputs.needs_bin_rental:
        total += inputs.bin_count * rates.bin_rental_per_bin

    return total + inputs.additional_services_count * rates.surcharge_per_service


def _price_unpriced(inputs: QuoteInputs, strategy: PricingStrategy) -> Decimal:
    return inputs.additional_services_count * strategy.rates.surcharge_per_service


def _price_property_cleaning(inputs: PropertyCleaningInputs, strategy: PricingStrategy) -> Decimal:
    rates = strategy.rates
    total = rates.size_base.get(inputs.property_size, ZERO)
    total *= rates.frequency_multipliers.get(inputs.cleaning_frequency, ONE)
    total += inputs.bedrooms * rates.per_bedroom + inputs.bathrooms * rates.per_bathroom
    return total + inputs.additional_services_count * rates.surcharge_per_service


_PRICERS: Dict[str, Callable[[Any, PricingStrategy], Decimal]] = {
    ServiceType.PERIOD_DIGNITY.value: _price_period_dignity,
    ServiceType.WASTE_MANAGEMENT.value: _price_waste_management,
    ServiceType.BOTH.value: _price_combined,
    UNPRICED_KIND: _price_unpriced,
    PROPERTY_CLEANING_KIND: _price_property_cleaning,
}


UNPRICED = PricingStrategy(name="unpriced", kind=UNPRICED_KIND, rates=UNPRICED_RATES)

PROPERTY_CLEANING = PricingStrategy(
    name="property-cleaning",
    kind=PROPERTY_CLEANING_KIND,
    rates=PROPERTY_CLEANING_RATES,
)

# Quote request form: no frequency multiplier, bin rental ignored, unrounded.
CONTACT_FORM: Mapping[ServiceType, PricingStrategy] = MappingProxyType({
    ServiceType.PERIOD_DIGNITY: PricingStrategy(
        name="contact-form/period-dignity",
        kind=ServiceType.PERIOD_DIGNITY.value,
        rates=PERIOD_DIGNITY_RATES,
        per_employee_billing=True,
    ),
    ServiceType.WASTE_MANAGEMENT: PricingStrategy(
        name="contact-form/waste-management",
        kind=ServiceType.WASTE_MANAGEMENT.value,
        rates=WASTE_MANAGEMENT_RATES,
    ),
    ServiceType.BOTH: PricingStrategy(
        name="contact-form/both",
        kind=ServiceType.BOTH.value,
        rates=COMBINED_RATES,
    ),
})

# Waste services page calculator: bin rental, collection frequency, whole pounds.
WASTE_SERVICES_PAGE: Mapping[ServiceType, PricingStrategy] = MappingProxyType({
    ServiceType.PERIOD_DIGNITY: PricingStrategy(
        name="waste-services/period-dignity",
        kind=ServiceType.PERIOD_DIGNITY.value,
        rates=PERIOD_DIGNITY_RATES,
        per_employee_billing=True,
    ),
    ServiceType.WASTE_MANAGEMENT: PricingStrategy(
        name="waste-services/waste-management",
        kind=ServiceType.WASTE_MANAGEMENT.value,
        rates=WASTE_MANAGEMENT_RATES,
        rounding=RoundingMode.NEAREST_UNIT,
        apply_frequency=True,
        apply_bin_rental=True,
    ),
    ServiceType.BOTH: PricingStrategy(
        name="waste-services/both",
        kind=ServiceType.BOTH.value,
        rates=COMBINED_RATES,
        rounding=RoundingMode.NEAREST_UNIT,
        apply_bin_rental=True,
    ),
})

CONFIGURATIONS: Mapping[str, Mapping[ServiceType, PricingStrategy]] = MappingProxyType({
    "contact-form": CONTACT_FORM,
    "waste-services": WASTE_SERVICES_PAGE,
})


def select_strategy(inputs: Union[QuoteInputs, PropertyCleaningInputs],
                    configuration: Mapping[ServiceType, PricingStrategy] = CONTACT_FORM) -> PricingStrategy:
    """Pick the strategy that prices these inputs."""
    if isinstance(inputs, PropertyCleaningInputs):
        return PROPERTY_CLEANING
    return configuration.get(inputs.service_type, UNPRICED)


def _counts(inputs: Union[QuoteInputs, PropertyCleaningInputs]):
    values = (getattr(inputs, field.name) for field in fields(inputs))
    return [value for value in values if isinstance(value, int) and not isinstance(value, bool)]


def apply_rounding(amount: Decimal, mode: RoundingMode) -> Decimal:
    if mode is RoundingMode.NEAREST_UNIT:
        return amount.quantize(ONE, rounding=ROUND_HALF_UP)
    return amount


def estimate(inputs: Union[QuoteInputs, PropertyCleaningInputs],
             configuration: Mapping[ServiceType, PricingStrategy] = CONTACT_FORM) -> QuoteEstimate:
    """
    Estimate the monthly cost for a set of normalized selections.

    Total over non-negative counts: unknown service types and missing facility
    sizes contribute nothing rather than failing.

    Args:
        inputs: QuoteInputs for sanitary services, or PropertyCleaningInputs
            for the legacy cleaning calculator
        configuration: mapping of service type to strategy, e.g. CONTACT_FORM
            or WASTE_SERVICES_PAGE

    Returns:
        QuoteEstimate with the monthly figure and, where the strategy bills
        per employee, the per-employee share
    """
    strategy = select_strategy(inputs, configuration)

    with localcontext() as ctx:
        ctx.prec = working_precision(*_counts(inputs))
        amount = apply_rounding(_PRICERS[strategy.kind](inputs, strategy), strategy.rounding)

        per_employee: Optional[Decimal] = None
        if strategy.per_employee_billing and inputs.employee_count > 0:
            per_employee = amount / inputs.employee_count

    logger.debug(f"Estimated {amount} with strategy {strategy.name}")
    return QuoteEstimate(
        monthly_cost_gbp=amount,
        strategy=strategy.name,
        per_employee_cost_gbp=per_employee,
    )
