#!/usr/bin/env python3
"""
Tests for form value normalization.
"""

import unittest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sanilady_estimator.models import (
    CleaningFrequency,
    CollectionFrequency,
    FacilitySize,
    PropertyType,
    ServiceType,
)
from sanilady_estimator.normalize import (
    coerce_count,
    coerce_flag,
    contact_from_form,
    count_additional_services,
    parse_cleaning_frequency,
    parse_collection_frequency,
    parse_facility_size,
    parse_service_type,
    property_inputs_from_form,
    quote_inputs_from_form,
    submission_from_form,
)


class TestCoercion(unittest.TestCase):

    def test_coerce_count(self):
        """Counts are read like parseInt and clamped at zero."""
        test_cases = [
            (None, 0),
            ("", 0),
            ("12", 12),
            (" 7 ", 7),
            ("+5", 5),
            ("3.7", 3),
            ("12 bins", 12),
            ("-4", 0),
            ("abc", 0),
            (-2, 0),
            (5, 5),
            (2.9, 2),
            (float("nan"), 0),
            (True, 0),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertEqual(coerce_count(value), expected)

    def test_coerce_count_keeps_long_numbers(self):
        self.assertEqual(coerce_count("1" + "0" * 40), 10 ** 40)
        # Digit strings past the interpreter's conversion limit never raise
        self.assertGreaterEqual(coerce_count("9" * 5000), 0)

    def test_coerce_flag(self):
        self.assertTrue(coerce_flag(True))
        self.assertTrue(coerce_flag("on"))
        self.assertTrue(coerce_flag("True"))
        self.assertFalse(coerce_flag("false"))
        self.assertFalse(coerce_flag(None))

    def test_count_additional_services(self):
        self.assertEqual(count_additional_services(["Training & Education", "Compliance Audit"]), 2)
        self.assertEqual(count_additional_services(["", "  "]), 0)
        self.assertEqual(count_additional_services("3"), 3)
        self.assertEqual(count_additional_services(None), 0)


class TestChoices(unittest.TestCase):

    def test_service_type_aliases(self):
        test_cases = [
            ("period-dignity", ServiceType.PERIOD_DIGNITY),
            ("dignity-at-work", ServiceType.PERIOD_DIGNITY),
            (" Waste-Management ", ServiceType.WASTE_MANAGEMENT),
            ("both", ServiceType.BOTH),
            ("individual-subscription", ServiceType.INDIVIDUAL),
            ("", None),
            ("carpet-cleaning", None),
            (None, None),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertEqual(parse_service_type(value), expected)

    def test_facility_size(self):
        self.assertEqual(parse_facility_size("extra-large"), FacilitySize.EXTRA_LARGE)
        self.assertIsNone(parse_facility_size("N/A"))
        self.assertIsNone(parse_facility_size("huge"))

    def test_collection_frequency_defaults_to_monthly(self):
        self.assertEqual(parse_collection_frequency("weekly"), CollectionFrequency.WEEKLY)
        self.assertEqual(parse_collection_frequency("bi-weekly"), CollectionFrequency.FORTNIGHTLY)
        self.assertEqual(parse_collection_frequency(""), CollectionFrequency.MONTHLY)
        self.assertEqual(parse_collection_frequency("daily"), CollectionFrequency.MONTHLY)

    def test_cleaning_frequency(self):
        self.assertEqual(parse_cleaning_frequency("bi-weekly"), CleaningFrequency.BI_WEEKLY)
        self.assertEqual(parse_cleaning_frequency("fortnightly"), CleaningFrequency.BI_WEEKLY)
        self.assertIsNone(parse_cleaning_frequency("daily"))


class TestForms(unittest.TestCase):

    def setUp(self):
        """Set up test fixtures."""
        self.form = {
            "customer_name": " Jane Smith ",
            "customer_email": "jane@example.co.uk",
            "service_type": "dignity-at-work",
            "property_size": "",
            "employee_count": "25",
            "bin_count": "-1",
            "bin_collection_frequency": "fortnightly",
            "needs_bin_rental": False,
            "additional_services": ["Sustainable Products", "Policy Development"],
        }

    def test_quote_inputs_from_form(self):
        inputs = quote_inputs_from_form(self.form)
        self.assertEqual(inputs.service_type, ServiceType.PERIOD_DIGNITY)
        self.assertIsNone(inputs.facility_size)
        self.assertEqual(inputs.employee_count, 25)
        self.assertEqual(inputs.bin_count, 0)
        self.assertEqual(inputs.collection_frequency, CollectionFrequency.FORTNIGHTLY)
        self.assertEqual(inputs.additional_services_count, 2)
        self.assertFalse(inputs.needs_bin_rental)

    def test_facility_size_key_preferred_over_property_size(self):
        inputs = quote_inputs_from_form({"facility_size": "large", "property_size": "small"})
        self.assertEqual(inputs.facility_size, FacilitySize.LARGE)

    def test_empty_form(self):
        inputs = quote_inputs_from_form({})
        self.assertIsNone(inputs.service_type)
        self.assertEqual(inputs.collection_frequency, CollectionFrequency.MONTHLY)

    def test_property_inputs_from_form(self):
        inputs = property_inputs_from_form({
            "property_type": "house",
            "property_size": "medium",
            "cleaning_frequency": "weekly",
            "bedrooms": "3",
            "bathrooms": 2,
        })
        self.assertEqual(inputs.property_type, PropertyType.HOUSE)
        self.assertEqual(inputs.property_size, FacilitySize.MEDIUM)
        self.assertEqual(inputs.cleaning_frequency, CleaningFrequency.WEEKLY)
        self.assertEqual((inputs.bedrooms, inputs.bathrooms), (3, 2))

    def test_submission_from_form(self):
        submission = submission_from_form(self.form)
        self.assertEqual(submission.customer_name, "Jane Smith")
        self.assertEqual(submission.additional_services, ("Sustainable Products", "Policy Development"))
        self.assertEqual(submission.inputs.employee_count, 25)

    def test_submission_with_add_on_count_has_no_names(self):
        submission = submission_from_form({"additional_services": "2"})
        self.assertEqual(submission.additional_services, ())
        self.assertEqual(submission.inputs.additional_services_count, 2)


    def test_contact_from_form(self):
        general = contact_from_form({
            "type": "general",
            "name": " Jane ",
            "email": "jane@example.co.uk",
            "subject": "Coverage",
            "message": "Hello",
            "service_type": "both",
        })
        self.assertEqual(general.name, "Jane")
        self.assertEqual(general.subject, "Coverage")
        self.assertIsNone(general.service_type)
        self.assertFalse(general.is_quote)

        quote = contact_from_form({"type": "quote", "subject": "ignored", "service_type": "individual"})
        self.assertTrue(quote.is_quote)
        self.assertEqual(quote.subject, "")
        self.assertEqual(quote.service_type, ServiceType.INDIVIDUAL)


if __name__ == '__main__':
    unittest.main()
