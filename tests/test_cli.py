#!/usr/bin/env python3
"""
Tests for the command line interface.
"""

import io
import json
import os
import tempfile
import unittest
from unittest.mock import patch

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console

from sanilady_estimator import cli


class TestCLI(unittest.TestCase):

    def run_cli(self, *argv):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            cli.main(list(argv))
        return stdout.getvalue()

    def test_estimate_json(self):
        output = self.run_cli(
            'estimate', '--service-type', 'period-dignity', '--employees', '10',
            '--additional', '2', '--json',
        )
        data = json.loads(output)
        self.assertEqual(data['monthlyCostGBP'], "650")
        self.assertEqual(data['display'], "£650.00")
        self.assertEqual(data['perEmployeeDisplay'], "£65.00")

    def test_waste_services_configuration(self):
        output = self.run_cli(
            'estimate', '--service-type', 'waste-management', '--facility-size', 'small',
            '--bins', '3', '--bin-rental', '--frequency', 'weekly',
            '--configuration', 'waste-services', '--json',
        )
        data = json.loads(output)
        self.assertEqual(data['monthlyCostGBP'], "188")
        self.assertEqual(data['strategy'], "waste-services/waste-management")

    def test_negative_counts_are_zero(self):
        output = self.run_cli('estimate', '--service-type', 'period-dignity', '--employees', '-3', '--json')
        self.assertEqual(json.loads(output)['monthlyCostGBP'], "0")

    def test_clean_json(self):
        output = self.run_cli(
            'clean', '--property-size', 'medium', '--frequency', 'weekly',
            '--bedrooms', '3', '--bathrooms', '2', '--json',
        )
        self.assertEqual(json.loads(output)['monthlyCostGBP'], "300")

    def test_output_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "estimate.json")
            self.run_cli('estimate', '--service-type', 'both', '--employees', '20',
                         '--facility-size', 'large', '--bins', '5', '--additional', '1', '-o', path)
            with open(path, encoding='utf-8') as f:
                data = json.load(f)
        self.assertEqual(data['display'], "£1285.00")

    def test_unwritable_output_exits(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli('estimate', '--service-type', 'both', '-o', tmp)
        self.assertEqual(ctx.exception.code, 1)

    def test_table_output(self):
        buffer = io.StringIO()
        with patch.object(cli, 'console', Console(file=buffer, width=120)):
            self.run_cli('estimate', '--service-type', 'waste-management',
                         '--facility-size', 'medium', '--bins', '4')
        rendered = buffer.getvalue()
        self.assertIn("£135.00", rendered)
        self.assertIn("contact-form/waste-management", rendered)

    def test_large_bin_count(self):
        output = self.run_cli(
            'estimate', '--service-type', 'waste-management', '--facility-size', 'small',
            '--bins', '1' + '0' * 27, '--configuration', 'waste-services', '--json',
        )
        data = json.loads(output)
        expected = str(50 + 15 * 10 ** 27)
        self.assertEqual(data['monthlyCostGBP'], expected)
        self.assertEqual(data['display'], "£" + expected + ".00")


class TestInteractiveMode(unittest.TestCase):

    def setUp(self):
        """Set up test fixtures."""
        self.buffer = io.StringIO()
        console = patch.object(cli, 'console', Console(file=self.buffer, width=120))
        console.start()
        self.addCleanup(console.stop)

    def run_interactive(self, argv, prompts, numbers, confirms):
        with patch.object(cli.Prompt, 'ask', side_effect=prompts), \
                patch.object(cli.IntPrompt, 'ask', side_effect=numbers), \
                patch.object(cli.Confirm, 'ask', side_effect=confirms):
            cli.main(argv)
        return self.buffer.getvalue()

    def test_waste_services_quote(self):
        """Small site, 3 rented bins collected weekly on the waste services calculator."""
        rendered = self.run_interactive(
            [],
            prompts=["waste-management", "small", "weekly", "waste-services"],
            numbers=[3, 0],
            confirms=[True, False],
        )
        self.assertIn("Waste Management estimate", rendered)
        self.assertIn("waste-services/waste-management", rendered)
        self.assertIn("£188.00", rendered)
        self.assertIn("Goodbye!", rendered)

    def test_loops_until_declined(self):
        rendered = self.run_interactive(
            ['interactive'],
            prompts=["period-dignity", "contact-form", "individual", "contact-form"],
            numbers=[10, 2, 1],
            confirms=[True, False],
        )
        self.assertIn("£650.00", rendered)
        self.assertIn("£65.00", rendered)
        self.assertIn("£25.00", rendered)


if __name__ == '__main__':
    unittest.main()
