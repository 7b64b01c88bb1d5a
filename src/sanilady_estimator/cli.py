#!/usr/bin/env python3
"""
SaniLady Quote Estimator CLI
Prices sanitary-service and legacy cleaning quotes from the command line.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from .estimator import CONFIGURATIONS, estimate
from .models import QuoteEstimate
from .money import format_gbp
from .normalize import property_inputs_from_form, quote_inputs_from_form
from .records import service_type_display

logger = logging.getLogger(__name__)

console = Console()

SERVICE_CHOICES = ["period-dignity", "waste-management", "both", "individual"]
SIZE_CHOICES = ["small", "medium", "large", "extra-large"]


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def setup_parser():
    """Set up command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="sanilady-quote",
        description="SaniLady Quote Estimator - monthly price estimates for sanitary services",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sanilady-quote estimate --service-type period-dignity --employees 10
  sanilady-quote estimate --service-type waste-management --facility-size small \\
      --bins 3 --bin-rental --frequency weekly --configuration waste-services
  sanilady-quote clean --property-size medium --frequency weekly --bedrooms 3 --bathrooms 2
  sanilady-quote                                       # Start interactive mode
        """
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command')

    quote = subparsers.add_parser('estimate', help='Estimate a sanitary-services quote')
    quote.add_argument('--service-type', default='', help=f"One of: {', '.join(SERVICE_CHOICES)}")
    quote.add_argument('--facility-size', default='', help=f"One of: {', '.join(SIZE_CHOICES)}")
    quote.add_argument('--employees', default='0', help='Number of employees')
    quote.add_argument('--bins', default='0', help='Number of bins')
    quote.add_argument('--frequency', default='monthly', help='Bin collection frequency: weekly, fortnightly or monthly')
    quote.add_argument('--bin-rental', action='store_true', help='Bins need to be rented')
    quote.add_argument('--additional', default='0', help='Number of additional services')
    quote.add_argument(
        '--configuration',
        choices=sorted(CONFIGURATIONS),
        default='contact-form',
        help='Which calculator to use (default: contact-form)'
    )
    _add_output_arguments(quote)

    clean = subparsers.add_parser('clean', help='Estimate a legacy property-cleaning quote')
    clean.add_argument('--property-type', default='', help='apartment, house, office or commercial')
    clean.add_argument('--property-size', default='', help=f"One of: {', '.join(SIZE_CHOICES)}")
    clean.add_argument('--frequency', default='', help='weekly, bi-weekly, monthly or one-time')
    clean.add_argument('--bedrooms', default='0', help='Number of bedrooms')
    clean.add_argument('--bathrooms', default='0', help='Number of bathrooms')
    clean.add_argument('--additional', default='0', help='Number of additional services')
    _add_output_arguments(clean)

    subparsers.add_parser('interactive', help='Answer questions and see a running estimate')

    return parser


def _add_output_arguments(parser):
    parser.add_argument('--json', action='store_true', help='Print the estimate as JSON')
    parser.add_argument('-o', '--output', help='Write the JSON estimate to a file')


def estimate_to_dict(result: QuoteEstimate) -> Dict[str, Any]:
    """JSON-safe view of an estimate; Decimal values become strings."""
    monthly = result.as_money()
    data = {
        'strategy': result.strategy,
        'currency': monthly.currency,
        'monthlyCostGBP': str(monthly.amount),
        'display': format_gbp(monthly),
    }
    per_employee = result.per_employee_money()
    if per_employee is not None:
        data['perEmployeeCostGBP'] = str(per_employee.amount)
        data['perEmployeeDisplay'] = format_gbp(per_employee)
    return data


def render_estimate(result: QuoteEstimate, title: str = "Estimated Monthly Cost"):
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="bold magenta")
    table.add_row("Strategy", result.strategy)
    table.add_row("Monthly cost", format_gbp(result.as_money()))
    per_employee = result.per_employee_money()
    if per_employee is not None:
        table.add_row("Per employee", format_gbp(per_employee))
    console.print(table)
    console.print("[dim]This is an estimate. Final pricing will be confirmed in your quote.[/dim]")


def emit(result: QuoteEstimate, as_json: bool = False, output: Optional[str] = None):
    data = estimate_to_dict(result)

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"Estimate saved to: {output}")

    if as_json:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    elif not output:
        render_estimate(result)


def run_estimate(args) -> QuoteEstimate:
    inputs = quote_inputs_from_form({
        'service_type': args.service_type,
        'facility_size': args.facility_size,
        'employee_count': args.employees,
        'bin_count': args.bins,
        'bin_collection_frequency': args.frequency,
        'needs_bin_rental': args.bin_rental,
        'additional_services': args.additional,
    })
    if inputs.service_type is None:
        logger.warning("No recognised service type selected; only add-ons are priced")

    result = estimate(inputs, CONFIGURATIONS[args.configuration])
    emit(result, args.json, args.output)
    return result


def run_clean(args) -> QuoteEstimate:
    inputs = property_inputs_from_form({
        'property_type': args.property_type,
        'property_size': args.property_size,
        'cleaning_frequency': args.frequency,
        'bedrooms': args.bedrooms,
        'bathrooms': args.bathrooms,
        'additional_services': args.additional,
    })
    result = estimate(inputs)
    emit(result, args.json, args.output)
    return result


def interactive_mode():
    """Interactive mode with rich UI."""
    console.print(Panel.fit(
        "[bold magenta]SaniLady Quote Estimator[/bold magenta]\n"
        "[dim]Instant estimates for feminine hygiene solutions[/dim]",
        border_style="magenta"
    ))

    while True:
        service_type = Prompt.ask("Service type", choices=SERVICE_CHOICES, default="period-dignity")
        form: Dict[str, Any] = {'service_type': service_type}

        if service_type in ("period-dignity", "both"):
            form['employee_count'] = IntPrompt.ask("Number of employees", default=0)

        if service_type in ("waste-management", "both"):
            form['facility_size'] = Prompt.ask("Facility size", choices=SIZE_CHOICES, default="small")
            form['bin_count'] = IntPrompt.ask("Number of bins", default=0)
            form['bin_collection_frequency'] = Prompt.ask(
                "Bin collection frequency",
                choices=["weekly", "fortnightly", "monthly"],
                default="monthly"
            )
            form['needs_bin_rental'] = Confirm.ask("Do you need to rent bins?", default=False)

        form['additional_services'] = IntPrompt.ask("Number of additional services", default=0)
        configuration = Prompt.ask("Calculator", choices=sorted(CONFIGURATIONS), default="contact-form")

        result = estimate(quote_inputs_from_form(form), CONFIGURATIONS[configuration])
        render_estimate(result, title=f"{service_type_display(service_type)} estimate")

        if not Confirm.ask("Price another quote?", default=False):
            console.print("[green]Goodbye![/green]")
            break


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == 'estimate':
            run_estimate(args)
        elif args.command == 'clean':
            run_clean(args)
        else:
            interactive_mode()
    except OSError as e:
        logger.error(f"Estimate failed: {e}")
        sys.exit(1)

    return 0


if __name__ == '__main__':
    main()
