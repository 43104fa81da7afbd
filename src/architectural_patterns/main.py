# ==============================================================================
#  Copyright 2025 Matthew Pounsett <matt@conundrum.com>
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
# ==============================================================================
"""CLI entry point for the pattern examples."""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

import yaml
from rich.console import Console
from rich.table import Table

from architectural_patterns import __version__
from architectural_patterns.dates import ParseError, format_date_label
from architectural_patterns.factory import ProductKind, create_product
from architectural_patterns.injector import Injector
from architectural_patterns.models import Product

logger = logging.getLogger(__name__)


def decimal_arg(value: str) -> Decimal:
    """argparse type for --price."""
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid decimal value: {value!r}") from None


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="architectural-patterns",
        description="Run the builder, date label, factory and injector examples.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--date",
        action="append",
        dest="dates",
        metavar="DD.MM.YYYY",
        help="Date to convert to a label. Can be specified multiple times.",
    )
    parser.add_argument("--name", help="Product name for the builder example.")
    parser.add_argument(
        "--price",
        type=decimal_arg,
        help="Product price for the builder example.",
    )
    parser.add_argument(
        "--description",
        help="Product description for the builder example.",
    )
    parser.add_argument(
        "-k",
        "--kind",
        action="append",
        dest="kinds",
        choices=[kind.value for kind in ProductKind],
        help="Product kind to create with the factory. Can be specified multiple times.",
    )
    parser.add_argument(
        "-c",
        "--client",
        action="store_true",
        help="Provision a client through the injector and run it.",
    )
    parser.add_argument(
        "-p",
        "--print",
        action="store_true",
        dest="print_table",
        help="Print tables of results to stdout.",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output YAML file path. Use '-' for stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity. Use -vv for debug output.",
    )

    return parser.parse_args(args)


def setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity: Verbosity level (0=warning, 1=info, 2+=debug).
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def print_results_table(results: dict, console: Console) -> None:
    """Print Rich tables of the collected results.

    Args:
        results: Results as built by :func:`run`.
        console: Rich console for output.
    """
    if "dates" in results:
        table = Table(title="Date labels")
        table.add_column("Input", style="cyan")
        table.add_column("Label", style="green")
        for entry in results["dates"]:
            table.add_row(entry["input"], entry["label"] or "Invalid")
        console.print(table)

    if "product" in results:
        product = results["product"]
        table = Table(title="Product")
        table.add_column("Name", style="green")
        table.add_column("Price", style="yellow")
        table.add_column("Description", style="blue")
        table.add_row(
            product["name"] or "-",
            product["price"] or "-",
            product["description"] or "-",
        )
        console.print(table)

    if "actions" in results:
        table = Table(title="Actions")
        table.add_column("Source", style="cyan")
        table.add_column("Result", style="green")
        for entry in results["actions"]:
            table.add_row(entry["source"], entry["result"])
        console.print(table)


def output_yaml(results: dict, output_path: str) -> None:
    """Output results as YAML.

    Args:
        results: Results as built by :func:`run`.
        output_path: File path or '-' for stdout.
    """
    if output_path == "-":
        yaml.dump(results, sys.stdout, default_flow_style=False, sort_keys=False, allow_unicode=True)
    else:
        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(results, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        logger.info("Output written to: %s", output_path)


def run(parsed_args: argparse.Namespace) -> tuple[dict, bool]:
    """Run the requested examples.

    Args:
        parsed_args: Namespace from :func:`parse_args`.

    Returns:
        The collected results and whether every date parsed.
    """
    results: dict = {}
    ok = True

    if parsed_args.dates:
        results["dates"] = []
        for value in parsed_args.dates:
            try:
                label = format_date_label(value)
            except ParseError as e:
                logger.error("%s", e)
                label = None
                ok = False
            else:
                logger.info("Converted %s to %s", value, label)
            results["dates"].append({"input": value, "label": label})

    if any(
        value is not None
        for value in (parsed_args.name, parsed_args.price, parsed_args.description)
    ):
        builder = Product.builder()
        if parsed_args.name is not None:
            builder.set_name(parsed_args.name)
        if parsed_args.price is not None:
            builder.set_price(parsed_args.price)
        if parsed_args.description is not None:
            builder.set_description(parsed_args.description)
        product = builder.build()
        logger.info("Built product: %s", product)
        results["product"] = product.model_dump(mode="json")

    actions = []
    for kind in parsed_args.kinds or []:
        product = create_product(kind)
        actions.append({"source": product.label, "result": product.use()})

    if parsed_args.client:
        client = Injector.provide_client()
        actions.append({"source": type(client).__name__, "result": client.do_something()})

    if actions:
        results["actions"] = actions

    return results, ok


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parsed_args = parse_args(args)
    setup_logging(parsed_args.verbose)

    results, ok = run(parsed_args)
    if not results:
        logger.error("Nothing to do. Use -d, --name/--price/--description, -k or -c.")
        return 1

    if parsed_args.print_table:
        print_results_table(results, Console())

    if parsed_args.output:
        output_yaml(results, parsed_args.output)

    return 0 if ok else 2


if __name__ == "__main__":
    sys.exit(main())
