"""
Main CLI module with argument parsing and the interactive catalog menu.

This module provides:
- Command line argument parsing
- Configuration and logging bootstrap
- CatalogShell, the menu loop driving CatalogApplicationService
"""
import argparse
import os
import sys
from typing import Callable, List, Optional, TextIO

from pydantic import ValidationError as PydanticValidationError

from storefront import __version__
from storefront.application.catalog_service import CatalogApplicationService
from storefront.cli.formatters import format_output
from storefront.config.defaults import LogLevel, OutputFormat
from storefront.config.manager import ConfigurationManager
from storefront.domain.core.exceptions import ConfigurationError, DomainException
from storefront.helpers.logger import get_logger, setup_logging

logger = get_logger(__name__)

MENU_CHOICES = [
    ("Add Product", "add_product"),
    ("Add Product Bundle", "add_bundle"),
    ("Add Product to Bundle", "attach_to_bundle"),
    ("Add Discount", "add_discount"),
    ("Get All Products", "list_products"),
    ("Get All Bundles", "list_bundles"),
    ("Get All Discounts", "list_discounts"),
    ("Remove Product", "remove_product"),
    ("Exit", None),
]


class CatalogShell:
    """
    Interactive menu over the catalog.

    Reads one choice, runs it, prints the result and loops until Exit or
    end of input. Domain errors are reported and the loop carries on.
    """

    def __init__(self, service: CatalogApplicationService, output_format: str = "table",
                 prompt: str = "> ", input_func: Optional[Callable[[str], str]] = None,
                 stdout: Optional[TextIO] = None):
        self.service = service
        self.output_format = output_format
        self.prompt = prompt
        self._input = input_func or input
        self._stdout = stdout

    def run(self) -> int:
        """Run the menu loop; returns the process exit code."""
        while True:
            try:
                action = self._choose_action()
            except EOFError:
                self._print()
                return 0
            if action is None:
                self._print("Bye.")
                return 0
            try:
                getattr(self, action)()
            except EOFError:
                self._print()
                return 0
            except (DomainException, ValueError) as e:
                self._print(f"Error: {self._describe(e)}")

    def _choose_action(self) -> Optional[str]:
        while True:
            self._print("What do you want to do?")
            for index, (label, _) in enumerate(MENU_CHOICES, 1):
                self._print(f"  {index}. {label}")
            answer = self._input(self.prompt).strip()
            for index, (label, action) in enumerate(MENU_CHOICES, 1):
                if answer == str(index) or answer.lower() == label.lower():
                    return action
            self._print(f"Unknown option: {answer}")

    def add_product(self) -> None:
        name = self._ask("Product name?")
        code = self._ask("Product code?")
        price = self._ask_number("Product price?")
        product = self.service.create_product(code, name, price)
        self._print(f"Added {product.display()}")

    def add_bundle(self) -> None:
        name = self._ask("Bundle name?")
        code = self._ask("Bundle code?")
        codes: List[str] = []
        while True:
            product_code = self._ask("Enter a product code (or press enter to finish)?")
            if not product_code:
                break
            codes.append(product_code)
        bundle = self.service.create_bundle(code, name, codes)
        self._print(f"Added {bundle.display()}")

    def attach_to_bundle(self) -> None:
        product_code = self._ask("Product code?")
        bundle_code = self._ask("Bundle code?")
        bundle = self.service.attach_to_bundle(product_code, bundle_code)
        self._print(f"Updated {bundle.display()}")

    def add_discount(self) -> None:
        product_code = self._ask("Product code?")
        offer_name = self._ask("Offer name?")
        rate = self._ask_number("Discount rate (%)?")
        discount = self.service.create_discount(product_code, offer_name, rate)
        self._print(f"Added {discount.display()}")

    def list_products(self) -> None:
        self._print(format_output(self.service.list_catalog("products"), self.output_format))

    def list_bundles(self) -> None:
        self._print(format_output(self.service.list_catalog("bundles"), self.output_format))

    def list_discounts(self) -> None:
        self._print(format_output(self.service.list_catalog("discounts"), self.output_format))

    def remove_product(self) -> None:
        code = self._ask("Product code?")
        product = self.service.remove("products", code)
        self._print(f"Removed {product.display()}")

    def _ask(self, message: str) -> str:
        return self._input(f"{message} ").strip()

    def _ask_number(self, message: str) -> float:
        answer = self._ask(message)
        try:
            return float(answer)
        except ValueError:
            raise ValueError(f"Not a number: {answer!r}") from None

    @staticmethod
    def _describe(error: Exception) -> str:
        if isinstance(error, PydanticValidationError):
            return "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
            )
        return str(error)

    def _print(self, message: str = "") -> None:
        print(message, file=self._stdout or sys.stdout)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "storefront",
        description="Storefront - interactive product, bundle and special offer catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Start the interactive menu
  %(prog)s --format json            # Print listings as JSON
  %(prog)s --config storefront.yaml # Load settings from a file
        """
    )

    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Set logging level')
    parser.add_argument('--format', choices=[fmt.value for fmt in OutputFormat],
                        help='Output format for listings')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the storefront console script."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    config = config_manager.config
    logging_config = config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)

    service = CatalogApplicationService(catalog_config=config.catalog)
    shell = CatalogShell(
        service,
        output_format=args.format or config.cli.default_format,
        prompt=config.cli.prompt,
    )
    logger.debug("Starting catalog shell", output_format=shell.output_format)
    try:
        return shell.run()
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
