"""Tests for the interactive catalog menu."""

import io
import json
from unittest.mock import patch

import pytest

from storefront.cli.main import CatalogShell, main, parse_args


def run_shell(service, answers, output_format="list"):
    """Run a shell fed with scripted answers; returns (exit code, output)."""
    inputs = iter(answers)

    def fake_input(prompt):
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError

    out = io.StringIO()
    shell = CatalogShell(service, output_format=output_format, input_func=fake_input, stdout=out)
    return shell.run(), out.getvalue()


def test_exit_by_number(catalog_service):
    code, output = run_shell(catalog_service, ["9"])

    assert code == 0
    assert "1. Add Product" in output
    assert "Bye." in output


def test_exit_by_label_and_end_of_input(catalog_service):
    assert run_shell(catalog_service, ["exit"])[0] == 0
    assert run_shell(catalog_service, [])[0] == 0


def test_unknown_option_shows_menu_again(catalog_service):
    _, output = run_shell(catalog_service, ["42", "9"])

    assert "Unknown option: 42" in output
    assert output.count("What do you want to do?") == 2


def test_add_product_and_list(catalog_service):
    _, output = run_shell(catalog_service, [
        "1", "Widget", "A", "100",
        "5",
        "9",
    ])

    assert "Added Product: Widget (Price: $100)" in output
    assert "[A] Product: Widget (Price: $100)" in output
    assert catalog_service.facade.get_product("A").price == 100


def test_add_bundle_with_product_codes(catalog_service):
    _, output = run_shell(catalog_service, [
        "1", "Widget", "A", "100",
        "1", "Gadget", "C", "50",
        "Add Product Bundle", "Starter Pack", "B1", "A", "C", "",
        "6",
        "9",
    ])

    bundle = catalog_service.facade.get_bundle("B1")
    assert bundle.get_price() == 150
    assert "Added Bundle: Starter Pack" in output
    assert "  Total: $150" in output


def test_attach_product_to_missing_bundle_reports_error(catalog_service):
    _, output = run_shell(catalog_service, [
        "1", "Widget", "A", "100",
        "3", "A", "B1",
        "9",
    ])

    assert "Error: Bundle with code B1 not found" in output
    assert "Bye." in output


def test_attach_product_to_bundle(catalog_service):
    _, output = run_shell(catalog_service, [
        "1", "Widget", "A", "100",
        "2", "Starter Pack", "B1", "",
        "3", "A", "B1",
        "9",
    ])

    assert "Updated Bundle: Starter Pack\n  Product: Widget (Price: $100)" in output


def test_add_discount_and_list(catalog_service):
    _, output = run_shell(catalog_service, [
        "1", "Widget", "A", "100",
        "4", "A", "Sale", "20",
        "7",
        "9",
    ])

    assert "Added Special Offer: Sale (Discount: 20%)" in output
    assert "  Total: $80" in output


def test_invalid_input_keeps_loop_running(catalog_service):
    _, output = run_shell(catalog_service, [
        "1", "Widget", "A", "lots",
        "1", "Widget", "A", "-5",
        "4", "missing", "Sale", "20",
        "9",
    ])

    assert "Error: Not a number: 'lots'" in output
    assert "Error: price:" in output
    assert "Error: Product with code missing not found" in output
    assert "Bye." in output


def test_remove_product(catalog_service):
    _, output = run_shell(catalog_service, [
        "1", "Widget", "A", "100",
        "8", "A",
        "8", "A",
        "9",
    ])

    assert "Removed Product: Widget (Price: $100)" in output
    assert "Error: Product with code A not found" in output


def test_json_listing(catalog_service):
    catalog_service.create_product("A", "Widget", 100)
    _, output = run_shell(catalog_service, ["5", "9"], output_format="json")

    start = output.index("{")
    end = output.rindex("}") + 1
    assert json.loads(output[start:end])["products"][0]["code"] == "A"


def test_parse_args_defaults():
    args = parse_args([])
    assert args.config is None
    assert args.format is None
    assert args.log_level is None


def test_parse_args_rejects_unknown_format():
    with pytest.raises(SystemExit):
        parse_args(["--format", "xml"])


def test_main_reports_configuration_errors(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
    assert "Configuration error" in capsys.readouterr().err


def test_main_runs_shell(capsys):
    with patch("builtins.input", side_effect=["1", "Widget", "A", "100", "5", "9"]):
        assert main(["--format", "list", "--log-level", "ERROR"]) == 0

    output = capsys.readouterr().out
    assert "[A] Product: Widget (Price: $100)" in output
    assert "Bye." in output
