"""Tests for the tallyup example CLI."""

import pytest
from typer.testing import CliRunner

import tallyup.__main__ as cli
from tallyup.__main__ import app

runner = CliRunner()


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "calculator" in result.output
    assert "profit" in result.output


def test_calculator_examples():
    result = runner.invoke(app, ["calculator"])
    assert result.exit_code == 0
    assert "add(5, 3, 2)" in result.output
    assert "256" in result.output


def test_cart_examples():
    result = runner.invoke(app, ["cart"])
    assert result.exit_code == 0
    assert "1139.96" in result.output
    assert "28.96" in result.output
    assert "Laptop" in result.output


def test_profit_examples():
    result = runner.invoke(app, ["profit"])
    assert result.exit_code == 0
    assert "40.00%" in result.output
    assert "33.33%" in result.output


@pytest.mark.parametrize("section", ["Calculator Examples", "Profit & Revenue Examples"])
def test_examples_runs_everything(section):
    result = runner.invoke(app, ["examples"])
    assert result.exit_code == 0
    assert section in result.output


def test_cart_error_exits_nonzero(monkeypatch):
    monkeypatch.setattr(cli, "CART_EXAMPLES", [("Broken cart", [{"name": "Ghost", "price": -1}])])
    result = runner.invoke(app, ["cart"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "price cannot be negative" in result.output


def test_profit_error_exits_nonzero(monkeypatch):
    monkeypatch.setattr(cli, "PROFIT_EXAMPLES", [("Broken", -5, 1, None)])
    result = runner.invoke(app, ["profit"])
    assert result.exit_code == 1
    assert "Error:" in result.output
