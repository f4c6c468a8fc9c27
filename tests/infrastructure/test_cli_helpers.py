"""Unit tests for CLI item parsing and display helpers."""

from datetime import timedelta

import click
import pytest

from pizzeria.infrastructure.cli.parsing import parse_item
from pizzeria.infrastructure.cli.presentation import (
    format_elapsed,
    progress_bar,
    status_eta,
    status_label,
)


class TestParseItem:

    def test_name_only(self):
        spec = parse_item("Coca Cola")
        assert (spec.product_name, spec.quantity, spec.toppings) == ("Coca Cola", 1, ())

    def test_full_configuration(self):
        spec = parse_item("Pizza BBQ:3; size=Familiar (30cm); crust=Masa Gruesa; toppings=Pollo, Tocino")
        assert spec.product_name == "Pizza BBQ"
        assert spec.quantity == 3
        assert spec.size == "Familiar (30cm)"
        assert spec.crust == "Masa Gruesa"
        assert spec.toppings == ("Pollo", "Tocino")

    @pytest.mark.parametrize("raw", ["Pizza BBQ:x", ";size=Mediana (25cm)", "Pizza BBQ;sauce=extra"])
    def test_invalid(self, raw):
        with pytest.raises(click.BadParameter):
            parse_item(raw)


class TestPresentation:

    @pytest.mark.parametrize(
        "minutes, text",
        [(0, "0 min"), (59, "59 min"), (60, "1h 0m"), (135, "2h 15m")],
    )
    def test_format_elapsed(self, minutes, text):
        assert format_elapsed(timedelta(minutes=minutes, seconds=30)) == text

    def test_negative_elapsed_shows_zero(self):
        assert format_elapsed(timedelta(minutes=-5)) == "0 min"

    def test_labels(self):
        assert status_label("baking") == "Horneando"
        assert status_label("unknown") == "unknown"
        assert status_eta("delivered") == "Completado"

    def test_progress_bar(self):
        assert progress_bar("preparing", width=10) == "[#####.....] 50%"
