from __future__ import annotations

import pytest
import typer

from tradier_cli._common import parse_key_value
from tradier_cli.trading import build_leg_params, build_order_params


def test_parse_key_value_splits_on_first_equals() -> None:
    assert parse_key_value("price[1]=2.10", field_name="--param") == ("price[1]", "2.10")
    assert parse_key_value("tag=a=b", field_name="--param") == ("tag", "a=b")


@pytest.mark.parametrize("raw", ["novalue", "=1", ""])
def test_parse_key_value_rejects_malformed_pairs(raw: str) -> None:
    with pytest.raises(typer.BadParameter):
        parse_key_value(raw, field_name="--param")


def test_build_leg_params_indexes_each_leg() -> None:
    assert build_leg_params(["A,buy_to_open,1", " B , sell_to_open , 2 "]) == {
        "option_symbol[0]": "A",
        "side[0]": "buy_to_open",
        "quantity[0]": "1",
        "option_symbol[1]": "B",
        "side[1]": "sell_to_open",
        "quantity[1]": "2",
    }


def test_build_order_params_drops_unset_fields_and_applies_overrides() -> None:
    params = build_order_params(order_class="equity", symbol="AAPL", quantity="10", extra=["quantity=5"])
    assert params == {"class": "equity", "symbol": "AAPL", "quantity": "5"}
