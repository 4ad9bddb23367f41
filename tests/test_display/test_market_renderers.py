from __future__ import annotations

import io
import json

import pytest

from tradier_cli.display.markets import (
    render_calendar,
    render_clock,
    render_easy_to_borrow,
    render_option_chain,
    render_option_expirations,
    render_option_lookup,
    render_option_strikes,
    render_price_history,
    render_quotes,
    render_securities,
    render_time_sales,
)


def _body(doc: object) -> bytes:
    return json.dumps(doc).encode()


def test_quotes_single_object(output: io.StringIO, table_cells) -> None:
    render_quotes(
        _body(
            {
                "quotes": {
                    "quote": {
                        "symbol": "AAPL",
                        "last": 185.5,
                        "change": -1.25,
                        "change_percentage": -0.67,
                        "volume": 51234567,
                        "bid": 185.49,
                        "ask": 185.51,
                        "open": 186,
                        "high": 187.2,
                        "low": 184.9,
                    }
                }
            }
        )
    )
    assert table_cells(output.getvalue()) == [
        ["SYMBOL", "LAST", "CHANGE", "CHG%", "VOLUME", "BID", "ASK", "OPEN", "HIGH", "LOW"],
        ["AAPL", "185.50", "-1.25", "-0.67%", "51234567", "185.49", "185.51", "186.00", "187.20", "184.90"],
    ]


def test_quotes_unmatched_symbols(output: io.StringIO) -> None:
    render_quotes(_body({"quotes": {"unmatched_symbols": {"symbol": "ZZZZ"}}}))
    assert output.getvalue() == "No results found.\n"


def test_option_chain(output: io.StringIO, table_cells) -> None:
    render_option_chain(
        _body(
            {
                "options": {
                    "option": [
                        {
                            "symbol": "AAPL240119C00150000",
                            "option_type": "call",
                            "strike": 150,
                            "last": 36.1,
                            "bid": 36,
                            "ask": 36.25,
                            "volume": 12,
                            "open_interest": 3400,
                        }
                    ]
                }
            }
        )
    )
    assert table_cells(output.getvalue())[1] == [
        "AAPL 01/19/24 $150 Call",
        "call",
        "150.00",
        "36.10",
        "36.00",
        "36.25",
        "12",
        "3400",
    ]


def test_option_chain_null(output: io.StringIO) -> None:
    render_option_chain(b'{"options": null}')
    assert output.getvalue() == "No options chain data found.\n"


def test_expirations_from_date_list(output: io.StringIO, table_cells) -> None:
    render_option_expirations(_body({"expirations": {"date": ["2024-01-19", "2024-01-26"]}}))
    assert table_cells(output.getvalue()) == [["EXPIRATION"], ["2024-01-19"], ["2024-01-26"]]


def test_expirations_single_scalar_date(output: io.StringIO, table_cells) -> None:
    render_option_expirations(_body({"expirations": {"date": "2024-01-19"}}))
    assert table_cells(output.getvalue())[1:] == [["2024-01-19"]]


def test_expirations_from_expiration_objects(output: io.StringIO, table_cells) -> None:
    render_option_expirations(
        _body(
            {
                "expirations": {
                    "expiration": [
                        {"date": "2024-01-19", "contract_size": 100},
                        {"date": "2024-02-16T00:00:00", "contract_size": 100},
                    ]
                }
            }
        )
    )
    assert table_cells(output.getvalue())[1:] == [["2024-01-19"], ["2024-02-16"]]


def test_expirations_missing(output: io.StringIO) -> None:
    render_option_expirations(b'{"expirations": null}')
    assert output.getvalue() == "No expiration data found.\n"


def test_strikes(output: io.StringIO, table_cells) -> None:
    render_option_strikes(_body({"strikes": {"strike": [145, 147.5, 150.0]}}))
    assert table_cells(output.getvalue())[1:] == [["145"], ["147.50"], ["150"]]


def test_strikes_single_value(output: io.StringIO, table_cells) -> None:
    render_option_strikes(_body({"strikes": {"strike": 150}}))
    assert table_cells(output.getvalue())[1:] == [["150"]]


def test_option_lookup_array_form(output: io.StringIO, table_cells) -> None:
    render_option_lookup(
        _body(
            {
                "symbols": [
                    {
                        "rootSymbol": "SPY",
                        "symbol": "SPY240119P00450500",
                        "strike": 450.5,
                        "expiration_date": "2024-01-19",
                        "option_type": "put",
                    }
                ]
            }
        )
    )
    assert table_cells(output.getvalue())[1] == ["SPY 01/19/24 $450.50 Put", "SPY", "450.50", "2024-01-19", "put"]


def test_option_lookup_nested_form(output: io.StringIO, table_cells) -> None:
    render_option_lookup(_body({"symbols": {"option": {"symbol": "SPY240119C00470000", "rootSymbol": "SPY"}}}))
    assert table_cells(output.getvalue())[1][:2] == ["SPY 01/19/24 $470 Call", "SPY"]


def test_option_lookup_single_object_is_one_row(output: io.StringIO, table_cells) -> None:
    render_option_lookup(_body({"symbols": {"rootSymbol": "AAPL", "symbol": "AAPL240119C00150000", "strike": 150}}))
    assert table_cells(output.getvalue())[1:] == [["AAPL 01/19/24 $150 Call", "AAPL", "150.00", "", ""]]


@pytest.mark.parametrize("body", [b"{}", b'{"symbols": null}', b'{"symbols": {"option": null}}'])
def test_option_lookup_missing(output: io.StringIO, body: bytes) -> None:
    render_option_lookup(body)
    assert output.getvalue() == "No options symbols found.\n"


def test_price_history(output: io.StringIO, table_cells) -> None:
    render_price_history(
        _body({"history": {"day": {"date": "2024-01-02", "open": 1, "high": 2, "low": 0.5, "close": 1.5, "volume": 100}}})
    )
    assert table_cells(output.getvalue()) == [
        ["DATE", "OPEN", "HIGH", "LOW", "CLOSE", "VOLUME"],
        ["2024-01-02", "1.00", "2.00", "0.50", "1.50", "100"],
    ]


def test_price_history_null(output: io.StringIO) -> None:
    render_price_history(b'{"history": null}')
    assert output.getvalue() == "No historical data found.\n"


def test_time_sales(output: io.StringIO, table_cells) -> None:
    render_time_sales(
        _body(
            {
                "series": {
                    "data": [
                        {"timestamp": 1704205800, "time": "2024-01-02T09:30:00", "open": 10, "close": 11},
                        {"timestamp": 1704205860, "open": 11, "volume": 25},
                    ]
                }
            }
        )
    )
    cells = table_cells(output.getvalue())
    assert cells[0] == ["TIMESTAMP", "OPEN", "HIGH", "LOW", "CLOSE", "VOLUME"]
    assert cells[1] == ["1704205800", "10.00", "0.00", "0.00", "11.00", ""]
    assert cells[2] == ["1704205860", "11.00", "0.00", "0.00", "0.00", "25"]


def test_time_sales_missing(output: io.StringIO) -> None:
    render_time_sales(b"{}")
    assert output.getvalue() == "No time and sales data found.\n"


def test_calendar(output: io.StringIO, table_cells) -> None:
    render_calendar(
        _body(
            {
                "calendar": {
                    "month": 1,
                    "year": 2024,
                    "days": {
                        "day": [
                            {
                                "date": "2024-01-02",
                                "status": "open",
                                "description": "Market is open",
                                "open": {"start": "09:30", "end": "16:00"},
                            },
                            {"date": "2024-01-01", "status": "closed", "description": "New Year's Day"},
                        ]
                    },
                }
            }
        )
    )
    cells = table_cells(output.getvalue())
    assert cells[1] == ["2024-01-02", "open", "Market is open", "09:30", "16:00"]
    assert cells[2] == ["2024-01-01", "closed", "New Year's Day", "", ""]


def test_calendar_missing_levels(output: io.StringIO) -> None:
    render_calendar(b'{"calendar": null}')
    render_calendar(b'{"calendar": {"month": 1}}')
    assert output.getvalue() == "No calendar data found.\nNo calendar days found.\n"


def test_clock(output: io.StringIO, table_cells) -> None:
    render_clock(
        _body(
            {
                "clock": {
                    "date": "2024-01-02",
                    "description": "Market is open from 09:30 to 16:00",
                    "state": "open",
                    "timestamp": 1704213000,
                    "next_change": "16:00",
                    "next_state": "postmarket",
                }
            }
        )
    )
    assert table_cells(output.getvalue()) == [
        ["Date", "2024-01-02"],
        ["State", "open"],
        ["Description", "Market is open from 09:30 to 16:00"],
        ["Next State", "postmarket"],
        ["Next Change", "16:00"],
    ]


def test_easy_to_borrow(output: io.StringIO, table_cells) -> None:
    render_easy_to_borrow(_body({"securities": {"security": [{"symbol": "AAPL"}, {"symbol": "MSFT"}]}}))
    assert table_cells(output.getvalue()) == [["SYMBOL"], ["AAPL"], ["MSFT"]]


def test_easy_to_borrow_missing(output: io.StringIO) -> None:
    render_easy_to_borrow(b'{"securities": null}')
    assert output.getvalue() == "No ETB data found.\n"


def test_securities(output: io.StringIO, table_cells) -> None:
    render_securities(
        _body({"securities": {"security": {"symbol": "AAPL", "exchange": "Q", "type": "stock", "description": "Apple Inc"}}})
    )
    assert table_cells(output.getvalue())[1] == ["AAPL", "Q", "stock", "Apple Inc"]


def test_securities_missing(output: io.StringIO) -> None:
    render_securities(b'{"securities": "null"}')
    assert output.getvalue() == "No securities found.\n"
