import logging

import numpy as np
import pytest

from errors import DateWindowNotFound, EmptySeries, InputError, PriceFileError, UnknownInstrument
from load_prices import find_year_window, instrument_series, load_price_table

MESSY = """Date, AAPL , MSFT
12/29/2023, 192.53, 376.04

01/02/2024,185.64,370.87
01/03/2024,184.25
01/04/2024,181.91,abc
   01/05/2024 , 181.18 , 367.75
01/08/2024,185.56,374.69,1
"""


class TestLoadPriceTable:
    def test_messy_file(self, tmp_path, caplog):
        path = tmp_path / "closes.csv"
        path.write_text(MESSY)
        with caplog.at_level(logging.WARNING):
            table = load_price_table(path)

        assert list(table.columns) == ["AAPL", "MSFT"]
        assert table.index.name == "Date"
        assert list(table.index) == ["12/29/2023", "01/02/2024", "01/05/2024"]
        assert table["AAPL"].tolist() == pytest.approx([192.53, 185.64, 181.18])
        assert table["MSFT"].dtype == np.float64
        # short row, bad number, long row
        assert len(caplog.records) == 3

    def test_generated_file(self, close_file):
        table = load_price_table(close_file)
        assert list(table.columns) == ["AAPL", "KO"]
        assert len(table) == 150

    def test_missing_file(self, tmp_path):
        with pytest.raises(PriceFileError):
            load_price_table(tmp_path / "nope.csv")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(PriceFileError, match="empty"):
            load_price_table(path)

    def test_header_without_symbols(self, tmp_path):
        path = tmp_path / "dates.csv"
        path.write_text("Date\n01/02/2024\n")
        with pytest.raises(PriceFileError, match="too few"):
            load_price_table(path)


class TestInstrumentSeries:
    def test_prices_and_dates(self, close_file):
        table = load_price_table(close_file)
        prices, dates = instrument_series(table, "KO")
        assert isinstance(prices, np.ndarray)
        assert len(prices) == len(dates) == 150
        assert dates[0] == "10/02/2023"

    def test_unknown_symbol(self, close_file):
        table = load_price_table(close_file)
        with pytest.raises(UnknownInstrument):
            instrument_series(table, "ZZZ")

    def test_header_only_file(self, tmp_path):
        path = tmp_path / "header.csv"
        path.write_text("Date,AAPL\n")
        table = load_price_table(path)
        with pytest.raises(EmptySeries):
            instrument_series(table, "AAPL")


class TestFindYearWindow:
    DATES = ["12/28/2023", "12/29/2023", "01/02/2024", "06/03/2024", "12/31/2024", "01/02/2025"]

    def test_first_and_last(self):
        assert find_year_window(self.DATES, "2024") == (2, 4)

    def test_single_day(self):
        assert find_year_window(self.DATES, "2025") == (5, 5)

    def test_no_match(self):
        with pytest.raises(DateWindowNotFound):
            find_year_window(self.DATES, "2022")

    def test_iso_dates_do_not_match(self):
        with pytest.raises(DateWindowNotFound):
            find_year_window(["2024-01-02", "2024-01-03"], "2024")


class TestErrorHierarchy:
    def test_unreadable_file_is_not_a_per_symbol_skip(self):
        assert not issubclass(PriceFileError, InputError)
        assert issubclass(PriceFileError, ValueError)
