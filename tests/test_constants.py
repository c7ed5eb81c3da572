import pytest

from billed.constants import EXPENSE_TYPES, ROUTES_PATH, format_date, format_status
from billed.models.bill import BillStatus


class TestFormatDate:
    def test_example(self):
        assert format_date("2021-01-01") == "1 Jan. 21"

    def test_two_digit_day(self):
        assert format_date("2004-04-14") == "14 Avr. 04"

    def test_accented_month(self):
        assert format_date("2019-02-02") == "2 Fév. 19"
        assert format_date("2020-12-25") == "25 Déc. 20"

    @pytest.mark.parametrize("value", ["2020-13-01", "not a date", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            format_date(value)


class TestFormatStatus:
    def test_labels(self):
        assert format_status("pending") == "En attente"
        assert format_status("accepted") == "Accepté"
        assert format_status("refused") == "Refusé"

    def test_enum(self):
        assert format_status(BillStatus.ACCEPTED) == "Accepté"

    def test_unknown(self):
        assert format_status("archived") == "archived"
        assert format_status("") == ""


class TestRoutes:
    def test_paths(self):
        assert ROUTES_PATH["Bills"] == "#employee/bills"
        assert ROUTES_PATH["NewBill"] == "#employee/bill/new"

    def test_expense_types(self):
        assert "Transports" in EXPENSE_TYPES
        assert "Hôtel et logement" in EXPENSE_TYPES
