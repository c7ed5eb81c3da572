from unittest.mock import patch

from billed.cli.app import MY_BILLS, QUIT, SEND_BILL, Navigator, main_menu
from billed.constants import ROUTES_PATH


class TestNavigator:
    def test_take_clears_route(self):
        navigate = Navigator()
        navigate(ROUTES_PATH["Bills"])
        assert navigate.take() == ROUTES_PATH["Bills"]
        assert navigate.take() is None


class TestMainMenu:
    @patch("billed.cli.app.new_bill_menu")
    @patch("billed.cli.app.list_bills_menu")
    @patch("billed.cli.app.questionary")
    def test_quit(self, mock_q, mock_list, mock_new, fake_store, employee_session):
        mock_q.select.return_value.ask.return_value = QUIT
        main_menu(fake_store(), employee_session)
        mock_list.assert_not_called()
        mock_new.assert_not_called()

    @patch("billed.cli.app.new_bill_menu")
    @patch("billed.cli.app.list_bills_menu")
    @patch("billed.cli.app.questionary")
    def test_none_exits(self, mock_q, mock_list, mock_new, fake_store, employee_session):
        mock_q.select.return_value.ask.return_value = None
        main_menu(fake_store(), employee_session)
        mock_list.assert_not_called()

    @patch("billed.cli.app.new_bill_menu")
    @patch("billed.cli.app.list_bills_menu")
    @patch("billed.cli.app.questionary")
    def test_list_then_new_bill_route(self, mock_q, mock_list, mock_new, fake_store, employee_session):
        mock_q.select.return_value.ask.side_effect = [MY_BILLS, QUIT]
        mock_list.side_effect = lambda bill_list: bill_list.new_bill()

        main_menu(fake_store(), employee_session)

        mock_list.assert_called_once()
        mock_new.assert_called_once()
        assert mock_q.select.return_value.ask.call_count == 2

    @patch("billed.cli.app.new_bill_menu")
    @patch("billed.cli.app.list_bills_menu")
    @patch("billed.cli.app.questionary")
    def test_submitted_bill_returns_to_list(self, mock_q, mock_list, mock_new, fake_store, employee_session):
        mock_q.select.return_value.ask.side_effect = [SEND_BILL, QUIT]
        mock_new.side_effect = lambda creator: creator.navigate(ROUTES_PATH["Bills"])

        main_menu(fake_store(), employee_session)

        mock_new.assert_called_once()
        mock_list.assert_called_once()
