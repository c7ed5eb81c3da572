from __future__ import annotations

import questionary
from rich.console import Console
from rich.style import Style
from rich.text import Text

from billed.cli.bills_menu import list_bills_menu
from billed.cli.new_bill_menu import new_bill_menu
from billed.constants import ROUTES_PATH
from billed.models.session import Session
from billed.services.bill_creator import BillCreator
from billed.services.bill_list import BillList
from billed.stores.base import BillStore

console = Console()

MY_BILLS = "Mes notes de frais"
SEND_BILL = "Envoyer une note de frais"
QUIT = "Quitter"


class Navigator:
    """Records the route the core asked for; the menu loop follows it."""

    def __init__(self) -> None:
        self.pathname: str | None = None

    def __call__(self, pathname: str) -> None:
        self.pathname = pathname

    def take(self) -> str | None:
        pathname, self.pathname = self.pathname, None
        return pathname


def _open_receipt(url: str) -> None:
    console.print(Text.assemble("  Justificatif: ", (url, Style(link=url))))


def main_menu(store: BillStore, session: Session) -> None:
    navigate = Navigator()

    console.print()
    console.print("[bold]Billed[/bold]", style="cyan")
    console.print()

    while True:
        route = navigate.take()
        if route == ROUTES_PATH["Bills"]:
            choice = MY_BILLS
        elif route == ROUTES_PATH["NewBill"]:
            choice = SEND_BILL
        else:
            choice = questionary.select("Menu principal", choices=[MY_BILLS, SEND_BILL, QUIT]).ask()

        if choice is None or choice == QUIT:
            console.print("[bold]À bientôt ![/bold]")
            break
        elif choice == MY_BILLS:
            list_bills_menu(BillList(store, session, navigate=navigate, open_receipt=_open_receipt))
        elif choice == SEND_BILL:
            new_bill_menu(BillCreator(store, session, navigate))
