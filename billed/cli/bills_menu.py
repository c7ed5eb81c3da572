from __future__ import annotations

import asyncio

import questionary
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from billed.constants import STATUS_LABELS
from billed.errors import FetchError
from billed.models.bill import BillStatus, PresentableBill
from billed.services.bill_list import BillList, filter_by_status

console = Console()

NEW_BILL = "Nouvelle note de frais"
VIEW_RECEIPT = "Voir un justificatif"
BACK = "Retour"


def render_bills(bills: list[PresentableBill], title: str = "Mes notes de frais") -> None:
    table = Table(title=title)
    table.add_column("Type")
    table.add_column("Nom")
    table.add_column("Date")
    table.add_column("Montant", justify="right")
    table.add_column("Statut", justify="center")

    # Record values are user data, never markup.
    for bill in bills:
        record = bill.record
        table.add_row(
            Text(str(record.get("type") or "")),
            Text(str(record.get("name") or "")),
            Text(bill.date),
            Text(bill.amount),
            Text(bill.status),
        )

    console.print(table)


def render_dashboard(bills: list[PresentableBill]) -> None:
    """Admin view: one table per status."""
    for status in BillStatus:
        group = filter_by_status(bills, status)
        render_bills(group, title=f"{STATUS_LABELS[status]} ({len(group)})")


def render_error(message: str) -> None:
    console.print(f"[bold red]{escape(message)}[/bold red]")


def _receipt_label(index: int, bill: PresentableBill) -> str:
    return f"{index} - {bill.record.get('name') or '?'} ({bill.date})"


def list_bills_menu(bill_list: BillList) -> None:
    console.print()
    try:
        bills = asyncio.run(bill_list.fetch_and_present())
    except FetchError as exc:
        render_error(str(exc))
        bills = []
    else:
        if not bills:
            console.print("[dim]Aucune note de frais.[/dim]")
        elif bill_list.session.is_admin:
            render_dashboard(bills)
        else:
            render_bills(bills)

    choice = questionary.select("Que voulez-vous faire ?", choices=[NEW_BILL, VIEW_RECEIPT, BACK]).ask()
    if choice == NEW_BILL:
        bill_list.new_bill()
    elif choice == VIEW_RECEIPT:
        with_receipt = [b for b in bills if b.file_url]
        if not with_receipt:
            console.print("[yellow]Aucun justificatif disponible.[/yellow]")
            return
        labels = [_receipt_label(i, b) for i, b in enumerate(with_receipt, 1)]
        picked = questionary.select("Justificatif", choices=[*labels, BACK]).ask()
        if picked is None or picked == BACK:
            return
        bill_list.show_receipt(with_receipt[labels.index(picked)])
