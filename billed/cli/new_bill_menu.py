from __future__ import annotations

import asyncio
import mimetypes
from pathlib import Path

import questionary
from rich.console import Console
from rich.markup import escape

from billed.constants import EXPENSE_TYPES
from billed.errors import SubmitError
from billed.models import parse_amount
from billed.models.bill import BillForm
from billed.models.receipt import ReceiptFile
from billed.services.bill_creator import BillCreator

console = Console()


def _read_receipt(path: Path) -> ReceiptFile:
    content_type, _ = mimetypes.guess_type(path.name)
    return ReceiptFile(filename=path.name, content_type=content_type or "", data=path.read_bytes())


def _ask_form() -> BillForm | None:
    expense_type = questionary.select("Type de dépense", choices=EXPENSE_TYPES).ask()
    if expense_type is None:
        return None
    name = questionary.text("Nom de la dépense:").ask() or ""
    date = questionary.text("Date (AAAA-MM-JJ):").ask() or None
    amount = parse_amount(questionary.text("Montant TTC:").ask() or "")
    vat = questionary.text("TVA:").ask() or None
    percentage = parse_amount(questionary.text("% (défaut 20):").ask() or "")
    commentary = questionary.text("Commentaire:").ask() or None
    return BillForm(
        type=expense_type,
        name=name,
        date=date,
        amount=amount,
        vat=vat,
        percentage=percentage,
        commentary=commentary,
    )


def new_bill_menu(creator: BillCreator) -> None:
    console.print()
    console.print("[bold]Envoyer une note de frais[/bold]", style="cyan")

    form = _ask_form()
    if form is None:
        return

    while True:
        path_text = questionary.path("Justificatif (.jpg, .jpeg, .png):").ask()
        if not path_text:
            console.print("[dim]Note de frais abandonnée.[/dim]")
            return
        path = Path(path_text).expanduser()
        if not path.is_file():
            console.print(f"[red]Fichier introuvable: {escape(str(path))}[/red]")
            continue
        check = creator.attach_file(_read_receipt(path))
        if check.accepted:
            break
        console.print(f"[red]{check.reason}[/red]")

    while True:
        try:
            bill = asyncio.run(creator.submit(form))
        except SubmitError as exc:
            console.print(f"[red]Erreur lors de l'envoi: {escape(str(exc))}[/red]")
            if not questionary.confirm("Réessayer ?", default=True).ask():
                return
            continue
        console.print(f"[green]Note de frais envoyée ({bill.id}).[/green]")
        return
