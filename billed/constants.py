from datetime import date

from billed.models.bill import BillStatus

ROUTES_PATH = {
    "Login": "/",
    "Bills": "#employee/bills",
    "NewBill": "#employee/bill/new",
    "Dashboard": "#admin/dashboard",
}

EXPENSE_TYPES = [
    "Transports",
    "Restaurants et bars",
    "Hôtel et logement",
    "Services en ligne",
    "IT et électronique",
    "Equipement et matériel",
    "Fournitures de bureau",
]

DEFAULT_PERCENTAGE = 20

MONTHS_FR = {
    1: "Jan",
    2: "Fév",
    3: "Mar",
    4: "Avr",
    5: "Mai",
    6: "Jui",
    7: "Jui",
    8: "Aoû",
    9: "Sep",
    10: "Oct",
    11: "Nov",
    12: "Déc",
}

STATUS_LABELS = {
    BillStatus.PENDING: "En attente",
    BillStatus.ACCEPTED: "Accepté",
    BillStatus.REFUSED: "Refusé",
}


def format_date(value: str) -> str:
    """Format an ISO date for display: '2021-01-01' -> '1 Jan. 21'

    Raises ValueError when the value is not a valid 'YYYY-MM-DD' date.
    """
    parsed = date.fromisoformat(value)
    return f"{parsed.day} {MONTHS_FR[parsed.month]}. {parsed.year % 100:02d}"


def format_status(status: str) -> str:
    try:
        return STATUS_LABELS[BillStatus(status)]
    except ValueError:
        return status or ""
