def format_amount(amount: int | None) -> str:
    """Format an amount for display: 400 -> '400 €'"""
    if amount is None:
        return ""
    return f"{amount} €"


def parse_amount(text: str) -> int | None:
    """Parse a typed amount into an integer. Returns None on invalid input.

    Accepts formats like '300', ' 300 ', '300.00'.
    """
    text = text.strip()
    if not text:
        return None
    try:
        return int(float(text.replace(",", ".")))
    except ValueError:
        return None
