def format_currency(amount: float, symbol: str = "$") -> str:
    """Format a float as currency string, e.g. '$1,234.56'."""
    return f"{symbol}{amount:,.2f}"


def format_signed(amount: float, symbol: str = "$") -> str:
    """Format with +/- sign."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_amount(amount: float, kind: str, symbol: str = "$") -> str:
    """Stored magnitude shown with the sign its kind implies, e.g. '-$12.50'."""
    sign = "-" if kind == "expense" else "+"
    return f"{sign}{format_currency(abs(amount), symbol)}"
