from datetime import date, datetime, timedelta, timezone
import calendar
from utils.constants import DATE_FORMAT


def today() -> date:
    return date.today()


def today_str() -> str:
    return date.today().strftime(DATE_FORMAT)


def now_iso() -> str:
    """UTC timestamp like 2026-10-18T09:15:02.123Z."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def parse_date(date_str: str) -> date | None:
    """Parse a date string in YYYY-MM-DD format, returning None on failure."""
    if not date_str:
        return None
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"):
        try:
            return datetime.strptime(date_str.strip(), fmt).date()
        except ValueError:
            continue
    return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def month_bounds(ref: date | None = None) -> tuple[str, str]:
    """Return (first_day_str, last_day_str) of the calendar month containing ref."""
    ref = ref or today()
    last_day = calendar.monthrange(ref.year, ref.month)[1]
    return (
        format_date(ref.replace(day=1)),
        format_date(ref.replace(day=last_day)),
    )


def friendly_month(ref: date | None = None) -> str:
    """e.g. 'October 2026'."""
    return (ref or today()).strftime("%B %Y")


def friendly_date(date_str: str, ref: date | None = None) -> str:
    """'Today', 'Yesterday', 'Oct 3', or 'Oct 3, 2025' for another year."""
    d = parse_date(date_str)
    if d is None:
        return date_str
    ref = ref or today()
    if d == ref:
        return "Today"
    if d == ref - timedelta(days=1):
        return "Yesterday"
    label = f"{d.strftime('%b')} {d.day}"
    if d.year != ref.year:
        label += f", {d.year}"
    return label
