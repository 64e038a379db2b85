from datetime import datetime


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def get_timestamp_for_filename() -> str:
    """Milliseconds since the epoch, e.g. '1718000000000', so repeated exports never collide."""
    return str(int(datetime.now().timestamp() * 1000))


def get_display_datetime(now: datetime | None = None) -> tuple[str, str]:
    """Date and time the way they are printed on an order sheet: ('19/10/2026', '14:05')."""
    now = now or datetime.now()
    return now.strftime("%d/%m/%Y"), now.strftime("%H:%M")
