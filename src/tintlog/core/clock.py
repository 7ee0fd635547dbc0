from __future__ import annotations
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

# All timestamps are shown in US Pacific time regardless of host zone.
REFERENCE_ZONE = ZoneInfo("America/Los_Angeles")

def now() -> datetime:
    return datetime.now(timezone.utc)

def format_timestamp(moment: datetime | None = None, show_zone: bool = False) -> str:
    """Render `[YYYY-MM-DD hh:mm:ss AM]` in the reference zone.

    Naive datetimes are taken as UTC. With `show_zone` the zone abbreviation
    (PST/PDT) is appended inside the brackets.
    """
    if moment is None:
        moment = now()
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    local = moment.astimezone(REFERENCE_ZONE)
    # %p follows the C locale only; spell the meridiem out to stay stable.
    meridiem = "AM" if local.hour < 12 else "PM"
    text = f"{local:%Y-%m-%d %I:%M:%S} {meridiem}"
    if show_zone:
        text += f" {local.tzname()}"
    return f"[{text}]"
