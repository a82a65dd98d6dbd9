# floorball_cal/ical/builder.py
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from icalendar import Calendar
from icalendar import Event as CalendarEvent
from loguru import logger

from floorball_cal.config.settings import settings
from floorball_cal.models.event import Event
from floorball_cal.models.team import Team

DateComponents = Tuple[int, int, int, int, int]


class SerializationError(Exception):
    """Raised when the calendar cannot be assembled or serialized."""

    pass


def to_date_components(value: datetime) -> DateComponents:
    """(year, month, day, hour, minute) from the local components of ``value``."""
    return (value.year, value.month, value.day, value.hour, value.minute)


def _from_date_components(components: DateComponents) -> datetime:
    return datetime(*components)


def build_description(event: Event) -> str:
    parts = [f"Heim: {event.home_team}", f"Gast: {event.guest_team}"]
    if event.host_club:
        parts.append(f"Ausrichter: {event.host_club}")
    return "\n".join(parts)


def build_uid(team: Team, index: int, namespace: Optional[str] = None) -> str:
    """Positional UID, unique per team within one generated calendar."""
    return f"{team.id}-{index}@{namespace or settings.calendar_namespace}"


def _build_entry(
    team: Team, event: Event, index: int, namespace: str, stamp: datetime
) -> CalendarEvent:
    start = _from_date_components(to_date_components(event.start))
    end = _from_date_components(to_date_components(event.end))
    if end < start:
        raise SerializationError(
            f"Event {index} ({event.title}) ends before it starts: {start} > {end}"
        )

    entry = CalendarEvent()
    entry.add("uid", build_uid(team, index, namespace))
    entry.add("dtstamp", stamp)
    entry.add("summary", event.title)
    entry.add("description", build_description(event))
    entry.add("location", event.location)
    entry.add("dtstart", start)
    entry.add("dtend", end)
    return entry


def build_calendar(
    team: Team, events: Sequence[Event], namespace: Optional[str] = None
) -> str:
    """Renders one calendar entry per event, in the given order, as iCalendar text.

    Raises:
        SerializationError: if any entry is invalid or the calendar fails to
            serialize. Nothing is returned in that case.
    """
    namespace = namespace or settings.calendar_namespace
    stamp = datetime.now(timezone.utc).replace(microsecond=0)

    calendar = Calendar()
    calendar.add("prodid", f"-//{namespace}//DE")
    calendar.add("version", "2.0")
    calendar.add("x-wr-calname", team.name)

    entries: List[CalendarEvent] = [
        _build_entry(team, event, index, namespace, stamp)
        for index, event in enumerate(events)
    ]
    for entry in entries:
        calendar.add_component(entry)

    try:
        payload = calendar.to_ical()
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to serialize calendar for team {team.id}: {e}")
        raise SerializationError(f"Failed to serialize calendar for team {team.id}") from e

    logger.info(f"Built calendar for team {team.id} with {len(entries)} events")
    if not payload:
        return ""
    return payload.decode("utf-8")
