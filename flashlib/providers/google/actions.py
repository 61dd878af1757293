"""Google Calendar and Gmail actions."""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from flashlib.actions.base import Action, bind_config
from flashlib.core.errors import ProviderError
from flashlib.providers.core.http import parse_record, parse_records, query_params, request_json

from .config import GoogleConfig
from .models import (
    CalendarEvent,
    DeleteCalendarEventParams,
    EventTime,
    GetCalendarEventsParams,
    GetCalendarListParams,
    GmailListResponse,
    InsertCalendarEventParams,
    ListGmailParams,
)
from .prompts import (
    DELETE_CALENDAR_EVENTS_PROMPT,
    GET_CALENDAR_EVENTS_PROMPT,
    GET_CALENDAR_LIST_PROMPT,
    INSERT_CALENDAR_EVENT_PROMPT,
    LIST_GMAIL_PROMPT,
)

logger = logging.getLogger(__name__)

PROVIDER = "google"
DEFAULT_EVENT_WINDOW = timedelta(days=30)


def _rfc3339(when: datetime) -> str:
    return when.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_event_time(value: EventTime) -> str:
    """Render an event boundary; all-day events only carry a date."""
    if value.dateTime:
        try:
            parsed = datetime.fromisoformat(value.dateTime.replace("Z", "+00:00"))
        except ValueError:
            return value.dateTime
        return parsed.strftime("%Y-%m-%d %H:%M %Z").strip()
    return value.date or "unknown"


def format_event(event: CalendarEvent) -> str:
    text = (
        f"{event.summary}:\n"
        f"- Time: {format_event_time(event.start)} - {format_event_time(event.end)}\n"
        f"- Status: {event.status}\n"
        f"- Organizer: {event.organizer.label}\n"
    )
    if event.description:
        text += f"- Description: {event.description}\n"
    if event.attendees:
        text += "- Attendees:\n" + "\n".join(
            f"  • {attendee.label} ({attendee.responseStatus})" for attendee in event.attendees
        )
    return text.rstrip("\n")


async def get_calendar_list(config: GoogleConfig, args: Dict[str, Any]) -> str:
    """List the calendars on the user's calendar list as JSON."""
    try:
        data = await request_json(
            "GET",
            f"{config.calendar_url}/users/me/calendarList",
            provider=PROVIDER,
            operation="get_calendar_list",
            headers=config.headers(),
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to get calendar list")
    if not data.get("items"):
        data = {**data, "items": [], "kind": data.get("kind") or "calendar#calendarList"}
    return json.dumps(data)


async def get_calendar_events(config: GoogleConfig, args: Dict[str, Any]) -> str:
    """Fetch events in a time window, most recently updated first."""
    now = datetime.now(timezone.utc)
    params = query_params(
        orderBy="updated",
        timeMin=args.get("time_min") or _rfc3339(now),
        timeMax=args.get("time_max") or _rfc3339(now + DEFAULT_EVENT_WINDOW),
        maxResults=args.get("max_results") or 100,
        eventTypes=args.get("event_types") or "default",
    )
    try:
        data = await request_json(
            "GET",
            f"{config.calendar_url}/calendars/{args.get('calendar_id')}/events",
            provider=PROVIDER,
            operation="get_calendar_events",
            headers=config.headers(),
            params=params,
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to fetch calendar events")

    items = data.get("items") if isinstance(data, dict) else data
    events = parse_records(CalendarEvent, items, provider=PROVIDER, operation="get_calendar_events")
    if not events:
        return "No events found in the requested time range."
    return "\n\n".join(format_event(event) for event in events)


async def insert_calendar_event(config: GoogleConfig, args: Dict[str, Any]) -> str:
    """Create an event and return the created record as JSON."""
    body: Dict[str, Any] = {
        "summary": args.get("summary"),
        "start": {"dateTime": args.get("start_datetime")},
        "end": {"dateTime": args.get("end_datetime")},
        "attendees": [{"email": email} for email in args.get("attendees") or []],
    }
    if args.get("description"):
        body["description"] = args["description"]
    try:
        data = await request_json(
            "POST",
            f"{config.calendar_url}/calendars/{args.get('calendar_id')}/events",
            provider=PROVIDER,
            operation="insert_calendar_event",
            headers=config.headers(),
            params=query_params(sendUpdates=args.get("send_updates") or "none"),
            json=body,
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to insert calendar event")
    logger.info(f"Created calendar event {data.get('id')}")
    return json.dumps(data)


async def delete_calendar_events(config: GoogleConfig, args: Dict[str, Any]) -> str:
    """Delete a single event."""
    event_id = args.get("event_id")
    try:
        await request_json(
            "DELETE",
            f"{config.calendar_url}/calendars/{args.get('calendar_id')}/events/{event_id}",
            provider=PROVIDER,
            operation="delete_calendar_events",
            headers=config.headers(),
            params=query_params(sendUpdates=args.get("send_updates") or "none"),
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to delete calendar events")
    return f"Successfully deleted calendar event {event_id}"


async def list_gmail(config: GoogleConfig, args: Dict[str, Any]) -> str:
    """List Gmail messages matching an optional query as JSON."""
    try:
        data = await request_json(
            "GET",
            f"{config.gmail_url}/users/me/messages",
            provider=PROVIDER,
            operation="list_gmail",
            headers=config.headers(),
            params=query_params(q=args.get("q")),
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to get mail list")

    listing = parse_record(GmailListResponse, data, provider=PROVIDER, operation="list_gmail")
    if not listing.messages:
        return json.dumps({"messages": [], "resultSizeEstimate": 0})
    return json.dumps(
        {
            "messages": [message.model_dump(exclude_none=True) for message in listing.messages],
            "nextPageToken": listing.nextPageToken,
            "resultSizeEstimate": listing.resultSizeEstimate,
        }
    )


def get_google_actions(config: Optional[GoogleConfig] = None) -> List[Action]:
    """Build the Google Calendar and Gmail action set."""
    resolve = GoogleConfig.resolver(config)
    return [
        Action("get_calendar_list", GET_CALENDAR_LIST_PROMPT, GetCalendarListParams, bind_config(get_calendar_list, resolve)),
        Action("get_calendar_events", GET_CALENDAR_EVENTS_PROMPT, GetCalendarEventsParams, bind_config(get_calendar_events, resolve)),
        Action("insert_calendar_event", INSERT_CALENDAR_EVENT_PROMPT, InsertCalendarEventParams, bind_config(insert_calendar_event, resolve)),
        Action("delete_calendar_events", DELETE_CALENDAR_EVENTS_PROMPT, DeleteCalendarEventParams, bind_config(delete_calendar_events, resolve)),
        Action("list_gmail", LIST_GMAIL_PROMPT, ListGmailParams, bind_config(list_gmail, resolve)),
    ]
