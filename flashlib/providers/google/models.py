"""Input schemas and response records for Google actions."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from flashlib.core.models import ActionParameters, ProviderRecord

EMAIL_PATTERN = r"^[^@]+@[^@]+\.[^@]+$"
RFC3339_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:?\d{2})$"


class SendUpdates(str, Enum):
    ALL = "all"
    EXTERNAL_ONLY = "externalOnly"
    NONE = "none"


class GetCalendarListParams(ActionParameters):
    pass


class GetCalendarEventsParams(ActionParameters):
    calendar_id: str = Field(
        ..., description="Google Calendar ID. The format should follow {user_name}@{domain}."
    )
    time_max: Optional[str] = Field(
        default=None,
        description=(
            "Upper bound (exclusive) for an event's start time to filter by. "
            "The default is current time + 30 days. "
            "Must be an RFC3339 timestamp with mandatory time zone offset."
        ),
    )
    time_min: Optional[str] = Field(
        default=None,
        description=(
            "Lower bound (exclusive) for an event's end time to filter by. "
            "The default is current time. "
            "Must be an RFC3339 timestamp with mandatory time zone offset."
        ),
    )
    event_types: str = Field(
        default="default",
        description=(
            "Event types to return. Values: birthday, default, focusTime, "
            "fromGmail, outOfOffice, workingLocation"
        ),
    )
    max_results: int = Field(default=100, description="Maximum number of events returned on one result page.")


class InsertCalendarEventParams(ActionParameters):
    calendar_id: str = Field(
        ..., pattern=EMAIL_PATTERN, description="Google Calendar ID in format username@domain"
    )
    send_updates: SendUpdates = Field(
        default=SendUpdates.NONE, description="Controls notification behavior for event creation"
    )
    summary: str = Field(..., min_length=1, description="Event title/summary")
    description: Optional[str] = Field(default=None, description="Optional event description")
    start_datetime: str = Field(..., pattern=RFC3339_PATTERN, description="Event start time in RFC3339 format")
    end_datetime: str = Field(..., pattern=RFC3339_PATTERN, description="Event end time in RFC3339 format")
    attendees: List[str] = Field(default_factory=list, description="List of attendee email addresses")


class DeleteCalendarEventParams(ActionParameters):
    calendar_id: str = Field(..., pattern=EMAIL_PATTERN, description="Google Calendar ID (format: user@domain.com)")
    event_id: str = Field(..., min_length=1, description="The unique identifier of the event to delete")
    send_updates: SendUpdates = Field(default=SendUpdates.NONE, description="Notification behavior")


class ListGmailParams(ActionParameters):
    q: Optional[str] = Field(default=None, description="Gmail query string for filtering messages")


class EventTime(ProviderRecord):
    dateTime: Optional[str] = None
    date: Optional[str] = None
    timeZone: Optional[str] = None


class Person(ProviderRecord):
    email: Optional[str] = None
    displayName: Optional[str] = None
    responseStatus: Optional[str] = None

    @property
    def label(self) -> str:
        return self.displayName or self.email or "Unknown"


class CalendarEvent(ProviderRecord):
    id: Optional[str] = None
    summary: str = "(no title)"
    description: Optional[str] = None
    status: Optional[str] = None
    start: EventTime = Field(default_factory=EventTime)
    end: EventTime = Field(default_factory=EventTime)
    organizer: Person = Field(default_factory=Person)
    attendees: Optional[List[Person]] = None


class GmailMessage(ProviderRecord):
    id: str
    threadId: Optional[str] = None
    labelIds: Optional[List[str]] = None
    snippet: Optional[str] = None
    historyId: Optional[str] = None
    internalDate: Optional[str] = None
    payload: Optional[Any] = None
    sizeEstimate: Optional[int] = None
    raw: Optional[str] = None


class GmailListResponse(ProviderRecord):
    messages: Optional[List[GmailMessage]] = None
    nextPageToken: Optional[str] = None
    resultSizeEstimate: Optional[int] = None
