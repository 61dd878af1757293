"""Descriptions shown to the model for Google actions."""

GET_CALENDAR_LIST_PROMPT = """
This tool will get all calendars in the user's Google Calendar list.
It does not take any inputs.

Important notes:
- Requires valid Google Calendar API authorization token
- Returns list of calendars with their metadata
- Includes primary calendar and all subscribed calendars
"""

GET_CALENDAR_EVENTS_PROMPT = """
This tool will get events from a Google Calendar.

Required inputs:
- calendar_id: The Google Calendar ID in the format {user_name}@{domain}

Optional inputs:
- time_max: Upper bound for event start time (RFC3339 timestamp)
- time_min: Lower bound for event end time (RFC3339 timestamp)
- event_types: Type of events to return (default: "default")
- max_results: Maximum number of events to return (default: 100)

Important notes:
- Authorization token is required for this operation
- Timestamps must include timezone offset (e.g. 2024-02-11T10:00:00-07:00)
- Event types can be: birthday, default, focusTime, fromGmail, outOfOffice, workingLocation
"""

INSERT_CALENDAR_EVENT_PROMPT = """
This tool will create a new event in Google Calendar.

Required inputs:
- calendar_id: Google Calendar ID (format: username@domain)
- summary: Event title
- start_datetime: Start time (RFC3339 format)
- end_datetime: End time (RFC3339 format)

Optional inputs:
- description: Event description
- attendees: List of attendee email addresses
- send_updates: Notification behavior ("all", "externalOnly", "none", default: "none")

Important notes:
- Requires valid Google Calendar API authorization token
- Times must include timezone offset (e.g., 2024-02-11T15:30:00-07:00)
- Returns created event data
"""

DELETE_CALENDAR_EVENTS_PROMPT = """
This tool will delete a specified event from a Google Calendar.

Required inputs:
- calendar_id: The Google Calendar ID (format: user@domain.com)
- event_id: The unique identifier of the event to delete

Optional inputs:
- send_updates: Controls notification behavior (default: "none")
  - "all": Notifications sent to all guests
  - "externalOnly": Notifications sent to non-Google Calendar guests only
  - "none": No notifications sent

Important notes:
- Requires valid Google Calendar API authorization token
- Operation cannot be undone
- Returns success/failure message
"""

LIST_GMAIL_PROMPT = """
This tool will list Gmail messages using the Gmail API.

Optional inputs:
- q: Gmail query string for filtering messages (see https://support.google.com/mail/answer/7190?hl=en)

Example queries:
- "in:inbox" - Messages in inbox
- "is:unread" - Unread messages
- "from:example@domain.com" - Messages from specific sender
- "subject:hello" - Messages with specific subject
- "after:2024/01/01" - Messages after date

Important notes:
- Requires valid Gmail API authorization token
- Returns list of messages with metadata
- Query parameter supports complex Gmail search syntax
"""
