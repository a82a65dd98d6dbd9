# floorball_cal/models/calendar_file.py
from pydantic import BaseModel, ConfigDict

CALENDAR_MEDIA_TYPE = "text/calendar"


class CalendarFile(BaseModel):
    """A rendered calendar ready to be handed out as a download."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content: str
    media_type: str = CALENDAR_MEDIA_TYPE

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")
