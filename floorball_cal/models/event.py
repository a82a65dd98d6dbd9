# floorball_cal/models/event.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Event(BaseModel):
    """A single fixture from a team's schedule table."""

    model_config = ConfigDict(frozen=True)

    home_team: str
    guest_team: str
    start: datetime  # Naive, site-local time
    end: datetime  # Derived from start, the site publishes no end time
    location: str = ""
    host_club: Optional[str] = None

    @property
    def title(self) -> str:
        return f"{self.home_team} vs. {self.guest_team}"
