# floorball_cal/models/club.py
from pydantic import BaseModel, ConfigDict


class Club(BaseModel):
    """A club as listed on the site's start page."""

    model_config = ConfigDict(frozen=True)

    id: str  # Last path segment of the club URL
    name: str
    location: str = ""  # Not published on the listing page
    url: str
