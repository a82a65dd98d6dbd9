# floorball_cal/models/team.py
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .club import Club


class Team(BaseModel):
    """A team listed on a club page."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    logo_url: Optional[str] = None
    # Only id and url are filled in when scraped from a club page
    club: Club
    modus: Optional[str] = None
    league: Optional[str] = None
    url: str
