from typing import Dict, List, Optional, Tuple

from loguru import logger

from floorball_cal.models.club import Club
from floorball_cal.models.event import Event
from floorball_cal.models.team import Team
from floorball_cal.normalization.dates import (
    ParseError,
    compute_default_end,
    parse_german_datetime,
)
from floorball_cal.utils.misc_utils import clean_text, extract_identifier, german_sort_key
from .base_scraper import BaseScraper
from .html_document import Element

# Page paths
CLUB_LIST_PATH = "/"
CLUB_PATH = "/club/{club_id}"
TEAM_PATH = "/team/{team_id}"
TEAM_SCHEDULE_PATH = "/club/{club_id}/team/{team_id}"

# Markup contract of the upstream site; keep every selector here
CLUB_LINK_SELECTOR = 'a[href*="/club"]'
TEAM_LINK_SELECTOR = 'a[href*="/team"]'
TEAM_LOGO_SELECTOR = "img"
TEAM_INFO_SELECTOR = "[data-team-info]"
TEAM_MODUS_SELECTOR = "[data-team-modus]"
TEAM_LEAGUE_SELECTOR = "[data-team-league]"
# html.parser does not insert an implicit <tbody>
SCHEDULE_ROW_SELECTOR = "table tbody tr, table > tr"
SCHEDULE_CELL_SELECTOR = "td"

# Column order of the schedule table
DATE_COLUMN = 0
TIME_COLUMN = 1
HOME_TEAM_COLUMN = 2
GUEST_TEAM_COLUMN = 3
LOCATION_COLUMN = 4
HOST_CLUB_COLUMN = 5


def _anchor_identity(anchor: Element, base_url: str) -> Optional[Tuple[str, str]]:
    """Returns (identifier, cleaned name) or None if either is missing."""
    identifier = extract_identifier(anchor.attr("href"), base_url)
    if not identifier:
        return None
    name = clean_text(anchor.text())
    if not name:
        return None
    return identifier, name


def _column(cells: List[str], index: int) -> str:
    return cells[index] if index < len(cells) else ""


def _optional_text(container: Element, selector: str) -> Optional[str]:
    text = clean_text("".join(match.text() for match in container.query_all(selector)))
    return text or None


class SaisonManagerScraper(BaseScraper):
    """Extracts clubs, teams and fixtures from saisonmanager.de pages."""

    async def scrape_clubs(self) -> List[Club]:
        """Lists every club linked from the start page, sorted by name."""
        document = await self.fetch_document(CLUB_LIST_PATH)
        collected: Dict[str, Club] = {}

        for anchor in document.query_all(CLUB_LINK_SELECTOR):
            identity = _anchor_identity(anchor, self.base_url)
            if identity is None:
                continue
            identifier, name = identity
            if identifier in collected:
                continue

            collected[identifier] = Club(
                id=identifier,
                name=name,
                location="",
                url=self.build_url(CLUB_PATH.format(club_id=identifier)),
            )

        clubs = sorted(collected.values(), key=lambda club: german_sort_key(club.name))
        logger.info(f"Scraped {len(clubs)} clubs")
        return clubs

    async def scrape_teams(self, club_id: str) -> List[Team]:
        """Lists the teams linked from a club page, sorted by name.

        The embedded club only carries id and url; the caller already knows
        the club, so its name is not fetched again.
        """
        document = await self.fetch_document(CLUB_PATH.format(club_id=club_id))
        club = Club(
            id=club_id,
            name="",
            location="",
            url=self.build_url(CLUB_PATH.format(club_id=club_id)),
        )
        teams: List[Team] = []

        for anchor in document.query_all(TEAM_LINK_SELECTOR):
            identity = _anchor_identity(anchor, self.base_url)
            if identity is None:
                continue
            identifier, name = identity

            logo_url = None
            logos = anchor.query_all(TEAM_LOGO_SELECTOR)
            if logos:
                src = logos[0].attr("src")
                if src:
                    logo_url = self.build_url(src)

            modus = league = None
            info_container = anchor.closest(TEAM_INFO_SELECTOR)
            if info_container is not None:
                modus = _optional_text(info_container, TEAM_MODUS_SELECTOR)
                league = _optional_text(info_container, TEAM_LEAGUE_SELECTOR)

            teams.append(
                Team(
                    id=identifier,
                    name=name,
                    logo_url=logo_url,
                    club=club,
                    modus=modus,
                    league=league,
                    url=self.build_url(TEAM_PATH.format(team_id=identifier)),
                )
            )

        teams.sort(key=lambda team: german_sort_key(team.name))
        logger.info(f"Scraped {len(teams)} teams for club {club_id}")
        return teams

    async def scrape_events(self, club_id: str, team_id: str) -> List[Event]:
        """Reads a team's schedule table in row order.

        Rows with missing fields are skipped silently, rows with an
        unparseable date are skipped with a warning; the rest is returned.
        """
        document = await self.fetch_document(
            TEAM_SCHEDULE_PATH.format(club_id=club_id, team_id=team_id)
        )
        events: List[Event] = []
        failures: List[ParseError] = []

        for row in document.query_all(SCHEDULE_ROW_SELECTOR):
            cells = [clean_text(cell.text()) for cell in row.query_all(SCHEDULE_CELL_SELECTOR)]
            if not cells:
                continue

            date_text = _column(cells, DATE_COLUMN)
            time_text = _column(cells, TIME_COLUMN)
            home_team = _column(cells, HOME_TEAM_COLUMN)
            guest_team = _column(cells, GUEST_TEAM_COLUMN)
            if not (date_text and time_text and home_team and guest_team):
                continue

            try:
                start = parse_german_datetime(f"{date_text} {time_text}")
            except ParseError as e:
                logger.warning(f"Failed to parse event row: {e}")
                failures.append(e)
                continue

            host_club = _column(cells, HOST_CLUB_COLUMN)
            events.append(
                Event(
                    home_team=home_team,
                    guest_team=guest_team,
                    start=start,
                    end=compute_default_end(start),
                    location=_column(cells, LOCATION_COLUMN),
                    host_club=host_club or None,
                )
            )

        if failures:
            logger.warning(
                f"Skipped {len(failures)} unparseable rows for team {team_id} of club {club_id}"
            )
        logger.info(f"Scraped {len(events)} events for team {team_id} of club {club_id}")
        return events
