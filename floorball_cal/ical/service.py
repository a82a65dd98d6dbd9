# floorball_cal/ical/service.py
import asyncio

from loguru import logger

from floorball_cal.models.calendar_file import CalendarFile
from floorball_cal.scrapers.base_scraper import TeamNotFoundError
from floorball_cal.scrapers.saisonmanager_scraper import SaisonManagerScraper
from floorball_cal.utils.misc_utils import calendar_filename
from .builder import build_calendar


async def generate_team_calendar(
    scraper: SaisonManagerScraper, club_id: str, team_id: str
) -> CalendarFile:
    """Scrapes a team's fixtures and renders them as a downloadable calendar.

    The club's team list and the team's schedule are fetched concurrently;
    both are required, so the first fetch error cancels the other request
    and propagates once it has wound down.
    """
    logger.info(f"Generating calendar for team {team_id} of club {club_id}")
    tasks = [
        asyncio.ensure_future(scraper.scrape_teams(club_id)),
        asyncio.ensure_future(scraper.scrape_events(club_id, team_id)),
    ]
    try:
        teams, events = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    team = next((candidate for candidate in teams if candidate.id == team_id), None)
    if team is None:
        logger.warning(f"Team {team_id} is not listed on the page of club {club_id}")
        raise TeamNotFoundError(club_id, team_id)

    return CalendarFile(
        filename=calendar_filename(team.name),
        content=build_calendar(team, events),
    )
