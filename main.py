import sys
import asyncio
import argparse
from pathlib import Path
from typing import List, Optional

# --- Settings/Logging ---
from floorball_cal.logging.setup import setup_logging
from floorball_cal.config.settings import settings

setup_logging()

from loguru import logger

from floorball_cal.scrapers.saisonmanager_scraper import SaisonManagerScraper
from floorball_cal.scrapers.base_scraper import ScraperError
from floorball_cal.ical.builder import SerializationError
from floorball_cal.ical.service import generate_team_calendar

from rich import print
from rich.panel import Panel
from rich.table import Table


async def show_clubs(scraper: SaisonManagerScraper) -> None:
    clubs = await scraper.scrape_clubs()
    table = Table(title=f"Clubs ({len(clubs)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    for club in clubs:
        table.add_row(club.id, club.name)
    print(table)


async def show_teams(scraper: SaisonManagerScraper, club_id: str) -> None:
    teams = await scraper.scrape_teams(club_id)
    table = Table(title=f"Teams of club {club_id} ({len(teams)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Modus")
    table.add_column("Liga")
    for team in teams:
        table.add_row(team.id, team.name, team.modus or "", team.league or "")
    print(table)


async def show_events(scraper: SaisonManagerScraper, club_id: str, team_id: str) -> None:
    events = await scraper.scrape_events(club_id, team_id)
    table = Table(title=f"Spielplan {team_id} ({len(events)})")
    table.add_column("Beginn", style="green")
    table.add_column("Heim")
    table.add_column("Gast")
    table.add_column("Ort")
    table.add_column("Ausrichter")
    for event in events:
        table.add_row(
            event.start.strftime("%d.%m.%Y %H:%M"),
            event.home_team,
            event.guest_team,
            event.location,
            event.host_club or "",
        )
    print(table)


async def write_calendar(
    scraper: SaisonManagerScraper, club_id: str, team_id: str, output: Optional[Path]
) -> None:
    calendar_file = await generate_team_calendar(scraper, club_id, team_id)
    target = output or Path(calendar_file.filename)
    target.write_bytes(calendar_file.to_bytes())
    logger.success(f"Wrote {calendar_file.media_type} file to {target}")
    print(Panel(f"{target}", title="Calendar written"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"Scrape clubs, teams and fixtures from {settings.base_url}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("clubs", help="List all clubs")

    teams_parser = subparsers.add_parser("teams", help="List the teams of a club")
    teams_parser.add_argument("club_id")

    events_parser = subparsers.add_parser("events", help="List a team's fixtures")
    events_parser.add_argument("club_id")
    events_parser.add_argument("team_id")

    calendar_parser = subparsers.add_parser("calendar", help="Write a team's fixtures as .ics")
    calendar_parser.add_argument("club_id")
    calendar_parser.add_argument("team_id")
    calendar_parser.add_argument("-o", "--output", type=Path, default=None)

    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    async with SaisonManagerScraper() as scraper:
        try:
            if args.command == "clubs":
                await show_clubs(scraper)
            elif args.command == "teams":
                await show_teams(scraper, args.club_id)
            elif args.command == "events":
                await show_events(scraper, args.club_id, args.team_id)
            elif args.command == "calendar":
                await write_calendar(scraper, args.club_id, args.team_id, args.output)
        except ScraperError as e:
            logger.error(f"Scraping failed: {e}")
            return 1
        except SerializationError as e:
            logger.error(f"Calendar generation failed: {e}")
            return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
