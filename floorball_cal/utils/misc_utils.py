# floorball_cal/utils/misc_utils.py
import re
import unicodedata
from typing import Optional, Tuple
from urllib.parse import quote, urljoin, urlsplit

from floorball_cal.config.settings import settings

_WHITESPACE_RE = re.compile(r"\s+")
_FILENAME_UNSAFE_RE = re.compile(r"[^A-Za-z0-9]+")
# Path characters left as-is; everything else (spaces, non-ASCII) is percent-encoded
_PATH_SAFE_CHARS = "%!$&'()*+,;=:@"

# DIN 5007-1: umlauts sort like their base vowel, ß like "ss"
_GERMAN_FOLDS = str.maketrans({"ä": "a", "ö": "o", "ü": "u", "ß": "ss"})


def build_url(path: str, base_url: Optional[str] = None) -> str:
    """Resolves a site-relative path (or absolute URL) against the site origin."""
    return urljoin(base_url or settings.base_url, path)


def clean_text(value: Optional[str]) -> str:
    """Collapses whitespace runs to single spaces and trims."""
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value).strip()


def extract_identifier(href: Optional[str], base_url: Optional[str] = None) -> Optional[str]:
    """Returns the last non-empty path segment of an href, or None.

    Absolute and site-relative hrefs are both accepted; query string and
    fragment are ignored. The segment is percent-encoded the way a browser
    serializes the URL, so ``/club/müller`` yields ``m%C3%BCller``.
    """
    if href is None:
        return None
    normalized_href = href.strip()
    if not normalized_href:
        return None

    path = urlsplit(build_url(normalized_href, base_url)).path
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return None
    return quote(segments[-1], safe=_PATH_SAFE_CHARS)


def german_sort_key(value: str) -> Tuple[str, str, str]:
    """Sort key approximating German (DIN 5007-1) collation.

    Primary: case-insensitive with umlauts folded to their base letter and
    other accents stripped. Ties are broken by the unfolded lowercase text,
    then by the original text, so ordering is total and stable.
    """
    lowered = value.casefold()
    folded = unicodedata.normalize("NFKD", lowered.translate(_GERMAN_FOLDS))
    primary = "".join(c for c in folded if not unicodedata.combining(c))
    return primary, lowered, value


def calendar_filename(team_name: str) -> str:
    """Derives a download filename: every non-alphanumeric run becomes one hyphen."""
    return f"{_FILENAME_UNSAFE_RE.sub('-', team_name)}.ics"
