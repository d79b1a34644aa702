"""Field extractors for IMDb title pages.

Each public function takes the parsed page and returns one typed value.
Extractors do not guard themselves: a missing anchor or an unparsable
value raises (ExtractionError, AttributeError, IndexError, KeyError,
TypeError or ValueError) and the caller maps that to the field's absent
value. See ``Movie._extract``.

Anchors used on the classic title page layout:

- ``<h5>Director:</h5>`` style headings inside ``div.info`` blocks,
  whose third line of inner HTML holds the value
- ``table.cast td.nm a`` for the cast list
- ``a[name=poster] img`` for the poster
- ``.general.rating b`` for the user rating ("8.7/10")
"""

import re
from collections.abc import Callable
from datetime import date, datetime

from bs4 import BeautifulSoup, Tag

from src.imdb.fetcher import ImdbError
from src.imdb.text import clean_text, strip_inline_markup

RELEASE_DATE_FORMATS = ("%d %b %Y", "%d %B %Y")
POSTER_EXTENSION = ".jpg"

_RUNTIME = re.compile(r"(\d+) min")
# Thumbnail URLs look like ".../MV5Bxxx@@._V1._SX94_SY140_.jpg";
# everything up to "@@" is the full size image.
_POSTER_PREFIX = re.compile(r"https?:.+@@")


class ExtractionError(ImdbError):
    """A field's anchor or value was not found on the page."""

    pass


# -------------------------------------------------------------------------
# Anchors
# -------------------------------------------------------------------------


def _headings(soup: BeautifulSoup, matches: Callable[[str], bool]) -> list[Tag]:
    """Return every ``h5`` whose stripped text satisfies ``matches``."""
    return [h5 for h5 in soup.find_all("h5") if matches(h5.get_text(strip=True))]


def _heading(soup: BeautifulSoup, prefix: str) -> Tag:
    """Return the first ``h5`` whose text starts with ``prefix``.

    Raises:
        ExtractionError: When no such heading exists.
    """
    found = _headings(soup, lambda text: text.startswith(prefix))
    if not found:
        raise ExtractionError(f"No heading starting with {prefix!r}")
    return found[0]


def _sibling_links(headings: list[Tag], href_contains: str | None = None) -> list[Tag]:
    """Collect ``a`` elements following each heading at the same level.

    Links are returned in document order, each at most once.
    """
    links: list[Tag] = []
    seen: set[int] = set()
    for heading in headings:
        for link in heading.find_next_siblings("a"):
            if href_contains and href_contains not in link.get("href", ""):
                continue
            if id(link) not in seen:
                seen.add(id(link))
                links.append(link)
    return links


def _block_line(soup: BeautifulSoup, prefix: str) -> str:
    """Return the third line of the block holding a heading.

    The block is the heading's parent. Its inner HTML reads
    ``"\\n<h5>Plot:</h5>\\nThe value ... <a>more</a>\\n"``, so line
    index 2 is the value with any trailing inline links.
    """
    block = _heading(soup, prefix).parent
    return block.decode_contents().split("\n")[2]


def _link_texts(links: list[Tag]) -> list[str]:
    return [clean_text(link.decode_contents()) for link in links]


# -------------------------------------------------------------------------
# Fields
# -------------------------------------------------------------------------


def extract_cast_members(soup: BeautifulSoup) -> list[str]:
    """Names linked from the cast table, in billing order."""
    return _link_texts(soup.select("table.cast td.nm a"))


def extract_director(soup: BeautifulSoup) -> list[str]:
    """Names linked after the "Director:" / "Directors:" heading."""
    headings = _headings(soup, lambda text: text.startswith("Director"))
    return _link_texts(_sibling_links(headings))


def extract_genres(soup: BeautifulSoup) -> list[str]:
    """Genre links after the "Genre:" heading."""
    headings = _headings(soup, lambda text: text == "Genre:")
    return _link_texts(_sibling_links(headings, href_contains="/Sections/Genres/"))


def extract_length(soup: BeautifulSoup) -> int:
    """Runtime in minutes, the first "<n> min" of the Runtime block."""
    block = _heading(soup, "Runtime").parent
    match = _RUNTIME.search(block.decode_contents())
    if match is None:
        raise ExtractionError("Runtime block has no '<n> min'")
    return int(match.group(1))


def extract_plot(soup: BeautifulSoup) -> str:
    """Plot outline without the trailing "full summary" link."""
    return clean_text(strip_inline_markup(_block_line(soup, "Plot:")))


def extract_tagline(soup: BeautifulSoup) -> str:
    """Tagline without the trailing "more" link."""
    return clean_text(strip_inline_markup(_block_line(soup, "Tagline")))


def extract_poster(soup: BeautifulSoup) -> str:
    """Full size poster URL derived from the thumbnail."""
    src = soup.select_one("a[name='poster'] img")["src"]
    match = _POSTER_PREFIX.search(src)
    if match is None:
        raise ExtractionError(f"Unexpected poster URL: {src}")
    return match.group(0) + POSTER_EXTENSION


def extract_rating(soup: BeautifulSoup) -> float:
    """Average user rating, e.g. 8.7 out of "8.7/10"."""
    text = clean_text(soup.select_one(".general.rating b").decode_contents())
    return float(text.split("/")[0])


def extract_title(soup: BeautifulSoup) -> str:
    """Main heading text, without the trailing year span."""
    heading = soup.find("h1")
    if heading is None:
        raise ExtractionError("No h1 on page")
    return clean_text(heading.decode_contents().split("<span")[0])


def extract_year(soup: BeautifulSoup) -> int:
    """Release year from the first year section link."""
    link = soup.select_one("a[href^='/Sections/Years/']")
    if link is None:
        raise ExtractionError("No year link on page")
    return int(link.get_text(strip=True))


def extract_release_date(soup: BeautifulSoup) -> date:
    """Release date, "16 Jun 1994 (USA)" becomes date(1994, 6, 16)."""
    line = clean_text(strip_inline_markup(_block_line(soup, "Release Date")))
    return parse_release_date(line.split("(")[0].strip())


def parse_release_date(text: str) -> date:
    """Parse "<day> <month name> <year>", abbreviated or full month.

    Raises:
        ValueError: When no known format matches.
    """
    for fmt in RELEASE_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized release date: {text!r}")
