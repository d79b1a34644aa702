"""Movie listings: title search and the top 250 chart.

Both fetch one page and turn its title links into Movie references
carrying the link text as known title.
"""

import re
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup

from src.imdb.extractors import ExtractionError, extract_title
from src.imdb.fetcher import DocumentSource, HttpDocumentSource
from src.imdb.movie import Movie
from src.imdb.text import clean_text
from src.imdb.utils import setup_logger
from src.settings import settings

_TITLE_HREF = re.compile(r"/title/tt(\d+)")

logger = setup_logger("imdb.listing")


class MovieList(ABC):
    """Base class for pages listing movies.

    The page is fetched on the first call to ``movies`` and the result
    kept. FetchError propagates and nothing is kept.
    """

    def __init__(self, source: DocumentSource | None = None) -> None:
        self._source = source or HttpDocumentSource()
        self._movies: list[Movie] | None = None

    @property
    @abstractmethod
    def url(self) -> str:
        """Listing page URL."""

    def movies(self) -> list[Movie]:
        """Movies on the page, in page order, each id once.

        Raises:
            FetchError: When the page cannot be retrieved.
        """
        if self._movies is None:
            soup = BeautifulSoup(self._source.fetch(self.url), "html.parser")
            self._movies = self._parse(soup)
            logger.debug(f"{len(self._movies)} movies from {self.url}")
        return self._movies

    def _parse(self, soup: BeautifulSoup) -> list[Movie]:
        return self._parse_links(soup)

    def _parse_links(self, soup: BeautifulSoup) -> list[Movie]:
        """Build one Movie per distinct title link with visible text."""
        movies: list[Movie] = []
        seen: set[str] = set()
        for link in soup.find_all("a", href=_TITLE_HREF):
            match = _TITLE_HREF.search(link["href"])
            title = clean_text(link.get_text())
            if not title or match.group(1) in seen:
                continue
            seen.add(match.group(1))
            movies.append(Movie(match.group(1), title, self._source))
        return movies


class Search(MovieList):
    """Title search for a free text query.

    IMDb answers an unambiguous query with the title page itself; that
    case yields a single movie.
    """

    def __init__(self, query: str, source: DocumentSource | None = None) -> None:
        super().__init__(source)
        self.query = query

    @property
    def url(self) -> str:
        return settings.imdb.search_url(self.query)

    def _parse(self, soup: BeautifulSoup) -> list[Movie]:
        imdb_id = self._title_page_id(soup)
        if imdb_id is None:
            return self._parse_links(soup)

        try:
            title = extract_title(soup)
        except ExtractionError:
            title = None
        return [Movie(imdb_id, title, self._source)]

    @staticmethod
    def _title_page_id(soup: BeautifulSoup) -> str | None:
        """Return the id when the page is a title page, else None."""
        canonical = soup.select_one("link[rel='canonical']")
        href = canonical.get("href", "") if canonical else ""
        if not href:
            og_url = soup.select_one("meta[property='og:url']")
            href = og_url.get("content", "") if og_url else ""

        match = _TITLE_HREF.search(href)
        return match.group(1) if match else None


class Top250(MovieList):
    """The IMDb top 250 chart."""

    @property
    def url(self) -> str:
        return settings.imdb.top_250_url
