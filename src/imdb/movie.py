"""IMDb movie reference with lazily loaded page data."""

from collections.abc import Callable
from datetime import date
from typing import TypeVar

from bs4 import BeautifulSoup

from src.imdb import extractors
from src.imdb.fetcher import DocumentSource, FetchError, HttpDocumentSource
from src.imdb.types import MovieData
from src.imdb.utils import setup_logger
from src.settings import settings

T = TypeVar("T")

logger = setup_logger("imdb.movie")

# Failures an extractor may raise on a page that lacks or garbles a field.
EXTRACTION_FAILURES = (
    extractors.ExtractionError,
    AttributeError,
    IndexError,
    KeyError,
    TypeError,
    ValueError,
)


class Movie:
    """A movie on IMDb, identified by its numeric id.

    No HTTP request is made on construction. The title page is fetched
    and parsed the first time a field needs it, then reused by every
    other field of this instance.

    Every field except ``title`` returns its absent value (None, or []
    for lists) when the page cannot be fetched or the field cannot be
    read. ``title`` lets FetchError through.

    Example:
        movie = Movie("0111161")
        movie.title()    # one request
        movie.rating()   # no request
    """

    def __init__(
        self,
        imdb_id: str,
        title: str | None = None,
        source: DocumentSource | None = None,
    ) -> None:
        """Initialize a movie reference.

        Args:
            imdb_id: Digits of the IMDb id, e.g. "0111161".
            title: Already known title, double quotes are removed.
            source: Page source, defaults to HTTP.
        """
        self._id = imdb_id
        self._url = settings.imdb.title_url(imdb_id)
        self._title = title.replace('"', "") if title is not None else None
        self._source = source or HttpDocumentSource()
        self._document: BeautifulSoup | None = None

    def __repr__(self) -> str:
        return f"Movie(id={self._id!r}, title={self._title!r})"

    @property
    def id(self) -> str:
        """IMDb id digits."""
        return self._id

    @property
    def url(self) -> str:
        """Title page URL."""
        return self._url

    # -------------------------------------------------------------------------
    # Document
    # -------------------------------------------------------------------------

    def document(self) -> BeautifulSoup:
        """Return the parsed title page, fetching it on first use.

        Only a successful fetch is kept, a failed one is attempted
        again on the next call.

        Raises:
            FetchError: When the page cannot be retrieved.
        """
        if self._document is None:
            markup = self._source.fetch(self._url)
            self._document = BeautifulSoup(markup, "html.parser")
            logger.debug(f"Parsed {self._url}")
        return self._document

    def _extract(
        self,
        field: str,
        extractor: Callable[[BeautifulSoup], T],
        absent: T,
    ) -> T:
        """Run one extractor, mapping any failure to ``absent``."""
        try:
            return extractor(self.document())
        except FetchError as e:
            logger.warning(f"{field} unavailable for tt{self._id}: {e}")
            return absent
        except EXTRACTION_FAILURES as e:
            logger.debug(f"{field} not found for tt{self._id}: {e!r}")
            return absent

    # -------------------------------------------------------------------------
    # Fields
    # -------------------------------------------------------------------------

    def cast_members(self) -> list[str]:
        """Cast member names in billing order."""
        return self._extract("cast_members", extractors.extract_cast_members, [])

    def director(self) -> list[str]:
        """Director names."""
        return self._extract("director", extractors.extract_director, [])

    def genres(self) -> list[str]:
        """Genre names."""
        return self._extract("genres", extractors.extract_genres, [])

    def length(self) -> int | None:
        """Runtime in minutes."""
        return self._extract("length", extractors.extract_length, None)

    def plot(self) -> str | None:
        return self._extract("plot", extractors.extract_plot, None)

    def poster(self) -> str | None:
        """Full size poster image URL."""
        return self._extract("poster", extractors.extract_poster, None)

    def rating(self) -> float | None:
        """Average user rating out of 10."""
        return self._extract("rating", extractors.extract_rating, None)

    def tagline(self) -> str | None:
        return self._extract("tagline", extractors.extract_tagline, None)

    def year(self) -> int | None:
        """Release year (CCYY)."""
        return self._extract("year", extractors.extract_year, None)

    def release_date(self) -> date | None:
        return self._extract("release_date", extractors.extract_release_date, None)

    def title(self, force_refresh: bool = False) -> str | None:
        """Return the title, reading it from the page when needed.

        A title given at construction is returned as is unless
        ``force_refresh`` is set. The value read from the page is
        stored, None included.

        Args:
            force_refresh: Read the title from the page even if known.

        Raises:
            FetchError: When the page has to be read and cannot be fetched.
        """
        if self._title is not None and not force_refresh:
            return self._title

        document = self.document()
        try:
            self._title = extractors.extract_title(document)
        except EXTRACTION_FAILURES as e:
            logger.debug(f"title not found for tt{self._id}: {e!r}")
            self._title = None
        return self._title

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def to_dict(self) -> MovieData:
        """Read every field into a JSON friendly dict.

        Raises:
            FetchError: When the page cannot be fetched (via ``title``).
        """
        title = self.title()
        release = self.release_date()
        return MovieData(
            id=self._id,
            url=self._url,
            title=title,
            year=self.year(),
            release_date=release.isoformat() if release else None,
            length=self.length(),
            rating=self.rating(),
            director=self.director(),
            cast_members=self.cast_members(),
            genres=self.genres(),
            plot=self.plot(),
            tagline=self.tagline(),
            poster=self.poster(),
        )

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    @staticmethod
    def search(query: str, source: DocumentSource | None = None) -> list["Movie"]:
        """Movies matching a free text query."""
        from src.imdb.listing import Search

        return Search(query, source).movies()

    @staticmethod
    def top_250(source: DocumentSource | None = None) -> list["Movie"]:
        """Movies of the IMDb top 250 chart, best first."""
        from src.imdb.listing import Top250

        return Top250(source).movies()
