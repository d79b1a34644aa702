"""Entry point of the src package. Allows python -m src."""

import argparse
import json
import sys


def show_movie(imdb_id: str, as_json: bool) -> None:
    """Print every field of one title."""
    from src.imdb import Movie

    data = Movie(imdb_id.removeprefix("tt")).to_dict()

    if as_json:
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return

    for key, value in data.items():
        if isinstance(value, list):
            value = ", ".join(value)
        print(f"{key:<14}{value if value not in (None, '') else '-'}")


def show_search(query: str) -> None:
    """Print search results, one per line."""
    from src.imdb import Movie

    for movie in Movie.search(query):
        print(f"tt{movie.id}  {movie.title()}")


def show_top_250(limit: int | None) -> None:
    """Print the top 250 chart, optionally truncated."""
    from src.imdb import Movie

    movies = Movie.top_250()
    for rank, movie in enumerate(movies[:limit], start=1):
        print(f"{rank:>3}. tt{movie.id}  {movie.title()}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="IMDb scraper - movie metadata from title pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src movie 0111161              # Fields of one title
  python -m src movie tt0111161 --json     # Same, as JSON
  python -m src search "shawshank"         # Title search
  python -m src top250 --limit 10          # Top of the chart
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    movie_parser = subparsers.add_parser("movie", help="Show one title")
    movie_parser.add_argument("imdb_id", help="IMDb id, with or without 'tt'")
    movie_parser.add_argument("--json", action="store_true", help="JSON output")

    search_parser = subparsers.add_parser("search", help="Search titles")
    search_parser.add_argument("query")

    top_parser = subparsers.add_parser("top250", help="Top 250 chart")
    top_parser.add_argument("--limit", type=int, default=None)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI."""
    from src.imdb import ImdbError

    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "movie":
            show_movie(args.imdb_id, args.json)
        elif args.command == "search":
            show_search(args.query)
        elif args.command == "top250":
            show_top_250(args.limit)

    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)
    except ImdbError as e:
        print(f"\nERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
