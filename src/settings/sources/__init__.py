"""Data source settings.

Exports configuration classes for the scraped source:
- IMDb (HTML pages)
"""

from src.settings.sources.imdb import IMDBSettings

__all__ = [
    "IMDBSettings",
]
