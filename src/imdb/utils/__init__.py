"""Scraper utilities: logging."""

from src.imdb.utils.logger import setup_logger

__all__ = ["setup_logger"]
