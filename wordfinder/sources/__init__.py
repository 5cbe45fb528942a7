"""External data sources for the news word-finder service."""

from .feed_fetcher import FeedFetcher

__all__ = ["FeedFetcher"]
