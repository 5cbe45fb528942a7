"""RSS feed fetcher built on requests and feedparser."""

import logging
from typing import Any, List, Optional

import feedparser
import requests
from bs4 import BeautifulSoup

from ..config import settings
from ..errors import FetchError
from ..models.feeds import FeedItem

logger = logging.getLogger(__name__)


class FeedFetcher:
    """Downloads a news feed and truncates it to a few plain-text items."""
    
    HEADERS = {"User-Agent": "wordfinder/1.0 (news word-finder puzzle)"}
    
    def __init__(
        self,
        feed_url: str = None,
        item_limit: int = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """Initialize the fetcher for a single feed URL.
        
        Without an injected session every fetch opens and closes its own,
        so concurrent requests share no connection pool or cookie jar.
        """
        self.feed_url = feed_url if feed_url is not None else settings.feed_url
        self.item_limit = item_limit if item_limit is not None else settings.feed_item_limit
        self.timeout = timeout if timeout is not None else settings.feed_timeout_seconds
        self.session = session
    
    def fetch(self) -> List[FeedItem]:
        """Fetch the feed and return its first entries as FeedItems."""
        try:
            logger.info(f"Fetching RSS feed {self.feed_url}")
            
            if self.session is not None:
                content = self._download(self.session)
            else:
                with requests.Session() as session:
                    content = self._download(session)
            
            feed = feedparser.parse(content)
            
            if feed.bozo and not feed.entries:
                raise ValueError(f"Unparsable feed: {feed.get('bozo_exception')}")
            
            items = [self.normalize_entry(entry) for entry in feed.entries[:self.item_limit]]
            
            logger.info(f"Fetched {len(items)} of {len(feed.entries)} feed entries")
            return items
            
        except Exception as e:
            logger.error(f"Error fetching RSS feed: {e}")
            raise FetchError() from e
    
    def _download(self, session: requests.Session) -> bytes:
        """GET the feed body, raising on non-2xx responses."""
        response = session.get(self.feed_url, headers=self.HEADERS, timeout=self.timeout)
        response.raise_for_status()
        return response.content
    
    def normalize_entry(self, entry: Any) -> FeedItem:
        """Map a feedparser entry onto a FeedItem."""
        summary = entry.get("summary") or entry.get("description") or ""
        
        return FeedItem(
            title=self.to_plain_text(entry.get("title") or ""),
            content=self.to_plain_text(summary),
            link=entry.get("link") or ""
        )
    
    @staticmethod
    def to_plain_text(content: str) -> str:
        """Strip HTML tags, decode entities and collapse whitespace."""
        if not content:
            return ""
        
        soup = BeautifulSoup(content, "html.parser")
        for element in soup(["script", "style"]):
            element.decompose()
        
        return " ".join(soup.get_text(separator=" ").split())
