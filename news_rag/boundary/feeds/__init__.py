"""
News feed boundary: HTTP fetching and tolerant RSS/Atom parsing.
"""

from news_rag.boundary.feeds.feed_client import FeedClient
from news_rag.boundary.feeds.feed_parser import FeedItem, clean_description, parse_feed

__all__ = ["FeedClient", "FeedItem", "clean_description", "parse_feed"]
