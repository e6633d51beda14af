"""Page fetching package."""

from analyzer.crawler.fetcher import Fetcher, FetchResult

__all__ = ["Fetcher", "FetchResult"]
