"""
Wikipedia module for wiki_walk.

Everything that talks to the MediaWiki action API lives here.
"""

from .api import MediaWikiApi
from .link_fetcher import LinkPageFetcher
from .random_picker import RandomArticlePicker

__all__ = [
    'MediaWikiApi',
    'LinkPageFetcher',
    'RandomArticlePicker'
]
