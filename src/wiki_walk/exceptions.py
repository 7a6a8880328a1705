"""
Exceptions raised by the walk core.

Transport problems are not wrapped: httpx errors reach the caller unchanged.
"""


class WikiWalkException(Exception):
    """Base exception for wiki_walk."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class PageNotFoundException(WikiWalkException):
    """Raised when a title does not resolve to an existing Wikipedia page."""
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"No such page: '{title}'")


class DeadEndException(WikiWalkException):
    """Raised when a walk must pick a link from an article that has none."""
    def __init__(self, title: str, hop: int):
        self.title = title
        self.hop = hop
        super().__init__(f"Page '{title}' has no outgoing article links (hop {hop})")


class WikiServiceUnavailableException(WikiWalkException):
    """Raised when the Wikipedia API returns an error or an unexpected payload."""
    pass


class InvalidMoveException(WikiWalkException):
    """Raised when a player picks a title that is not linked from the current article."""
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"'{title}' is not a link on the current page")
