class NewsieError(Exception):
    """Base class for errors that end a newsie run."""


class CacheBootstrapError(NewsieError):
    """Raised when the cache directory or file cannot be created or chowned."""


class CacheLoadError(NewsieError):
    """Raised when the read-state cache cannot be read."""


class CacheWriteError(NewsieError):
    """Raised when a hash cannot be appended to the read-state cache."""


class RSSFetchError(NewsieError):
    """Raised when the news feed cannot be fetched or parsed."""


class PostNumberError(NewsieError, IndexError):
    """Raised when a post number falls outside the fetched feed."""
