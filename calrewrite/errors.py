"""
Error types raised by the rewrite pipeline.

Every error aborts the run. Nothing is retried and no partial calendar is
returned, so callers only need to catch RewriteError.
"""

from __future__ import annotations


class RewriteError(Exception):
    """Base class for all pipeline failures."""


class InvalidUrlError(RewriteError):
    pass


class UntrustedSourceError(RewriteError):
    pass


class FetchError(RewriteError):
    """
    The HTTP request failed or did not answer with status 200.
    """

    def __init__(self, message: str, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ParseError(RewriteError):
    pass


class EmptyLegendError(RewriteError):
    pass


class MissingCourseError(RewriteError):
    pass


class MalformedTimestampError(RewriteError):
    pass


class ConfigError(RewriteError):
    pass
