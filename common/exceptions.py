"""Errors raised by site and page objects."""


class SiteObjectError(Exception):
    """Base exception for all site and page object failures."""

    pass


class TemplateSyntaxError(SiteObjectError):
    """URL pattern contains malformed placeholder syntax."""

    pass


class MissingValueError(SiteObjectError):
    """URL template was expanded without a value for one of its placeholders."""

    pass


class PageInitError(SiteObjectError):
    """Page object could not be initialized from the arguments it was given."""

    pass


class PageNavigationNotAllowedError(SiteObjectError):
    """Page is not displayed and navigation is disabled for it."""

    pass


class WrongPageError(SiteObjectError):
    """Browser is not displaying the expected page."""

    pass


class BrowserLibraryNotSupportedError(SiteObjectError):
    """Browser object does not belong to a supported automation library."""

    pass
