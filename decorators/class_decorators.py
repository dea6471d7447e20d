from dataclasses import replace
from helpers.page_matcher import compile_url_matcher
from helpers.url_template import compile_template
from wrappers.page_feature import get_feature_class


def _update_definition(cls, **changes):
    cls.definition = replace(cls.definition, **changes)
    return cls


def page_url(url: str):
    """
    Declare the page URL. Relative URLs are appended to the site's base URL,
    absolute http(s) URLs are used as they are, and {name} placeholders become
    the arguments the page is created with:

        @page_url("/accounts/{account_code}/edit")
        class AccountEditPage(MySite.Page):
            ...

    Without this decorator the page URL is the site's base URL.
    """
    def decorator(cls):
        if url:
            # Fail on malformed placeholders when the class is defined
            compile_template(url)
        return _update_definition(cls, url_pattern=url or None)

    return decorator


def url_matcher(regexp):
    """
    Fallback check used when the URL template can't describe the final page URL
    (redirects, generated ids). The page counts as displayed when the regular
    expression matches the current browser URL.
    """
    def decorator(cls):
        return _update_definition(cls, url_matcher=compile_url_matcher(regexp) if regexp else None)

    return decorator


def disable_automatic_navigation(cls=None):
    """
    For pages that can't be reached through a URL. The page is never navigated
    to: creating it when it isn't displayed, or calling visit(), raises
    PageNavigationNotAllowedError. Usable with or without parentheses.
    """
    def decorator(klass):
        return _update_definition(klass, navigation_disabled=True)

    if cls is None:
        return decorator
    return decorator(cls)


def use_features(*features):
    """Attach page features (PageFeature subclasses or their names) to a page."""
    for feature in features:
        if not isinstance(feature, str):
            get_feature_class(feature)

    def decorator(cls):
        return _update_definition(cls, features=tuple(features))

    return decorator
