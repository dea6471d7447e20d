import logging
import re
from helpers.url_template import UrlTemplate

logger = logging.getLogger(__name__)


def compile_url_matcher(url_matcher):
    if url_matcher is None or isinstance(url_matcher, re.Pattern):
        return url_matcher
    return re.compile(url_matcher)


def url_matcher_pattern(url_matcher) -> str | None:
    if url_matcher is None:
        return None
    return getattr(url_matcher, "pattern", str(url_matcher))


def on_page(current_url: str, template: UrlTemplate, arguments: dict, url_matcher=None) -> bool:
    """
    Decide whether the browser's current URL belongs to a page instance.

    The fallback URL matcher is tried first and wins outright when it matches.
    Otherwise the URL must have the template's shape and, when the page was
    built from arguments, every argument must equal the value bound in the URL.
    """
    url_matcher = compile_url_matcher(url_matcher)

    if url_matcher is not None and url_matcher.search(current_url or ""):
        logger.debug("URL %s matched fallback matcher %s", current_url, url_matcher.pattern)
        return True

    if not template.matches(current_url):
        return False

    if not arguments:
        return True

    page_args = template.extract(current_url)
    if page_args is None:
        return False

    return all(page_args.get(key) == str(value) for key, value in arguments.items())


def matches_page_shape(current_url: str, template: UrlTemplate, url_matcher=None) -> bool:
    """Class-level check: fallback matcher or template shape, argument values ignored."""
    url_matcher = compile_url_matcher(url_matcher)

    if url_matcher is not None and url_matcher.search(current_url or ""):
        return True
    return template.matches(current_url)
