import logging
import re
from dataclasses import dataclass, replace
from types import MappingProxyType
from common.exceptions import PageNavigationNotAllowedError, WrongPageError
from helpers.argument_resolver import resolve_arguments
from helpers.page_matcher import on_page, url_matcher_pattern
from helpers.url_template import UrlTemplate, build_url_template
from utils.text_utils import indent_text
from wrappers.page_element import get_element_names
from wrappers.page_feature import FeatureMap, get_feature_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageDefinition:
    """Type-level description of a page, shared by all of its instances."""

    url_pattern: str | None = None
    navigation_disabled: bool = False
    url_matcher: re.Pattern | None = None
    element_names: tuple[str, ...] = ()
    features: tuple = ()

    @property
    def feature_names(self) -> tuple[str, ...]:
        return tuple(get_feature_name(feature) for feature in self.features)

    def url_template(self, page_name: str, base_url: str | None) -> UrlTemplate:
        return build_url_template(page_name, self.url_pattern, base_url)

    def placeholder_names(self, page_name: str, base_url: str | None) -> tuple[str, ...]:
        return self.url_template(page_name, base_url).placeholder_names


class SitePage:
    """
    SitePage binds a logical page of the application under test to:
    - A (possibly parameterized) URL, declared with @page_url.
    - Element accessors, declared with element(...) in the class body.
    - A check that decides whether the browser is displaying the page.

    Pages are created through a site object (site.account_edit_page(id=7)).
    Creating a page resolves its URL arguments, checks the browser's current
    URL and navigates to the page when it isn't displayed, so a page object
    only exists while the browser is on the page it represents.
    """

    definition = PageDefinition()
    # Set on the Page base class generated for every Site subclass
    site_class = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.definition = replace(cls.definition, element_names=get_element_names(cls))

        if cls.site_class is not None and "site_class" not in cls.__dict__:
            cls.site_class.registry.register(cls)

    def __init__(self, site, arg=None):
        definition = type(self).definition
        page_name = type(self).__name__

        self.site = site
        self.browser = site.browser
        self.driver = site.driver
        self.args = arg
        self.navigation_disabled = definition.navigation_disabled
        self.url_matcher = definition.url_matcher
        self.page_url = definition.url_pattern
        self.page_elements = definition.element_names
        self.page_features = definition.feature_names

        self.url_template = definition.url_template(page_name, site.base_url)
        self.required_arguments = self.url_template.placeholder_names
        self.arguments = MappingProxyType(
            resolve_arguments(page_name, self.required_arguments, arg, site))
        self.url = self.url_template.expand(self.arguments)

        # Most recently targeted page, even when it is never reached
        site.most_recent_page = self
        self.features = FeatureMap(definition.features, self.browser, arg)

        if not self.on_page():
            if self.navigation_disabled:
                raise PageNavigationNotAllowedError(self._navigation_disabled_message())
            self.visit()

    @classmethod
    def build_url_template(cls, base_url: str | None) -> UrlTemplate:
        return cls.definition.url_template(cls.__name__, base_url)

    @classmethod
    def descendants(cls) -> list:
        """All classes that inherit from this page class, at any depth."""
        result = []

        for subclass in cls.__subclasses__():
            result.append(subclass)
            result.extend(subclass.descendants())
        return result

    def on_page(self) -> bool:
        """
        True if the browser is displaying this page.

        A URL matcher set with @url_matcher wins when it matches. Otherwise the
        current URL must match the URL template and every URL argument of this
        page must equal the value found in the current URL.
        """
        current_url = self.driver.current_url()
        result = on_page(current_url, self.url_template, self.arguments, self.url_matcher)
        logger.debug("%s on_page check against %s: %s", type(self).__name__, current_url, result)
        return result

    def visit(self):
        """
        Navigate to the page.

        Raises:
            PageNavigationNotAllowedError: navigation is disabled for the page.
            WrongPageError: the page isn't displayed after navigation.
        """
        page_name = type(self).__name__

        if self.navigation_disabled:
            raise PageNavigationNotAllowedError(
                f"Navigation has been disabled for the {page_name} page. This was done when "
                f"defining the page class and usually means that the page can't be reached "
                f"directly through a URL and requires some additional work to access.")

        logger.info("Navigating to the %s page: %s", page_name, self.url)
        self.driver.navigate_to(self.url)

        if not self.on_page():
            raise WrongPageError(self._wrong_page_message())

        self.site.most_recent_page = self
        return self

    def refresh(self):
        self.driver.refresh()
        return self

    # Delegates wrong-page detection to the site
    def expect_page(self, page):
        return self.site.expect_page(page)

    def _navigation_disabled_message(self) -> str:
        page_name = type(self).__name__
        current_url = self.driver.current_url()
        displayed_page = self.site.identify_page()

        if displayed_page is not None:
            return (
                f"The {page_name} page could not be accessed. Navigation is intentionally "
                f"disabled for this page and the browser was displaying the "
                f"{displayed_page.__name__} page when you tried to access it.\n\n"
                f"PAGE URL:\n------------\n{current_url}")

        return (
            f"The {page_name} page could not be accessed. Navigation is intentionally "
            f"disabled for this page and the page that the browser was displaying could "
            f"not be recognized.\n\n"
            f"PAGE URL:\n------------\n{current_url}\n\n"
            f"PAGE TEXT:\n------------\n{indent_text(self.driver.page_text())}")

    def _wrong_page_message(self) -> str:
        message = (
            f"Navigation check failed after attempting to access the {type(self).__name__} "
            f"page. Attempted URL {self.url}. Current URL {self.driver.current_url()} did "
            f"not match {self.url_template.pattern}.")

        if self.url_matcher is not None:
            message += (
                f" A URL matcher was also defined for the page and the secondary check "
                f"against the URL matcher also failed. URL matcher: "
                f"{url_matcher_pattern(self.url_matcher)}")
        return message

    def __getattr__(self, item):
        # Page features are reachable as attributes: page.footer
        features = self.__dict__.get("features")

        if features is not None and item in features:
            return features[item]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{item}'")

    def __str__(self):
        return f"<{type(self).__name__}:{id(self)} url_template='{self.url_template.pattern}'>"

    __repr__ = __str__
