import logging
from common.exceptions import PageInitError, WrongPageError
from helpers.page_matcher import matches_page_shape
from helpers.page_registry import PageRegistry
from utils.code_utils import get_effective_config_value
from wrappers.browser_driver import get_browser_driver
from wrappers.site_page import SitePage

logger = logging.getLogger(__name__)


class Site:
    """
    Site is the entry point to the page objects of one web application:
    - Holds the browser, the base URL and any named site-level arguments.
    - Creates a page accessor for every page class defined on its Page base.
    - Tracks the most recently targeted page and recognizes the displayed one.

    Example:

        class DemoSite(Site):
            pass

        @page_url("/accounts/{account_code}/edit")
        class AccountEditPage(DemoSite.Page):
            save = element(lambda b: b.locator("#save"))

        site = DemoSite(page, base_url="http://demo.test")
        site.account_edit_page(account_code=12345).save.click()
    """

    registry = PageRegistry("Site")
    # Page base class bound to this site class, replaced for every subclass
    Page = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.registry = PageRegistry(cls.__name__)
        cls.Page = _create_page_base(cls)

    def __init__(self, browser, base_url: str = None, **site_arguments):
        self.browser = browser
        self.driver = get_browser_driver(browser)
        self.base_url = base_url
        self.site_arguments = dict(site_arguments)
        self.most_recent_page = None

    @classmethod
    def from_config(cls, browser, config: dict):
        """
        Build a site from the test configuration. The base URL follows the
        command line > config file > environment precedence; site arguments
        come from the "site_arguments" config entry.
        """
        base_url = get_effective_config_value("base_url", config)
        site_arguments = dict(config.get("site_arguments") or {})
        return cls(browser, base_url=base_url, **site_arguments)

    @classmethod
    def page_classes(cls) -> list:
        """Page classes of this site, including those defined for parent site classes."""
        result = []

        for klass in cls.__mro__:
            registry = klass.__dict__.get("registry")
            if isinstance(registry, PageRegistry):
                result.extend(page for page in registry if page not in result)
        return result

    @classmethod
    def find_page_class(cls, name: str):
        for klass in cls.__mro__:
            registry = klass.__dict__.get("registry")
            if isinstance(registry, PageRegistry) and name in registry:
                return registry.get(name)
        return None

    @property
    def pages(self) -> list:
        return self.page_classes()

    @property
    def current_url(self) -> str:
        return self.driver.current_url()

    def identify_page(self):
        """
        Return the page class whose URL template or URL matcher fits the current
        browser URL, or None. Argument values are not compared and no page
        object is created.
        """
        current_url = self.current_url

        for page_class in self.page_classes():
            try:
                template = page_class.build_url_template(self.base_url)
            except PageInitError:
                continue

            if matches_page_shape(current_url, template, page_class.definition.url_matcher):
                logger.debug("Identified %s at %s", page_class.__name__, current_url)
                return page_class

        return None

    @property
    def page(self):
        """
        The page object for the page the browser is displaying, or None if it
        can't be recognized. Reuses the most recent page while it's displayed.
        """
        recent = self.most_recent_page
        if recent is not None and recent.on_page():
            return recent

        page_class = self.identify_page()
        if page_class is None:
            return None

        arguments = page_class.build_url_template(self.base_url).extract(self.current_url) or {}
        return page_class(self, arguments)

    def expect_page(self, page):
        """
        Return the displayed page if it is of the given page class (or class name).

        Raises:
            WrongPageError: another page, or no recognizable page, is displayed.
        """
        page_class = self.find_page_class(page) if isinstance(page, str) else page
        if page_class is None:
            raise WrongPageError(f"{page} is not a page of the {type(self).__name__} site.")

        current = self.page
        if isinstance(current, page_class):
            return current

        displayed = type(current).__name__ if current is not None else "an unrecognized"
        raise WrongPageError(
            f"Expected {page_class.__name__} page to be displayed but the URL doesn't look "
            f"right. The browser is displaying {displayed} page.\n\n"
            f"PAGE URL:\n------------\n{self.current_url}")

    def refresh(self):
        self.driver.refresh()
        return self

    def __getattr__(self, item):
        if item.startswith("_"):
            raise AttributeError(item)

        site_arguments = self.__dict__.get("site_arguments") or {}
        if item in site_arguments:
            return site_arguments[item]

        page_class = type(self).find_page_class(item)
        if page_class is not None:
            return self._page_accessor(page_class)

        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{item}'")

    def _page_accessor(self, page_class):
        def accessor(arg=None, /, **kwargs):
            if arg is not None and kwargs:
                raise TypeError(
                    f"{page_class.__name__} takes either one argument object or keyword "
                    f"arguments, not both")
            # No arguments at all still lets site arguments fill the URL placeholders
            return page_class(self, kwargs if arg is None else arg)

        accessor.__name__ = page_class.__name__
        accessor.__doc__ = f"Return the {page_class.__name__} page, navigating to it when needed."
        return accessor

    def __str__(self):
        return f"<{type(self).__name__} base_url='{self.base_url}'>"

    __repr__ = __str__


def _create_page_base(site_class):
    return type("Page", (SitePage,), {
        "site_class": site_class,
        "__module__": site_class.__module__,
        "__qualname__": f"{site_class.__qualname__}.Page",
        "__doc__": f"Base class for the pages of {site_class.__name__}.",
    })


Site.Page = _create_page_base(Site)
