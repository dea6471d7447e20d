import logging
from abc import ABC, abstractmethod
from playwright.sync_api import Page
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from common.exceptions import BrowserLibraryNotSupportedError

logger = logging.getLogger(__name__)


class BrowserDriver(ABC):
    """
    BrowserDriver is the narrow browser capability used by sites and pages:
    - current_url(): URL the browser is displaying.
    - navigate_to(url): load a URL.
    - refresh(): reload the displayed page.
    - page_text(): visible text, used in error reports.
    """

    def __init__(self, browser):
        self.browser = browser

    @abstractmethod
    def current_url(self) -> str:
        ...

    @abstractmethod
    def navigate_to(self, url: str) -> None:
        ...

    @abstractmethod
    def refresh(self) -> None:
        ...

    @abstractmethod
    def page_text(self) -> str:
        ...

    def __str__(self):
        return f"<{self.__class__.__name__} browser={type(self.browser).__name__}>"

    __repr__ = __str__


class PlaywrightDriver(BrowserDriver):

    def __init__(self, page: Page):
        super().__init__(page)

    def current_url(self) -> str:
        return self.browser.url

    def navigate_to(self, url: str) -> None:
        logger.info("Playwright navigating to %s", url)
        self.browser.goto(url)

    def refresh(self) -> None:
        self.browser.reload()

    def page_text(self) -> str:
        return self.browser.inner_text("body")


class SeleniumDriver(BrowserDriver):

    def __init__(self, driver: WebDriver):
        super().__init__(driver)

    def current_url(self) -> str:
        return self.browser.current_url

    def navigate_to(self, url: str) -> None:
        logger.info("Selenium navigating to %s", url)
        self.browser.get(url)

    def refresh(self) -> None:
        self.browser.refresh()

    def page_text(self) -> str:
        return self.browser.find_element(By.TAG_NAME, "body").text


def get_browser_driver(browser) -> BrowserDriver:
    """
    Adapt a browser object to the BrowserDriver capability.

    Args:
        browser: A BrowserDriver, a Playwright Page or a Selenium WebDriver.

    Raises:
        BrowserLibraryNotSupportedError: any other browser type.
    """
    if isinstance(browser, BrowserDriver):
        return browser
    if isinstance(browser, Page):
        return PlaywrightDriver(browser)
    if isinstance(browser, WebDriver):
        return SeleniumDriver(browser)

    raise BrowserLibraryNotSupportedError(
        f"Only Playwright and Selenium WebDriver are currently supported, or a custom "
        f"BrowserDriver implementation. Class of browser object: {type(browser).__name__}")
