import pytest
from unittest.mock import Mock
from wrappers.browser_driver import BrowserDriver


@pytest.fixture
def driver():
    """
    Mock BrowserDriver with a live current URL.
    navigate_to() moves to the URL, or to driver.redirects[url] when set.
    """
    driver = Mock(spec=BrowserDriver)
    driver.browser = Mock(name="browser")
    driver.state = {"url": "about:blank"}
    driver.redirects = {}

    def navigate(url):
        driver.state["url"] = driver.redirects.get(url, url)

    driver.current_url.side_effect = lambda: driver.state["url"]
    driver.navigate_to.side_effect = navigate
    driver.page_text.return_value = "Welcome\nSome page text"
    return driver
