import re
from wrappers.page_element import element
from wrappers.page_feature import PageFeature


class SiteHeader(PageFeature):
    alias = "header"

    title = element(lambda b: b.locator("#site-header h2"))
    home_link = element(lambda b: b.locator("#home-link"))

    def go_home(self):
        self.home_link.click()
        self.browser.wait_for_url(re.compile(r"^https?://[^/]+/?$"))


class SearchBar(PageFeature):

    query_input = element(lambda b: b.locator("#search-query"))
    submit_button = element(lambda b: b.locator("#search-submit"))

    def search(self, criteria):
        self.query_input.fill(criteria)
        self.submit_button.click()
        self.browser.wait_for_url(re.compile(r"/search\?"))
