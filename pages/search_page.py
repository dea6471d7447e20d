from decorators.class_decorators import page_url
from pages.demo_site import DemoSite
from wrappers.page_element import element


# {language} comes from the site arguments unless the page is given one
@page_url("/search?q={query}&lang={language}")
class SearchResultsPage(DemoSite.Page):

    results = element(lambda b: b.locator("#results li"))
