from decorators.class_decorators import use_features
from pages.demo_site import DemoSite
from pages.features import SearchBar, SiteHeader
from wrappers.page_element import element


# No page URL: the landing page lives at the site's base URL
@use_features(SiteHeader, SearchBar)
class LandingPage(DemoSite.Page):

    heading = element(lambda b: b.locator("h1"))
