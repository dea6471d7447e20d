from decorators.class_decorators import page_url, use_features
from pages.demo_site import DemoSite
from pages.features import SiteHeader
from wrappers.page_element import element


@page_url("/accounts/{account_code}")
@use_features(SiteHeader)
class AccountDetailsPage(DemoSite.Page):

    first_name = element(lambda b: b.locator("#first-name"))
    last_name = element(lambda b: b.locator("#last-name"))


@page_url("/accounts/{account_code}/edit")
@use_features("site_header")
class AccountEditPage(DemoSite.Page):

    first_name = element(lambda b: b.locator("#fname"))
    last_name = element(lambda b: b.locator("#lname"))
    save = element(lambda b: b.locator("#save"))

    def update(self, fname, lname):
        self.first_name.fill(fname)
        self.last_name.fill(lname)
        self.save.click()
        self.browser.wait_for_url(f"**/accounts/{self.arguments['account_code']}")
        return self.expect_page(AccountDetailsPage)
