import re
from decorators.class_decorators import disable_automatic_navigation, page_url, url_matcher
from pages.demo_site import DemoSite
from wrappers.page_element import element


@page_url("/checkout")
class CheckoutPage(DemoSite.Page):

    place_order_button = element(lambda b: b.locator("#place-order"))

    def place_order(self):
        self.place_order_button.click()
        self.browser.wait_for_url("**/checkout/complete")
        return self.expect_page(CheckoutCompletePage)


# Only reachable by placing an order
@page_url("/checkout/complete")
@disable_automatic_navigation
class CheckoutCompletePage(DemoSite.Page):

    message = element(lambda b: b.locator("#message"))


# /orders/latest redirects to the order's own URL
@page_url("/orders/latest")
@url_matcher(re.compile(r"/orders/\d+$"))
class LatestOrderPage(DemoSite.Page):

    order_number = element(lambda b: b.locator("#order-number"))
