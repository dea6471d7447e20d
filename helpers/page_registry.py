from utils.text_utils import camel_to_snake


class PageRegistry:
    """
    Page classes that belong to one site class, in definition order.

    Page classes register themselves when they are defined; the site uses the
    registry to build page accessors and to recognize the displayed page.
    """

    def __init__(self, site_name: str = None):
        self.site_name = site_name
        self._pages = {}

    # Adds or replaces a page class, keyed by its accessor name
    def register(self, page_class):
        self._pages[get_accessor_name(page_class)] = page_class
        return page_class

    def unregister(self, page_class):
        self._pages.pop(get_accessor_name(page_class), None)

    def get(self, name: str):
        """Find a page class by accessor name (account_edit_page) or class name (AccountEditPage)."""
        if name in self._pages:
            return self._pages[name]
        return self._pages.get(camel_to_snake(name))

    def pages(self) -> list:
        return list(self._pages.values())

    def accessor_names(self) -> list[str]:
        return list(self._pages)

    def __contains__(self, item):
        if isinstance(item, str):
            return self.get(item) is not None
        return item in self._pages.values()

    def __iter__(self):
        return iter(self.pages())

    def __len__(self):
        return len(self._pages)

    def __str__(self):
        return f"<PageRegistry site='{self.site_name}' pages={self.accessor_names()}>"

    __repr__ = __str__


def get_accessor_name(page_class) -> str:
    return camel_to_snake(page_class.__name__)
