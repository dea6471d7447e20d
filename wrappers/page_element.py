class PageElement:
    """
    PageElement declares access to one UI element of a page or page feature.

    The block receives the owner's browser object (Playwright Page, Selenium
    WebDriver, ...) and returns whatever that library uses for an element:

        class LoginPage(DemoSite.Page):
            username = element(lambda b: b.locator("#user-name"))

    Reading login_page.username calls the block each time, so the element is
    looked up against the live page.
    """

    def __init__(self, block, name: str = None):
        if not callable(block):
            raise TypeError(f"Element block must be callable, got {type(block).__name__}")
        self.block = block
        self.name = name

    def __set_name__(self, owner, name):
        if self.name is None:
            self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return self.block(instance.browser)

    def __set__(self, instance, value):
        raise AttributeError(f"Element '{self.name}' is read-only")

    def __str__(self):
        return f"<PageElement name='{self.name}'>"

    __repr__ = __str__


def element(block, name: str = None) -> PageElement:
    return PageElement(block, name)


el = element


def get_element_names(cls) -> tuple[str, ...]:
    """Names of all elements declared on a class and its bases, base classes first."""
    names = {}

    for klass in reversed(cls.__mro__):
        for attr_name, value in vars(klass).items():
            if isinstance(value, PageElement):
                names[attr_name] = None

    return tuple(names)
