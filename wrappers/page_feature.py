from collections.abc import Mapping
from common.exceptions import PageInitError
from utils.text_utils import camel_to_snake
from wrappers.page_element import get_element_names

# Global registry of page feature classes by snake_case name
FEATURE_CLASSES = {}


class PageFeature:
    """
    PageFeature is a reusable piece of UI (footer, sidebar, search bar) shared by
    several pages. Declare elements on it the same way as on a page:

        class Footer(PageFeature):
            about = element(lambda b: b.locator("#about"))

        @use_features(Footer)
        class ConfigPage(MySite.Page):
            ...

        site.config_page().footer.about.click()

    The accessor name is the snake_case class name unless the class sets alias.
    """

    alias = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        FEATURE_CLASSES[camel_to_snake(cls.__name__)] = cls
        cls.element_names = get_element_names(cls)

    def __init__(self, browser, args=None):
        self.browser = browser
        self.args = args

    @classmethod
    def accessor_name(cls) -> str:
        return cls.alias or camel_to_snake(cls.__name__)

    def __str__(self):
        return f"<{self.__class__.__name__} feature>"

    __repr__ = __str__


def get_feature_class(feature):
    """Resolve a feature declared as a PageFeature subclass or by its (snake or camel case) name."""
    if isinstance(feature, type) and issubclass(feature, PageFeature):
        return feature

    if isinstance(feature, str):
        feature_class = FEATURE_CLASSES.get(feature) or FEATURE_CLASSES.get(camel_to_snake(feature))
        if feature_class is not None:
            return feature_class

    raise PageInitError(f"Unknown page feature: {feature!r}")


def get_feature_name(feature) -> str:
    if isinstance(feature, str):
        return camel_to_snake(feature)
    return camel_to_snake(feature.__name__)


class FeatureMap(Mapping):
    """
    Features attached to one page instance, keyed by accessor name.
    Each feature object is built on first access and reused afterwards.
    """

    def __init__(self, features, browser, args=None):
        self.browser = browser
        self.args = args
        self._declared = {}
        self._built = {}

        for feature in features:
            feature_class = get_feature_class(feature)
            self._declared[feature_class.accessor_name()] = feature_class

    def __getitem__(self, name):
        if name not in self._built:
            feature_class = self._declared[name]
            self._built[name] = feature_class(self.browser, self.args)
        return self._built[name]

    def __iter__(self):
        return iter(self._declared)

    def __len__(self):
        return len(self._declared)

    def is_built(self, name: str) -> bool:
        return name in self._built
