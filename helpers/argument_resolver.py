"""
Resolution of the values that fill a page's URL placeholders.

Each placeholder is looked up, in declaration order, in:
    1. the mapping the page was initialized with (key lookup ignores case),
    2. the object the page was initialized with (attribute or reader method),
    3. the site that owns the page (site arguments, then data attributes).

A value of None counts as absent and falls through to the next source.
"""
import inspect
import logging
from collections.abc import Mapping
from common.exceptions import PageInitError
from utils.code_utils import get_mapping_value_ignore_case, has_public_attribute

logger = logging.getLogger(__name__)


class _Missing:

    def __bool__(self):
        return False

    def __repr__(self):
        return "MISSING"


MISSING = _Missing()


class AttributeSource:
    """Anything a placeholder value can be read from."""

    def get(self, name: str):
        raise NotImplementedError


class MappingSource(AttributeSource):

    def __init__(self, mapping: Mapping):
        self.mapping = mapping

    def get(self, name: str):
        value = get_mapping_value_ignore_case(self.mapping, name, MISSING)
        return MISSING if value is None else value


class ObjectSource(AttributeSource):
    """
    Reads attributes, properties and reader methods of an arbitrary object.
    A method counts only when it can be called without arguments.
    """

    def __init__(self, obj):
        self.obj = obj

    def get(self, name: str):
        if not has_public_attribute(self.obj, name):
            return MISSING

        value = getattr(self.obj, name)
        if callable(value):
            if not _takes_no_arguments(value):
                return MISSING
            value = value()
        return MISSING if value is None else value


class SiteSource(AttributeSource):
    """
    Site-level fallback: the site's named arguments first, then plain data
    attributes. Methods and properties such as site.page are never probed.
    """

    def __init__(self, site):
        self.site = site

    def get(self, name: str):
        site_arguments = getattr(self.site, "site_arguments", None)

        if isinstance(site_arguments, Mapping):
            value = get_mapping_value_ignore_case(site_arguments, name, MISSING)
            if value is not MISSING and value is not None:
                return value

        if isinstance(getattr(type(self.site), name, None), property):
            return MISSING
        if not has_public_attribute(self.site, name):
            return MISSING

        value = getattr(self.site, name)
        if value is None or callable(value):
            return MISSING
        return value


def _takes_no_arguments(func) -> bool:
    try:
        inspect.signature(func).bind()
    except (TypeError, ValueError):
        return False
    return True


def as_attribute_source(arg) -> AttributeSource | None:
    if arg is None:
        return None
    if isinstance(arg, AttributeSource):
        return arg
    if isinstance(arg, Mapping):
        return MappingSource(arg)
    return ObjectSource(arg)


def resolve_arguments(page_name: str, required_names, arg, site) -> dict[str, str]:
    """
    Resolve every required placeholder name to a string value.

    Args:
        page_name (str): Page class name, used in error messages.
        required_names: Ordered placeholder names of the page URL template.
        arg: Mapping, arbitrary object or None the page was initialized with.
        site: Site object used as the last fallback.

    Returns:
        dict[str, str]: One entry per required name.

    Raises:
        PageInitError: An argument is missing, or one was given to a page that takes none.
    """
    required_names = tuple(required_names)

    if not required_names:
        if arg is None or isinstance(arg, Mapping):
            return {}
        raise PageInitError(
            f"{type(arg).__name__} was provided as a {page_name} initialization argument, "
            f"but the page does not require arguments because its URL has no placeholders.")

    if arg is None:
        raise PageInitError(
            f"No object was provided when attempting to initialize {page_name}. "
            f"This page object requires the following arguments for initialization: "
            f"{', '.join(required_names)}.")

    sources = [as_attribute_source(arg), SiteSource(site)]
    arguments = {}

    for name in required_names:
        value = MISSING

        for source in sources:
            value = source.get(name)
            if value is not MISSING:
                break

        if value is MISSING:
            raise PageInitError(
                f"{type(arg).__name__} was provided, but it did not provide '{name}' and the "
                f"site has no '{name}' attribute either. '{name}' is necessary to build an URL "
                f"for the {page_name} page.")

        arguments[name] = str(value)

    logger.debug("Resolved %s URL arguments: %s", page_name, arguments)
    return arguments
