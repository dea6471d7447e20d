import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def camel_to_snake(name: str) -> str:
    """
    Convert a class name to the snake_case name used for accessors.

    Examples:
        camel_to_snake("AccountEditPage") → "account_edit_page"
        camel_to_snake("HTMLFooter") → "html_footer"
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def indent_text(text: str, prefix: str = "    ") -> str:
    """Indent every line of a (possibly multiline) text block for error reports."""
    return "\n".join(f"{prefix}{line}" for line in str(text).splitlines())
