import re
from urllib.parse import quote, unquote
from common.exceptions import MissingValueError, PageInitError, TemplateSyntaxError

PLACEHOLDER_PREFIX = "{"
PLACEHOLDER_SUFFIX = "}"
PLACEHOLDER_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
PLACEHOLDER_TOKEN_PATTERN = re.compile(r"(\{[^{}]*\})")
# Characters a placeholder value never spans in a concrete URL
PLACEHOLDER_VALUE_PATTERN = r"[^/?#&]*"
ABSOLUTE_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
BARE_ORIGIN_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://[^/?#]*$")


class UrlTemplate:
    """
    UrlTemplate is a URL pattern with named {placeholder} segments:
    - Expansion of placeholders into a concrete, percent-encoded URL.
    - Structural matching of a concrete URL against the pattern.
    - Extraction of the placeholder values bound in a concrete URL.
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._parts = _parse_pattern(pattern)
        self.placeholder_names = tuple(dict.fromkeys(
            name for is_placeholder, name in self._parts if is_placeholder))
        self._regex = self._compile_regex()

    # Substitutes every placeholder with its URL-encoded value
    def expand(self, values: dict) -> str:
        result = []

        for is_placeholder, text in self._parts:
            if not is_placeholder:
                result.append(text)
                continue

            if text not in values:
                raise MissingValueError(
                    f"No value was provided for the '{text}' placeholder "
                    f"of URL template {self.pattern}")
            result.append(quote(str(values[text]), safe=""))

        return "".join(result)

    def matches(self, url: str) -> bool:
        return self._regex.fullmatch(url or "") is not None

    # Returns decoded placeholder values bound in the URL, or None on mismatch
    def extract(self, url: str) -> dict[str, str] | None:
        match = self._regex.fullmatch(url or "")

        if match is None:
            return None
        return {name: unquote(match.group(name)) for name in self.placeholder_names}

    def _compile_regex(self):
        seen = set()
        regex = []

        for is_placeholder, text in self._parts:
            if not is_placeholder:
                regex.append(re.escape(text))
            elif text in seen:
                # Repeated placeholder must bind the same value
                regex.append(f"(?P={text})")
            else:
                seen.add(text)
                regex.append(f"(?P<{text}>{PLACEHOLDER_VALUE_PATTERN})")

        # Browsers report a bare origin with a trailing slash
        if BARE_ORIGIN_PATTERN.match(self.pattern):
            regex.append("/?")

        return re.compile("".join(regex))

    def __eq__(self, other):
        return isinstance(other, UrlTemplate) and other.pattern == self.pattern

    def __hash__(self):
        return hash(self.pattern)

    def __str__(self):
        return f"<UrlTemplate pattern='{self.pattern}'>"

    __repr__ = __str__


def compile_template(pattern: str) -> UrlTemplate:
    return UrlTemplate(pattern)


def build_url_template(page_name: str, url_pattern: str | None, base_url: str | None) -> UrlTemplate:
    """
    Build the URL template for a page from its own URL pattern and the site's base URL.

    Precedence:
        1. No page URL pattern -> the base URL alone.
        2. Absolute http(s) page URL pattern -> the pattern alone, base URL ignored.
        3. Relative page URL pattern -> base URL + pattern, no normalization.

    Raises:
        PageInitError: the pattern needs a base URL and the site has none.
    """
    url_pattern = url_pattern or ""

    if not url_pattern:
        if not base_url:
            raise PageInitError(
                f"Unable to initialize {page_name} because there's no base_url defined "
                f"for the site and no page URL was defined for the page.")
        return compile_template(base_url)

    if ABSOLUTE_URL_PATTERN.match(url_pattern):
        return compile_template(url_pattern)

    if not base_url:
        raise PageInitError(
            f"Unable to initialize {page_name} because there's no base_url defined "
            f"for the site and the page URL that was defined was a URL fragment ({url_pattern})")

    return compile_template(f"{base_url}{url_pattern}")


# Create placeholder from its name
def get_placeholder_from_name(name: str) -> str:
    return f"{PLACEHOLDER_PREFIX}{name}{PLACEHOLDER_SUFFIX}"


def _parse_pattern(pattern: str) -> list[tuple[bool, str]]:
    if pattern is None:
        raise TemplateSyntaxError("URL pattern can't be None")

    parts = []

    for token in PLACEHOLDER_TOKEN_PATTERN.split(pattern):
        if not token:
            continue

        if token.startswith(PLACEHOLDER_PREFIX) and token.endswith(PLACEHOLDER_SUFFIX):
            name = token[1:-1].strip()

            if not PLACEHOLDER_NAME_PATTERN.match(name):
                raise TemplateSyntaxError(
                    f"Invalid placeholder '{token}' in URL pattern {pattern}")
            if parts and parts[-1][0]:
                raise TemplateSyntaxError(
                    f"Placeholder '{token}' directly follows another placeholder "
                    f"in URL pattern {pattern}")
            parts.append((True, name))

        elif PLACEHOLDER_PREFIX in token or PLACEHOLDER_SUFFIX in token:
            raise TemplateSyntaxError(
                f"Unbalanced placeholder delimiters in URL pattern {pattern}")
        else:
            parts.append((False, token))

    return parts
