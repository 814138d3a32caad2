"""URL part formatting and percent-encoding.

Pure helpers with no dependence on the route table.
"""

import re
from typing import Any
from urllib.parse import quote, unquote

# Whitespace runs and single punctuation characters that cannot appear in
# a formatted URL part.
URL_REPLACE_RE = re.compile(r"""\s+|[?!$,.+"'*^|/\\\[\]#%`><;:@&=]""")

_UPPER_RE = re.compile(r"[A-Z]")
_HYPHENS_RE = re.compile(r"-{2,}")

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_COMPONENT_SAFE = "!*'()"


def encode_component(value: Any) -> str:
    """Percent-encode *value* for use as a single URL part.

    Non-string values are converted with ``str()`` first. ``/`` is always
    encoded, so an encoded value never splits into two parts.
    """
    return quote(str(value), safe=_COMPONENT_SAFE)


def decode_component(part: str) -> str:
    """Decode a percent-encoded URL part exactly once.

    Malformed escapes are left as-is rather than raising.
    """
    return unquote(part)


def pascal_case_to_dash_case(text: str) -> str:
    """Lowercase the first character and dash-prefix every other capital.

    Examples::

        >>> pascal_case_to_dash_case("UserProfile")
        'user-profile'
        >>> pascal_case_to_dash_case("Hello--World--")
        'hello---world--'
    """
    if not text:
        return text
    return text[0].lower() + _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), text[1:])


def format_url_part(name: str) -> str:
    """Turn free-form text into a URL-safe path part.

    Examples::

        >>> format_url_part("Hello, World!!")
        'hello-world'
        >>> format_url_part("MyPage")
        'my-page'
    """
    name = pascal_case_to_dash_case(URL_REPLACE_RE.sub("-", name))
    name = _HYPHENS_RE.sub("-", name)
    if name.startswith("-"):
        name = name[1:]
    if name.endswith("-"):
        name = name[:-1]
    return encode_component(name)
