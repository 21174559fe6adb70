"""String affix helpers.

Unlike ``str.removeprefix``/``str.removesuffix``, these report a missing affix
as ``None`` instead of returning the string untouched, so callers can tell
"stripped nothing because the affix is empty" from "affix did not match".
"""


def strip_prefix(prefix: str, s: str) -> str | None:
    """Remove ``prefix`` from the start of ``s``.

    Examples:
        ``strip_prefix("foo", "foobar") == "bar"``

        ``strip_prefix("", "foobar") == "foobar"``

        ``strip_prefix("baz", "foobar") is None``
    """
    if s.startswith(prefix):
        return s[len(prefix) :]
    return None


def strip_suffix(suffix: str, s: str) -> str | None:
    """Remove ``suffix`` from the end of ``s``.

    Examples:
        ``strip_suffix("bar", "foobar") == "foo"``

        ``strip_suffix("", "foobar") == "foobar"``

        ``strip_suffix("baz", "foobar") is None``
    """
    if s.endswith(suffix):
        return s[: len(s) - len(suffix)]
    return None
