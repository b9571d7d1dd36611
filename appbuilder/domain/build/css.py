"""Stylesheet concatenation and release-mode cleanup."""

import re

from appbuilder.domain.build.integrity import digest

# Applied in order; comments are matched once line breaks are already spaces
_CLEANUP_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\r"), " "),
    (re.compile(r"\n"), " "),
    (re.compile(r"\t"), " "),
    (re.compile(r": "), ":"),
    (re.compile(r" :"), ":"),
    (re.compile(r" \{"), "{"),
    (re.compile(r" {2,}"), ""),
    (re.compile(r"/\*.*?\*/"), ""),
    # a removed comment can leave its surrounding spaces side by side
    (re.compile(r" {2,}"), ""),
)


def clean_css(css: str) -> str:
    """Strip line breaks, tabs, redundant spaces and ``/* */`` comments.

    Lossy: runs of two or more spaces are dropped entirely, not shortened.

    Examples:
        >>> clean_css("a {\\n\\tcolor : red;\\n}\\n/* note */")
        'a{color:red; } '
    """
    for pattern, replacement in _CLEANUP_RULES:
        css = pattern.sub(replacement, css)
    return css


def concatenate(sources: list[str]) -> str:
    """Join stylesheet contents in the given order, with no separator."""
    return "".join(sources)


def assemble(sources: list[str], release: bool) -> tuple[str, str]:
    """Build the combined stylesheet and its integrity digest.

    Args:
        sources: Stylesheet contents, in cascade order.
        release: Apply :func:`clean_css` to the concatenation.

    Returns:
        ``(content, digest)``; the digest covers the final content.
    """
    content = concatenate(sources)
    if release:
        content = clean_css(content)
    return content, digest(content)
