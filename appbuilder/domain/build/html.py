"""HTML template rewriting.

Targeted text substitution, not an HTML parser: a fixed placeholder
``<script>`` tag and a fixed placeholder stylesheet ``<link>`` tag are
replaced with tags that carry the integrity hash of the generated
artifacts, then comments and redundant whitespace are stripped.

Whitespace is collapsed everywhere, including inside ``<pre>`` and inline
``<script>`` bodies. Templates are expected not to rely on such content.
"""

import re
from dataclasses import dataclass

from appbuilder.domain.build.integrity import integrity_attribute

_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_TAB = re.compile(r"\t")
_SPACES = re.compile(r" {2,}")


@dataclass(frozen=True)
class AssetRef:
    """A generated asset the template should point at.

    Attributes:
        placeholder: Literal tag text to replace in the template.
        filename: Output file name, relative to the HTML file.
        integrity: Base64 SHA-384 digest of the output file.
    """

    placeholder: str
    filename: str
    integrity: str


def script_tag(filename: str, integrity: str) -> str:
    return (
        f'<script src="{filename}" integrity="{integrity_attribute(integrity)}"'
        ' crossorigin="anonymous" ></script>'
    )


def stylesheet_tag(filename: str, integrity: str) -> str:
    return (
        f'<link rel="stylesheet" href="{filename}" integrity="{integrity_attribute(integrity)}"'
        ' crossorigin="anonymous" />'
    )


def strip_html(html: str) -> str:
    """Remove comments, then collapse line breaks, tabs and space runs.

    Comments go first so that markup inside a comment is removed whole
    rather than being merged with the surrounding text. Applying the
    function to its own output returns it unchanged.
    """
    # removing one comment can splice a new one together, e.g. "<!<!-- -->-- -->"
    stripped = _COMMENT.sub("", html)
    while stripped != html:
        html = stripped
        stripped = _COMMENT.sub("", html)
    html = _LINE_BREAK.sub(" ", html)
    html = _TAB.sub(" ", html)
    return _SPACES.sub(" ", html)


def rewrite(template: str, js: AssetRef | None = None, css: AssetRef | None = None) -> str:
    """Produce the final HTML for a task.

    Every occurrence of a placeholder is replaced; text that does not match
    the placeholder exactly is left as is. Without refs only the stripping
    pass runs.

    Args:
        template: Content of the task's HTML template.
        js: Minified JS output, when the task built one.
        css: CSS output, when the task built one.

    Returns:
        The rewritten, stripped HTML.
    """
    html = template
    if js is not None:
        html = html.replace(js.placeholder, script_tag(js.filename, js.integrity))
    if css is not None:
        html = html.replace(css.placeholder, stylesheet_tag(css.filename, css.integrity))
    return strip_html(html)
