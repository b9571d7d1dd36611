"""Subresource-integrity digests for generated artifacts.

The digest must be taken over the exact bytes that end up on disk, after
every transformation (minification, CSS cleanup) has been applied.
Nothing is cached; each call hashes its input again.
"""

import base64
import hashlib
from pathlib import Path

ALGORITHM = "sha384"


def digest(content: str | bytes) -> str:
    """Return the base64-encoded SHA-384 digest of ``content``.

    Text is encoded as UTF-8, which is also how artifacts are written.

    Examples:
        >>> digest("")
        'OLBgp1GsljhM2TJ+sbHjaiH9txEUvgdDTAzHv2P24donTt6/529l+9Ua0vFImLlb'
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    return base64.b64encode(hashlib.sha384(content).digest()).decode("ascii")


def digest_file(path: Path) -> str:
    """Digest a written artifact, for verifying an embedded token."""
    return digest(path.read_bytes())


def integrity_attribute(token: str) -> str:
    """Format a digest as an HTML ``integrity`` attribute value."""
    return f"{ALGORITHM}-{token}"
