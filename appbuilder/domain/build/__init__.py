"""Build domain - configuration models and pure artifact transforms.

All exports are pure (no I/O, no side effects).

Key Types:
    TaskSpec - One named task of the build configuration
    BuildConfig - The whole build configuration
    ProjectMetadata - package.json contents and build counter
    BuildRunState - Mutable state of one run
    Artifact - A produced output file

Transforms:
    digest - SHA-384 integrity token
    assemble / clean_css - Stylesheet concatenation and cleanup
    rewrite / strip_html - HTML placeholder substitution and stripping
    license_preamble - Banner for minified JS
"""

from .css import assemble, clean_css, concatenate
from .html import AssetRef, rewrite, script_tag, strip_html, stylesheet_tag
from .integrity import digest, digest_file, integrity_attribute
from .models import (
    DEFAULT_CSS_PLACEHOLDER,
    DEFAULT_JS_PLACEHOLDER,
    RELEASE,
    Artifact,
    ArtifactKind,
    BuildConfig,
    BuildRunState,
    BuildStatus,
    CopyDescriptor,
    ProjectMetadata,
    TaskSpec,
)
from .preamble import license_preamble

__all__ = [
    # Models
    "TaskSpec",
    "CopyDescriptor",
    "BuildConfig",
    "ProjectMetadata",
    "BuildRunState",
    "BuildStatus",
    "Artifact",
    "ArtifactKind",
    "DEFAULT_JS_PLACEHOLDER",
    "DEFAULT_CSS_PLACEHOLDER",
    "RELEASE",
    # Integrity
    "digest",
    "digest_file",
    "integrity_attribute",
    # CSS
    "assemble",
    "clean_css",
    "concatenate",
    # HTML
    "AssetRef",
    "rewrite",
    "strip_html",
    "script_tag",
    "stylesheet_tag",
    # Preamble
    "license_preamble",
]
