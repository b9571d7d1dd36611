"""License banner placed at the top of the minified JS."""

from datetime import datetime

from appbuilder.domain.build.models import ProjectMetadata

# LibreJS reads this as the license notice of GPLv3 code
GPL_NOTICE = (
    "The JavaScript code in this page is free software: you can",
    "redistribute it and/or modify it under the terms of the GNU",
    "General Public License (GNU GPL) as published by the Free Software",
    "Foundation, either version 3 of the License, or (at your option)",
    "any later version.  The code is distributed WITHOUT ANY WARRANTY;",
    "without even the implied warranty of MERCHANTABILITY or FITNESS",
    "FOR A PARTICULAR PURPOSE.  See the GNU GPL for more details.",
    "",
    "As additional permission under GNU GPL version 3 section 7, you",
    "may distribute non-source (e.g., minimized or compacted) forms of",
    "that code without the copy of the GNU GPL normally required by",
    "section 4, provided you include this license notice and a URL",
    "through which recipients can access the Corresponding Source.",
)


def license_notice(license_id: str) -> tuple[str, ...]:
    """Notice text for a license identifier; empty when none is known."""
    if license_id.startswith("GPL-3.0"):
        return GPL_NOTICE
    return ()


def format_timestamp(moment: datetime) -> str:
    """Format a local timestamp the way browsers print ``Date`` objects."""
    moment = moment.astimezone()
    return moment.strftime("%a %b %d %Y %H:%M:%S GMT%z")


def license_preamble(metadata: ProjectMetadata, now: datetime | None = None) -> str:
    """Build the ``@licstart``/``@licend`` comment for a JS bundle.

    Args:
        metadata: Project metadata, with the build number of this run.
        now: Build time; defaults to the current local time.

    Returns:
        A ``/** ... */`` block followed by a blank line.
    """
    now = now or datetime.now()
    copyright_line = f"Copyright {now.year}"
    if metadata.author:
        copyright_line = f"{copyright_line} {metadata.author}"

    lines = [
        "",
        f"@source: {metadata.sources}",
        "",
        "@licstart  The following is the entire license notice for the",
        "JavaScript code in this page.",
        "",
        f"{metadata.name} - version {metadata.version}",
        f"Build {metadata.build_number} - {format_timestamp(now)}",
        copyright_line,
        f"License: {metadata.license}",
        "",
    ]
    notice = license_notice(metadata.license)
    if notice:
        lines += [*notice, ""]
    lines += [
        "@licend  The above is the entire license notice",
        "for the JavaScript code in this page.",
        "",
    ]
    body = "\n".join(f" * {line}".rstrip() if line else " * " for line in lines)
    return f"/**\n{body}\n */\n\n"
