"""Build summary — compact status output after a CLI run.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from routemap.export.records import SitemapResult


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def format_summary(result: SitemapResult) -> str:
    """Return the multi-line summary for *result*."""
    from routemap import __version__

    lines: list[str] = [
        "",
        f"  {_BOLD}routemap{_RESET} {_DIM}v{__version__}{_RESET}  {_GREEN}[build]{_RESET}",
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    routes_label = "route" if result.total_routes == 1 else "routes"
    lines.append(
        f"  {_DIM}├─{_RESET} {result.total_routes} {routes_label} "
        f"{_DIM}in {result.duration_ms:.0f}ms{_RESET}"
    )
    if result.ignored_routes:
        lines.append(f"  {_DIM}├─{_RESET} {_YELLOW}{result.ignored_routes} ignored{_RESET}")

    for exported in result.files:
        if exported.source_type == "sitemap":
            label = "entry" if exported.entry_count == 1 else "entries"
            detail = f"{exported.entry_count} {label}"
        else:
            detail = f"{exported.size_bytes} bytes"
        lines.append(f"  {_DIM}├─{_RESET} {exported.source_path} {_DIM}({detail}){_RESET}")

    lines.append(f"  {_DIM}└─{_RESET} output: {_DIM}{result.output_dir}{_RESET}")
    lines.append("")
    return "\n".join(lines)


def print_summary(result: SitemapResult) -> None:
    """Print the build summary to stderr."""
    print(format_summary(result), file=sys.stderr)
