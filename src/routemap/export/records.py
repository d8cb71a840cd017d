"""Export records — what a generation run wrote to disk."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written during a run.

    Attributes:
        source_path: Logical name (e.g., ``"sitemap.xml"``, ``"robots.txt"``).
        output_path: Absolute filesystem path to the written file.
        source_type: Category of the written file.
        entry_count: Number of ``<url>`` entries (0 for robots.txt).
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to serialize and write this file.

    """

    source_path: str
    output_path: Path
    source_type: Literal["sitemap", "robots"]
    entry_count: int
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class SitemapResult:
    """Aggregate result of a full generation run.

    Attributes:
        files: All files written, sitemaps first, robots.txt last.
        total_routes: Number of routes handed to the run.
        ignored_routes: Number of routes skipped by the ignore list.
        duration_ms: Total wall-clock time for the run.
        output_dir: Absolute path to the output directory.

    """

    files: tuple[ExportedFile, ...]
    total_routes: int
    ignored_routes: int
    duration_ms: float
    output_dir: Path

    @property
    def sitemaps(self) -> tuple[ExportedFile, ...]:
        """Only the sitemap files."""
        return tuple(f for f in self.files if f.source_type == "sitemap")

    @property
    def total_entries(self) -> int:
        """Entries written across all sitemap files."""
        return sum(f.entry_count for f in self.sitemaps)
