"""Lint diagnostics for content workspaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto

from .config import Config, ErrorPolicy
from .content import ContentItem, MetadataError
from .ingest import load_items


class IssueSeverity(Enum):
    """Severity level for lint issues."""

    ERROR = auto()
    WARNING = auto()


@dataclass(slots=True)
class DocumentIssue:
    """Represents a lint finding for a content file."""

    slug: str
    source_path: str
    message: str
    severity: IssueSeverity
    pointer: str | None = None


@dataclass(slots=True)
class LintReport:
    """Aggregate lint results for a workspace."""

    issues: list[DocumentIssue] = field(default_factory=list)
    document_count: int = 0

    def add(self, issue: DocumentIssue) -> None:
        self.issues.append(issue)

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is IssueSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is IssueSeverity.WARNING)


def lint_item(item: ContentItem, config: Config, *, now: datetime | None = None) -> list[DocumentIssue]:
    """Run lint checks against a single parsed content item."""
    issues: list[DocumentIssue] = []
    source_path = item.source_path or ""

    if item.draft:
        issues.append(
            DocumentIssue(
                slug=item.slug,
                source_path=source_path,
                message="Item is marked as a draft and will not be published.",
                severity=IssueSeverity.WARNING,
                pointer="draft",
            )
        )

    if not item.body.strip():
        issues.append(
            DocumentIssue(
                slug=item.slug,
                source_path=source_path,
                message="Item has an empty body.",
                severity=IssueSeverity.WARNING,
                pointer="body",
            )
        )

    moment = now or datetime.now(timezone.utc)
    if not config.build_future and item.date > moment:
        issues.append(
            DocumentIssue(
                slug=item.slug,
                source_path=source_path,
                message=f"Item is dated {item.date.isoformat()} and is hidden until then.",
                severity=IssueSeverity.WARNING,
                pointer="date",
            )
        )

    return issues


def lint_workspace(config: Config, *, now: datetime | None = None) -> LintReport:
    """Load every content file and emit lint diagnostics for the workspace."""
    report = LintReport()
    loaded = load_items(config, on_error=ErrorPolicy.SKIP)

    for failure in loaded.failures:
        exc = failure.error
        report.add(
            DocumentIssue(
                slug=failure.path.stem,
                source_path=str(failure.path),
                message=f"{failure.kind}: {exc.args[0]}",
                severity=IssueSeverity.ERROR,
                pointer=exc.key if isinstance(exc, MetadataError) else None,
            )
        )

    report.document_count = len(loaded.items)
    for item in loaded.items:
        for issue in lint_item(item, config, now=now):
            report.add(issue)

    return report
