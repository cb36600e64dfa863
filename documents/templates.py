"""Versioned document templates and the shared rendering helpers."""

import functools
import logging
from typing import Any, Callable, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from contracts.base import is_set
from contracts.options import option_label, option_labels
from contracts.report_contracts import Document, DocumentSection

logger = logging.getLogger(__name__)

# Placeholder for any unset value, and for a section whose sources are all default
UNSPECIFIED = "Unspecified"

SectionRenderer = Callable[[Any], str]


class SectionTemplate(NamedTuple):
    title: str
    render: SectionRenderer


class DocumentTemplate(NamedTuple):
    """A named, versioned, ordered list of section templates.

    Rendering is pure: the same configuration always yields the same
    document, and every section is present in template order.
    """
    name: str
    title: str
    version: str
    sections: Tuple[SectionTemplate, ...]

    def render(self, config: Any, project_name: str) -> Document:
        rendered: List[DocumentSection] = []
        for section in self.sections:
            body = section.render(config).strip()
            if not body:
                logger.debug("%s: section '%s' has no configured values", self.name, section.title)
                body = UNSPECIFIED
            rendered.append(DocumentSection(title=section.title, body=body))
        return Document(
            name=self.name,
            title=f"{project_name}: {self.title}",
            template_version=self.version,
            sections=rendered,
        )


# --- Rendering helpers ---


def value(text: Any) -> str:
    """A scalar for display; unset values render as UNSPECIFIED."""
    if text is None or text == "":
        return UNSPECIFIED
    if hasattr(text, "value"):
        return option_label(text)
    return str(text)


def labels(options: Sequence[Any]) -> str:
    """Comma-joined labels of a multi-choice field, or UNSPECIFIED."""
    return option_labels(options) if options else UNSPECIFIED


def bullets(items: Iterable[str], prefix: str = "- ") -> str:
    return "\n".join(f"{prefix}{item}" for item in items)


def numbered(items: Iterable[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def table(header: Tuple[str, ...], rows: Iterable[Tuple[str, ...]]) -> str:
    """Markdown table; cells are rendered through `value`."""
    lines = [
        "| " + " | ".join(header) + " |",
        "|" + "|".join("---" for _ in header) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(value(cell) for cell in row) + " |")
    return "\n".join(lines)


def code_block(text: str) -> str:
    return f"```\n{text}\n```"


def join_parts(parts: Iterable[Optional[str]]) -> str:
    """Join non-empty parts with blank lines."""
    return "\n\n".join(part for part in parts if part)


def any_set(config: Any, paths: Iterable[str]) -> bool:
    """True when at least one of the dotted field paths differs from its default."""
    return any(is_set(config, path) for path in paths)


def flag(enabled: bool) -> str:
    return "Yes" if enabled else "No"


def requires_any(*paths: str) -> Callable[[SectionRenderer], SectionRenderer]:
    """Make a renderer return "" while every one of `paths` is at its default."""
    def decorator(render: SectionRenderer) -> SectionRenderer:
        @functools.wraps(render)
        def guarded(config: Any) -> str:
            if not any_set(config, paths):
                return ""
            return render(config)
        return guarded
    return decorator
