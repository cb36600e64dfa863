"""Contracts for engine outputs: validation results, analysis, recommendations, documents."""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from .game_config import GameConfig
from .website_config import WebsiteConfig


# --- Validation ---


class ValidationIssue(BaseModel):
    """A single field-level schema violation."""
    field_path: str = Field(..., description="Dot-separated wire path, e.g. 'multiplayer.maxPlayers'")
    message: str = Field(..., description="Human-readable description of the violation")
    error_type: str = Field(default="value_error", description="Machine-readable error kind")

    def __str__(self) -> str:
        return f"{self.message} (field: {self.field_path or '<root>'})"


class ValidationResult(BaseModel):
    """Either a normalized configuration or the issues that prevented it."""
    config: Optional[Union[GameConfig, WebsiteConfig]] = None
    issues: List[ValidationIssue] = Field(default_factory=list)
    primary_index: int = Field(default=0, ge=0, description="Index of the issue surfaced to callers")

    @property
    def ok(self) -> bool:
        return self.config is not None and not self.issues

    @property
    def primary_issue(self) -> Optional[ValidationIssue]:
        if not self.issues:
            return None
        return self.issues[self.primary_index]


# --- Analysis ---


class Severity(str, Enum):
    """Severity of a consistency conflict."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Feasibility(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MissingRequirement(BaseModel):
    """A required field left at its default while its trigger condition holds."""
    rule: str = Field(..., description="Stable rule identifier")
    message: str
    trigger_fields: List[str] = Field(default_factory=list, description="Fields whose values activated the rule")
    required_fields: List[str] = Field(..., min_length=1, description="Fields that must be filled in")


class ConsistencyConflict(BaseModel):
    """Two field values declared incompatible."""
    fields: Tuple[str, str]
    description: str
    severity: Severity = Severity.WARNING


class ComplexityRating(BaseModel):
    score: int = Field(..., ge=1, le=10)
    label: str
    scope_estimate: str


class AnalysisReport(BaseModel):
    """Derived analysis of a validated configuration. Never persisted."""
    kind: str
    completeness: float = Field(..., ge=0.0, le=1.0)
    missing_requirements: List[MissingRequirement] = Field(default_factory=list)
    conflicts: List[ConsistencyConflict] = Field(default_factory=list)
    complexity: ComplexityRating
    feasibility: Feasibility
    suggestions: List[str] = Field(default_factory=list)
    summary: str = ""

    @property
    def error_count(self) -> int:
        return sum(1 for c in self.conflicts if c.severity == Severity.ERROR)


# --- Recommendations ---


class RecommendationSet(BaseModel):
    """Ranked suggestions per recommendation dimension."""
    ai_providers: List[str] = Field(default_factory=list, alias="aiProviders")
    features: List[str] = Field(default_factory=list)
    security: List[str] = Field(default_factory=list)
    deployment: List[str] = Field(default_factory=list)
    integrations: List[str] = Field(default_factory=list)
    stack: List[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    def as_dict(self) -> Dict[str, List[str]]:
        """Dimension name -> suggestions, in canonical dimension order."""
        return self.model_dump(by_alias=True)


# --- Documents ---


class DocumentSection(BaseModel):
    title: str
    body: str


class Document(BaseModel):
    """An ordered sequence of titled sections for the downstream generator."""
    name: str = Field(..., description="File stem, e.g. 'init-prompt'")
    title: str
    template_version: str
    sections: List[DocumentSection] = Field(default_factory=list)

    @property
    def section_titles(self) -> List[str]:
        return [s.title for s in self.sections]

    def section(self, title: str) -> DocumentSection:
        for s in self.sections:
            if s.title == title:
                return s
        raise KeyError(title)

    def render(self) -> str:
        """Render as markdown with numbered section headings."""
        parts = [f"# {self.title}", f"_Template version {self.template_version}_"]
        for number, s in enumerate(self.sections, start=1):
            parts.append(f"## {number}. {s.title}\n\n{s.body}")
        return "\n\n".join(parts) + "\n"
