"""Error taxonomy for configuration validation."""

from typing import List, Optional

from contracts.report_contracts import ValidationIssue


class PresetEngineError(Exception):
    """Base class for every error raised by the Preset Engine."""


class ConfigValidationError(PresetEngineError):
    """A raw configuration could not be turned into a valid Configuration.

    Carries the first offending field path and message, plus every issue
    found during the scan.
    """

    def __init__(self, field_path: str, message: str, issues: Optional[List[ValidationIssue]] = None):
        self.field_path = field_path
        self.message = message
        self.issues = list(issues or [])
        super().__init__(f"{message} (field: {field_path or '<root>'})")

    @classmethod
    def from_issue(cls, issue: ValidationIssue, issues: Optional[List[ValidationIssue]] = None):
        return cls(issue.field_path, issue.message, issues or [issue])


class StructuralValidationError(ConfigValidationError):
    """A field violates its type, range, length or cardinality rule."""


class UnknownVariantError(ConfigValidationError):
    """The configuration names a variant the engine does not know."""

    def __init__(self, variant: object):
        self.variant = variant
        super().__init__(
            "kind",
            f"Unknown configuration variant {variant!r}; expected 'game' or 'website'",
        )
