"""Rule types for the Consistency Analyzer.

Rules are plain data: ordered tuples of predicates and payloads that the
analyzer walks in declaration order. Field paths are dotted wire names and
are resolved against the configuration at evaluation time, so a rule that
names an unknown field fails loudly with KeyError.
"""

from enum import Enum
from typing import Any, Callable, Collection, NamedTuple, Optional, Tuple

from contracts.base import is_default, resolve_field
from contracts.options import option_label
from contracts.report_contracts import ConsistencyConflict, MissingRequirement, Severity

Predicate = Callable[[Any], bool]


def always(config: Any) -> bool:
    return True


class WeightedField(NamedTuple):
    """A significant field and its share of the completeness score."""
    path: str
    weight: float


class RequirementRule(NamedTuple):
    """Fields that must be filled in whenever `when` holds."""
    name: str
    when: Predicate
    requires: Tuple[str, ...]
    message: str
    triggers: Tuple[str, ...] = ()

    def evaluate(self, config: Any) -> Optional[MissingRequirement]:
        if not self.when(config):
            return None
        missing = [path for path in self.requires if is_default(config, path)]
        if not missing:
            return None
        return MissingRequirement(
            rule=self.name,
            message=self.message,
            trigger_fields=list(self.triggers),
            required_fields=missing,
        )


def _selected(value: Any, values: Collection) -> Optional[Any]:
    """The first selected value found in `values`, or None.

    Multi-choice fields match when any selected value is in the set.
    """
    if isinstance(value, (list, tuple)):
        for item in value:
            if item in values:
                return item
        return None
    if value is not None and value in values:
        return value
    return None


def _describe(value: Any) -> str:
    if isinstance(value, Enum):
        return option_label(value)
    if isinstance(value, bool):
        return "enabled" if value else "disabled"
    return str(value)


class ConflictRule(NamedTuple):
    """Two field values that should not be combined.

    `description` may reference the matched values as {a} and {b}.
    """
    field_a: str
    values_a: Collection
    field_b: str
    values_b: Collection
    description: str
    severity: Severity = Severity.WARNING

    def evaluate(self, config: Any) -> Optional[ConsistencyConflict]:
        a = _selected(resolve_field(config, self.field_a), self.values_a)
        b = _selected(resolve_field(config, self.field_b), self.values_b)
        # `is None` checks: False is a legitimate matched value
        if a is None or b is None:
            return None
        return ConsistencyConflict(
            fields=(self.field_a, self.field_b),
            description=self.description.format(a=_describe(a), b=_describe(b)),
            severity=self.severity,
        )


class SuggestionRule(NamedTuple):
    """Advisory text shown when `when` holds."""
    when: Predicate
    text: str
