"""Schema Validator: raw JSON-like mappings in, validated Configurations out.

Validation runs in three steps:
1. repair arrays that degraded into index-keyed objects;
2. resolve the variant from the explicit argument or the raw `kind` tag;
3. validate against the variant's pydantic model and rank the issues.
"""

import logging
from typing import Any, List, Mapping, Tuple, Union

from pydantic import ValidationError

from contracts.configuration import Configuration, Variant, VARIANT_MODELS
from contracts.report_contracts import ValidationIssue, ValidationResult
from .errors import StructuralValidationError, UnknownVariantError
from .repair import repair_arrays

logger = logging.getLogger(__name__)


class SchemaValidator:
    """Validates raw configurations against the variant schemas.

    Issues are kept in scan order. The primary issue is the most useful one
    to show a user: constraint violations first, then type errors, then
    missing values.
    """

    # pydantic error types that mean "right type, violates a rule"
    CONSTRAINT_ERRORS = frozenset({
        "string_too_long",
        "string_too_short",
        "string_pattern_mismatch",
        "too_long",
        "too_short",
        "greater_than",
        "greater_than_equal",
        "less_than",
        "less_than_equal",
        "multiple_of",
        "enum",
        "literal_error",
        "value_error",
        "assertion_error",
    })

    MISSING_ERRORS = frozenset({"missing"})

    def check(self, raw: Any, variant: Union[Variant, str, None] = None) -> ValidationResult:
        """Validate without raising on field errors.

        Raises UnknownVariantError or StructuralValidationError only when the
        variant itself cannot be determined.
        """
        if isinstance(raw, tuple(VARIANT_MODELS.values())):
            # An already validated Configuration is checked from its wire form
            raw = raw.model_dump(mode="json", by_alias=True)
        data = repair_arrays(raw)
        if not isinstance(data, dict):
            raise StructuralValidationError("", "Configuration must be a JSON object")

        resolved = self._resolve_variant(data, variant)
        data["kind"] = resolved.value
        model = VARIANT_MODELS[resolved]

        try:
            config = model.model_validate(data)
        except ValidationError as exc:
            issues = [self._to_issue(error) for error in exc.errors()]
            primary = self._primary_index(issues)
            logger.debug(
                "%s configuration rejected with %d issue(s); primary: %s",
                resolved.value, len(issues), issues[primary],
            )
            return ValidationResult(issues=issues, primary_index=primary)

        logger.debug("%s configuration validated", resolved.value)
        return ValidationResult(config=config)

    def validate(self, raw: Any, variant: Union[Variant, str, None] = None) -> Configuration:
        """Validate and return the Configuration, raising on the primary issue."""
        result = self.check(raw, variant)
        if not result.ok:
            raise StructuralValidationError.from_issue(result.primary_issue, result.issues)
        return result.config

    def _resolve_variant(self, data: Mapping, variant: Union[Variant, str, None]) -> Variant:
        tag = data.get("kind")
        requested = variant if variant is not None else tag
        if requested is None or requested == "":
            raise UnknownVariantError(requested)
        try:
            resolved = Variant(requested)
        except ValueError:
            raise UnknownVariantError(requested) from None

        if tag not in (None, "") and tag != resolved.value:
            raise StructuralValidationError(
                "kind",
                f"Configuration kind {tag!r} does not match requested variant '{resolved.value}'",
            )
        return resolved

    def _to_issue(self, error: Mapping[str, Any]) -> ValidationIssue:
        path = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        return ValidationIssue(field_path=path, message=message, error_type=error.get("type", "value_error"))

    def _rank(self, issue: ValidationIssue) -> int:
        if issue.error_type in self.CONSTRAINT_ERRORS:
            return 0
        if issue.error_type in self.MISSING_ERRORS:
            return 2
        return 1

    def _primary_index(self, issues: List[ValidationIssue]) -> int:
        ranked: List[Tuple[int, int]] = [(self._rank(issue), i) for i, issue in enumerate(issues)]
        return min(ranked)[1]


# Default validator instance
_validator = SchemaValidator()


def check_config(raw: Any, variant: Union[Variant, str, None] = None) -> ValidationResult:
    """Convenience function to check a raw configuration."""
    return _validator.check(raw, variant)


def validate_config(raw: Any, variant: Union[Variant, str, None] = None) -> Configuration:
    """Convenience function to validate a raw configuration."""
    return _validator.validate(raw, variant)
