"""Schema Validator: array repair, schema validation and the error taxonomy."""

from .errors import (
    PresetEngineError,
    ConfigValidationError,
    StructuralValidationError,
    UnknownVariantError,
)
from .repair import repair_arrays
from .schema_validator import SchemaValidator, check_config, validate_config

# Contract name: returns a ValidationResult instead of raising on field errors
validate = check_config

__all__ = [
    "PresetEngineError",
    "ConfigValidationError",
    "StructuralValidationError",
    "UnknownVariantError",
    "repair_arrays",
    "SchemaValidator",
    "check_config",
    "validate_config",
    "validate",
]
