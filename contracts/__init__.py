"""Pydantic contracts for the Preset Engine.

Configurations flow in through these models and every engine output
(validation result, analysis report, recommendations, documents) flows out
through them.
"""

from .base import (
    ConfigSection,
    HexColor,
    resolve_field,
    is_default,
    is_set,
)

from .options import (
    option_label,
    option_labels,
    is_chosen,
)

from .game_config import (
    LoreConfig,
    MultiplayerConfig,
    MatchStructureConfig,
    TechnicalConstraintsConfig,
    AiFreetextConfig,
    TargetAudienceConfig,
    LocalizationConfig,
    ContentPlanConfig,
    VisualIdentityConfig,
    GameConfig,
)

from .website_config import (
    ASSET_CATEGORY_LIMITS,
    BrandAsset,
    CorporateIdentityConfig,
    WebsiteConfig,
)

from .configuration import (
    Variant,
    Configuration,
    VARIANT_MODELS,
    variant_of,
)

from .report_contracts import (
    ValidationIssue,
    ValidationResult,
    Severity,
    Feasibility,
    MissingRequirement,
    ConsistencyConflict,
    ComplexityRating,
    AnalysisReport,
    RecommendationSet,
    DocumentSection,
    Document,
)

__all__ = [
    # Base
    "ConfigSection",
    "HexColor",
    "resolve_field",
    "is_default",
    "is_set",
    # Options
    "option_label",
    "option_labels",
    "is_chosen",
    # Game
    "LoreConfig",
    "MultiplayerConfig",
    "MatchStructureConfig",
    "TechnicalConstraintsConfig",
    "AiFreetextConfig",
    "TargetAudienceConfig",
    "LocalizationConfig",
    "ContentPlanConfig",
    "VisualIdentityConfig",
    "GameConfig",
    # Website
    "ASSET_CATEGORY_LIMITS",
    "BrandAsset",
    "CorporateIdentityConfig",
    "WebsiteConfig",
    # Configuration
    "Variant",
    "Configuration",
    "VARIANT_MODELS",
    "variant_of",
    # Reports
    "ValidationIssue",
    "ValidationResult",
    "Severity",
    "Feasibility",
    "MissingRequirement",
    "ConsistencyConflict",
    "ComplexityRating",
    "AnalysisReport",
    "RecommendationSet",
    "DocumentSection",
    "Document",
]
