"""Document Builder: versioned templates rendered into prompt documents."""

from .templates import UNSPECIFIED, DocumentTemplate, SectionTemplate
from .profiles import (
    ENGINE_PROFILES,
    FRAMEWORK_PROFILES,
    EngineProfile,
    FrameworkProfile,
    engine_profile,
    framework_profile,
)
from .naming import game_description, game_name, website_description, website_name
from .game_documents import GAME_DEVELOPMENT_CONCEPT, GAME_INIT_PROMPT, GAME_TEMPLATES
from .website_documents import WEBSITE_DEVELOPMENT_CONCEPT, WEBSITE_INIT_PROMPT, WEBSITE_TEMPLATES
from .builder import DocumentBuilder, build, describe, write_documents

__all__ = [
    # Templates
    "UNSPECIFIED",
    "DocumentTemplate",
    "SectionTemplate",
    "GAME_INIT_PROMPT",
    "GAME_DEVELOPMENT_CONCEPT",
    "GAME_TEMPLATES",
    "WEBSITE_INIT_PROMPT",
    "WEBSITE_DEVELOPMENT_CONCEPT",
    "WEBSITE_TEMPLATES",
    # Profiles
    "EngineProfile",
    "FrameworkProfile",
    "ENGINE_PROFILES",
    "FRAMEWORK_PROFILES",
    "engine_profile",
    "framework_profile",
    # Identity
    "game_name",
    "game_description",
    "website_name",
    "website_description",
    # Builder
    "DocumentBuilder",
    "build",
    "describe",
    "write_documents",
]
