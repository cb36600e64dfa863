"""Game configuration contract.

A GameConfig is the complete record collected by the game wizard. Every
field carries a default so an empty object validates to a usable config.
"""

from typing import Literal, Optional, Tuple

from pydantic import Field

from .base import ConfigSection, HexColor
from .options import (
    AdditionalTech,
    AnimationIntensity,
    ArtStyle,
    BusinessModel,
    CameraStyle,
    CoreMechanic,
    DevAi,
    Difficulty,
    Dimension,
    Distribution,
    Engine,
    Genre,
    InGameAi,
    LevelGeneration,
    MusicStyle,
    NarrativeFocus,
    NetworkModel,
    Platform,
    PlayerMode,
    ProgressionSystem,
    RewardType,
    SecondaryMechanic,
    SoundEffectStyle,
    StoryStructure,
    SyncType,
    TargetFps,
    Theme,
    VictoryCondition,
    VoiceActing,
    WorldScope,
    WorldStructure,
)


class LoreConfig(ConfigSection):
    """World lore shared by narrative sections."""
    world_description: str = Field(default="", max_length=2000)
    factions: Tuple[str, ...] = Field(default_factory=tuple, max_length=20)
    flavor_text_tone: str = Field(default="", max_length=200)


class MultiplayerConfig(ConfigSection):
    """Networking settings; only meaningful for multiplayer play modes."""
    max_players: int = Field(default=4, ge=1, le=1000, description="Players per session")
    network_model: Optional[NetworkModel] = None
    sync_type: Optional[SyncType] = None


class MatchStructureConfig(ConfigSection):
    """Match pacing for competitive and turn-based games."""
    match_duration: str = Field(default="", max_length=100)
    turn_structure: str = Field(default="", max_length=100)
    rounds_per_match: int = Field(default=1, ge=1, le=99)
    time_per_turn: float = Field(default=60, ge=0, le=600, description="Seconds per turn")


class TechnicalConstraintsConfig(ConfigSection):
    """Minimum hardware and performance targets, as free text."""
    min_ram: str = Field(default="", max_length=100, alias="minRAM")
    min_gpu: str = Field(default="", max_length=100, alias="minGPU")
    min_cpu: str = Field(default="", max_length=100, alias="minCPU")
    storage_size: str = Field(default="", max_length=100)
    network_bandwidth: str = Field(default="", max_length=100)
    max_load_time: str = Field(default="", max_length=100)
    target_resolution: str = Field(default="", max_length=100)


class AiFreetextConfig(ConfigSection):
    """AI usage choices and the free-text briefing fields."""
    in_game_ai: Tuple[InGameAi, ...] = Field(default_factory=tuple, max_length=6)
    dev_ai: Tuple[DevAi, ...] = Field(default_factory=tuple, max_length=6)
    additional_notes: str = Field(default="", max_length=2000)
    detailed_description: str = Field(default="", max_length=2000)
    gameplay_loop: str = Field(default="", max_length=2000)
    reference_games: str = Field(default="", max_length=2000)
    constraints: str = Field(default="", max_length=2000)


class TargetAudienceConfig(ConfigSection):
    age_range: str = Field(default="", max_length=100)
    demographic: str = Field(default="", max_length=100)
    session_length: str = Field(default="", max_length=100)
    experience_level: str = Field(default="", max_length=100)


class LocalizationConfig(ConfigSection):
    default_language: str = Field(default="en", max_length=10)
    launch_languages: Tuple[str, ...] = Field(default_factory=lambda: ("en",), max_length=30)
    rtl_support: bool = False
    text_expansion_buffer: int = Field(default=30, ge=0, le=100, description="Percent of UI space reserved for translations")


class ContentPlanConfig(ConfigSection):
    mvp_timeline: str = Field(default="", max_length=100)
    full_launch_timeline: str = Field(default="", max_length=100)
    post_launch_cadence: str = Field(default="", max_length=100)


class VisualIdentityConfig(ConfigSection):
    color_palette: Tuple[HexColor, ...] = Field(
        default_factory=lambda: ("#1a1a2e", "#16213e", "#0f3460", "#e94560", "#533483"),
        max_length=5,
    )
    ui_style: str = Field(default="", max_length=100)
    font_style: str = Field(default="", max_length=100)


class GameConfig(ConfigSection):
    """Complete game project configuration."""

    kind: Literal["game"] = "game"

    # Concept
    themes: Tuple[Theme, ...] = Field(default_factory=tuple, max_length=3)
    custom_theme: str = Field(default="", max_length=1000)
    elevator_pitch: str = Field(default="", max_length=1000)
    tagline: str = Field(default="", max_length=120)

    # Narrative
    narrative_focus: Optional[NarrativeFocus] = None
    story_structure: Optional[StoryStructure] = None
    victory_condition: Optional[VictoryCondition] = None
    lore: LoreConfig = Field(default_factory=LoreConfig)

    # Genre & platform
    genres: Tuple[Genre, ...] = Field(default_factory=tuple, max_length=5)
    platforms: Tuple[Platform, ...] = Field(default_factory=tuple, max_length=10)
    primary_platform: Optional[Platform] = None

    # Visuals
    dimension: Optional[Dimension] = None
    art_style: Optional[ArtStyle] = None
    camera_style: Optional[CameraStyle] = None
    animation_intensity: Optional[AnimationIntensity] = None

    # World
    world_structure: Optional[WorldStructure] = None
    level_generation: Optional[LevelGeneration] = None
    world_scope: Optional[WorldScope] = None

    # Players
    player_mode: Optional[PlayerMode] = None
    multiplayer: MultiplayerConfig = Field(default_factory=MultiplayerConfig)
    match_structure: MatchStructureConfig = Field(default_factory=MatchStructureConfig)

    # Mechanics & progression
    core_mechanics: Tuple[CoreMechanic, ...] = Field(default_factory=tuple, max_length=3)
    secondary_mechanics: Tuple[SecondaryMechanic, ...] = Field(default_factory=tuple, max_length=6)
    progression_systems: Tuple[ProgressionSystem, ...] = Field(default_factory=tuple, max_length=5)
    difficulty: Optional[Difficulty] = None
    reward_types: Tuple[RewardType, ...] = Field(default_factory=tuple, max_length=6)

    # Audio
    music_style: Optional[MusicStyle] = None
    sound_effects: Tuple[SoundEffectStyle, ...] = Field(default_factory=tuple, max_length=5)
    voice_acting: Optional[VoiceActing] = None

    # Technology
    engine: Optional[Engine] = None
    target_fps: Optional[TargetFps] = None
    additional_tech: Tuple[AdditionalTech, ...] = Field(default_factory=tuple, max_length=8)
    technical_constraints: TechnicalConstraintsConfig = Field(default_factory=TechnicalConstraintsConfig)

    # Business
    business_model: Optional[BusinessModel] = None
    distribution: Tuple[Distribution, ...] = Field(default_factory=tuple, max_length=8)

    # AI and briefing
    ai_freetext: AiFreetextConfig = Field(default_factory=AiFreetextConfig)
    target_audience: TargetAudienceConfig = Field(default_factory=TargetAudienceConfig)

    # Engagement
    social_features: Tuple[str, ...] = Field(default_factory=tuple, max_length=12)
    retention_mechanics: Tuple[str, ...] = Field(default_factory=tuple, max_length=12)
    accessibility_features: Tuple[str, ...] = Field(default_factory=tuple, max_length=12)

    localization: LocalizationConfig = Field(default_factory=LocalizationConfig)
    content_plan: ContentPlanConfig = Field(default_factory=ContentPlanConfig)
    offline_mode: bool = False
    pwa_support: bool = False
    visual_identity: VisualIdentityConfig = Field(default_factory=VisualIdentityConfig)

    @property
    def is_multiplayer(self) -> bool:
        return self.player_mode is not None and self.player_mode != PlayerMode.SINGLE_PLAYER
