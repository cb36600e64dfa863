"""Analysis rule tables for game configurations."""

from typing import Tuple

from contracts.options import (
    AdditionalTech,
    ArtStyle,
    BusinessModel,
    CameraStyle,
    CAMERAS_2D,
    CAMERAS_3D,
    CONSOLE_PLATFORMS,
    Dimension,
    Genre,
    InGameAi,
    LevelGeneration,
    ONLINE_PLAYER_MODES,
    Platform,
    PlayerMode,
    SIMPLE_ENGINES,
    TargetFps,
    VictoryCondition,
    WEB_ENGINES,
    WorldScope,
)
from contracts.report_contracts import Severity
from .rules import ConflictRule, RequirementRule, SuggestionRule, WeightedField, always

F2P_MODELS = frozenset({BusinessModel.FREE_TO_PLAY, BusinessModel.FREEMIUM, BusinessModel.BATTLE_PASS})
NETWORKING_TECH = frozenset({AdditionalTech.NETWORKING, AdditionalTech.WEBSOCKETS})
PROCEDURAL_GENERATION = frozenset({LevelGeneration.PROCEDURAL, LevelGeneration.HYBRID})


GAME_WEIGHTS: Tuple[WeightedField, ...] = (
    WeightedField("themes", 3),
    WeightedField("genres", 3),
    WeightedField("elevatorPitch", 2),
    WeightedField("dimension", 2),
    WeightedField("engine", 2),
    WeightedField("platforms", 2),
    WeightedField("coreMechanics", 2),
    WeightedField("playerMode", 2),
    WeightedField("artStyle", 1),
    WeightedField("cameraStyle", 1),
    WeightedField("worldStructure", 1),
    WeightedField("worldScope", 1),
    WeightedField("levelGeneration", 1),
    WeightedField("narrativeFocus", 1),
    WeightedField("progressionSystems", 1),
    WeightedField("difficulty", 1),
    WeightedField("musicStyle", 1),
    WeightedField("targetFps", 1),
    WeightedField("businessModel", 1),
    WeightedField("distribution", 1),
    WeightedField("secondaryMechanics", 0.5),
    WeightedField("soundEffects", 0.5),
    WeightedField("additionalTech", 0.5),
    WeightedField("aiFreetext.gameplayLoop", 0.5),
)


GAME_REQUIREMENTS: Tuple[RequirementRule, ...] = (
    RequirementRule(
        "theme-required", always, ("themes",),
        "No theme selected. A theme helps define the overall atmosphere.",
    ),
    RequirementRule(
        "genre-required", always, ("genres",),
        "No genre selected. Genre is fundamental to game design.",
    ),
    RequirementRule(
        "engine-required", always, ("engine",),
        "No engine selected. Engine choice affects all technical decisions.",
    ),
    RequirementRule(
        "dimension-required", always, ("dimension",),
        "No dimension selected. This is needed for proper engine recommendations.",
    ),
    RequirementRule(
        "platforms-required", always, ("platforms",),
        "No target platforms selected.",
    ),
    RequirementRule(
        "network-model-for-online-play",
        lambda c: c.player_mode in ONLINE_PLAYER_MODES,
        ("multiplayer.networkModel",),
        "Online play modes need a network model (peer-to-peer, client-server or relay).",
        ("playerMode",),
    ),
    RequirementRule(
        "sync-type-for-online-play",
        lambda c: c.player_mode in ONLINE_PLAYER_MODES,
        ("multiplayer.syncType",),
        "Online play modes need a state synchronisation strategy.",
        ("playerMode",),
    ),
    RequirementRule(
        "player-mode-for-networking",
        lambda c: any(t in NETWORKING_TECH for t in c.additional_tech),
        ("playerMode",),
        "Networking technology is selected but no player mode is set.",
        ("additionalTech",),
    ),
    RequirementRule(
        "primary-platform-for-multiple-platforms",
        lambda c: len(c.platforms) > 1,
        ("primaryPlatform",),
        "When targeting multiple platforms, selecting a primary platform helps prioritize development and testing.",
        ("platforms",),
    ),
    RequirementRule(
        "retention-for-free-to-play",
        lambda c: c.business_model in F2P_MODELS,
        ("retentionMechanics",),
        "F2P/freemium games rely on retention mechanics (daily rewards, season pass, etc.).",
        ("businessModel",),
    ),
    RequirementRule(
        "match-duration-for-competitive",
        lambda c: c.victory_condition == VictoryCondition.COMPETITIVE,
        ("matchStructure.matchDuration",),
        "Competitive games need a defined match duration.",
        ("victoryCondition",),
    ),
    RequirementRule(
        "bandwidth-for-online-play",
        lambda c: c.player_mode in ONLINE_PLAYER_MODES,
        ("technicalConstraints.networkBandwidth",),
        "Online play modes should state the expected network bandwidth.",
        ("playerMode",),
    ),
)


GAME_CONFLICTS: Tuple[ConflictRule, ...] = (
    ConflictRule(
        "platforms", {Platform.VR}, "dimension", {Dimension.TWO_D},
        "VR platforms typically require 3D rendering. Consider switching to 3D or removing VR from target platforms.",
        Severity.ERROR,
    ),
    ConflictRule(
        "playerMode", {PlayerMode.MMO}, "engine", SIMPLE_ENGINES,
        "MMO games require robust networking infrastructure. {b} may not be suitable for MMO-scale multiplayer.",
        Severity.ERROR,
    ),
    ConflictRule(
        "dimension", {Dimension.THREE_D}, "engine", SIMPLE_ENGINES,
        "{b} is primarily a 2D engine. For 3D games, consider Unity, Unreal, Godot, Three.js, or Bevy.",
        Severity.ERROR,
    ),
    ConflictRule(
        "platforms", CONSOLE_PLATFORMS, "engine", WEB_ENGINES,
        "Web-based engines cannot target console platforms directly. {b} cannot compile for {a}; consider Unity, Unreal, or Godot.",
        Severity.ERROR,
    ),
    ConflictRule(
        "artStyle", {ArtStyle.PIXEL_ART}, "dimension", {Dimension.THREE_D},
        'Pixel art in 3D is possible (e.g., texture filtering) but uncommon. Consider if "voxel" or "low-poly" might better serve your vision.',
        Severity.INFO,
    ),
    ConflictRule(
        "artStyle", {ArtStyle.PIXEL_ART}, "additionalTech", {AdditionalTech.RAY_TRACING},
        "Ray tracing adds little to pixel-art visuals while consuming most of the GPU budget.",
    ),
    ConflictRule(
        "artStyle", {ArtStyle.PIXEL_ART}, "cameraStyle", {CameraStyle.FIRST_PERSON},
        "Pixel art rarely reads well from a first-person camera.",
    ),
    ConflictRule(
        "offlineMode", {True}, "playerMode", {PlayerMode.ONLINE_MULTIPLAYER, PlayerMode.MMO},
        "Offline mode cannot support the {b} play mode.",
    ),
    ConflictRule(
        "cameraStyle", CAMERAS_2D, "dimension", {Dimension.THREE_D},
        "The {a} camera is designed for 2D games but the dimension is 3D.",
    ),
    ConflictRule(
        "cameraStyle", CAMERAS_3D, "dimension", {Dimension.TWO_D},
        "The {a} camera needs a 3D scene but the dimension is 2D.",
    ),
)


GAME_SUGGESTIONS: Tuple[SuggestionRule, ...] = (
    SuggestionRule(
        lambda c: c.world_scope == WorldScope.MASSIVE and c.level_generation == LevelGeneration.HAND_CRAFTED,
        "A massive world scope with hand-crafted levels requires significant content creation. "
        "Consider hybrid or procedural generation to reduce workload.",
    ),
    SuggestionRule(
        lambda c: c.is_multiplayer and AdditionalTech.NETWORKING not in c.additional_tech,
        'For multiplayer games, consider adding "Networking" to your additional technology stack.',
    ),
    SuggestionRule(
        lambda c: Genre.ROGUELIKE in c.genres and c.level_generation not in PROCEDURAL_GENERATION,
        "Roguelike games typically use procedural level generation. Consider switching from hand-crafted levels.",
    ),
    SuggestionRule(
        lambda c: len(c.platforms) > 3,
        "Targeting more than three platforms significantly increases development and testing effort.",
    ),
    SuggestionRule(
        lambda c: (
            c.business_model == BusinessModel.FREE_TO_PLAY
            and Genre.IDLE not in c.genres
            and not c.secondary_mechanics
        ),
        "Free-to-play games benefit from engagement mechanics (crafting, daily rewards, etc.). "
        "Consider adding secondary mechanics.",
    ),
    SuggestionRule(
        lambda c: c.dimension == Dimension.THREE_D and c.target_fps == TargetFps.FPS_120,
        "Targeting 120 FPS in 3D is demanding. Ensure your art style and engine choice support "
        "high-performance rendering.",
    ),
    SuggestionRule(
        lambda c: bool(c.ai_freetext.in_game_ai) and AdditionalTech.AI_NAVIGATION not in c.additional_tech,
        'If using in-game AI features, consider adding "AI Navigation" to your tech stack.',
    ),
    SuggestionRule(
        lambda c: (
            c.victory_condition == VictoryCondition.COMPETITIVE
            and InGameAi.MATCHMAKING not in c.ai_freetext.in_game_ai
        ),
        'Competitive games benefit from matchmaking AI. Consider adding "Matchmaking" to your in-game AI options.',
    ),
    SuggestionRule(
        lambda c: c.player_mode == PlayerMode.ASYNC_MULTIPLAYER and AdditionalTech.WEBSOCKETS not in c.additional_tech,
        "Async multiplayer typically requires WebSockets for real-time communication. "
        "Consider adding it to your tech stack.",
    ),
    SuggestionRule(
        lambda c: c.pwa_support and AdditionalTech.SERVICE_WORKER_OFFLINE not in c.additional_tech,
        "PWA support works best with service workers for offline capability. "
        'Consider adding "Service Worker / Offline" to your tech stack.',
    ),
    SuggestionRule(
        lambda c: len(c.accessibility_features) >= 5,
        "Good accessibility coverage detected. Consider documenting your accessibility features "
        "for marketing and compliance.",
    ),
)
