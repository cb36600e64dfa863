"""Game document templates: the init prompt and the development concept."""

from contracts.game_config import GameConfig
from contracts.options import (
    AdditionalTech,
    CoreMechanic,
    Dimension,
    Distribution,
    Engine,
    LevelGeneration,
    MOBILE_PLATFORMS,
    ONLINE_PLAYER_MODES,
    Platform,
    ProgressionSystem,
    VoiceActing,
    WEB_ENGINES,
    WorldScope,
    option_label,
)
from .naming import game_name
from .profiles import engine_profile
from .templates import (
    DocumentTemplate,
    SectionTemplate,
    UNSPECIFIED,
    bullets,
    code_block,
    join_parts,
    labels,
    numbered,
    requires_any,
    table,
    value,
)

TEMPLATE_VERSION = "1.0"

SCOPE_TIMELINES = {
    WorldScope.SMALL: ("Week 1-2", "Week 2-4"),
    WorldScope.MEDIUM: ("Week 1-4", "Month 2-3"),
    WorldScope.LARGE: ("Month 1-2", "Month 3-6"),
    WorldScope.MASSIVE: ("Month 1-3", "Month 4-12"),
}

DISTRIBUTION_NOTES = {
    Distribution.STEAM: "Steamworks SDK integration required",
    Distribution.EPIC: "Epic Online Services setup",
    Distribution.ITCH: "butler CLI for uploads",
    Distribution.APP_STORE: "Apple Developer account required",
    Distribution.GOOGLE_PLAY: "Google Play Console setup",
    Distribution.WEB: "Web hosting + CDN",
    Distribution.GOG: "GOG Galaxy SDK",
    Distribution.CONSOLE_STORE: "Platform dev kit required",
}

ENGINE_DOC_LINKS = {
    Engine.UNITY: ("Unity Learn", "https://learn.unity.com/"),
    Engine.UNREAL: ("Unreal Learning", "https://dev.epicgames.com/community/unreal-engine/learning"),
    Engine.GODOT: ("Godot Recipes", "https://kidscancode.org/godot_recipes/"),
    Engine.BEVY: ("Bevy Cheat Book", "https://bevy-cheatbook.github.io/"),
}

TEST_TOOLS = {
    Engine.UNITY: "Unity Test Framework",
    Engine.UNREAL: "Unreal Automation",
    Engine.GODOT: "GUT (Godot Unit Testing)",
    Engine.BEVY: "cargo test",
}

PROFILERS = {
    Engine.UNITY: "Unity Profiler",
    Engine.UNREAL: "Unreal Insights",
    Engine.BEVY: "tracy / puffin",
}

NAMING_CONVENTIONS = {
    Engine.UNITY: "PascalCase for classes/methods, camelCase for local variables",
    Engine.UNREAL: "PascalCase with F/U/A prefixes per UE convention",
    Engine.GODOT: "snake_case for functions/variables, PascalCase for classes (GDScript)",
    Engine.BEVY: "snake_case for functions/variables, PascalCase for types (Rust)",
}

STATE_MANAGEMENT = {
    Engine.UNITY: "ScriptableObjects for shared data, Events for communication",
    Engine.UNREAL: "GameInstance for persistent state, Event Dispatchers for communication",
    Engine.GODOT: "Autoloads for global state, Signals for communication",
    Engine.BEVY: "Resources for global state, Events for communication",
}

GENERAL_DO_NOTS = (
    "DO NOT optimize prematurely; get it working first, then profile",
    "DO NOT hardcode configuration values; use data-driven design",
    "DO NOT skip playtesting; test every feature with actual gameplay",
    "DO NOT ignore platform-specific requirements (input, screen size, performance)",
    "DO NOT leave debug code in production builds",
    "DO NOT couple rendering logic to game logic",
)

DESIGN_DO_NOTS = (
    "Do NOT skip the core gameplay loop; everything else is secondary",
    "Do NOT add features before core mechanics feel good",
    "Do NOT ignore player feedback during playtesting",
    "Do NOT scope creep; stick to MVP milestones first",
)


def _is_online(config: GameConfig) -> bool:
    return config.player_mode in ONLINE_PLAYER_MODES


def _is_web_engine(config: GameConfig) -> bool:
    return config.engine in WEB_ENGINES


def _input_scheme(config: GameConfig) -> str:
    if config.primary_platform in MOBILE_PLATFORMS:
        return "touch + gamepad"
    if config.primary_platform == Platform.WEB:
        return "keyboard + mouse"
    return "keyboard + mouse + gamepad"


def _pitch(config: GameConfig) -> str:
    if config.elevator_pitch:
        return config.elevator_pitch
    return (
        f"A {labels(config.themes)} {labels(config.genres)} game featuring "
        f"{labels(config.core_mechanics)} as core mechanics, with "
        f"{value(config.art_style)} visuals in {value(config.dimension)}."
    )


def _networking(config: GameConfig) -> str:
    return f"{value(config.multiplayer.network_model)} ({value(config.multiplayer.sync_type)})"


# --- Init prompt ---


@requires_any(
    "themes", "customTheme", "genres", "elevatorPitch", "tagline", "dimension",
    "artStyle", "playerMode", "worldScope", "coreMechanics", "secondaryMechanics",
    "progressionSystems", "difficulty", "worldStructure", "levelGeneration",
    "aiFreetext.detailedDescription", "aiFreetext.gameplayLoop",
)
def render_context(config: GameConfig) -> str:
    """Project identity, game context and the core systems table."""
    mode = value(config.player_mode)
    if config.is_multiplayer:
        mode += f" (up to {config.multiplayer.max_players} players)"

    identity = "\n".join([
        f"You are building **{game_name(config)}**, a {value(config.dimension)} "
        f"{labels(config.genres)} game built with {value(config.engine)}.",
        "",
        f"**Genre:** {labels(config.genres)}",
        f"**Themes:** {labels(config.themes)}",
        f"**Art Style:** {value(config.art_style)}",
        f"**Player Mode:** {mode}",
        f"**Scope:** {value(config.world_scope)}",
    ])
    if config.custom_theme:
        identity += f"\n**Custom Theme:** {config.custom_theme}"
    if config.tagline:
        identity += f"\n**Tagline:** {config.tagline}"

    rows = [
        ("Core Mechanics", labels(config.core_mechanics)),
        ("Secondary Mechanics", labels(config.secondary_mechanics)),
        ("Progression", labels(config.progression_systems)),
        ("Difficulty", config.difficulty),
        ("World Structure", config.world_structure),
        ("Level Generation", config.level_generation),
    ]
    if config.is_multiplayer:
        rows.append(("Networking", _networking(config)))

    return join_parts([
        "### Project Identity",
        identity,
        "### Game Context",
        _pitch(config),
        config.ai_freetext.detailed_description,
        "### Core Systems",
        table(("System", "Description"), rows),
        config.ai_freetext.gameplay_loop and f"**Gameplay Loop:** {config.ai_freetext.gameplay_loop}",
    ])


@requires_any(
    "engine", "targetFps", "platforms", "additionalTech", "musicStyle",
    "soundEffects", "voiceActing",
)
def render_technical_specification(config: GameConfig) -> str:
    profile = engine_profile(config.engine)
    stack = "\n".join([
        f"Engine:          {value(config.engine)}",
        f"Language:        {profile.language}",
        f"Runtime:         {profile.runtime}",
        f"Build Tool:      {profile.build_tool}",
        f"IDE:             {profile.ide}",
        f"Package Manager: {profile.package_manager}",
        f"Target FPS:      {value(config.target_fps)}",
        f"Platforms:       {labels(config.platforms)}",
    ])
    audio = "\n".join([
        f"Music Style:     {value(config.music_style)}",
        f"Sound Effects:   {labels(config.sound_effects)}",
        f"Voice Acting:    {value(config.voice_acting)}",
    ])
    tech = bullets(option_label(t) for t in config.additional_tech) or "- No additional technology specified"
    return join_parts([
        "### Tech Stack (Mandatory)",
        code_block(stack),
        "### Project Structure",
        code_block(profile.project_structure),
        "### Additional Technology",
        tech,
        "### Audio Configuration",
        code_block(audio),
    ])


@requires_any(
    "engine", "dimension", "artStyle", "primaryPlatform", "coreMechanics",
    "worldStructure", "progressionSystems", "secondaryMechanics", "victoryCondition",
    "difficulty", "targetFps", "playerMode",
)
def render_instructions(config: GameConfig) -> str:
    """MVP and MAX build order plus the implementation rules."""
    engine = value(config.engine)
    profile = engine_profile(config.engine)
    first_mechanic = option_label(config.core_mechanics[0]) if config.core_mechanics else "movement"
    camera = value(config.camera_style) if config.camera_style else f"default for {value(config.dimension)}"
    progression = (
        f"Implement progression: {labels(config.progression_systems)}"
        if config.progression_systems else "Implement scoring / win condition"
    )

    mvp = [
        "Phase 1: Foundation",
        f"  1. Initialize {engine} project for {value(config.dimension)} {value(config.art_style)}",
        f"  2. Configure build pipeline for {value(config.primary_platform)}",
        "  3. Set up the project structure from the Technical Specification",
        f"  4. Configure input system for {_input_scheme(config)}",
        "Phase 2: Core Gameplay",
        f"  5. Implement player controller with basic {first_mechanic}",
        f"  6. Build the {value(config.world_structure)} world structure",
        f"  7. Implement camera system ({camera})",
        f"  8. Add core mechanics: {labels(config.core_mechanics)}",
        "  9. Implement basic UI/HUD",
        "Phase 3: Game Systems",
        f"  10. {progression}",
        f"  11. Add secondary mechanics: {labels(config.secondary_mechanics)}",
        f"  12. Implement audio system ({value(config.music_style)} music + {labels(config.sound_effects)} SFX)",
        "  13. Build save/load system",
        f"  14. Implement the {value(config.victory_condition)} victory condition",
        "Phase 4: Polish",
        "  15. Add particle effects and visual feedback",
        "  16. Implement menu system (main menu, pause, settings)",
        f"  17. Add difficulty system: {value(config.difficulty)}",
        f"  18. Performance optimization for the {value(config.target_fps)} target",
    ]

    voice = (
        f"Integrate {value(config.voice_acting)} voice acting"
        if config.voice_acting not in (None, VoiceActing.NONE) else "Add advanced sound design"
    )
    network = (
        f"Implement {value(config.multiplayer.network_model)} networking with "
        f"{value(config.multiplayer.sync_type)} sync"
        if config.is_multiplayer else "Add replay system or advanced AI"
    )
    full = [
        "Phase 5: Content & Features",
        "  19. Expand level/world content",
        "  20. Add all secondary mechanics",
        f"  21. {voice}",
        f"  22. {network}",
        "  23. Mod support or custom content tools",
        "Phase 6: Quality & Testing",
        "  24. Unit tests for core systems",
        "  25. Integration tests for game mechanics",
        "  26. Playtest sessions and balance tuning",
        f"  27. Platform-specific testing: {labels(config.platforms)}",
        "  28. Performance profiling and optimization",
        "Phase 7: Distribution",
        f"  29. Build configuration for {labels(config.distribution)}",
        "  30. Store page assets (screenshots, trailers)",
        "  31. Analytics integration",
        "  32. Launch and post-launch patch plan",
    ]

    rules = numbered([
        f"**Follow {engine} best practices exactly.** Do not improvise engine patterns.",
        "**Handle all errors gracefully.** No silent failures, always log context.",
        f"**Use {profile.language} conventions** for naming and file organization.",
        "**Keep systems decoupled.** One responsibility per system/component.",
        "**Name files consistently** following the project structure.",
        f"**Profile early and often.** Target {value(config.target_fps)} from day one.",
        "**Version control everything.** Commit after each working feature.",
    ])

    return join_parts([
        "### Build Order (MVP, follow this sequence exactly)",
        code_block("\n".join(mvp)),
        "### Build Order (MAX Scope, extends MVP)",
        code_block("\n".join(full)),
        "### Implementation Rules",
        rules,
    ])


def render_constraints(config: GameConfig) -> str:
    """Engine anti-patterns, general rules and project constraints."""
    profile = engine_profile(config.engine)
    code_quality = (
        f"DO NOT ignore {profile.language} compiler warnings; fix them properly",
        "DO NOT use magic numbers; define constants with descriptive names",
        "DO NOT skip input validation on save/load data",
        "DO NOT create circular dependencies between systems",
    )
    return join_parts([
        f"### Engine-Specific ({value(config.engine)})",
        bullets(profile.anti_patterns),
        "### General Game Development",
        bullets(GENERAL_DO_NOTS),
        "### Code Quality",
        bullets(code_quality),
        config.ai_freetext.constraints and "### Project-Specific Constraints",
        config.ai_freetext.constraints,
    ])


@requires_any("engine")
def render_error_protocol(config: GameConfig) -> str:
    profile = engine_profile(config.engine)
    steps = numbered([
        "STOP. Do not modify code yet.",
        "Read the full error message and stack trace.",
        f"Consult the official {value(config.engine)} documentation: {profile.docs_url}",
        "Check for known error patterns (see below).",
        "Reproduce in isolation if the error is unclear.",
        "Document the error and the fix before continuing.",
    ])
    return join_parts([
        "When you encounter ANY error:",
        steps,
        f"### Known Error Patterns ({value(config.engine)})",
        bullets(profile.error_patterns),
    ])


@requires_any("engine", "aiFreetext.referenceGames")
def render_references(config: GameConfig) -> str:
    profile = engine_profile(config.engine)
    rows = [
        ("Development Concept", "./development-concept.md"),
        (f"{value(config.engine)} Docs", profile.docs_url),
    ]
    if _is_web_engine(config):
        rows.append(("TypeScript Docs", "https://www.typescriptlang.org/docs/"))
        rows.append(("Vite Docs", "https://vitejs.dev/guide/"))
    if config.engine in ENGINE_DOC_LINKS:
        rows.append(ENGINE_DOC_LINKS[config.engine])

    patterns = [("Game Programming Patterns", "https://gameprogrammingpatterns.com/")]
    if config.ai_freetext.reference_games:
        patterns.append(("Reference Games", config.ai_freetext.reference_games))

    return join_parts([
        "### Primary Documentation",
        table(("Resource", "URL"), rows),
        "### Game Dev Resources",
        table(("Pattern", "Source"), patterns),
    ])


@requires_any("coreMechanics", "artStyle", "dimension", "musicStyle", "engine")
def render_agent_prompts(config: GameConfig) -> str:
    profile = engine_profile(config.engine)
    agents = [
        ("Architect Agent",
         "Game systems architecture, data model, component design, scene graph.",
         "Full game config + development concept.",
         "Architecture decision records, system interaction diagrams, data schemas."),
        ("Gameplay Agent",
         f"Core mechanics ({labels(config.core_mechanics)}), game feel, balancing.",
         "Mechanics config, progression systems, difficulty settings.",
         "Mechanic implementations, balance spreadsheets, tuning parameters."),
        ("Art & Audio Agent",
         f"{value(config.art_style)} {value(config.dimension)} assets, "
         f"{value(config.music_style)} audio, UI design.",
         "Visual style, audio config, UI requirements.",
         "Asset pipeline setup, shader configurations, audio system."),
        ("Code Agent",
         f"Feature implementation in {profile.language} following architect specs.",
         "All agent outputs + development concept.",
         f"Production-ready {value(config.engine)} source code."),
        ("Test Agent",
         "Game testing: unit, integration, playtest automation.",
         "Completed codebase from the Code Agent.",
         "Test files, gameplay recordings, bug reports, coverage."),
        ("QA & Review Agent",
         "Final QA: code review, performance profiling, platform compliance.",
         "All agent outputs combined.",
         "Approval or revision requests with specific feedback."),
    ]
    parts = []
    for name, focus, given, output in agents:
        parts.append(f"### {name}")
        parts.append(code_block(f"Focus: {focus}\nInput: {given}\nOutput: {output}"))
    return join_parts(parts)


def render_quick_start(config: GameConfig) -> str:
    return code_block("\n".join([
        "# 1. Paste this entire prompt into your AI development tool",
        "# 2. Follow the build order in the Instructions section",
        "# 3. Reference development-concept.md for detailed specs",
        "# 4. Use the Constraints (DO NOT) section as guardrails throughout",
    ]))


GAME_INIT_PROMPT = DocumentTemplate(
    name="init-prompt",
    title="Initialization Prompt",
    version=TEMPLATE_VERSION,
    sections=(
        SectionTemplate("Context", render_context),
        SectionTemplate("Technical Specification", render_technical_specification),
        SectionTemplate("Instructions", render_instructions),
        SectionTemplate("Constraints (DO NOT)", render_constraints),
        SectionTemplate("Error Handling Protocol", render_error_protocol),
        SectionTemplate("References", render_references),
        SectionTemplate("Agent-Specific Prompts", render_agent_prompts),
        SectionTemplate("Quick Start", render_quick_start),
    ),
)


# --- Development concept ---


@requires_any(
    "themes", "genres", "elevatorPitch", "dimension", "engine", "artStyle",
    "primaryPlatform", "playerMode", "worldScope", "narrativeFocus",
    "storyStructure", "victoryCondition", "coreMechanics",
    "aiFreetext.detailedDescription", "aiFreetext.gameplayLoop",
    "aiFreetext.referenceGames", "targetAudience", "contentPlan",
)
def render_project_overview(config: GameConfig) -> str:
    goals = table(("Attribute", "Value"), [
        ("**Project Name**", game_name(config)),
        ("**Project Type**", f"{value(config.dimension)} {labels(config.genres)} Game"),
        ("**Engine**", config.engine),
        ("**Themes**", labels(config.themes)),
        ("**Art Style**", config.art_style),
        ("**Primary Platform**", config.primary_platform),
        ("**Player Mode**", config.player_mode),
        ("**Scope**", config.world_scope),
    ])

    identity = join_parts([
        _pitch(config),
        bullets([
            f"**Narrative:** {value(config.narrative_focus)}, {value(config.story_structure)} structure",
            f"**Victory Condition:** {value(config.victory_condition)}",
            f"**Core Mechanics:** {labels(config.core_mechanics)}",
        ]),
        config.ai_freetext.detailed_description,
        config.ai_freetext.gameplay_loop and f"**Gameplay Loop:** {config.ai_freetext.gameplay_loop}",
        config.ai_freetext.reference_games and f"**Reference Games:** {config.ai_freetext.reference_games}",
    ])

    audience = config.target_audience
    audience_table = table(("Audience", "Value"), [
        ("Age Range", audience.age_range),
        ("Demographic", audience.demographic),
        ("Session Length", audience.session_length),
        ("Experience Level", audience.experience_level),
    ])

    mvp, full = SCOPE_TIMELINES.get(config.world_scope, SCOPE_TIMELINES[WorldScope.MEDIUM])
    plan = config.content_plan
    timeline = table(("Milestone", "MVP Target", "MAX Target"), [
        ("Foundation & Core Setup", "Week 1", "Week 1"),
        ("Core Gameplay Mechanics", mvp, full),
        ("Content & Polish", mvp, full),
        ("Testing & QA", "Final week", "Final month"),
        ("Distribution Release", plan.mvp_timeline or "n/a", plan.full_launch_timeline or "Post-QA"),
    ])
    cadence = plan.post_launch_cadence and f"**Post-launch cadence:** {plan.post_launch_cadence}"

    return join_parts([
        "### Goals & Scope", goals,
        "### Game Identity", identity,
        "### Target Audience", audience_table,
        "### Timeline", timeline, cadence,
    ])


@requires_any("engine", "primaryPlatform", "platforms", "dimension", "artStyle", "playerMode", "targetFps")
def render_technical_architecture(config: GameConfig) -> str:
    engine = value(config.engine)
    profile = engine_profile(config.engine)
    persistence = "Network Layer" if config.is_multiplayer else "Save System"

    if _is_web_engine(config):
        mvp = "\n".join([
            "[Web Browser]",
            f"  -> [{engine} Game ({profile.runtime})]",
            "       - Scene Manager",
            "       - Game Systems",
            "       - Asset Pipeline",
            "       - " + ("WebSocket Server" if config.is_multiplayer else "Local Storage (saves)"),
        ])
    else:
        mvp = "\n".join([
            f"[{value(config.primary_platform)}]",
            f"  -> [{engine} Runtime]",
            "       - Scene / Level Manager",
            "       - Game Systems (ECS / Component)",
            "       - Asset Pipeline",
            "       - Audio Engine",
            f"       - {persistence}",
        ])

    systems = [
        f"Core Engine Loop ({value(config.target_fps)})",
        f"Rendering Pipeline ({value(config.dimension)} {value(config.art_style)})",
        "Physics / Collision System",
        f"Audio System ({value(config.music_style)})",
        "Input System (platform-adaptive)",
        "UI / HUD System",
    ]
    if config.is_multiplayer:
        systems.append(f"Networking ({value(config.multiplayer.network_model)})")
    systems += ["Save / Persistence", "Analytics / Telemetry"]
    full = f"[{labels(config.platforms)}]\n  -> [{engine} Game Client]\n" + bullets(systems, prefix="       - ")

    tech = config.additional_tech
    infrastructure = table(("Component", "MVP", "MAX Scope"), [
        ("**Engine**", engine, f"{engine} (optimized build)"),
        ("**Rendering**", f"{value(config.dimension)} {value(config.art_style)}", "+ post-processing"),
        ("**Physics**", "Basic collisions",
         "Advanced physics engine" if AdditionalTech.PHYSICS_ENGINE in tech else "Standard physics"),
        ("**Audio**", "Basic playback", f"{value(config.music_style)} adaptive audio"),
        ("**Networking**",
         value(config.multiplayer.network_model) if config.is_multiplayer else "n/a",
         "Dedicated servers + matchmaking" if config.is_multiplayer else "n/a"),
        ("**Storage**", "Local saves", "Cloud save sync" if AdditionalTech.CLOUD_SAVE in tech else "Local saves"),
        ("**Analytics**", "n/a", "Player analytics pipeline" if AdditionalTech.ANALYTICS in tech else "Basic telemetry"),
    ])

    constraints = config.technical_constraints
    hardware = table(("Constraint", "Target"), [
        ("Min RAM", constraints.min_ram),
        ("Min GPU", constraints.min_gpu),
        ("Min CPU", constraints.min_cpu),
        ("Storage Size", constraints.storage_size),
        ("Network Bandwidth", constraints.network_bandwidth),
        ("Max Load Time", constraints.max_load_time),
        ("Target Resolution", constraints.target_resolution),
    ])

    return join_parts([
        "### System Design (MVP)", code_block(mvp),
        f"> **MVP:** Monolithic {engine} project targeting {value(config.primary_platform)}.",
        "### System Design (MAX Scope)", code_block(full),
        "### Infrastructure", infrastructure,
        "### Technical Constraints", hardware,
    ])


@requires_any("dimension", "progressionSystems", "coreMechanics", "levelGeneration", "lore")
def render_data_model(config: GameConfig) -> str:
    """Player state and save file schemas derived from mechanics and progression."""
    position = "{ x, y, z }" if config.dimension == Dimension.THREE_D else "{ x, y }"
    fields = ["id: string", f"position: {position}", "health: number"]
    progression = config.progression_systems
    if ProgressionSystem.XP_LEVELS in progression:
        fields += ["level: number", "experience: number"]
    if ProgressionSystem.EQUIPMENT_LOOT in progression:
        fields += ["inventory: Item[]", "equipment: EquipmentSlots"]
    if ProgressionSystem.SKILL_TREE in progression:
        fields.append("skills: SkillTree")
    if ProgressionSystem.ACHIEVEMENT in progression:
        fields.append("achievements: string[]")
    if CoreMechanic.RESOURCE_MANAGEMENT in config.core_mechanics:
        fields.append("resources: Record<string, number>")
    combat = {CoreMechanic.COMBAT_MELEE, CoreMechanic.COMBAT_RANGED, CoreMechanic.COMBAT_MAGIC}
    if combat.intersection(config.core_mechanics):
        fields += ["attack: number", "defense: number"]
    else:
        fields.append("score: number")
    fields.append("playtime: number")
    player_state = "PlayerState {\n" + "\n".join(f"  {field}" for field in fields) + "\n}"

    seeded = config.level_generation in (LevelGeneration.PROCEDURAL, LevelGeneration.HYBRID)
    save_file = "\n".join([
        "SaveFile {",
        "  version: string",
        "  timestamp: number",
        "  slot: number",
        "  player: PlayerState",
        "  world: {",
        "    currentLevel: string",
        "    seed: number" if seeded else "    completedLevels: string[]",
        "    entities: EntityState[]",
        "  }",
        "  settings: GameSettings",
        "  checksum: string",
        "}",
    ])

    lore = config.lore
    lore_parts = join_parts([
        lore.world_description,
        lore.factions and f"**Factions:** {', '.join(lore.factions)}",
        lore.flavor_text_tone and f"**Flavor text tone:** {lore.flavor_text_tone}",
    ])

    return join_parts([
        "### Player State Schema", code_block(player_state),
        "### Save File Structure", code_block(save_file),
        lore_parts and "### World Lore", lore_parts,
        "> MAX adds: leaderboards, player profiles, achievement tracking, replay data, "
        "mod manifests, analytics events.",
    ])


@requires_any("playerMode", "engine", "additionalTech")
def render_api_design(config: GameConfig) -> str:
    if _is_online(config):
        endpoints = table(("Endpoint", "Method", "Description", "Auth"), [
            ("/api/auth/login", "POST", "Player authentication", "No"),
            ("/api/auth/register", "POST", "Create account", "No"),
            ("/api/player/profile", "GET", "Get player profile", "Yes"),
            ("/api/player/save", "POST", "Upload save data", "Yes"),
            ("/api/player/save", "GET", "Download save data", "Yes"),
            ("/api/leaderboard", "GET", "Get leaderboard", "No"),
            ("/api/leaderboard", "POST", "Submit score", "Yes"),
            ("/api/matchmaking/queue", "POST", "Join matchmaking queue", "Yes"),
            ("/api/matchmaking/status", "GET", "Check match status", "Yes"),
        ])
        events = table(("Event", "Direction", "Description"), [
            ("player_move", "Client -> Server", "Position update"),
            ("world_state", "Server -> Client", "Authoritative state sync"),
            ("player_action", "Client -> Server", "Game action (attack, use item)"),
            ("player_join", "Server -> All", "New player notification"),
            ("player_leave", "Server -> All", "Player disconnect"),
        ])
        return join_parts(["### Game Server API", endpoints, "### Real-Time Protocol", events])

    web = _is_web_engine(config)
    cloud = AdditionalTech.CLOUD_SAVE in config.additional_tech
    systems = table(("System", "Interface", "Description"), [
        ("Save System", "`save(slot)` / `load(slot)`", "Serialize/deserialize game state"),
        ("Input System", "`getAction(name)` / `isPressed(key)`", "Abstracted input queries"),
        ("Audio System", "`play(id, opts)` / `stopAll()`", "Sound playback control"),
        ("Scene System", "`loadScene(id)` / `transition(type)`", "Level/scene management"),
        ("Entity System", "`spawn(type, pos)` / `destroy(id)`", "Entity lifecycle"),
        ("UI System", "`showDialog(opts)` / `updateHUD(data)`", "User interface control"),
    ])
    persistence = table(("Operation", "MVP", "MAX"), [
        ("Save", "LocalStorage / IndexedDB" if web else "Local file system",
         "Cloud sync + local fallback" if cloud else "Local file system"),
        ("Settings", "LocalStorage" if web else "Config file", "LocalStorage" if web else "Config file"),
        ("Analytics", "n/a", "Remote telemetry endpoint"),
    ])
    return join_parts([
        f"### Game Systems API (Internal)\n\nThis is a {value(config.player_mode)} game, so the "
        "API is the set of internal system interfaces:",
        systems,
        "### Data Persistence",
        persistence,
    ])


@requires_any("engine", "additionalTech", "musicStyle", "playerMode")
def render_tech_stack(config: GameConfig) -> str:
    engine = value(config.engine)
    profile = engine_profile(config.engine)
    tech = config.additional_tech
    return table(("Category", "MVP", "MAX Scope"), [
        ("**Engine**", engine, f"{engine} (optimized)"),
        ("**Language**", profile.language, profile.language),
        ("**Build Tool**", profile.build_tool, f"{profile.build_tool} + CI pipeline"),
        ("**IDE**", profile.ide, profile.ide),
        ("**Physics**", "Built-in / basic",
         "Advanced physics engine" if AdditionalTech.PHYSICS_ENGINE in tech else "Built-in"),
        ("**Audio**", "Basic engine audio", f"{value(config.music_style)} adaptive system"),
        ("**Networking**",
         value(config.multiplayer.network_model) if config.is_multiplayer else "n/a",
         "Dedicated servers" if config.is_multiplayer else "n/a"),
        ("**Testing**", "Manual playtesting", "Automated + manual"),
        ("**Version Control**", "Git", "Git + branching strategy"),
        ("**Package Mgr**", profile.package_manager, profile.package_manager),
        ("**Analytics**", "n/a", "Player analytics" if AdditionalTech.ANALYTICS in tech else "Basic telemetry"),
    ])


@requires_any("engine")
def render_implementation_guidelines(config: GameConfig) -> str:
    profile = engine_profile(config.engine)
    naming = NAMING_CONVENTIONS.get(config.engine, "camelCase for variables/functions, PascalCase for classes")
    if config.engine == Engine.BEVY:
        architecture = "ECS (Entity-Component-System) pattern"
    elif config.engine == Engine.UNITY:
        architecture = "Component-based architecture"
    elif config.engine == Engine.UNREAL:
        architecture = "Actor-Component model with Gameplay Framework"
    else:
        architecture = "Scene-based architecture with decoupled systems"
    state = STATE_MANAGEMENT.get(config.engine, "centralized state store with event-driven updates")

    git = table(("Aspect", "MVP", "MAX Scope"), [
        ("Branching", "`main` only", "`main` -> `develop` -> `feature/*`"),
        ("Commits", "Conventional", "Conventional + tagged releases"),
        ("Reviews", "Self-review", "PR required, 1 approval"),
        ("CI", "n/a", "Lint -> Build -> Test -> Package"),
    ])
    return join_parts([
        "### Code Standards",
        bullets([
            f"**Naming:** Follow {profile.language} conventions ({naming})",
            "**File structure:** Feature-based organization",
            "**Error handling:** Always handle edge cases; no silent failures",
            f"**Architecture:** {architecture}",
        ]),
        "### Git Workflow", git,
        "### Game-Specific Patterns",
        "Systems have a single responsibility and communicate via events or signals, "
        "never through direct references.",
        f"**State Management:** Use {state}",
    ])


@requires_any("playerMode", "engine", "additionalTech", "platforms")
def render_security_concept(config: GameConfig) -> str:
    web = _is_web_engine(config)
    integrity = table(("Concern", "Solution"), [
        ("**Save tampering**", "Checksum validation on load"),
        ("**Save corruption**", "Backup save slot, verify schema version"),
        ("**Cheat prevention**",
         "Server-authoritative game state" if config.is_multiplayer
         else "Local validation (trust boundary at save file)"),
    ])
    if _is_online(config):
        extra = join_parts([
            "### Network Security",
            table(("Concern", "Solution"), [
                ("**Authentication**", "Token-based auth (JWT or session)"),
                ("**Data in transit**", "TLS/WSS for all connections"),
                ("**Cheating**", "Server-authoritative state, input validation"),
                ("**DDoS**", "Rate limiting, connection throttling"),
                ("**Injection**", "Validate all client inputs server-side"),
            ]),
            "### Account Security",
            table(("Concern", "Solution"), [
                ("**Password storage**", "bcrypt / argon2 hashing"),
                ("**Session management**", "Secure, expiring tokens"),
                ("**Account recovery**", "Email verification flow"),
            ]),
        ])
    else:
        extra = join_parts([
            "### Client-Side Security",
            table(("Concern", "Solution"), [
                ("**Memory manipulation**", "Obfuscation, integrity checks" if web else "Anti-debug measures (MAX scope)"),
                ("**Asset extraction**", "Asset bundling, obfuscation" if web else "Packed asset formats"),
                ("**Leaderboard cheating**", "Server validation" if config.is_multiplayer else "Local only, client trust"),
            ]),
        ])
    checklist = bullets([
        "Save file integrity verification",
        "Input validation on all game actions",
        "Server-side anti-cheat" if _is_online(config) else "Client-side tamper detection",
        "Content Security Policy headers" if web else "Code signing for distribution",
        "Secure storage for any credentials/API keys",
        "Privacy-compliant analytics (GDPR)" if AdditionalTech.ANALYTICS in config.additional_tech
        else "No PII collected",
        f"Platform compliance ({labels(config.platforms)})",
    ], prefix="- [ ] ")
    return join_parts([
        "### Save Integrity (MVP)", integrity, extra,
        "### Production Security Checklist (MAX Scope)", checklist,
    ])


@requires_any("engine", "primaryPlatform", "platforms", "targetFps")
def render_testing_strategy(config: GameConfig) -> str:
    web = _is_web_engine(config)
    unit = TEST_TOOLS.get(config.engine, "Vitest" if web else "Engine-specific")
    if config.engine == Engine.UNITY:
        integration = "Unity Integration Tests"
    elif config.engine == Engine.UNREAL:
        integration = "Unreal Functional Tests"
    else:
        integration = "Vitest + Playwright" if web else "Custom test harness"
    profiler = PROFILERS.get(config.engine, "Chrome DevTools / Lighthouse" if web else "Platform profiler")

    mvp = table(("Type", "Tool", "Scope"), [
        ("Manual Playtesting", f"{value(config.engine)} Editor", "All core mechanics, game feel"),
        ("Unit Tests", unit, "Game logic, math utilities"),
        ("Smoke Tests", "Manual", f"Build runs on {value(config.primary_platform)}"),
    ])
    full = table(("Type", "Tool", "Scope", "Coverage"), [
        ("Unit", unit, "Game systems, utilities", "Core systems"),
        ("Integration", integration, "System interactions, save/load", "Key interactions"),
        ("Performance", profiler, "Frame time, memory, loading", f"{value(config.target_fps)} target"),
        ("Platform", "Per-platform build", labels(config.platforms), "All target platforms"),
        ("Playtest", "Human testers", "Game feel, balance, fun factor", "Complete game"),
    ])
    return join_parts(["### MVP", mvp, "### MAX Scope", full])


def _build_command(config: GameConfig) -> str:
    platform = value(config.primary_platform)
    if config.engine == Engine.UNITY:
        return f"# Unity Build\nUnity -batchmode -buildTarget {platform} -projectPath . -executeMethod BuildScript.Build"
    if config.engine == Engine.UNREAL:
        return f'# Unreal Package\nRunUAT BuildCookRun -project="[Project].uproject" -platform={platform} -cook -build -stage -pak'
    if config.engine == Engine.GODOT:
        return f'# Godot Export\ngodot --headless --export-release "{platform}" build/game'
    if _is_web_engine(config):
        return "# Web Build (Vite)\nnpm run build\n# Output in dist/, deploy to web host"
    if config.engine == Engine.BEVY:
        return "# Bevy Build\ncargo build --release\n# For WASM: cargo build --release --target wasm32-unknown-unknown"
    return f"# Build for {platform}\n# Follow engine-specific build instructions"


@requires_any("engine", "primaryPlatform", "distribution")
def render_deployment_plan(config: GameConfig) -> str:
    profile = engine_profile(config.engine)
    first_channel = option_label(config.distribution[0]) if config.distribution else UNSPECIFIED
    environments = table(("Environment", "MVP", "MAX Scope"), [
        ("Development", f"Local ({profile.ide})", "Local + test server"),
        ("Testing", "Local build", "Dedicated test builds"),
        ("Production", first_channel, labels(config.distribution)),
    ])
    channels = table(("Channel", "Status", "Notes"), [
        (option_label(channel), "Planned", DISTRIBUTION_NOTES.get(channel, "Setup required"))
        for channel in config.distribution
    ]) if config.distribution else "No distribution channels selected."
    post_launch = bullets([
        "Update pipeline: Version tagging -> Build -> Test -> Stage -> Release",
        "Hotfix process: Branch from release tag -> Fix -> Test -> Deploy",
        "Analytics dashboard for player behavior monitoring"
        if AdditionalTech.ANALYTICS in config.additional_tech else "Player feedback channels",
    ])
    return join_parts([
        "### Environments", environments,
        "### Build & Distribute (MVP)", code_block(_build_command(config)),
        "### Distribution Channels", channels,
        "### Post-Launch (MAX Scope)", post_launch,
    ])


@requires_any(
    "coreMechanics", "secondaryMechanics", "additionalTech", "targetFps",
    "worldStructure", "cameraStyle", "musicStyle", "victoryCondition", "difficulty",
)
def render_component_library(config: GameConfig) -> str:
    camera = value(config.camera_style) if config.camera_style else f"Default {value(config.dimension)} camera"
    core = [
        ("Game Loop", f"Core update cycle at {value(config.target_fps)}", "P0"),
        ("Input", f"{_input_scheme(config)} support", "P0"),
        ("Scene Manager", f"{value(config.world_structure)} scene transitions", "P0"),
        ("Camera", f"{camera} system", "P0"),
    ]
    core += [(option_label(m), "Core gameplay mechanic", "P0") for m in config.core_mechanics]
    core += [
        ("Audio", f"{value(config.music_style)} music + {labels(config.sound_effects)} SFX", "P1"),
        ("UI/HUD", "Health, score, minimap, menus", "P1"),
        ("Save/Load", "LocalStorage/IndexedDB persistence" if _is_web_engine(config) else "File-based persistence", "P1"),
        (value(config.victory_condition), "Win/lose condition logic", "P1"),
    ]

    secondary = [(option_label(m), "Secondary gameplay mechanic") for m in config.secondary_mechanics]
    secondary.append((f"{value(config.difficulty)} Difficulty", "AI or rule-based difficulty scaling"))
    if config.voice_acting not in (None, VoiceActing.NONE):
        secondary.append(("Voice System", f"{value(config.voice_acting)} playback"))
    else:
        secondary.append(("Localization", "Multi-language support"))
    if config.is_multiplayer:
        secondary.append(("Networking", _networking(config)))
        secondary.append(("Matchmaking", "Player lobby and match pairing"))
    secondary += [(option_label(t), "Additional technology integration") for t in config.additional_tech]

    return join_parts([
        "### Core Game Systems (MVP)",
        table(("System", "Description", "Priority"), core),
        "### Secondary Systems (MAX Scope)",
        table(("System", "Description"), secondary),
    ])


def render_do_not_list(config: GameConfig) -> str:
    profile = engine_profile(config.engine)
    design = DESIGN_DO_NOTS + (
        f"Do NOT mix {value(config.dimension)} and incompatible rendering techniques",
    )
    general = (
        "Do NOT commit broken builds to the main branch",
        "Do NOT hardcode values that should be configurable (damage, speed)",
        "Do NOT skip version control for asset files",
        f"Do NOT ignore platform-specific submission requirements ({labels(config.distribution)})",
        "Do NOT leave debug/cheat modes enabled in release builds",
        f"Do NOT use deprecated {value(config.engine)} APIs; check migration guides",
    )
    return join_parts([
        f"### Game Engine ({value(config.engine)})", bullets(profile.anti_patterns),
        "### Game Design", bullets(design),
        "### General Development", bullets(general),
        config.ai_freetext.constraints and "### Project-Specific",
        config.ai_freetext.constraints,
    ])


GAME_DEVELOPMENT_CONCEPT = DocumentTemplate(
    name="development-concept",
    title="Development Concept",
    version=TEMPLATE_VERSION,
    sections=(
        SectionTemplate("Project Overview", render_project_overview),
        SectionTemplate("Technical Architecture", render_technical_architecture),
        SectionTemplate("Data Model", render_data_model),
        SectionTemplate("API Design", render_api_design),
        SectionTemplate("Tech Stack", render_tech_stack),
        SectionTemplate("Implementation Guidelines", render_implementation_guidelines),
        SectionTemplate("Security Concept", render_security_concept),
        SectionTemplate("Testing Strategy", render_testing_strategy),
        SectionTemplate("Deployment Plan", render_deployment_plan),
        SectionTemplate("Component Library", render_component_library),
        SectionTemplate("DO NOT List", render_do_not_list),
    ),
)

GAME_TEMPLATES = (GAME_INIT_PROMPT, GAME_DEVELOPMENT_CONCEPT)
