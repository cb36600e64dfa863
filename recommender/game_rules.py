"""Recommendation tables for game configurations, one tuple per dimension."""

from typing import Dict, Tuple

from contracts.options import (
    AdditionalTech,
    BusinessModel,
    CONSOLE_PLATFORMS,
    CoreMechanic,
    DevAi,
    Dimension,
    Engine,
    Genre,
    InGameAi,
    MOBILE_PLATFORMS,
    ONLINE_PLAYER_MODES,
    PC_PLATFORMS,
    Platform,
    PlayerMode,
    Theme,
    VictoryCondition,
)
from .rules import RecommendationRule as R


def _on(c, platforms) -> bool:
    return any(p in platforms for p in c.platforms)


def _genre(c, *genres) -> bool:
    return any(g in c.genres for g in genres)


def _theme(c, *themes) -> bool:
    return any(t in c.themes for t in themes)


def _online(c) -> bool:
    return c.player_mode in ONLINE_PLAYER_MODES


AI_PROVIDERS: Tuple[R, ...] = (
    R(lambda c: InGameAi.DYNAMIC_DIALOGUE in c.ai_freetext.in_game_ai,
      "Add Anthropic Claude for dynamic NPC dialogue, with cached responses for offline play", 90),
    R(lambda c: InGameAi.PROCEDURAL_CONTENT in c.ai_freetext.in_game_ai,
      "Add OpenAI GPT with structured output for procedural quest and item text", 80),
    R(lambda c: DevAi.CODE_GENERATION in c.ai_freetext.dev_ai,
      "Add Anthropic Claude for gameplay code generation", 80),
    R(lambda c: DevAi.ASSET_GENERATION in c.ai_freetext.dev_ai,
      "Add an image model (DALL-E or Stable Diffusion) for concept art and asset drafts", 70),
    R(lambda c: DevAi.LOCALIZATION in c.ai_freetext.dev_ai,
      "Add an LLM translation pass with human review for localization", 60),
    R(lambda c: any(ai in c.ai_freetext.in_game_ai for ai in (InGameAi.NPC_BEHAVIOR, InGameAi.ENEMY_AI)),
      "Use behaviour trees or utility AI for NPC and enemy logic; keep LLMs out of the frame loop", 60),
    R(lambda c: InGameAi.ADAPTIVE_DIFFICULTY in c.ai_freetext.in_game_ai,
      "Drive adaptive difficulty from local telemetry rules instead of a hosted model", 50),
    R(lambda c: InGameAi.MATCHMAKING in c.ai_freetext.in_game_ai,
      "Use skill-based matchmaking (TrueSkill or Glicko-2) rather than a generative model", 50),
    R(lambda c: DevAi.BALANCING in c.ai_freetext.dev_ai or DevAi.TESTING in c.ai_freetext.dev_ai,
      "Add AI playtesting bots to simulate sessions for balancing and regression runs", 40),
    R(lambda c: len([ai for ai in c.ai_freetext.in_game_ai if ai != InGameAi.NONE]) > 1,
      "Enable provider fallback for reliability", 30),
)

FEATURES: Tuple[R, ...] = (
    R(lambda c: _genre(c, Genre.RPG) or CoreMechanic.DIALOGUE in c.core_mechanics,
      "Add companions, reputation and diplomacy as secondary mechanics", 80),
    R(lambda c: _genre(c, Genre.SURVIVAL, Genre.SANDBOX),
      "Add crafting, farming and base-building as secondary mechanics", 80),
    R(lambda c: _genre(c, Genre.ADVENTURE) or CoreMechanic.EXPLORATION in c.core_mechanics,
      "Add photography, fishing and mini-games to reward exploration", 70),
    R(lambda c: _genre(c, Genre.SIMULATION),
      "Add weather, a day/night cycle and trading to deepen the simulation", 70),
    R(lambda c: _genre(c, Genre.STEALTH, Genre.ACTION),
      "Add hacking and crafting as secondary mechanics", 60),
    R(lambda c: _genre(c, Genre.RPG),
      "Use XP & Levels, a Skill Tree and Equipment/Loot for progression", 75),
    R(lambda c: _genre(c, Genre.ROGUELIKE),
      "Use Prestige/Reset and Unlocks for meta-progression between runs", 75),
    R(lambda c: _genre(c, Genre.ACTION, Genre.PLATFORMER),
      "Use Mastery and Unlocks with cosmetics and new areas as rewards", 65),
    R(lambda c: _genre(c, Genre.IDLE),
      "Use Prestige/Reset and XP & Levels with currency rewards", 65),
    R(lambda c: c.victory_condition == VictoryCondition.STORY_COMPLETION,
      "Tie progression to story progress and reward players with story content", 60),
    R(lambda c: c.victory_condition == VictoryCondition.COMPETITIVE,
      "Offer selectable difficulty and ranked seasons for competitive play", 55),
    R(lambda c: _theme(c, Theme.HORROR),
      "Use minimal/drone and ambient music with foley sound effects for tension", 45),
    R(lambda c: _theme(c, Theme.FANTASY, Theme.MEDIEVAL),
      "Use an orchestral or folk score to match the fantasy setting", 45),
    R(lambda c: _theme(c, Theme.SCI_FI, Theme.CYBERPUNK),
      "Use an electronic score with stylized sound effects", 45),
    R(lambda c: _genre(c, Genre.RPG, Genre.ADVENTURE, Genre.VISUAL_NOVEL),
      "Budget for full or partial voice acting on key story scenes", 40),
    R(lambda c: c.pwa_support or c.offline_mode,
      "Add a save-anywhere system so offline sessions never lose progress", 35),
)

SECURITY: Tuple[R, ...] = (
    R(lambda c: c.player_mode == PlayerMode.MMO,
      "Add anti-cheat (Easy Anti-Cheat or BattlEye) and server-side movement validation", 95),
    R(_online,
      "Keep game state server-authoritative so clients cannot forge results", 90),
    R(_online,
      "Validate all client messages on the server and rate-limit matchmaking endpoints", 80),
    R(lambda c: c.business_model in (BusinessModel.FREE_TO_PLAY, BusinessModel.FREEMIUM, BusinessModel.BATTLE_PASS),
      "Validate in-app purchase receipts server-side before granting items", 85),
    R(lambda c: AdditionalTech.CLOUD_SAVE in c.additional_tech,
      "Sign and encrypt cloud saves to detect tampering", 70),
    R(lambda c: AdditionalTech.MOD_SUPPORT in c.additional_tech,
      "Sandbox mod scripts and restrict their file system and network access", 70),
    R(lambda c: Platform.WEB in c.platforms,
      "Serve the web build over HTTPS with a strict Content Security Policy", 60),
    R(lambda c: AdditionalTech.ANALYTICS in c.additional_tech,
      "Collect telemetry with player consent and document it for GDPR", 50),
    R(lambda c: bool(c.social_features),
      "Add reporting and moderation tools for player-generated text", 40),
)

DEPLOYMENT: Tuple[R, ...] = (
    R(lambda c: _on(c, PC_PLATFORMS),
      "Ship on Steam, with itch.io for early builds and demos", 80),
    R(lambda c: Platform.MOBILE_IOS in c.platforms,
      "Publish on the App Store via TestFlight beta builds", 80),
    R(lambda c: Platform.MOBILE_ANDROID in c.platforms,
      "Publish on Google Play with an internal testing track", 80),
    R(lambda c: Platform.WEB in c.platforms,
      "Host the web build on itch.io or your own domain behind a CDN", 75),
    R(lambda c: _on(c, CONSOLE_PLATFORMS),
      "Plan for console certification and platform store submission early", 85),
    R(lambda c: _on(c, MOBILE_PLATFORMS),
      "Monetise mobile builds as free-to-play or ad-supported", 78),
    R(lambda c: c.player_mode == PlayerMode.MMO or _genre(c, Genre.IDLE),
      "Pair free-to-play with an optional subscription for long-running play", 76),
    R(lambda c: _on(c, PC_PLATFORMS) or _on(c, CONSOLE_PLATFORMS),
      "Sell PC and console releases as a premium one-time purchase", 72),
    R(lambda c: Platform.WEB in c.platforms,
      "Keep the web build free-to-play and accept donations", 72),
    R(lambda c: _on(c, PC_PLATFORMS) and _genre(c, Genre.PUZZLE),
      "List the puzzle release on itch.io as well as Steam to reach indie players", 55),
    R(_online,
      "Host dedicated servers on a managed fleet (PlayFab Multiplayer Servers or Edgegap)", 70),
    R(lambda c: c.engine == Engine.UNITY,
      "Automate Unity builds with GameCI on GitHub Actions", 60),
    R(lambda c: c.engine == Engine.GODOT,
      "Automate Godot exports in CI with headless export templates", 60),
    R(lambda c: c.engine is not None and c.engine != Engine.UNITY and c.engine != Engine.GODOT,
      "Automate nightly builds in CI for every target platform", 50),
)

INTEGRATIONS: Tuple[R, ...] = (
    R(_online,
      "Add a game backend (Nakama, PlayFab or Firebase) for accounts, lobbies and matchmaking", 80),
    R(lambda c: _on(c, PC_PLATFORMS) and bool(c.social_features),
      "Integrate Steamworks for achievements, friends and cloud saves", 70),
    R(lambda c: _on(c, MOBILE_PLATFORMS),
      "Integrate Game Center and Google Play Games Services", 70),
    R(lambda c: c.business_model == BusinessModel.AD_SUPPORTED,
      "Integrate an ad mediation SDK (AdMob or AppLovin MAX)", 65),
    R(lambda c: AdditionalTech.ANALYTICS in c.additional_tech or c.business_model in (
        BusinessModel.FREE_TO_PLAY, BusinessModel.FREEMIUM, BusinessModel.BATTLE_PASS),
      "Add GameAnalytics or Unity Analytics for retention and funnel telemetry", 60),
    R(lambda c: c.engine is not None,
      "Add crash reporting (Sentry or Backtrace) to release builds", 40),
)


def _engine_rule(engine: Engine, text: str) -> R:
    return R(lambda c: c.engine == engine, text, 100)


STACK: Tuple[R, ...] = (
    _engine_rule(Engine.UNITY,
                 "Unity (C#) with the Universal Render Pipeline (com.unity.render-pipelines.universal) "
                 "and the Input System package (com.unity.inputsystem)"),
    _engine_rule(Engine.UNREAL, "Unreal Engine 5 with C++ for core systems and Blueprints for iteration"),
    _engine_rule(Engine.GODOT, "Godot 4 with GDScript, C# only where profiling demands it"),
    _engine_rule(Engine.PHASER3, "Phaser 3 with TypeScript and Vite"),
    _engine_rule(Engine.PIXIJS, "PixiJS with TypeScript and Vite"),
    _engine_rule(Engine.THREEJS, "Three.js with TypeScript, Vite and a physics library (Rapier or cannon-es)"),
    _engine_rule(Engine.GAMEMAKER, "GameMaker with GML and the built-in room editor"),
    _engine_rule(Engine.RPGMAKER, "RPG Maker MZ with JavaScript plugins for custom systems"),
    _engine_rule(Engine.CONSTRUCT, "Construct 3 with event sheets and JavaScript modules"),
    _engine_rule(Engine.BEVY, "Bevy (Rust) with its ECS and the bevy_rapier physics plugin"),
    _engine_rule(Engine.CUSTOM, "Custom engine: pick a windowing/rendering layer (SDL2 or wgpu) before gameplay work"),
    R(lambda c: c.engine is None and c.dimension == Dimension.TWO_D and Platform.WEB in c.platforms,
      "Phaser 3 or PixiJS for a 2D browser game", 90),
    R(lambda c: c.engine is None and c.dimension == Dimension.TWO_D and Platform.WEB not in c.platforms,
      "Godot or GameMaker for a 2D game", 90),
    R(lambda c: c.engine is None and c.dimension == Dimension.THREE_D and Platform.WEB in c.platforms,
      "Three.js for 3D in the browser", 90),
    R(lambda c: c.engine is None and c.dimension != Dimension.TWO_D,
      "Unity or Godot as a general-purpose engine", 85),
    R(lambda c: c.engine is None and c.dimension == Dimension.THREE_D and _on(c, CONSOLE_PLATFORMS),
      "Unreal Engine for 3D console releases", 85),
    R(lambda c: c.engine is None and _genre(c, Genre.RPG) and c.dimension == Dimension.TWO_D,
      "RPG Maker for a classic 2D RPG", 80),
    R(lambda c: _on(c, MOBILE_PLATFORMS),
      "Target 30-60 FPS on mobile and scale effects by device tier", 70),
    R(lambda c: _on(c, CONSOLE_PLATFORMS) and not _on(c, MOBILE_PLATFORMS),
      "Target a locked 60 FPS on consoles", 70),
    R(lambda c: bool(c.platforms) and not _on(c, MOBILE_PLATFORMS) and not _on(c, CONSOLE_PLATFORMS),
      "Target 60 FPS with an optional 120 FPS mode", 65),
    R(lambda c: _online(c) and AdditionalTech.NETWORKING not in c.additional_tech,
      "Add a networking layer (Netcode, Mirror, ENet or WebSockets) for online play", 75),
    R(lambda c: _genre(c, Genre.ROGUELIKE, Genre.SANDBOX),
      "Add seeded procedural generation so runs are reproducible", 60),
    R(lambda c: c.dimension == Dimension.THREE_D,
      "Add a physics engine and navmesh-based AI navigation for 3D worlds", 55),
)


GAME_RECOMMENDATIONS: Dict[str, Tuple[R, ...]] = {
    "aiProviders": AI_PROVIDERS,
    "features": FEATURES,
    "security": SECURITY,
    "deployment": DEPLOYMENT,
    "integrations": INTEGRATIONS,
    "stack": STACK,
}
