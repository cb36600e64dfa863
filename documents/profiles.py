"""Static engine and framework profiles used by the document templates."""

from typing import Dict, NamedTuple, Optional, Tuple

from contracts.options import Engine, Framework


class EngineProfile(NamedTuple):
    """Toolchain facts and known pitfalls for a game engine."""
    language: str
    runtime: str
    build_tool: str
    ide: str
    package_manager: str
    project_structure: str
    docs_url: str
    error_patterns: Tuple[str, ...]
    anti_patterns: Tuple[str, ...]


class FrameworkProfile(NamedTuple):
    """Project layout and conventions for a web framework."""
    name: str
    project_structure: str
    best_practices: Tuple[str, ...]
    error_patterns: Tuple[str, ...]
    anti_patterns: Tuple[str, ...]


_WEB_GAME_STRUCTURE = """[project-name]/
├── src/
│   ├── scenes/          # Boot, Preload, Menu, Game, GameOver
│   ├── entities/        # Player, enemies, pickups
│   ├── systems/         # Input, audio, save, collision
│   ├── ui/              # HUD and menus
│   └── main.ts          # Entry point and game config
├── public/assets/       # Sprites, audio, fonts
├── tests/
├── index.html
└── vite.config.ts"""


ENGINE_PROFILES: Dict[Engine, EngineProfile] = {
    Engine.UNITY: EngineProfile(
        language="C# (.NET)",
        runtime="Mono / IL2CPP",
        build_tool="Unity Build System",
        ide="Visual Studio / Rider",
        package_manager="Unity Package Manager (UPM)",
        project_structure="""[project-name]/
├── Assets/
│   ├── Scripts/         # Core, Gameplay, UI, Systems
│   ├── Prefabs/
│   ├── Scenes/
│   ├── ScriptableObjects/
│   ├── Art/ Audio/
│   └── Tests/           # EditMode and PlayMode tests
├── Packages/manifest.json
└── ProjectSettings/""",
        docs_url="https://docs.unity3d.com/Manual/",
        error_patterns=(
            "NullReferenceException: always null-check GetComponent<T>() results",
            "Missing script references: check serialized field assignments in the Inspector",
            "Build errors on IL2CPP: avoid reflection-heavy code, use the [Preserve] attribute",
        ),
        anti_patterns=(
            "DO NOT use Find() or FindObjectOfType() in Update loops",
            "DO NOT instantiate/destroy objects every frame; use object pooling",
            "DO NOT put game logic in MonoBehaviour.Start() without null checks",
            "DO NOT use public fields for serialization; use [SerializeField] private",
            "DO NOT ignore the Unity event lifecycle order",
            "DO NOT hardcode layer/tag strings; use constants or enums",
        ),
    ),
    Engine.UNREAL: EngineProfile(
        language="C++ / Blueprints",
        runtime="Unreal Engine Runtime",
        build_tool="Unreal Build Tool (UBT)",
        ide="Visual Studio / Rider",
        package_manager="Unreal Marketplace / vcpkg",
        project_structure="""[project-name]/
├── Source/[ProjectName]/
│   ├── Core/            # GameMode, GameState, PlayerController
│   ├── Characters/
│   ├── Components/
│   └── UI/
├── Content/             # Blueprints, Maps, Materials, Audio
├── Config/
└── [ProjectName].uproject""",
        docs_url="https://docs.unrealengine.com/",
        error_patterns=(
            "Access violation: check pointer validity with IsValid() before dereferencing",
            "Blueprint compilation errors: verify C++ UFUNCTION/UPROPERTY macros",
            "Packaging failures: check cooking logs and verify all assets are referenced",
        ),
        anti_patterns=(
            "DO NOT use raw C++ pointers for UObjects; use UPROPERTY() or TWeakObjectPtr",
            "DO NOT tick every actor every frame; use timers or event-driven design",
            "DO NOT skip UCLASS/USTRUCT/UENUM macros for reflected types",
            "DO NOT hardcode asset paths; use soft references (TSoftObjectPtr)",
            "DO NOT ignore garbage collection rules for UObject lifecycle",
            "DO NOT bypass the Gameplay Ability System for complex combat",
        ),
    ),
    Engine.GODOT: EngineProfile(
        language="GDScript / C#",
        runtime="Godot Runtime",
        build_tool="SCons (engine) / Godot Export",
        ide="Godot Editor / VS Code",
        package_manager="Godot Asset Library",
        project_structure="""[project-name]/
├── scenes/              # .tscn files per level and entity
├── scripts/             # autoloads/, entities/, systems/, ui/
├── assets/              # sprites, audio, fonts
├── tests/               # GUT tests
└── project.godot""",
        docs_url="https://docs.godotengine.org/en/stable/",
        error_patterns=(
            "Null instance errors: check is_instance_valid() before accessing freed nodes",
            "Signal connection errors: verify the signal exists and the callable signature matches",
            "Export template missing: install export templates for the target platform",
        ),
        anti_patterns=(
            "DO NOT use get_node() with hardcoded paths; use @onready or signals",
            "DO NOT call queue_free() without checking dependent references",
            "DO NOT process physics in _process(); use _physics_process()",
            "DO NOT use strings for signal names; use typed signal syntax",
            "DO NOT create scenes with circular dependencies",
            "DO NOT ignore node ownership rules for saved scenes",
        ),
    ),
    Engine.PHASER3: EngineProfile(
        language="TypeScript",
        runtime="Browser (WebGL / Canvas)",
        build_tool="Vite",
        ide="VS Code / WebStorm",
        package_manager="npm / pnpm",
        project_structure=_WEB_GAME_STRUCTURE,
        docs_url="https://phaser.io/docs",
        error_patterns=(
            "WebGL context lost: handle context restoration, reduce texture memory",
            "Asset loading failure: check file paths are relative to the public directory",
            "Physics body undefined: verify the physics plugin is enabled in the game config",
        ),
        anti_patterns=(
            "DO NOT create game objects outside of Scene lifecycle methods",
            "DO NOT use setInterval/setTimeout; use Phaser timers and events",
            "DO NOT load assets in create(); preload in preload()",
            "DO NOT manipulate the DOM directly; use Phaser's display system",
            "DO NOT forget to destroy objects when switching scenes",
            "DO NOT use Phaser 2 patterns (Phaser.Sprite, game.add); use Scene methods",
        ),
    ),
    Engine.THREEJS: EngineProfile(
        language="TypeScript",
        runtime="Browser (WebGL / WebGPU)",
        build_tool="Vite",
        ide="VS Code / WebStorm",
        package_manager="npm / pnpm",
        project_structure=_WEB_GAME_STRUCTURE,
        docs_url="https://threejs.org/docs/",
        error_patterns=(
            "WebGL context lost: implement renderer.forceContextRestore()",
            "Memory leaks: always dispose geometries, materials and textures",
            "GLTF loading errors: verify file paths and DRACO decoder setup",
        ),
        anti_patterns=(
            "DO NOT create new Vector3/Matrix4 in render loops; reuse objects",
            "DO NOT forget to dispose materials, geometries and textures on cleanup",
            "DO NOT use requestAnimationFrame directly; centralize the game loop",
            "DO NOT skip frustum culling for large scenes",
            "DO NOT load uncompressed textures; use KTX2/Basis for GPU compression",
            "DO NOT ignore WebGL limits; check renderer.capabilities",
        ),
    ),
    Engine.PIXIJS: EngineProfile(
        language="TypeScript",
        runtime="Browser (WebGL / WebGPU)",
        build_tool="Vite",
        ide="VS Code",
        package_manager="npm / pnpm",
        project_structure=_WEB_GAME_STRUCTURE,
        docs_url="https://pixijs.com/docs",
        error_patterns=(
            "Texture not found: ensure assets are loaded via Assets.load() before use",
            "Render glitches: check the display object hierarchy and zIndex",
            "Memory spikes: destroy unused textures from the GPU cache",
        ),
        anti_patterns=(
            "DO NOT create sprites before assets are loaded",
            "DO NOT add objects to the stage without managing their lifecycle",
            "DO NOT use PIXI.Loader (deprecated); use PIXI.Assets",
            "DO NOT render dynamic text with BitmapText; use Text or HTMLText",
            "DO NOT forget to call app.destroy() on cleanup",
        ),
    ),
    Engine.GAMEMAKER: EngineProfile(
        language="GML (GameMaker Language)",
        runtime="GameMaker Runtime",
        build_tool="GameMaker IDE",
        ide="GameMaker IDE",
        package_manager="GameMaker Marketplace",
        project_structure="""[project-name]/
├── objects/
├── rooms/
├── scripts/
├── sprites/
├── sounds/
└── [project-name].yyp""",
        docs_url="https://manual.gamemaker.io/",
        error_patterns=(
            "Instance does not exist: check instance_exists() before accessing",
            "Variable not set: initialize all variables in the Create event",
            "Room transition crash: verify persistent objects are marked correctly",
        ),
        anti_patterns=(
            "DO NOT put heavy logic in Draw events; use Step events",
            "DO NOT use global variables excessively; use controller objects",
            "DO NOT hardcode room names; use room asset references",
            "DO NOT forget to clean up alarms and timers on room change",
            "DO NOT ignore the layer system; avoid deprecated functions",
        ),
    ),
    Engine.RPGMAKER: EngineProfile(
        language="JavaScript (MV/MZ plugin system)",
        runtime="NW.js / Browser",
        build_tool="RPG Maker IDE",
        ide="RPG Maker IDE + VS Code for plugins",
        package_manager="Manual plugin management",
        project_structure="""[project-name]/
├── data/                # Maps, actors, items (JSON)
├── js/plugins/          # Custom plugins
├── img/
├── audio/
└── index.html""",
        docs_url="https://rpgmaker.fandom.com/wiki/Main_Page",
        error_patterns=(
            "Plugin conflicts: check plugin order in the Plugin Manager",
            "Event execution errors: verify switch/variable IDs",
            "Deployment issues: test with both NW.js and browser targets",
        ),
        anti_patterns=(
            "DO NOT modify core engine files directly; use plugin hooks",
            "DO NOT skip plugin order requirements",
            "DO NOT use deprecated MV patterns in MZ projects",
            "DO NOT hardcode database IDs; use named references where possible",
        ),
    ),
    Engine.CONSTRUCT: EngineProfile(
        language="Visual Scripting (Event Sheets) / JavaScript",
        runtime="Browser (HTML5)",
        build_tool="Construct IDE (cloud-based)",
        ide="Construct IDE",
        package_manager="Construct Addon Exchange",
        project_structure="""[project-name]/
├── Layouts/
├── Event sheets/
├── Object types/
├── Families/
└── Scripts/""",
        docs_url="https://www.construct.net/en/make-games/manuals/construct-3",
        error_patterns=(
            "Object not found: verify the object is placed on the active layout or created via events",
            "Performance drops: reduce the number of active objects, use containers",
            "Export issues: check plugin compatibility with the target platform",
        ),
        anti_patterns=(
            "DO NOT create excessive global variables; use instance variables",
            "DO NOT put all logic in one event sheet; organize by feature",
            "DO NOT use 'Every tick' for things that can be event-driven",
            "DO NOT ignore the family system for shared behaviors",
        ),
    ),
    Engine.BEVY: EngineProfile(
        language="Rust",
        runtime="Native / WASM",
        build_tool="Cargo",
        ide="VS Code (rust-analyzer) / RustRover",
        package_manager="Cargo (crates.io)",
        project_structure="""[project-name]/
├── src/
│   ├── main.rs          # App builder
│   ├── components/
│   ├── systems/
│   ├── resources/
│   └── plugins/
├── assets/
└── Cargo.toml""",
        docs_url="https://bevyengine.org/learn/",
        error_patterns=(
            "Borrow checker errors: restructure to avoid aliased mutable access",
            "System ordering issues: use .before()/.after() or system sets",
            "Asset loading panics: use AssetServer.load() and check Handle state",
        ),
        anti_patterns=(
            "DO NOT fight the borrow checker; redesign with ECS patterns",
            "DO NOT use .single() queries without guaranteeing exactly one entity",
            "DO NOT create god-systems; keep systems small and focused",
            "DO NOT forget to add plugins to the App builder",
            "DO NOT use dynamic dispatch when static dispatch works",
            "DO NOT ignore change detection; avoid unnecessary writes",
        ),
    ),
    Engine.CUSTOM: EngineProfile(
        language="Language of choice",
        runtime="Custom runtime",
        build_tool="Custom build pipeline",
        ide="VS Code / preferred editor",
        package_manager="Language-specific package manager",
        project_structure="""[project-name]/
├── engine/              # Rendering, audio, input, platform layer
├── game/                # Game-specific logic
├── assets/
├── tests/
└── build/""",
        docs_url="N/A (custom engine)",
        error_patterns=(
            "Memory leaks: implement proper resource lifecycle management",
            "Rendering artifacts: verify graphics API state machine usage",
            "Platform-specific crashes: test on all target platforms early",
        ),
        anti_patterns=(
            "DO NOT reinvent the wheel for solved problems (physics, audio)",
            "DO NOT skip cross-platform abstraction layers",
            "DO NOT ignore memory management; profile regularly",
            "DO NOT couple engine code to game-specific logic",
        ),
    ),
}


FRAMEWORK_PROFILES: Dict[Framework, FrameworkProfile] = {
    Framework.NEXTJS: FrameworkProfile(
        name="Next.js (App Router)",
        project_structure="""app/
├── (auth)/              # Auth route group
├── (marketing)/         # Public pages
├── (dashboard)/         # Protected pages
├── api/                 # API routes
├── layout.tsx
├── page.tsx
├── loading.tsx
├── error.tsx
└── not-found.tsx
components/              # ui/, forms/, layouts/, shared/
lib/                     # db/, auth/, utils.ts, validations/
public/
middleware.ts""",
        best_practices=(
            "Use Server Components by default, Client Components only when needed",
            "Implement route groups for layout organization",
            "Use server actions for mutations",
            "Implement middleware for auth protection",
            "Use dynamic imports for heavy components",
            "Implement proper loading.tsx and error.tsx boundaries",
        ),
        error_patterns=(
            "Hydration mismatch: ensure server and client render the same initial HTML",
            "Missing 'use client' directive for components using hooks or browser APIs",
            "Importing server-only code in client components",
            "Not handling loading states during server action execution",
        ),
        anti_patterns=(
            "DO NOT use getServerSideProps/getStaticProps (Pages Router patterns)",
            "DO NOT mix App Router and Pages Router",
            "DO NOT use client-side fetch for data that can be fetched on the server",
            "DO NOT put secrets in client components",
        ),
    ),
    Framework.NUXT: FrameworkProfile(
        name="Nuxt 3",
        project_structure="""pages/
components/
composables/
server/
├── api/
├── middleware/
└── utils/
plugins/
public/""",
        best_practices=(
            "Use auto-imports for composables and components",
            "Implement server routes in server/api/",
            "Use useFetch/useAsyncData for data fetching",
            "Implement middleware for route protection",
        ),
        error_patterns=(
            "SSR hydration issues with client-only components",
            "Not wrapping browser APIs in onMounted or client-only checks",
        ),
        anti_patterns=(
            "DO NOT use the Options API; use the Composition API",
            "DO NOT manually import auto-imported composables",
        ),
    ),
    Framework.ASTRO: FrameworkProfile(
        name="Astro",
        project_structure="""src/
├── components/
├── content/             # Content collections
├── layouts/
└── pages/
public/
astro.config.mjs""",
        best_practices=(
            "Use content collections for structured content",
            "Ship zero JS by default, add interactivity with islands",
            "Use .astro components for static content",
            "Use framework components only for interactive islands",
        ),
        error_patterns=(
            "Client-side state not persisting between page navigations",
            "Importing node modules in client-side islands",
        ),
        anti_patterns=(
            "DO NOT use Astro for highly interactive SPAs",
            "DO NOT add client:load to every component",
        ),
    ),
    Framework.REMIX: FrameworkProfile(
        name="Remix",
        project_structure="""app/
├── routes/
├── components/
├── models/
├── root.tsx
└── entry.server.tsx
public/""",
        best_practices=(
            "Use the loader/action pattern for data flow",
            "Leverage nested routing for layouts",
            "Use the Form component for progressive enhancement",
            "Implement error boundaries per route",
        ),
        error_patterns=(
            "Not returning Response objects from loaders/actions",
            "Waterfall data fetching in nested routes",
        ),
        anti_patterns=(
            "DO NOT use useEffect for data fetching; use loaders",
            "DO NOT bypass the Remix data flow with client-side fetch",
        ),
    ),
    Framework.SVELTEKIT: FrameworkProfile(
        name="SvelteKit",
        project_structure="""src/
├── routes/
├── lib/
│   ├── components/
│   └── server/
└── hooks.server.ts
static/""",
        best_practices=(
            "Use +page.server.ts for server-side data loading",
            "Use form actions for mutations",
            "Leverage SvelteKit adapters for deployment",
        ),
        error_patterns=(
            "Importing $app/environment in the wrong context",
            "Not handling form action responses properly",
        ),
        anti_patterns=(
            "DO NOT use onMount for data fetching; use load functions",
            "DO NOT store secrets in $env/static/public",
        ),
    ),
    Framework.GATSBY: FrameworkProfile(
        name="Gatsby",
        project_structure="""src/
├── components/
├── pages/
└── templates/
gatsby-config.ts
gatsby-node.ts
gatsby-browser.ts""",
        best_practices=(
            "Use the GraphQL data layer for content",
            "Implement image optimization with gatsby-plugin-image",
            "Use static queries for component-level data",
        ),
        error_patterns=(
            "Build failures due to missing GraphQL fields",
            "Window reference errors during SSG",
        ),
        anti_patterns=(
            "DO NOT use Gatsby for dynamic content-heavy sites",
            "DO NOT ignore build-time performance",
        ),
    ),
    Framework.WORDPRESS: FrameworkProfile(
        name="WordPress (Headless)",
        project_structure="""wordpress/
├── wp-content/themes/
└── wp-content/plugins/
frontend/                # Headless frontend""",
        best_practices=(
            "Use the WPGraphQL plugin for efficient data fetching",
            "Implement ISR for content updates",
            "Separate WordPress backend from frontend deployment",
        ),
        error_patterns=(
            "CORS issues between WordPress and the frontend",
            "Authentication token expiry handling",
        ),
        anti_patterns=(
            "DO NOT expose wp-admin to the public internet without IP restriction",
            "DO NOT install untrusted plugins",
        ),
    ),
    Framework.SHOPIFY: FrameworkProfile(
        name="Shopify (Hydrogen/Storefront)",
        project_structure="""app/
├── routes/
├── components/
├── lib/
└── root.tsx
public/""",
        best_practices=(
            "Use the Storefront API for product data",
            "Implement the cart with the Shopify Cart API",
            "Use Shopify Analytics for tracking",
        ),
        error_patterns=(
            "Rate limiting on the Storefront API",
            "Stale product data from aggressive caching",
        ),
        anti_patterns=(
            "DO NOT bypass Shopify checkout; it handles PCI compliance",
            "DO NOT store customer data outside Shopify",
        ),
    ),
    Framework.CUSTOM: FrameworkProfile(
        name="Custom",
        project_structure="""src/
├── pages/
├── components/
├── lib/
└── server/
public/""",
        best_practices=(
            "Follow framework-specific best practices",
            "Implement proper error handling",
        ),
        error_patterns=("Configuration issues", "Dependency conflicts"),
        anti_patterns=(
            "DO NOT skip error handling",
            "DO NOT ignore security best practices",
        ),
    ),
}


def engine_profile(engine: Optional[Engine]) -> EngineProfile:
    """Profile for `engine`; the custom profile when unset."""
    return ENGINE_PROFILES.get(engine, ENGINE_PROFILES[Engine.CUSTOM])


def framework_profile(framework: Optional[Framework]) -> FrameworkProfile:
    """Profile for `framework`; the custom profile when unset."""
    return FRAMEWORK_PROFILES.get(framework, FRAMEWORK_PROFILES[Framework.CUSTOM])
