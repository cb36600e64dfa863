"""Option sets for single- and multi-choice configuration fields.

Each enum value is the wire value; `option_label` gives the display label
used in analysis messages and generated documents.
"""

from enum import Enum
from typing import Dict, Iterable, Optional, Type


# --- Game options ---


class Theme(str, Enum):
    """Setting / atmosphere of a game."""
    FANTASY = "fantasy"
    SCI_FI = "sci-fi"
    HORROR = "horror"
    POST_APOCALYPTIC = "post-apocalyptic"
    MEDIEVAL = "medieval"
    CYBERPUNK = "cyberpunk"
    STEAMPUNK = "steampunk"
    MYTHOLOGY = "mythology"
    PIRATES = "pirates"
    WESTERN = "western"
    CARTOON = "cartoon"
    MILITARY = "military"
    NATURE = "nature"
    ABSTRACT = "abstract"
    URBAN = "urban"


class NarrativeFocus(str, Enum):
    STORY_DRIVEN = "story-driven"
    LORE_HEAVY = "lore-heavy"
    MINIMAL = "minimal"
    EMERGENT = "emergent"
    NONE = "none"


class StoryStructure(str, Enum):
    LINEAR = "linear"
    BRANCHING = "branching"
    OPEN_ENDED = "open-ended"
    EPISODIC = "episodic"
    PROCEDURAL = "procedural"


class VictoryCondition(str, Enum):
    BOSS_DEFEAT = "boss-defeat"
    STORY_COMPLETION = "story-completion"
    SCORE_BASED = "score-based"
    SURVIVAL = "survival"
    SANDBOX = "sandbox"
    COMPETITIVE = "competitive"
    COMPLETION = "completion"


class Genre(str, Enum):
    """Game genre."""
    ACTION = "action"
    ADVENTURE = "adventure"
    RPG = "rpg"
    STRATEGY = "strategy"
    SIMULATION = "simulation"
    PUZZLE = "puzzle"
    PLATFORMER = "platformer"
    SHOOTER = "shooter"
    FIGHTING = "fighting"
    RACING = "racing"
    SPORTS = "sports"
    SURVIVAL = "survival"
    HORROR = "horror"
    STEALTH = "stealth"
    SANDBOX = "sandbox"
    ROGUELIKE = "roguelike"
    RHYTHM = "rhythm"
    TOWER_DEFENSE = "tower-defense"
    VISUAL_NOVEL = "visual-novel"
    IDLE = "idle"


class Platform(str, Enum):
    """Target platform."""
    PC_WINDOWS = "pc-windows"
    PC_MAC = "pc-mac"
    PC_LINUX = "pc-linux"
    WEB = "web"
    MOBILE_IOS = "mobile-ios"
    MOBILE_ANDROID = "mobile-android"
    CONSOLE_PLAYSTATION = "console-playstation"
    CONSOLE_XBOX = "console-xbox"
    CONSOLE_SWITCH = "console-switch"
    VR = "vr"


class Dimension(str, Enum):
    TWO_D = "2d"
    TWO_AND_HALF_D = "2.5d"
    THREE_D = "3d"


class ArtStyle(str, Enum):
    PIXEL_ART = "pixel-art"
    HAND_DRAWN = "hand-drawn"
    CEL_SHADED = "cel-shaded"
    REALISTIC = "realistic"
    LOW_POLY = "low-poly"
    VOXEL = "voxel"
    VECTOR = "vector"
    ANIME = "anime"
    MINIMALIST = "minimalist"
    STYLIZED = "stylized"


class CameraStyle(str, Enum):
    """Camera perspective; valid choices depend on the dimension."""
    SIDE_SCROLL = "side-scroll"
    TOP_DOWN = "top-down"
    STATIC = "static"
    FREE_SCROLL = "free-scroll"
    ISOMETRIC = "isometric"
    FIRST_PERSON = "first-person"
    THIRD_PERSON = "third-person"
    ISOMETRIC_3D = "isometric-3d"
    TOP_DOWN_3D = "top-down-3d"
    FREE_CAMERA = "free-camera"
    FIXED_ANGLES = "fixed-angles"


class AnimationIntensity(str, Enum):
    SUBTLE = "subtle"
    MODERATE = "moderate"
    INTENSE = "intense"


class WorldStructure(str, Enum):
    OPEN_WORLD = "open-world"
    LEVEL_BASED = "level-based"
    HUB_AND_SPOKE = "hub-and-spoke"
    PROCEDURAL = "procedural"
    ROOM_BASED = "room-based"
    LINEAR_CORRIDOR = "linear-corridor"


class LevelGeneration(str, Enum):
    HAND_CRAFTED = "hand-crafted"
    PROCEDURAL = "procedural"
    HYBRID = "hybrid"
    USER_CREATED = "user-created"


class WorldScope(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    MASSIVE = "massive"


class PlayerMode(str, Enum):
    SINGLE_PLAYER = "single-player"
    LOCAL_MULTIPLAYER = "local-multiplayer"
    ONLINE_MULTIPLAYER = "online-multiplayer"
    ASYNC_MULTIPLAYER = "async-multiplayer"
    CO_OP = "co-op"
    MMO = "mmo"


class NetworkModel(str, Enum):
    PEER_TO_PEER = "peer-to-peer"
    CLIENT_SERVER = "client-server"
    RELAY = "relay"


class SyncType(str, Enum):
    LOCKSTEP = "lockstep"
    STATE_SYNC = "state-sync"
    SNAPSHOT = "snapshot"


class CoreMechanic(str, Enum):
    COMBAT_MELEE = "combat-melee"
    COMBAT_RANGED = "combat-ranged"
    COMBAT_MAGIC = "combat-magic"
    PLATFORMING = "platforming"
    PUZZLE_SOLVING = "puzzle-solving"
    RESOURCE_MANAGEMENT = "resource-management"
    BUILDING = "building"
    STEALTH = "stealth"
    DRIVING = "driving"
    DIALOGUE = "dialogue"
    EXPLORATION = "exploration"
    RHYTHM = "rhythm"
    CARD_BASED = "card-based"
    TURN_BASED = "turn-based"
    REAL_TIME_STRATEGY = "real-time-strategy"
    PHYSICS = "physics"


class SecondaryMechanic(str, Enum):
    CRAFTING = "crafting"
    TRADING = "trading"
    FARMING = "farming"
    FISHING = "fishing"
    COOKING = "cooking"
    COMPANIONS = "companions"
    PET_SYSTEM = "pet-system"
    PHOTOGRAPHY = "photography"
    MINI_GAMES = "mini-games"
    HACKING = "hacking"
    DIPLOMACY = "diplomacy"
    BASE_BUILDING = "base-building"
    WEATHER_SYSTEM = "weather-system"
    DAY_NIGHT = "day-night"
    REPUTATION = "reputation"


class ProgressionSystem(str, Enum):
    XP_LEVELS = "xp-levels"
    SKILL_TREE = "skill-tree"
    EQUIPMENT_LOOT = "equipment-loot"
    UNLOCK_SYSTEM = "unlock-system"
    PRESTIGE = "prestige"
    STORY_PROGRESS = "story-progress"
    ACHIEVEMENT = "achievement"
    MASTERY = "mastery"


class Difficulty(str, Enum):
    FIXED_EASY = "fixed-easy"
    FIXED_MEDIUM = "fixed-medium"
    FIXED_HARD = "fixed-hard"
    SELECTABLE = "selectable"
    ADAPTIVE = "adaptive"
    SCALING = "scaling"


class RewardType(str, Enum):
    CURRENCY = "currency"
    ITEMS = "items"
    COSMETICS = "cosmetics"
    ABILITIES = "abilities"
    STORY_CONTENT = "story-content"
    AREAS = "areas"


class MusicStyle(str, Enum):
    ORCHESTRAL = "orchestral"
    ELECTRONIC = "electronic"
    ROCK_METAL = "rock-metal"
    CHIPTUNE = "chiptune"
    AMBIENT = "ambient"
    JAZZ = "jazz"
    MINIMAL_DRONE = "minimal-drone"
    FOLK = "folk"
    HIP_HOP = "hip-hop"
    ADAPTIVE = "adaptive"


class SoundEffectStyle(str, Enum):
    REALISTIC = "realistic"
    STYLIZED = "stylized"
    RETRO = "retro"
    FOLEY = "foley"
    MINIMAL = "minimal"


class VoiceActing(str, Enum):
    FULL = "full"
    PARTIAL = "partial"
    GRUNTS = "grunts"
    NONE = "none"
    AI_GENERATED = "ai-generated"


class Engine(str, Enum):
    """Game engine."""
    UNITY = "unity"
    UNREAL = "unreal"
    GODOT = "godot"
    PHASER3 = "phaser3"
    THREEJS = "threejs"
    PIXIJS = "pixijs"
    GAMEMAKER = "gamemaker"
    RPGMAKER = "rpgmaker"
    CONSTRUCT = "construct"
    BEVY = "bevy"
    CUSTOM = "custom"


class TargetFps(str, Enum):
    FPS_30 = "30"
    FPS_60 = "60"
    FPS_120 = "120"
    UNCAPPED = "uncapped"


class AdditionalTech(str, Enum):
    RAY_TRACING = "ray-tracing"
    PHYSICS_ENGINE = "physics-engine"
    AI_NAVIGATION = "ai-navigation"
    NETWORKING = "networking"
    PROCEDURAL_GEN = "procedural-gen"
    MOD_SUPPORT = "mod-support"
    CLOUD_SAVE = "cloud-save"
    ANALYTICS = "analytics"
    WEBSOCKETS = "websockets"
    SERVICE_WORKER_OFFLINE = "service-worker-offline"


class BusinessModel(str, Enum):
    PREMIUM = "premium"
    FREE_TO_PLAY = "free-to-play"
    FREEMIUM = "freemium"
    BATTLE_PASS = "battle-pass"
    SUBSCRIPTION = "subscription"
    AD_SUPPORTED = "ad-supported"
    DONATION = "donation"
    OPEN_SOURCE = "open-source"


class Distribution(str, Enum):
    STEAM = "steam"
    EPIC = "epic"
    ITCH = "itch"
    APP_STORE = "app-store"
    GOOGLE_PLAY = "google-play"
    WEB = "web"
    GOG = "gog"
    CONSOLE_STORE = "console-store"


class InGameAi(str, Enum):
    NPC_BEHAVIOR = "npc-behavior"
    DYNAMIC_DIALOGUE = "dynamic-dialogue"
    PROCEDURAL_CONTENT = "procedural-content"
    ADAPTIVE_DIFFICULTY = "adaptive-difficulty"
    ENEMY_AI = "enemy-ai"
    MATCHMAKING = "matchmaking"
    NONE = "none"


class DevAi(str, Enum):
    CODE_GENERATION = "code-generation"
    ASSET_GENERATION = "asset-generation"
    TESTING = "testing"
    BALANCING = "balancing"
    LOCALIZATION = "localization"
    NONE = "none"


# --- Website options ---


class WebsiteType(str, Enum):
    """Kind of website being built."""
    CORPORATE = "corporate"
    PORTFOLIO = "portfolio"
    BLOG = "blog"
    ECOMMERCE = "ecommerce"
    SAAS_PRODUCT = "saas-product"
    LANDING_PAGE = "landing-page"
    MARKETPLACE = "marketplace"
    COMMUNITY = "community"
    DOCUMENTATION = "documentation"
    WEBAPP = "webapp"
    BUSINESS_SERVICE = "business-service"


class Industry(str, Enum):
    TECHNOLOGY = "technology"
    HEALTHCARE = "healthcare"
    FINANCE = "finance"
    EDUCATION = "education"
    RETAIL = "retail"
    REAL_ESTATE = "real-estate"
    FOOD_BEVERAGE = "food-beverage"
    TRAVEL = "travel"
    MEDIA_ENTERTAINMENT = "media-entertainment"
    NON_PROFIT = "non-profit"
    INTERNAL_SERVICES = "internal-services"


class AudienceType(str, Enum):
    B2B = "b2b"
    B2C = "b2c"
    DEVELOPERS = "developers"
    ENTERPRISE = "enterprise"
    STARTUPS = "startups"
    CREATORS = "creators"
    STUDENTS = "students"
    GENERAL = "general"


class BrandTone(str, Enum):
    PROFESSIONAL = "professional"
    PLAYFUL = "playful"
    MINIMAL = "minimal"
    BOLD = "bold"
    ELEGANT = "elegant"
    TECHNICAL = "technical"


class LayoutStyle(str, Enum):
    SIDEBAR = "sidebar"
    TOPNAV = "topnav"
    HERO_CENTRIC = "hero-centric"
    MAGAZINE = "magazine"
    DASHBOARD = "dashboard"
    MINIMAL = "minimal"


class NavigationStyle(str, Enum):
    STICKY = "sticky"
    FIXED = "fixed"
    HAMBURGER = "hamburger"
    MEGA_MENU = "mega-menu"
    BREADCRUMB = "breadcrumb"
    TABBED = "tabbed"


class FooterStyle(str, Enum):
    SIMPLE = "simple"
    MULTI_COLUMN = "multi-column"
    MINIMAL = "minimal"
    MEGA_FOOTER = "mega-footer"


class ColorTheme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class DesignSystem(str, Enum):
    MATERIAL = "material"
    FLUENT = "fluent"
    TAILWIND_FIRST = "tailwind-first"
    HUMAN_INTERFACE = "human-interface"
    CUSTOM = "custom"


class AnimationLevel(str, Enum):
    NONE = "none"
    SUBTLE = "subtle"
    MODERATE = "moderate"
    RICH = "rich"


class ContentType(str, Enum):
    STATIC = "static"
    BLOG = "blog"
    CMS = "cms"
    USER_GENERATED = "user-generated"
    DOCUMENTATION = "documentation"
    WIKI = "wiki"


class CmsProvider(str, Enum):
    NONE = "none"
    SANITY = "sanity"
    STRAPI = "strapi"
    CONTENTFUL = "contentful"
    PAYLOAD = "payload"
    WORDPRESS_HEADLESS = "wordpress-headless"
    DIRECTUS = "directus"
    KEYSTATIC = "keystatic"


class SearchProvider(str, Enum):
    NONE = "none"
    ALGOLIA = "algolia"
    TYPESENSE = "typesense"
    MEILISEARCH = "meilisearch"
    BUILT_IN = "built-in"


class Framework(str, Enum):
    """Web framework."""
    NEXTJS = "nextjs"
    NUXT = "nuxt"
    ASTRO = "astro"
    REMIX = "remix"
    SVELTEKIT = "sveltekit"
    GATSBY = "gatsby"
    WORDPRESS = "wordpress"
    SHOPIFY = "shopify"
    CUSTOM = "custom"


class Styling(str, Enum):
    TAILWINDCSS = "tailwindcss"
    CSS_MODULES = "css-modules"
    STYLED_COMPONENTS = "styled-components"
    SASS = "sass"
    EMOTION = "emotion"
    VANILLA = "vanilla"


class ComponentLibrary(str, Enum):
    SHADCN = "shadcn"
    MUI = "mui"
    CHAKRA = "chakra"
    MANTINE = "mantine"
    RADIX = "radix"
    HEADLESS_UI = "headless-ui"
    DAISYUI = "daisyui"
    CUSTOM = "custom"
    NONE = "none"


class PackageManager(str, Enum):
    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"


class Database(str, Enum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    MONGODB = "mongodb"
    SQLITE = "sqlite"
    SUPABASE = "supabase"
    FIREBASE = "firebase"
    PLANETSCALE = "planetscale"
    TURSO = "turso"
    NONE = "none"


class Orm(str, Enum):
    PRISMA = "prisma"
    DRIZZLE = "drizzle"
    TYPEORM = "typeorm"
    MONGOOSE = "mongoose"
    NONE = "none"


class AuthProvider(str, Enum):
    SUPABASE_AUTH = "supabase-auth"
    NEXTAUTH = "nextauth"
    CLERK = "clerk"
    AUTH0 = "auth0"
    FIREBASE_AUTH = "firebase-auth"
    LUCIA = "lucia"
    LDAP = "ldap"
    CUSTOM = "custom"
    NONE = "none"


class AuthMethod(str, Enum):
    EMAIL = "email"
    GOOGLE = "google"
    GITHUB = "github"
    APPLE = "apple"
    MICROSOFT = "microsoft"
    MAGIC_LINK = "magic-link"
    SMS = "sms"
    LDAP_BIND = "ldap-bind"
    SAML = "saml"


class StorageProvider(str, Enum):
    SUPABASE_STORAGE = "supabase-storage"
    S3 = "s3"
    CLOUDINARY = "cloudinary"
    UPLOADTHING = "uploadthing"
    NONE = "none"


class ApiStyle(str, Enum):
    REST = "rest"
    GRAPHQL = "graphql"
    TRPC = "trpc"
    SERVER_ACTIONS = "server-actions"


class EmailProvider(str, Enum):
    RESEND = "resend"
    SENDGRID = "sendgrid"
    POSTMARK = "postmark"
    SES = "ses"
    NONE = "none"


class Analytics(str, Enum):
    GOOGLE_ANALYTICS = "google-analytics"
    PLAUSIBLE = "plausible"
    UMAMI = "umami"
    POSTHOG = "posthog"
    MIXPANEL = "mixpanel"
    NONE = "none"


class Monitoring(str, Enum):
    SENTRY = "sentry"
    DATADOG = "datadog"
    LOGROCKET = "logrocket"
    NONE = "none"


class Crm(str, Enum):
    NONE = "none"
    HUBSPOT = "hubspot"
    SALESFORCE = "salesforce"
    PIPEDRIVE = "pipedrive"


class Marketing(str, Enum):
    MAILCHIMP = "mailchimp"
    CONVERTKIT = "convertkit"
    LEMONSQUEEZY = "lemonsqueezy"
    NONE = "none"


class ChatWidget(str, Enum):
    NONE = "none"
    INTERCOM = "intercom"
    CRISP = "crisp"
    TAWK = "tawk"
    ZENDESK = "zendesk"


class ProductType(str, Enum):
    PHYSICAL = "physical"
    DIGITAL = "digital"
    SUBSCRIPTION = "subscription"
    SERVICE = "service"
    MIXED = "mixed"


class PaymentProcessor(str, Enum):
    STRIPE = "stripe"
    PAYPAL = "paypal"
    SQUARE = "square"
    MOLLIE = "mollie"
    ADYEN = "adyen"
    LEMONSQUEEZY = "lemonsqueezy"


class CheckoutStyle(str, Enum):
    ONE_PAGE = "one-page"
    MULTI_STEP = "multi-step"
    DRAWER = "drawer"
    REDIRECT = "redirect"


class SeoStrategy(str, Enum):
    BASIC = "basic"
    ADVANCED = "advanced"
    PROGRAMMATIC = "programmatic"


class StructuredData(str, Enum):
    ORGANIZATION = "organization"
    PRODUCT = "product"
    ARTICLE = "article"
    FAQ = "faq"
    BREADCRUMB = "breadcrumb"
    LOCAL_BUSINESS = "local-business"


class Backups(str, Enum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    CONTINUOUS = "continuous"


class Compliance(str, Enum):
    GDPR = "gdpr"
    CCPA = "ccpa"
    PCI_DSS = "pci-dss"
    HIPAA = "hipaa"
    SOC2 = "soc2"


class Cdn(str, Enum):
    NONE = "none"
    CLOUDFLARE = "cloudflare"
    VERCEL_EDGE = "vercel-edge"
    FASTLY = "fastly"
    AWS_CLOUDFRONT = "aws-cloudfront"


class Caching(str, Enum):
    NONE = "none"
    ISR = "isr"
    SWR = "swr"
    CDN_CACHE = "cdn-cache"
    REDIS = "redis"


class Hosting(str, Enum):
    """Hosting target."""
    VERCEL = "vercel"
    NETLIFY = "netlify"
    AWS = "aws"
    GCP = "gcp"
    AZURE = "azure"
    RAILWAY = "railway"
    FLY_IO = "fly-io"
    SELF_HOSTED = "self-hosted"
    CLOUDFLARE_PAGES = "cloudflare-pages"


class CiProvider(str, Enum):
    GITHUB_ACTIONS = "github-actions"
    GITLAB_CI = "gitlab-ci"
    CIRCLECI = "circleci"
    VERCEL_AUTO = "vercel-auto"
    NONE = "none"


class DeployEnvironment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    PREVIEW = "preview"


class Scaling(str, Enum):
    SERVERLESS = "serverless"
    AUTO = "auto"
    FIXED = "fixed"


class DistributionChannel(str, Enum):
    WEB_CUSTOM = "web-custom"
    PWA = "pwa"
    CDN_GLOBAL = "cdn-global"
    DOCKER_REGISTRY = "docker-registry"
    APP_STORE_IOS = "app-store-ios"
    GOOGLE_PLAY = "google-play"
    CHROME_WEB_STORE = "chrome-web-store"
    NPM = "npm"
    GITHUB_PAGES = "github-pages"
    LAN_SERVER = "lan-server"
    LOCAL_DOCKER = "local-docker"
    USB_PORTABLE = "usb-portable"
    NETWORK_SHARE = "network-share"
    INTRANET = "intranet"


class AiFeature(str, Enum):
    CHATBOT = "chatbot"
    CONTENT_GENERATION = "content-generation"
    IMAGE_GENERATION = "image-generation"
    SEARCH = "search"
    RECOMMENDATIONS = "recommendations"
    TRANSLATION = "translation"


class AiProvider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    LOCAL = "local"
    NONE = "none"


class BusinessModule(str, Enum):
    ADMIN_AREA = "admin-area"
    FORM_BUILDER = "form-builder"
    SIGNATURE_BUILDER = "signature-builder"
    TRAVEL_EXPENSES = "travel-expenses"
    EMPLOYEE_BUDGET = "employee-budget"
    SICK_LEAVE = "sick-leave"


class DirectoryProvider(str, Enum):
    LDAP_SELFHOSTED = "ldap-selfhosted"
    ENTRA_ID = "entra-id"
    AZURE_AD = "azure-ad"
    OKTA = "okta"
    NONE = "none"


class CommunicationChannel(str, Enum):
    TEAMS = "teams"
    SLACK = "slack"
    EMAIL = "email"
    WEBHOOK = "webhook"
    NONE = "none"


class AssetCategory(str, Enum):
    """Corporate identity asset category."""
    LOGO = "logo"
    LETTERHEAD = "letterhead"
    FONT = "font"
    PPTX_MASTER = "pptx-master"
    STYLE_EXAMPLE = "style-example"
    OTHER = "other"


# Groupings used by rule tables
CONSOLE_PLATFORMS = frozenset({
    Platform.CONSOLE_PLAYSTATION, Platform.CONSOLE_XBOX, Platform.CONSOLE_SWITCH,
})
MOBILE_PLATFORMS = frozenset({Platform.MOBILE_IOS, Platform.MOBILE_ANDROID})
PC_PLATFORMS = frozenset({Platform.PC_WINDOWS, Platform.PC_MAC, Platform.PC_LINUX})
ONLINE_PLAYER_MODES = frozenset({
    PlayerMode.ONLINE_MULTIPLAYER, PlayerMode.ASYNC_MULTIPLAYER, PlayerMode.CO_OP, PlayerMode.MMO,
})
MULTIPLAYER_MODES = ONLINE_PLAYER_MODES | {PlayerMode.LOCAL_MULTIPLAYER}
SIMPLE_ENGINES = frozenset({
    Engine.PHASER3, Engine.PIXIJS, Engine.RPGMAKER, Engine.CONSTRUCT, Engine.GAMEMAKER,
})
WEB_ENGINES = frozenset({Engine.PHASER3, Engine.PIXIJS, Engine.THREEJS})
CAMERAS_2D = frozenset({
    CameraStyle.SIDE_SCROLL, CameraStyle.TOP_DOWN, CameraStyle.STATIC, CameraStyle.FREE_SCROLL,
})
CAMERAS_3D = frozenset({
    CameraStyle.FIRST_PERSON, CameraStyle.THIRD_PERSON, CameraStyle.ISOMETRIC_3D,
    CameraStyle.TOP_DOWN_3D, CameraStyle.FREE_CAMERA, CameraStyle.FIXED_ANGLES,
})
ECOMMERCE_TYPES = frozenset({WebsiteType.ECOMMERCE, WebsiteType.MARKETPLACE, WebsiteType.SAAS_PRODUCT})
LOCAL_DISTRIBUTION_CHANNELS = frozenset({
    DistributionChannel.LAN_SERVER, DistributionChannel.LOCAL_DOCKER,
    DistributionChannel.USB_PORTABLE, DistributionChannel.NETWORK_SHARE,
    DistributionChannel.INTRANET,
})


# Labels that are not the title-cased wire value. Keyed per enum type because
# str-valued members of different enums compare equal ("none", "custom", ...).
OPTION_LABELS: Dict[Type[Enum], Dict[str, str]] = {
    Theme: {"sci-fi": "Sci-Fi", "post-apocalyptic": "Post-Apocalyptic"},
    NarrativeFocus: {"story-driven": "Story-Driven", "lore-heavy": "Lore-Heavy", "none": "No Narrative"},
    StoryStructure: {"open-ended": "Open-Ended"},
    VictoryCondition: {
        "story-completion": "Story Complete",
        "score-based": "High Score",
        "completion": "100% Completion",
    },
    Genre: {"rpg": "RPG", "idle": "Idle/Incremental"},
    Platform: {
        "pc-windows": "PC (Windows)",
        "pc-mac": "PC (macOS)",
        "pc-linux": "PC (Linux)",
        "web": "Web Browser",
        "mobile-ios": "iOS",
        "mobile-android": "Android",
        "console-playstation": "PlayStation",
        "console-xbox": "Xbox",
        "console-switch": "Nintendo Switch",
        "vr": "VR",
    },
    Dimension: {"2d": "2D", "2.5d": "2.5D", "3d": "3D"},
    ArtStyle: {"hand-drawn": "Hand-Drawn", "cel-shaded": "Cel-Shaded", "low-poly": "Low-Poly"},
    CameraStyle: {
        "side-scroll": "Side-Scroll",
        "top-down": "Top-Down",
        "static": "Static Screen",
        "first-person": "First-Person",
        "third-person": "Third-Person",
        "isometric-3d": "Isometric 3D",
        "top-down-3d": "Top-Down 3D",
    },
    WorldStructure: {"hub-and-spoke": "Hub & Spoke", "level-based": "Level-Based", "room-based": "Room-Based"},
    LevelGeneration: {"hand-crafted": "Hand-Crafted", "user-created": "User-Created"},
    PlayerMode: {"single-player": "Single-Player", "co-op": "Co-op", "mmo": "MMO"},
    NetworkModel: {"peer-to-peer": "Peer-to-Peer", "client-server": "Client-Server"},
    SyncType: {"snapshot": "Snapshot Interpolation"},
    CoreMechanic: {
        "resource-management": "Resource Mgmt",
        "driving": "Driving/Racing",
        "rhythm": "Rhythm/Music",
        "card-based": "Card-Based",
        "turn-based": "Turn-Based",
    },
    SecondaryMechanic: {"mini-games": "Mini-Games", "weather-system": "Weather", "day-night": "Day/Night Cycle"},
    ProgressionSystem: {
        "xp-levels": "XP & Levels",
        "equipment-loot": "Equipment/Loot",
        "unlock-system": "Unlocks",
        "prestige": "Prestige/Reset",
        "achievement": "Achievements",
    },
    RewardType: {"items": "Items/Loot", "areas": "New Areas"},
    MusicStyle: {
        "rock-metal": "Rock/Metal",
        "minimal-drone": "Minimal/Drone",
        "folk": "Folk/Acoustic",
        "adaptive": "Adaptive/Dynamic",
    },
    VoiceActing: {"full": "Full Voice Acting", "grunts": "Grunts/Emotes", "ai-generated": "AI Generated"},
    Engine: {
        "unreal": "Unreal Engine",
        "phaser3": "Phaser 3",
        "threejs": "Three.js",
        "pixijs": "PixiJS",
        "gamemaker": "GameMaker",
        "rpgmaker": "RPG Maker",
        "custom": "Custom Engine",
    },
    TargetFps: {"30": "30 FPS", "60": "60 FPS", "120": "120 FPS"},
    AdditionalTech: {
        "ai-navigation": "AI Navigation",
        "websockets": "WebSockets",
        "service-worker-offline": "Service Worker / Offline",
    },
    BusinessModel: {"free-to-play": "Free-to-Play", "ad-supported": "Ad-Supported", "donation": "Donation-Based"},
    Distribution: {
        "epic": "Epic Games Store",
        "itch": "itch.io",
        "web": "Web (Self-Hosted)",
        "gog": "GOG",
        "console-store": "Console Stores",
    },
    InGameAi: {"npc-behavior": "NPC Behavior", "enemy-ai": "Advanced Enemy AI"},
    DevAi: {"testing": "AI Testing", "balancing": "Game Balancing"},
    WebsiteType: {
        "ecommerce": "E-Commerce",
        "saas-product": "SaaS Product",
        "webapp": "Web App",
        "business-service": "Business Service Portal",
    },
    Industry: {
        "food-beverage": "Food & Beverage",
        "media-entertainment": "Media & Entertainment",
        "non-profit": "Non-Profit",
        "internal-services": "Internal Services / HR",
    },
    AudienceType: {"b2b": "B2B", "b2c": "B2C", "general": "General Public"},
    LayoutStyle: {"topnav": "Top Navigation"},
    DesignSystem: {"material": "Material Design", "fluent": "Fluent Design", "custom": "Custom System"},
    ContentType: {"static": "Static Pages", "cms": "CMS-Managed", "user-generated": "User-Generated"},
    CmsProvider: {"wordpress-headless": "WordPress (Headless)"},
    Framework: {"nextjs": "Next.js", "sveltekit": "SvelteKit", "wordpress": "WordPress"},
    Styling: {
        "tailwindcss": "Tailwind CSS",
        "css-modules": "CSS Modules",
        "sass": "Sass/SCSS",
        "vanilla": "Vanilla CSS",
    },
    ComponentLibrary: {
        "shadcn": "shadcn/ui",
        "mui": "Material UI",
        "chakra": "Chakra UI",
        "radix": "Radix UI",
        "daisyui": "daisyUI",
    },
    PackageManager: {"npm": "npm", "pnpm": "pnpm"},
    Database: {
        "postgresql": "PostgreSQL",
        "mysql": "MySQL",
        "mongodb": "MongoDB",
        "sqlite": "SQLite",
        "planetscale": "PlanetScale",
    },
    Orm: {"typeorm": "TypeORM"},
    AuthProvider: {
        "supabase-auth": "Supabase Auth",
        "nextauth": "NextAuth.js",
        "auth0": "Auth0",
        "firebase-auth": "Firebase Auth",
        "ldap": "LDAP / Active Directory",
        "custom": "Custom Auth",
    },
    AuthMethod: {
        "email": "Email & Password",
        "github": "GitHub",
        "sms": "SMS OTP",
        "ldap-bind": "LDAP Bind",
        "saml": "SAML SSO",
    },
    StorageProvider: {"s3": "AWS S3", "uploadthing": "UploadThing"},
    ApiStyle: {"rest": "REST", "graphql": "GraphQL", "trpc": "tRPC"},
    EmailProvider: {"sendgrid": "SendGrid", "ses": "Amazon SES"},
    Analytics: {"posthog": "PostHog"},
    Monitoring: {"logrocket": "LogRocket"},
    Crm: {"hubspot": "HubSpot"},
    Marketing: {"convertkit": "ConvertKit", "lemonsqueezy": "Lemon Squeezy"},
    ChatWidget: {"tawk": "Tawk.to"},
    PaymentProcessor: {"paypal": "PayPal", "lemonsqueezy": "Lemon Squeezy"},
    CheckoutStyle: {"one-page": "One Page", "multi-step": "Multi-Step"},
    StructuredData: {"faq": "FAQ"},
    Compliance: {"gdpr": "GDPR", "ccpa": "CCPA", "pci-dss": "PCI-DSS", "hipaa": "HIPAA", "soc2": "SOC 2"},
    Cdn: {"vercel-edge": "Vercel Edge Network", "aws-cloudfront": "AWS CloudFront"},
    Caching: {"isr": "ISR", "swr": "SWR", "cdn-cache": "CDN Cache"},
    Hosting: {"aws": "AWS", "gcp": "Google Cloud", "fly-io": "Fly.io", "self-hosted": "Self-Hosted"},
    CiProvider: {"github-actions": "GitHub Actions", "gitlab-ci": "GitLab CI", "circleci": "CircleCI"},
    Scaling: {"auto": "Auto-Scaling"},
    DistributionChannel: {
        "web-custom": "Web (Custom Domain)",
        "pwa": "PWA",
        "cdn-global": "CDN (Global)",
        "app-store-ios": "App Store (iOS)",
        "npm": "npm",
        "github-pages": "GitHub Pages",
        "lan-server": "LAN Server",
        "usb-portable": "USB / Portable",
        "intranet": "Intranet Portal",
    },
    AiFeature: {"search": "AI Search"},
    AiProvider: {"openai": "OpenAI", "google": "Google AI", "local": "Local / Self-Hosted"},
    DirectoryProvider: {
        "ldap-selfhosted": "LDAP (Self-Hosted)",
        "entra-id": "Entra ID",
        "azure-ad": "Azure AD (Legacy)",
    },
    CommunicationChannel: {"teams": "Microsoft Teams"},
    AssetCategory: {"pptx-master": "PowerPoint Master"},
}


def option_label(option: Optional[Enum]) -> str:
    """Display label for an option; "" for an unset choice."""
    if option is None:
        return ""
    overrides = OPTION_LABELS.get(type(option), {})
    if option.value in overrides:
        return overrides[option.value]
    return option.value.replace("-", " ").title()


def option_labels(options: Iterable[Enum]) -> str:
    """Comma-joined labels of a multi-choice selection."""
    return ", ".join(option_label(option) for option in options)


def is_chosen(option: Optional[Enum]) -> bool:
    """True when a single choice is set to something other than an explicit 'none'."""
    return option is not None and option.value != "none"
