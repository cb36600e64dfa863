"""Website configuration contract."""

from collections import Counter
from typing import Dict, Literal, Optional, Tuple

from pydantic import Field, field_validator

from .base import ConfigSection, HexColor
from .options import (
    AiFeature,
    AiProvider,
    Analytics,
    AnimationLevel,
    ApiStyle,
    AssetCategory,
    AudienceType,
    AuthMethod,
    AuthProvider,
    Backups,
    BrandTone,
    BusinessModule,
    Caching,
    Cdn,
    ChatWidget,
    CheckoutStyle,
    CiProvider,
    CmsProvider,
    ColorTheme,
    CommunicationChannel,
    Compliance,
    ComponentLibrary,
    ContentType,
    Crm,
    Database,
    DeployEnvironment,
    DesignSystem,
    DirectoryProvider,
    DistributionChannel,
    ECOMMERCE_TYPES,
    EmailProvider,
    FooterStyle,
    Framework,
    Hosting,
    Industry,
    LayoutStyle,
    Marketing,
    Monitoring,
    NavigationStyle,
    Orm,
    PackageManager,
    PaymentProcessor,
    ProductType,
    Scaling,
    SearchProvider,
    SeoStrategy,
    StorageProvider,
    StructuredData,
    Styling,
    WebsiteType,
)

MAX_ASSET_BYTES = 5 * 1024 * 1024
MAX_ASSETS = 23

# Per-category upload limits for corporate identity assets
ASSET_CATEGORY_LIMITS: Dict[AssetCategory, int] = {
    AssetCategory.LOGO: 1,
    AssetCategory.LETTERHEAD: 1,
    AssetCategory.FONT: 5,
    AssetCategory.PPTX_MASTER: 1,
    AssetCategory.STYLE_EXAMPLE: 10,
    AssetCategory.OTHER: 5,
}


class BrandAsset(ConfigSection):
    """An uploaded corporate identity file (metadata only)."""
    id: str = Field(..., min_length=1, max_length=64)
    category: AssetCategory
    file_name: str = Field(..., min_length=1, max_length=255)
    file_type: str = Field(default="", max_length=100)
    file_size: int = Field(default=0, ge=0, le=MAX_ASSET_BYTES, description="Size in bytes")
    preview: Optional[str] = Field(default=None, max_length=1_000_000, description="Data URL thumbnail")


class CorporateIdentityConfig(ConfigSection):
    """Brand assets and brand rules supplied by the customer."""
    assets: Tuple[BrandAsset, ...] = Field(default_factory=tuple, max_length=MAX_ASSETS)
    brand_colors: Tuple[HexColor, ...] = Field(default_factory=tuple, max_length=20)
    font_primary: str = Field(default="", max_length=100)
    font_secondary: str = Field(default="", max_length=100)
    brand_url: str = Field(default="", max_length=500)
    brand_notes: str = Field(default="", max_length=2000)

    @field_validator("assets")
    @classmethod
    def enforce_category_limits(cls, assets: Tuple[BrandAsset, ...]) -> Tuple[BrandAsset, ...]:
        """Each asset category has its own maximum file count."""
        counts = Counter(asset.category for asset in assets)
        for category, limit in ASSET_CATEGORY_LIMITS.items():
            if counts[category] > limit:
                raise ValueError(
                    f"Too many '{category.value}' assets: {counts[category]} (max {limit})"
                )
        return assets


class WebsiteConfig(ConfigSection):
    """Complete website project configuration."""

    kind: Literal["website"] = "website"

    # Identity
    website_types: Tuple[WebsiteType, ...] = Field(default_factory=tuple, max_length=4)
    industry: Optional[Industry] = None
    target_audience: Optional[AudienceType] = None
    elevator_pitch: str = Field(default="", max_length=1000)
    site_name: str = Field(default="", max_length=120)

    # Branding
    primary_color: HexColor = "#2563eb"
    secondary_color: HexColor = "#64748b"
    font_heading: str = Field(default="", max_length=100)
    font_body: str = Field(default="", max_length=100)
    brand_tone: Optional[BrandTone] = None
    custom_domain: str = Field(default="", max_length=253)
    corporate_identity: CorporateIdentityConfig = Field(default_factory=CorporateIdentityConfig)

    # Layout & design
    layout_style: Optional[LayoutStyle] = None
    navigation_style: Optional[NavigationStyle] = None
    footer_style: Optional[FooterStyle] = None
    page_structure: Tuple[str, ...] = Field(default_factory=tuple, max_length=30)
    theme: Optional[ColorTheme] = None
    design_system: Optional[DesignSystem] = None
    animation_level: Optional[AnimationLevel] = None

    # Content
    content_types: Tuple[ContentType, ...] = Field(default_factory=tuple, max_length=6)
    cms_provider: Optional[CmsProvider] = None
    blog_enabled: bool = False
    i18n_enabled: bool = Field(default=False, alias="i18nEnabled")
    i18n_languages: Tuple[str, ...] = Field(default_factory=tuple, max_length=30, alias="i18nLanguages")
    search_enabled: bool = False
    search_provider: Optional[SearchProvider] = None

    # Stack
    framework: Optional[Framework] = None
    language: str = Field(default="typescript", max_length=50)
    styling: Optional[Styling] = None
    component_library: Optional[ComponentLibrary] = None
    package_manager: Optional[PackageManager] = None
    monorepo: bool = False

    # Backend
    database: Optional[Database] = None
    orm: Optional[Orm] = None
    auth: Optional[AuthProvider] = None
    auth_methods: Tuple[AuthMethod, ...] = Field(default_factory=tuple, max_length=9)
    storage_provider: Optional[StorageProvider] = None
    api_style: Optional[ApiStyle] = None

    # Integrations
    email_provider: Optional[EmailProvider] = None
    analytics: Tuple[Analytics, ...] = Field(default_factory=tuple, max_length=5)
    monitoring: Optional[Monitoring] = None
    crm: Optional[Crm] = None
    marketing: Tuple[Marketing, ...] = Field(default_factory=tuple, max_length=4)
    chat_widget: Optional[ChatWidget] = None

    # Commerce
    product_type: Optional[ProductType] = None
    payment_processor: Optional[PaymentProcessor] = None
    checkout_style: Optional[CheckoutStyle] = None
    currencies: Tuple[str, ...] = Field(default_factory=tuple, max_length=10)
    subscription_billing: bool = False
    coupons: bool = False
    reviews: bool = False
    variants: bool = False
    international_shipping: bool = False

    # SEO
    seo_strategy: Optional[SeoStrategy] = None
    structured_data: Tuple[StructuredData, ...] = Field(default_factory=tuple, max_length=6)
    sitemap: bool = False
    robots_txt: bool = False
    open_graph: bool = False

    # Security & performance
    ssl: bool = True
    csp: bool = False
    rate_limiting: bool = False
    ddos_protection: bool = False
    waf: bool = False
    backups: Optional[Backups] = None
    compliance: Tuple[Compliance, ...] = Field(default_factory=tuple, max_length=5)
    cdn: Optional[Cdn] = None
    caching: Optional[Caching] = None

    # Hosting & deployment
    hosting: Optional[Hosting] = None
    ci: Optional[CiProvider] = None
    environments: Tuple[DeployEnvironment, ...] = Field(default_factory=tuple, max_length=4)
    containerized: bool = False
    region: str = Field(default="", max_length=100)
    scaling: Optional[Scaling] = None
    distribution_channels: Tuple[DistributionChannel, ...] = Field(default_factory=tuple, max_length=6)

    # AI
    ai_features: Tuple[AiFeature, ...] = Field(default_factory=tuple, max_length=6)
    ai_provider: Optional[AiProvider] = None

    # Business service portal
    business_modules: Tuple[BusinessModule, ...] = Field(default_factory=tuple, max_length=6)
    directory_provider: Optional[DirectoryProvider] = None
    communication_channels: Tuple[CommunicationChannel, ...] = Field(default_factory=tuple, max_length=5)

    # Briefing
    detailed_description: str = Field(default="", max_length=2000)
    target_pages: str = Field(default="", max_length=2000)
    reference_websites: str = Field(default="", max_length=2000)
    constraints: str = Field(default="", max_length=2000)
    additional_notes: str = Field(default="", max_length=2000)

    @property
    def is_ecommerce(self) -> bool:
        return any(t in ECOMMERCE_TYPES for t in self.website_types)

    @property
    def is_business_service(self) -> bool:
        return WebsiteType.BUSINESS_SERVICE in self.website_types
