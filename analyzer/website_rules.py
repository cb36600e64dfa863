"""Analysis rule tables for website configurations."""

from typing import Tuple

from contracts.options import (
    ApiStyle,
    AuthProvider,
    BusinessModule,
    Caching,
    Cdn,
    CiProvider,
    CmsProvider,
    Compliance,
    Database,
    DirectoryProvider,
    DistributionChannel,
    ECOMMERCE_TYPES,
    Framework,
    Hosting,
    is_chosen,
    LOCAL_DISTRIBUTION_CHANNELS,
    Monitoring,
    Orm,
    StructuredData,
    WebsiteType,
)
from contracts.report_contracts import Severity
from .rules import ConflictRule, RequirementRule, SuggestionRule, WeightedField, always

HOSTED_DATABASES = frozenset(d for d in Database if d != Database.NONE)
ACTIVE_DIRECTORIES = frozenset(d for d in DirectoryProvider if d != DirectoryProvider.NONE)


WEBSITE_WEIGHTS: Tuple[WeightedField, ...] = (
    WeightedField("siteName", 3),
    WeightedField("websiteTypes", 3),
    WeightedField("elevatorPitch", 2),
    WeightedField("framework", 2),
    WeightedField("industry", 1.5),
    WeightedField("targetAudience", 1.5),
    WeightedField("hosting", 2),
    WeightedField("pageStructure", 1),
    WeightedField("styling", 1),
    WeightedField("database", 1),
    WeightedField("auth", 1),
    WeightedField("layoutStyle", 1),
    WeightedField("designSystem", 1),
    WeightedField("seoStrategy", 1),
    WeightedField("ci", 1),
    WeightedField("analytics", 0.5),
    WeightedField("contentTypes", 0.5),
    WeightedField("compliance", 0.5),
    WeightedField("brandTone", 0.5),
)


WEBSITE_REQUIREMENTS: Tuple[RequirementRule, ...] = (
    RequirementRule(
        "website-type-required", always, ("websiteTypes",),
        "No website type selected. Please select at least one type.",
    ),
    RequirementRule(
        "framework-required", always, ("framework",),
        "No framework selected. Choose a framework to generate accurate documents.",
    ),
    RequirementRule(
        "payment-processor-for-ecommerce",
        lambda c: c.is_ecommerce,
        ("paymentProcessor",),
        "No payment processor selected for e-commerce website.",
        ("websiteTypes",),
    ),
    RequirementRule(
        "auth-methods-for-auth",
        lambda c: is_chosen(c.auth),
        ("authMethods",),
        "Auth provider selected but no authentication methods configured.",
        ("auth",),
    ),
    RequirementRule(
        "languages-for-i18n",
        lambda c: c.i18n_enabled,
        ("i18nLanguages",),
        "Internationalization enabled but no languages selected.",
        ("i18nEnabled",),
    ),
    RequirementRule(
        "auth-for-business-modules",
        lambda c: c.is_business_service and bool(c.business_modules),
        ("auth",),
        "Business service modules require authentication. Please select an auth provider.",
        ("businessModules",),
    ),
    RequirementRule(
        "provider-for-search",
        lambda c: c.search_enabled,
        ("searchProvider",),
        "Search is enabled but no search provider is selected.",
        ("searchEnabled",),
    ),
    RequirementRule(
        "provider-for-ai-features",
        lambda c: bool(c.ai_features),
        ("aiProvider",),
        "AI features are selected but no AI provider is configured.",
        ("aiFeatures",),
    ),
    RequirementRule(
        "auth-for-directory",
        lambda c: is_chosen(c.directory_provider),
        ("auth",),
        "A directory provider needs an auth provider to sign users in against it.",
        ("directoryProvider",),
    ),
    RequirementRule(
        "directory-for-sick-leave",
        lambda c: BusinessModule.SICK_LEAVE in c.business_modules,
        ("directoryProvider",),
        "Sick leave module works best with a directory provider for team notifications.",
        ("businessModules",),
    ),
)


WEBSITE_CONFLICTS: Tuple[ConflictRule, ...] = (
    ConflictRule(
        "framework", {Framework.ASTRO}, "apiStyle", {ApiStyle.GRAPHQL},
        "Astro has limited GraphQL support. Consider using REST or server-actions.",
    ),
    ConflictRule(
        "framework", {Framework.ASTRO}, "database", {Database.MONGODB},
        "MongoDB with Astro requires additional configuration. Consider SQLite or Turso for simpler setup.",
    ),
    ConflictRule(
        "framework", {Framework.WORDPRESS}, "orm", {Orm.PRISMA},
        "Prisma is not typically used with WordPress. WordPress uses its own database layer.",
    ),
    ConflictRule(
        "framework", {Framework.SHOPIFY}, "database", HOSTED_DATABASES,
        "Shopify manages its own database. External database selection ({b}) may not apply.",
    ),
    ConflictRule(
        "hosting", {Hosting.CLOUDFLARE_PAGES}, "framework", {Framework.NEXTJS},
        "Next.js on Cloudflare Pages requires the @cloudflare/next-on-pages adapter with some feature limitations.",
    ),
    ConflictRule(
        "framework", {Framework.GATSBY}, "apiStyle", {ApiStyle.SERVER_ACTIONS},
        "Gatsby does not support server actions. Consider REST or GraphQL.",
    ),
    ConflictRule(
        "cmsProvider", {CmsProvider.WORDPRESS_HEADLESS}, "framework", {Framework.WORDPRESS},
        "Headless WordPress CMS with WordPress framework is redundant. Choose one approach.",
    ),
    ConflictRule(
        "distributionChannels", {DistributionChannel.USB_PORTABLE}, "database", HOSTED_DATABASES,
        "USB/portable distribution with a database backend requires an embedded or local database solution (e.g. SQLite).",
    ),
    ConflictRule(
        "ssl", {False}, "websiteTypes", ECOMMERCE_TYPES,
        "SSL is required for e-commerce websites to protect payment data.",
        Severity.ERROR,
    ),
    ConflictRule(
        "ssl", {False}, "directoryProvider", ACTIVE_DIRECTORIES,
        "Directory integration requires SSL to protect credentials in transit.",
        Severity.ERROR,
    ),
    ConflictRule(
        "businessModules", frozenset(BusinessModule), "auth", {AuthProvider.NONE},
        "Business service modules require authentication, but auth is set to none.",
        Severity.ERROR,
    ),
)


WEBSITE_SUGGESTIONS: Tuple[SuggestionRule, ...] = (
    SuggestionRule(lambda c: not c.sitemap, "Enable sitemap generation for better search engine indexing."),
    SuggestionRule(lambda c: not c.open_graph, "Enable Open Graph meta tags for better social media sharing."),
    SuggestionRule(
        lambda c: c.caching in (None, Caching.NONE),
        "Consider enabling caching (ISR, SWR, or CDN) for better performance.",
    ),
    SuggestionRule(lambda c: c.cdn in (None, Cdn.NONE), "Add a CDN for faster global content delivery."),
    SuggestionRule(
        lambda c: c.monitoring in (None, Monitoring.NONE),
        "Add error monitoring (Sentry, Datadog) to catch production issues early.",
    ),
    SuggestionRule(lambda c: c.ci in (None, CiProvider.NONE), "Set up CI/CD for automated testing and deployment."),
    SuggestionRule(
        lambda c: c.is_ecommerce and not c.structured_data,
        "Add Product structured data for rich search results.",
    ),
    SuggestionRule(
        lambda c: WebsiteType.BLOG in c.website_types and StructuredData.ARTICLE not in c.structured_data,
        "Add Article structured data for blog posts.",
    ),
    SuggestionRule(
        lambda c: not is_chosen(c.backups),
        "Configure automated backups to prevent data loss.",
    ),
    SuggestionRule(
        lambda c: any(ch in LOCAL_DISTRIBUTION_CHANNELS for ch in c.distribution_channels) and not c.containerized,
        "Consider enabling Docker for local distribution channels (LAN, USB, network share).",
    ),
    SuggestionRule(
        lambda c: WebsiteType.SAAS_PRODUCT in c.website_types and not c.subscription_billing,
        "Consider enabling subscription billing for SaaS products.",
    ),
    SuggestionRule(
        lambda c: Compliance.PCI_DSS in c.compliance and not c.is_ecommerce,
        "PCI-DSS compliance is typically only needed for e-commerce websites.",
    ),
)
