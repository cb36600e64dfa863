"""Recommendation tables for website configurations, one tuple per dimension."""

from typing import Dict, Tuple

from contracts.options import (
    AiFeature,
    AuthProvider,
    BusinessModule,
    CommunicationChannel,
    Compliance,
    ContentType,
    Database,
    DeployEnvironment,
    Framework,
    Industry,
    is_chosen,
    LOCAL_DISTRIBUTION_CHANNELS,
    WebsiteType,
)
from .rules import RecommendationRule as R


def _type(c, *types) -> bool:
    return any(t in c.website_types for t in types)


def _ai(c, feature) -> bool:
    return feature in c.ai_features


def _regulated(c) -> bool:
    return Compliance.HIPAA in c.compliance or Compliance.GDPR in c.compliance


AI_PROVIDERS: Tuple[R, ...] = (
    R(lambda c: _ai(c, AiFeature.CHATBOT),
      "Add Anthropic Claude for the site chatbot, grounded on your own content", 90),
    R(lambda c: _ai(c, AiFeature.SEARCH),
      "Add OpenAI text embeddings (text-embedding-3-small) with pgvector for AI search", 85),
    R(lambda c: _ai(c, AiFeature.CONTENT_GENERATION),
      "Add Anthropic Claude or OpenAI GPT for drafting content, with an editorial review step", 80),
    R(lambda c: _ai(c, AiFeature.IMAGE_GENERATION),
      "Add OpenAI image generation (DALL-E) for marketing and product imagery", 75),
    R(lambda c: _ai(c, AiFeature.RECOMMENDATIONS),
      "Use embeddings similarity for recommendations before adding an LLM re-ranker", 70),
    R(lambda c: _ai(c, AiFeature.TRANSLATION),
      "Add an LLM translation pass with glossary support for i18n content", 65),
    R(lambda c: bool(c.ai_features) and _regulated(c),
      "Add a local model (Ollama) for sensitive data processing", 60),
    R(lambda c: len(c.ai_features) > 1,
      "Enable provider fallback for reliability", 40),
    R(lambda c: len(c.ai_features) > 1,
      "Enable cost tracking to monitor multi-provider spending", 40),
)

FEATURES: Tuple[R, ...] = (
    R(lambda c: c.is_business_service and c.industry in (Industry.INTERNAL_SERVICES, Industry.TECHNOLOGY)
      and BusinessModule.ADMIN_AREA not in c.business_modules,
      "Add an admin area module for managing users and content", 85),
    R(lambda c: c.is_business_service and c.industry in (Industry.INTERNAL_SERVICES, Industry.TECHNOLOGY)
      and BusinessModule.FORM_BUILDER not in c.business_modules,
      "Add a form builder module for internal requests", 80),
    R(lambda c: c.is_business_service and c.industry == Industry.FINANCE
      and BusinessModule.TRAVEL_EXPENSES not in c.business_modules,
      "Add a travel expenses module", 80),
    R(lambda c: c.is_business_service and c.industry == Industry.FINANCE
      and BusinessModule.EMPLOYEE_BUDGET not in c.business_modules,
      "Add an employee budget module", 80),
    R(lambda c: _type(c, WebsiteType.ECOMMERCE) and not c.reviews,
      "Enable product reviews to build trust and add review structured data", 75),
    R(lambda c: _type(c, WebsiteType.SAAS_PRODUCT) and not c.subscription_billing,
      "Enable subscription billing (Stripe or Lemon Squeezy) for the SaaS plans", 75),
    R(lambda c: c.is_ecommerce and c.payment_processor is None,
      "Use Stripe for payments", 70),
    R(lambda c: _type(c, WebsiteType.BLOG) and ContentType.BLOG not in c.content_types,
      "Add a blog content type backed by a CMS", 65),
    R(lambda c: _type(c, WebsiteType.DOCUMENTATION),
      "Serve documentation as static pages with full-text search", 65),
    R(lambda c: _type(c, WebsiteType.COMMUNITY),
      "Add user-generated content with moderation queues", 60),
    R(lambda c: _type(c, WebsiteType.BLOG) or ContentType.BLOG in c.content_types,
      "Add Article and Breadcrumb structured data", 55),
    R(lambda c: c.is_ecommerce,
      "Add Product, Breadcrumb and FAQ structured data", 55),
    R(lambda c: _type(c, WebsiteType.CORPORATE, WebsiteType.LANDING_PAGE),
      "Add Organization and FAQ structured data", 50),
    R(lambda c: not c.sitemap,
      "Generate a sitemap.xml and robots.txt at build time", 45),
    R(lambda c: not c.open_graph,
      "Add Open Graph and Twitter card meta tags", 40),
)

SECURITY: Tuple[R, ...] = (
    R(lambda c: not c.ssl,
      "Enable SSL everywhere; browsers and payment providers require HTTPS", 100),
    R(lambda c: c.is_ecommerce and Compliance.PCI_DSS not in c.compliance,
      "Consider PCI-DSS compliance and never store raw card data", 90),
    R(lambda c: _type(c, WebsiteType.SAAS_PRODUCT) and Compliance.SOC2 not in c.compliance,
      "Consider SOC 2 compliance for SaaS customers", 85),
    R(lambda c: Compliance.GDPR not in c.compliance and (
        not c.compliance or _type(c, WebsiteType.CORPORATE, WebsiteType.ECOMMERCE,
                                  WebsiteType.MARKETPLACE, WebsiteType.SAAS_PRODUCT)),
      "Consider GDPR compliance with a consent banner and data export", 80),
    R(lambda c: not c.csp,
      "Enable a Content Security Policy", 70),
    R(lambda c: not c.rate_limiting and (is_chosen(c.auth) or bool(c.ai_features)),
      "Enable rate limiting on auth and AI endpoints", 70),
    R(lambda c: c.is_ecommerce and not c.waf,
      "Put a web application firewall in front of checkout", 60),
    R(lambda c: is_chosen(c.database) and not is_chosen(c.backups),
      "Configure automated daily backups with tested restores", 60),
    R(lambda c: is_chosen(c.directory_provider),
      "Use LDAPS or SAML for directory traffic and store bind credentials in a secrets manager", 65),
)

DEPLOYMENT: Tuple[R, ...] = (
    R(lambda c: c.framework == Framework.NEXTJS, "Host on Vercel, Netlify or AWS", 80),
    R(lambda c: c.framework == Framework.NUXT, "Host on Netlify or Vercel", 80),
    R(lambda c: c.framework == Framework.ASTRO, "Host on Vercel, Netlify or Cloudflare Pages", 80),
    R(lambda c: c.framework == Framework.REMIX, "Host on Vercel or Fly.io", 80),
    R(lambda c: c.framework == Framework.SVELTEKIT, "Host on Vercel or Netlify", 80),
    R(lambda c: c.framework == Framework.GATSBY, "Host on Netlify or Vercel", 80),
    R(lambda c: c.framework == Framework.WORDPRESS, "Host WordPress self-hosted or on AWS", 80),
    R(lambda c: c.framework == Framework.SHOPIFY, "Host the storefront on Shopify with Vercel for custom pages", 80),
    R(lambda c: not is_chosen(c.ci),
      "Add a CI/CD pipeline (GitHub Actions) for automated deployments", 70),
    R(lambda c: DeployEnvironment.STAGING not in c.environments,
      "Add a staging environment for pre-production testing", 60),
    R(lambda c: any(ch in LOCAL_DISTRIBUTION_CHANNELS for ch in c.distribution_channels) and not c.containerized,
      "Package the site as a Docker image for local distribution channels", 65),
    R(lambda c: c.containerized,
      "Publish versioned images to a container registry and deploy by tag", 50),
)

INTEGRATIONS: Tuple[R, ...] = (
    R(lambda c: c.is_ecommerce, "Add Google Analytics or PostHog for funnel analytics", 70),
    R(lambda c: _type(c, WebsiteType.SAAS_PRODUCT, WebsiteType.WEBAPP),
      "Add PostHog for product analytics", 70),
    R(lambda c: _type(c, WebsiteType.SAAS_PRODUCT, WebsiteType.WEBAPP) and not is_chosen(c.monitoring),
      "Add Sentry for error monitoring", 70),
    R(lambda c: _type(c, WebsiteType.BLOG, WebsiteType.LANDING_PAGE),
      "Add Plausible or Umami for privacy-friendly analytics", 65),
    R(lambda c: _type(c, WebsiteType.CORPORATE) and not is_chosen(c.crm),
      "Add HubSpot for lead capture and CRM", 60),
    R(lambda c: (is_chosen(c.auth) or c.is_ecommerce) and not is_chosen(c.email_provider),
      "Add a transactional email provider (Resend or Postmark)", 65),
    R(lambda c: BusinessModule.SICK_LEAVE in c.business_modules
      and CommunicationChannel.TEAMS not in c.communication_channels,
      "Add Microsoft Teams for absence notifications", 75),
    R(lambda c: BusinessModule.SICK_LEAVE in c.business_modules
      and CommunicationChannel.SLACK not in c.communication_channels,
      "Add Slack for absence notifications", 75),
    R(lambda c: BusinessModule.ADMIN_AREA in c.business_modules and c.directory_provider is None,
      "Add a self-hosted LDAP connector for directory sync", 75),
    R(lambda c: _type(c, WebsiteType.COMMUNITY), "Add PostHog for engagement analytics", 55),
)


def _framework_rule(framework: Framework, text: str) -> R:
    return R(lambda c: c.framework == framework, text, 100)


STACK: Tuple[R, ...] = (
    _framework_rule(Framework.NEXTJS, "Next.js (App Router) with TypeScript and React Server Components"),
    _framework_rule(Framework.NUXT, "Nuxt 3 with TypeScript and Nitro server routes"),
    _framework_rule(Framework.ASTRO, "Astro with content collections and islands for interactivity"),
    _framework_rule(Framework.REMIX, "Remix with TypeScript loaders and actions"),
    _framework_rule(Framework.SVELTEKIT, "SvelteKit with TypeScript and form actions"),
    _framework_rule(Framework.GATSBY, "Gatsby with its GraphQL data layer"),
    _framework_rule(Framework.WORDPRESS, "WordPress with a block theme and a minimal plugin set"),
    _framework_rule(Framework.SHOPIFY, "Shopify with Hydrogen or a Liquid theme"),
    _framework_rule(Framework.CUSTOM, "Custom framework: document routing, rendering and data loading up front"),
    R(lambda c: c.framework is None and _type(c, WebsiteType.BLOG, WebsiteType.DOCUMENTATION,
                                               WebsiteType.LANDING_PAGE, WebsiteType.PORTFOLIO),
      "Astro or Next.js for a content-first site", 90),
    R(lambda c: c.framework is None and c.is_ecommerce,
      "Next.js or Shopify for commerce", 90),
    R(lambda c: c.framework is None and _type(c, WebsiteType.WEBAPP, WebsiteType.COMMUNITY,
                                               WebsiteType.BUSINESS_SERVICE, WebsiteType.SAAS_PRODUCT),
      "Next.js or Remix for an application-style site", 90),
    R(lambda c: c.framework is None and _type(c, WebsiteType.CORPORATE),
      "Next.js or Nuxt for a corporate site", 90),
    R(lambda c: c.framework in (Framework.NEXTJS, Framework.REMIX) and c.database is None,
      "Supabase or PostgreSQL as the database", 75),
    R(lambda c: c.framework == Framework.NUXT and c.database is None,
      "PostgreSQL or MongoDB as the database", 75),
    R(lambda c: c.framework == Framework.ASTRO and c.database is None,
      "SQLite or Turso as the database", 75),
    R(lambda c: c.database in (Database.POSTGRESQL, Database.MYSQL, Database.SQLITE, Database.SUPABASE,
                               Database.PLANETSCALE, Database.TURSO) and c.orm is None,
      "Drizzle or Prisma as the ORM", 70),
    R(lambda c: c.database == Database.MONGODB and c.orm is None,
      "Mongoose for MongoDB models", 70),
    R(lambda c: c.framework in (Framework.NEXTJS, Framework.NUXT, Framework.ASTRO, Framework.REMIX)
      and c.styling is None,
      "Tailwind CSS with a tailwind-first design system", 65),
    R(lambda c: c.framework == Framework.NEXTJS and c.component_library is None,
      "shadcn/ui components on Radix primitives", 60),
    R(lambda c: c.auth == AuthProvider.LDAP or is_chosen(c.directory_provider),
      "An LDAP client library (ldapts) behind a server-only auth module", 55),
)


WEBSITE_RECOMMENDATIONS: Dict[str, Tuple[R, ...]] = {
    "aiProviders": AI_PROVIDERS,
    "features": FEATURES,
    "security": SECURITY,
    "deployment": DEPLOYMENT,
    "integrations": INTEGRATIONS,
    "stack": STACK,
}
