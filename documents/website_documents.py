"""Website document templates: the init prompt and the development concept."""

from typing import List

from contracts.options import (
    ApiStyle,
    BusinessModule,
    ContentType,
    Framework,
    is_chosen,
    option_label,
)
from contracts.website_config import WebsiteConfig
from .naming import website_name
from .profiles import framework_profile
from .templates import (
    DocumentTemplate,
    SectionTemplate,
    UNSPECIFIED,
    bullets,
    code_block,
    flag,
    join_parts,
    labels,
    numbered,
    requires_any,
    table,
    value,
)

TEMPLATE_VERSION = "1.0"

DEFAULT_PAGES = ("home", "about", "contact")

BASE_CONSTRAINTS = (
    "DO NOT use deprecated APIs or patterns",
    "DO NOT store secrets in client-side code",
    "DO NOT skip input validation on forms",
    "DO NOT ignore accessibility (WCAG 2.1 AA minimum)",
    "DO NOT commit .env files or API keys",
)

BASE_ERROR_HANDLING = (
    "Implement a global error boundary with a user-friendly fallback UI",
    "Add loading states for all async operations",
    "Handle network failures gracefully with retry logic",
    "Validate all user input on both client and server",
    "Log errors to the monitoring service in production",
)

BASE_DO_NOTS = (
    "DO NOT use any deprecated APIs or libraries",
    "DO NOT store credentials or secrets in version control",
    "DO NOT skip form validation on either client or server",
    "DO NOT ignore mobile responsiveness",
    "DO NOT deploy without running the full test suite",
    "DO NOT use inline styles; use the configured styling solution",
)

API_PATTERNS = {
    ApiStyle.SERVER_ACTIONS: "Server Actions (co-located mutations)",
    ApiStyle.TRPC: "tRPC (type-safe API)",
    ApiStyle.GRAPHQL: "GraphQL API",
}

# Data model entities contributed by each business module
MODULE_ENTITIES = {
    BusinessModule.TRAVEL_EXPENSES: (
        "ExpenseReport (id, user_id, title, amount, currency, status, receipt_url, approved_by, created_at)",
    ),
    BusinessModule.EMPLOYEE_BUDGET: (
        "BudgetRequest (id, user_id, amount, category, receipt_url, status, approved_by, created_at)",
    ),
    BusinessModule.SICK_LEAVE: (
        "SickLeave (id, user_id, start_date, end_date, half_day, status, notified_at)",
    ),
    BusinessModule.FORM_BUILDER: (
        "FormTemplate (id, name, schema, created_by, created_at)",
        "FormSubmission (id, template_id, user_id, data, status, created_at)",
    ),
    BusinessModule.SIGNATURE_BUILDER: (
        "SignatureTemplate (id, user_id, layout, fields, html, created_at)",
    ),
}

MODULE_ENDPOINTS = {
    BusinessModule.TRAVEL_EXPENSES: (
        "GET /expenses: List expense reports",
        "POST /expenses: Submit expense report",
        "PUT /expenses/:id/approve: Approve expense",
    ),
    BusinessModule.EMPLOYEE_BUDGET: (
        "POST /budget-requests: Submit budget request",
        "PUT /budget-requests/:id/approve: Approve request",
    ),
    BusinessModule.SICK_LEAVE: (
        "POST /sick-leave: Report sick leave",
        "GET /sick-leave/team: Team absence overview",
    ),
    BusinessModule.FORM_BUILDER: (
        "GET /forms: List form templates",
        "POST /forms: Create form template",
        "POST /forms/:id/submit: Submit form response",
    ),
}

MODULE_COMPONENTS = {
    BusinessModule.ADMIN_AREA: "AdminPanel: User/group/role management dashboard",
    BusinessModule.FORM_BUILDER: "FormBuilder: Drag-and-drop form editor with preview",
    BusinessModule.SIGNATURE_BUILDER: "SignatureEditor: Email signature configurator with live preview",
    BusinessModule.TRAVEL_EXPENSES: "ExpenseForm: Expense submission with receipt upload",
    BusinessModule.EMPLOYEE_BUDGET: "BudgetRequestForm: Budget request with AI receipt extraction",
    BusinessModule.SICK_LEAVE: "SickLeaveForm: Absence reporting with calendar picker",
}


def _has_blog(config: WebsiteConfig) -> bool:
    return config.blog_enabled or ContentType.BLOG in config.content_types


def _business_modules(config: WebsiteConfig) -> List[BusinessModule]:
    """Modules only apply to business service portals."""
    return list(config.business_modules) if config.is_business_service else []


def _pages(config: WebsiteConfig) -> List[str]:
    return list(config.page_structure) or list(DEFAULT_PAGES)


# --- Init prompt ---


@requires_any(
    "websiteTypes", "industry", "targetAudience", "elevatorPitch", "framework",
    "styling", "componentLibrary", "database", "orm", "auth", "apiStyle",
    "layoutStyle", "navigationStyle", "designSystem", "theme", "cmsProvider",
    "hosting", "ci", "cdn", "caching", "scaling", "distributionChannels",
    "detailedDescription",
)
def render_context(config: WebsiteConfig) -> str:
    """Configuration summary grouped the way the wizard collects it."""
    overview = bullets([
        f"**Types:** {labels(config.website_types)}",
        f"**Industry:** {value(config.industry)}",
        f"**Target Audience:** {value(config.target_audience)}",
    ])
    stack = bullets([
        f"**Framework:** {value(config.framework)}",
        f"**Language:** {value(config.language)}",
        f"**Styling:** {value(config.styling)}",
        f"**Component Library:** {value(config.component_library)}",
        f"**Database:** {value(config.database)}",
        f"**ORM:** {value(config.orm)}",
        f"**Auth:** {value(config.auth)}",
        f"**API Style:** {value(config.api_style)}",
    ])
    design = bullets([
        f"**Layout:** {value(config.layout_style)}",
        f"**Navigation:** {value(config.navigation_style)}",
        f"**Design System:** {value(config.design_system)}",
        f"**Theme:** {value(config.theme)}",
    ])

    content = None
    if is_chosen(config.cms_provider):
        languages = f"Yes ({', '.join(config.i18n_languages)})" if config.i18n_enabled else "No"
        content = bullets([
            f"**CMS:** {value(config.cms_provider)}",
            f"**Blog:** {flag(config.blog_enabled)}",
            f"**i18n:** {languages}",
            f"**Search:** {value(config.search_provider) if config.search_enabled else 'No'}",
        ])

    commerce = None
    if config.is_ecommerce:
        lines = [
            f"**Product Type:** {value(config.product_type)}",
            f"**Payment:** {value(config.payment_processor)}",
            f"**Checkout:** {value(config.checkout_style)}",
        ]
        if config.subscription_billing:
            lines.append("**Subscription Billing:** Enabled")
        commerce = bullets(lines)

    business = None
    modules = _business_modules(config)
    if modules:
        lines = [f"**Modules:** {labels(modules)}"]
        if is_chosen(config.directory_provider):
            lines.append(f"**Directory Provider:** {value(config.directory_provider)}")
        business = bullets(lines)

    hosting_lines = [
        f"**Hosting:** {value(config.hosting)}",
        f"**CI/CD:** {value(config.ci)}",
        f"**CDN:** {value(config.cdn)}",
        f"**Caching:** {value(config.caching)}",
        f"**Scaling:** {value(config.scaling)}",
    ]
    if config.distribution_channels:
        hosting_lines.append(f"**Distribution:** {labels(config.distribution_channels)}")

    return join_parts([
        "### Website Overview", overview,
        config.elevator_pitch and f"**Description:** {config.elevator_pitch}",
        config.detailed_description,
        "### Technical Stack", stack,
        "### Design", design,
        content and "### Content", content,
        commerce and "### E-Commerce", commerce,
        business and "### Business Service Modules", business,
        "### Hosting & Deployment", bullets(hosting_lines),
    ])


@requires_any("siteName")
def render_site_identity(config: WebsiteConfig) -> str:
    """Name, domain and brand rules; keyed on the site name."""
    identity = config.corporate_identity
    lines = [
        f"**Site Name:** {website_name(config)}",
        f"**Domain:** {value(config.custom_domain)}",
        f"**Brand Tone:** {value(config.brand_tone)}",
        f"**Colors:** primary {config.primary_color}, secondary {config.secondary_color}",
        f"**Fonts:** {value(config.font_heading)} (headings), {value(config.font_body)} (body)",
    ]
    if identity.brand_colors:
        lines.append(f"**Brand Palette:** {', '.join(identity.brand_colors)}")
    if identity.font_primary or identity.font_secondary:
        lines.append(f"**Brand Fonts:** {value(identity.font_primary)}, {value(identity.font_secondary)}")
    if identity.brand_url:
        lines.append(f"**Brand Guidelines:** {identity.brand_url}")

    assets = None
    if identity.assets:
        assets = table(("Asset", "Category", "Type"), [
            (asset.file_name, option_label(asset.category), asset.file_type) for asset in identity.assets
        ])
    return join_parts([
        bullets(lines),
        assets and "### Brand Assets", assets,
        identity.brand_notes,
    ])


@requires_any(
    "framework", "language", "styling", "componentLibrary", "packageManager", "monorepo",
)
def render_technical_specification(config: WebsiteConfig) -> str:
    profile = framework_profile(config.framework)
    return join_parts([
        bullets([
            f"**Framework:** {profile.name}",
            f"**Language:** {value(config.language)}",
            f"**Styling:** {value(config.styling)}",
            f"**Component Library:** {value(config.component_library)}",
            f"**Package Manager:** {value(config.package_manager)}",
            f"**Monorepo:** {flag(config.monorepo)}",
        ]),
        "### Project Structure",
        code_block(profile.project_structure),
        "### Best Practices",
        bullets(profile.best_practices),
    ])


@requires_any(
    "framework", "styling", "layoutStyle", "navigationStyle", "pageStructure", "auth",
    "database", "cmsProvider", "websiteTypes", "seoStrategy", "structuredData", "hosting",
)
def render_mvp_instructions(config: WebsiteConfig) -> str:
    profile = framework_profile(config.framework)
    steps = [
        f"Initialize the project with {profile.name}",
        f"Set up {value(config.styling)} and the design system",
        f"Create the base layout ({value(config.layout_style)} with "
        f"{value(config.navigation_style)} navigation)",
        f"Implement core pages: {', '.join(_pages(config)[:5])}",
    ]
    if is_chosen(config.auth):
        steps.append(f"Set up authentication with {value(config.auth)} (methods: {labels(config.auth_methods)})")
    if is_chosen(config.database):
        steps.append(f"Configure the database ({value(config.database)}) with {value(config.orm)}")
    if is_chosen(config.cms_provider):
        steps.append(f"Integrate CMS: {value(config.cms_provider)}")
    if config.is_ecommerce:
        steps.append(f"Set up the product catalog ({value(config.product_type)})")
        steps.append(f"Integrate payment processor: {value(config.payment_processor)}")
        steps.append(f"Build the checkout flow ({value(config.checkout_style)})")
    modules = _business_modules(config)
    if modules:
        steps.append(f"Implement business modules: {labels(modules)}")
        if is_chosen(config.directory_provider):
            steps.append(f"Set up directory integration: {value(config.directory_provider)}")
    steps.append(
        f"Implement SEO ({value(config.seo_strategy)}) with structured data: {labels(config.structured_data)}"
    )
    steps.append(f"Deploy to {value(config.hosting)}")
    return numbered(steps)


@requires_any(
    "i18nEnabled", "searchEnabled", "aiFeatures", "subscriptionBilling",
    "internationalShipping", "analytics", "monitoring", "chatWidget",
    "businessModules", "communicationChannels", "crm", "marketing", "emailProvider",
)
def render_full_instructions(config: WebsiteConfig) -> str:
    steps = []
    if config.i18n_enabled:
        steps.append(f"Add internationalization: {', '.join(config.i18n_languages) or UNSPECIFIED}")
    if config.search_enabled:
        steps.append(f"Implement search with {value(config.search_provider)}")
    if config.ai_features:
        steps.append(f"Integrate AI features: {labels(config.ai_features)} via {value(config.ai_provider)}")
    if config.subscription_billing:
        steps.append("Add a subscription billing system")
    if config.international_shipping:
        steps.append("Enable international shipping")
    analytics = [a for a in config.analytics if is_chosen(a)]
    steps.append(f"Add analytics: {labels(analytics)}")
    if is_chosen(config.monitoring):
        steps.append(f"Set up monitoring: {value(config.monitoring)}")
    if is_chosen(config.chat_widget):
        steps.append(f"Add chat widget: {value(config.chat_widget)}")
    if is_chosen(config.email_provider):
        steps.append(f"Wire transactional email through {value(config.email_provider)}")
    if is_chosen(config.crm):
        steps.append(f"Sync leads to {value(config.crm)}")
    marketing = [m for m in config.marketing if is_chosen(m)]
    if marketing:
        steps.append(f"Connect marketing tools: {labels(marketing)}")

    modules = _business_modules(config)
    if BusinessModule.FORM_BUILDER in modules:
        steps.append("Build a drag-and-drop form builder with AI generation")
    if BusinessModule.SIGNATURE_BUILDER in modules:
        steps.append("Implement an email signature builder with directory auto-fill")
    channels = [c for c in config.communication_channels if is_chosen(c)]
    if config.is_business_service and channels:
        steps.append(f"Integrate notification channels: {labels(channels)}")
    return bullets(steps)


def render_constraints(config: WebsiteConfig) -> str:
    """Base rules, framework anti-patterns and commerce or portal rules."""
    profile = framework_profile(config.framework)
    constraints = list(BASE_CONSTRAINTS) + list(profile.anti_patterns)
    if config.is_ecommerce:
        constraints.append("DO NOT store raw credit card numbers; use tokenized payments")
        constraints.append("DO NOT bypass payment processor checkout for PCI compliance")
    if config.is_business_service:
        constraints.append("DO NOT store LDAP/AD credentials in client-side code")
        constraints.append("DO NOT expose directory sync endpoints without authentication")
        if {BusinessModule.TRAVEL_EXPENSES, BusinessModule.EMPLOYEE_BUDGET}.intersection(config.business_modules):
            constraints.append("DO NOT process expense approvals without proper role checks")
    return join_parts([
        bullets(constraints),
        config.constraints and "### Project-Specific Constraints",
        config.constraints,
    ])


def render_error_handling(config: WebsiteConfig) -> str:
    profile = framework_profile(config.framework)
    items = list(BASE_ERROR_HANDLING)
    items += [f"Watch for: {pattern}" for pattern in profile.error_patterns]
    return bullets(items)


@requires_any("framework", "compliance")
def render_agent_prompts(config: WebsiteConfig) -> str:
    profile = framework_profile(config.framework)
    return join_parts([
        "When using AI coding assistants with this project:",
        bullets([
            "Always reference this init prompt for project context",
            f"Follow the {profile.name} patterns described above",
            "Validate changes against the constraint list before committing",
            "Test across different screen sizes (mobile-first)",
            f"Compliance requirements: {labels(config.compliance)}",
            "Keep bundle size minimal; lazy load non-critical features",
        ]),
    ])


WEBSITE_INIT_PROMPT = DocumentTemplate(
    name="init-prompt",
    title="Website Init Prompt",
    version=TEMPLATE_VERSION,
    sections=(
        SectionTemplate("Context & Overview", render_context),
        SectionTemplate("Site Identity", render_site_identity),
        SectionTemplate("Technical Specification", render_technical_specification),
        SectionTemplate("Build Instructions (MVP)", render_mvp_instructions),
        SectionTemplate("Build Instructions (Full Feature Set)", render_full_instructions),
        SectionTemplate("Constraints (DO NOT)", render_constraints),
        SectionTemplate("Error Handling & Edge Cases", render_error_handling),
        SectionTemplate("Agent Prompts", render_agent_prompts),
    ),
)


# --- Development concept ---


@requires_any("siteName", "websiteTypes", "industry", "targetAudience", "elevatorPitch", "referenceWebsites")
def render_project_overview(config: WebsiteConfig) -> str:
    return join_parts([
        bullets([
            f"**Site Name:** {website_name(config)}",
            f"**Type:** {labels(config.website_types)}",
            f"**Industry:** {value(config.industry)}",
            f"**Target Audience:** {value(config.target_audience)}",
            f"**E-Commerce:** {flag(config.is_ecommerce)}",
        ]),
        config.elevator_pitch and f"**Description:** {config.elevator_pitch}",
        config.target_pages and f"**Target Pages:** {config.target_pages}",
        config.reference_websites and f"**Reference Websites:** {config.reference_websites}",
        config.additional_notes,
    ])


@requires_any("framework", "apiStyle")
def render_architecture(config: WebsiteConfig) -> str:
    profile = framework_profile(config.framework)
    pattern = API_PATTERNS.get(config.api_style, "REST API")
    if config.framework == Framework.ASTRO:
        rendering = "Static Site Generation (SSG) with Islands"
    elif config.framework == Framework.GATSBY:
        rendering = "Static Site Generation (SSG)"
    else:
        rendering = "Server-Side Rendering (SSR) with selective static generation"
    return join_parts([
        bullets([
            f"**Framework:** {profile.name}",
            f"**Pattern:** {pattern}",
            f"**Rendering:** {rendering}",
        ]),
        "### Project Structure",
        code_block(profile.project_structure),
    ])


@requires_any("blogEnabled", "contentTypes", "websiteTypes", "businessModules", "database")
def render_data_model(config: WebsiteConfig) -> str:
    """Entity list derived from content, commerce and portal choices."""
    entities = ["User (id, email, name, role, created_at, updated_at)"]
    if _has_blog(config):
        entities += [
            "Post (id, title, slug, content, author_id, published_at, status)",
            "Category (id, name, slug)",
            "Tag (id, name, slug)",
        ]
    if config.is_ecommerce:
        entities += [
            "Product (id, name, slug, description, price, images, category_id, status)",
            "Order (id, user_id, status, total, shipping_address, created_at)",
            "OrderItem (id, order_id, product_id, quantity, price)",
            "Cart (id, user_id, items, updated_at)",
        ]
        if config.variants:
            entities.append("ProductVariant (id, product_id, name, sku, price, stock)")
        if config.reviews:
            entities.append("Review (id, product_id, user_id, rating, content, created_at)")
        if config.coupons:
            entities.append("Coupon (id, code, discount_type, value, expires_at)")
        if config.subscription_billing:
            entities.append("Subscription (id, user_id, plan_id, status, current_period_end)")
    if ContentType.USER_GENERATED in config.content_types:
        entities.append("Comment (id, user_id, content, parent_id, created_at)")
    for module in _business_modules(config):
        entities += MODULE_ENTITIES.get(module, ())
    return join_parts([
        f"**Storage:** {value(config.database)} via {value(config.orm)}",
        bullets(entities),
    ])


@requires_any("apiStyle", "auth", "authMethods", "blogEnabled", "contentTypes", "websiteTypes", "searchEnabled")
def render_api_design(config: WebsiteConfig) -> str:
    endpoints = []
    if is_chosen(config.auth):
        endpoints += [
            "POST /auth/login: Authenticate user",
            "POST /auth/register: Create account",
            "POST /auth/logout: End session",
            "GET /auth/me: Get current user",
        ]
    if _has_blog(config):
        endpoints += ["GET /posts: List posts (paginated)", "GET /posts/:slug: Get single post"]
    if config.is_ecommerce:
        endpoints += [
            "GET /products: List products (filtered, paginated)",
            "GET /products/:slug: Get product detail",
            "POST /cart: Add to cart",
            "PUT /cart/:id: Update cart item",
            "DELETE /cart/:id: Remove from cart",
            "POST /checkout: Create checkout session",
            "POST /webhooks/payment: Handle payment webhook",
            "GET /orders: List user orders",
        ]
    if config.search_enabled:
        endpoints.append("GET /search?q=: Search content")
    for module in _business_modules(config):
        endpoints += MODULE_ENDPOINTS.get(module, ())
    if config.is_business_service and is_chosen(config.directory_provider):
        endpoints += ["POST /directory/sync: Trigger directory sync", "GET /directory/users: List directory users"]

    return join_parts([
        bullets([
            f"**Style:** {value(config.api_style)}",
            f"**Authentication:** {value(config.auth)} ({labels(config.auth_methods)})",
        ]),
        "### Endpoints",
        bullets(endpoints) or "No server endpoints required.",
    ])


@requires_any(
    "framework", "language", "styling", "componentLibrary", "database", "orm",
    "auth", "hosting", "cdn", "ci",
)
def render_tech_stack(config: WebsiteConfig) -> str:
    return table(("Layer", "Technology"), [
        ("Framework", framework_profile(config.framework).name),
        ("Language", config.language),
        ("Styling", config.styling),
        ("Components", config.component_library),
        ("Database", config.database),
        ("ORM", config.orm),
        ("Auth", config.auth),
        ("Hosting", config.hosting),
        ("CDN", config.cdn),
        ("CI/CD", config.ci),
    ])


@requires_any(
    "framework", "pageStructure", "theme", "designSystem", "layoutStyle",
    "primaryColor", "animationLevel", "footerStyle",
)
def render_implementation_guidelines(config: WebsiteConfig) -> str:
    profile = framework_profile(config.framework)
    return join_parts([
        "### Pages",
        ", ".join(_pages(config)),
        "### Key Patterns",
        bullets(profile.best_practices),
        "### Design System",
        bullets([
            f"**Theme:** {value(config.theme)}",
            f"**Design System:** {value(config.design_system)}",
            f"**Layout:** {value(config.layout_style)}",
            f"**Footer:** {value(config.footer_style)}",
            f"**Primary Color:** {config.primary_color}",
            f"**Animation Level:** {value(config.animation_level)}",
        ]),
    ])


def _enabled(enabled: bool) -> str:
    return "Enabled" if enabled else "Disabled"


@requires_any("ssl", "csp", "rateLimiting", "ddosProtection", "waf", "backups", "compliance", "directoryProvider")
def render_security_plan(config: WebsiteConfig) -> str:
    lines = [
        f"**SSL:** {_enabled(config.ssl)}",
        f"**CSP:** {_enabled(config.csp)}",
        f"**Rate Limiting:** {_enabled(config.rate_limiting)}",
        f"**DDoS Protection:** {_enabled(config.ddos_protection)}",
        f"**WAF:** {_enabled(config.waf)}",
        f"**Backups:** {value(config.backups)}",
        f"**Compliance:** {labels(config.compliance)}",
    ]
    if config.is_business_service and is_chosen(config.directory_provider):
        lines.append(f"**Directory Provider:** {value(config.directory_provider)}")
    return bullets(lines)


@requires_any("websiteTypes", "auth")
def render_testing_strategy(config: WebsiteConfig) -> str:
    items = [
        "Unit tests for utility functions and helpers",
        "Component tests for UI components",
        "Integration tests for API routes",
        "E2E tests for critical user flows",
    ]
    if config.is_ecommerce:
        items.append("E2E: Complete purchase flow (add to cart, checkout, payment)")
        items.append("Integration: Payment webhook handling")
    if is_chosen(config.auth):
        items.append("Integration: Authentication flow (register, login, logout)")
    return bullets(items)


@requires_any(
    "hosting", "ci", "environments", "scaling", "region", "containerized",
    "caching", "distributionChannels",
)
def render_deployment_plan(config: WebsiteConfig) -> str:
    return bullets([
        f"**Hosting:** {value(config.hosting)}",
        f"**CI/CD:** {value(config.ci)}",
        f"**Environments:** {labels(config.environments)}",
        f"**Scaling:** {value(config.scaling)}",
        f"**Region:** {value(config.region)}",
        f"**Containerized:** {flag(config.containerized)}",
        f"**Caching:** {value(config.caching)}",
        f"**Distribution Channels:** {labels(config.distribution_channels)}",
    ])


@requires_any(
    "navigationStyle", "footerStyle", "websiteTypes", "blogEnabled", "searchEnabled",
    "checkoutStyle", "businessModules", "componentLibrary",
)
def render_component_library(config: WebsiteConfig) -> str:
    components = [
        "Layout: Base page layout with header, main, footer",
        f"Header: Navigation with {value(config.navigation_style)} style",
        f"Footer: {value(config.footer_style)} footer",
        "Button: Primary, secondary, outline, ghost variants",
        "Input: Text, email, password, number variants",
        "Card: Content container with header, body, footer",
    ]
    if config.is_ecommerce:
        components += [
            "ProductCard: Product image, title, price, add-to-cart",
            "CartDrawer: Slide-out cart summary",
            f"CheckoutForm: {value(config.checkout_style)} checkout",
            "PriceDisplay: Formatted price with currency",
        ]
    if config.blog_enabled:
        components += ["PostCard: Blog post preview card", "PostContent: Rich text renderer"]
    if config.search_enabled:
        components += ["SearchBar: Search input with autocomplete", "SearchResults: Filtered results display"]
    components += [MODULE_COMPONENTS[m] for m in _business_modules(config) if m in MODULE_COMPONENTS]
    return join_parts([
        f"**Base library:** {value(config.component_library)}",
        bullets(components),
    ])


def render_do_not_list(config: WebsiteConfig) -> str:
    profile = framework_profile(config.framework)
    items = list(BASE_DO_NOTS) + list(profile.anti_patterns)
    if config.is_ecommerce:
        items.append("DO NOT process payments without proper error handling and idempotency")
        items.append("DO NOT store sensitive customer data without encryption")
    if config.is_business_service:
        items.append("DO NOT expose internal employee data without proper RBAC checks")
        items.append("DO NOT store directory service credentials in client-accessible code")
        if BusinessModule.SICK_LEAVE in config.business_modules:
            items.append("DO NOT log sensitive health information; only store absence dates")
        if BusinessModule.TRAVEL_EXPENSES in config.business_modules:
            items.append("DO NOT approve expenses without validation against budget limits")
    return bullets(items)


WEBSITE_DEVELOPMENT_CONCEPT = DocumentTemplate(
    name="development-concept",
    title="Website Development Concept",
    version=TEMPLATE_VERSION,
    sections=(
        SectionTemplate("Project Overview", render_project_overview),
        SectionTemplate("Architecture", render_architecture),
        SectionTemplate("Data Model", render_data_model),
        SectionTemplate("API Design", render_api_design),
        SectionTemplate("Tech Stack", render_tech_stack),
        SectionTemplate("Implementation Guidelines", render_implementation_guidelines),
        SectionTemplate("Security Plan", render_security_plan),
        SectionTemplate("Testing Strategy", render_testing_strategy),
        SectionTemplate("Deployment Plan", render_deployment_plan),
        SectionTemplate("Component Library", render_component_library),
        SectionTemplate("DO NOT List", render_do_not_list),
    ),
)

WEBSITE_TEMPLATES = (WEBSITE_INIT_PROMPT, WEBSITE_DEVELOPMENT_CONCEPT)
