"""
Static page catalog of the public site, searchable alongside portal records.
"""

from matching.models import SearchCategory, StaticPage

SITE_PAGES: tuple[StaticPage, ...] = (
    # Pages
    StaticPage("home", "Home", "Main landing page", SearchCategory.PAGE, "/"),
    StaticPage("about", "About Us", "Learn about Bridge Advisory Group", SearchCategory.PAGE, "/about"),
    StaticPage("team", "Our Team", "Meet our expert professionals", SearchCategory.TEAM, "/team"),
    StaticPage("careers", "Careers", "Join our growing team", SearchCategory.PAGE, "/careers"),
    StaticPage("contact", "Contact", "Get in touch with us", SearchCategory.PAGE, "/contact"),
    StaticPage("research", "Research", "Market research and insights", SearchCategory.RESOURCE, "/research"),
    StaticPage("press", "Press", "News and press releases", SearchCategory.RESOURCE, "/press"),

    # Services
    StaticPage(
        "investment-sales", "Investment Sales", "Commercial property transactions",
        SearchCategory.SERVICE, "/services/investment-sales",
    ),
    StaticPage(
        "commercial-leasing", "Commercial Leasing", "Office and retail leasing",
        SearchCategory.SERVICE, "/services/commercial-leasing",
    ),
    StaticPage(
        "residential", "Residential", "Residential property services",
        SearchCategory.SERVICE, "/services/residential",
    ),
    StaticPage(
        "capital-advisory", "Capital Advisory", "Financing and capital solutions",
        SearchCategory.SERVICE, "/services/capital-advisory",
    ),
    StaticPage(
        "property-management", "Property Management", "Asset management services",
        SearchCategory.SERVICE, "/services/property-management",
    ),
    StaticPage(
        "marketing", "Marketing", "Property marketing services",
        SearchCategory.SERVICE, "/services/marketing",
    ),
    StaticPage(
        "billboard", "Billboard", "Outdoor advertising solutions",
        SearchCategory.SERVICE, "/services/billboard",
    ),
)
