"""
Industry profile tables.

Three reference profiles (grocery store, restaurant, beauty salon) plus
translated example bundles. A locale with no bundle for an industry
falls back to the English examples on the profile itself.
"""

from caribcp.schemas.hazard import RiskLevel
from caribcp.schemas.industry import (
    EssentialFunctions,
    IndustryCategory,
    IndustryExamples,
    IndustryProfile,
    MinimumResources,
    Vulnerability,
)


def _vulns(**levels: str) -> list[Vulnerability]:
    return [
        Vulnerability(hazard_id=hazard_id, default_risk_level=RiskLevel(level))
        for hazard_id, level in levels.items()
    ]


# ── Profiles ───────────────────────────────────────────────────────────

GROCERY_STORE = IndustryProfile(
    id="grocery_store",
    name="Grocery Store",
    local_name="Local Grocery/Mini-Mart",
    category=IndustryCategory.RETAIL,
    vulnerabilities=_vulns(
        hurricane="high",
        flash_flood="medium",
        power_outage="high",
        supply_disruption="medium",
        economic_downturn="medium",
        crime="medium",
    ),
    essential_functions=EssentialFunctions(
        core=[
            "Customer service and sales",
            "Inventory management",
            "Cash handling and payment processing",
            "Product receiving and stocking",
        ],
        support=[
            "Refrigeration and cold storage",
            "Security systems",
            "Supplier relationships",
            "Transportation/delivery",
        ],
        administrative=[
            "Accounting and bookkeeping",
            "Staff scheduling",
            "Vendor payments",
            "Regulatory compliance",
        ],
    ),
    critical_suppliers=[
        "Food distributors and wholesalers",
        "Beverage suppliers",
        "Local farmers and producers",
        "Cleaning and household goods suppliers",
        "Electricity provider",
        "Water utility",
        "Internet/phone service provider",
    ],
    minimum_resources=MinimumResources(
        staff="2-3 staff members (including owner/manager)",
        equipment=["Point of sale system", "Refrigeration units", "Security cameras", "Generator backup"],
        utilities=["Reliable electricity", "Water supply", "Internet connection", "Phone line"],
        space="Retail floor space, storage area, customer parking",
    ),
    typical_operating_hours="Monday-Saturday 7:00 AM - 8:00 PM, Sunday 8:00 AM - 6:00 PM",
    examples=IndustryExamples(
        business_purpose=[
            "To provide fresh groceries and daily essentials to the [NEIGHBORHOOD] community",
            "To serve local residents with convenient access to food and household items",
            "To support local families with affordable groceries and Caribbean specialties",
        ],
        products_services=[
            "Fresh produce, meat, dairy, and pantry staples. Local specialties like [ISLAND] seasonings and traditional foods",
            "Groceries, beverages, household items, and local products. Money transfer and bill payment services",
            "Daily essentials, frozen foods, snacks, and personal care items. Special orders for community events",
        ],
        unique_selling_points=[
            "Local community focus with personalized service and credit for trusted customers",
            "Extended hours and convenient [AREA] location with fresh local produce",
            "Family-owned business with deep community roots and competitive prices",
        ],
        key_personnel=[
            "Store Owner/Manager, Cashier, Stock Clerk",
            "Owner, Assistant Manager, Part-time Cashier",
            "Manager, Senior Cashier, Delivery Driver",
        ],
        minimum_resources=[
            "2 staff members, basic POS system, 1 refrigeration unit, backup generator",
            "Owner + 1 employee, cash register, refrigerated display, security camera",
            "Manager + cashier, modern POS system, walk-in cooler, delivery vehicle",
        ],
        customer_base=[
            "Local residents within 2-mile radius, families, elderly customers, small businesses",
            "Neighborhood families, young professionals, tourists staying in [AREA]",
            "Community members, local restaurants, visiting relatives of residents",
        ],
    ),
)

RESTAURANT = IndustryProfile(
    id="restaurant",
    name="Restaurant",
    local_name="Local Restaurant/Eatery",
    category=IndustryCategory.HOSPITALITY,
    vulnerabilities=_vulns(
        hurricane="high",
        flash_flood="medium",
        power_outage="high",
        supply_disruption="high",
        fire="high",
        pandemic="medium",
        economic_downturn="medium",
    ),
    essential_functions=EssentialFunctions(
        core=[
            "Food preparation and cooking",
            "Customer service and dining",
            "Order taking and payment processing",
            "Food safety and hygiene",
        ],
        support=[
            "Kitchen equipment operation",
            "Inventory and supply management",
            "Cleaning and sanitation",
            "Marketing and customer relations",
        ],
        administrative=[
            "Staff scheduling and payroll",
            "Vendor payments and ordering",
            "Health permit compliance",
            "Financial management",
        ],
    ),
    critical_suppliers=[
        "Food and beverage distributors",
        "Local farmers and fishermen",
        "Gas/propane suppliers",
        "Cleaning supply companies",
        "Electricity and water utilities",
        "Waste management services",
    ],
    minimum_resources=MinimumResources(
        staff="3-5 staff members (chef, server, cashier)",
        equipment=["Commercial kitchen equipment", "POS system", "Refrigeration", "Generator"],
        utilities=["Gas/propane connection", "Reliable electricity", "Water supply", "Waste disposal"],
        space="Kitchen, dining area, storage, customer parking",
    ),
    typical_operating_hours="Monday-Saturday 11:00 AM - 10:00 PM, Sunday 12:00 PM - 9:00 PM",
    examples=IndustryExamples(
        business_purpose=[
            "To serve authentic [ISLAND] cuisine and provide a welcoming dining experience",
            "To offer fresh, locally-sourced meals that celebrate Caribbean flavors and culture",
            "To create a community gathering place centered around great food and hospitality",
        ],
        products_services=[
            "Traditional [ISLAND] dishes, fresh seafood, tropical beverages. Catering for special events",
            "Caribbean fusion cuisine, local specialties, craft cocktails. Take-out and delivery services",
            "Home-style cooking, daily specials, vegetarian options. Private dining and party catering",
        ],
        unique_selling_points=[
            "Family recipes passed down through generations with locally-sourced ingredients",
            "Authentic [ISLAND] atmosphere with live music and stunning [AREA] views",
            "Award-winning chef specializing in modern Caribbean cuisine with traditional roots",
        ],
        key_personnel=[
            "Head Chef, Restaurant Manager, Servers, Kitchen Staff",
            "Owner/Chef, Assistant Manager, Wait Staff, Prep Cook",
            "Executive Chef, Front Manager, Bartender, Kitchen Team",
        ],
        minimum_resources=[
            "Chef + 2 servers, basic kitchen setup, 3 tables, take-out counter",
            "Owner + cook + server, full kitchen, 8 dining tables, small bar area",
            "Full kitchen staff, 15 table dining room, bar, outdoor seating area",
        ],
        customer_base=[
            "Local residents, office workers during lunch, tourists exploring [AREA]",
            "Families celebrating special occasions, business lunch meetings, weekend diners",
            "Food enthusiasts, hotel guests, couples seeking romantic dining, local professionals",
        ],
    ),
)

BEAUTY_SALON = IndustryProfile(
    id="beauty_salon",
    name="Beauty Salon",
    local_name="Hair Salon/Beauty Parlour",
    category=IndustryCategory.SERVICES,
    vulnerabilities=_vulns(
        hurricane="high",
        power_outage="high",
        flash_flood="medium",
        economic_downturn="medium",
        supply_disruption="medium",
        staff_unavailable="medium",
    ),
    essential_functions=EssentialFunctions(
        core=[
            "Hair cutting and styling",
            "Beauty treatments and services",
            "Client consultation and booking",
            "Payment processing",
        ],
        support=[
            "Equipment maintenance",
            "Product inventory management",
            "Appointment scheduling",
            "Client relationship management",
        ],
        administrative=[
            "Staff scheduling and payroll",
            "Supply ordering and payments",
            "Licensing compliance",
            "Marketing and promotion",
        ],
    ),
    critical_suppliers=[
        "Professional hair care product distributors",
        "Beauty equipment suppliers",
        "Cleaning and sanitation suppliers",
        "Electricity provider",
        "Water utility",
        "Telephone/internet service",
    ],
    minimum_resources=MinimumResources(
        staff="2-3 stylists (including owner)",
        equipment=["Styling chairs", "Hair dryers", "Washing stations", "Styling tools", "Sterilization equipment"],
        utilities=["Reliable electricity", "Hot water supply", "Good ventilation", "Phone/internet"],
        space="Styling area, washing station, product storage, waiting area",
    ),
    typical_operating_hours="Tuesday-Saturday 9:00 AM - 6:00 PM, closed Sunday-Monday",
    examples=IndustryExamples(
        business_purpose=[
            "To provide professional hair care and beauty services to [NEIGHBORHOOD] residents",
            "To help clients look and feel their best with expert styling and beauty treatments",
            "To create a relaxing environment where customers can enjoy pampering and self-care",
        ],
        products_services=[
            "Hair cuts, styling, coloring, and treatments. Manicures, pedicures, and eyebrow services",
            "Professional hair care, special occasion styling, bridal packages. Retail hair products",
            "Full-service salon offering cuts, color, perms, and therapeutic treatments for all hair types",
        ],
        unique_selling_points=[
            "Specialized in Caribbean hair textures with certified stylists and quality products",
            "Personalized service in a comfortable, friendly atmosphere with flexible scheduling",
            "Latest trends and techniques combined with traditional [ISLAND] styling methods",
        ],
        key_personnel=[
            "Master Stylist/Owner, Licensed Beautician, Receptionist",
            "Salon Owner, Senior Stylist, Junior Stylist, Part-time Assistant",
            "Head Stylist, Nail Technician, Apprentice Stylist",
        ],
        minimum_resources=[
            "Owner-stylist + 1 employee, 2 styling stations, basic equipment package",
            "2 stylists, 3 stations, nail area, full product line, appointment system",
            "Full staff of 3, 4 styling stations, washing area, retail section, modern equipment",
        ],
        customer_base=[
            "Local women and men, regular weekly/monthly clients, special occasion customers",
            "[AREA] residents, brides and wedding parties, professionals needing regular maintenance",
            "Community members, tourists, clients celebrating special events, loyal repeat customers",
        ],
    ),
)

INDUSTRY_PROFILES: list[IndustryProfile] = [GROCERY_STORE, RESTAURANT, BEAUTY_SALON]


# ── Translated example bundles ─────────────────────────────────────────
# locale → industry id → examples

LOCALIZED_EXAMPLES: dict[str, dict[str, IndustryExamples]] = {
    "es": {
        "grocery_store": IndustryExamples(
            business_purpose=[
                "Proveer comestibles frescos y artículos esenciales a la comunidad de [NEIGHBORHOOD]",
                "Servir a los residentes locales con acceso conveniente a alimentos y artículos del hogar",
            ],
            products_services=[
                "Frutas y verduras frescas, carne, lácteos y productos básicos. Especialidades locales como condimentos de [ISLAND]",
                "Comestibles, bebidas, artículos del hogar y productos locales. Servicios de envío de dinero y pago de facturas",
            ],
            unique_selling_points=[
                "Enfoque comunitario con servicio personalizado y crédito para clientes de confianza",
                "Horario extendido y ubicación conveniente en el [AREA] con productos locales frescos",
            ],
            key_personnel=[
                "Dueño/Gerente de tienda, Cajero, Reponedor",
                "Dueño, Gerente asistente, Cajero a tiempo parcial",
            ],
            minimum_resources=[
                "2 empleados, sistema de punto de venta básico, 1 refrigerador, generador de respaldo",
                "Dueño + 1 empleado, caja registradora, exhibidor refrigerado, cámara de seguridad",
            ],
            customer_base=[
                "Residentes locales, familias, clientes mayores, pequeños negocios",
                "Familias del vecindario, jóvenes profesionales, turistas alojados en el [AREA]",
            ],
        ),
        "restaurant": IndustryExamples(
            business_purpose=[
                "Servir auténtica cocina de [ISLAND] y ofrecer una experiencia gastronómica acogedora",
                "Ofrecer comidas frescas de origen local que celebran los sabores y la cultura del Caribe",
            ],
            products_services=[
                "Platos tradicionales de [ISLAND], mariscos frescos, bebidas tropicales. Catering para eventos especiales",
                "Cocina caribeña de fusión, especialidades locales, cócteles. Servicio para llevar y a domicilio",
            ],
            unique_selling_points=[
                "Recetas familiares transmitidas por generaciones con ingredientes de origen local",
                "Ambiente auténtico de [ISLAND] con música en vivo y vistas del [AREA]",
            ],
            key_personnel=[
                "Jefe de cocina, Gerente del restaurante, Meseros, Personal de cocina",
                "Dueño/Chef, Gerente asistente, Meseros, Cocinero de preparación",
            ],
            minimum_resources=[
                "Chef + 2 meseros, cocina básica, 3 mesas, mostrador para llevar",
                "Dueño + cocinero + mesero, cocina completa, 8 mesas, pequeño bar",
            ],
            customer_base=[
                "Residentes locales, trabajadores de oficina al mediodía, turistas que visitan el [AREA]",
                "Familias celebrando ocasiones especiales, almuerzos de negocios, comensales de fin de semana",
            ],
        ),
    },
    "fr": {
        "grocery_store": IndustryExamples(
            business_purpose=[
                "Fournir des produits frais et des articles essentiels à la communauté de [NEIGHBORHOOD]",
                "Offrir aux résidents locaux un accès pratique à l'alimentation et aux articles ménagers",
            ],
            products_services=[
                "Fruits et légumes frais, viande, produits laitiers et produits de base. Spécialités locales comme les assaisonnements de [ISLAND]",
                "Épicerie, boissons, articles ménagers et produits locaux. Services de transfert d'argent et de paiement de factures",
            ],
            unique_selling_points=[
                "Service personnalisé tourné vers la communauté et crédit pour les clients de confiance",
                "Horaires prolongés et emplacement pratique en [AREA] avec des produits locaux frais",
            ],
            key_personnel=[
                "Propriétaire/Gérant, Caissier, Magasinier",
                "Propriétaire, Gérant adjoint, Caissier à temps partiel",
            ],
            minimum_resources=[
                "2 employés, système de caisse de base, 1 réfrigérateur, générateur de secours",
                "Propriétaire + 1 employé, caisse enregistreuse, vitrine réfrigérée, caméra de sécurité",
            ],
            customer_base=[
                "Résidents locaux, familles, clients âgés, petites entreprises",
                "Familles du quartier, jeunes professionnels, touristes séjournant en [AREA]",
            ],
        ),
        "restaurant": IndustryExamples(
            business_purpose=[
                "Servir une cuisine authentique de [ISLAND] et offrir une expérience culinaire chaleureuse",
                "Proposer des repas frais d'origine locale qui célèbrent les saveurs et la culture caribéennes",
            ],
            products_services=[
                "Plats traditionnels de [ISLAND], fruits de mer frais, boissons tropicales. Traiteur pour événements spéciaux",
                "Cuisine caribéenne fusion, spécialités locales, cocktails. Vente à emporter et livraison",
            ],
            unique_selling_points=[
                "Recettes familiales transmises de génération en génération avec des ingrédients locaux",
                "Ambiance authentique de [ISLAND] avec musique live et vue sur la [AREA]",
            ],
            key_personnel=[
                "Chef cuisinier, Gérant du restaurant, Serveurs, Personnel de cuisine",
                "Propriétaire/Chef, Gérant adjoint, Serveurs, Commis de cuisine",
            ],
            minimum_resources=[
                "Chef + 2 serveurs, cuisine de base, 3 tables, comptoir à emporter",
                "Propriétaire + cuisinier + serveur, cuisine complète, 8 tables, petit bar",
            ],
            customer_base=[
                "Résidents locaux, employés de bureau le midi, touristes visitant la [AREA]",
                "Familles célébrant des occasions spéciales, déjeuners d'affaires, clients du week-end",
            ],
        ),
    },
}
