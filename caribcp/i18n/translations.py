"""
Localization for pre-fill field names, example text and narratives.

Provides:
- Translation management with fallback to English
- Nested key lookup ("fields.business_purpose")
- Template interpolation with {variable} syntax
- List/structured values (example bundles, function tables)
- Optional JSON override files per locale
"""
import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import structlog

logger = structlog.get_logger(__name__)


# ============================================================================
# SUPPORTED LANGUAGES
# ============================================================================


class SupportedLanguage(str, Enum):
    """Supported language codes."""

    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"


# ============================================================================
# TRANSLATION MANAGER
# ============================================================================


class TranslationManager:
    """
    Manages translations for the wizard locales.

    Supported languages:
    - English (en) - default
    - Spanish (es)
    - French (fr)

    A missing locale or a key missing from a locale falls back to the
    English value. Neither case is an error.
    """

    SUPPORTED_LANGUAGES = [SupportedLanguage.ENGLISH, SupportedLanguage.SPANISH, SupportedLanguage.FRENCH]
    DEFAULT_LANGUAGE = SupportedLanguage.ENGLISH

    def __init__(self, locales_dir: Optional[Path] = None):
        """
        Initialize translation manager.

        Args:
            locales_dir: Directory containing ``<locale>.json`` override files
        """
        self._locales_dir = locales_dir
        self._translations: dict[str, dict[str, Any]] = {}
        self._load_translations()

    def _load_translations(self):
        """Load built-in translations, then file overrides."""
        self._translations[SupportedLanguage.ENGLISH.value] = EN_TRANSLATIONS
        self._translations[SupportedLanguage.SPANISH.value] = ES_TRANSLATIONS
        self._translations[SupportedLanguage.FRENCH.value] = FR_TRANSLATIONS

        if self._locales_dir is not None and self._locales_dir.is_dir():
            for lang in self.SUPPORTED_LANGUAGES:
                file_path = self._locales_dir / f"{lang.value}.json"
                if not file_path.exists():
                    continue
                try:
                    with open(file_path, "r", encoding="utf-8") as f:
                        file_translations = json.load(f)
                except (OSError, ValueError) as e:
                    logger.warning(
                        "translation_file_load_error",
                        language=lang.value,
                        error=str(e),
                    )
                    continue
                self._translations[lang.value] = self._deep_merge(
                    self._translations.get(lang.value, {}),
                    file_translations,
                )
                logger.info("translations_loaded_from_file", language=lang.value)

        logger.debug(
            "translations_initialized",
            languages=list(self._translations.keys()),
        )

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def resolve_language(self, language: Any) -> str:
        """Return a supported language code, English for anything else."""
        if isinstance(language, SupportedLanguage):
            language = language.value
        if language not in self._translations:
            logger.debug("locale_fallback", requested=language, fallback=self.DEFAULT_LANGUAGE.value)
            return self.DEFAULT_LANGUAGE.value
        return language

    def lookup(self, key: str, language: str = "en") -> Any:
        """
        Raw value for a key (string, list or dict), or None.

        Falls back to English when the key is missing from ``language``.
        """
        language = self.resolve_language(language)

        value: Any = self._translations.get(language, {})
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
                if value is None:
                    break
            else:
                value = None
                break

        if value is None and language != self.DEFAULT_LANGUAGE.value:
            logger.debug("locale_fallback", key=key, requested=language)
            return self.lookup(key, self.DEFAULT_LANGUAGE.value)
        return value

    def translate(
        self,
        key: str,
        language: str = "en",
        default: Optional[str] = None,
        **kwargs,
    ) -> str:
        """
        Translate a key to the specified language.

        Args:
            key: Translation key (e.g., "fields.business_purpose")
            language: Target language code
            default: Default value if key not found
            **kwargs: Variables to interpolate

        Returns:
            Translated string with variables interpolated
        """
        value = self.lookup(key, language)

        if not isinstance(value, str):
            value = default if default is not None else key

        if kwargs:
            try:
                value = value.format(**kwargs)
            except KeyError as e:
                logger.warning(
                    "translation_interpolation_error",
                    key=key,
                    missing_var=str(e),
                )

        return value

    def translate_list(self, key: str, language: str = "en") -> list[Any]:
        """Translate a key whose value is a list. Missing keys give []."""
        value = self.lookup(key, language)
        if isinstance(value, list):
            return list(value)
        return []

    def get_supported_languages(self) -> list[dict[str, str]]:
        """Get list of supported languages with names."""
        return [
            {"code": "en", "name": "English", "native_name": "English"},
            {"code": "es", "name": "Spanish", "native_name": "Español"},
            {"code": "fr", "name": "French", "native_name": "Français"},
        ]


# ============================================================================
# ENGLISH TRANSLATIONS
# ============================================================================


EN_TRANSLATIONS = {
    "fields": {
        "business_purpose": "Business Purpose",
        "products_and_services": "Products and Services",
        "key_personnel_involved": "Key Personnel Involved",
        "operating_hours": "Operating Hours",
        "minimum_resource_requirements": "Minimum Resource Requirements",
        "customer_base": "Customer Base",
        "unique_selling_points": "Unique Selling Points",
        "industry_type": "Industry Type",
        "country": "Country",
        "parish": "Parish",
        "near_coast": "Near Coast",
        "urban_area": "Urban Area",
        "business_functions": "Business Functions",
        "business_function": "Business Function",
        "description": "Description",
        "priority_level": "Priority Level",
        "maximum_acceptable_downtime": "Maximum Acceptable Downtime",
        "critical_resources_needed": "Critical Resources Needed",
        "potential_hazards": "Potential Hazards",
        "risk_assessment_matrix": "Risk Assessment Matrix",
        "recommended_strategies": "Recommended Strategies",
        "business_continuity_strategies": "Business Continuity Strategies",
        "action_plan_by_risk_level": "Action Plan by Risk Level",
        "implementation_priorities": "Implementation Priorities",
        "budget_estimate": "Budget Estimate",
        "implementation_team": "Implementation Team",
        "resource_requirements": "Resource Requirements",
        "responsible_parties": "Responsible Parties and Roles",
        "review_schedule": "Review and Update Schedule",
        "testing_plan": "Testing and Assessment Plan",
    },
    "location": {
        "coastal_area": "coastal area",
        "inland_area": "inland area",
        "local_area": "local area",
    },
    "functions": [
        {
            "function": "Customer service and sales",
            "description": "Direct customer interactions and sales transactions",
            "priority": "critical",
            "downtime": "0-2h",
            "resources": "Staff, payment system, basic inventory",
        },
        {
            "function": "Inventory management",
            "description": "Managing and tracking stock levels",
            "priority": "important",
            "downtime": "8-24h",
            "resources": "Inventory tracking system, staff",
        },
        {
            "function": "Supplier relationships",
            "description": "Maintaining relationships with key suppliers",
            "priority": "important",
            "downtime": "1-3d",
            "resources": "Communication systems, supplier contacts",
        },
    ],
    "examples": {
        "essential_functions": [
            "Customer service and sales - Direct customer interactions and sales transactions - Critical - 0-2h - Staff, payment system, basic inventory",
            "Inventory management - Managing and tracking stock levels - Important - 8-24h - Inventory tracking system, staff",
            "Supplier relationships - Maintaining relationships with key suppliers - Important - 1-3d - Communication systems, supplier contacts",
        ],
        "risk_assessment": [
            "Select hazards relevant to your location and business type",
            "Consider both natural disasters and human-caused risks",
            "Include location-specific risks like coastal flooding or urban crime",
        ],
    },
    "strategies": {
        "implement_prevention": "Implement prevention measures for {hazard}",
        "category": {
            "retail": [
                "Implement backup power systems for refrigeration and POS systems",
                "Establish relationships with multiple suppliers to avoid stock shortages",
                "Install security systems and proper lighting for crime prevention",
            ],
            "hospitality": [
                "Maintain emergency food and water supplies for extended operations",
                "Install commercial-grade generators for kitchen equipment",
                "Develop supplier diversification to ensure consistent food supply",
            ],
            "services": [
                "Backup equipment storage in secure, climate-controlled location",
                "Digital appointment system with cloud-based backup",
                "Flexible scheduling system to accommodate weather disruptions",
            ],
        },
        "coastal": {
            "prevention": "Install storm shutters and flood barriers",
            "response": "Evacuate equipment to higher ground when storm warnings issued",
        },
        "urban": {
            "prevention": "Coordinate with neighboring businesses for mutual aid agreements",
            "response": "Utilize alternative transportation routes during traffic disruptions",
        },
        "hazard": {
            "hurricane": {
                "prevention": "Secure outdoor signage and equipment before storm season",
                "response": "Activate storm closure procedures and secure premises",
                "recovery": "Assess structural damage before reopening operations",
            },
            "power_outage": {
                "prevention": "Install surge protectors and backup power systems",
                "response": "Switch to manual processes and backup communications",
                "recovery": "Check all electronic equipment before resuming normal operations",
            },
            "flash_flood": {
                "prevention": "Elevate critical equipment and inventory above flood levels",
                "response": "Move inventory to higher levels and cease electrical operations",
                "recovery": "Thoroughly dry and disinfect affected areas before reopening",
            },
        },
    },
    "plan": {
        "prevention_header": "Prevention Strategies",
        "response_header": "Response Strategies",
        "recovery_header": "Recovery Strategies",
        "hazard_heading": "{hazard} ({risk_level})",
        "task_line": "{task} ({responsible}, {duration})",
        "phase_1": "Phase 1 (0-3 months): Address extreme risks - {hazards}",
        "phase_2": "Phase 2 (3-6 months): Address high risks - {hazards}",
        "phase_3": "Phase 3 (6-12 months): Complete long-term risk reduction measures and conduct first full plan test",
        "budget": [
            "Phase 1 (0-3 months): $5,000-$15,000 - Emergency supplies, backup power, critical protective measures",
            "Phase 2 (3-6 months): $3,000-$10,000 - Staff training, backup systems, supplier agreements",
            "Phase 3 (6-12 months): $2,000-$5,000 - Building upgrades, testing exercises, plan maintenance",
        ],
        "team": [
            "Plan Coordinator: Business Owner/General Manager (backup: Assistant Manager)",
            "Emergency Response Lead: Operations Manager (backup: Senior Supervisor)",
            "Communications: Customer Service Lead (backup: Office Manager)",
            "Finance and Insurance: Accountant/Finance Manager (backup: Business Owner)",
        ],
        "responsibility_intro": "Responsibilities are assigned from the action plans for each priority hazard:",
        "responsibility_line": "{responsible}: {tasks}",
        "review": [
            "Monthly: Check emergency supplies, contact lists and backup systems",
            "Quarterly: Review risk assessment, supplier contacts and staff assignments",
            "Annually: Comprehensive plan review and update",
            "Immediately after any emergency event or significant business change",
        ],
        "next_review": "Next scheduled review: {date}",
        "testing": [
            "Communication Test - Monthly - All staff - Everyone receives and responds to emergency message within 2 hours - Communications Manager",
            "Evacuation Drill - Quarterly - All staff and customers - Building evacuated safely within 5 minutes - Safety Officer",
            "Backup System Test - Monthly - IT staff - All systems switch to backup power/internet successfully - IT Manager",
            "Full Plan Exercise - Annually - All key staff - Complete scenario exercise completed successfully - Plan Coordinator",
        ],
        "drills": {
            "hurricane": "Hurricane Preparedness Drill - Annually before June - All staff - Building secured and inventory elevated within 4 hours - Operations Manager",
            "power_outage": "Generator Switch-over Test - Monthly - Maintenance staff - Generator running within 15 minutes - Maintenance Team",
            "cyber_attack": "Data Restore Test - Quarterly - IT staff - Critical data restored from backup within 24 hours - IT Manager",
            "fire": "Fire Evacuation Drill - Semi-annually - All staff and customers - Building evacuated and headcount complete within 5 minutes - Safety Officer",
            "earthquake": "Drop, Cover and Hold Drill - Annually - All staff - All staff reach safe area within 10 minutes - Floor Wardens",
            "flood": "Flood Response Drill - Annually before rainy season - Operations staff - Critical equipment moved to higher ground within 2 hours - Operations Team",
        },
    },
}


# ============================================================================
# SPANISH TRANSLATIONS
# ============================================================================


ES_TRANSLATIONS = {
    "fields": {
        "business_purpose": "Propósito del Negocio",
        "products_and_services": "Productos y Servicios",
        "key_personnel_involved": "Personal Clave Involucrado",
        "operating_hours": "Horarios de Operación",
        "minimum_resource_requirements": "Requisitos Mínimos de Recursos",
        "customer_base": "Base de Clientes",
        "unique_selling_points": "Propuestas Únicas de Valor",
        "industry_type": "Tipo de Industria",
        "country": "País",
        "parish": "Parroquia",
        "near_coast": "Cerca de la Costa",
        "urban_area": "Área Urbana",
        "business_functions": "Funciones del Negocio",
        "business_function": "Función del Negocio",
        "description": "Descripción",
        "priority_level": "Nivel de Prioridad",
        "maximum_acceptable_downtime": "Tiempo Máximo de Inactividad Aceptable",
        "critical_resources_needed": "Recursos Críticos Necesarios",
        "potential_hazards": "Peligros Potenciales",
        "risk_assessment_matrix": "Matriz de Evaluación de Riesgos",
        "recommended_strategies": "Estrategias Recomendadas",
        "business_continuity_strategies": "Estrategias de Continuidad del Negocio",
        "action_plan_by_risk_level": "Plan de Acción por Nivel de Riesgo",
        "implementation_priorities": "Prioridades de Implementación",
        "budget_estimate": "Estimación de Presupuesto",
        "implementation_team": "Equipo de Implementación",
        "resource_requirements": "Requisitos de Recursos",
        "responsible_parties": "Partes Responsables y Roles",
        "review_schedule": "Calendario de Revisión y Actualización",
        "testing_plan": "Plan de Pruebas y Evaluación",
    },
    "location": {
        "coastal_area": "área costera",
        "inland_area": "área interior",
        "local_area": "área local",
    },
    "functions": [
        {
            "function": "Servicio al cliente y ventas",
            "description": "Interacciones directas con clientes y transacciones de venta",
            "priority": "critical",
            "downtime": "0-2h",
            "resources": "Personal, sistema de pago, inventario básico",
        },
        {
            "function": "Gestión de inventario",
            "description": "Gestión y seguimiento de niveles de stock",
            "priority": "important",
            "downtime": "8-24h",
            "resources": "Sistema de seguimiento de inventario, personal",
        },
        {
            "function": "Relaciones con proveedores",
            "description": "Mantener relaciones con proveedores clave",
            "priority": "important",
            "downtime": "1-3d",
            "resources": "Sistemas de comunicación, contactos de proveedores",
        },
    ],
    "examples": {
        "essential_functions": [
            "Servicio al cliente y ventas - Interacciones directas con clientes y transacciones de venta - Crítico - 0-2h - Personal, sistema de pago, inventario básico",
            "Gestión de inventario - Gestión y seguimiento de niveles de stock - Importante - 8-24h - Sistema de seguimiento de inventario, personal",
            "Relaciones con proveedores - Mantener relaciones con proveedores clave - Importante - 1-3d - Sistemas de comunicación, contactos de proveedores",
        ],
        "risk_assessment": [
            "Seleccione peligros relevantes para su ubicación y tipo de negocio",
            "Considere tanto desastres naturales como riesgos causados por humanos",
            "Incluya riesgos específicos de la ubicación como inundaciones costeras o crimen urbano",
        ],
    },
    "strategies": {
        "implement_prevention": "Implementar medidas de prevención para {hazard}",
        "category": {
            "retail": [
                "Implementar sistemas de energía de respaldo para refrigeración y sistemas de PDV",
                "Establecer relaciones con múltiples proveedores para evitar escasez de stock",
                "Instalar sistemas de seguridad e iluminación adecuada para prevención del crimen",
            ],
            "hospitality": [
                "Mantener suministros de emergencia de comida y agua para operaciones extendidas",
                "Instalar generadores de grado comercial para equipo de cocina",
                "Desarrollar diversificación de proveedores para asegurar suministro constante de alimentos",
            ],
            "services": [
                "Almacenamiento de equipo de respaldo en ubicación segura y con clima controlado",
                "Sistema de citas digital con respaldo en la nube",
                "Sistema de programación flexible para acomodar interrupciones del clima",
            ],
        },
        "coastal": {
            "prevention": "Instalar contraventanas de tormenta y barreras de inundación",
            "response": "Evacuar equipo a terreno más alto cuando se emitan advertencias de tormenta",
        },
        "urban": {
            "prevention": "Coordinar con negocios vecinos para acuerdos de ayuda mutua",
            "response": "Utilizar rutas de transporte alternativas durante interrupciones de tráfico",
        },
    },
    "plan": {
        "prevention_header": "Estrategias de Prevención",
        "response_header": "Estrategias de Respuesta",
        "recovery_header": "Estrategias de Recuperación",
        "phase_1": "Fase 1 (0-3 meses): Atender riesgos extremos - {hazards}",
        "phase_2": "Fase 2 (3-6 meses): Atender riesgos altos - {hazards}",
        "phase_3": "Fase 3 (6-12 meses): Completar medidas de reducción de riesgo a largo plazo y realizar la primera prueba completa del plan",
        "next_review": "Próxima revisión programada: {date}",
    },
    "hazards": {
        "hurricane": "Huracán/Tormenta Tropical",
        "earthquake": "Terremoto",
        "flash_flood": "Inundaciones Repentinas",
        "urban_flooding": "Inundaciones Urbanas",
        "river_flooding": "Inundaciones Fluviales",
        "coastal_flooding": "Inundaciones Costeras",
        "storm_surge": "Marejada Ciclónica",
        "tsunami": "Tsunami",
        "landslide": "Deslizamiento de Tierra",
        "drought": "Sequía",
        "coastal_erosion": "Erosión Costera",
        "sargassum": "Impacto del Sargazo",
        "water_shortage": "Escasez de Agua",
        "power_outage": "Corte de Energía",
        "infrastructure_failure": "Falla de Infraestructura",
        "cyber_attack": "Ciberataque",
        "fire": "Incendio",
        "industrial_accident": "Accidente Industrial",
        "chemical_spill": "Derrame Químico",
        "oil_spill": "Derrame de Petróleo",
        "environmental_contamination": "Contaminación Ambiental",
        "water_contamination": "Contaminación del Agua",
        "air_pollution": "Episodio de Contaminación del Aire",
        "waste_management_failure": "Falla en la Gestión de Residuos",
        "waste_management": "Problemas de Gestión de Residuos",
        "crime": "Delincuencia/Problemas de Seguridad",
        "traffic_disruption": "Interrupción del Tráfico/Transporte",
        "urban_congestion": "Congestión Urbana/Tráfico",
        "crowd_management": "Problemas de Control de Multitudes",
        "economic_downturn": "Recesión Económica",
        "supply_disruption": "Interrupción de la Cadena de Suministro",
        "tourism_disruption": "Interrupción del Turismo",
        "pandemic": "Pandemia/Crisis Sanitaria",
        "staff_unavailable": "Falta de Personal",
    },
}


# ============================================================================
# FRENCH TRANSLATIONS
# ============================================================================


FR_TRANSLATIONS = {
    "fields": {
        "business_purpose": "But de l'Entreprise",
        "products_and_services": "Produits et Services",
        "key_personnel_involved": "Personnel Clé Impliqué",
        "operating_hours": "Heures d'Ouverture",
        "minimum_resource_requirements": "Ressources Minimales Nécessaires",
        "customer_base": "Base de Clientèle",
        "unique_selling_points": "Avantages Concurrentiels",
        "industry_type": "Type d'Industrie",
        "country": "Pays",
        "parish": "Paroisse",
        "near_coast": "Près de la Côte",
        "urban_area": "Zone Urbaine",
        "business_functions": "Fonctions de l'Entreprise",
        "business_function": "Fonction de l'Entreprise",
        "description": "Description",
        "priority_level": "Niveau de Priorité",
        "maximum_acceptable_downtime": "Temps d'Arrêt Maximum Acceptable",
        "critical_resources_needed": "Ressources Critiques Nécessaires",
        "potential_hazards": "Dangers Potentiels",
        "risk_assessment_matrix": "Matrice d'Évaluation des Risques",
        "recommended_strategies": "Stratégies Recommandées",
        "business_continuity_strategies": "Stratégies de Continuité d'Activité",
        "action_plan_by_risk_level": "Plan d'Action par Niveau de Risque",
        "implementation_priorities": "Priorités de Mise en Œuvre",
        "budget_estimate": "Estimation Budgétaire",
        "implementation_team": "Équipe de Mise en Œuvre",
        "resource_requirements": "Besoins en Ressources",
        "responsible_parties": "Parties Responsables et Rôles",
        "review_schedule": "Calendrier de Révision et de Mise à Jour",
        "testing_plan": "Plan de Tests et d'Évaluation",
    },
    "location": {
        "coastal_area": "zone côtière",
        "inland_area": "zone intérieure",
        "local_area": "zone locale",
    },
    "functions": [
        {
            "function": "Service client et ventes",
            "description": "Interactions directes avec les clients et transactions de vente",
            "priority": "critical",
            "downtime": "0-2h",
            "resources": "Personnel, système de paiement, inventaire de base",
        },
        {
            "function": "Gestion des stocks",
            "description": "Gestion et suivi des niveaux de stock",
            "priority": "important",
            "downtime": "8-24h",
            "resources": "Système de suivi des stocks, personnel",
        },
        {
            "function": "Relations fournisseurs",
            "description": "Maintien des relations avec les fournisseurs clés",
            "priority": "important",
            "downtime": "1-3j",
            "resources": "Systèmes de communication, contacts fournisseurs",
        },
    ],
    "examples": {
        "essential_functions": [
            "Service client et ventes - Interactions directes avec les clients et transactions de vente - Critique - 0-2h - Personnel, système de paiement, inventaire de base",
            "Gestion des stocks - Gestion et suivi des niveaux de stock - Important - 8-24h - Système de suivi des stocks, personnel",
            "Relations fournisseurs - Maintien des relations avec les fournisseurs clés - Important - 1-3j - Systèmes de communication, contacts fournisseurs",
        ],
        "risk_assessment": [
            "Sélectionnez les dangers pertinents pour votre emplacement et votre type d'entreprise",
            "Considérez à la fois les catastrophes naturelles et les risques causés par l'homme",
            "Incluez les risques spécifiques à l'emplacement comme les inondations côtières ou la criminalité urbaine",
        ],
    },
    "strategies": {
        "implement_prevention": "Mettre en œuvre des mesures de prévention pour {hazard}",
        "category": {
            "retail": [
                "Implémenter des systèmes d'alimentation de secours pour la réfrigération et les systèmes de PDV",
                "Établir des relations avec plusieurs fournisseurs pour éviter les pénuries de stock",
                "Installer des systèmes de sécurité et un éclairage approprié pour la prévention du crime",
            ],
            "hospitality": [
                "Maintenir des provisions d'urgence de nourriture et d'eau pour des opérations prolongées",
                "Installer des générateurs de qualité commerciale pour l'équipement de cuisine",
                "Développer la diversification des fournisseurs pour assurer un approvisionnement alimentaire constant",
            ],
            "services": [
                "Stockage d'équipement de secours dans un endroit sécurisé et climatisé",
                "Système de rendez-vous numérique avec sauvegarde cloud",
                "Système de planification flexible pour accommoder les perturbations météorologiques",
            ],
        },
        "coastal": {
            "prevention": "Installer des volets anti-tempête et des barrières d'inondation",
            "response": "Évacuer l'équipement vers un terrain plus élevé quand des avertissements de tempête sont émis",
        },
        "urban": {
            "prevention": "Coordonner avec les entreprises voisines pour des accords d'aide mutuelle",
            "response": "Utiliser des routes de transport alternatives pendant les perturbations de trafic",
        },
    },
    "plan": {
        "prevention_header": "Stratégies de Prévention",
        "response_header": "Stratégies de Réponse",
        "recovery_header": "Stratégies de Récupération",
        "phase_1": "Phase 1 (0-3 mois) : Traiter les risques extrêmes - {hazards}",
        "phase_2": "Phase 2 (3-6 mois) : Traiter les risques élevés - {hazards}",
        "phase_3": "Phase 3 (6-12 mois) : Achever les mesures de réduction des risques à long terme et réaliser le premier test complet du plan",
        "next_review": "Prochaine révision prévue : {date}",
    },
    "hazards": {
        "hurricane": "Ouragan/Tempête Tropicale",
        "earthquake": "Séisme",
        "flash_flood": "Crues Soudaines",
        "urban_flooding": "Inondations Urbaines",
        "river_flooding": "Crues de Rivière",
        "coastal_flooding": "Inondations Côtières",
        "storm_surge": "Onde de Tempête",
        "tsunami": "Tsunami",
        "landslide": "Glissement de Terrain",
        "drought": "Sécheresse",
        "coastal_erosion": "Érosion Côtière",
        "sargassum": "Impact des Sargasses",
        "water_shortage": "Pénurie d'Eau",
        "power_outage": "Panne de Courant",
        "infrastructure_failure": "Défaillance des Infrastructures",
        "cyber_attack": "Cyberattaque",
        "fire": "Incendie",
        "industrial_accident": "Accident Industriel",
        "chemical_spill": "Déversement Chimique",
        "oil_spill": "Marée Noire",
        "environmental_contamination": "Contamination Environnementale",
        "water_contamination": "Contamination de l'Eau",
        "air_pollution": "Épisode de Pollution de l'Air",
        "waste_management_failure": "Défaillance de la Gestion des Déchets",
        "waste_management": "Problèmes de Gestion des Déchets",
        "crime": "Criminalité/Problèmes de Sécurité",
        "traffic_disruption": "Perturbation du Trafic/des Transports",
        "urban_congestion": "Congestion Urbaine/Trafic",
        "crowd_management": "Problèmes de Gestion des Foules",
        "economic_downturn": "Ralentissement Économique",
        "supply_disruption": "Perturbation de la Chaîne d'Approvisionnement",
        "tourism_disruption": "Perturbation du Tourisme",
        "pandemic": "Pandémie/Crise Sanitaire",
        "staff_unavailable": "Indisponibilité du Personnel",
    },
}


# ============================================================================
# GLOBAL INSTANCE
# ============================================================================


_translator: Optional[TranslationManager] = None


def get_translator() -> TranslationManager:
    """Get global translation manager instance."""
    global _translator
    if _translator is None:
        from caribcp.config import settings

        locales_dir = Path(settings.locales_dir) if settings.locales_dir else None
        _translator = TranslationManager(locales_dir)
    return _translator


def translate(key: str, language: str = "en", **kwargs) -> str:
    """Convenience function for translation."""
    return get_translator().translate(key, language, **kwargs)
