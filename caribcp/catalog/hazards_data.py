"""
Hazard reference tables.

HAZARD_DEFINITIONS names every hazard id used by any catalog.
LOCATION_HAZARDS lists per-country exposure: base hazards, parish-specific
additions, coastal and urban modifiers.
"""

from caribcp.schemas.hazard import Frequency, Hazard, Impact, LocationHazardSet, RiskLevel


def _hazard(
    hazard_id: str,
    name: str,
    risk_level: str,
    frequency: str,
    impact: str,
) -> Hazard:
    return Hazard(
        hazard_id=hazard_id,
        name=name,
        risk_level=RiskLevel(risk_level),
        frequency=Frequency(frequency),
        impact=Impact(impact),
    )


# ── Hazard definitions ─────────────────────────────────────────────────

HAZARD_DEFINITIONS: dict[str, Hazard] = {
    h.hazard_id: h
    for h in [
        # Natural
        _hazard("hurricane", "Hurricane/Tropical Storm", "high", "likely", "major"),
        _hazard("earthquake", "Earthquake", "medium", "possible", "major"),
        _hazard("flash_flood", "Flash Flooding", "medium", "possible", "moderate"),
        _hazard("urban_flooding", "Urban Flooding", "medium", "possible", "moderate"),
        _hazard("river_flooding", "River Flooding", "medium", "possible", "moderate"),
        _hazard("coastal_flooding", "Coastal Flooding", "medium", "possible", "moderate"),
        _hazard("storm_surge", "Storm Surge", "high", "likely", "major"),
        _hazard("tsunami", "Tsunami", "low", "rare", "catastrophic"),
        _hazard("landslide", "Landslide", "medium", "possible", "major"),
        _hazard("drought", "Drought", "medium", "possible", "moderate"),
        _hazard("coastal_erosion", "Coastal Erosion", "medium", "possible", "moderate"),
        _hazard("sargassum", "Sargassum Seaweed Impact", "medium", "possible", "minor"),
        _hazard("water_shortage", "Water Shortage", "medium", "possible", "moderate"),
        # Technological
        _hazard("power_outage", "Power Outage", "high", "likely", "minor"),
        _hazard("infrastructure_failure", "Infrastructure Failure", "medium", "possible", "moderate"),
        _hazard("cyber_attack", "Cyber Attack", "medium", "possible", "major"),
        _hazard("fire", "Fire", "medium", "unlikely", "major"),
        _hazard("industrial_accident", "Industrial Accident", "medium", "possible", "major"),
        _hazard("chemical_spill", "Chemical Spill", "low", "unlikely", "major"),
        _hazard("oil_spill", "Oil Spill", "low", "unlikely", "major"),
        _hazard("environmental_contamination", "Environmental Contamination", "medium", "possible", "moderate"),
        _hazard("water_contamination", "Water Contamination", "medium", "possible", "major"),
        _hazard("air_pollution", "Air Pollution Event", "medium", "possible", "moderate"),
        _hazard("waste_management_failure", "Waste Management Failure", "medium", "possible", "minor"),
        _hazard("waste_management", "Waste Management Issues", "low", "unlikely", "minor"),
        # Human / economic
        _hazard("crime", "Crime/Security Issues", "medium", "possible", "minor"),
        _hazard("traffic_disruption", "Traffic/Transport Disruption", "medium", "possible", "minor"),
        _hazard("urban_congestion", "Urban Congestion/Traffic", "medium", "possible", "minor"),
        _hazard("crowd_management", "Crowd Management Issues", "low", "unlikely", "minor"),
        _hazard("economic_downturn", "Economic Downturn", "medium", "possible", "moderate"),
        _hazard("supply_disruption", "Supply Chain Disruption", "medium", "possible", "moderate"),
        _hazard("tourism_disruption", "Tourism Disruption", "medium", "possible", "moderate"),
        _hazard("pandemic", "Pandemic/Health Crisis", "medium", "possible", "major"),
        _hazard("staff_unavailable", "Staff Unavailability", "medium", "possible", "moderate"),
    ]
}


def display_name(hazard_id: str) -> str:
    """Catalog name, or a title-cased id for hazards nobody defined."""
    hazard = HAZARD_DEFINITIONS.get(hazard_id)
    if hazard is not None:
        return hazard.name
    return hazard_id.replace("_", " ").title()


def _h(hazard_id: str, risk_level: str, frequency: str, impact: str) -> Hazard:
    return _hazard(hazard_id, display_name(hazard_id), risk_level, frequency, impact)


# ── Location exposure ──────────────────────────────────────────────────

LOCATION_HAZARDS: list[LocationHazardSet] = [
    LocationHazardSet(
        country="Jamaica",
        country_code="JM",
        base_hazards=[
            _h("hurricane", "high", "likely", "major"),
            _h("earthquake", "medium", "possible", "major"),
            _h("flash_flood", "medium", "possible", "moderate"),
            _h("drought", "medium", "possible", "moderate"),
            _h("power_outage", "high", "likely", "minor"),
            _h("economic_downturn", "medium", "possible", "moderate"),
            _h("supply_disruption", "medium", "possible", "moderate"),
            _h("crime", "medium", "possible", "minor"),
            _h("industrial_accident", "medium", "possible", "major"),
            _h("chemical_spill", "low", "unlikely", "major"),
            _h("environmental_contamination", "medium", "possible", "moderate"),
            _h("waste_management_failure", "medium", "possible", "minor"),
            _h("air_pollution", "medium", "possible", "moderate"),
            _h("water_contamination", "medium", "possible", "major"),
        ],
        sub_regions={
            "Kingston": [
                _h("urban_flooding", "high", "likely", "moderate"),
                _h("traffic_disruption", "high", "likely", "minor"),
            ],
            "St. Andrew": [
                _h("landslide", "medium", "possible", "major"),
                _h("urban_flooding", "medium", "possible", "moderate"),
            ],
            "Portland": [
                _h("landslide", "high", "likely", "major"),
                _h("river_flooding", "medium", "possible", "moderate"),
            ],
            "St. Thomas": [
                _h("landslide", "medium", "possible", "major"),
                _h("river_flooding", "medium", "possible", "moderate"),
            ],
            "St. Catherine": [
                _h("urban_flooding", "medium", "possible", "moderate"),
                _h("industrial_accident", "medium", "possible", "moderate"),
            ],
            "Clarendon": [
                _h("drought", "high", "likely", "moderate"),
                _h("flash_flood", "medium", "possible", "moderate"),
            ],
            "Manchester": [
                _h("landslide", "medium", "possible", "major"),
                _h("drought", "medium", "possible", "moderate"),
            ],
            "St. Elizabeth": [
                _h("drought", "high", "likely", "moderate"),
                _h("flash_flood", "low", "unlikely", "minor"),
            ],
            "Westmoreland": [
                _h("coastal_flooding", "high", "likely", "moderate"),
                _h("hurricane", "high", "likely", "major"),
            ],
            "Hanover": [
                _h("coastal_flooding", "medium", "possible", "moderate"),
                _h("tourism_disruption", "medium", "possible", "moderate"),
            ],
            "St. James": [
                _h("coastal_flooding", "high", "likely", "moderate"),
                _h("tourism_disruption", "high", "likely", "moderate"),
                _h("urban_flooding", "medium", "possible", "moderate"),
            ],
            "Trelawny": [
                _h("coastal_erosion", "medium", "possible", "moderate"),
                _h("tourism_disruption", "medium", "possible", "moderate"),
            ],
            "St. Ann": [
                _h("tourism_disruption", "high", "likely", "moderate"),
                _h("flash_flood", "medium", "possible", "moderate"),
            ],
            "St. Mary": [
                _h("flash_flood", "high", "likely", "moderate"),
                _h("landslide", "medium", "possible", "major"),
            ],
        },
        coastal_modifiers=[
            _h("storm_surge", "high", "likely", "major"),
            _h("coastal_erosion", "medium", "possible", "moderate"),
            _h("tsunami", "low", "rare", "catastrophic"),
        ],
        urban_modifiers=[
            _h("infrastructure_failure", "medium", "possible", "moderate"),
            _h("crowd_management", "low", "unlikely", "minor"),
        ],
    ),
    LocationHazardSet(
        country="Barbados",
        country_code="BB",
        base_hazards=[
            _h("hurricane", "high", "likely", "major"),
            _h("drought", "high", "likely", "moderate"),
            _h("power_outage", "medium", "possible", "minor"),
            _h("economic_downturn", "medium", "possible", "moderate"),
            _h("supply_disruption", "high", "likely", "moderate"),
            _h("pandemic", "medium", "possible", "major"),
        ],
        sub_regions={
            "Christ Church": [
                _h("coastal_flooding", "high", "likely", "moderate"),
            ],
            "St. Michael": [
                _h("urban_congestion", "medium", "possible", "minor"),
            ],
            "St. John": [
                _h("water_shortage", "medium", "possible", "moderate"),
            ],
        },
        coastal_modifiers=[
            _h("storm_surge", "high", "likely", "major"),
            _h("coastal_erosion", "high", "likely", "moderate"),
            _h("sargassum", "medium", "possible", "minor"),
        ],
        urban_modifiers=[
            _h("water_shortage", "medium", "possible", "moderate"),
            _h("waste_management", "low", "unlikely", "minor"),
        ],
    ),
    LocationHazardSet(
        country="Trinidad and Tobago",
        country_code="TT",
        base_hazards=[
            _h("hurricane", "medium", "possible", "major"),
            _h("flash_flood", "high", "likely", "moderate"),
            _h("landslide", "medium", "possible", "major"),
            _h("power_outage", "medium", "possible", "minor"),
            _h("economic_downturn", "medium", "possible", "moderate"),
            _h("supply_disruption", "medium", "possible", "moderate"),
            _h("crime", "high", "likely", "moderate"),
        ],
        sub_regions={
            "Port of Spain": [
                _h("urban_flooding", "high", "likely", "moderate"),
                _h("traffic_disruption", "high", "likely", "minor"),
            ],
            "San Fernando": [
                _h("industrial_accident", "low", "unlikely", "major"),
                _h("air_pollution", "medium", "possible", "minor"),
            ],
            "Tobago": [
                _h("water_shortage", "medium", "possible", "moderate"),
                _h("tourism_disruption", "medium", "possible", "moderate"),
            ],
        },
        coastal_modifiers=[
            _h("storm_surge", "medium", "possible", "moderate"),
            _h("coastal_erosion", "medium", "possible", "moderate"),
            _h("oil_spill", "low", "unlikely", "major"),
        ],
        urban_modifiers=[
            _h("infrastructure_failure", "medium", "possible", "moderate"),
            _h("industrial_accident", "low", "unlikely", "major"),
        ],
    ),
]
