"""
Action plan templates.

HAZARD_ACTION_PLANS holds one template per hazard family keyed by template
key; BUSINESS_TYPE_MODIFIERS holds the additions layered on top for each
business type. GENERIC_ACTION_PLAN is used when no template key matches.
"""

from caribcp.schemas.action_plan import (
    ActionItem,
    ActionPlanTemplate,
    BusinessTypeModifier,
    TaskPriority,
)


def _a(task: str, responsible: str, duration: str, priority: str) -> ActionItem:
    return ActionItem(
        task=task,
        responsible=responsible,
        duration=duration,
        priority=TaskPriority(priority),
    )


# ── Hazard templates ───────────────────────────────────────────────────

HAZARD_ACTION_PLANS: dict[str, ActionPlanTemplate] = {
    "hurricane": ActionPlanTemplate(
        resources_needed=[
            "Generator fuel (72 hours supply)",
            "Emergency cash fund ($5,000-$10,000)",
            "Staff emergency contact list",
            "Backup mobile devices and chargers",
            "Plywood/shutters for windows",
            "Emergency food and water (3-day supply)",
            "Battery-powered radios",
            "First aid kit",
            "Flashlights and batteries",
            "Plastic sheeting and duct tape",
        ],
        immediate_actions=[
            _a("Activate emergency response team", "Business Manager", "1 hour", "high"),
            _a("Secure building (install shutters, move equipment)", "Maintenance Team", "4-8 hours", "high"),
            _a("Ensure all inventory secured and elevated", "Operations Team", "2-4 hours", "high"),
            _a("Test generator and fuel levels", "Maintenance Team", "30 minutes", "high"),
            _a("Notify staff and customers of potential closure", "Management", "2 hours", "high"),
            _a("Backup all critical data to off-site location", "IT/Admin", "2 hours", "high"),
            _a("Withdraw emergency cash for operations", "Finance", "1 hour", "medium"),
            _a("Document pre-storm facility condition (photos/video)", "Management", "1 hour", "medium"),
        ],
        short_term_actions=[
            _a("Monitor weather updates and warnings continuously", "Management", "Ongoing", "high"),
            _a("Coordinate with staff on safety and availability", "HR Manager", "Daily", "high"),
            _a("Secure additional emergency supplies if needed", "Operations Team", "2-4 hours", "medium"),
            _a("Contact insurance company to report potential exposure", "Finance Manager", "1 hour", "medium"),
            _a("Coordinate with suppliers on delivery delays", "Supply Chain Manager", "2 hours", "medium"),
            _a("Update emergency contact information", "HR Manager", "1 hour", "low"),
        ],
        medium_term_actions=[
            _a("Conduct comprehensive damage assessment", "Management Team", "1-2 days", "high"),
            _a("File detailed insurance claims with documentation", "Finance Manager", "3-5 days", "high"),
            _a("Plan phased business reopening strategy", "Management Team", "2-3 days", "high"),
            _a("Coordinate repairs with vetted contractors", "Facilities Manager", "1-2 weeks", "medium"),
            _a("Review and adjust business operations for recovery", "Operations Manager", "1 week", "medium"),
            _a("Communicate recovery timeline to stakeholders", "Management", "2 days", "medium"),
        ],
        long_term_reduction=[
            "Install impact-resistant windows and doors",
            "Upgrade building to meet or exceed hurricane building codes",
            "Establish mutual aid agreements with other businesses",
            "Increase insurance coverage for hurricane-specific damage",
            "Create elevated storage areas for critical inventory",
            "Install permanent backup generator with auto-transfer switch",
            "Develop partnerships with out-of-area suppliers",
            "Implement quarterly hurricane preparedness drills",
        ],
    ),
    "power_outage": ActionPlanTemplate(
        resources_needed=[
            "Backup generator (appropriate capacity)",
            "Uninterruptible Power Supply (UPS) units",
            "Battery-powered emergency lighting",
            "Manual cash registers or calculators",
            "Two-way radios or satellite phones",
            "Generator fuel (72-hour supply)",
            "Extension cords and power strips",
            "Battery banks for devices",
            "Emergency lighting systems",
            "Manual documentation supplies",
        ],
        immediate_actions=[
            _a("Activate backup generator immediately", "Maintenance Team", "15 minutes", "high"),
            _a("Switch to manual processes for critical operations", "Operations Team", "30 minutes", "high"),
            _a("Contact utility company to report outage and get ETA", "Facilities Manager", "15 minutes", "high"),
            _a("Secure cash registers and valuable electronic items", "Operations Team", "30 minutes", "high"),
            _a("Implement emergency lighting in critical areas", "Maintenance Team", "20 minutes", "high"),
            _a("Assess which operations can continue without power", "Operations Manager", "30 minutes", "medium"),
        ],
        short_term_actions=[
            _a("Monitor generator fuel levels every 4 hours", "Maintenance Team", "Ongoing", "high"),
            _a("Coordinate with utility company on restoration timeline", "Facilities Manager", "Every 2 hours", "high"),
            _a("Implement reduced operations to conserve power", "Operations Manager", "1 hour", "medium"),
            _a("Update customers on service availability and limitations", "Customer Service", "2 hours", "medium"),
            _a("Source additional fuel for extended outages", "Maintenance Team", "2-4 hours", "medium"),
        ],
        medium_term_actions=[
            _a("Evaluate backup power system performance", "Facilities Manager", "1 day", "high"),
            _a("Order additional generator equipment if deficiencies found", "Maintenance Team", "2-3 days", "medium"),
            _a("Review and update power outage procedures", "Operations Manager", "3 days", "medium"),
            _a("Document lessons learned and cost impacts", "Management", "1 week", "low"),
            _a("Conduct post-incident training with staff", "HR Manager", "1 week", "low"),
        ],
        long_term_reduction=[
            "Install permanent backup generator system with auto-transfer",
            "Upgrade electrical infrastructure for better reliability",
            "Implement energy-efficient systems to reduce power needs",
            "Consider solar power backup systems with battery storage",
            "Establish agreements with multiple fuel suppliers",
            "Install surge protection for all critical equipment",
            "Create redundant power sources for essential operations",
            "Regular maintenance contracts for backup power systems",
        ],
    ),
    "cyber_attack": ActionPlanTemplate(
        resources_needed=[
            "Incident response team contact list",
            "Digital forensic analysis tools",
            "Clean backup systems and data",
            "Alternative communication channels",
            "Legal counsel and cyber security expert contacts",
            "Cyber insurance policy and claim forms",
            "Offline documentation and procedures",
            "Secure workstation for incident response",
            "Network isolation tools",
            "Emergency communication templates",
        ],
        immediate_actions=[
            _a("Isolate affected systems immediately (disconnect from network)", "IT Manager", "5 minutes", "high"),
            _a("Activate cyber incident response plan", "IT Manager", "15 minutes", "high"),
            _a("Document all actions taken with timestamps", "All Response Team", "Ongoing", "high"),
            _a("Contact cyber insurance provider immediately", "Finance Manager", "30 minutes", "high"),
            _a("Notify law enforcement if required by regulation", "Management", "1 hour", "high"),
            _a("Preserve digital evidence and affected systems", "IT Team", "2 hours", "high"),
        ],
        short_term_actions=[
            _a("Implement comprehensive containment measures", "IT Team", "4-8 hours", "high"),
            _a("Begin restoration from verified clean backups", "IT Team", "8-24 hours", "high"),
            _a("Conduct initial impact assessment", "IT Manager", "4 hours", "high"),
            _a("Coordinate with external cyber security experts", "Management", "2 hours", "medium"),
            _a("Notify affected customers and stakeholders", "Management", "6 hours", "medium"),
            _a("Set up alternative business operations", "Operations Manager", "8 hours", "medium"),
        ],
        medium_term_actions=[
            _a("Complete comprehensive forensic analysis", "External Experts", "1-2 weeks", "high"),
            _a("Implement enhanced security measures and patches", "IT Team", "1 week", "high"),
            _a("Provide detailed incident reports to stakeholders", "Management", "3-5 days", "medium"),
            _a("Review and update all cybersecurity policies", "IT Manager", "2 weeks", "medium"),
            _a("Conduct staff training on new security measures", "HR & IT", "1 week", "medium"),
        ],
        long_term_reduction=[
            "Implement advanced cybersecurity monitoring (SOC)",
            "Conduct monthly security awareness training for all staff",
            "Upgrade firewall and intrusion detection systems",
            "Implement multi-factor authentication across all systems",
            "Regular penetration testing and vulnerability assessments",
            "Establish data encryption for all sensitive information",
            "Create air-gapped backup systems",
            "Develop cyber insurance coverage and incident response retainer",
        ],
    ),
    "fire": ActionPlanTemplate(
        resources_needed=[
            "Fire extinguishers (Class A, B, C)",
            "Fire suppression system",
            "Emergency evacuation maps and procedures",
            "Backup location for temporary operations",
            "Fire insurance policy documentation",
            "Emergency contact lists (fire dept, insurance)",
            "Critical document backups (fireproof safe)",
            "Emergency lighting and exit signs",
            "Smoke detectors and fire alarms",
            "Fire blankets and safety equipment",
        ],
        immediate_actions=[
            _a("Evacuate all personnel to designated safe area", "All Staff", "2-5 minutes", "high"),
            _a("Call fire department and emergency services", "First Available Person", "Immediate", "high"),
            _a("Conduct headcount to account for all staff and visitors", "Floor Wardens", "5 minutes", "high"),
            _a("Secure perimeter and prevent unauthorized re-entry", "Management", "15 minutes", "high"),
            _a("Contact insurance company to report incident", "Management", "1 hour", "high"),
            _a("Coordinate with fire department incident commander", "Senior Manager", "Ongoing", "high"),
        ],
        short_term_actions=[
            _a("Coordinate with fire investigation team", "Management", "1-2 days", "high"),
            _a("Document damage with photos/video for insurance", "Management", "4 hours", "high"),
            _a("Arrange temporary alternative work location", "Facilities Manager", "24 hours", "high"),
            _a("Notify customers of service disruption and alternatives", "Customer Service", "4 hours", "medium"),
            _a("Secure damaged property and remaining assets", "Security/Management", "8 hours", "medium"),
            _a("Contact employees about work arrangements", "HR Manager", "8 hours", "medium"),
        ],
        medium_term_actions=[
            _a("File comprehensive insurance claims with documentation", "Finance Manager", "1 week", "high"),
            _a("Develop facility restoration or relocation plan", "Management Team", "1 week", "high"),
            _a("Coordinate with contractors for repairs/reconstruction", "Facilities Manager", "2-4 weeks", "medium"),
            _a("Review and improve fire safety procedures", "Safety Manager", "2 weeks", "medium"),
            _a("Establish timeline for full business resumption", "Management", "1 week", "medium"),
        ],
        long_term_reduction=[
            "Install comprehensive sprinkler system throughout facility",
            "Upgrade fire detection and alarm systems",
            "Conduct monthly fire safety training and evacuation drills",
            "Improve electrical systems and eliminate fire hazards",
            "Establish off-site data backup and storage systems",
            "Create fire-resistant storage for critical documents",
            "Install fire-resistant building materials where possible",
            "Develop mutual aid agreements with nearby businesses",
        ],
    ),
    "earthquake": ActionPlanTemplate(
        resources_needed=[
            "Emergency supplies (72-hour kit)",
            "Structural assessment tools",
            "Heavy lifting/rescue equipment",
            "First aid supplies and AED",
            "Emergency communication devices",
            "Earthquake insurance documentation",
            "Backup power and lighting",
            "Water and food supplies",
            "Structural engineer contact information",
            "Emergency cash reserves",
        ],
        immediate_actions=[
            _a("Ensure all personnel safety and account for everyone", "All Staff", "10 minutes", "high"),
            _a("Conduct initial safety assessment of building structure", "Facilities Manager", "30 minutes", "high"),
            _a("Shut off utilities if damage suspected (gas, water, electricity)", "Maintenance Team", "15 minutes", "high"),
            _a("Contact emergency services if injuries or major damage", "Management", "5 minutes", "high"),
            _a("Establish safe area away from damaged structures", "Floor Wardens", "10 minutes", "high"),
            _a("Check for and assist injured personnel", "First Aid Trained Staff", "20 minutes", "high"),
        ],
        short_term_actions=[
            _a("Arrange professional structural inspection", "Facilities Manager", "4-8 hours", "high"),
            _a("Document all damage with photos/video", "Management", "2-4 hours", "high"),
            _a("Contact insurance company to report earthquake damage", "Finance Manager", "2 hours", "high"),
            _a("Coordinate with local emergency management", "Management", "Ongoing", "medium"),
            _a("Check on employee welfare and housing situation", "HR Manager", "1 day", "medium"),
        ],
        medium_term_actions=[
            _a("Complete detailed structural and safety assessment", "Licensed Engineer", "3-5 days", "high"),
            _a("File earthquake insurance claims with full documentation", "Finance Manager", "1 week", "high"),
            _a("Coordinate repairs with qualified contractors", "Facilities Manager", "2-6 weeks", "medium"),
            _a("Establish alternative operations if building unusable", "Management", "1 week", "medium"),
            _a("Review and update earthquake preparedness procedures", "Safety Manager", "2 weeks", "low"),
        ],
        long_term_reduction=[
            "Retrofit building to meet current seismic building codes",
            "Secure heavy equipment and shelving to prevent tipping",
            "Install automatic gas shut-off valves",
            "Conduct regular earthquake preparedness drills",
            "Establish off-site backup facilities and data storage",
            "Improve earthquake insurance coverage",
            "Create emergency supply caches in multiple locations",
            "Train staff in earthquake response and first aid",
        ],
    ),
    "flood": ActionPlanTemplate(
        resources_needed=[
            "Water pumps and generators",
            "Sandbags and flood barriers",
            "Waterproof storage containers",
            "Flood insurance documentation",
            "Emergency supplies above flood level",
            "Water testing kits",
            "Dehumidifiers and fans",
            "Protective clothing and boots",
            "Documentation in waterproof containers",
            "Alternative transportation arrangements",
        ],
        immediate_actions=[
            _a("Move critical equipment and inventory to higher ground", "Operations Team", "2-4 hours", "high"),
            _a("Shut off electrical power to affected areas", "Maintenance Team", "30 minutes", "high"),
            _a("Evacuate personnel if flooding threatens safety", "Management", "1 hour", "high"),
            _a("Contact emergency services and report flood conditions", "Management", "15 minutes", "high"),
            _a("Install flood barriers and sandbags where possible", "Maintenance Team", "2-3 hours", "medium"),
            _a("Secure important documents in waterproof storage", "Admin Team", "1 hour", "medium"),
        ],
        short_term_actions=[
            _a("Monitor water levels and weather forecasts", "Management", "Ongoing", "high"),
            _a("Begin water removal once safe to do so", "Maintenance Team", "1-3 days", "high"),
            _a("Document all flood damage with photos/video", "Management", "1 day", "high"),
            _a("Contact flood insurance provider", "Finance Manager", "4 hours", "medium"),
            _a("Coordinate with local authorities on area conditions", "Management", "Daily", "medium"),
        ],
        medium_term_actions=[
            _a("Conduct comprehensive damage assessment", "Management Team", "3-5 days", "high"),
            _a("Begin professional water damage restoration", "Restoration Contractors", "1-4 weeks", "high"),
            _a("File detailed flood insurance claims", "Finance Manager", "1 week", "high"),
            _a("Test and replace damaged equipment and systems", "IT/Maintenance", "2-4 weeks", "medium"),
            _a("Develop temporary operations plan", "Operations Manager", "1 week", "medium"),
        ],
        long_term_reduction=[
            "Install flood-resistant building modifications",
            "Elevate critical equipment above potential flood levels",
            "Improve drainage systems around facility",
            "Develop relationships with flood restoration contractors",
            "Enhance flood insurance coverage",
            "Create elevated storage areas for critical inventory",
            "Install flood warning systems and procedures",
            "Establish alternative facilities in non-flood zones",
        ],
    ),
}


# ── Generic fallback ───────────────────────────────────────────────────

GENERIC_ACTION_PLAN = ActionPlanTemplate(
    resources_needed=[
        "Emergency contact list",
        "Emergency cash fund",
        "First aid kit",
        "Backup copies of critical documents",
        "Battery-powered radio and flashlights",
    ],
    immediate_actions=[
        _a("Assess the situation and ensure staff safety", "Management", "30 minutes", "high"),
        _a("Activate the emergency response team", "Management", "1 hour", "high"),
        _a("Secure the premises and critical assets", "Safety Officer", "2 hours", "high"),
        _a("Notify staff, customers and suppliers of the disruption", "Communications", "2 hours", "medium"),
    ],
    short_term_actions=[],
    medium_term_actions=[],
    long_term_reduction=[],
)


# ── Business-type modifiers ────────────────────────────────────────────

BUSINESS_TYPE_MODIFIERS: dict[str, BusinessTypeModifier] = {
    "tourism": BusinessTypeModifier(
        additional_resources=[
            "Guest notification systems",
            "Alternative accommodation arrangements",
            "Tour cancellation procedures",
            "Customer refund policies",
            "Travel advisory communication templates",
        ],
        immediate_actions=[
            _a("Notify all current guests of emergency situation", "Front Desk Manager", "1 hour", "high"),
            _a("Activate guest evacuation procedures if necessary", "Security/Management", "30 minutes", "high"),
            _a("Coordinate with local tourism authorities", "Management", "2 hours", "medium"),
        ],
        short_term_actions=[
            _a("Arrange alternative accommodation for displaced guests", "Guest Services", "4-8 hours", "high"),
            _a("Cancel upcoming tours and activities", "Tour Operations", "2 hours", "medium"),
            _a("Process guest refunds and insurance claims", "Finance", "1-2 days", "medium"),
        ],
        specific_considerations=[
            "Guest safety is paramount and supersedes business operations",
            "Coordinate with local tourism board and hospitality association",
            "Maintain communication with tour operators and travel agents",
            "Consider seasonal impacts on tourism revenue",
            "Coordinate with transportation providers for guest evacuation",
        ],
    ),
    "retail": BusinessTypeModifier(
        additional_resources=[
            "Point-of-sale backup systems",
            "Inventory protection supplies",
            "Customer notification systems",
            "Security systems and personnel",
            "Alternative payment processing methods",
        ],
        immediate_actions=[
            _a("Secure all cash registers and payment systems", "Store Manager", "30 minutes", "high"),
            _a("Protect high-value inventory and electronics", "Operations Team", "1-2 hours", "high"),
            _a("Post customer notices about store status", "Customer Service", "30 minutes", "medium"),
        ],
        short_term_actions=[
            _a("Implement mobile point-of-sale if possible", "IT/Operations", "2-4 hours", "medium"),
            _a("Coordinate with suppliers on delivery delays", "Purchasing Manager", "1 day", "medium"),
            _a("Update website and social media with store status", "Marketing", "2 hours", "low"),
        ],
        specific_considerations=[
            "Inventory protection is critical to minimize losses",
            "Customer notification prevents lost sales and reputation damage",
            "Point-of-sale system backup ensures business continuity",
            "Security measures prevent theft during emergency periods",
            "Supplier coordination minimizes supply chain disruption",
        ],
    ),
    "food_service": BusinessTypeModifier(
        additional_resources=[
            "Food safety thermometers",
            "Alternative cooking equipment",
            "Refrigeration backup systems",
            "Food spoilage insurance documentation",
            "Health department contact information",
        ],
        immediate_actions=[
            _a("Secure all perishable food inventory", "Kitchen Manager", "1 hour", "high"),
            _a("Monitor refrigeration systems and temperatures", "Kitchen Staff", "Ongoing", "high"),
            _a("Contact health department about food safety concerns", "Manager", "1 hour", "medium"),
        ],
        short_term_actions=[
            _a("Arrange alternative refrigeration if systems fail", "Kitchen Manager", "2-4 hours", "high"),
            _a("Document food spoilage for insurance claims", "Manager", "1 day", "medium"),
            _a("Coordinate with suppliers for replacement inventory", "Purchasing", "1-2 days", "medium"),
        ],
        specific_considerations=[
            "Food safety regulations must be maintained even during emergencies",
            "Perishable inventory loss can be significant financial impact",
            "Health department coordination ensures compliance",
            "Alternative cooking methods may be needed for service continuity",
            "Customer health and safety cannot be compromised",
        ],
    ),
    "manufacturing": BusinessTypeModifier(
        additional_resources=[
            "Industrial safety equipment",
            "Hazardous material containment supplies",
            "Production line backup procedures",
            "Quality control testing equipment",
            "Environmental cleanup materials",
        ],
        immediate_actions=[
            _a("Secure all hazardous materials and chemicals", "Safety Manager", "1 hour", "high"),
            _a("Shut down production lines safely", "Production Manager", "2 hours", "high"),
            _a("Contact environmental authorities if spill risk", "Management", "30 minutes", "high"),
        ],
        short_term_actions=[
            _a("Assess production equipment for damage", "Maintenance Team", "1-2 days", "high"),
            _a("Coordinate with customers on order delays", "Sales Manager", "1 day", "medium"),
            _a("Arrange alternative production if possible", "Operations Manager", "2-3 days", "medium"),
        ],
        specific_considerations=[
            "Environmental compliance is critical during emergencies",
            "Production equipment damage assessment requires technical expertise",
            "Customer notification prevents supply chain disruptions",
            "Hazardous material handling follows strict safety protocols",
            "Quality control must be maintained in alternative operations",
        ],
    ),
    "technology": BusinessTypeModifier(
        additional_resources=[
            "Backup servers and cloud infrastructure",
            "Cybersecurity incident response tools",
            "Data recovery systems",
            "Alternative internet connectivity",
            "Remote work setup equipment",
        ],
        immediate_actions=[
            _a("Activate data backup and recovery procedures", "IT Manager", "1 hour", "high"),
            _a("Switch to cloud-based backup systems", "IT Team", "2 hours", "high"),
            _a("Enable remote work capabilities for staff", "IT Support", "2-4 hours", "medium"),
        ],
        short_term_actions=[
            _a("Test all backup systems and data integrity", "IT Team", "1-2 days", "high"),
            _a("Coordinate with clients on service availability", "Account Managers", "1 day", "medium"),
            _a("Implement temporary development environment", "Development Team", "2-3 days", "medium"),
        ],
        specific_considerations=[
            "Data protection and recovery is business-critical",
            "Client communication about service impacts is essential",
            "Remote work capabilities ensure business continuity",
            "Cybersecurity measures must be maintained during emergencies",
            "Alternative infrastructure may be needed for critical services",
        ],
    ),
}
