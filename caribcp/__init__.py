"""
CaribCP: business continuity pre-fill engine for small Caribbean businesses.

Architecture:
    caribcp/
    ├── schemas/         # Pydantic models (hazards, industries, assessments, plans, bundles)
    ├── catalog/         # Reference data + read-only repositories (hazards, industries, templates)
    ├── engine/          # Risk scoring (schemes, location amplification, ranked risk list)
    ├── planning/        # Strategy recommendation + action-plan matching
    ├── prefill/         # Pre-fill assembly, narratives, legacy migration, merge
    └── i18n/            # Translation manager (EN, ES, FR)

Module Boundaries:
    - Catalogs are read-only; the admin layer owns writes
    - The engine is stateless; every request builds fresh assessments
    - Missing data degrades to an empty contribution, never an exception
    - Merging into form state is additive-only (first writer wins)

Data Flow:
    (businessTypeId, location) → Catalogs → Risk Engine → Action-Plan Matcher
    → Strategy Recommender → Pre-Fill Assembler → PreFillBundle

Version: 1.0.0
"""

__version__ = "1.0.0"
