"""
Long-form text for the STRATEGIES and ACTION_PLAN steps.

All functions are pure: they take the generated action plans (and a
clock where a date is involved) and return localized strings or string
lists. Markdown-like formatting: ``**bold**`` headers, ``- `` bullets.
"""

from datetime import date, timedelta
from typing import Optional, Sequence

from caribcp.i18n.translations import TranslationManager, get_translator
from caribcp.schemas.action_plan import ActionItem, ActionPlan

# Risk-level labels that count as first-phase work
PHASE_1_MARKERS = ("extreme", "very high")
PHASE_2_MARKERS = ("high",)


def _t(translator: Optional[TranslationManager]) -> TranslationManager:
    return translator or get_translator()


def _task_line(item: ActionItem, t: TranslationManager, locale: str) -> str:
    if not item.duration:
        return f"{item.task} ({item.responsible})"
    return t.translate(
        "plan.task_line",
        locale,
        task=item.task,
        responsible=item.responsible,
        duration=item.duration,
    )


def _section(header: str, blocks: list[tuple[str, list[str]]]) -> str:
    lines = [f"**{header}**"]
    for heading, bullets in blocks:
        if not bullets:
            continue
        lines.append("")
        lines.append(f"**{heading}**")
        lines.extend(f"- {b}" for b in bullets)
    return "\n".join(lines)


def strategy_narrative(
    plans: Sequence[ActionPlan],
    locale: str = "en",
    translator: Optional[TranslationManager] = None,
) -> dict[str, str]:
    """
    Prevention / response / recovery narrative, one hazard block per plan.

    Prevention lists long-term reduction measures, response lists the
    immediate and short-term tasks, recovery lists the medium-term tasks.
    """
    t = _t(translator)
    prevention, response, recovery = [], [], []
    for plan in plans:
        heading = t.translate(
            "plan.hazard_heading", locale, hazard=plan.hazard, risk_level=plan.risk_level
        )
        prevention.append((heading, list(plan.long_term_reduction)))
        response.append((
            heading,
            [_task_line(a, t, locale) for a in (*plan.immediate_actions, *plan.short_term_actions)],
        ))
        recovery.append((heading, [_task_line(a, t, locale) for a in plan.medium_term_actions]))

    return {
        "prevention": _section(t.translate("plan.prevention_header", locale), prevention),
        "response": _section(t.translate("plan.response_header", locale), response),
        "recovery": _section(t.translate("plan.recovery_header", locale), recovery),
    }


def _level_has(level: str, markers: Sequence[str]) -> bool:
    level = level.lower().replace("_", " ")
    return any(m in level for m in markers)


def implementation_priorities(
    plans: Sequence[ActionPlan],
    locale: str = "en",
    translator: Optional[TranslationManager] = None,
) -> list[str]:
    """Phased rollout: extreme risks first, then high, then everything long-term."""
    t = _t(translator)
    phase_1 = [p.hazard for p in plans if _level_has(p.risk_level, PHASE_1_MARKERS)]
    phase_2 = [
        p.hazard for p in plans
        if p.hazard not in phase_1 and _level_has(p.risk_level, PHASE_2_MARKERS)
    ]

    lines = []
    if phase_1:
        lines.append(t.translate("plan.phase_1", locale, hazards=", ".join(phase_1)))
    if phase_2:
        lines.append(t.translate("plan.phase_2", locale, hazards=", ".join(phase_2)))
    lines.append(t.translate("plan.phase_3", locale))
    return lines


def budget_estimate(locale: str = "en", translator: Optional[TranslationManager] = None) -> list[str]:
    return _t(translator).translate_list("plan.budget", locale)


def implementation_team(locale: str = "en", translator: Optional[TranslationManager] = None) -> list[str]:
    return _t(translator).translate_list("plan.team", locale)


def resource_requirements(plans: Sequence[ActionPlan]) -> list[str]:
    """Union of every plan's resources, first occurrence order."""
    seen: dict[str, None] = {}
    for plan in plans:
        for resource in plan.resources_needed:
            seen.setdefault(resource, None)
    return list(seen)


def responsibility_assignment(
    plans: Sequence[ActionPlan],
    locale: str = "en",
    translator: Optional[TranslationManager] = None,
) -> list[str]:
    """One line per responsible role listing the tasks it owns."""
    t = _t(translator)
    by_role: dict[str, list[str]] = {}
    for plan in plans:
        for item in (*plan.immediate_actions, *plan.short_term_actions, *plan.medium_term_actions):
            tasks = by_role.setdefault(item.responsible, [])
            if item.task not in tasks:
                tasks.append(item.task)

    if not by_role:
        return []
    lines = [t.translate("plan.responsibility_intro", locale)]
    lines.extend(
        t.translate("plan.responsibility_line", locale, responsible=role, tasks="; ".join(tasks))
        for role, tasks in by_role.items()
    )
    return lines


def next_review_date(today: date, interval_days: int) -> date:
    return today + timedelta(days=interval_days)


def review_schedule(
    today: date,
    interval_days: int = 365,
    locale: str = "en",
    translator: Optional[TranslationManager] = None,
) -> list[str]:
    t = _t(translator)
    lines = t.translate_list("plan.review", locale)
    lines.append(
        t.translate("plan.next_review", locale, date=next_review_date(today, interval_days).isoformat())
    )
    return lines


def testing_schedule(
    plans: Sequence[ActionPlan],
    locale: str = "en",
    translator: Optional[TranslationManager] = None,
) -> list[str]:
    """Fixed test rows plus one drill per distinct matched hazard template."""
    t = _t(translator)
    rows = t.translate_list("plan.testing", locale)
    seen: set[str] = set()
    for plan in plans:
        key = plan.template_key
        if key is None or key in seen:
            continue
        seen.add(key)
        drill = t.lookup(f"plan.drills.{key}", locale)
        if isinstance(drill, str):
            rows.append(drill)
    return rows
