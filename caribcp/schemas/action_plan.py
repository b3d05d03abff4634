"""
Action Plan Schemas.

An ActionPlan responds to one priority hazard with timed task lists:
    immediate   : 0-24 hours
    short term  : 1-7 days
    medium term : 1-4 weeks
plus resources and long-term risk-reduction measures.
"""

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ActionItem(BaseModel):
    """A single task in an action plan."""
    task: str
    responsible: str
    duration: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM


class ActionPlanTemplate(BaseModel):
    """Catalog template for one hazard family."""
    resources_needed: list[str] = Field(default_factory=list)
    immediate_actions: list[ActionItem] = Field(default_factory=list)
    short_term_actions: list[ActionItem] = Field(default_factory=list)
    medium_term_actions: list[ActionItem] = Field(default_factory=list)
    long_term_reduction: list[str] = Field(default_factory=list)


class BusinessTypeModifier(BaseModel):
    """Business-type additions layered on top of a hazard template."""
    additional_resources: list[str] = Field(default_factory=list)
    immediate_actions: list[ActionItem] = Field(default_factory=list)
    short_term_actions: list[ActionItem] = Field(default_factory=list)
    specific_considerations: list[str] = Field(default_factory=list)


class ActionPlan(BaseModel):
    """A concrete action plan for one priority hazard."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    hazard: str
    risk_level: str
    business_type: str
    template_key: Optional[str] = None     # None → generic synthesized plan
    resources_needed: list[str] = Field(default_factory=list)
    immediate_actions: list[ActionItem] = Field(default_factory=list)
    short_term_actions: list[ActionItem] = Field(default_factory=list)
    medium_term_actions: list[ActionItem] = Field(default_factory=list)
    long_term_reduction: list[str] = Field(default_factory=list)
    specific_considerations: list[str] = Field(default_factory=list)
