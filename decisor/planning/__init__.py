"""Planning - Avaliação de planos de execução."""
from .assessment import (
    assess_plan_risk,
    assess_plan_feasibility,
    plan_to_option,
    no_action_option,
    NO_ACTION_ID,
)

__all__ = [
    "assess_plan_risk",
    "assess_plan_feasibility",
    "plan_to_option",
    "no_action_option",
    "NO_ACTION_ID",
]
