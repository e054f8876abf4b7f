"""
Plan Assessment - Converte um plano de execução em opção de decisão

Risco do plano:
    min(0.3, passos * 0.05) + falhos * 0.1 + min(0.2, duração / 1h)
Viabilidade do plano:
    1 - 0.1 * pendentes, elevada para concluídos/total quando maior

Ambos limitados a [0, 1].
"""
from typing import Optional

from ..types import DecisionOption, ExecutionPlan, StepStatus, EngineConfig
from ..scoring.evaluator import clamp

HOUR_MS = 60 * 60 * 1000

NO_ACTION_ID = "no-action"


def assess_plan_risk(plan: ExecutionPlan, config: Optional[EngineConfig] = None) -> float:
    """Risco estimado do plano em [0, 1]."""
    config = config or EngineConfig()

    # Mais passos = mais risco
    risk = min(config.max_step_risk, len(plan.steps) * config.risk_per_step)

    risk += plan.count(StepStatus.FAILED) * config.risk_per_failed_step

    if plan.estimated_total_duration:
        risk += clamp(plan.estimated_total_duration / HOUR_MS, 0.0, config.max_duration_risk)

    return clamp(risk)


def assess_plan_feasibility(plan: ExecutionPlan, config: Optional[EngineConfig] = None) -> float:
    """Viabilidade estimada do plano em [0, 1]."""
    config = config or EngineConfig()

    feasibility = 1.0 - plan.count(StepStatus.PENDING) * config.feasibility_penalty_per_pending

    if plan.steps:
        completed_ratio = plan.count(StepStatus.COMPLETED) / len(plan.steps)
        feasibility = max(feasibility, completed_ratio)

    return clamp(feasibility)


def plan_to_option(plan: ExecutionPlan, config: Optional[EngineConfig] = None) -> DecisionOption:
    """Opção "executar o plano"."""
    config = config or EngineConfig()
    return DecisionOption(
        id=plan.id,
        description=f"Execute plan for: {plan.goal.description}",
        expected_benefit=config.plan_expected_benefit,
        risk=assess_plan_risk(plan, config),
        feasibility=assess_plan_feasibility(plan, config),
        estimated_duration=plan.estimated_total_duration,
    )


def no_action_option() -> DecisionOption:
    """Opção sintética "não executar"."""
    return DecisionOption(
        id=NO_ACTION_ID,
        description="Do not execute plan",
        expected_benefit=0.0,
        risk=0.0,
        feasibility=1.0,
        estimated_duration=0,
    )
