"""
Decisor - Motor de decisão autônoma

Escolhe entre ações candidatas com:
- Filtro por restrições (risco máximo, limite de tempo)
- Score ponderado (benefício, risco, viabilidade, velocidade)
- Ajuste por similaridade com decisões passadas
- Histórico de resultados para aprendizado
"""
from .types import (
    StepStatus,
    DecisionOption,
    DecisionConstraints,
    DecisionContext,
    DecisionOutcome,
    DecisionCriteria,
    DecisionCapabilities,
    DecisionResult,
    DecisionStats,
    OptionEvaluation,
    Goal,
    PlanStep,
    ExecutionPlan,
    EngineConfig,
    LLMConfig,
)
from .errors import DecisionError, PolicyViolation, NoViableOptions, ConfidenceTooLow
from .engine import DecisionEngine

__version__ = "0.1.0"
__all__ = [
    "StepStatus",
    "DecisionOption",
    "DecisionConstraints",
    "DecisionContext",
    "DecisionOutcome",
    "DecisionCriteria",
    "DecisionCapabilities",
    "DecisionResult",
    "DecisionStats",
    "OptionEvaluation",
    "Goal",
    "PlanStep",
    "ExecutionPlan",
    "EngineConfig",
    "LLMConfig",
    "DecisionError",
    "PolicyViolation",
    "NoViableOptions",
    "ConfidenceTooLow",
    "DecisionEngine",
]
