"""
Decisor Types - Dataclasses compartilhadas

Define os tipos fundamentais usados pelo motor de decisão:
- DecisionOption: ação candidata (benefício, risco, viabilidade, duração)
- DecisionContext: opções disponíveis + restrições + histórico
- DecisionOutcome: resultado real de uma decisão passada
- DecisionResult: opção escolhida, confiança e alternativas
- ExecutionPlan: plano a ser avaliado por decide_plan_execution
"""
from dataclasses import dataclass, field, asdict, replace
from typing import Any, Optional
from enum import Enum
from datetime import datetime


def _pick(data: dict, *keys: str, default: Any = None) -> Any:
    """Retorna o primeiro valor presente entre as chaves (snake ou camelCase)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")


class StepStatus(Enum):
    """Status de um passo do plano."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class DecisionOption:
    """Uma ação candidata. Imutável depois de criada."""
    id: str
    description: str = ""
    expected_benefit: float = 0.0   # 0-1
    risk: float = 0.0               # 0-1
    feasibility: float = 1.0        # 0-1
    estimated_duration: Optional[float] = None  # milissegundos

    def __post_init__(self):
        _check_unit("expected_benefit", self.expected_benefit)
        _check_unit("risk", self.risk)
        _check_unit("feasibility", self.feasibility)
        if self.estimated_duration is not None and self.estimated_duration < 0:
            raise ValueError(
                f"estimated_duration must be >= 0, got {self.estimated_duration}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "DecisionOption":
        return cls(
            id=str(data["id"]),
            description=data.get("description", ""),
            expected_benefit=float(_pick(data, "expected_benefit", "expectedBenefit", default=0.0)),
            risk=float(_pick(data, "risk", default=0.0)),
            feasibility=float(_pick(data, "feasibility", default=1.0)),
            estimated_duration=_pick(data, "estimated_duration", "estimatedDuration"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DecisionConstraints:
    """Restrições opcionais aplicadas a uma decisão."""
    max_risk: Optional[float] = None
    min_confidence: Optional[float] = None
    time_limit: Optional[float] = None  # milissegundos

    @classmethod
    def from_dict(cls, data: dict) -> "DecisionConstraints":
        return cls(
            max_risk=_pick(data, "max_risk", "maxRisk"),
            min_confidence=_pick(data, "min_confidence", "minConfidence"),
            time_limit=_pick(data, "time_limit", "timeLimit"),
        )


@dataclass(frozen=True)
class DecisionOutcome:
    """Resultado real de uma decisão. Imutável: atualizações geram cópia."""
    decision_id: str
    selected_option: DecisionOption
    actual_benefit: float = 0.0
    actual_duration: float = 0.0
    success: bool = False

    @property
    def realized_risk(self) -> float:
        """Risco realizado binário: 0 se deu certo, 1 caso contrário."""
        return 0.0 if self.success else 1.0

    @classmethod
    def from_dict(cls, data: dict) -> "DecisionOutcome":
        option = _pick(data, "selected_option", "selectedOption")
        return cls(
            decision_id=str(_pick(data, "decision_id", "decisionId", default="")),
            selected_option=DecisionOption.from_dict(option),
            actual_benefit=float(_pick(data, "actual_benefit", "actualBenefit", default=0.0)),
            actual_duration=float(_pick(data, "actual_duration", "actualDuration", default=0.0)),
            success=bool(data.get("success", False)),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DecisionContext:
    """
    Contexto de uma decisão.

    current_state é opaco para o motor: nunca é lido, só repassado.
    historical_outcomes vem do chamador; o histórico interno do motor
    só entra aqui se o chamador incluir (ver DecisionEngine.history_snapshot).
    """
    available_options: list[DecisionOption] = field(default_factory=list)
    current_state: Any = None
    constraints: Optional[DecisionConstraints] = None
    historical_outcomes: list[DecisionOutcome] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "DecisionContext":
        constraints = data.get("constraints")
        return cls(
            available_options=[
                DecisionOption.from_dict(o)
                for o in _pick(data, "available_options", "availableOptions", "options", default=[])
            ],
            current_state=_pick(data, "current_state", "currentState"),
            constraints=DecisionConstraints.from_dict(constraints) if constraints else None,
            historical_outcomes=[
                DecisionOutcome.from_dict(o)
                for o in _pick(data, "historical_outcomes", "historicalOutcomes", default=[])
            ],
        )


@dataclass
class DecisionCriteria:
    """Pesos dos critérios. A soma 1.0 é esperada mas não obrigatória."""
    benefit_weight: float = 0.4
    risk_weight: float = 0.3
    feasibility_weight: float = 0.2
    speed_weight: float = 0.1

    def __post_init__(self):
        for name, value in asdict(self).items():
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def merged(self, overrides: Optional[dict] = None) -> "DecisionCriteria":
        """Aplica sobrescritas parciais (ex: {"speed_weight": 0} ou {"speedWeight": 0})."""
        if not overrides:
            return self
        changes = {}
        for key, value in overrides.items():
            name = _CRITERIA_ALIASES.get(key)
            if name is None:
                raise ValueError(f"Unknown criteria weight: {key}")
            changes[name] = float(value)
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict) -> "DecisionCriteria":
        defaults = cls()
        return cls(
            benefit_weight=float(_pick(data, "benefit_weight", "benefitWeight", default=defaults.benefit_weight)),
            risk_weight=float(_pick(data, "risk_weight", "riskWeight", default=defaults.risk_weight)),
            feasibility_weight=float(_pick(data, "feasibility_weight", "feasibilityWeight", default=defaults.feasibility_weight)),
            speed_weight=float(_pick(data, "speed_weight", "speedWeight", default=defaults.speed_weight)),
        )


_CRITERIA_ALIASES = {
    alias: name
    for name, camel in [
        ("benefit_weight", "benefitWeight"),
        ("risk_weight", "riskWeight"),
        ("feasibility_weight", "feasibilityWeight"),
        ("speed_weight", "speedWeight"),
    ]
    for alias in (name, camel)
}


@dataclass(frozen=True)
class DecisionCapabilities:
    """O que o agente pode decidir sozinho. Somente leitura."""
    can_make_autonomous_decisions: bool = True
    can_evaluate_risk: bool = True
    max_decision_complexity: int = 5   # 1-10
    requires_approval: bool = False
    decision_types: tuple[str, ...] = ("tactical", "strategic", "operational")

    @classmethod
    def from_dict(cls, data: dict) -> "DecisionCapabilities":
        return cls(
            can_make_autonomous_decisions=bool(_pick(
                data, "can_make_autonomous_decisions", "canMakeAutonomousDecisions", default=True)),
            can_evaluate_risk=bool(_pick(data, "can_evaluate_risk", "canEvaluateRisk", default=True)),
            max_decision_complexity=int(_pick(
                data, "max_decision_complexity", "maxDecisionComplexity", default=5)),
            requires_approval=bool(_pick(data, "requires_approval", "requiresApproval", default=False)),
            decision_types=tuple(_pick(
                data, "decision_types", "decisionTypes",
                default=("tactical", "strategic", "operational"))),
        )


@dataclass
class OptionEvaluation:
    """Avaliação de uma opção (score, confiança e justificativa)."""
    option: DecisionOption
    score: float
    confidence: float
    reasoning: str
    raw_score: float = 0.0
    adjustment: float = 1.0


@dataclass
class DecisionResult:
    """Resultado de make_decision."""
    selected_option: DecisionOption
    confidence: float
    reasoning: str
    alternatives: list[DecisionOption] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)
    decision_id: str = ""   # use em update_outcome
    score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "decision_id": self.decision_id,
            "selected_option": self.selected_option.to_dict(),
            "confidence": self.confidence,
            "score": self.score,
            "reasoning": self.reasoning,
            "alternatives": [a.to_dict() for a in self.alternatives],
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class DecisionStats:
    """Estatísticas agregadas do histórico de decisões."""
    total_decisions: int = 0
    success_rate: float = 0.0
    average_confidence: float = 0.0
    risk_accuracy: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Goal:
    """Objetivo que um plano tenta cumprir."""
    id: str
    description: str = ""
    priority: int = 5  # 0-10


@dataclass
class PlanStep:
    """Um passo de um plano de execução."""
    id: str
    action: str = ""
    description: str = ""
    status: StepStatus = StepStatus.PENDING
    estimated_duration: Optional[float] = None

    def __post_init__(self):
        if isinstance(self.status, str):
            self.status = StepStatus(self.status)

    @classmethod
    def from_dict(cls, data: dict) -> "PlanStep":
        return cls(
            id=str(data["id"]),
            action=data.get("action", ""),
            description=data.get("description", ""),
            status=data.get("status", StepStatus.PENDING.value),
            estimated_duration=_pick(data, "estimated_duration", "estimatedDuration"),
        )


@dataclass
class ExecutionPlan:
    """Plano de execução avaliado por decide_plan_execution."""
    id: str
    goal: Goal
    steps: list[PlanStep] = field(default_factory=list)
    estimated_total_duration: Optional[float] = None  # milissegundos

    def count(self, status: StepStatus) -> int:
        """Número de passos com o status dado."""
        return sum(1 for s in self.steps if s.status == status)

    @classmethod
    def from_dict(cls, data: dict) -> "ExecutionPlan":
        goal = data.get("goal") or {}
        if isinstance(goal, str):
            goal = {"id": data["id"], "description": goal}
        return cls(
            id=str(data["id"]),
            goal=Goal(
                id=str(goal.get("id", data["id"])),
                description=goal.get("description", ""),
                priority=int(goal.get("priority", 5)),
            ),
            steps=[PlanStep.from_dict(s) for s in data.get("steps", [])],
            estimated_total_duration=_pick(
                data, "estimated_total_duration", "estimatedTotalDuration"),
        )


@dataclass
class EngineConfig:
    """Configuração do motor de decisão."""
    # Ajuste histórico
    similarity_threshold: float = 0.7
    high_success_rate: float = 0.8
    low_success_rate: float = 0.3
    success_boost: float = 1.2
    failure_penalty: float = 0.8

    # Confiança
    base_confidence: float = 0.5
    simplicity_weight: float = 0.3
    history_bonus_per_outcome: float = 0.02
    max_history_bonus: float = 0.2
    capability_bonus: float = 0.1
    capability_complexity_threshold: int = 5

    # Velocidade: duração (ms) que reduz o fator de velocidade pela metade
    speed_half_life_ms: float = 60_000

    # Planos
    plan_expected_benefit: float = 0.7
    risk_per_step: float = 0.05
    max_step_risk: float = 0.3
    risk_per_failed_step: float = 0.1
    max_duration_risk: float = 0.2
    feasibility_penalty_per_pending: float = 0.1

    # Resultado
    max_alternatives: int = 3
    risk_error_threshold: float = 0.3


@dataclass
class LLMConfig:
    """Configuração do cliente Claude que propõe opções."""
    model: str = "claude-3-haiku-20240307"
    temperature: float = 0.2
    max_tokens: int = 1024
