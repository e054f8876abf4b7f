"""
Option Evaluator - Pontua uma opção candidata

Score ponderado:
- benefício * benefit_weight
- (1 - risco) * risk_weight        (menor risco é melhor)
- viabilidade * feasibility_weight
- 1 / (1 + duração/60s) * speed_weight   (só com duração e peso > 0)

O score bruto é multiplicado pelo ajuste histórico e limitado a [0, 1].
A confiança é independente do score.
"""
from typing import Optional

from ..types import (
    DecisionOption,
    DecisionContext,
    DecisionCriteria,
    DecisionCapabilities,
    OptionEvaluation,
    EngineConfig,
)
from .similarity import HistoricalAdjuster


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


class OptionEvaluator:
    """Avalia opções: score, confiança e justificativa."""

    def __init__(
        self,
        capabilities: DecisionCapabilities,
        config: Optional[EngineConfig] = None,
    ):
        self.capabilities = capabilities
        self.config = config or EngineConfig()
        self.adjuster = HistoricalAdjuster(self.config)

    async def evaluate(
        self,
        option: DecisionOption,
        context: DecisionContext,
        criteria: DecisionCriteria,
    ) -> OptionEvaluation:
        """
        Avalia uma opção. Só lê o contexto, pode rodar em paralelo.

        Args:
            option: Opção a avaliar
            context: Contexto da decisão (usa historical_outcomes)
            criteria: Pesos já mesclados

        Returns:
            OptionEvaluation com score e confiança em [0, 1]
        """
        reasons = []

        score = option.expected_benefit * criteria.benefit_weight
        reasons.append(f"Benefit: {option.expected_benefit * 100:.0f}%")

        score += (1 - option.risk) * criteria.risk_weight
        reasons.append(f"Risk: {option.risk * 100:.0f}%")

        score += option.feasibility * criteria.feasibility_weight
        reasons.append(f"Feasibility: {option.feasibility * 100:.0f}%")

        # Duração zero conta como ausente
        if option.estimated_duration and criteria.speed_weight > 0:
            score += self.speed_factor(option.estimated_duration) * criteria.speed_weight
            reasons.append(f"Duration: {round(option.estimated_duration / 1000)}s")

        raw_score = score
        adjustment = 1.0
        if context.historical_outcomes:
            adjustment = self.adjuster.adjustment(option, context.historical_outcomes)
            score *= adjustment
            if adjustment != 1.0:
                reasons.append(f"Historical adjustment: {(adjustment - 1) * 100:+.0f}%")

        return OptionEvaluation(
            option=option,
            score=clamp(score),
            confidence=self.confidence(option, context),
            reasoning="; ".join(reasons),
            raw_score=raw_score,
            adjustment=adjustment,
        )

    def speed_factor(self, duration_ms: float) -> float:
        """1 para duração ~0, 0.5 em speed_half_life_ms, tende a 0."""
        return 1 / (1 + duration_ms / self.config.speed_half_life_ms)

    def confidence(self, option: DecisionOption, context: DecisionContext) -> float:
        """Confiança do motor na opção, em [0, 1]."""
        confidence = self.config.base_confidence

        # Decisões mais simples = mais confiança
        complexity = (option.risk + (1 - option.feasibility)) / 2
        confidence += (1 - complexity) * self.config.simplicity_weight

        # Mais histórico = mais confiança
        if context.historical_outcomes:
            confidence += min(
                self.config.max_history_bonus,
                len(context.historical_outcomes) * self.config.history_bonus_per_outcome,
            )

        if self.capabilities.max_decision_complexity > self.config.capability_complexity_threshold:
            confidence += self.config.capability_bonus

        return clamp(confidence)
