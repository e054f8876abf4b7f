"""
Similaridade - Ajuste de score baseado em decisões passadas

Uma opção é "parecida" com uma decisão passada quando a diferença média
absoluta entre benefício, risco e viabilidade é pequena. A taxa de sucesso
das decisões parecidas vira um multiplicador do score:
- > 0.8 de sucesso: 1.2
- < 0.3 de sucesso: 0.8
- caso contrário (ou nenhuma parecida): 1.0
"""
from typing import Optional

from ..types import DecisionOption, DecisionOutcome, EngineConfig


def option_similarity(a: DecisionOption, b: DecisionOption) -> float:
    """Similaridade em [0, 1]: 1 - média das diferenças absolutas."""
    benefit_diff = abs(a.expected_benefit - b.expected_benefit)
    risk_diff = abs(a.risk - b.risk)
    feasibility_diff = abs(a.feasibility - b.feasibility)
    return 1 - (benefit_diff + risk_diff + feasibility_diff) / 3


class HistoricalAdjuster:
    """Calcula o multiplicador histórico de uma opção."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def similar_outcomes(
        self,
        option: DecisionOption,
        outcomes: list[DecisionOutcome],
    ) -> list[DecisionOutcome]:
        """Decisões passadas com similaridade acima do threshold."""
        return [
            o for o in outcomes
            if option_similarity(option, o.selected_option) > self.config.similarity_threshold
        ]

    def adjustment(
        self,
        option: DecisionOption,
        outcomes: list[DecisionOutcome],
    ) -> float:
        """
        Multiplicador do score para a opção.

        Args:
            option: Opção avaliada
            outcomes: Histórico fornecido pelo chamador

        Returns:
            success_boost, failure_penalty ou 1.0
        """
        similar = self.similar_outcomes(option, outcomes)
        if not similar:
            return 1.0

        success_rate = sum(1 for o in similar if o.success) / len(similar)

        if success_rate > self.config.high_success_rate:
            return self.config.success_boost
        if success_rate < self.config.low_success_rate:
            return self.config.failure_penalty
        return 1.0
