"""
Constraint Filter - Descarta opções que violam restrições

Antes de pontuar, remove opções que:
- Têm risco acima de max_risk
- Têm duração estimada acima de time_limit

Opções sem duração estimada nunca são excluídas pelo limite de tempo.
"""
from typing import Optional
from dataclasses import dataclass, field

from ..types import DecisionOption, DecisionConstraints


@dataclass
class FilterResult:
    """Resultado da filtragem de uma opção."""
    passed: bool
    reason: Optional[str] = None
    checks: dict[str, bool] = field(default_factory=dict)


class ConstraintFilter:
    """Filtro de restrições para opções candidatas."""

    def __init__(self, constraints: Optional[DecisionConstraints] = None):
        self.constraints = constraints or DecisionConstraints()

    def check(self, option: DecisionOption) -> FilterResult:
        """
        Verifica se a opção respeita as restrições.

        Args:
            option: Opção a verificar

        Returns:
            FilterResult indicando se passou e por quê
        """
        checks = {}

        # 1. Risco
        if self.constraints.max_risk is not None:
            risk_ok = option.risk <= self.constraints.max_risk
            checks["risk"] = risk_ok
            if not risk_ok:
                return FilterResult(
                    passed=False,
                    reason=f"Risk {option.risk} > max {self.constraints.max_risk}",
                    checks=checks,
                )

        # 2. Tempo
        if self.constraints.time_limit is not None and option.estimated_duration is not None:
            time_ok = option.estimated_duration <= self.constraints.time_limit
            checks["time"] = time_ok
            if not time_ok:
                return FilterResult(
                    passed=False,
                    reason=(
                        f"Duration {option.estimated_duration}ms > limit "
                        f"{self.constraints.time_limit}ms"
                    ),
                    checks=checks,
                )

        return FilterResult(passed=True, checks=checks)

    def apply(self, options: list[DecisionOption]) -> list[DecisionOption]:
        """Retorna apenas as opções viáveis, na ordem original."""
        return [o for o in options if self.check(o).passed]
