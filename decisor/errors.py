"""
Erros do motor de decisão.

Toda falha é terminal para a chamada e nunca escreve no histórico.
"""
from typing import Optional

from .types import DecisionConstraints, DecisionOption


class DecisionError(Exception):
    """Base para falhas de make_decision."""


class PolicyViolation(DecisionError):
    """Decisão autônoma sem permissão e sem piso de confiança."""

    def __init__(self, message: str = "Autonomous decisions not allowed without confidence threshold"):
        super().__init__(message)


class NoViableOptions(DecisionError):
    """Nenhuma opção sobreviveu ao filtro de restrições."""

    def __init__(self, option_count: int, constraints: Optional[DecisionConstraints] = None):
        self.option_count = option_count
        self.constraints = constraints
        super().__init__(
            f"No viable options after applying constraints "
            f"({option_count} candidates, constraints={constraints})"
        )


class ConfidenceTooLow(DecisionError):
    """Confiança da melhor opção abaixo do piso pedido."""

    def __init__(self, confidence: float, threshold: float, option: DecisionOption):
        self.confidence = confidence
        self.threshold = threshold
        self.option = option
        super().__init__(
            f"Confidence {confidence:.3f} below minimum {threshold:.3f} "
            f"for option {option.id}"
        )
