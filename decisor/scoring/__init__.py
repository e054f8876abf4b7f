"""Scoring - Filtro de restrições, similaridade histórica e avaliação."""
from .filter import ConstraintFilter, FilterResult
from .similarity import HistoricalAdjuster, option_similarity
from .evaluator import OptionEvaluator, clamp

__all__ = [
    "ConstraintFilter",
    "FilterResult",
    "HistoricalAdjuster",
    "option_similarity",
    "OptionEvaluator",
    "clamp",
]
