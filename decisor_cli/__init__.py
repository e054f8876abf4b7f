"""
Decisor CLI - Saída rica no terminal

Renderização com Rich de:
- Decisão escolhida e alternativas
- Tabela de avaliação por opção
- Estatísticas do histórico
"""

from .display import show_decision, show_error, evaluations_table, stats_table

__all__ = [
    'show_decision',
    'show_error',
    'evaluations_table',
    'stats_table',
]
