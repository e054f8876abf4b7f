"""
Decision History - Histórico de decisões do motor

Mapa decision_id -> registro, cresce durante toda a vida do motor.
Escritas são serializadas por um asyncio.Lock; leituras usam snapshot.
"""
import asyncio
import uuid
from dataclasses import dataclass, replace
from typing import Optional

from ..types import DecisionOption, DecisionOutcome


@dataclass
class HistoryEntry:
    """Resultado registrado + confiança no momento da decisão."""
    outcome: DecisionOutcome
    confidence: float


class DecisionHistory:
    """Histórico de decisões com escrita exclusiva."""

    def __init__(self):
        self._entries: dict[str, HistoryEntry] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, decision_id: str) -> bool:
        return decision_id in self._entries

    async def record(self, option: DecisionOption, confidence: float) -> str:
        """
        Registra decisão com resultado zerado.

        Returns:
            decision_id novo
        """
        decision_id = str(uuid.uuid4())
        async with self._lock:
            self._entries[decision_id] = HistoryEntry(
                outcome=DecisionOutcome(decision_id=decision_id, selected_option=option),
                confidence=confidence,
            )
        return decision_id

    async def update(
        self,
        decision_id: str,
        actual_benefit: float,
        actual_duration: float,
        success: bool,
    ) -> Optional[DecisionOutcome]:
        """
        Sobrescreve os valores reais de uma decisão.

        Returns:
            DecisionOutcome atualizado ou None se o id não existe
        """
        async with self._lock:
            entry = self._entries.get(decision_id)
            if entry is None:
                return None
            entry.outcome = replace(
                entry.outcome,
                actual_benefit=actual_benefit,
                actual_duration=actual_duration,
                success=success,
            )
            return entry.outcome

    def get(self, decision_id: str) -> Optional[DecisionOutcome]:
        entry = self._entries.get(decision_id)
        return entry.outcome if entry else None

    def snapshot(self) -> list[HistoryEntry]:
        """Cópia dos registros, mais antigos primeiro."""
        return [
            HistoryEntry(outcome=e.outcome, confidence=e.confidence)
            for e in list(self._entries.values())
        ]
