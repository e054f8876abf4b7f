"""
Sistema de Eventos do motor de decisão

Pub/Sub desacoplado: o motor publica decisões e resultados,
quem quiser (CLI, métricas, logs) se inscreve.
"""
from dataclasses import dataclass, field
from typing import Callable
from enum import Enum
import logging
import time


logger = logging.getLogger(__name__)


class EventType(Enum):
    """Tipos de eventos do motor"""
    DECISION_MADE = "decision_made"
    DECISION_RECORDED = "decision_recorded"
    DECISION_REJECTED = "decision_rejected"

    OUTCOME_UPDATED = "outcome_updated"
    OUTCOME_UNKNOWN = "outcome_unknown"
    RISK_MISCALIBRATED = "risk_miscalibrated"


@dataclass
class Event:
    """Um evento do sistema"""
    type: EventType
    data: dict = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)


class EventBus:
    """
    Pub/Sub para eventos do motor.

    Exemplo:
        bus = EventBus()

        def on_decision(event):
            print(f"Escolhida: {event.data['option_id']}")
        bus.subscribe(EventType.DECISION_MADE, on_decision)

        engine = DecisionEngine(capabilities, event_bus=bus)
    """

    def __init__(self):
        self._handlers: dict[EventType, list[Callable[[Event], None]]] = {}
        self._global_handlers: list[Callable[[Event], None]] = []
        self._history: list[Event] = []
        self._record_history = False

    def subscribe(self, event_type: EventType, handler: Callable[[Event], None]):
        """Registra handler para um tipo de evento"""
        self._handlers.setdefault(event_type, []).append(handler)

    def subscribe_all(self, handler: Callable[[Event], None]):
        """Registra handler para todos os eventos"""
        self._global_handlers.append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable[[Event], None]):
        """Remove handler de um tipo de evento"""
        if event_type in self._handlers:
            self._handlers[event_type] = [
                h for h in self._handlers[event_type] if h != handler
            ]

    def emit(self, event: Event):
        """Emite evento para todos os handlers registrados"""
        if self._record_history:
            self._history.append(event)

        # Handler com erro não derruba a decisão
        for handler in self._global_handlers + self._handlers.get(event.type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in handler for {event.type.value}: {e}")

    def emit_simple(self, event_type: EventType, **data):
        """Atalho para emitir evento simples"""
        self.emit(Event(type=event_type, data=data))

    def start_recording(self):
        """Inicia gravação de histórico"""
        self._record_history = True
        self._history = []

    def stop_recording(self) -> list[Event]:
        """Para gravação e retorna histórico"""
        self._record_history = False
        return self._history

    def get_history(self) -> list[Event]:
        """Retorna histórico gravado"""
        return self._history.copy()
