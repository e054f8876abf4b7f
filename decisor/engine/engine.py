"""
Decision Engine - Decisão autônoma com avaliação de risco

Fluxo de make_decision:
1. Filtra opções pelas restrições (risco, tempo)
2. Avalia cada opção em paralelo (score, confiança, justificativa)
3. Escolhe o maior score (empate: a primeira)
4. Verifica o piso de confiança
5. Monta alternativas (top 3 restantes)
6. Registra a decisão no histórico para aprendizado
"""
import asyncio
import logging
from datetime import datetime
from dataclasses import replace
from typing import Optional, Union

from ..types import (
    DecisionCapabilities,
    DecisionContext,
    DecisionCriteria,
    DecisionOutcome,
    DecisionResult,
    DecisionStats,
    EngineConfig,
    ExecutionPlan,
    OptionEvaluation,
)
from ..errors import PolicyViolation, NoViableOptions, ConfidenceTooLow
from ..events import EventBus, EventType
from ..scoring import ConstraintFilter, OptionEvaluator
from ..planning import plan_to_option, no_action_option
from .history import DecisionHistory


logger = logging.getLogger(__name__)

CriteriaInput = Union[DecisionCriteria, dict, None]


class DecisionEngine:
    """Motor de decisão multi-critério com aprendizado por histórico."""

    def __init__(
        self,
        capabilities: DecisionCapabilities,
        config: Optional[EngineConfig] = None,
        default_criteria: Optional[DecisionCriteria] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.capabilities = capabilities
        self.config = config or EngineConfig()
        self.default_criteria = default_criteria or DecisionCriteria()
        self.event_bus = event_bus
        self.evaluator = OptionEvaluator(capabilities, self.config)
        self.history = DecisionHistory()

        logger.info(
            f"Decision engine initialized (autonomous="
            f"{capabilities.can_make_autonomous_decisions}, "
            f"max_complexity={capabilities.max_decision_complexity})"
        )

    async def make_decision(
        self,
        context: DecisionContext,
        criteria: CriteriaInput = None,
    ) -> DecisionResult:
        """
        Escolhe a melhor opção do contexto.

        Args:
            context: Opções, restrições e histórico
            criteria: DecisionCriteria completo ou dict com sobrescritas parciais

        Returns:
            DecisionResult com decision_id para update_outcome

        Raises:
            PolicyViolation: sem autonomia e sem min_confidence
            NoViableOptions: nenhuma opção passou no filtro
            ConfidenceTooLow: melhor opção abaixo de min_confidence
        """
        constraints = context.constraints
        min_confidence = constraints.min_confidence if constraints else None

        logger.debug(
            f"Making decision: {len(context.available_options)} options, "
            f"constraints={constraints is not None}"
        )

        # Piso zero não libera decisão autônoma
        if not self.capabilities.can_make_autonomous_decisions and not min_confidence:
            self._emit(EventType.DECISION_REJECTED, reason="policy")
            raise PolicyViolation()

        evaluations = await self.evaluate_options(context, criteria)
        if not evaluations:
            self._emit(EventType.DECISION_REJECTED, reason="no_viable_options")
            raise NoViableOptions(len(context.available_options), constraints)

        best = evaluations[0]
        for evaluation in evaluations[1:]:
            if evaluation.score > best.score:
                best = evaluation

        if min_confidence and best.confidence < min_confidence:
            self._emit(
                EventType.DECISION_REJECTED,
                reason="confidence_too_low",
                option_id=best.option.id,
                confidence=best.confidence,
                threshold=min_confidence,
            )
            raise ConfidenceTooLow(best.confidence, min_confidence, best.option)

        runners_up = sorted(
            (e for e in evaluations if e.option.id != best.option.id),
            key=lambda e: e.score,
            reverse=True,
        )

        decision_id = await self._record_decision(best)

        result = DecisionResult(
            selected_option=best.option,
            confidence=best.confidence,
            reasoning=best.reasoning,
            alternatives=[e.option for e in runners_up[:self.config.max_alternatives]],
            timestamp=datetime.now(),
            decision_id=decision_id,
            score=best.score,
        )

        logger.info(
            f"Decision made: {result.selected_option.id} "
            f"(score={result.score:.3f}, confidence={result.confidence:.3f})"
        )
        self._emit(
            EventType.DECISION_MADE,
            decision_id=decision_id,
            option_id=result.selected_option.id,
            score=result.score,
            confidence=result.confidence,
        )
        return result

    async def evaluate_options(
        self,
        context: DecisionContext,
        criteria: CriteriaInput = None,
    ) -> list[OptionEvaluation]:
        """
        Filtra e avalia as opções sem escolher nem registrar.

        Returns:
            Avaliações na ordem das opções viáveis
        """
        merged = self._resolve_criteria(criteria)
        viable = ConstraintFilter(context.constraints).apply(context.available_options)

        return list(await asyncio.gather(*[
            self.evaluator.evaluate(option, context, merged)
            for option in viable
        ]))

    async def decide_plan_execution(
        self,
        plan: ExecutionPlan,
        context: DecisionContext,
        criteria: CriteriaInput = None,
    ) -> DecisionResult:
        """
        Decide entre executar o plano ou não fazer nada.

        Args:
            plan: Plano avaliado
            context: Contexto base; suas opções entram como alternativas extras
            criteria: Como em make_decision

        Returns:
            DecisionResult
        """
        return await self.make_decision(self.plan_context(plan, context), criteria)

    def plan_context(self, plan: ExecutionPlan, context: DecisionContext) -> DecisionContext:
        """Contexto com o plano e "no-action" à frente das opções do chamador."""
        options = [
            plan_to_option(plan, self.config),
            no_action_option(),
            *context.available_options,
        ]
        return replace(context, available_options=options)

    async def update_outcome(
        self,
        decision_id: str,
        actual_benefit: float,
        actual_duration: float,
        success: bool,
    ) -> bool:
        """
        Informa o resultado real de uma decisão.

        Id desconhecido só gera warning (telemetria best-effort).

        Returns:
            True se o registro foi atualizado
        """
        outcome = await self.history.update(
            decision_id, actual_benefit, actual_duration, success,
        )
        if outcome is None:
            logger.warning(f"Decision not found in history: {decision_id}")
            self._emit(EventType.OUTCOME_UNKNOWN, decision_id=decision_id)
            return False

        if self.capabilities.can_evaluate_risk:
            self._check_risk_assessment(outcome)

        logger.debug(f"Decision outcome updated: {decision_id} (success={success})")
        self._emit(EventType.OUTCOME_UPDATED, decision_id=decision_id, success=success)
        return True

    def get_stats(self) -> DecisionStats:
        """Estatísticas sobre todo o histórico."""
        entries = self.history.snapshot()
        if not entries:
            return DecisionStats()

        total = len(entries)
        successes = sum(1 for e in entries if e.outcome.success)
        risk_error = sum(
            abs(e.outcome.realized_risk - e.outcome.selected_option.risk)
            for e in entries
        )

        return DecisionStats(
            total_decisions=total,
            success_rate=successes / total,
            average_confidence=sum(e.confidence for e in entries) / total,
            risk_accuracy=1 - risk_error / total,
        )

    def history_snapshot(self) -> list[DecisionOutcome]:
        """Resultados registrados (imutáveis), para usar como historical_outcomes."""
        return [e.outcome for e in self.history.snapshot()]

    # --- Internos ---

    def _resolve_criteria(self, criteria: CriteriaInput) -> DecisionCriteria:
        if criteria is None:
            return self.default_criteria
        if isinstance(criteria, DecisionCriteria):
            return criteria
        return self.default_criteria.merged(criteria)

    async def _record_decision(self, evaluation: OptionEvaluation) -> str:
        decision_id = await self.history.record(evaluation.option, evaluation.confidence)
        logger.debug(f"Decision recorded: {decision_id}")
        self._emit(EventType.DECISION_RECORDED, decision_id=decision_id)
        return decision_id

    def _check_risk_assessment(self, outcome: DecisionOutcome) -> None:
        """Só diagnóstico: loga quando o risco esperado errou feio."""
        expected = outcome.selected_option.risk
        actual = outcome.realized_risk
        error = actual - expected

        if abs(error) > self.config.risk_error_threshold:
            logger.info(
                f"Significant risk assessment error for {outcome.decision_id}: "
                f"expected={expected:.2f}, actual={actual:.0f}, error={error:+.2f}"
            )
            self._emit(
                EventType.RISK_MISCALIBRATED,
                decision_id=outcome.decision_id,
                expected=expected,
                actual=actual,
                error=error,
            )

    def _emit(self, event_type: EventType, **data) -> None:
        if self.event_bus:
            self.event_bus.emit_simple(event_type, **data)
