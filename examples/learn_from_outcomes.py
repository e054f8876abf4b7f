"""
Example: Decisions that learn from their own outcomes

Runs a few rounds of the same choice, reports a (simulated) outcome
for each decision, and feeds the engine history back into the next round.
"""
import asyncio
import logging
import random

from decisor import (
    DecisionEngine,
    DecisionCapabilities,
    DecisionContext,
    DecisionConstraints,
    DecisionOption,
)


OPTIONS = [
    DecisionOption(
        id="hotfix",
        description="Deploy hotfix directly to production",
        expected_benefit=0.9,
        risk=0.4,
        feasibility=0.8,
        estimated_duration=10 * 60 * 1000,
    ),
    DecisionOption(
        id="canary",
        description="Roll out behind a 5% canary",
        expected_benefit=0.7,
        risk=0.15,
        feasibility=0.9,
        estimated_duration=45 * 60 * 1000,
    ),
    DecisionOption(
        id="wait",
        description="Wait for the next release window",
        expected_benefit=0.2,
        risk=0.05,
        feasibility=1.0,
    ),
]

# Chance real de sucesso de cada opção (desconhecida pelo motor)
TRUE_SUCCESS = {"hotfix": 0.2, "canary": 0.9, "wait": 1.0}


async def main():
    """Run ten learning rounds and print the stats."""
    engine = DecisionEngine(DecisionCapabilities(max_decision_complexity=8))
    rng = random.Random(7)

    for round_no in range(1, 11):
        context = DecisionContext(
            available_options=OPTIONS,
            constraints=DecisionConstraints(max_risk=0.5, min_confidence=0.6),
            historical_outcomes=engine.history_snapshot(),
        )
        result = await engine.make_decision(context)

        chosen = result.selected_option
        success = rng.random() < TRUE_SUCCESS[chosen.id]
        await engine.update_outcome(
            result.decision_id,
            actual_benefit=chosen.expected_benefit if success else 0.0,
            actual_duration=chosen.estimated_duration or 0,
            success=success,
        )

        print(f"Round {round_no:2d}: {chosen.id:<7} score={result.score:.3f} "
              f"confidence={result.confidence:.2f} success={success}")

    print("\nStats:", engine.get_stats().to_dict())


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    asyncio.run(main())
