"""
Pytest configuration and fixtures for Decisor tests.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

# Add parent to path
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from decisor.types import (
    DecisionOption, DecisionContext, DecisionOutcome, DecisionCapabilities,
    ExecutionPlan, Goal, PlanStep, StepStatus, EngineConfig,
)
from decisor.engine import DecisionEngine
from decisor.events import EventBus


# --- Capability Fixtures ---

@pytest.fixture
def capabilities():
    """Autonomous capabilities without the complexity bonus."""
    return DecisionCapabilities(
        can_make_autonomous_decisions=True,
        can_evaluate_risk=True,
        max_decision_complexity=5,
    )


@pytest.fixture
def restricted_capabilities():
    """Capabilities that forbid unconstrained autonomous decisions."""
    return DecisionCapabilities(
        can_make_autonomous_decisions=False,
        can_evaluate_risk=True,
        max_decision_complexity=5,
    )


@pytest.fixture
def config():
    return EngineConfig()


@pytest.fixture
def event_bus():
    bus = EventBus()
    bus.start_recording()
    return bus


@pytest.fixture
def engine(capabilities, event_bus):
    return DecisionEngine(capabilities, event_bus=event_bus)


# --- Option Fixtures ---

@pytest.fixture
def fast_option():
    """High benefit, low risk, 1 second."""
    return DecisionOption(
        id="fast",
        description="Fast safe action",
        expected_benefit=0.9,
        risk=0.1,
        feasibility=0.9,
        estimated_duration=1000,
    )


@pytest.fixture
def slow_option():
    """Average option, 1 minute."""
    return DecisionOption(
        id="slow",
        description="Slow average action",
        expected_benefit=0.5,
        risk=0.5,
        feasibility=0.5,
        estimated_duration=60000,
    )


@pytest.fixture
def two_option_context(fast_option, slow_option):
    return DecisionContext(
        current_state={"cpu": 0.4},
        available_options=[fast_option, slow_option],
    )


# --- Helper Functions ---

def make_outcomes(option: DecisionOption, successes: int, failures: int) -> list[DecisionOutcome]:
    """Create historical outcomes for the same option."""
    return [
        DecisionOutcome(
            decision_id=f"past-{i}",
            selected_option=option,
            success=i < successes,
        )
        for i in range(successes + failures)
    ]


def make_plan(
    completed: int = 0,
    pending: int = 0,
    failed: int = 0,
    duration=None,
) -> ExecutionPlan:
    """Create a plan with steps in the given states."""
    steps = (
        [StepStatus.COMPLETED] * completed
        + [StepStatus.PENDING] * pending
        + [StepStatus.FAILED] * failed
    )
    return ExecutionPlan(
        id="plan-1",
        goal=Goal(id="goal-1", description="Restart degraded service"),
        steps=[
            PlanStep(id=f"step-{i}", action="run", status=status)
            for i, status in enumerate(steps)
        ],
        estimated_total_duration=duration,
    )


@pytest.fixture
def outcome_factory():
    return make_outcomes


@pytest.fixture
def plan_factory():
    return make_plan


# --- Mock LLM Client ---

@pytest.fixture
def mock_anthropic_response():
    """Factory for fake anthropic message responses."""
    def _create(text: str):
        response = MagicMock()
        response.content = [MagicMock(text=text)]
        response.usage = MagicMock(input_tokens=120, output_tokens=80)
        response.model = "claude-3-haiku-20240307"
        response.stop_reason = "end_turn"
        return response
    return _create


@pytest.fixture
def mock_async_anthropic(mock_anthropic_response):
    """Fake AsyncAnthropic with messages.create mocked."""
    client = MagicMock()
    client.messages.create = AsyncMock(return_value=mock_anthropic_response("[]"))
    client.close = AsyncMock()
    return client
