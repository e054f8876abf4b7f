#!/usr/bin/env python3
"""
Decisor Runner - Executa o motor de decisão sobre um cenário JSON

Uso:
    python decisor_runner.py decide cenario.json
    python decisor_runner.py plan cenario.json --explain

Cenário:
    {
      "capabilities": {"canMakeAutonomousDecisions": true, "maxDecisionComplexity": 8},
      "options": [{"id": "a", "expectedBenefit": 0.9, "risk": 0.1, "feasibility": 0.9}],
      "constraints": {"maxRisk": 0.5, "minConfidence": 0.6},
      "criteria": {"speedWeight": 0},
      "historicalOutcomes": [...],
      "plan": {"id": "p1", "goal": "...", "steps": [...], "estimatedTotalDuration": 60000}
    }
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from decisor.types import (
    DecisionCapabilities,
    DecisionContext,
    DecisionCriteria,
    ExecutionPlan,
)
from decisor.errors import DecisionError
from decisor.engine import DecisionEngine
from decisor.llm.client import ClaudeClient
from decisor_cli.display import show_decision, show_error, evaluations_table, stats_table


def load_scenario(path: Path) -> dict:
    """Lê o cenário JSON."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


async def run_scenario(
    scenario: dict,
    mode: str,
    console: Console,
    explain: bool = False,
    situation: Optional[str] = None,
    client: Optional[ClaudeClient] = None,
) -> int:
    """
    Executa uma decisão sobre o cenário.

    Args:
        scenario: Cenário carregado
        mode: "decide" ou "plan"
        console: Console Rich para saída
        explain: Mostra tabela de avaliação
        situation: Se informado, pede opções extras ao Claude
        client: Cliente Claude (criado sob demanda)

    Returns:
        Código de saída (0 ok, 1 sem decisão)
    """
    try:
        engine = DecisionEngine(
            DecisionCapabilities.from_dict(scenario.get("capabilities", {})),
        )
        context = DecisionContext.from_dict(scenario)
        criteria = DecisionCriteria.from_dict(scenario["criteria"]) if scenario.get("criteria") else None
        plan = ExecutionPlan.from_dict(scenario["plan"]) if mode == "plan" and "plan" in scenario else None
    except (ValueError, KeyError, TypeError) as e:
        show_error(console, f"Cenário inválido: {e}")
        return 1

    if mode == "plan" and plan is None:
        show_error(console, "Cenário sem 'plan'")
        return 1

    if situation:
        client = client or ClaudeClient()
        try:
            proposed = await client.propose_options(situation)
        finally:
            await client.close()
        console.print(f"[dim]Claude propôs {len(proposed)} opções[/dim]")
        context.available_options.extend(proposed)

    try:
        if mode == "plan":
            if explain:
                plan_context = engine.plan_context(plan, context)
                console.print(evaluations_table(await engine.evaluate_options(plan_context, criteria)))
            result = await engine.decide_plan_execution(plan, context, criteria)
        else:
            if explain:
                console.print(evaluations_table(await engine.evaluate_options(context, criteria)))
            result = await engine.make_decision(context, criteria)
    except (DecisionError, ValueError) as e:
        show_error(console, str(e))
        return 1

    show_decision(console, result)
    console.print(stats_table(engine.get_stats()))
    return 0


def main():
    """CLI do decisor."""
    parser = argparse.ArgumentParser(description="Decisor - motor de decisão autônoma")
    parser.add_argument("mode", choices=["decide", "plan"], help="Tipo de decisão")
    parser.add_argument("scenario", type=Path, help="Arquivo JSON do cenário")
    parser.add_argument("--explain", "-e", action="store_true", help="Mostra avaliação por opção")
    parser.add_argument("--propose", "-p", metavar="SITUATION", help="Pede opções extras ao Claude")
    parser.add_argument("--verbose", "-v", action="store_true")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    console = Console()
    try:
        scenario = load_scenario(args.scenario)
    except (OSError, ValueError) as e:
        show_error(console, f"Não foi possível ler {args.scenario}: {e}")
        sys.exit(1)

    code = asyncio.run(run_scenario(
        scenario,
        args.mode,
        console,
        explain=args.explain,
        situation=args.propose,
    ))
    sys.exit(code)


if __name__ == "__main__":
    main()
