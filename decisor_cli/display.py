"""
Display do Decisor com Rich

Renderiza decisões, avaliações por opção e estatísticas no terminal.
"""
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from decisor.types import DecisionResult, DecisionStats, OptionEvaluation


def _pct(value: float) -> str:
    return f"{value * 100:.0f}%"


def _duration(ms: Optional[float]) -> str:
    if ms is None:
        return "-"
    return f"{ms / 1000:.1f}s"


def show_decision(console: Console, result: DecisionResult) -> None:
    """Mostra a opção escolhida e as alternativas."""
    option = result.selected_option
    console.print()
    console.print(Panel(
        f"[bold green]{escape(option.id)}[/bold green] {escape(option.description)}\n"
        f"Score: [cyan]{result.score:.3f}[/cyan]   "
        f"Confiança: [cyan]{_pct(result.confidence)}[/cyan]\n"
        f"[dim]{escape(result.reasoning)}[/dim]\n"
        f"[dim]decision_id: {result.decision_id}[/dim]",
        title="Decisão",
        border_style="green",
        box=box.ROUNDED,
    ))

    if result.alternatives:
        console.print("[bold]Alternativas:[/bold]")
        for i, alt in enumerate(result.alternatives, 1):
            console.print(f"  [cyan]{i}.[/cyan] {escape(alt.id)} [dim]{escape(alt.description)}[/dim]")


def evaluations_table(evaluations: list[OptionEvaluation]) -> Table:
    """Tabela com score e confiança de cada opção viável."""
    table = Table(title="Avaliação das opções", box=box.SIMPLE_HEAVY)
    table.add_column("Opção", style="bold")
    table.add_column("Benefício", justify="right")
    table.add_column("Risco", justify="right")
    table.add_column("Viabilidade", justify="right")
    table.add_column("Duração", justify="right")
    table.add_column("Ajuste", justify="right")
    table.add_column("Score", justify="right", style="cyan")
    table.add_column("Confiança", justify="right", style="cyan")

    for e in sorted(evaluations, key=lambda e: e.score, reverse=True):
        adjustment = "" if e.adjustment == 1.0 else f"x{e.adjustment:.1f}"
        table.add_row(
            e.option.id,
            _pct(e.option.expected_benefit),
            _pct(e.option.risk),
            _pct(e.option.feasibility),
            _duration(e.option.estimated_duration),
            adjustment,
            f"{e.score:.3f}",
            _pct(e.confidence),
        )

    return table


def stats_table(stats: DecisionStats) -> Table:
    """Tabela com as estatísticas do histórico."""
    table = Table(title="Estatísticas", box=box.SIMPLE)
    table.add_column("Métrica")
    table.add_column("Valor", justify="right")
    table.add_row("Decisões", str(stats.total_decisions))
    table.add_row("Taxa de sucesso", _pct(stats.success_rate))
    table.add_row("Confiança média", _pct(stats.average_confidence))
    table.add_row("Precisão de risco", _pct(stats.risk_accuracy))
    return table


def show_error(console: Console, message: str) -> None:
    """Mostra falha da decisão."""
    console.print(Panel(
        f"[bold red]{escape(message)}[/bold red]",
        title="Sem decisão",
        border_style="red",
        box=box.ROUNDED,
    ))
