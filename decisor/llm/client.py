"""
Claude LLM Client - Produtor externo de opções

O motor nunca chama o LLM. Este cliente só gera DecisionOption
a partir de uma descrição da situação, para o chamador entregar ao motor.
"""
import json
import logging
import os
import re
from typing import Optional
from dataclasses import dataclass

import anthropic

from ..types import DecisionOption, LLMConfig
from ..scoring.evaluator import clamp


logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Resposta do LLM."""
    content: str
    tokens_input: int
    tokens_output: int
    model: str
    stop_reason: str

    @property
    def tokens_total(self) -> int:
        return self.tokens_input + self.tokens_output


PROPOSE_SYSTEM = """You are an operations planner for an autonomous agent.
Given a situation, propose distinct candidate actions.
Output ONLY a JSON array. Each element has:
  "id": short kebab-case identifier
  "description": one sentence
  "expectedBenefit": number 0-1
  "risk": number 0-1
  "feasibility": number 0-1
  "estimatedDuration": milliseconds (number)"""

PROPOSE_PROMPT = """Situation:
{situation}

Propose up to {max_options} candidate actions as a JSON array."""


class ClaudeClient:
    """Cliente assíncrono para Claude API."""

    def __init__(self, config: Optional[LLMConfig] = None):
        self.config = config or LLMConfig()
        self._async_client: Optional[anthropic.AsyncAnthropic] = None

    @property
    def async_client(self) -> anthropic.AsyncAnthropic:
        """Lazy init do cliente async."""
        if self._async_client is None:
            self._async_client = anthropic.AsyncAnthropic(
                api_key=os.environ.get("ANTHROPIC_API_KEY")
            )
        return self._async_client

    async def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        Gera resposta do Claude.

        Args:
            prompt: Mensagem do usuário
            system: System prompt opcional
            temperature: Override da temperatura
            max_tokens: Override do max tokens

        Returns:
            LLMResponse com conteúdo e métricas
        """
        response = await self.async_client.messages.create(
            model=self.config.model,
            max_tokens=max_tokens or self.config.max_tokens,
            temperature=temperature if temperature is not None else self.config.temperature,
            system=system or "",
            messages=[{"role": "user", "content": prompt}],
        )

        content = ""
        if response.content:
            content = response.content[0].text

        return LLMResponse(
            content=content,
            tokens_input=response.usage.input_tokens,
            tokens_output=response.usage.output_tokens,
            model=response.model,
            stop_reason=response.stop_reason,
        )

    async def propose_options(
        self,
        situation: str,
        max_options: int = 5,
    ) -> list[DecisionOption]:
        """
        Pede ao Claude opções candidatas para a situação.

        Args:
            situation: Descrição do estado atual
            max_options: Máximo de opções retornadas

        Returns:
            Lista de DecisionOption (entradas inválidas são descartadas)
        """
        response = await self.generate(
            prompt=PROPOSE_PROMPT.format(situation=situation, max_options=max_options),
            system=PROPOSE_SYSTEM,
        )
        return parse_options(response.content)[:max_options]

    async def close(self):
        """Fecha conexões."""
        if self._async_client:
            await self._async_client.close()
            self._async_client = None


def parse_options(text: str) -> list[DecisionOption]:
    """
    Extrai opções de uma resposta com array JSON.

    Aceita o array puro ou dentro de bloco ```json```.
    Valores numéricos são limitados a [0, 1].
    """
    match = re.search(r"\[.*\]", text, re.DOTALL)
    if not match:
        logger.warning("No JSON array in LLM response")
        return []

    try:
        items = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in LLM response: {e}")
        return []

    options = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object option at index {i}")
            continue
        try:
            duration = item.get("estimatedDuration", item.get("estimated_duration"))
            options.append(DecisionOption(
                id=str(item.get("id") or f"option-{i}"),
                description=str(item.get("description", "")),
                expected_benefit=clamp(float(item.get("expectedBenefit", item.get("expected_benefit", 0)))),
                risk=clamp(float(item.get("risk", 0))),
                feasibility=clamp(float(item.get("feasibility", 1))),
                estimated_duration=max(0.0, float(duration)) if duration is not None else None,
            ))
        except (TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed option at index {i}: {e}")

    return options
