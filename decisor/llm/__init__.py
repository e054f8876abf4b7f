"""LLM Client module."""
from .client import ClaudeClient, LLMResponse, parse_options

__all__ = [
    "ClaudeClient",
    "LLMResponse",
    "parse_options",
]
