"""
OpenAI-compatible provider package.

Exports:
- OpenAICompatibleParser: ProviderParser for OpenAI, Together and other
  chat-completion compatible APIs
"""

from .parser import OpenAICompatibleParser

__all__ = ["OpenAICompatibleParser"]
