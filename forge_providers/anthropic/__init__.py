"""
Anthropic provider package.

Exports:
- AnthropicParser: ProviderParser for the Anthropic Messages API
"""

from .parser import AnthropicParser

__all__ = ["AnthropicParser"]
