"""
HuggingFace provider package.

Exports:
- HuggingFaceParser: ProviderParser for the token, TGI-choices and
  conversational formats
"""

from .parser import HuggingFaceParser

__all__ = ["HuggingFaceParser"]
