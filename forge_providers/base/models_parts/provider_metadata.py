"""
Static provider descriptor used for registry introspection.

Capability flags describe what the *parser* implements, not what the upstream
API offers. A flag set to True without a matching parse path is a defect and
is caught by the conformance checks in ``forge_providers.base.capabilities``.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ProviderCapabilities(BaseModel):
    """Capability flags.

    Attributes:
        streaming: ``parse_stream_chunk`` yields content events.
        function_calling: legacy single ``function_call`` payloads are parsed.
        tool_use: tool-call / tool-use blocks are parsed into ``tool_use`` content.
        vision: image content is parsed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    streaming: bool = False
    function_calling: bool = Field(default=False, alias="functionCalling")
    tool_use: bool = Field(default=False, alias="toolUse")
    vision: bool = False

    def enabled(self) -> Tuple[str, ...]:
        """Return the names of enabled capabilities in declaration order."""
        return tuple(name for name, value in self if value)


class ProviderMetadata(BaseModel):
    """Descriptor for a registered provider parser.

    Attributes:
        id: Canonical provider id (e.g. ``"openai"``).
        name: Display name.
        description: One-line summary of the wire formats handled.
        capabilities: :class:`ProviderCapabilities` flags.
        url_patterns: Host or path fragments the parser claims, for documentation.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    capabilities: ProviderCapabilities = Field(default_factory=ProviderCapabilities)
    url_patterns: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-compatible dictionary with camelCase capability keys."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["ProviderCapabilities", "ProviderMetadata"]
