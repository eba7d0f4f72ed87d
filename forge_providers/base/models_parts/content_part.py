"""
Message content blocks.

Providers emit assistant output as text, tool calls, or both. These blocks
are the normalized, provider-agnostic shape used both in complete responses
and as ``content_block_start`` descriptors in streams. The ``type`` field is
the discriminator, so a serialized block round-trips to the same class.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """A run of assistant text."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str = ""


class ToolUseContent(BaseModel):
    """A tool (function) invocation requested by the model.

    Attributes:
        id: Provider-assigned call id; empty when the provider omits it.
        name: Tool or function name.
        input: Parsed JSON arguments. Unparsable argument strings degrade to
            an empty mapping.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_use"] = "tool_use"
    id: str = ""
    name: str = ""
    input: Dict[str, Any] = Field(default_factory=dict)


MessageContent = Annotated[Union[TextContent, ToolUseContent], Field(discriminator="type")]


__all__ = [
    "TextContent",
    "ToolUseContent",
    "MessageContent",
]
