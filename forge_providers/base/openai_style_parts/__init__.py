"""OpenAI-style shape helpers shared across parsers.

The OpenAI chat-completion ``choices`` layout is spoken by several providers;
the walking logic lives here once so every parser interprets it identically.
"""

from .choices import collect_choice_messages, first_finish_reason, walk_stream_choices

__all__ = [
    "collect_choice_messages",
    "first_finish_reason",
    "walk_stream_choices",
]
