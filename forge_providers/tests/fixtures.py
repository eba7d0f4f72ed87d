"""Sample provider payloads shared across tests.

Shapes are copied from documented provider wire formats; values are trimmed
to what the parsers read.
"""
from __future__ import annotations

OPENAI_RESPONSE = {
    "id": "chatcmpl-abc123",
    "object": "chat.completion",
    "created": 1717000000,
    "model": "gpt-4o-mini",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there."},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
}

OPENAI_TOOL_RESPONSE = {
    "id": "chatcmpl-tool",
    "model": "gpt-4o-mini",
    "choices": [
        {
            "index": 0,
            "message": {
                "role": "assistant",
                "content": None,
                "tool_calls": [
                    {
                        "id": "call_1",
                        "type": "function",
                        "function": {"name": "get_weather", "arguments": "{\"city\": \"Paris\"}"},
                    }
                ],
            },
            "finish_reason": "tool_calls",
        }
    ],
}

OPENAI_ERROR = {
    "error": {
        "message": "Incorrect API key provided.",
        "type": "invalid_request_error",
        "code": "invalid_api_key",
    }
}

OPENAI_TEXT_CHUNK = {
    "id": "chatcmpl-1",
    "created": 1717000001,
    "model": "gpt-4o-mini",
    "choices": [{"index": 0, "delta": {"content": "Hel"}, "finish_reason": None}],
}

OPENAI_MULTI_CHOICE_CHUNK = {
    "choices": [
        {"index": 0, "delta": {"content": "Hi"}},
        {"index": 0, "delta": {}, "finish_reason": "stop"},
    ]
}

OPENAI_TOOL_CHUNK = {
    "id": "chatcmpl-2",
    "choices": [
        {
            "index": 0,
            "delta": {
                "tool_calls": [
                    {
                        "index": 1,
                        "id": "call_9",
                        "type": "function",
                        "function": {"name": "search", "arguments": "{\"q\": \"pydantic\"}"},
                    }
                ]
            },
        }
    ],
}

OPENAI_USAGE_CHUNK = {
    "id": "chatcmpl-3",
    "choices": [],
    "usage": {"prompt_tokens": 5, "completion_tokens": 7, "total_tokens": 12},
}

ANTHROPIC_RESPONSE = {
    "id": "msg_01",
    "type": "message",
    "role": "assistant",
    "model": "claude-3-5-sonnet-20241022",
    "content": [
        {"type": "text", "text": "Let me check."},
        {"type": "tool_use", "id": "toolu_01", "name": "get_weather", "input": {"city": "Paris"}},
    ],
    "stop_reason": "tool_use",
    "usage": {"input_tokens": 20, "output_tokens": 11},
}

ANTHROPIC_ERROR = {
    "type": "error",
    "error": {"type": "overloaded_error", "message": "Overloaded"},
}

ANTHROPIC_STREAM = (
    {
        "type": "message_start",
        "message": {
            "id": "msg_02",
            "type": "message",
            "role": "assistant",
            "model": "claude-3-5-haiku-20241022",
            "content": [],
            "usage": {"input_tokens": 25, "output_tokens": 1},
        },
    },
    {"type": "content_block_start", "index": 0, "content_block": {"type": "text", "text": ""}},
    {"type": "ping"},
    {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "Hello"}},
    {"type": "content_block_stop", "index": 0},
    {"type": "message_delta", "delta": {"stop_reason": "end_turn"}, "usage": {"output_tokens": 15}},
    {"type": "message_stop"},
)

HF_TOKEN_CHUNK = {"token": {"text": "Hello"}}

HF_FINAL_TOKEN_CHUNK = {
    "token": {"id": 2, "text": "</s>", "logprob": 0.0, "special": True},
    "generated_text": "Hello world",
    "details": {"finish_reason": "eos_token", "generated_tokens": 4},
}

HF_GENERATED = {"generated_text": "Full answer.", "details": {"finish_reason": "eos_token"}}

HF_CONVERSATION = {
    "conversation": {
        "past_user_inputs": ["Hi"],
        "generated_responses": ["Hello!", "How can I help?"],
    }
}

HF_ERROR = {"error": {"message": "rate limited", "type": "rate_limit_error"}}

HF_LOADING = {"error": "Model bigscience/bloom is currently loading", "estimated_time": 20.0}

HF_INFERENCE_LIST = [{"generated_text": "Paris is the capital of France."}]
