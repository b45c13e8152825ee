"""Cost calculator for chat-completion gateway usage."""

from __future__ import annotations

# Pricing per 1M tokens (USD), cache-miss input rates
MODEL_PRICING: dict[str, dict[str, float]] = {
    "deepseek-chat": {"input": 0.27, "output": 1.10},
    "deepseek-reasoner": {"input": 0.55, "output": 2.19},
}


def calculate_cost(calls: list[tuple[str, int, int]]) -> float:
    """Calculate total cost for a set of gateway calls.

    Args:
        calls: List of (model_id, input_tokens, output_tokens) tuples.

    Returns:
        Total estimated cost in USD. Unknown models count as free.
    """
    total = 0.0
    for model_id, input_tokens, output_tokens in calls:
        pricing = MODEL_PRICING.get(model_id)
        if pricing is None:
            continue
        total += (input_tokens / 1_000_000) * pricing["input"]
        total += (output_tokens / 1_000_000) * pricing["output"]
    return total
