"""Prometheus metrics declarations for PR Copilot.

Labels use ONLY static enumerations (provider, outcome kind), never request ids.
"""

from prometheus_client import Counter, Histogram

LLM_TOKENS_TOTAL = Counter(
    "prcopilot_llm_tokens_total",
    "Total LLM tokens consumed",
    ["provider"],
)

LLM_LATENCY_SECONDS = Histogram(
    "prcopilot_llm_latency_seconds",
    "LLM inference latency in seconds",
    ["provider"],
)

LLM_INVOCATIONS_TOTAL = Counter(
    "prcopilot_llm_invocations_total",
    "LLM invocations by outcome",
    ["provider", "outcome"],
)
