"""Runs one backend call under a wall-clock budget.

Every failure leaves this module as an ``InvocationError`` of a fixed kind:

- TIMEOUT: the budget ran out (504)
- ADDRESS_UNRESOLVED: the backend host name did not resolve (502)
- RESOURCE_ACCESS_FAILURE: connection-level failure, including a socket timeout raised by
  the backend itself (502, or 504 when a timeout is in the chain)
- UNEXPECTED: anything else (500)
"""

from __future__ import annotations

import asyncio
import socket
import time
from collections.abc import Iterator
from dataclasses import replace

import anthropic
import httpx
import openai
import structlog

from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.exceptions.invocation_error import InvocationError, InvocationErrorKind
from pr_copilot.infrastructure.observability.metrics_service import (
    LLM_INVOCATIONS_TOTAL,
    LLM_LATENCY_SECONDS,
    LLM_TOKENS_TOTAL,
)
from pr_copilot.infrastructure.providers.provider_registry import ResolvedBackend

logger = structlog.get_logger()

GATEWAY_TIMEOUT = 504
BAD_GATEWAY = 502
INTERNAL_SERVER_ERROR = 500

_RESOURCE_ACCESS_ERRORS: tuple[type[BaseException], ...] = (
    httpx.TransportError,
    openai.APIConnectionError,
    anthropic.APIConnectionError,
    ConnectionError,
    TimeoutError,
    OSError,
)

_TIMEOUT_ERRORS: tuple[type[BaseException], ...] = (
    TimeoutError,
    httpx.TimeoutException,
    openai.APITimeoutError,
    anthropic.APITimeoutError,
)


class BoundedInvoker:
    async def invoke(
        self, prompt: AnalysisPrompt, resolved: ResolvedBackend, timeout_millis: int
    ) -> ModelReply:
        """Send *prompt* to the resolved backend, releasing the caller after *timeout_millis*.

        At the deadline the pending call is cancelled without waiting for it to
        unwind, and whatever it later produces is discarded.

        Raises:
            InvocationError: for every way the call can fail to produce a reply.
        """
        provider = resolved.provider
        logger.debug("Request timeout set", provider=provider.value, timeout_ms=timeout_millis)
        start = time.perf_counter()
        task = asyncio.ensure_future(resolved.backend.complete(prompt, resolved.options))
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout_millis / 1000)
        except asyncio.CancelledError:
            task.cancel()
            raise

        if task not in done:
            task.cancel()
            task.add_done_callback(_discard_abandoned)
            deadline = TimeoutError(f"Deadline of {timeout_millis} ms exceeded")
            error = InvocationError(
                kind=InvocationErrorKind.TIMEOUT,
                provider=provider,
                message=f"AI model request timed out after {timeout_millis} milliseconds",
                status_code=GATEWAY_TIMEOUT,
            )
            self._log_failure(error, deadline, timeout_millis)
            raise error from deadline

        try:
            reply = task.result()
        except Exception as exc:
            error = classify_failure(exc, resolved)
            self._log_failure(error, exc, timeout_millis)
            raise error from exc

        latency_ms = int((time.perf_counter() - start) * 1000)
        self._record_success(reply, resolved, latency_ms)
        return replace(reply, latency_ms=latency_ms)

    @staticmethod
    def _record_success(reply: ModelReply, resolved: ResolvedBackend, latency_ms: int) -> None:
        provider = resolved.provider.value
        LLM_INVOCATIONS_TOTAL.labels(provider=provider, outcome="success").inc()
        LLM_TOKENS_TOTAL.labels(provider=provider).inc(reply.total_tokens)
        LLM_LATENCY_SECONDS.labels(provider=provider).observe(latency_ms / 1000)
        logger.info(
            "LLM inference completed",
            provider=provider,
            llm_model=reply.model_name,
            tokens_used=reply.total_tokens,
            processing_status="SUCCESS",
            processing_duration_ms=latency_ms,
        )

    @staticmethod
    def _log_failure(error: InvocationError, exc: BaseException, timeout_millis: int) -> None:
        LLM_INVOCATIONS_TOTAL.labels(provider=error.provider.value, outcome=error.kind.value).inc()
        logger.error(
            error.message,
            provider=error.provider.value,
            timeout_ms=timeout_millis,
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_code=error.error_code,
            error_details=str(exc),
            http_status=error.status_code,
        )


def classify_failure(exc: BaseException, resolved: ResolvedBackend) -> InvocationError:
    provider = resolved.provider
    chain = list(_exception_chain(exc))

    if any(isinstance(e, socket.gaierror) for e in chain):
        return InvocationError(
            kind=InvocationErrorKind.ADDRESS_UNRESOLVED,
            provider=provider,
            message=f"Failed to resolve remote service address: {exc}",
            status_code=BAD_GATEWAY,
        )

    if isinstance(exc, _RESOURCE_ACCESS_ERRORS):
        timed_out = any(isinstance(e, _TIMEOUT_ERRORS) for e in chain)
        return InvocationError(
            kind=InvocationErrorKind.RESOURCE_ACCESS_FAILURE,
            provider=provider,
            message=f"Failed to access remote resource: {exc}",
            status_code=GATEWAY_TIMEOUT if timed_out else BAD_GATEWAY,
        )

    return InvocationError(
        kind=InvocationErrorKind.UNEXPECTED,
        provider=provider,
        message=f"Unexpected error during remote call: {exc}",
        status_code=INTERNAL_SERVER_ERROR,
    )


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its causes/contexts, each once."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _discard_abandoned(task: asyncio.Future[ModelReply]) -> None:
    """Consume the outcome of a call that outlived its deadline."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Abandoned call failed after deadline", error_type=type(exc).__name__)
    else:
        logger.debug("Abandoned call replied after deadline; reply discarded")
