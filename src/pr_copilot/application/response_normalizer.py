"""Turns a raw model reply into an ``AnalyzeDiffResponse``.

The reply text is stripped of Markdown fences, parsed as JSON, checked for the
required fields and enriched with call metadata. When the model does not list
the files it saw, they are recovered from the ``diff --git`` headers.
"""

from __future__ import annotations

import json
import re
from typing import Any

import structlog
from pydantic import ValidationError

from pr_copilot.core.domain.analysis_result import (
    AiCallMetadata,
    AnalyzeDiffResponse,
    ModelAnalysisResult,
)
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.exceptions.model_output_parse_error import ModelOutputParseError
from pr_copilot.core.exceptions.unexpected_analysis_error import UnexpectedAnalysisError
from pr_copilot.infrastructure.observability.redaction_service import truncate_for_log

logger = structlog.get_logger()

REQUIRED_FIELDS = ("title", "summary", "details", "risks", "suggestedTests")

_OPENING_FENCE = re.compile(r"^```(?:json)?\s*\n?", re.DOTALL)
_CLOSING_FENCE = re.compile(r"\n?```$")
_DIFF_GIT_LINE = re.compile(r"diff --git a/(.+?) b/(.+)")


def sanitize_model_output(value: str | None) -> str:
    """Remove an enclosing ``` or ```json fence and surrounding whitespace.

    Text without fences is only trimmed, so applying this twice is a no-op.
    """
    if value is None or not value.strip():
        return ""
    value = _OPENING_FENCE.sub("", value.strip(), count=1)
    value = _CLOSING_FENCE.sub("", value, count=1)
    return value.strip()


def extract_touched_files(diff: str | None) -> list[str]:
    """Collect the new-side path of every ``diff --git`` header, first-seen order, no duplicates."""
    if diff is None or not diff.strip():
        return []
    files: dict[str, None] = {}
    for line in diff.splitlines():
        match = _DIFF_GIT_LINE.fullmatch(line)
        if match:
            files.setdefault(match.group(2), None)
    return list(files)


class ResponseNormalizer:
    def __init__(self, include_raw_model_output: bool = False, log_responses: bool = False) -> None:
        self.include_raw_model_output = include_raw_model_output
        self.log_responses = log_responses

    def normalize(self, reply: ModelReply, diff: str | None, request_id: str | None) -> AnalyzeDiffResponse:
        """Map *reply* onto the final response.

        Raises:
            ModelOutputParseError: the reply is empty, not JSON, or misses a required field.
            UnexpectedAnalysisError: anything else went wrong while mapping.
        """
        try:
            return self._normalize(reply, diff, request_id)
        except ModelOutputParseError:
            raise
        except Exception as exc:
            logger.error(
                "Unexpected error mapping AI output",
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            raise UnexpectedAnalysisError("Unexpected error mapping AI output") from exc

    def _normalize(self, reply: ModelReply, diff: str | None, request_id: str | None) -> AnalyzeDiffResponse:
        model_output = self._extract_text(reply)
        logger.debug("AI model raw output", model_output=truncate_for_log(model_output))
        cleaned = sanitize_model_output(model_output)

        result = self._parse(cleaned)
        if self.log_responses:
            logger.info("AI model analysis result", analysis=result.model_dump(by_alias=True))

        touched_files = result.touched_files if result.touched_files else extract_touched_files(diff)
        metadata = AiCallMetadata(
            model_name=reply.model_name,
            tokens_used=reply.total_tokens,
            model_latency_ms=reply.latency_ms,
        )
        return AnalyzeDiffResponse(
            title=result.title,
            summary=result.summary,
            details=result.details,
            risks=result.risks,
            suggested_tests=result.suggested_tests,
            analysis_notes=result.analysis_notes,
            touched_files=touched_files,
            metadata=metadata,
            raw_model_output=model_output if self.include_raw_model_output else None,
            request_id=request_id,
        )

    @staticmethod
    def _extract_text(reply: ModelReply) -> str:
        text = reply.text
        if text is None:
            logger.error("Could not extract text from model reply", llm_model=reply.model_name)
            raise ModelOutputParseError("Could not extract text from AI model response.")
        if not text.strip():
            raise ModelOutputParseError("AI model returned empty output; cannot parse.")
        return text

    def _parse(self, cleaned: str) -> ModelAnalysisResult:
        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            logger.warning("JSON parsing failed for model output", error_details=str(exc))
            raise ModelOutputParseError(
                f"Model returned invalid JSON output. Error details: {exc}"
            ) from exc

        self._require_fields(data)
        try:
            return ModelAnalysisResult.model_validate(data)
        except ValidationError as exc:
            details = _describe_validation_errors(exc)
            logger.warning("Model output failed schema validation", error_details=details)
            raise ModelOutputParseError(
                f"Model output does not match the expected structure. Error details: {details}"
            ) from exc

    @staticmethod
    def _require_fields(data: Any) -> None:
        if data is None:
            raise ModelOutputParseError("Parsed model output is null. Expected a non-null JSON object.")
        if not isinstance(data, dict):
            raise ModelOutputParseError(
                f"Parsed model output is a JSON {type(data).__name__}. Expected a JSON object."
            )
        missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
        if missing:
            raise ModelOutputParseError(
                f"Parsed model output is missing required fields: {', '.join(missing)}"
            )


def _describe_validation_errors(exc: ValidationError) -> str:
    # Field values are left out on purpose: they are model output, not diagnostics.
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors(include_input=False, include_url=False)
    )
