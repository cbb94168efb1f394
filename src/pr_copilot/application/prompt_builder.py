from __future__ import annotations

from importlib import resources
from pathlib import Path

import structlog
from jinja2 import Environment, StrictUndefined, Template, TemplateError

from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.exceptions.configuration_error import ConfigurationError

logger = structlog.get_logger()

_PACKAGED_TEMPLATE = ("pr_copilot.resources.prompts", "system_prompt.j2")

USER_INSTRUCTION = "Please analyze this Git diff with strict adherence to instructions."


class PromptBuilder:
    """Builds the system + user prompt for one diff analysis.

    The system template is read and compiled once, at construction; a missing
    or broken template is a deployment fault and surfaces as ConfigurationError.
    """

    def __init__(self, template_path: Path | None = None) -> None:
        self._template = self._compile(self._load_system_prompt(template_path))

    def build(
        self,
        language: str,
        style: str,
        diff: str,
        max_summary_length: int | None = None,
        request_id: str | None = None,
    ) -> AnalysisPrompt:
        system_text = self._template.render(language=language, style=style)
        return AnalysisPrompt(
            system_text=system_text,
            user_text=_user_content(language, style, diff, max_summary_length, request_id),
        )

    @staticmethod
    def _load_system_prompt(template_path: Path | None) -> str:
        try:
            if template_path is not None:
                return template_path.read_text(encoding="utf-8")
            package, name = _PACKAGED_TEMPLATE
            return resources.files(package).joinpath(name).read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Could not load system prompt", error_type=type(exc).__name__, error_details=str(exc))
            raise ConfigurationError("Could not load system prompt.") from exc

    @staticmethod
    def _compile(source: str) -> Template:
        try:
            return Environment(undefined=StrictUndefined, autoescape=False).from_string(source)
        except TemplateError as exc:
            raise ConfigurationError(f"System prompt template is invalid: {exc}") from exc


def _user_content(
    language: str,
    style: str,
    diff: str,
    max_summary_length: int | None,
    request_id: str | None,
) -> str:
    lines = [USER_INSTRUCTION, f"language: {language}", f"style: {style}"]
    if max_summary_length is not None:
        lines.append(f"maxSummaryLength: {max_summary_length}")
    if request_id is not None and request_id.strip():
        lines.append(f"requestId: {request_id}")
    return "\n".join(lines) + f"\nDiff: ```{diff}\n```"
