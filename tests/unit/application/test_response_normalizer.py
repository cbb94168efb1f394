"""Unit tests for the response normalizer (fence stripping, validation, touched files)."""

import json

import pytest

from pr_copilot.application.response_normalizer import (
    REQUIRED_FIELDS,
    ResponseNormalizer,
    extract_touched_files,
    sanitize_model_output,
)
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.exceptions.model_output_parse_error import ModelOutputParseError
from pr_copilot.core.exceptions.unexpected_analysis_error import UnexpectedAnalysisError

COMPLETE = {
    "title": "Rename helper",
    "summary": "Renames a helper.",
    "details": "The helper moves to a new path.",
    "risks": ["Callers of the old path break"],
    "suggestedTests": ["Import the helper from the new path"],
}

MULTI_FILE_DIFF = (
    "diff --git a/old/path.txt b/new/path.txt\n"
    "similarity index 90%\n"
    "rename from old/path.txt\n"
    "rename to new/path.txt\n"
    "diff --git a/a.go b/a.go\n"
    "--- a/a.go\n"
    "+++ b/a.go\n"
    "diff --git a/old/path.txt b/new/path.txt\n"
)


def _reply(text: str | None) -> ModelReply:
    return ModelReply(text=text, model_name="gpt-4o-mini", total_tokens=321, latency_ms=1500)


# ══════════════════════════════════════════════════════════════════════
# sanitize_model_output
# ══════════════════════════════════════════════════════════════════════


class TestSanitize:
    INNER = '{"title": "x"}'

    @pytest.mark.parametrize(
        "wrapped",
        [
            '```json\n{"title": "x"}\n```',
            '```\n{"title": "x"}\n```',
            '{"title": "x"}',
            '  \n```json\n{"title": "x"}\n```  \n',
        ],
    )
    def test_all_fence_forms_yield_same_content(self, wrapped: str) -> None:
        assert sanitize_model_output(wrapped) == self.INNER

    def test_is_idempotent(self) -> None:
        once = sanitize_model_output('```json\n{"title": "x"}\n```')
        assert sanitize_model_output(once) == once

    @pytest.mark.parametrize("value", [None, "", "   \n"])
    def test_blank_input(self, value: str | None) -> None:
        assert sanitize_model_output(value) == ""


# ══════════════════════════════════════════════════════════════════════
# extract_touched_files
# ══════════════════════════════════════════════════════════════════════


class TestExtractTouchedFiles:
    def test_new_paths_in_first_seen_order_without_duplicates(self) -> None:
        assert extract_touched_files(MULTI_FILE_DIFF) == ["new/path.txt", "a.go"]

    @pytest.mark.parametrize("diff", [None, "", "  "])
    def test_blank_diff(self, diff: str | None) -> None:
        assert extract_touched_files(diff) == []

    def test_ignores_lines_that_only_mention_a_header(self) -> None:
        diff = "+ echo 'diff --git a/x b/y'\ndiff --git a/real.py b/real.py\n"
        assert extract_touched_files(diff) == ["real.py"]


# ══════════════════════════════════════════════════════════════════════
# ResponseNormalizer
# ══════════════════════════════════════════════════════════════════════


class TestNormalize:
    def test_derives_touched_files_when_model_list_is_empty(self) -> None:
        text = json.dumps({**COMPLETE, "touchedFiles": []})

        response = ResponseNormalizer().normalize(_reply(text), MULTI_FILE_DIFF, "req-1")

        assert response.touched_files == ["new/path.txt", "a.go"]
        assert response.request_id == "req-1"
        assert response.metadata.model_name == "gpt-4o-mini"
        assert response.metadata.tokens_used == 321
        assert response.metadata.model_latency_ms == 1500

    def test_model_touched_files_pass_through(self) -> None:
        text = json.dumps({**COMPLETE, "touchedFiles": ["src/x.py", "src/y.py"]})

        response = ResponseNormalizer().normalize(_reply(text), MULTI_FILE_DIFF, None)

        assert response.touched_files == ["src/x.py", "src/y.py"]

    def test_raw_output_absent_by_default(self) -> None:
        text = "```json\n" + json.dumps(COMPLETE) + "\n```"

        response = ResponseNormalizer().normalize(_reply(text), "", None)

        assert response.raw_model_output is None
        assert "rawModelOutput" not in response.model_dump(by_alias=True, exclude_none=True)

    def test_raw_output_is_unsanitized_text_when_enabled(self) -> None:
        text = "```json\n" + json.dumps(COMPLETE) + "\n```"

        response = ResponseNormalizer(include_raw_model_output=True).normalize(_reply(text), "", None)

        assert response.raw_model_output == text
        assert response.title == "Rename helper"

    def test_optional_fields_carry_over(self) -> None:
        text = json.dumps({**COMPLETE, "analysisNotes": "Diff was truncated."})

        response = ResponseNormalizer().normalize(_reply(text), "", None)

        assert response.analysis_notes == "Diff was truncated."
        assert response.risks == ["Callers of the old path break"]
        assert response.suggested_tests == ["Import the helper from the new path"]

    @pytest.mark.parametrize("missing", REQUIRED_FIELDS)
    def test_any_missing_required_field_fails(self, missing: str) -> None:
        document = {k: v for k, v in COMPLETE.items() if k != missing}

        with pytest.raises(ModelOutputParseError, match=missing):
            ResponseNormalizer().normalize(_reply(json.dumps(document)), "", None)

    def test_null_required_field_fails(self) -> None:
        text = json.dumps({**COMPLETE, "summary": None})

        with pytest.raises(ModelOutputParseError, match="summary"):
            ResponseNormalizer().normalize(_reply(text), "", None)

    def test_no_text_fails(self) -> None:
        with pytest.raises(ModelOutputParseError, match="Could not extract text"):
            ResponseNormalizer().normalize(_reply(None), "", None)

    def test_blank_text_fails(self) -> None:
        with pytest.raises(ModelOutputParseError, match="empty output"):
            ResponseNormalizer().normalize(_reply("  \n "), "", None)

    def test_invalid_json_fails_without_echoing_raw_text(self) -> None:
        with pytest.raises(ModelOutputParseError) as exc_info:
            ResponseNormalizer().normalize(_reply("Sure! Here is my secret-analysis"), "", None)

        assert str(exc_info.value).startswith("Model returned invalid JSON output.")
        assert "secret-analysis" not in str(exc_info.value)
        assert exc_info.value.status_code == 502

    @pytest.mark.parametrize("document", ["null", "[1, 2]", '"text"'])
    def test_non_object_document_fails(self, document: str) -> None:
        with pytest.raises(ModelOutputParseError, match="Expected"):
            ResponseNormalizer().normalize(_reply(document), "", None)

    def test_type_mismatch_fails(self) -> None:
        text = json.dumps({**COMPLETE, "risks": "not-a-list"})

        with pytest.raises(ModelOutputParseError, match="risks"):
            ResponseNormalizer().normalize(_reply(text), "", None)

    def test_unforeseen_failure_is_wrapped(self, monkeypatch) -> None:
        def boom(_diff):
            raise KeyError("unexpected")

        monkeypatch.setattr(
            "pr_copilot.application.response_normalizer.extract_touched_files", boom
        )

        with pytest.raises(UnexpectedAnalysisError, match="Unexpected error mapping AI output"):
            ResponseNormalizer().normalize(_reply(json.dumps(COMPLETE)), MULTI_FILE_DIFF, None)
