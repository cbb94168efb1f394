from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ModelAnalysisResult(_CamelModel):
    """Structured content claimed by the model, as parsed from its JSON reply."""

    title: str = Field(description="Short title for the change")
    summary: str = Field(description="Executive summary of the diff")
    details: str = Field(description="Longer explanation of what changed")
    risks: list[str] = Field(description="Risks introduced by the change")
    suggested_tests: list[str] = Field(description="Tests worth adding or running")
    analysis_notes: str | None = Field(None, description="Caveats about the analysis itself")
    touched_files: list[str] | None = Field(None, description="Paths modified by the diff")


class AiCallMetadata(_CamelModel):
    model_name: str
    tokens_used: int
    model_latency_ms: int


class AnalyzeDiffResponse(_CamelModel):
    title: str
    summary: str
    details: str
    risks: list[str]
    suggested_tests: list[str]
    analysis_notes: str | None = None
    touched_files: list[str] = Field(default_factory=list)
    metadata: AiCallMetadata
    raw_model_output: str | None = None
    request_id: str | None = None
