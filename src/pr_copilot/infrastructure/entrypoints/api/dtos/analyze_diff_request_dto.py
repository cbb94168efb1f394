from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalyzeDiffRequestDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    diff: str = Field(min_length=1)
    language: str | None = None
    style: str | None = None
    max_summary_length: int | None = Field(None, ge=1)
    request_id: str | None = None
