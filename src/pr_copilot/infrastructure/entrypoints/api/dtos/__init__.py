from pr_copilot.infrastructure.entrypoints.api.dtos.analyze_diff_request_dto import (
    AnalyzeDiffRequestDTO,
)

__all__ = ["AnalyzeDiffRequestDTO"]
