from __future__ import annotations


class PrCopilotError(Exception):
    """Base class for every error the analysis pipeline surfaces.

    ``status_code`` is the transport-style classification the HTTP layer renders.
    """

    status_code: int = 500

    @property
    def error_code(self) -> str:
        return type(self).__name__
