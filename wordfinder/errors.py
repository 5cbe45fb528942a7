"""Stage-specific errors raised while building a puzzle."""

from .models.puzzles import PipelineStage


class PipelineError(Exception):
    """Base error for a failed pipeline stage.

    The message is the generic text returned to the client; the underlying
    cause is chained via ``raise ... from``.
    """

    stage: PipelineStage = PipelineStage.FAILED
    default_message = "Puzzle pipeline failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class FetchError(PipelineError):
    """Feed unreachable or unparsable."""

    stage = PipelineStage.FETCHING
    default_message = "Failed to fetch RSS feed"


class GenerationError(PipelineError):
    """Completion call failed or returned non-JSON while generating."""

    stage = PipelineStage.GENERATING
    default_message = "Failed to generate puzzle"


class VerificationError(PipelineError):
    """Completion call failed or returned non-JSON while verifying."""

    stage = PipelineStage.VERIFYING
    default_message = "Failed to verify puzzle"
