from dataclasses import dataclass


@dataclass(frozen=True)
class TranscriptSegment:
    """Top alternative of a single recognition result."""

    transcript: str
    confidence: float | None = None


def join_transcripts(segments: list[TranscriptSegment]) -> str:
    """Concatenate segment transcripts in the order received, with no separator."""
    return "".join(segment.transcript for segment in segments)
