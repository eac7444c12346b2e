from media_translation.transcription.base import BaseTranscriptionClient
from media_translation.transcription.factory import TranscriptionClientFactory
from media_translation.transcription.models import TranscriptSegment

__all__ = ["BaseTranscriptionClient", "TranscriptSegment", "TranscriptionClientFactory"]
