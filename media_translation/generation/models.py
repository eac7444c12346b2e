from dataclasses import dataclass, field

from media_translation.generation.exceptions import EmptyResponseError


@dataclass(frozen=True)
class TextPart:
    """Instruction text sent to the model."""

    text: str


@dataclass(frozen=True)
class ImagePart:
    """Raw image bytes attached to a prompt."""

    data: bytes
    mime_type: str = "image/jpeg"


Part = TextPart | ImagePart


@dataclass(frozen=True)
class Candidate:
    """One alternative output of the model."""

    text: str


@dataclass(frozen=True)
class GenerationResponse:
    """Provider-neutral generation output."""

    candidates: list[Candidate] = field(default_factory=list)

    def first_text(self) -> str:
        """Return the text of the first candidate.

        Raises:
            EmptyResponseError: if the response carries no candidates.
        """
        if not self.candidates:
            raise EmptyResponseError("Model returned no candidates")
        return self.candidates[0].text
