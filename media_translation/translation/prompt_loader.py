from pathlib import Path

from media_translation.translation.exceptions import PromptTemplateError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

AUDIO_BASIC = "audio_basic.txt"
AUDIO_DETAILED = "audio_detailed.txt"
IMAGE_BASIC = "image_basic.txt"
IMAGE_DETAILED = "image_detailed.txt"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a prompt template by file name.

    Args:
        name: Template file name, e.g. ``audio_basic.txt``.
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled ``prompts`` directory.

    Returns:
        The raw template string with ``{target_language}`` and, for audio
        templates, ``{transcript}`` placeholders.

    Raises:
        PromptTemplateError: if the file cannot be read.
    """
    directory = prompt_dir if prompt_dir is not None else _DEFAULT_PROMPT_DIR
    try:
        return (directory / name).read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load prompt template: {exc}") from exc
