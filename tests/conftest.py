import wave
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture()
def png_path(tmp_path: Path) -> Path:
    """Write a small valid PNG image and return its path."""
    path = tmp_path / "photo.png"
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(path, format="PNG")
    return path


@pytest.fixture()
def jpeg_path(tmp_path: Path) -> Path:
    """Write a small valid JPEG image with an upper-case extension."""
    path = tmp_path / "photo.JPG"
    Image.new("RGB", (4, 4), color=(30, 200, 30)).save(path, format="JPEG")
    return path


@pytest.fixture()
def wav_path(tmp_path: Path) -> Path:
    """Write a short 16 kHz mono LINEAR16 WAV file and return its path."""
    path = tmp_path / "speech.wav"
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(16000)
        wav.writeframes(b"\x00\x00" * 1600)
    return path
