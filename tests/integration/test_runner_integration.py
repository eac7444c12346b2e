"""End-to-end runs of the runner with offline example clients and real files."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from google.auth.exceptions import DefaultCredentialsError

from media_translation.config.settings import Settings
from media_translation.generation.example_client_adapter import ExampleGenerativeClient
from media_translation.runner.runner import build_runner
from media_translation.transcription.example_client_adapter import ExampleTranscriptionClient
from media_translation.transcription.exceptions import TranscriptionNetworkError


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Settings:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GENERATION_PROVIDER", "example")
    monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "example")
    monkeypatch.delenv("MAX_FILE_SIZE_MB", raising=False)
    return Settings()


@pytest.fixture(autouse=True)
def _capture_info(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="media_translation")


class TestImagePipeline:
    def test_logs_basic_and_detailed_results(
        self, settings: Settings, png_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        runner = build_runner(settings)

        runner.process_image(str(png_path), "French")

        assert "Basic image analysis:\nPlease analyze this image and describe its content in French" in caplog.text
        assert "detailed description in French" in caplog.text
        assert "[image/png," in caplog.text
        assert "Error processing image" not in caplog.text

    def test_unsupported_format_makes_no_calls(
        self, settings: Settings, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "scan.tiff"
        path.write_bytes(b"II*\x00")
        with patch.object(ExampleGenerativeClient, "generate") as generate:
            build_runner(settings).process_image(str(path), "French")

        generate.assert_not_called()
        assert "unsupported format (UNSUPPORTED_FORMAT)" in caplog.text


class TestAudioPipeline:
    def test_translates_example_transcript(
        self, settings: Settings, wav_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        runner = build_runner(settings)

        runner.process_audio(str(wav_path), "en-US", "German")

        assert (
            "Basic audio translation:\nTranslate the following text to German:\n\n"
            "Hello and welcome. This is an example transcript."
        ) in caplog.text
        assert "detailed analysis in German" in caplog.text
        assert "Successfully transcribed audio" in caplog.text

    def test_missing_audio_makes_zero_external_calls(
        self, settings: Settings, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            patch.object(ExampleTranscriptionClient, "recognize") as recognize,
            patch.object(ExampleGenerativeClient, "generate") as generate,
        ):
            build_runner(settings).process_audio(str(tmp_path / "missing.wav"), "en-US", "German")

        assert recognize.call_count == 0
        assert generate.call_count == 0
        assert "file does not exist (NOT_FOUND)" in caplog.text

    def test_transcription_failure_is_contained(
        self, settings: Settings, wav_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            patch.object(
                ExampleTranscriptionClient,
                "recognize",
                side_effect=TranscriptionNetworkError("speech offline"),
            ),
            patch.object(ExampleGenerativeClient, "generate") as generate,
        ):
            build_runner(settings).process_audio(str(wav_path), "en-US", "German")

        generate.assert_not_called()
        assert "Error processing audio: Failed to process audio" in caplog.text
        assert "speech offline" in caplog.text

    def test_size_limit_from_settings(
        self, monkeypatch: pytest.MonkeyPatch, settings: Settings, tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_MB", "0.000001")
        path = tmp_path / "long.wav"
        path.write_bytes(b"\x00" * 64)

        build_runner(Settings()).process_audio(str(path), "en-US", "German")

        assert "FILE_TOO_LARGE" in caplog.text


class TestMissingGoogleCredentials:
    @pytest.fixture()
    def speech_settings(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Settings:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GENERATION_PROVIDER", "example")
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "google")
        monkeypatch.delenv("MAX_FILE_SIZE_MB", raising=False)
        return Settings()

    def test_image_run_does_not_need_speech_credentials(
        self, speech_settings: Settings, png_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with patch(
            "media_translation.transcription.google_speech_adapter.speech.SpeechClient",
            side_effect=DefaultCredentialsError("File nope.json was not found."),
        ) as client_cls:
            runner = build_runner(speech_settings)
            runner.process_image(str(png_path), "French")

        client_cls.assert_not_called()
        assert "Basic image analysis:" in caplog.text
        assert "Detailed image analysis:" in caplog.text

    def test_audio_run_logs_credentials_failure(
        self, speech_settings: Settings, wav_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with patch(
            "media_translation.transcription.google_speech_adapter.speech.SpeechClient",
            side_effect=DefaultCredentialsError("File nope.json was not found."),
        ):
            build_runner(speech_settings).process_audio(str(wav_path), "en-US", "German")

        assert "Error processing audio: Failed to process audio" in caplog.text
        assert "nope.json" in caplog.text
