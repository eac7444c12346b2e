import argparse

from media_translation.config.settings import Settings
from media_translation.logging.logger import Log
from media_translation.runner.runner import build_runner


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Translate and analyze images and audio with cloud AI models."
    )
    parser.add_argument("--image", help="Path to an image file (jpg, jpeg, png, gif, bmp).")
    parser.add_argument("--audio", help="Path to an audio file (wav, mp3, flac, m4a).")
    parser.add_argument(
        "--source-lang",
        default="en-US",
        help="Language code of the speech in the audio file (e.g. en-US).",
    )
    parser.add_argument(
        "--target-lang",
        default="Chinese",
        help="Language to translate and describe content in.",
    )
    args = parser.parse_args(argv)
    if not args.image and not args.audio:
        parser.error("at least one of --image or --audio is required")
    return args


def main(argv: list[str] | None = None) -> None:
    """Entry point: load settings -> build runner -> process image, then audio."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    runner = build_runner(settings)
    if args.image:
        runner.process_image(args.image, args.target_lang)
    if args.audio:
        runner.process_audio(args.audio, args.source_lang, args.target_lang)


if __name__ == "__main__":
    main()
