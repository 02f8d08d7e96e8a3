import argparse
import logging
import sys

from pydantic import ValidationError

from .errors import TimingError, UnsupportedCharacterError
from .playback import play_samples
from .settings import Settings
from .sink import MemorySink, write_wav
from .symbols import unsupported_characters
from .synthesizer import MorseAudioGenerator, generate_morse_wav

# Configure logging
logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 2
EXIT_UNSUPPORTED_CHARACTER = 3
EXIT_OUTPUT_ERROR = 4


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="morse-wav", description="Generate a Morse code WAV file from text"
    )
    parser.add_argument("filename", type=str, help="Filename to save audio to")
    parser.add_argument("text", type=str, help="Text to generate audio from")
    parser.add_argument(
        "wpm", type=int, nargs="?", default=None, help="Words per minute, default=10"
    )
    parser.add_argument(
        "--frequency", type=float, default=None, help="Tone frequency in Hz"
    )
    parser.add_argument(
        "--word-gap",
        type=int,
        default=None,
        help="Extra silence between words in timing units, default=4",
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Also play the audio through the speakers",
    )
    parser.add_argument(
        "-log",
        "--loglevel",
        default=None,
        help="Provide logging level. Example --loglevel debug, default=warning",
    )
    return parser.parse_args(argv)


def settings_from_arguments(args: argparse.Namespace) -> Settings:
    """
    Merge command line options over the configured defaults

    Raises:
        ValidationError: If a merged value is out of range
    """
    overrides = {
        "log_level": args.loglevel.upper() if args.loglevel is not None else None,
        "wpm": args.wpm,
        "frequency": args.frequency,
        "word_gap_units": args.word_gap,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def write_and_play(args: argparse.Namespace, settings: Settings) -> None:
    """Generate the audio once in memory, save it and play it"""
    generator = MorseAudioGenerator(
        args.text,
        settings.wpm,
        settings.frequency,
        word_gap_units=settings.word_gap_units,
    )
    logger.info(f"Morse code: {generator.morse_text}")
    with MemorySink() as memory:
        generator.generate(memory)
    samples = memory.samples()

    written = write_wav(samples, args.filename)
    logger.info(f"Audio saved to {args.filename} ({written} samples)")
    play_samples(samples)


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)

    try:
        settings = settings_from_arguments(args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.filename.endswith(".wav"):
        logger.error(f"Filename must end with .wav: {args.filename}")
        return EXIT_USAGE

    try:
        if args.play:
            write_and_play(args, settings)
        else:
            generate_morse_wav(
                args.text,
                args.filename,
                settings.wpm,
                frequency=settings.frequency,
                word_gap_units=settings.word_gap_units,
            )
    except UnsupportedCharacterError as e:
        logger.error(str(e))
        logger.debug(f"Unsupported characters: {unsupported_characters(args.text)}")
        return EXIT_UNSUPPORTED_CHARACTER
    except TimingError as e:
        logger.error(str(e))
        return EXIT_USAGE
    except OSError as e:
        # Sink and playback failures
        logger.error(str(e))
        return EXIT_OUTPUT_ERROR

    logger.info("Transmission complete")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
