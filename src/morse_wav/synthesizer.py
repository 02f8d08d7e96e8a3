import logging
import os
from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np

from .errors import TimingError
from .sink import SAMPLE_RATE, MemorySink, WavFileSink
from .symbols import WORD_SEPARATOR, text_to_morse

# Configure logging
logger = logging.getLogger(__name__)

# Constants
FREQUENCY = 800.0  # Hz
AMPLITUDE = np.iinfo(np.int16).max
WORD_GAP_UNITS = 4  # on top of the 3-unit gap that ends every character
DIT = "."
DAH = "-"


class AudioSink(Protocol):
    def write(self, samples: np.ndarray[Any, np.dtype[np.int16]]) -> None: ...


def wpm_to_unit_length(wpm: int, sample_rate: int = SAMPLE_RATE) -> int:
    """
    Convert a words-per-minute rate into the length of one dit in samples.

    Uses the PARIS standard of 50 units per word, so one unit lasts
    60 / (wpm * 50) seconds.

    Raises:
        TimingError: If wpm is not positive or the unit rounds to zero samples
    """
    if wpm <= 0:
        raise TimingError(f"Words per minute must be positive, got {wpm}")
    unit_length = round(sample_rate * 60 / (wpm * 50))
    if unit_length < 1:
        raise TimingError(f"{wpm} wpm is too fast for a {sample_rate} Hz sample rate")
    return unit_length


@dataclass(frozen=True)
class Timing:
    """Sample lengths of every Morse element, derived from one timing unit."""

    unit_length: int
    word_gap_units: int = WORD_GAP_UNITS
    sample_rate: int = SAMPLE_RATE

    def __post_init__(self):
        if self.unit_length < 1:
            raise TimingError(f"Unit length must be positive, got {self.unit_length}")
        if self.word_gap_units < 1:
            raise TimingError(
                f"Word gap must be at least one unit, got {self.word_gap_units}"
            )

    @classmethod
    def from_wpm(
        cls,
        wpm: int,
        word_gap_units: int = WORD_GAP_UNITS,
        sample_rate: int = SAMPLE_RATE,
    ) -> "Timing":
        return cls(wpm_to_unit_length(wpm, sample_rate), word_gap_units, sample_rate)

    @property
    def dit(self) -> int:
        return self.unit_length

    @property
    def dah(self) -> int:
        return self.unit_length * 3

    @property
    def intra_char_gap(self) -> int:
        return self.unit_length

    @property
    def inter_char_gap(self) -> int:
        return self.unit_length * 3

    @property
    def word_gap(self) -> int:
        return self.unit_length * self.word_gap_units


def generate_tone(
    frequency: float, length: int, sample_rate: int = SAMPLE_RATE
) -> np.ndarray[Any, np.dtype[np.int16]]:
    """
    Generate a sine wave tone of the given length in samples.

    The phase starts at zero and values are truncated towards zero,
    not rounded, when converted to int16.
    """
    t = np.arange(length) / sample_rate
    tone = np.sin(2 * np.pi * frequency * t) * AMPLITUDE
    return tone.astype(np.int16)


def generate_silence(length: int) -> np.ndarray[Any, np.dtype[np.int16]]:
    return np.zeros(length, dtype=np.int16)


def split_words(morse_text: str) -> list[list[str]]:
    """Split Morse text into words, each a list of symbol groups."""
    if not morse_text:
        return []
    return [word.split(" ") for word in morse_text.split(WORD_SEPARATOR)]


def count_samples(morse_text: str, timing: Timing) -> int:
    """Number of samples synthesize() will write for this Morse text."""
    words = split_words(morse_text)
    total = 0
    for group in (group for word in words for group in word):
        total += group.count(DIT) * timing.dit + group.count(DAH) * timing.dah
        total += max(len(group) - 1, 0) * timing.intra_char_gap
        total += timing.inter_char_gap
    total += max(len(words) - 1, 0) * timing.word_gap
    return total


def synthesize(
    morse_text: str,
    timing: Timing,
    sink: AudioSink,
    frequency: float = FREQUENCY,
) -> int:
    """
    Write the tones and silences for Morse text to an audio sink.

    Every symbol group is followed by an inter-character gap, including the
    last group of a word and of the whole text. Words are separated by an
    additional word gap. Each tone starts at phase zero.

    Args:
        morse_text: Output of text_to_morse()
        timing: Element lengths for this run
        sink: Destination with a write(samples) method
        frequency: Tone frequency in Hz

    Returns:
        The number of samples written
    """
    # Tones restart at phase zero, so every dit and dah is identical
    dit_tone = generate_tone(frequency, timing.dit, timing.sample_rate)
    dah_tone = generate_tone(frequency, timing.dah, timing.sample_rate)
    intra_char_silence = generate_silence(timing.intra_char_gap)
    inter_char_silence = generate_silence(timing.inter_char_gap)
    word_silence = generate_silence(timing.word_gap)

    words = split_words(morse_text)
    written = 0
    for word_index, word in enumerate(words):
        for group in word:
            for i, symbol in enumerate(group):
                if symbol == DIT:
                    segment = dit_tone
                elif symbol == DAH:
                    segment = dah_tone
                else:
                    raise ValueError(f"Unexpected symbol {symbol!r} in Morse text")
                sink.write(segment)
                written += len(segment)

                if i < len(group) - 1:
                    sink.write(intra_char_silence)
                    written += len(intra_char_silence)

            sink.write(inter_char_silence)
            written += len(inter_char_silence)

        if word_index < len(words) - 1:
            sink.write(word_silence)
            written += len(word_silence)

    logger.debug(f"Synthesized {written} samples for {len(words)} words")
    return written


class MorseAudioGenerator:
    """
    Text converted to Morse code together with the timing to play it.

    The text is encoded when the generator is created, so an unsupported
    character is reported before any output is opened.
    """

    def __init__(
        self,
        text: str,
        wpm: int,
        frequency: float = FREQUENCY,
        word_gap_units: int = WORD_GAP_UNITS,
        sample_rate: int = SAMPLE_RATE,
    ):
        self.text = text
        self.morse_text = text_to_morse(text)
        self.timing = Timing.from_wpm(wpm, word_gap_units, sample_rate)
        self.frequency = frequency

    def total_samples(self) -> int:
        return count_samples(self.morse_text, self.timing)

    def generate(self, sink: AudioSink) -> int:
        return synthesize(self.morse_text, self.timing, sink, self.frequency)


def render(
    text: str,
    wpm: int,
    frequency: float = FREQUENCY,
    word_gap_units: int = WORD_GAP_UNITS,
    sample_rate: int = SAMPLE_RATE,
) -> np.ndarray[Any, np.dtype[np.int16]]:
    """Generate Morse audio for text in memory and return the int16 samples."""
    generator = MorseAudioGenerator(
        text, wpm, frequency, word_gap_units=word_gap_units, sample_rate=sample_rate
    )
    with MemorySink() as sink:
        generator.generate(sink)
    return sink.samples()


def generate_morse_wav(
    text: str,
    filename: str | os.PathLike[str],
    wpm: int,
    frequency: float = FREQUENCY,
    word_gap_units: int = WORD_GAP_UNITS,
    sample_rate: int = SAMPLE_RATE,
) -> int:
    """
    Write text as Morse code audio to a mono 16-bit PCM WAV file.

    Args:
        text: Message to convert
        filename: Path of the WAV file to create
        wpm: Speed in words per minute
        frequency: Tone frequency in Hz
        word_gap_units: Extra silence between words, in timing units
        sample_rate: Audio sample rate

    Returns:
        The number of samples written

    Raises:
        UnsupportedCharacterError: Before the file is created
        TimingError: Before the file is created
        SinkCreationError: If the file cannot be created
        SinkWriteError: If writing or finalizing the file fails
    """
    generator = MorseAudioGenerator(
        text, wpm, frequency, word_gap_units=word_gap_units, sample_rate=sample_rate
    )
    logger.info(f"Morse code: {generator.morse_text}")
    logger.debug(
        f"Unit length {generator.timing.unit_length} samples at {wpm} wpm, "
        f"{generator.total_samples()} samples expected"
    )

    with WavFileSink(filename, sample_rate) as sink:
        written = generator.generate(sink)

    logger.info(f"Audio saved to {os.fspath(filename)} ({written} samples)")
    return written
