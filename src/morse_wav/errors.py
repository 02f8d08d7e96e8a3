class MorseError(Exception):
    """Base class for errors raised while generating Morse audio."""


class UnsupportedCharacterError(MorseError, ValueError):
    """The input text contains a character with no Morse code."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"No morse code for {character!r} implemented.")


class TimingError(MorseError, ValueError):
    """The words-per-minute rate does not give a usable timing unit."""


class SinkCreationError(MorseError, OSError):
    """The output audio file could not be created."""


class SinkWriteError(MorseError, OSError):
    """Writing or finalizing the output audio failed."""


class PlaybackError(MorseError, OSError):
    """The audio could not be played through the output device."""
