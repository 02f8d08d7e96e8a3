import logging
from typing import Any

import numpy as np

from .errors import PlaybackError
from .sink import SAMPLE_RATE

# Configure logging
logger = logging.getLogger(__name__)


def play_samples(
    samples: np.ndarray[Any, np.dtype[np.int16]], sample_rate: int = SAMPLE_RATE
) -> None:
    """
    Play int16 samples through the default output device and wait for the end.

    sounddevice loads the PortAudio library when imported, so it is only
    imported once playback is actually requested.

    Raises:
        PlaybackError: If PortAudio is unavailable or the device fails
    """
    try:
        import sounddevice as sd
    except (ImportError, OSError) as e:
        logger.error(f"Error loading sounddevice: {e}")
        raise PlaybackError(f"Audio playback is unavailable: {e}") from e

    if len(samples) == 0:
        logger.info("Nothing to play")
        return
    logger.info(f"Playing {len(samples) / sample_rate:.2f} s of audio through speakers")
    try:
        sd.play(samples, sample_rate)
        sd.wait()
    except sd.PortAudioError as e:
        logger.error(f"Error playing audio: {e}")
        raise PlaybackError(f"Audio playback failed: {e}") from e
