import logging
import os
from typing import Any

import numpy as np
import soundfile as sf

from .errors import SinkCreationError, SinkWriteError

# Configure logging
logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
CHANNELS = 1
SUBTYPE = "PCM_16"


class MemorySink:
    """Collect generated samples in memory instead of writing a file."""

    def __init__(self) -> None:
        self._chunks: list[np.ndarray[Any, np.dtype[np.int16]]] = []
        self.frames_written = 0
        self.closed = False

    def write(self, samples: np.ndarray[Any, np.dtype[np.int16]]) -> None:
        if self.closed:
            raise SinkWriteError("Cannot write to a closed sink")
        self._chunks.append(samples)
        self.frames_written += len(samples)

    def close(self) -> None:
        self.closed = True

    def samples(self) -> np.ndarray[Any, np.dtype[np.int16]]:
        """Return everything written so far as one int16 array."""
        if not self._chunks:
            return np.zeros(0, dtype=np.int16)
        return np.concatenate(self._chunks).astype(np.int16, copy=False)

    def __enter__(self) -> "MemorySink":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class WavFileSink:
    """
    Append-only mono 16-bit PCM WAV writer.

    Samples are streamed to disk as they are written; the header is
    finalized when the sink is closed. Use as a context manager so the
    file is closed on every exit path.
    """

    def __init__(self, path: str | os.PathLike[str], sample_rate: int = SAMPLE_RATE):
        self.path = os.fspath(path)
        self.sample_rate = sample_rate
        self.frames_written = 0
        try:
            self._file = sf.SoundFile(
                self.path,
                mode="w",
                samplerate=sample_rate,
                channels=CHANNELS,
                subtype=SUBTYPE,
                format="WAV",
            )
        except (RuntimeError, OSError, TypeError, ValueError) as e:
            logger.error(f"Error creating audio file {self.path}: {e}")
            raise SinkCreationError(f"Cannot create {self.path}: {e}") from e
        logger.debug(f"Opened {self.path} for writing at {sample_rate} Hz")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, samples: np.ndarray[Any, np.dtype[np.int16]]) -> None:
        """Append int16 samples to the data chunk."""
        if self._file.closed:
            raise SinkWriteError(f"Cannot write to closed file {self.path}")
        try:
            self._file.write(np.asarray(samples, dtype=np.int16))
        except (RuntimeError, OSError) as e:
            logger.error(f"Error writing samples to {self.path}: {e}")
            raise SinkWriteError(f"Cannot write to {self.path}: {e}") from e
        self.frames_written += len(samples)

    def close(self) -> None:
        """Finalize the WAV header and release the file. Safe to call twice."""
        if self._file.closed:
            return
        try:
            self._file.close()
        except (RuntimeError, OSError) as e:
            logger.error(f"Error finalizing {self.path}: {e}")
            raise SinkWriteError(f"Cannot finalize {self.path}: {e}") from e
        logger.debug(f"Closed {self.path} after {self.frames_written} samples")

    def __enter__(self) -> "WavFileSink":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def write_wav(
    samples: np.ndarray[Any, np.dtype[np.int16]],
    path: str | os.PathLike[str],
    sample_rate: int = SAMPLE_RATE,
) -> int:
    """Write already generated samples to a WAV file and return the count."""
    with WavFileSink(path, sample_rate) as sink:
        sink.write(samples)
    return sink.frames_written
