from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from morse_wav.errors import PlaybackError
from morse_wav.playback import play_samples
from morse_wav.synthesizer import render


class TestPlayback:
    """Tests for playing audio through the speakers"""

    def test_plays_and_waits(self) -> None:
        """Test samples are handed to sounddevice and playback is awaited"""
        mock_sd = MagicMock()
        samples = render("e", 20)
        with patch.dict("sys.modules", {"sounddevice": mock_sd}):
            play_samples(samples)

        mock_sd.play.assert_called_once()
        played, rate = mock_sd.play.call_args[0]
        np.testing.assert_array_equal(played, samples)
        assert rate == 44100
        mock_sd.wait.assert_called_once()

    def test_nothing_to_play(self) -> None:
        """Test empty audio does not open the output device"""
        mock_sd = MagicMock()
        with patch.dict("sys.modules", {"sounddevice": mock_sd}):
            play_samples(np.zeros(0, dtype=np.int16))
        mock_sd.play.assert_not_called()

    def test_portaudio_missing(self) -> None:
        """Test a sounddevice that cannot load is reported as PlaybackError"""
        with patch.dict("sys.modules", {"sounddevice": None}):
            with pytest.raises(PlaybackError) as exc_info:
                play_samples(render("e", 20))
        assert isinstance(exc_info.value, OSError)

    def test_device_error(self) -> None:
        """Test an error from the output device is reported as PlaybackError"""
        mock_sd = MagicMock()
        mock_sd.PortAudioError = type("PortAudioError", (Exception,), {})
        mock_sd.play.side_effect = mock_sd.PortAudioError("Invalid device")
        with patch.dict("sys.modules", {"sounddevice": mock_sd}):
            with pytest.raises(PlaybackError, match="Invalid device"):
                play_samples(render("e", 20))
        mock_sd.wait.assert_not_called()
