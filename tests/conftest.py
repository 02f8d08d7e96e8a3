import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add the src directory to the path so we can import the module
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
)


@pytest.fixture
def clean_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """
    Keep the developer's MORSE_WAV_* variables and config file out of the tests
    by clearing the variables and running from an empty directory
    """
    for name in list(os.environ):
        if name.startswith("MORSE_WAV_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def wav_path(tmp_path: Path) -> Path:
    """Path for an output WAV file inside the test's temporary directory"""
    return tmp_path / "out.wav"
