import logging
from collections.abc import Mapping
from types import MappingProxyType

from .errors import UnsupportedCharacterError

# Configure logging
logger = logging.getLogger(__name__)

WORD_SEPARATOR = "/"

# Morse code mapping
MORSE_CODE_DICT: Mapping[str, str] = MappingProxyType(
    {
        "a": ".-",
        "b": "-...",
        "c": "-.-.",
        "d": "-..",
        "e": ".",
        "f": "..-.",
        "g": "--.",
        "h": "....",
        "i": "..",
        "j": ".---",
        "k": "-.-",
        "l": ".-..",
        "m": "--",
        "n": "-.",
        "o": "---",
        "p": ".--.",
        "q": "--.-",
        "r": ".-.",
        "s": "...",
        "t": "-",
        "u": "..-",
        "v": "...-",
        "w": ".--",
        "x": "-..-",
        "y": "-.--",
        "z": "--..",
        " ": WORD_SEPARATOR,
        "1": ".----",
        "2": "..---",
        "3": "...--",
        "4": "....-",
        "5": ".....",
        "6": "-....",
        "7": "--...",
        "8": "---..",
        "9": "----.",
        "0": "-----",
        ".": ".-.-.-",
        ",": "--..--",
        "?": "..--..",
        "'": ".----.",
        "!": "-.-.--",
        "/": "-..-.",
        "(": "-.--.",
        ")": "-.--.-",
        "&": ".-...",
        ":": "---...",
        ";": "-.-.-.",
        "=": "-...-",
        "+": ".-.-.",
        "-": "-....-",
        "_": "..--.-",
        '"': ".-..-.",
        "$": "...-..-",
        "@": ".--.-.",
    }
)

SUPPORTED_CHARACTERS: frozenset[str] = frozenset(MORSE_CODE_DICT)


def is_supported(char: str) -> bool:
    """Return True if the character (in either case) has a Morse code."""
    return char.lower() in MORSE_CODE_DICT


def unsupported_characters(text: str) -> list[str]:
    """List the distinct characters of text that have no Morse code, in order."""
    found: list[str] = []
    for char in text.lower():
        if not is_supported(char) and char not in found:
            found.append(char)
    return found


def text_to_morse(text: str) -> str:
    """
    Convert text to Morse code.

    Symbol groups are separated by a single space. A space in the text becomes
    the word separator "/", and the spaces that would surround it are dropped,
    so "a b" gives ".-/-...".

    Args:
        text: Text to convert, in any case

    Returns:
        The Morse text, containing only ".", "-", " " and "/"

    Raises:
        UnsupportedCharacterError: If a character has no Morse code
    """
    morse: list[str] = []
    for char in text.lower():
        try:
            morse.append(MORSE_CODE_DICT[char])
        except KeyError:
            logger.debug(f"Rejecting text with unsupported character {char!r}")
            raise UnsupportedCharacterError(char) from None
    return " ".join(morse).replace(f" {WORD_SEPARATOR} ", WORD_SEPARATOR)
