"""Smooshed Morse constants: alphabet, letter patterns and search defaults."""

ALPHABET: tuple[str, ...] = tuple("abcdefghijklmnopqrstuvwxyz")

DOT = "."
DASH = "-"

# International Morse patterns for the 26 letters
MORSE_CODE: dict[str, str] = {
    "a": ".-", "b": "-...", "c": "-.-.", "d": "-..", "e": ".", "f": "..-.",
    "g": "--.", "h": "....", "i": "..", "j": ".---", "k": "-.-", "l": ".-..",
    "m": "--", "n": "-.", "o": "---", "p": ".--.", "q": "--.-", "r": ".-.",
    "s": "...", "t": "-", "u": "..-", "v": "...-", "w": ".--", "x": "-..-",
    "y": "-.--", "z": "--..",
}

# Letters committed per search level (the chunk limit)
DEFAULT_CHUNK_LIMIT = 4

# Seconds before the CLI and web app give up on a search
DEFAULT_TIMEOUT = 60.0

# How often (in advance() calls) the engine looks at the clock
CLOCK_CHECK_INTERVAL = 500
