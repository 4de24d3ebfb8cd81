"""Character and string generation driven by a seeded engine."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from .engine import SeededEngine

UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
NUMERIC_CHARS = "0123456789"
SYMBOL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
HEX_CHARS = "0123456789ABCDEF"


class CharacterType(str, Enum):
    ALL = "all"
    ALPHA = "alpha"
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    SYMBOLS = "symbols"
    CUSTOM = "custom"       # caller supplies the characters


_ALPHA = UPPERCASE_CHARS + LOWERCASE_CHARS
_ALPHANUMERIC = _ALPHA + NUMERIC_CHARS

CHARACTER_SETS: Dict[CharacterType, str] = {
    CharacterType.ALL: _ALPHANUMERIC + SYMBOL_CHARS,
    CharacterType.ALPHA: _ALPHA,
    CharacterType.NUMERIC: NUMERIC_CHARS,
    CharacterType.ALPHANUMERIC: _ALPHANUMERIC,
    CharacterType.UPPERCASE: UPPERCASE_CHARS,
    CharacterType.LOWERCASE: LOWERCASE_CHARS,
    CharacterType.SYMBOLS: SYMBOL_CHARS,
    # lookups without caller characters fall back to the full set
    CharacterType.CUSTOM: _ALPHANUMERIC + SYMBOL_CHARS,
}


class RandomString:
    """
    String helpers on top of a ``SeededEngine``.

    Pass an engine to share its stream, or a seed to own a fresh one. Every
    character costs one ``rand_int`` on the engine.
    """

    def __init__(self, seed: Optional[int] = None, engine: Optional[SeededEngine] = None) -> None:
        self.engine = engine if engine is not None else SeededEngine(seed)

    def get_seed(self) -> int:
        return self.engine.get_root_seed()

    # ---------- characters ----------
    def rand_char(self, char_type: CharacterType = CharacterType.ALL, custom_chars: str = "") -> str:
        charset = custom_chars if char_type is CharacterType.CUSTOM else CHARACTER_SETS[char_type]
        if not charset:
            return " "
        return charset[self.engine.rand_int(0, len(charset) - 1)]

    def rand_uppercase(self) -> str:
        return self.rand_char(CharacterType.UPPERCASE)

    def rand_lowercase(self) -> str:
        return self.rand_char(CharacterType.LOWERCASE)

    def rand_digit(self) -> str:
        return self.rand_char(CharacterType.NUMERIC)

    def rand_alpha(self) -> str:
        return self.rand_char(CharacterType.ALPHA)

    def rand_alphanumeric(self) -> str:
        return self.rand_char(CharacterType.ALPHANUMERIC)

    def rand_symbol(self) -> str:
        return self.rand_char(CharacterType.SYMBOLS)

    # ---------- strings ----------
    def rand_string(
        self,
        length: int,
        char_type: CharacterType = CharacterType.ALPHANUMERIC,
        custom_chars: str = "",
    ) -> str:
        if length <= 0:
            return ""
        return "".join(self.rand_char(char_type, custom_chars) for _ in range(length))

    def rand_password(
        self,
        length: int = 12,
        include_uppercase: bool = True,
        include_lowercase: bool = True,
        include_numbers: bool = True,
        include_symbols: bool = False,
    ) -> str:
        if length <= 0:
            return ""

        charset = ""
        if include_uppercase:
            charset += UPPERCASE_CHARS
        if include_lowercase:
            charset += LOWERCASE_CHARS
        if include_numbers:
            charset += NUMERIC_CHARS
        if include_symbols:
            charset += SYMBOL_CHARS
        if not charset:
            charset = _ALPHANUMERIC

        return self.rand_string(length, CharacterType.CUSTOM, charset)

    def rand_identifier(self, length: int = 8, use_uppercase: bool = False) -> str:
        """Starts with a letter; the rest is alphanumeric."""
        if length <= 0:
            return ""

        chars: List[str] = [self.rand_uppercase() if use_uppercase else self.rand_lowercase()]
        for _ in range(1, length):
            if use_uppercase:
                chars.append(self.rand_char(CharacterType.CUSTOM, UPPERCASE_CHARS + NUMERIC_CHARS))
            else:
                chars.append(self.rand_char(CharacterType.ALPHANUMERIC))
        return "".join(chars)

    def rand_hex_string(self, length: int = 8, include_prefix: bool = False) -> str:
        prefix = "0x" if include_prefix else ""
        if length <= 0:
            return prefix
        return prefix + self.rand_string(length, CharacterType.CUSTOM, HEX_CHARS)

    def rand_name(self, min_length: int = 4, max_length: int = 10) -> str:
        if min_length <= 0 or max_length < min_length:
            return ""
        length = self.engine.rand_int(min_length, max_length)
        return self.rand_uppercase() + "".join(self.rand_lowercase() for _ in range(1, length))

    def rand_string_from_pattern(self, pattern: str, custom_chars: str = "") -> str:
        """
        Expand a pattern one character at a time:

          A  uppercase letter      a  lowercase letter
          9  digit                 X  alphanumeric
          ?  any character         *  one of ``custom_chars``

        Anything else is copied through unchanged.
        """
        out: List[str] = []
        for symbol in pattern:
            if symbol == "A":
                out.append(self.rand_uppercase())
            elif symbol == "a":
                out.append(self.rand_lowercase())
            elif symbol == "9":
                out.append(self.rand_digit())
            elif symbol == "X":
                out.append(self.rand_alphanumeric())
            elif symbol == "?":
                out.append(self.rand_char(CharacterType.ALL))
            elif symbol == "*":
                out.append(self.rand_char(CharacterType.CUSTOM, custom_chars))
            else:
                out.append(symbol)
        return "".join(out)

    # ---------- transforms ----------
    def shuffle_string(self, text: str) -> str:
        chars = list(text)
        for i in range(len(chars) - 1, 0, -1):
            j = self.engine.rand_int(0, i)
            chars[i], chars[j] = chars[j], chars[i]
        return "".join(chars)

    def rand_substring(self, text: str, min_length: int = 1, max_length: int = -1) -> str:
        if not text or min_length <= 0:
            return ""

        size = len(text)
        if max_length <= 0 or max_length > size:
            max_length = size
        min_length = min(min_length, size)
        max_length = max(min_length, max_length)

        length = self.engine.rand_int(min_length, max_length)
        start = self.engine.rand_int(0, max(0, size - length))
        return text[start:start + length]

    def random_capitalization(self, text: str, probability: float = 0.5) -> str:
        out: List[str] = []
        for char in text:
            if char.isalpha():
                char = char.upper() if self.engine.rand_bool(probability) else char.lower()
            out.append(char)
        return "".join(out)

    # ---------- lookups ----------
    @staticmethod
    def get_character_set(char_type: CharacterType) -> str:
        return CHARACTER_SETS.get(char_type, CHARACTER_SETS[CharacterType.ALL])

    @staticmethod
    def is_char_in_set(char: str, char_type: CharacterType) -> bool:
        return bool(char) and char in RandomString.get_character_set(char_type)

    @staticmethod
    def string_to_character_type(name: str) -> CharacterType:
        """Case-insensitive name lookup; unknown names map to ``ALL``."""
        try:
            return CharacterType(name.strip().lower())
        except ValueError:
            return CharacterType.ALL
