import re
import string
from dataclasses import dataclass

from app.models.schemas import NormalizationMode


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    removed_chars: dict[str, int]
    mode: NormalizationMode


class TextNormalizer:
    """
    Prepares text before it is offered to the machine.

    Handles:
    - ASCII case conversion (the machine only accepts 'A'..'Z')
    - Optional removal of everything that is not a letter

    Only ASCII letters are upper-cased; other characters are never
    rewritten, so they pass through the machine unchanged.
    """

    _UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

    def normalize(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.UPPERCASE,
    ) -> str:
        """
        Normalize text for the machine.

        Args:
            text: Input text to normalize
            mode: Normalization mode

        Returns:
            Normalized text string
        """
        result = self.normalize_full(text, mode)
        return result.text

    def normalize_full(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.UPPERCASE,
    ) -> NormalizedText:
        """
        Normalize text and return detailed result.

        Args:
            text: Input text to normalize
            mode: Normalization mode

        Returns:
            NormalizedText with details about the normalization
        """
        removed_chars: dict[str, int] = {}

        if mode == NormalizationMode.PRESERVE:
            normalized = text
        elif mode == NormalizationMode.LETTERS_ONLY:
            normalized = self._filter_chars(
                text.translate(self._UPPER),
                string.ascii_uppercase,
                removed_chars,
            )
        else:  # UPPERCASE mode
            normalized = text.translate(self._UPPER)

        return NormalizedText(
            text=normalized,
            original=text,
            removed_chars=removed_chars,
            mode=mode,
        )

    def _filter_chars(
        self,
        text: str,
        allowed: str,
        removed_chars: dict[str, int],
    ) -> str:
        """Filter text to only allowed characters, tracking removed ones."""
        result = []
        allowed_set = set(allowed)

        for char in text:
            if char in allowed_set:
                result.append(char)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return "".join(result)

    def group(self, text: str, size: int = 5) -> str:
        """Split letters into fixed-size blocks, the way traffic was transmitted."""
        letters = re.sub(r"[^A-Z]", "", text)
        return " ".join(letters[i:i + size] for i in range(0, len(letters), size))
