"""Counter for tokens, lines, and characters in snapshot text.

Token counting uses OpenAI's tiktoken library, which is an optional dependency
(the 'token_counting' extra). Without a model, or without tiktoken, only lines and
characters are counted and token counts are None.
"""

import importlib.util
from collections import namedtuple
from typing import Any, Optional

from localingest.exceptions import TokenizationError, TokenizerNotAvailableError

CountResult = namedtuple("CountResult", ["lines", "tokens", "characters"])


def check_tiktoken_available() -> bool:
    """Return True if the tiktoken library is installed."""
    return importlib.util.find_spec("tiktoken") is not None


class TokenCounter:
    """Running counter for lines, characters and, optionally, tokens.

    Attributes:
        model (Optional[str]): Model whose tokenizer is used, or None to skip token counting.
        encoder (Optional[Any]): The tiktoken encoder, when token counting is enabled.

    Example:
        >>> counter = TokenCounter()
        >>> result = counter.count("Hello\\nworld!")
        >>> result.lines, result.characters
        (1, 12)
        >>> print(result.tokens)
        None

    Raises:
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
        ValueError: If tiktoken has no tokenizer for the given model.
    """

    def __init__(self, model: Optional[str] = None):
        self.model = model
        self.encoder: Optional[Any] = None

        if self.model is not None:
            if not check_tiktoken_available():
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder(self.model)

        self._total_tokens: Optional[int] = None if self.encoder is None else 0
        self._total_lines = 0
        self._total_characters = 0

    @staticmethod
    def _get_encoder(model: str) -> Any:
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Consider using a well-supported "
                "model like 'gpt-4' (cl100k_base encoding); counts are then an approximation."
            )

    def count(self, text: str) -> CountResult:
        """Count lines (newlines), tokens and characters in ``text`` and add them to the totals.

        Raises:
            TokenizationError: If token counting is enabled but the tokenizer fails.
        """
        lines = text.count("\n")
        chars = len(text)
        tokens = None

        self._total_lines += lines
        self._total_characters += chars

        if self.encoder is not None:
            # Undecodable bytes are carried as lone surrogates, which tiktoken rejects
            clean = text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")
            try:
                tokens = len(self.encoder.encode(clean, disallowed_special=()))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {str(e)}")
            self._total_tokens = (self._total_tokens or 0) + tokens

        return CountResult(lines=lines, tokens=tokens, characters=chars)

    def get_total_tokens(self) -> Optional[int]:
        return self._total_tokens

    def get_total_lines(self) -> int:
        return self._total_lines

    def get_total_characters(self) -> int:
        return self._total_characters
