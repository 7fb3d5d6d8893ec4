"""Tests verifying Tokenizer protocol compliance via structural subtyping."""

from __future__ import annotations

from context_assembler.protocols.tokenizer import Tokenizer
from context_assembler.tokens.estimators import CharacterEstimator, WordEstimator
from tests.conftest import FakeTokenizer


class TestTokenizerProtocol:
    """Concrete token counters satisfy the Tokenizer protocol."""

    def test_character_estimator_is_tokenizer(self) -> None:
        assert isinstance(CharacterEstimator(), Tokenizer)

    def test_word_estimator_is_tokenizer(self) -> None:
        assert isinstance(WordEstimator(), Tokenizer)

    def test_fake_tokenizer_is_tokenizer(self) -> None:
        assert isinstance(FakeTokenizer(), Tokenizer)

    def test_custom_class_without_inheritance(self) -> None:
        class LengthTokenizer:
            def count_tokens(self, text: str) -> int:
                return len(text)

        assert isinstance(LengthTokenizer(), Tokenizer)

    def test_object_without_count_tokens_is_not_tokenizer(self) -> None:
        class NotATokenizer:
            def encode(self, text: str) -> list[int]:
                return []

        assert not isinstance(NotATokenizer(), Tokenizer)
