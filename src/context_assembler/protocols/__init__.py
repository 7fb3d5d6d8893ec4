"""Protocol definitions (extension points) for context-assembler."""

from .tokenizer import Tokenizer

__all__ = ["Tokenizer"]
