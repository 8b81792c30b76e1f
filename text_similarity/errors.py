from __future__ import annotations


class SimilarityError(ValueError):
    """Base class for invalid arguments passed to similarity operations."""


class InputTooShortError(SimilarityError):
    def __init__(self, length: int, ngram_size: int) -> None:
        super().__init__(
            f"string must be at least {ngram_size} characters long when using "
            f"ngram_size {ngram_size} (got {length})"
        )
        self.length = length
        self.ngram_size = ngram_size


class InvalidNgramSizeError(SimilarityError):
    def __init__(self, ngram_size: object) -> None:
        super().__init__(f"ngram_size must be a positive integer, got {ngram_size!r}")
        self.ngram_size = ngram_size


class UnsupportedHashFunctionError(SimilarityError):
    def __init__(self, name: object, supported: tuple[str, ...]) -> None:
        super().__init__(
            f"Unsupported hash function: {name!r} (expected one of {', '.join(supported)})"
        )
        self.name = name


class UnsupportedEncodingError(SimilarityError):
    pass


class LengthMismatchError(SimilarityError):
    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Sequences differ in length: {left} != {right}")
        self.left = left
        self.right = right


__all__ = [
    "SimilarityError",
    "InputTooShortError",
    "InvalidNgramSizeError",
    "UnsupportedHashFunctionError",
    "UnsupportedEncodingError",
    "LengthMismatchError",
]
