from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .encoding import EncodingKind, check_encoding, get_encoding
from .hashing import HashFunction, HashFunctionSpec, get_hash_function
from .ngrams import check_ngram_size

DEFAULT_NGRAM_SIZE = 3


@dataclass(frozen=True)
class SimhashOptions:
    """Validated settings shared by the fingerprint and similarity operations.

    Construction fails on any invalid combination, so an instance can be built
    once and reused for many calls.
    """

    ngram_size: int = DEFAULT_NGRAM_SIZE
    hash_function: str | HashFunction = HashFunction.SIPHASH
    return_type: str | EncodingKind = EncodingKind.LIST

    def __post_init__(self) -> None:
        check_ngram_size(self.ngram_size)
        spec = get_hash_function(self.hash_function)
        encoding = get_encoding(self.return_type)
        check_encoding(spec, encoding)
        object.__setattr__(self, "hash_function", spec.function)
        object.__setattr__(self, "return_type", encoding)

    @property
    def spec(self) -> HashFunctionSpec:
        return get_hash_function(self.hash_function)

    @property
    def bits(self) -> int:
        return self.spec.bits

    @classmethod
    def resolve(cls, options: SimhashOptions | None = None, **overrides: Any) -> SimhashOptions:
        base = options if options is not None else cls()
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if not overrides:
            return base
        return replace(base, **overrides)


__all__ = ["DEFAULT_NGRAM_SIZE", "SimhashOptions"]
