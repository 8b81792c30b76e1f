from __future__ import annotations

import pytest

from text_similarity.encoding import EncodingKind
from text_similarity.errors import (
    InvalidNgramSizeError,
    SimilarityError,
    UnsupportedEncodingError,
    UnsupportedHashFunctionError,
)
from text_similarity.hashing import HashFunction
from text_similarity.options import SimhashOptions


def test_defaults() -> None:
    options = SimhashOptions()

    assert options.ngram_size == 3
    assert options.hash_function is HashFunction.SIPHASH
    assert options.return_type is EncodingKind.LIST
    assert options.bits == 64


def test_names_are_normalized_to_enums() -> None:
    options = SimhashOptions(hash_function="SHA256", return_type="binary")

    assert options.hash_function is HashFunction.SHA256
    assert options.return_type is EncodingKind.BINARY
    assert options.bits == 256


@pytest.mark.parametrize("ngram_size", [0, -1, 2.5, "3", True])
def test_invalid_ngram_size(ngram_size) -> None:
    with pytest.raises(InvalidNgramSizeError) as excinfo:
        SimhashOptions(ngram_size=ngram_size)

    assert isinstance(excinfo.value, SimilarityError)


def test_invalid_combinations_fail_at_construction() -> None:
    with pytest.raises(UnsupportedHashFunctionError):
        SimhashOptions(hash_function="whirlpool")

    with pytest.raises(UnsupportedEncodingError):
        SimhashOptions(hash_function="md5", return_type="int64_signed")


def test_resolve_applies_overrides_and_skips_none() -> None:
    base = SimhashOptions(ngram_size=2)

    assert SimhashOptions.resolve() == SimhashOptions()
    assert SimhashOptions.resolve(base) is base
    resolved = SimhashOptions.resolve(base, hash_function="md5", return_type=None)
    assert resolved.ngram_size == 2
    assert resolved.hash_function is HashFunction.MD5
    assert resolved.return_type is EncodingKind.LIST


def test_resolve_rejects_unknown_option() -> None:
    with pytest.raises(TypeError):
        SimhashOptions.resolve(window=3)
