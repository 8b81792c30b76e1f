"""String similarity via simhash fingerprints, Sørensen-Dice and cosine measures."""

from .cosine import CosineAccumulator, cosine, cosine_srol, dot_product, magnitude
from .encoding import EncodingKind, decode, encode
from .errors import (
    InputTooShortError,
    InvalidNgramSizeError,
    LengthMismatchError,
    SimilarityError,
    UnsupportedEncodingError,
    UnsupportedHashFunctionError,
)
from .hashing import HashFunction, HashFunctionSpec
from .options import SimhashOptions
from .simhash import fingerprint, hamming_distance, similarity
from .sorensen_dice import sorensen_dice

__all__ = [
    "CosineAccumulator",
    "cosine",
    "cosine_srol",
    "dot_product",
    "magnitude",
    "EncodingKind",
    "encode",
    "decode",
    "SimilarityError",
    "InputTooShortError",
    "InvalidNgramSizeError",
    "LengthMismatchError",
    "UnsupportedEncodingError",
    "UnsupportedHashFunctionError",
    "HashFunction",
    "HashFunctionSpec",
    "SimhashOptions",
    "fingerprint",
    "hamming_distance",
    "similarity",
    "sorensen_dice",
]
