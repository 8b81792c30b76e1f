from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Hashable, Iterable, Iterator, Sequence

from .errors import LengthMismatchError


def dot_product(left: Sequence[float], right: Sequence[float]) -> float:
    if len(left) != len(right):
        raise LengthMismatchError(len(left), len(right))
    return sum(a * b for a, b in zip(left, right))


def magnitude(vector: Iterable[float]) -> float:
    return math.sqrt(sum(value * value for value in vector))


def cosine(left: Sequence[float], right: Sequence[float]) -> float:
    return dot_product(left, right) / (magnitude(left) * magnitude(right))


def cosine_srol(left: Sequence[float], right: Sequence[float]) -> float:
    """Cosine similarity scaled by the square root of the vector length.

    Makes scores comparable between pairs that share a different number of
    attributes.
    """

    return cosine(left, right) * math.sqrt(len(left))


@dataclass
class CosineAccumulator:
    """Collect attribute vectors per id and compare ids on shared attributes."""

    attribute_index: dict[Hashable, int] = field(default_factory=dict)
    entries: dict[Hashable, dict[int, float]] = field(default_factory=dict)

    def add(self, identifier: Hashable, attributes: Iterable[tuple[Hashable, float]]) -> CosineAccumulator:
        indexed: dict[int, float] = {}
        for key, value in attributes:
            index = self.attribute_index.setdefault(key, len(self.attribute_index))
            indexed[index] = value
        self.entries[identifier] = indexed
        return self

    def between(self, left_id: Hashable, right_id: Hashable) -> float:
        left = self.entries[left_id]
        right = self.entries[right_id]
        shared = sorted(left.keys() & right.keys())
        return cosine_srol([left[index] for index in shared], [right[index] for index in shared])

    def pairs(self) -> Iterator[tuple[Hashable, Hashable, float]]:
        for left_id, right_id in combinations(self.entries, 2):
            yield left_id, right_id, self.between(left_id, right_id)


__all__ = ["dot_product", "magnitude", "cosine", "cosine_srol", "CosineAccumulator"]
