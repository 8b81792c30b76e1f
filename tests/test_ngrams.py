from __future__ import annotations

import pytest

from text_similarity.ngrams import letter_ngrams


def test_letter_ngrams_slide_one_character_at_a_time() -> None:
    assert letter_ngrams("abcd", 2) == ["ab", "bc", "cd"]
    assert letter_ngrams("abc", 3) == ["abc"]


def test_letter_ngrams_count_code_points() -> None:
    assert letter_ngrams("介護の品質", 2) == ["介護", "護の", "の品", "品質"]


def test_letter_ngrams_of_short_string_is_empty() -> None:
    assert letter_ngrams("ab", 3) == []


def test_letter_ngrams_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        letter_ngrams("abc", 0)
