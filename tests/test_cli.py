from __future__ import annotations

import json

import pytest
from rich.console import Console

import text_similarity.cli as cli


@pytest.fixture
def test_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    recorded = Console(record=True, width=200)
    monkeypatch.setattr(cli, "console", recorded)
    return recorded


def test_cli_similarity_outputs_json(test_console: Console) -> None:
    exit_code = cli.main(["similarity", "we spoke", "bespoke", "--format", "json", "--verbose"])

    output = test_console.export_text()
    payload = json.loads(output[output.index("{") :])
    assert exit_code == 0
    assert payload["similarity"] == 0.703125
    assert payload["hamming_distance"] == 19
    assert payload["bits"] == 64


def test_cli_similarity_uses_selected_hash_function(test_console: Console) -> None:
    exit_code = cli.main(["similarity", "we spoke", "bespoke", "--hash-function", "md5"])

    assert exit_code == 0
    assert "0.718750" in test_console.export_text()


def test_cli_hash_integer_json(test_console: Console) -> None:
    exit_code = cli.main(
        ["hash", "alma korte", "--return-type", "int64_unsigned", "--format", "json"]
    )

    payload = json.loads(test_console.export_text().strip())
    assert exit_code == 0
    assert payload["value"] == 15012197954348909067
    assert payload["bits"] == 64


def test_cli_hash_binary_is_hex(test_console: Console) -> None:
    cli.main(
        ["hash", "alma korte", "--hash-function", "md5", "--return-type", "binary", "--format", "json"]
    )

    payload = json.loads(test_console.export_text().strip())
    assert len(payload["value"]) == 32
    int(payload["value"], 16)


def test_cli_hash_table(test_console: Console) -> None:
    cli.main(["hash", "alma korte"])

    output = test_console.export_text()
    assert "Simhash Fingerprint" in output
    assert "siphash" in output


def test_cli_reports_errors(test_console: Console) -> None:
    assert cli.main(["similarity", "a", "b", "--ngram-size", "2"]) == 2
    assert "at least 2 characters" in test_console.export_text()

    assert (
        cli.main(["hash", "alma", "--hash-function", "sha256", "--return-type", "int64_signed"])
        == 2
    )
    assert cli.main(["hash", "alma", "--ngram-size", "0"]) == 2


def test_cli_dice(test_console: Console) -> None:
    assert cli.main(["dice", "this that", "just that"]) == 0
    assert "0.428571" in test_console.export_text()


def test_cli_verbose_similarity_fingerprints_each_string_once(
    test_console: Console, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[str] = []
    original = cli.simhash.fingerprint

    def counting_fingerprint(text, options=None, **overrides):
        calls.append(text)
        return original(text, options, **overrides)

    monkeypatch.setattr(cli.simhash, "fingerprint", counting_fingerprint)

    assert cli.main(["similarity", "we spoke", "bespoke", "--verbose"]) == 0

    output = test_console.export_text()
    assert "0.703125" in output
    assert "Hamming distance: 19 of 64 bits" in output
    assert calls == ["we spoke", "bespoke"]


def test_cli_dice_rejects_non_positive_ngram_size(test_console: Console) -> None:
    assert cli.main(["dice", "abc", "abd", "--ngram-size", "0"]) == 2
    assert "ngram_size must be a positive integer" in test_console.export_text()
