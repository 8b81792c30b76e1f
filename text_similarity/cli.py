from __future__ import annotations

import argparse
import json
from typing import Any, Sequence

from rich.console import Console
from rich.table import Table

from . import simhash
from .encoding import SUPPORTED_ENCODINGS, EncodingKind
from .errors import SimilarityError
from .hashing import SUPPORTED_HASH_FUNCTIONS
from .options import DEFAULT_NGRAM_SIZE, SimhashOptions
from .sorensen_dice import sorensen_dice

console = Console()


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "hash":
            _run_hash(args)
        elif args.command == "similarity":
            _run_similarity(args)
        elif args.command == "dice":
            _run_dice(args)
        else:  # pragma: no cover - defensive
            parser.error(f"Unknown command: {args.command}")
    except SimilarityError as exc:
        console.print(f"[red]{exc}[/red]")
        return 2
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="text-similarity")
    subcommands = parser.add_subparsers(dest="command")
    subcommands.required = True

    hash_parser = subcommands.add_parser("hash", help="Print the simhash fingerprint of a string")
    hash_parser.add_argument("text")
    _add_simhash_arguments(hash_parser)
    hash_parser.add_argument(
        "--return-type",
        choices=SUPPORTED_ENCODINGS,
        default=EncodingKind.LIST.value,
        help="Fingerprint encoding (int64_* require siphash)",
    )
    hash_parser.add_argument("--format", choices=("table", "json"), default="table")

    similarity_parser = subcommands.add_parser(
        "similarity", help="Compare two strings by simhash Hamming distance"
    )
    similarity_parser.add_argument("left")
    similarity_parser.add_argument("right")
    _add_simhash_arguments(similarity_parser)
    similarity_parser.add_argument("--format", choices=("table", "json"), default="table")
    similarity_parser.add_argument("--verbose", action="store_true")

    dice_parser = subcommands.add_parser("dice", help="Sørensen-Dice coefficient of two strings")
    dice_parser.add_argument("left")
    dice_parser.add_argument("right")
    dice_parser.add_argument("--ngram-size", type=int, default=DEFAULT_NGRAM_SIZE)

    return parser


def _add_simhash_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--ngram-size", type=int, default=DEFAULT_NGRAM_SIZE)
    parser.add_argument(
        "--hash-function",
        choices=SUPPORTED_HASH_FUNCTIONS,
        default=SUPPORTED_HASH_FUNCTIONS[0],
    )


def _options_from_args(args: argparse.Namespace) -> SimhashOptions:
    return SimhashOptions(
        ngram_size=args.ngram_size,
        hash_function=args.hash_function,
        return_type=getattr(args, "return_type", EncodingKind.LIST.value),
    )


def _format_value(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, list):
        return "".join(str(bit) for bit in value)
    return value


def _run_hash(args: argparse.Namespace) -> None:
    options = _options_from_args(args)
    value = simhash.hash(args.text, options)

    if args.format == "json":
        payload = {
            "text": args.text,
            "hash_function": options.hash_function.value,
            "bits": options.bits,
            "return_type": options.return_type.value,
            "value": value.hex() if isinstance(value, bytes) else value,
        }
        console.print_json(json.dumps(payload, ensure_ascii=False))
        return

    table = Table(title="Simhash Fingerprint")
    table.add_column("Hash Function")
    table.add_column("Bits", justify="right")
    table.add_column("Return Type")
    table.add_column("Value", overflow="fold")
    table.add_row(
        options.hash_function.value,
        str(options.bits),
        options.return_type.value,
        str(_format_value(value)),
    )
    console.print(table)


def _run_similarity(args: argparse.Namespace) -> None:
    options = _options_from_args(args)
    if args.verbose:
        console.log(
            f"Fingerprinting with {options.hash_function.value} "
            f"(bits={options.bits}, ngram_size={options.ngram_size})"
        )
    left_bits, right_bits = simhash.fingerprint_pair(args.left, args.right, options)
    distance = simhash.hamming_distance(left_bits, right_bits)
    score = simhash.hash_similarity(left_bits, right_bits, options.bits)

    if args.format == "json":
        payload: dict[str, Any] = {"left": args.left, "right": args.right, "similarity": score}
        if args.verbose:
            payload["hamming_distance"] = distance
            payload["bits"] = options.bits
        console.print_json(json.dumps(payload, ensure_ascii=False))
        return

    console.print(f"[bold green]{score:.6f}[/bold green]")
    if args.verbose:
        console.print(f"[dim]Hamming distance: {distance} of {options.bits} bits[/dim]")


def _run_dice(args: argparse.Namespace) -> None:
    score = sorensen_dice(args.left, args.right, ngram_size=args.ngram_size)
    console.print(f"[bold green]{score:.6f}[/bold green]")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
