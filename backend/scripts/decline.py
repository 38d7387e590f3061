#!/usr/bin/env python3
"""Decline a Ukrainian word or phrase from the command line.

Run with: python3 -m scripts.decline TEXT [--case gen] [--number plural]
          [--gender feminine] [--paradigm]
"""
import argparse
import sys

from core.config import settings
from core.errors import AppError, Err, Ok, Result, out_of_range
from core.logging import configure_logging
from languages.types import GrammaticalCase, GrammaticalNumber
from languages.ukrainian import get_declensioner
from languages.ukrainian.maps import parse_case, parse_gender, parse_number

ORIGIN = "decline_cli"

# ANSI color codes
C_RESET = "\033[0m"
C_BOLD = "\033[1m"
C_DIM = "\033[2m"
C_CYAN = "\033[36m"
C_RED = "\033[31m"

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python3 -m scripts.decline",
        description="Decline a Ukrainian word, name or rank/position phrase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 -m scripts.decline книга --case gen                 # книги
  python3 -m scripts.decline земля --case р.в. --number pl    # земель
  python3 -m scripts.decline "капітан ПЕТРЕНКО Олександр Іванович" --case dative
  python3 -m scripts.decline Шаповалова --gender f --paradigm
        """,
    )
    parser.add_argument("text", help="Word or phrase in the nominative")
    parser.add_argument("--case", default="genitive", help="Target case (default: genitive)")
    parser.add_argument("--number", default="singular", help="singular or plural (default: singular)")
    parser.add_argument("--gender", help="masculine, feminine or neuter (default: inferred)")
    parser.add_argument("--paradigm", action="store_true", help="Print all seven cases in both numbers")
    return parser


def print_error(error: AppError) -> None:
    print(f"{C_RED}✗ {error.code.name}: {error.message}{C_RESET}", file=sys.stderr)


def print_paradigm(text: str, forms: dict[str, dict[str, str]]) -> None:
    print(f"{C_BOLD}{C_CYAN}{text}{C_RESET}")
    print(f"{C_DIM}{'─' * 60}{C_RESET}")
    singular = forms[GrammaticalNumber.SINGULAR.value]
    plural = forms[GrammaticalNumber.PLURAL.value]
    for case in GrammaticalCase:
        print(f"  {case.value:<13} {singular[case.value]:<22} {plural[case.value]}")


def run(args: argparse.Namespace) -> Result[str | None, AppError]:
    tokens = len(args.text.split())
    if tokens > settings.MAX_PHRASE_TOKENS:
        return out_of_range("text", tokens, max_value=settings.MAX_PHRASE_TOKENS, origin=ORIGIN)

    gender = parse_gender(args.gender, origin=ORIGIN)
    if gender.is_err():
        return gender
    engine = get_declensioner()

    if args.paradigm:
        probe = engine.decline_result(args.text, GrammaticalCase.NOMINATIVE, gender=gender.unwrap())
        if probe.is_err():
            return probe
        print_paradigm(args.text, engine.paradigm(args.text, gender.unwrap()))
        return Ok(None)

    case = parse_case(args.case, origin=ORIGIN)
    if case.is_err():
        return case
    number = parse_number(args.number, origin=ORIGIN)
    if number.is_err():
        return number
    return engine.decline_result(args.text, case.unwrap(), number.unwrap(), gender.unwrap())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    match run(args):
        case Ok(form):
            if form is not None:
                print(form)
            return EXIT_OK
        case Err(error):
            print_error(error)
            return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
