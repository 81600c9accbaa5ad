import argparse
import logging
import os
import sys
from collections.abc import Sequence

from char_frequency.log_config import configure_logging
from char_frequency.schemas import CountParams
from char_frequency.services import count_service
from char_frequency.services.count_service import CountError, ExitCode

PROG = "char-frequency"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Count how often each character occurs in a text file.", exit_on_error=False
    )
    parser.add_argument("input_file", nargs="?", help="text file to scan")
    parser.add_argument("output_file", nargs="?", help="where to write the frequency report")
    parser.add_argument("--demo", action="store_true", help='print the table for the sample text "Hello."')
    return parser


def print_usage() -> None:
    print(f"Usage: {PROG} <inputFile> <outputFile>")
    print(f"Example: {PROG} wap.txt wap_output.txt")
    print("Example: python -m char_frequency wap.txt wap_output.txt")


def print_demo() -> None:
    print('Test Output for input: "Hello."')
    for entry in count_service.demo_table().entries:
        print(entry.format())
    print("End of test output\n")


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        args, extra = build_parser().parse_known_args(argv)
    except argparse.ArgumentError:
        print_usage()
        return ExitCode.USAGE

    if args.demo:
        print_demo()
        if args.input_file is None and not extra:
            return ExitCode.OK

    if args.input_file is None or args.output_file is None or extra:
        print_usage()
        return ExitCode.USAGE

    logger.debug("current directory: %s", os.getcwd())
    logger.debug("input file path: %s", args.input_file)

    try:
        count_service.count_characters(CountParams(input_file=args.input_file, output_file=args.output_file))
    except CountError as e:
        print(e.message)
        return e.exit_code

    print(f"\n  * Note: Printed {args.output_file} file output to Console for Quick Viewing")
    print("  * Args: " + ", ".join(argv))
    return ExitCode.OK


def run() -> None:
    configure_logging()
    sys.exit(main())
