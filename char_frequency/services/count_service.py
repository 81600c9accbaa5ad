import logging
from collections.abc import Callable
from enum import IntEnum

from char_frequency import counter
from char_frequency.models import FrequencyTable
from char_frequency.schemas import CountParams, CountSummary

DEMO_TEXT = "Hello.\r\n"

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    OK = 0
    IO_FAILURE = 1
    USAGE = 2
    INPUT_NOT_FOUND = 3
    PERMISSION_DENIED = 4
    UNEXPECTED = 5


class CountError(Exception):
    message: str
    exit_code: ExitCode = ExitCode.UNEXPECTED

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(*args)
        self.message = message


class InputNotFoundError(CountError):
    exit_code = ExitCode.INPUT_NOT_FOUND


class ReportIOError(CountError):
    exit_code = ExitCode.IO_FAILURE


class ReportPermissionError(CountError):
    exit_code = ExitCode.PERMISSION_DENIED


class UnexpectedCountError(CountError):
    exit_code = ExitCode.UNEXPECTED


def demo_table() -> FrequencyTable:
    table = FrequencyTable()
    table.add_text(DEMO_TEXT)
    return table


def count_characters(params: CountParams, echo: Callable[[str], None] | None = print) -> CountSummary:
    try:
        if not params.input_file.is_file():
            raise InputNotFoundError(f"Error: Input file '{params.input_file}' not found.")
        table = counter.scan(params.input_file)
        counter.write_report(table, params.output_file, echo)
    except CountError:
        raise
    except PermissionError as e:
        logger.debug("permission denied", exc_info=True)
        raise ReportPermissionError(f"File access denied: {e}") from e
    except OSError as e:
        logger.debug("I/O failure", exc_info=True)
        raise ReportIOError(f"A file I/O error occurred: {e}") from e
    except Exception as e:
        logger.debug("unexpected failure", exc_info=True)
        raise UnexpectedCountError(f"An unexpected error occurred: {e}") from e
    return CountSummary(
        input_file=params.input_file,
        output_file=params.output_file,
        total_characters=table.total_characters,
        distinct_characters=table.distinct_characters,
        entries=table.entries,
    )
