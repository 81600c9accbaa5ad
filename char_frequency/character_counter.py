import logging
from collections.abc import Callable
from functools import partial
from os import PathLike

from typing_extensions import Self

from char_frequency import config
from char_frequency.models import FrequencyTable

REPORT_HEADER = "Vector - Character(ascii)  Frequency"
_CHUNK_SIZE = 8192

logger = logging.getLogger(__name__)

StrPath = str | PathLike[str]


class CharacterCounter:
    encoding: str
    errors: str
    output_encoding: str
    indent: int

    def __init__(
        self: Self,
        encoding: str = config.INPUT_ENCODING,
        errors: str = config.INPUT_ERRORS,
        output_encoding: str = config.OUTPUT_ENCODING,
        indent: int = config.REPORT_INDENT,
    ) -> None:
        self.encoding = encoding
        self.errors = errors
        self.output_encoding = output_encoding
        self.indent = indent

    def scan(self: Self, path: StrPath) -> FrequencyTable:
        table = FrequencyTable()
        # newline="" keeps "\r\n" as two characters
        with open(path, encoding=self.encoding, errors=self.errors, newline="") as reader:
            for chunk in iter(partial(reader.read, _CHUNK_SIZE), ""):
                table.add_text(chunk)
        logger.info(
            "scanned %d characters (%d distinct) from %s", table.total_characters, table.distinct_characters, path
        )
        return table

    def build_report(self: Self, table: FrequencyTable) -> list[str]:
        return [REPORT_HEADER, ""] + [entry.format(self.indent) for entry in table.entries]

    def write_report(
        self: Self, table: FrequencyTable, path: StrPath, echo: Callable[[str], None] | None = print
    ) -> int:
        lines = self.build_report(table)
        with open(path, "w", encoding=self.output_encoding) as writer:
            for line in lines:
                writer.write(line + "\n")
                if echo is not None:
                    echo(line)
        logger.info("wrote %d entries to %s", len(table), path)
        return len(table)
