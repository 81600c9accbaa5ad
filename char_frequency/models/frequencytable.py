from collections.abc import Iterable

from pydantic import BaseModel, Field
from typing_extensions import Self

from .frequencyentry import FrequencyEntry


class FrequencyTable(BaseModel):
    """Character counts in order of first occurrence.

    Lookups are a linear search over the entries, which only ever holds the
    characters actually seen in the input.
    """

    entries: list[FrequencyEntry] = Field(default_factory=list)

    def find_or_create(self: Self, character: str) -> FrequencyEntry:
        for entry in self.entries:
            if entry.character == character:
                return entry
        entry = FrequencyEntry(character=character)
        self.entries.append(entry)
        return entry

    def add(self: Self, character: str) -> FrequencyEntry:
        entry = self.find_or_create(character)
        entry.increment()
        return entry

    def add_text(self: Self, text: Iterable[str]) -> None:
        for character in text:
            self.add(character)

    @property
    def total_characters(self: Self) -> int:
        return sum(entry.count for entry in self.entries)

    @property
    def distinct_characters(self: Self) -> int:
        return len(self.entries)

    def __len__(self: Self) -> int:
        return len(self.entries)
