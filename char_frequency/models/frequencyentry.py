from pydantic import BaseModel, Field
from typing_extensions import Self

_DELETE = 127


class FrequencyEntry(BaseModel):
    character: str = Field(min_length=1, max_length=1, frozen=True)
    count: int = Field(default=0, ge=0)

    @property
    def code(self: Self) -> int:
        return ord(self.character)

    @property
    def is_control(self: Self) -> bool:
        return self.code < 32 or self.code == _DELETE

    def increment(self: Self) -> None:
        self.count += 1

    def format(self: Self, indent: int = 8) -> str:
        # control characters get no glyph, only their code
        glyph = "" if self.is_control else self.character
        return f"{' ' * indent}{glyph}({self.code})\t{self.count}"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, FrequencyEntry):
            return NotImplemented
        return self.character == other.character

    def __hash__(self: Self) -> int:
        return hash(self.character)

    def __str__(self: Self) -> str:
        return self.format()
