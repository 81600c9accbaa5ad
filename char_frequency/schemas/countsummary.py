from pathlib import Path

from pydantic import BaseModel

from char_frequency.models import FrequencyEntry


class CountSummary(BaseModel):
    input_file: Path
    output_file: Path
    total_characters: int
    distinct_characters: int
    entries: list[FrequencyEntry]
