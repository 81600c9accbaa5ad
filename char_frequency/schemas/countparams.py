from pathlib import Path

from pydantic import BaseModel


class CountParams(BaseModel):
    input_file: Path
    output_file: Path
