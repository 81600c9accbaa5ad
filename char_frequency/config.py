from pathlib import Path

from starlette.config import Config

config = Config(".env" if Path(".env").is_file() else None)

DEBUG = config("DEBUG", cast=bool, default=False)
LOG_LEVEL = config("LOG_LEVEL", default="WARNING")
INPUT_ENCODING = config("INPUT_ENCODING", default="utf-8-sig")
INPUT_ERRORS = config("INPUT_ERRORS", default="replace")
OUTPUT_ENCODING = config("OUTPUT_ENCODING", default="utf-8")
REPORT_INDENT = config("REPORT_INDENT", cast=int, default=8)
