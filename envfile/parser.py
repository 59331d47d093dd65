# Line tokenizer for .env-style files.
from typing import NamedTuple, Optional

SEPARATOR = "="


# A single line split into its key and optional raw value.
class ConfigLine(NamedTuple):
    key: str
    value: Optional[str]


# Split a line on the first separator; later separators stay in the value.
def split_line(line: str) -> ConfigLine:
    key, separator, value = line.partition(SEPARATOR)
    if not separator:
        return ConfigLine(key, None)
    return ConfigLine(key, value)
