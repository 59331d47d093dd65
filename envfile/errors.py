# Exceptions raised while loading environment files.
from typing import Optional


# Base class for every error raised by envfile.
class EnvFileError(Exception):
    pass


# Opening, reading or decoding the source failed; the cause is chained.
class EnvFileIOError(EnvFileError):
    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename


# The environment store rejected an assignment.
class PolicyError(EnvFileError):
    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key


class ConfigError(EnvFileError):
    pass
