# Environment store backends used by the assignment policies.
import os
from typing import Dict, MutableMapping, Optional, Protocol


class EnvStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


# Store backed by the process environment.
class OsEnvironStore:
    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(key)

    def set(self, key: str, value: str) -> None:
        self._environ[key] = value

    def remove(self, key: str) -> None:
        self._environ.pop(key, None)

    def __repr__(self) -> str:
        return "OsEnvironStore()"


# Store backed by a plain dict, leaving the process environment alone.
class MappingStore:
    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = {} if values is None else values

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)

    def __repr__(self) -> str:
        return f"MappingStore({sorted(self.values)!r})"


# Return the store used when callers do not supply one.
def default_store() -> EnvStore:
    return OsEnvironStore()
