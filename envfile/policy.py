# Assignment policies deciding how file values reach the environment store.
from enum import Enum
from typing import Optional

from envfile.errors import ConfigError, PolicyError
from envfile.store import EnvStore


# OVERRIDE always applies the file value and deletes the variable when the
# value is empty or missing. SKIP only fills variables that are absent; one
# already set, even to an empty string, is left as it is.
class Policy(str, Enum):
    OVERRIDE = "override"
    SKIP = "skip"

    @classmethod
    def from_name(cls, name: str) -> "Policy":
        normalized = name.strip().lower()
        for policy in cls:
            if policy.value == normalized:
                return policy
        choices = ", ".join(policy.value for policy in cls)
        raise ConfigError(f"unknown policy {name!r} (expected one of: {choices})")

    def apply(self, key: str, value: Optional[str], store: EnvStore) -> None:
        try:
            if self is Policy.OVERRIDE:
                if not value:
                    store.remove(key)
                else:
                    store.set(key, value)
            elif value is not None and store.get(key) is None:
                store.set(key, value)
        except (OSError, ValueError) as exc:
            raise PolicyError(f"cannot assign {key!r}: {exc}", key) from exc

    def __str__(self) -> str:
        return self.value


Override = Policy.OVERRIDE
Skip = Policy.SKIP
