# Load .env-style files into an environment store.
import logging
import os
from contextlib import contextmanager
from typing import IO, Iterable, Iterator, Optional, Union

from envfile.config import DEFAULT_FILENAME
from envfile.errors import EnvFileIOError
from envfile.parser import ConfigLine, split_line
from envfile.policy import Policy
from envfile.store import EnvStore, default_store

COMMENT_PREFIX = "#"

PathLike = Union[str, os.PathLike]

logger = logging.getLogger("envfile")


# Open an env file for reading, reporting failures as EnvFileIOError.
@contextmanager
def open_env_file(filename: PathLike) -> Iterator[IO[str]]:
    name = os.fspath(filename)
    try:
        handle = open(name, "r", encoding="utf-8")
    except OSError as exc:
        raise EnvFileIOError(f"cannot open {name}: {exc.strerror or exc}", name) from exc
    logger.debug("Reading environment file %s", name)
    with handle:
        yield handle


# Wrap read and decode failures raised while pulling lines from the source.
def _read_lines(lines: Iterable[str], filename: Optional[str]) -> Iterator[str]:
    source = filename or "<lines>"
    try:
        for line in lines:
            yield line
    except UnicodeDecodeError as exc:
        raise EnvFileIOError(f"cannot decode {source}: {exc.reason}", filename) from exc
    except OSError as exc:
        raise EnvFileIOError(f"cannot read {source}: {exc.strerror or exc}", filename) from exc


# Yield actionable assignments, skipping comments and lines without a key.
def iter_assignments(
    lines: Iterable[str], filename: Optional[str] = None
) -> Iterator[ConfigLine]:
    for raw_line in _read_lines(lines, filename):
        line = raw_line.strip()
        if line.startswith(COMMENT_PREFIX):
            continue
        key, value = split_line(line)
        key = key.strip()
        if not key:
            continue
        yield ConfigLine(key, value)


# Apply every assignment in lines to store, in order; the first failure aborts
# the load and variables assigned before it stay assigned.
def load_lines(
    lines: Iterable[str],
    policy: Policy,
    store: Optional[EnvStore] = None,
    filename: Optional[str] = None,
) -> None:
    if store is None:
        store = default_store()
    for key, value in iter_assignments(lines, filename):
        logger.debug("Applying %s policy to %s", policy, key)
        policy.apply(key, value, store)


# Load variables from an explicit file path.
def load_from(
    filename: PathLike, policy: Policy, store: Optional[EnvStore] = None
) -> None:
    with open_env_file(filename) as handle:
        load_lines(handle, policy, store, filename=os.fspath(filename))


# Load variables from .env in the current working directory.
def init(policy: Policy, store: Optional[EnvStore] = None) -> None:
    load_from(DEFAULT_FILENAME, policy, store)
