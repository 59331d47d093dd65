# Load KEY=VALUE pairs from .env files into the environment.
from envfile.config import DEFAULT_FILENAME
from envfile.errors import ConfigError, EnvFileError, EnvFileIOError, PolicyError
from envfile.loader import init, iter_assignments, load_from, load_lines
from envfile.parser import ConfigLine, split_line
from envfile.policy import Override, Policy, Skip
from envfile.store import EnvStore, MappingStore, OsEnvironStore

__all__ = [
    "ConfigError",
    "ConfigLine",
    "DEFAULT_FILENAME",
    "EnvFileError",
    "EnvFileIOError",
    "EnvStore",
    "MappingStore",
    "OsEnvironStore",
    "Override",
    "Policy",
    "PolicyError",
    "Skip",
    "init",
    "iter_assignments",
    "load_from",
    "load_lines",
    "split_line",
]
