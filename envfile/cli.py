# Command line runner: load an env file, then run a command or list the keys.
import argparse
import logging
import os
import subprocess
import sys
from typing import List, Optional

from envfile.config import get_env_file_path, get_policy_name
from envfile.errors import EnvFileError
from envfile.loader import iter_assignments, load_from, open_env_file
from envfile.policy import Policy
from envfile.store import default_store

logger = logging.getLogger("envfile")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envfile",
        description="Load KEY=VALUE pairs from a .env file into the environment.",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="environment file to load (default: $ENVFILE_PATH or .env)",
    )
    parser.add_argument(
        "-p",
        "--policy",
        choices=[policy.value for policy in Policy],
        default=None,
        help="how to treat variables that are already set (default: $ENVFILE_POLICY or skip)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each assignment")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="command to run with the loaded environment",
    )
    return parser


# Load the file into the process environment and return the keys it names,
# in order, without duplicates.
def _load_keys(filename: str, policy: Policy) -> List[str]:
    store = default_store()
    keys: List[str] = []
    with open_env_file(filename) as handle:
        for key, value in iter_assignments(handle, filename):
            logger.debug("Applying %s policy to %s", policy, key)
            policy.apply(key, value, store)
            if key not in keys:
                keys.append(key)
    return keys


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    filename = args.file or get_env_file_path()
    command = args.command
    if command and command[0] == "--":
        command = command[1:]

    try:
        policy = Policy.from_name(args.policy or get_policy_name())
        if command:
            load_from(filename, policy)
        else:
            for key in _load_keys(filename, policy):
                value = os.environ.get(key)
                if value is not None:
                    print(f"{key}={value}")
            return 0
    except EnvFileError as exc:
        print(f"envfile: {exc}", file=sys.stderr)
        return 1

    logger.debug("Running %s", command[0])
    try:
        completed = subprocess.run(command, env=os.environ.copy())
    except OSError as exc:
        print(f"envfile: cannot run {command[0]}: {exc.strerror or exc}", file=sys.stderr)
        return 127
    return completed.returncode
