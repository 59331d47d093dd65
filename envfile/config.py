# Defaults and environment-driven settings for the command line runner.
import os

DEFAULT_FILENAME = ".env"
DEFAULT_POLICY_NAME = "skip"

PATH_ENV_VAR = "ENVFILE_PATH"
POLICY_ENV_VAR = "ENVFILE_POLICY"


# Resolve the file the runner loads when no --file is given.
def get_env_file_path() -> str:
    return os.getenv(PATH_ENV_VAR) or DEFAULT_FILENAME


# Resolve the policy name the runner uses when no --policy is given.
def get_policy_name() -> str:
    return (os.getenv(POLICY_ENV_VAR) or DEFAULT_POLICY_NAME).strip().lower()
