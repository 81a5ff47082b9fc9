import os
from pathlib import Path


def resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Only UNIQCOUNT_ENV_FILE is consulted; relative paths are taken from the
    current working directory. A missing file is ignored.
    """
    env_file_path = os.environ.get("UNIQCOUNT_ENV_FILE")
    if not env_file_path:
        return None

    path = Path(env_file_path)
    if not path.is_absolute():
        path = Path.cwd() / path
    if path.exists():
        return path

    return None
