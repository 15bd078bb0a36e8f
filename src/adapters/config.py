import os

from dotenv import load_dotenv


def load_env(override: bool = False) -> bool:
    """Load environment variables from env file.

    Defaults to config/local.env for local development.
    Set ENV_FILE environment variable to override.

    Returns:
        True if a file was found and loaded
    """
    env = os.getenv("ENV_FILE", "config/local.env")
    return load_dotenv(env, override=override)
