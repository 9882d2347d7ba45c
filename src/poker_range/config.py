"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Parsing
# Lenient parsing ignores trailing text that is not a valid term;
# strict parsing raises RangeSyntaxError instead.
STRICT_PARSE = _env_flag("POKER_RANGE_STRICT", False)
