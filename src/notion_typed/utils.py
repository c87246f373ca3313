"""Configuration and URL helpers."""

import os
import re
import logging
from pathlib import Path

from dotenv import load_dotenv

from notion_typed.ids import PageId

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "NOTION_API_TOKEN"

# Auto-load .env from the working directory or its parents
_env_loaded = False


def _ensure_env_loaded() -> None:
    """Load the nearest .env file if not already loaded."""
    global _env_loaded
    if _env_loaded:
        return

    current = Path.cwd().resolve()
    for parent in [current] + list(current.parents):
        env_file = parent / ".env"
        if env_file.is_file():
            # Variables already set in the environment win
            load_dotenv(env_file, override=False)
            logger.debug(f"Loaded environment from {env_file}")
            break

    _env_loaded = True


def get_notion_token() -> str:
    """Get the Notion API token from the environment.

    Automatically loads the nearest .env file if present.

    Returns:
        The NOTION_API_TOKEN environment variable value, stripped.

    Raises:
        ValueError: If NOTION_API_TOKEN is not set.
    """
    _ensure_env_loaded()

    token = os.environ.get(TOKEN_ENV_VAR, "").strip()
    if not token:
        raise ValueError(
            f"{TOKEN_ENV_VAR} environment variable not set.\n"
            "Get your token at: https://www.notion.so/my-integrations"
        )
    return token


def extract_page_id(url: str) -> PageId:
    """Extract the page ID from a Notion URL.

    Supports formats:
    - https://notion.so/workspace/Page-Title-abc123def456...
    - https://notion.so/abc123def456...
    - https://www.notion.so/workspace/abc123def456...?v=...

    Args:
        url: A Notion page URL.

    Returns:
        PageId formatted as a dashed UUID,
        e.g. PageId("2d240e6d-8f97-8077-8b8d-fd8dae6ed382").

    Raises:
        ValueError: If no page ID can be found in the URL.
    """
    # Remove query params and fragment
    path = url.split("?")[0].split("#")[0]

    last_segment = path.rstrip("/").split("/")[-1]

    # The id is the 32 hex chars at the END (titles can contain hex chars like "face")
    match = re.search(r"([a-f0-9]{32})$", last_segment.replace("-", "").lower())
    if match:
        raw_id = match.group(1)
        return PageId(f"{raw_id[:8]}-{raw_id[8:12]}-{raw_id[12:16]}-{raw_id[16:20]}-{raw_id[20:]}")

    raise ValueError(f"Could not extract page ID from URL: {url}")
