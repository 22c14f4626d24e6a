"""Output path resolution for generated images."""

import os
import re
from datetime import datetime, timezone
from typing import Optional

FILENAME_PREFIX = "dalle3"
IMAGE_EXTENSION = ".png"
MAX_SLUG_LENGTH = 50

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify_prompt(prompt: str) -> str:
    """
    Derives a filesystem-safe slug from a prompt.

    Example:
        >>> slugify_prompt("A Cat, on the Moon!")
        'a-cat-on-the-moon'
    """
    slug = _NON_ALNUM_RE.sub("-", prompt.lower()).strip("-")
    return slug[:MAX_SLUG_LENGTH]


def timestamp_for_filename(now: datetime) -> str:
    """
    Formats `now` as an ISO-8601 UTC timestamp with ':' and '.' replaced by '-'.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    iso = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    iso = iso.replace("+00:00", "Z")
    return iso.replace(":", "-").replace(".", "-")


def build_filename(prompt: str, now: datetime) -> str:
    return (
        f"{FILENAME_PREFIX}-{slugify_prompt(prompt)}-"
        f"{timestamp_for_filename(now)}{IMAGE_EXTENSION}"
    )


def resolve_output_path(
    output_path: str, prompt: str, now: Optional[datetime] = None
) -> str:
    """
    Returns the path the image should be written to.

    When `output_path` is an existing directory, or looks like one because it
    ends with a path separator, a filename is synthesized from the prompt and
    the current time. Any other value is returned unchanged.

    Touches the filesystem, so call it off the event loop.
    """
    if os.path.isdir(output_path) or output_path.endswith(("/", "\\")):
        if now is None:
            now = datetime.now(timezone.utc)
        return os.path.join(output_path, build_filename(prompt, now))
    return output_path
