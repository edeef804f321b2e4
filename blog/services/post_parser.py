import datetime
import logging
import re
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError

from blog.exceptions import FormatError, PostReadError
from blog.models import Frontmatter, Post
from blog.services.markdown_renderer import render_markdown

logger = logging.getLogger(__name__)

DELIMITER = "---"
SUMMARY_LENGTH = 200
SUMMARY_SUFFIX = "..."

_CLOSING_DELIMITER = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_yaml_handler = YAMLHandler()


def parse_post(path: Union[str, Path]) -> Post:
    """Parse one markdown file into a Post.

    Raises PostReadError when the file cannot be read and FormatError when
    its delimiters, frontmatter or date are malformed.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PostReadError(f"not valid UTF-8: {e}", path=path) from e
    except OSError as e:
        raise PostReadError(f"could not read file: {e}", path=path) from e

    try:
        frontmatter_text, body = split_frontmatter(content)
        metadata = decode_frontmatter(frontmatter_text)
        date = parse_date(metadata.date)
    except FormatError as e:
        e.path = path
        raise

    logger.debug(f"Parsed {path.name}: {metadata.title!r} ({date})")
    return Post(
        slug=path.stem,
        title=metadata.title,
        date=date,
        tags=metadata.tags,
        summary=build_summary(body, metadata.summary),
        html_content=render_markdown(body),
    )


def split_frontmatter(content: str) -> Tuple[str, str]:
    """Return (frontmatter, body), both stripped of surrounding whitespace."""
    content = content.lstrip()
    first_line, _, rest = content.partition("\n")
    if first_line.rstrip() != DELIMITER:
        raise FormatError("missing opening delimiter")

    closing = _CLOSING_DELIMITER.search(rest)
    if closing is None:
        raise FormatError("missing closing delimiter")

    return rest[: closing.start()].strip(), rest[closing.end() :].strip()


def decode_frontmatter(text: str) -> Frontmatter:
    try:
        data = _yaml_handler.load(text)
    except yaml.YAMLError as e:
        raise FormatError(f"invalid frontmatter YAML: {e}") from e
    except ValueError as e:
        # YAML builds dates while loading, so 2024-02-30 fails here
        raise FormatError(f"invalid frontmatter value: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FormatError(
            f"frontmatter must be a mapping, got {type(data).__name__}"
        )

    try:
        return Frontmatter.model_validate(data)
    except ValidationError as e:
        raise FormatError(f"invalid frontmatter: {_describe(e)}") from e


def parse_date(value: str) -> datetime.date:
    """Parse a strict YYYY-MM-DD calendar date."""
    if not _ISO_DATE.fullmatch(value):
        raise FormatError(f"invalid date {value!r}, expected YYYY-MM-DD")
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as e:
        raise FormatError(f"invalid date {value!r}: {e}") from e


def build_summary(body: str, explicit: Optional[str] = None) -> str:
    if explicit is not None:
        return explicit
    if len(body) < SUMMARY_LENGTH:
        return body.strip()
    return body[:SUMMARY_LENGTH].strip() + SUMMARY_SUFFIX


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'frontmatter'}: {err['msg']}"
        for err in error.errors()
    )
