import logging
import re
from typing import FrozenSet, Iterable

import frontmatter
import yaml

logger = logging.getLogger(__name__)

# A "tags:" line whose values run until a "---" line, a blank line or the end
# of the text. Values may wrap onto following lines.
TAGS_PATTERN = re.compile(
    r"^tags:(?P<values>.*?)(?=^---[ \t]*$|^[ \t]*$|\Z)",
    re.MULTILINE | re.DOTALL,
)


def _normalize(values: Iterable) -> FrozenSet[str]:
    tags = set()
    for value in values:
        if value is None:
            continue
        tag = str(value).strip().lower()
        if tag:
            tags.add(tag)
    return frozenset(tags)


def _split_line_values(raw: str) -> FrozenSet[str]:
    raw = raw.strip()
    # Inline YAML list: tags: [a, b]
    if raw.startswith("[") and raw.endswith("]"):
        raw = raw[1:-1]
    return _normalize(raw.split(","))


def _front_matter_tags(text: str):
    """Return tags declared as a YAML list in a front-matter block, or None."""
    if not text.startswith("---"):
        return None
    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as e:
        logger.debug(f"Ignoring unparseable front matter: {e}")
        return None

    tags = post.metadata.get("tags")
    if isinstance(tags, (list, tuple, set)):
        return _normalize(tags)
    return None


def extract_tags(text: str) -> FrozenSet[str]:
    """
    Extract the tag set declared in a document's metadata header.

    The first line starting with ``tags:`` holds comma separated values. The
    block ends at a ``---`` line, a blank line or the end of the text. Every
    value is trimmed and lowercased; empty values are dropped. Text without
    a ``tags:`` line yields an empty set.

    A front-matter block (opened by ``---``) whose ``tags`` key is a YAML
    list is read as YAML instead.
    """
    if not text:
        return frozenset()

    # CRLF and CR line endings would hide the "---" and blank line terminators
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    yaml_tags = _front_matter_tags(text)
    if yaml_tags is not None:
        return yaml_tags

    match = TAGS_PATTERN.search(text)
    if match is None:
        return frozenset()
    return _split_line_values(match.group("values"))
