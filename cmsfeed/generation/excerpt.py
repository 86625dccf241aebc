"""Plain text excerpts from rich text documents."""

from collections.abc import Mapping
from typing import Optional, Union

from pydantic import ValidationError

from ..models import RichTextDocument

EXCERPT_LENGTH = 300
ELLIPSIS = "..."


def extract_excerpt(
    document: Optional[Union[RichTextDocument, Mapping]],
    max_length: int = EXCERPT_LENGTH,
) -> str:
    """
    Extract a plain text excerpt from a rich text document.

    Only top-level paragraph blocks contribute text; each of their text
    nodes is followed by a single space. Lists, headings, embeds and any
    nested containers are skipped.

    The ellipsis is decided on the length of the untrimmed text, while the
    slice is taken from the trimmed text.

    Args:
        document: Rich text document, its raw JSON form, or None
        max_length: Number of characters to keep

    Returns:
        Excerpt, or an empty string when there is no document tree
    """
    if document is None:
        return ""

    if isinstance(document, Mapping):
        if not isinstance(document.get("content"), list):
            return ""
        try:
            document = RichTextDocument.model_validate(document)
        except ValidationError:
            return ""

    parts = []
    for block in document.content:
        if not block.is_paragraph:
            continue
        for node in block.content:
            if node.is_text:
                parts.append(f"{node.value or ''} ")

    text = "".join(parts)
    excerpt = text.strip()[:max_length]
    if len(text) > max_length:
        excerpt += ELLIPSIS
    return excerpt

