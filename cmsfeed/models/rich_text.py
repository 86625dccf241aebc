"""Rich text document tree."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import ContentModel

PARAGRAPH = "paragraph"
TEXT = "text"


class RichTextNode(ContentModel):
    """A block or inline node of a rich text document."""

    node_type: str = Field("", alias="nodeType", description="Node type, e.g. paragraph or text")
    value: Optional[str] = Field(None, description="Text of a text node")
    content: List["RichTextNode"] = Field(default_factory=list, description="Child nodes")
    data: Dict[str, Any] = Field(default_factory=dict, description="Node specific data")

    @property
    def is_paragraph(self) -> bool:
        return self.node_type == PARAGRAPH

    @property
    def is_text(self) -> bool:
        return self.node_type == TEXT


class RichTextDocument(RichTextNode):
    """Root node of a rich text field."""

    node_type: str = Field("document", alias="nodeType")
