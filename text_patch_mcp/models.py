"""Pydantic models for the text-patch MCP system.

This module contains the structured response records returned by the file
tools and the ToolResult wrapper used when dispatching tool calls.
"""

from typing import Annotated
from typing import Any
from typing import Literal
from typing import Union

from pydantic import BaseModel
from pydantic import Field
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic import model_validator

from .utils.frontmatter import parse_frontmatter
from .utils.frontmatter import write_frontmatter

# === Response Records ===


class ResponseRecord(BaseModel):
    """Common behaviour of structured tool responses.

    Keys that are not declared fields are collected into ``metadata`` on
    input and flattened back into the top level on output.
    """

    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_metadata(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = set(cls.model_fields)
        extra = {key: value for key, value in data.items() if key not in known}
        if not extra:
            return data
        collected = {key: value for key, value in data.items() if key in known}
        collected["metadata"] = {**collected.get("metadata", {}), **extra}
        return collected

    def with_metadata(self, key: str, value: Any) -> "ResponseRecord":
        """Add a metadata entry and return the record for chaining."""
        self.metadata[key] = value
        return self

    def to_front_matter_dict(self) -> dict[str, Any]:
        data = self.model_dump(exclude={"metadata"}, exclude_none=True)
        data.update(self.metadata)
        return data

    def to_front_matter(self, content: str) -> str:
        """Render the record as YAML front matter followed by ``content``."""
        return write_frontmatter(content, self.to_front_matter_dict())


class FileReadData(ResponseRecord):
    """Response of a file read."""

    type: Literal["file_read"] = "file_read"
    path: str
    total_lines: int | None = None


class FileWriteData(ResponseRecord):
    """Response of a file write."""

    type: Literal["file_write"] = "file_write"
    path: str
    bytes_written: int | None = None
    was_update: bool | None = None


class PatchData(ResponseRecord):
    """Response of a patch applied to a file."""

    type: Literal["patch"] = "patch"
    path: str
    total_chars: int | None = None
    warning: str | None = None  # Syntax issue found in the patched content


class GenericData(ResponseRecord):
    """Response of tools without specific structured data."""

    type: Literal["generic"] = "generic"


ToolResponseData = Annotated[
    Union[FileReadData, FileWriteData, PatchData, GenericData],
    Field(discriminator="type"),
]

_response_adapter: TypeAdapter[ToolResponseData] = TypeAdapter(ToolResponseData)


def parse_front_matter(text: str) -> tuple[ResponseRecord | None, str]:
    """Parse a front matter document back into a response record and content.

    Returns ``(None, content)`` when the block is missing or does not describe
    a known record type.
    """
    metadata, content = parse_frontmatter(text)
    if metadata is None:
        return None, content
    try:
        return _response_adapter.validate_python(metadata), content
    except PydanticValidationError:
        return None, content


# === Tool Call Results ===


class ToolResult(BaseModel):
    """Outcome of a dispatched tool call."""

    name: str
    call_id: str | None = None
    content: str = ""
    is_error: bool = False
    data: ResponseRecord | None = Field(default=None, exclude=True)

    def success(self, content: str) -> "ToolResult":
        self.content = content
        self.is_error = False
        return self

    def failure(self, error: BaseException) -> "ToolResult":
        """Record a failure, listing every exception in the cause chain."""
        output = "\nERROR:\n"
        cause: BaseException | None = error
        while cause is not None:
            output += f"Caused by: {cause}\n"
            cause = cause.__cause__
        self.content = output
        self.is_error = True
        return self
