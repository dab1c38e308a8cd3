"""Base renderer protocol and types."""

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Supported output formats."""

    TERMINAL = "terminal"
    JSON = "json"


class RenderContext(BaseModel):
    """Context for rendering operations."""

    model_config = {"frozen": True}

    format: OutputFormat = Field(default=OutputFormat.TERMINAL, description="Output format")
    color: bool = Field(default=True, description="Enable syntax highlighting (terminal only)")


@runtime_checkable
class Renderer(Protocol):
    """Protocol for output renderers.

    Renderers turn diff reports and snapshots into human-readable or
    machine-readable text.
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        ...

    def render(self, data: Any, context: RenderContext) -> str:
        """Render data to a string."""
        ...


class BaseRenderer:
    """Base class for renderers.

    Subclasses implement the ``format`` property and ``render``.
    """

    def render(self, data: Any, context: RenderContext) -> str:
        """Render data to a string. Must be implemented by subclasses."""
        raise NotImplementedError
