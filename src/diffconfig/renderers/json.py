"""JSON renderer for diff reports and snapshots."""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from diffconfig.models.diff import DiffReport
from diffconfig.renderers.base import BaseRenderer, OutputFormat, RenderContext


class JSONRenderer(BaseRenderer):
    """Renderer for JSON output format.

    Diff reports are emitted with each change's path as a list of keys and
    positions, plus a ``path_str`` for display. Setting values are written
    as they are, so non-finite floats appear as ``NaN``/``Infinity`` the way
    Python's json module writes them.

    Example:
        renderer = JSONRenderer()
        json_str = renderer.render(diff_report, RenderContext(format=OutputFormat.JSON))
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.JSON

    def render(self, data: Any, context: RenderContext) -> str:
        """Render data to a JSON string."""
        if isinstance(data, DiffReport):
            dict_data = data.model_dump()
            for entry, record in zip(dict_data["entries"], data.entries):
                entry["path_str"] = record.path_str
        elif isinstance(data, BaseModel):
            dict_data = data.model_dump(mode="json")
        else:
            dict_data = data

        return json.dumps(
            dict_data,
            indent=2,
            default=self._json_serializer,
            ensure_ascii=False,
        )

    @staticmethod
    def _json_serializer(obj: Any) -> Any:
        """Custom JSON serializer for non-standard types."""
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, Path):
            return str(obj)
        if isinstance(obj, tuple):
            return list(obj)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
