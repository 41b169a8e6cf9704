"""Tool outcomes and their flattening into the text content envelope."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

ERROR_PREFIX = "Error"


def _text_block(text: str) -> Dict[str, str]:
    return {"type": "text", "text": text}


@dataclass(frozen=True, slots=True)
class ToolSuccess:
    """Successful tool outcome carrying data; always rendered as JSON."""

    payload: Any
    indent: Optional[int] = None

    is_error = False

    def render(self) -> str:
        return json.dumps(self.payload, indent=self.indent)

    # include_error_flag is accepted so every result type shares one interface.
    def to_content(self, *, include_error_flag: bool = False) -> Dict[str, Any]:
        return {"content": [_text_block(self.render())]}


@dataclass(frozen=True, slots=True)
class ToolText:
    """Successful outcome of a local tool whose text is sent verbatim."""

    text: str

    is_error = False

    def render(self) -> str:
        return self.text

    # include_error_flag is accepted so every result type shares one interface.
    def to_content(self, *, include_error_flag: bool = False) -> Dict[str, Any]:
        return {"content": [_text_block(self.text)]}


@dataclass(frozen=True, slots=True)
class ToolFailure:
    """Failed tool outcome. Rendered text always starts with ``Error``."""

    message: str

    is_error = True

    def render(self) -> str:
        if self.message.startswith(ERROR_PREFIX):
            return self.message
        return f"{ERROR_PREFIX}: {self.message}"

    def to_content(self, *, include_error_flag: bool = False) -> Dict[str, Any]:
        content: List[Dict[str, str]] = [_text_block(self.render())]
        envelope: Dict[str, Any] = {"content": content}
        if include_error_flag:
            envelope["isError"] = True
        return envelope


ToolResult = Union[ToolSuccess, ToolText, ToolFailure]
