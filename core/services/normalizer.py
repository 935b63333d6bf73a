"""Output normalization for the utility services.

Turns whatever Gemini returned (decoded JSON or plain text) into a single
display-ready string.  Each service kind has a small frozen dataclass that
knows how to pull its fields out of a mapping and how to render itself.

Examples:
    normalize({"summary": "ok", "bullets": ["a", "b"]}, "summarize")
        -> "ok\\n\\n• a\\n• b"
    normalize({"subject": "Hi", "body": "Text"}, "email")
        -> "Subject: Hi\\n\\nText"

``normalize`` never raises: when the expected structure is missing it falls
back to a JSON dump of the value (or the raw text itself).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from .catalog import ServiceKind

logger = logging.getLogger(__name__)

BULLET = "•"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _items(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_text(v) for v in value]
    return [_text(value)]


def _has_any(data: Mapping[str, Any], keys: Tuple[str, ...]) -> bool:
    return any(data.get(k) is not None for k in keys)


def _join_sections(*sections: str) -> str:
    # Blank line between every section; trim the composed result only.
    return "\n\n".join(sections).strip()


@dataclass(frozen=True)
class SummaryOutput:
    summary: str
    bullets: Tuple[str, ...]

    keys = ("summary", "bullets")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Optional["SummaryOutput"]:
        if not _has_any(data, cls.keys):
            return None
        return cls(summary=_text(data.get("summary")), bullets=tuple(_items(data.get("bullets"))))

    def render(self) -> str:
        bullets = "\n".join(f"{BULLET} {b}" for b in self.bullets)
        return _join_sections(self.summary, bullets)


@dataclass(frozen=True)
class EmailOutput:
    subject: str
    body: str

    keys = ("subject", "body")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Optional["EmailOutput"]:
        if not _has_any(data, cls.keys):
            return None
        return cls(subject=_text(data.get("subject")), body=_text(data.get("body")))

    def render(self) -> str:
        return _join_sections(f"Subject: {self.subject}", self.body)


@dataclass(frozen=True)
class CodeExplanation:
    summary: str
    steps: Tuple[str, ...]
    complexity: str

    keys = ("summary", "steps", "complexity")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Optional["CodeExplanation"]:
        if not _has_any(data, cls.keys):
            return None
        return cls(
            summary=_text(data.get("summary")),
            steps=tuple(_items(data.get("steps"))),
            complexity=_text(data.get("complexity")),
        )

    def render(self) -> str:
        steps = "\n".join(f"{i}. {step}" for i, step in enumerate(self.steps, start=1))
        return _join_sections(self.summary, steps, f"Complexity: {self.complexity}")


@dataclass(frozen=True)
class RewriteOutput:
    rewritten: str

    keys = ("rewritten",)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Optional["RewriteOutput"]:
        if data.get("rewritten") is None:
            return None
        return cls(rewritten=_text(data["rewritten"]))

    def render(self) -> str:
        return self.rewritten.strip()


NormalizedOutput = Union[SummaryOutput, EmailOutput, CodeExplanation, RewriteOutput]

OUTPUT_TYPES: Dict[ServiceKind, Type[NormalizedOutput]] = {
    ServiceKind.SUMMARIZE: SummaryOutput,
    ServiceKind.EMAIL: EmailOutput,
    ServiceKind.EXPLAIN_CODE: CodeExplanation,
    ServiceKind.REWRITE: RewriteOutput,
}


def dump(value: Any) -> str:
    """Generic serialization used whenever structure is missing."""
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def extract(raw: Any, service: Union[ServiceKind, str]) -> Optional[NormalizedOutput]:
    """Return the structured output for ``service``, or None if absent."""
    if not isinstance(raw, Mapping):
        return None
    try:
        kind = ServiceKind(service)
    except ValueError:
        return None
    return OUTPUT_TYPES[kind].from_mapping(raw)


def normalize(raw: Any, service: Union[ServiceKind, str]) -> str:
    """Convert a raw model response into the display string for ``service``."""
    if raw is None or raw == "":
        return ""
    if isinstance(raw, str):
        return raw
    try:
        structured = extract(raw, service)
        if structured is None:
            return dump(raw)
        return structured.render()
    except Exception as e:
        logger.warning("Normalization failed for %s, falling back to dump: %s", service, e)
        return dump(raw)
