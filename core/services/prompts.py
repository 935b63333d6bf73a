"""Prompt templates for the utility services.

Every prompt asks Gemini for a JSON object with a fixed set of keys; those
keys are what ``normalizer`` later extracts.
"""

from __future__ import annotations

from typing import Callable, Dict, NamedTuple

from .catalog import (
    EmailRequest,
    ExplainCodeRequest,
    RewriteRequest,
    ServiceKind,
    ServiceRequest,
    SummarizeRequest,
)


class GenerationSettings(NamedTuple):
    max_tokens: int
    temperature: float


GENERATION_SETTINGS: Dict[ServiceKind, GenerationSettings] = {
    ServiceKind.SUMMARIZE: GenerationSettings(max_tokens=300, temperature=0.1),
    ServiceKind.EMAIL: GenerationSettings(max_tokens=300, temperature=0.2),
    ServiceKind.EXPLAIN_CODE: GenerationSettings(max_tokens=600, temperature=0.0),
    ServiceKind.REWRITE: GenerationSettings(max_tokens=300, temperature=0.3),
}


def summarize_prompt(request: SummarizeRequest) -> str:
    return (
        "Summarize the following text in 4 short bullet points. "
        "Keep them concise and focus on key facts. "
        'Output as JSON with keys: "bullets" (array of strings) and "summary" (one-liner).\n'
        "---\n"
        "Text:\n"
        f"{request.text}\n"
    )


def email_prompt(request: EmailRequest) -> str:
    return (
        "Write a professional, concise email using the details below.\n"
        'Output JSON exactly with keys: "subject" and "body".\n'
        "Do not include any explanation outside the JSON.\n"
        "---\n"
        f"Recipient role: {request.recipient_role or 'colleague'}\n"
        f"Tone: {request.tone or 'professional'}\n"
        f"Purpose: {request.purpose or 'requesting meeting'}\n"
        f"Details: {request.details or ''}\n"
    )


def explain_code_prompt(request: ExplainCodeRequest) -> str:
    return (
        "Explain the following code for a beginner. Produce a JSON object with keys:\n"
        '- "summary": one-paragraph plain-language summary\n'
        '- "steps": array of numbered-step strings that explain key parts\n'
        '- "complexity": short note on time/space complexity (if known) or "unknown".\n'
        "Do not add anything outside the JSON.\n"
        "---\n"
        "Code:\n"
        f"{request.code}\n"
    )


def rewrite_prompt(request: RewriteRequest) -> str:
    return (
        f'Rewrite the following text to have a "{request.tone}" tone.\n'
        'Return JSON with key "rewritten".\n'
        "Do not add anything else.\n"
        "---\n"
        "Original:\n"
        f"{request.text}\n"
    )


_BUILDERS: Dict[ServiceKind, Callable] = {
    ServiceKind.SUMMARIZE: summarize_prompt,
    ServiceKind.EMAIL: email_prompt,
    ServiceKind.EXPLAIN_CODE: explain_code_prompt,
    ServiceKind.REWRITE: rewrite_prompt,
}


def build_prompt(request: ServiceRequest) -> str:
    """Render the prompt for ``request`` according to its service kind."""
    return _BUILDERS[request.kind](request)
