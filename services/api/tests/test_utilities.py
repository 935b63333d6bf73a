"""Utility service endpoint tests: success envelope, 400 and 502 paths."""

import pytest

from core.providers.base import LLMError, LLMTimeoutError


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------

def test_summarize(client, upstream):
    upstream.reply = '```json\n{"summary": "ok", "bullets": ["a", "b"]}\n```'
    resp = client.post("/api/summarize", json={"text": "Long article..."})
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["service"] == "summarize"
    assert data["input"] == {"text": "Long article..."}
    assert data["output"] == "ok\n\n• a\n• b"
    assert data["data"] == {"summary": "ok", "bullets": ["a", "b"]}
    assert "Long article..." in upstream.prompts[0]


def test_email(client, upstream):
    upstream.reply = '{"subject": "Hi", "body": "Text"}'
    resp = client.post(
        "/api/email",
        json={"recipientRole": "manager", "tone": "polite", "purpose": "request", "details": "Need a day off"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["output"] == "Subject: Hi\n\nText"
    assert data["input"] == {
        "recipientRole": "manager",
        "tone": "polite",
        "purpose": "request",
        "details": "Need a day off",
    }
    assert "Recipient role: manager" in upstream.prompts[0]


def test_explain_code_truncates_echo(client, upstream):
    upstream.reply = '{"summary": "Loops.", "steps": ["a", "b"], "complexity": "O(n)"}'
    code = "for i in range(10):\n    print(i)\n" * 30
    resp = client.post("/api/explain-code", json={"code": code})
    assert resp.status_code == 200
    data = resp.json()
    assert data["output"] == "Loops.\n\n1. a\n2. b\n\nComplexity: O(n)"
    assert data["input"]["code"].endswith("...[truncated]")
    assert len(data["input"]["code"]) == 500 + len("...[truncated]")


def test_rewrite(client, upstream):
    upstream.reply = '{"rewritten": "Good afternoon."}'
    resp = client.post("/api/rewrite", json={"text": "yo", "tone": "formal"})
    assert resp.status_code == 200
    assert resp.json()["output"] == "Good afternoon."
    assert resp.json()["input"] == {"tone": "formal", "text": "yo"}


def test_unstructured_reply_still_succeeds(client, upstream):
    upstream.reply = "I could not produce JSON, but here is a summary."
    resp = client.post("/api/summarize", json={"text": "t"})
    assert resp.status_code == 200
    assert resp.json()["output"] == "I could not produce JSON, but here is a summary."


def test_unexpected_shape_falls_back_to_dump(client, upstream):
    upstream.reply = '{"headline": "x"}'
    resp = client.post("/api/summarize", json={"text": "t"})
    assert resp.status_code == 200
    assert resp.json()["output"] == '{\n  "headline": "x"\n}'


# ---------------------------------------------------------------------------
# 400 — validation, upstream never contacted
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "path,body,message",
    [
        ("/api/summarize", {}, "text is required"),
        ("/api/email", {"tone": "polite"}, "details is required"),
        ("/api/explain-code", {"code": ""}, "code is required"),
        ("/api/rewrite", {"text": "hello"}, "tone is required"),
        ("/api/rewrite", {"tone": "formal"}, "text is required"),
    ],
)
def test_missing_required_field(client, upstream, path, body, message):
    resp = client.post(path, json=body)
    assert resp.status_code == 400
    data = resp.json()
    assert data["success"] is False
    assert data["error"] == message
    assert upstream.prompts == []


def test_no_body(client, upstream):
    resp = client.post("/api/summarize")
    assert resp.status_code == 400
    assert resp.json()["error"] == "text is required"
    assert upstream.prompts == []


def test_body_not_an_object(client, upstream):
    resp = client.post("/api/rewrite", json=["text", "tone"])
    assert resp.status_code == 400
    assert resp.json()["service"] == "rewrite"
    assert upstream.prompts == []


def test_malformed_json(client, upstream):
    resp = client.post(
        "/api/email",
        content=b'{"details": ',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert resp.json()["service"] == "email"
    assert upstream.prompts == []


def test_wrong_field_type(client, upstream):
    resp = client.post("/api/summarize", json={"text": 42})
    assert resp.status_code == 400
    assert resp.json()["error"] == "text must be a string"


# ---------------------------------------------------------------------------
# 502 — upstream failures
# ---------------------------------------------------------------------------

def test_upstream_http_error(client, upstream):
    upstream.error = LLMError("API key not valid", provider="google", status=400)
    resp = client.post("/api/summarize", json={"text": "t"})
    assert resp.status_code == 502
    assert resp.json() == {
        "success": False,
        "service": "summarize",
        "error": {"message": "API key not valid", "status": 400},
    }


def test_upstream_timeout(client, upstream):
    upstream.error = LLMTimeoutError("Gemini call timed out after 30s")
    resp = client.post("/api/explain-code", json={"code": "x = 1"})
    assert resp.status_code == 502
    data = resp.json()
    assert data["service"] == "explain-code"
    assert data["error"]["message"] == "Gemini call timed out after 30s"
    assert "status" not in data["error"]


def test_unexpected_upstream_exception(client, upstream):
    upstream.error = RuntimeError("connection reset by peer")
    resp = client.post("/api/rewrite", json={"text": "t", "tone": "calm"})
    assert resp.status_code == 502
    assert resp.json()["error"]["message"] == "connection reset by peer"
