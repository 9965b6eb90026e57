"""Pytest fixtures and shared test doubles.

Fixtures:
    - pdf_dir: Temporary ``pdf`` directory inside a temporary working directory
    - config: Config pointing at that directory
    - fake_session: Stand-in for requests.Session that records outbound requests
    - interaction: Scripted UserInteraction
    - completion_body: Factory for well-formed response bodies
"""

import io
import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional

import PyPDF2
import pytest

from pdf_reviewer.config import Config
from pdf_reviewer.utils.console import UserInteraction


def make_completion_body(content: str = "Test summary", choices: Optional[int] = 1, **overrides) -> str:
    """Build a chat-completion JSON body with ``choices`` copies of ``content``."""
    body: Dict[str, Any] = {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "gpt-3.5-turbo-0301",
        "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
        "choices": [
            {"message": {"role": "assistant", "content": content}, "finish_reason": "stop", "index": i}
            for i in range(choices or 0)
        ],
    }
    body.update(overrides)
    return json.dumps(body)


def make_blank_pdf(pages: int = 1) -> bytes:
    """Return the bytes of a PDF with ``pages`` empty pages."""
    writer = PyPDF2.PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=72, height=72)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def make_text_pdf(page_texts: List[str]) -> bytes:
    """Return the bytes of a PDF with one Helvetica text line per page.

    An empty string gives a page without any content stream.
    """
    font_id = 3
    objects = {font_id: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>"}
    page_ids = []
    next_id = 4
    for text in page_texts:
        page_id = next_id
        next_id += 1
        page_ids.append(page_id)
        contents = b""
        if text:
            stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
            objects[next_id] = b"<< /Length %d >>\nstream\n%s\nendstream" % (len(stream), stream)
            contents = b" /Contents %d 0 R" % next_id
            next_id += 1
        objects[page_id] = (
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792]"
            b" /Resources << /Font << /F1 %d 0 R >> >>%s >>" % (font_id, contents)
        )
    kids = b" ".join(b"%d 0 R" % page_id for page_id in page_ids)
    objects[1] = b"<< /Type /Catalog /Pages 2 0 R >>"
    objects[2] = b"<< /Type /Pages /Kids [%s] /Count %d >>" % (kids, len(page_ids))

    buffer = io.BytesIO()
    buffer.write(b"%PDF-1.4\n")
    offsets = {}
    for obj_id in sorted(objects):
        offsets[obj_id] = buffer.tell()
        buffer.write(b"%d 0 obj\n%s\nendobj\n" % (obj_id, objects[obj_id]))
    xref_offset = buffer.tell()
    size = max(objects) + 1
    buffer.write(b"xref\n0 %d\n0000000000 65535 f \n" % size)
    for obj_id in range(1, size):
        buffer.write(b"%010d 00000 n \n" % offsets[obj_id])
    buffer.write(b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_offset))
    return buffer.getvalue()


class TtyStream(io.StringIO):
    """StringIO that reports itself as a terminal."""

    def isatty(self) -> bool:
        return True


class FakeResponse:
    """Minimal requests.Response stand-in."""

    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class FakeSession:
    """Records POSTs and answers them from a queue of responses or exceptions."""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url, headers=None, json=None, timeout=None):
        self.requests.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        outcome = self.responses.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


class ScriptedInteraction(UserInteraction):
    """UserInteraction that returns a preset choice and records what it was shown."""

    def __init__(self, choice: Optional[int] = None):
        self.choice = choice
        self.prompts: List[str] = []
        self.offered: List[List[str]] = []
        self.progress_messages: List[str] = []

    def select_one(self, prompt: str, items: List[str], default: int = 0) -> int:
        self.prompts.append(prompt)
        self.offered.append(list(items))
        return default if self.choice is None else self.choice

    @contextmanager
    def progress(self, message: str):
        self.progress_messages.append(message)
        yield


@pytest.fixture
def pdf_dir(tmp_path: Path) -> Path:
    """Return an empty ``pdf`` directory under a temporary working directory."""
    directory = tmp_path / "pdf"
    directory.mkdir()
    return directory


@pytest.fixture
def config(pdf_dir: Path) -> Config:
    return Config(api_key="test-key", pdf_dir=pdf_dir)


@pytest.fixture
def interaction() -> ScriptedInteraction:
    return ScriptedInteraction()


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def completion_body():
    return make_completion_body
