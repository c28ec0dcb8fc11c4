from __future__ import annotations

import pytest

from webcv.llm_client import LLMClient, LLMResponse


class FakeClient(LLMClient):
    """Returns a canned reply and records what it was sent."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        super().__init__(model="fake")
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, bytes]] = []

    def extract(self, prompt: str, pdf_bytes: bytes) -> LLMResponse:
        self.calls.append((prompt, pdf_bytes))
        if self.error is not None:
            raise self.error
        return LLMResponse(self.reply)


@pytest.fixture
def full_resume() -> dict:
    return {
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "phone": "+1 555 0100",
        "website": "https://example.com/grace",
        "summary": "Computer scientist and naval officer.",
        "work_experience": [
            {
                "job_title": "Rear Admiral",
                "company": "US Navy",
                "dates": "1943 - 1986",
                "responsibilities": ["Led COBOL standardisation", "Found the first bug"],
            },
            {
                "job_title": "Senior Mathematician",
                "company": "Eckert-Mauchly",
                "dates": "1949 - 1952",
                "responsibilities": ["Built the A-0 compiler"],
            },
        ],
        "education": [
            {"degree": "PhD Mathematics", "university": "Yale", "dates": "1930 - 1934"},
            {"degree": "BA Mathematics", "university": "Vassar", "dates": "1924 - 1928"},
        ],
        "skills": ["COBOL", "Compilers"],
    }


def build_pdf(pages: list[str]) -> bytes:
    """Minimal Helvetica PDF, one text line per 200x100pt page."""
    count = len(pages)
    font_id = 3 + 2 * count
    kids = " ".join(f"{3 + 2 * i} 0 R" for i in range(count))
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode(),
    ]
    for i, text in enumerate(pages):
        stream = f"BT /F1 12 Tf 10 50 Td ({text}) Tj ET".encode()
        objects.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 200 100] "
            f"/Resources << /Font << /F1 {font_id} 0 R >> >> /Contents {4 + 2 * i} 0 R >>".encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref = len(out)
    out += b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1)
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref)
    return bytes(out)


@pytest.fixture
def resume_pdf() -> bytes:
    # literal "(cid:12)" glyph artifact on page 1, escaped for a PDF string
    return build_pdf([r"Ada Lovelace \(cid:12\)", "Second page"])
