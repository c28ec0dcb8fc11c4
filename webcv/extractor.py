"""
PDF upload handling
– validates that the upload really is a PDF
– base64 payload for the AI endpoint
– first-page text (for text-only models) and preview image
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
"""
from __future__ import annotations
import base64, io, re, logging, warnings, pdfplumber

from webcv.errors import UploadError

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
_PDF_MAGIC = b"%PDF"
_CID_RE = re.compile(r"\(cid:\d+\)")


def validate_pdf(filename: str, data: bytes | None, mime_type: str | None = None) -> bytes:
    """Return the PDF bytes or raise UploadError."""
    if not data:
        raise UploadError("Please upload a resume first.")
    if mime_type and mime_type != PDF_MIME:
        logger.info("Rejected upload %s with type %s", filename, mime_type)
        raise UploadError("Please upload a valid PDF file.")
    if not data.startswith(_PDF_MAGIC):
        logger.info("Rejected upload %s: missing PDF header", filename)
        raise UploadError("Please upload a valid PDF file.")
    return data


def pdf_to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def first_page_text(data: bytes) -> str:
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        if not pdf.pages:
            return ""
        text = pdf.pages[0].extract_text() or ""
    return _CID_RE.sub("", text)


def first_page_image(data: bytes, resolution: int = 100):
    """PIL image of page 1, or None for a PDF without pages."""
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        if not pdf.pages:
            return None
        return pdf.pages[0].to_image(resolution=resolution).original.copy()
