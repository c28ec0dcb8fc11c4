"""
LLM-based résumé profile extraction.

• Sends the PDF plus an instruction prompt to the configured provider
• Strips ```json fences from the reply and parses it as JSON
• Runs normalize() so the caller always gets a complete Profile
"""

from __future__ import annotations
import json, logging, re, textwrap

from webcv.cleaner import normalize
from webcv.errors import ExtractionError, ResponseParseError
from webcv.llm_client import LLMClient, get_llm_client
from webcv.schema_profile import PROFILE_SCHEMA, Profile

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = textwrap.dedent(
    f"""\
Extract the following information from this resume and return ONLY a valid JSON object with this exact structure:

{json.dumps(PROFILE_SCHEMA, indent=2)}

Ensure all arrays are properly formatted and all fields are strings. Do not include any text before or after the JSON object."""
)

_FENCE_RE = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text or "").strip()


def parse_profile_response(text: str) -> Profile:
    """Fence-strip, parse and normalise a model reply.

    Raises ResponseParseError if what is left is not JSON; any JSON
    value, however malformed, is handed to normalize().
    """
    cleaned = strip_code_fences(text)
    logger.debug("Cleaned JSON string: %s", cleaned)
    try:
        data = json.loads(cleaned)
    except (ValueError, RecursionError) as exc:  # JSONDecodeError, digit limit, nesting depth
        logger.warning("Failed to parse AI response: %s", exc)
        raise ResponseParseError(
            "The AI response could not be parsed. Please try again with a different resume.",
            raw_text=text,
        ) from exc
    return normalize(data)


def extract_profile(pdf_bytes: bytes, client: LLMClient | None = None) -> Profile:
    client = client or get_llm_client()
    try:
        rsp = client.extract(EXTRACTION_PROMPT, pdf_bytes)
    except Exception as exc:
        logger.exception("AI request failed")
        raise ExtractionError(
            f"An error occurred while generating the profile: {exc}"
        ) from exc

    text = (rsp.message.content or "").strip()
    logger.debug("Raw AI response: %s", text)
    if not text:
        raise ExtractionError("Could not extract information from the resume. Please try again.")
    return parse_profile_response(text)
