"""
LLM client abstraction layer to support multiple providers.

Every client takes the extraction prompt plus the raw PDF bytes and
returns the model's free text.  Gemini and OpenAI read the PDF itself
(sent base64-encoded); local Ollama models only get the first page's text.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod

from webcv import config
from webcv.extractor import PDF_MIME, first_page_text, pdf_to_base64

try:
    from google import genai
    from google.genai import types as genai_types
except ImportError:
    genai = None
    genai_types = None

try:
    from openai import OpenAI
except ImportError:
    OpenAI = None

try:
    from ollama import Client as OllamaHTTPClient
except ImportError:
    OllamaHTTPClient = None

logger = logging.getLogger(__name__)


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: str):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: str):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    def __init__(self, model: str | None = None):
        self.model = model

    @abstractmethod
    def extract(self, prompt: str, pdf_bytes: bytes) -> LLMResponse:
        """Send the prompt and the PDF to the provider."""
        pass


class GeminiClient(LLMClient):
    """Google Gemini client implementation."""

    def __init__(self, api_key: str | None = None, model: str | None = None):
        if genai is None:
            raise ImportError("google-genai package is required for GeminiClient")
        api_key = api_key or config.GEMINI_API_KEY
        if not api_key:
            raise ValueError(
                "API key not configured. Please add your Google Gemini API key "
                "(GEMINI_API_KEY) to the environment variables."
            )
        super().__init__(model or config.get_model_for_provider("gemini"))
        self.client = genai.Client(api_key=api_key)

    def extract(self, prompt: str, pdf_bytes: bytes) -> LLMResponse:
        response = self.client.models.generate_content(
            model=self.model,
            contents=[
                prompt,
                genai_types.Part.from_bytes(data=pdf_bytes, mime_type=PDF_MIME),
            ],
            config=genai_types.GenerateContentConfig(
                temperature=config.MODEL_PARAMS["temperature"],
                max_output_tokens=config.MODEL_PARAMS["max_tokens"],
            ),
        )
        return LLMResponse(response.text or "")


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None, model: str | None = None):
        if OpenAI is None:
            raise ImportError("openai package is required for OpenAIClient")
        api_key = api_key or config.OPENAI_API_KEY
        if not api_key:
            raise ValueError(
                "API key not configured. Set OPENAI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        super().__init__(model or config.get_model_for_provider("openai"))
        self.client = OpenAI(api_key=api_key)

    def extract(self, prompt: str, pdf_bytes: bytes) -> LLMResponse:
        file_part = {
            "type": "file",
            "file": {
                "filename": "resume.pdf",
                "file_data": f"data:{PDF_MIME};base64,{pdf_to_base64(pdf_bytes)}",
            },
        }
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": [{"type": "text", "text": prompt}, file_part]}],
            temperature=config.MODEL_PARAMS["temperature"],
            max_tokens=config.MODEL_PARAMS["max_tokens"],
        )
        return LLMResponse(response.choices[0].message.content or "")


class OllamaClient(LLMClient):
    """Ollama client implementation (text only)."""

    def __init__(self, host: str | None = None, model: str | None = None):
        if OllamaHTTPClient is None:
            raise ImportError("ollama package is required for OllamaClient")
        super().__init__(model or config.get_model_for_provider("ollama"))
        self.client = OllamaHTTPClient(host=host or config.OLLAMA_BASE_URL)

    def extract(self, prompt: str, pdf_bytes: bytes) -> LLMResponse:
        resume_text = first_page_text(pdf_bytes)
        logger.debug("Sending %d characters of resume text to Ollama", len(resume_text))
        response = self.client.chat(
            model=self.model,
            messages=[{"role": "user", "content": f"{prompt}\n\nResume:\n{resume_text}"}],
            options={"temperature": config.MODEL_PARAMS["temperature"]},
        )
        return LLMResponse(response.message.content or "")


_CLIENTS = {
    "gemini": GeminiClient,
    "openai": OpenAIClient,
    "ollama": OllamaClient,
}


def get_llm_client(provider: str | None = None) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    provider = (provider or config.LLM_PROVIDER).lower()
    try:
        client_cls = _CLIENTS[provider]
    except KeyError:
        raise ValueError(f"Unsupported LLM provider: {provider}") from None
    logger.info("Using %s provider", provider)
    return client_cls()
