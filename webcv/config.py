"""
Configuration settings for the webcv application.

This file contains configuration for the supported LLM providers and models.
You can easily switch between providers by setting LLM_PROVIDER in .env.
API keys are read here but only checked when a client is built.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os

# LLM Provider Configuration
# Set to "gemini", "openai" or "ollama"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini").lower()

# Model Configuration
# All providers must accept a PDF (or, for Ollama, its first-page text).
DEFAULT_MODEL = {
    "gemini": "gemini-2.0-flash",
    "openai": "gpt-4o-mini",
    "ollama": "llama3.1:8b",
}
LLM_MODEL = os.getenv("LLM_MODEL")

# Gemini Configuration
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")

# OpenAI Configuration
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

MODEL_PARAMS = {
    "temperature": 0.2,
    "max_tokens": 4096,
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_model_for_provider(provider: str = None) -> str:
    """Get the model for the specified provider (LLM_MODEL wins if set)."""
    if LLM_MODEL:
        return LLM_MODEL
    provider = provider or LLM_PROVIDER
    return DEFAULT_MODEL.get(provider, DEFAULT_MODEL["gemini"])
