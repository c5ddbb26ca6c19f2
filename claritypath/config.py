import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

# LLM — Gemini
GEMINI_API_KEY = os.getenv('GEMINI_API_KEY')
GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-2.5-flash-lite')
GEMINI_API_BASE = os.getenv('GEMINI_API_BASE', 'https://generativelanguage.googleapis.com/v1beta')
# Unset means no explicit timeout on the upstream call
GEMINI_TIMEOUT = float(os.getenv('GEMINI_TIMEOUT')) if os.getenv('GEMINI_TIMEOUT') else None

# Client helpers: base URL of a separately hosted diagnosis endpoint.
# When unset, helpers call the generation routine in-process.
CLARITY_API_URL = os.getenv('CLARITY_API_URL')

# CORS
DEFAULT_ALLOWED_ORIGINS = (
    'http://localhost:3000',
    'http://localhost:5173',
    'https://peacepilot-ai.web.app',
    'https://peacepilot-ai.web.app/',
)
ALLOWED_ORIGINS = tuple(
    o.strip() for o in os.getenv('ALLOWED_ORIGINS', ','.join(DEFAULT_ALLOWED_ORIGINS)).split(',')
    if o.strip()
)

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


@dataclass(frozen=True)
class ClarityConfig:
    """Settings handed to the generator, the app factory and the client helpers."""
    api_key: str | None = None
    model: str = 'gemini-2.5-flash-lite'
    api_base: str = 'https://generativelanguage.googleapis.com/v1beta'
    timeout: float | None = None
    api_url: str | None = None
    allowed_origins: tuple = field(default=DEFAULT_ALLOWED_ORIGINS)

    @classmethod
    def from_env(cls) -> 'ClarityConfig':
        return cls(
            api_key=GEMINI_API_KEY,
            model=GEMINI_MODEL,
            api_base=GEMINI_API_BASE,
            timeout=GEMINI_TIMEOUT,
            api_url=CLARITY_API_URL,
            allowed_origins=ALLOWED_ORIGINS or DEFAULT_ALLOWED_ORIGINS,
        )

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)
