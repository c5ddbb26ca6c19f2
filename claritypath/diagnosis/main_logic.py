"""
Clarity generation core logic. Framework-agnostic, called by main.py and the client helpers.
"""
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from claritypath import llm_client
from claritypath.config import ClarityConfig
from claritypath.diagnosis.fallback import fallback_fields
from claritypath.diagnosis.models import ClarityEntry
from claritypath.diagnosis.parser import coerce_json
from claritypath.diagnosis.prompts import build_clarity_prompt
from claritypath.metrics import fallback_total, generation_total

logger = logging.getLogger(__name__)

CONTENT_FIELDS = ('summary', 'feelings', 'actionPlan', 'reflectionPrompts')


class FallbackReason(str, Enum):
    NO_CREDENTIAL = 'no_credential'
    UPSTREAM_ERROR = llm_client.UPSTREAM_ERROR
    EMPTY_COMPLETION = llm_client.EMPTY_COMPLETION
    PARSE_FAILURE = 'parse_failure'


@dataclass(frozen=True)
class GenerationOutcome:
    entry: ClarityEntry
    fallback_reason: FallbackReason | None = None
    # Content fields that were filled from the fallback record
    fallback_fields: tuple = field(default_factory=tuple)

    @property
    def is_live(self) -> bool:
        return self.fallback_reason is None


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _usable(key: str, value) -> bool:
    if key == 'summary':
        return isinstance(value, str) and bool(value.strip())
    return isinstance(value, list) and bool(value) and all(isinstance(v, str) for v in value)


def merge_with_fallback(parsed: dict | None) -> tuple[dict, tuple]:
    """
    Overlay parsed content on the fallback record, field by field.

    Returns the merged content and the names of the fields that fell back.
    """
    merged = fallback_fields()
    missing = []
    parsed = parsed if isinstance(parsed, dict) else {}
    for key in CONTENT_FIELDS:
        value = parsed.get(key)
        if _usable(key, value):
            merged[key] = value
        else:
            missing.append(key)
    return merged, tuple(missing)


class ClarityGenerator:
    """Turns a prompt into a ClarityEntry. run() never raises."""

    def __init__(self, config: ClarityConfig | None = None):
        self.config = config or ClarityConfig.from_env()

    def generate(self, prompt: str) -> GenerationOutcome:
        entry_id = str(uuid.uuid4())
        created_at = _timestamp()

        if not self.config.has_credential:
            logger.warning('GEMINI_API_KEY not configured. Using fallback response.')
            return self._fallback(prompt, entry_id, created_at, FallbackReason.NO_CREDENTIAL)

        completion = llm_client.generate(self.config, build_clarity_prompt(prompt))
        if not completion.ok:
            logger.error(f'Gemini generation failed ({completion.failure}): {completion.detail}')
            return self._fallback(prompt, entry_id, created_at, FallbackReason(completion.failure))

        parsed = coerce_json(completion.text)
        content, missing = merge_with_fallback(parsed)

        reason = None
        if parsed is None or 'summary' in missing:
            logger.warning(f'Failed to parse JSON from Gemini response. Raw text: {completion.text}')
            logger.warning(f'Parsed result: {parsed}')
            reason = FallbackReason.PARSE_FAILURE
        elif missing:
            logger.info(f'Gemini response missing {", ".join(missing)}; using fallback values')

        return self._outcome(prompt, entry_id, created_at, content, reason, missing)

    def run(self, prompt: str) -> ClarityEntry:
        try:
            return self.generate(prompt).entry
        except Exception:
            logger.exception('Unexpected error during generation. Using fallback response.')
            return self._fallback(prompt, str(uuid.uuid4()), _timestamp(), FallbackReason.UPSTREAM_ERROR).entry

    def _fallback(self, prompt, entry_id, created_at, reason) -> GenerationOutcome:
        return self._outcome(prompt, entry_id, created_at, fallback_fields(), reason, CONTENT_FIELDS)

    def _outcome(self, prompt, entry_id, created_at, content, reason, missing) -> GenerationOutcome:
        generation_total.labels(outcome='fallback' if reason else 'live').inc()
        if reason:
            fallback_total.labels(reason=reason.value).inc()
        entry = ClarityEntry(id=entry_id, prompt=prompt, created_at=created_at, **content)
        return GenerationOutcome(entry=entry, fallback_reason=reason, fallback_fields=tuple(missing))


def run_clarity(prompt: str, config: ClarityConfig | None = None) -> ClarityEntry:
    """Generate a complete entry for prompt; falls back to canned content on any failure."""
    return ClarityGenerator(config).run(prompt)
