"""
Gemini generateContent client.

One POST per call, no retries. Failures are not raised: the caller gets a
Completion carrying either the completion text or the reason it has none.

  upstream_error    → transport failure, non-2xx status, or a body that is not JSON
  empty_completion  → 2xx response without candidates[0].content.parts[0].text
"""
import logging
import time
from dataclasses import dataclass

import requests

from claritypath.config import ClarityConfig
from claritypath.metrics import upstream_latency

logger = logging.getLogger(__name__)

UPSTREAM_ERROR = 'upstream_error'
EMPTY_COMPLETION = 'empty_completion'


@dataclass(frozen=True)
class Completion:
    text: str | None = None
    failure: str | None = None
    detail: str = ''

    @property
    def ok(self) -> bool:
        return self.failure is None


def build_request_body(text: str, temperature: float = 0.6, top_p: float = 0.8) -> dict:
    return {
        'contents': [
            {
                'role': 'user',
                'parts': [{'text': text}],
            },
        ],
        'generationConfig': {
            'temperature': temperature,
            'topP': top_p,
            'responseMimeType': 'application/json',
        },
    }


def extract_text(payload) -> str:
    """Pull candidates[0].content.parts[0].text out of a response, or ''."""
    try:
        return payload['candidates'][0]['content']['parts'][0].get('text') or ''
    except (KeyError, IndexError, TypeError, AttributeError):
        return ''


def generate(config: ClarityConfig, text: str) -> Completion:
    """Send a single user message to Gemini and return the completion text."""
    url = f'{config.api_base}/models/{config.model}:generateContent'

    start = time.time()
    try:
        resp = requests.post(
            url,
            params={'key': config.api_key},
            json=build_request_body(text),
            headers={'Content-Type': 'application/json', 'Cache-Control': 'no-store'},
            timeout=config.timeout,
        )
    except requests.RequestException as e:
        logger.error(f'Gemini request failed: {e}')
        return Completion(failure=UPSTREAM_ERROR, detail=str(e))
    finally:
        upstream_latency.observe(time.time() - start)

    if not resp.ok:
        logger.error(f'Gemini API error ({resp.status_code}): {resp.text}')
        return Completion(failure=UPSTREAM_ERROR, detail=f'{resp.status_code} - {resp.text}')

    try:
        payload = resp.json()
    except ValueError as e:
        logger.error(f'Gemini returned a non-JSON body: {e}')
        return Completion(failure=UPSTREAM_ERROR, detail=str(e))

    completion = extract_text(payload)
    if not completion:
        logger.error('No text in Gemini response: %s', payload)
        return Completion(failure=EMPTY_COMPLETION, detail='No text content in Gemini response')

    logger.debug('Gemini response: %d chars', len(completion))
    return Completion(text=completion)
