"""
Client helpers for the diagnosis service.

With CLARITY_API_URL (config.api_url) set, requests go over HTTP to
{api_url}/api/diagnosis and non-2xx responses raise DiagnosisAPIError.
Without it the generation routine runs in-process and cannot fail.
"""
import logging

import requests

from claritypath.config import ClarityConfig
from claritypath.diagnosis.main_logic import run_clarity

logger = logging.getLogger(__name__)

DEFAULT_REPORT = (
    'This is a lightweight summary you can share. Focus on one next action, '
    'and check in with yourself tomorrow to review how it felt.'
)


class DiagnosisAPIError(Exception):
    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def _post_diagnosis(api_url: str, prompt: str) -> requests.Response:
    try:
        return requests.post(f"{api_url.rstrip('/')}/api/diagnosis", json={'prompt': prompt})
    except requests.RequestException as e:
        logger.error(f'Fetch error: {e}')
        raise


def get_clarity_insights(prompt: str, config: ClarityConfig | None = None) -> dict:
    """Return a ClarityEntry as JSON-shaped dict (camelCase keys)."""
    config = config or ClarityConfig.from_env()

    if config.api_url:
        resp = _post_diagnosis(config.api_url, prompt)
        if not resp.ok:
            body = resp.text or 'Unknown error'
            raise DiagnosisAPIError(f'API error ({resp.status_code}): {body}', resp.status_code, body)
        return resp.json()

    return run_clarity(prompt, config).to_json()


def generate_report(prompt: str, config: ClarityConfig | None = None) -> dict:
    """Entry fields plus a shareable 'report' string."""
    config = config or ClarityConfig.from_env()

    if config.api_url:
        resp = _post_diagnosis(config.api_url, prompt)
        if not resp.ok:
            body = resp.text or 'Unknown error'
            raise DiagnosisAPIError(
                f'Unable to generate report: {resp.status_code} {body}', resp.status_code, body
            )
        data = resp.json()
    else:
        data = run_clarity(prompt, config).to_json()

    return {**data, 'report': data.get('summary') or DEFAULT_REPORT}
