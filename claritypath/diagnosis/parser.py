"""
Pull a JSON object out of model output that may carry markdown fences or prose.
"""
import json
import logging
import re

logger = logging.getLogger(__name__)

FENCED_JSON = re.compile(r'```(?:json)?\s*(\{[\s\S]*?\})\s*```')
BARE_JSON = re.compile(r'\{[\s\S]*\}')


def coerce_json(content: str | None) -> dict | None:
    """
    Return the JSON object embedded in content, or None.

    A fenced ```json block wins; otherwise the span from the first '{' to the
    last '}' is tried. Fields are not validated.
    """
    if not content:
        return None

    match = FENCED_JSON.search(content)
    if match:
        try:
            return json.loads(match.group(1))
        except ValueError as e:
            logger.warning(f'Failed to parse JSON from code block: {e}')

    match = BARE_JSON.search(content)
    if not match:
        return None
    try:
        return json.loads(match.group(0))
    except ValueError as e:
        logger.warning(f'Failed to parse JSON: {e}')
        return None
