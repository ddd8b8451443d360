"""
Client for the AI reading endpoint.

The endpoint takes {"prompt": "..."} and answers {"result": "<markdown>"}.
One request per reading, no retries.
"""

import logging
from typing import Optional

import httpx

from celestial.config import Settings
from celestial.errors import OracleError

logger = logging.getLogger(__name__)


def _extract_result(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError as e:
        raise OracleError(f"Reading endpoint returned non-JSON body: {e}") from e

    result = payload.get("result") if isinstance(payload, dict) else None
    if not isinstance(result, str) or not result.strip():
        raise OracleError("Invalid response: no reading in 'result'")
    return result


def ask_oracle(prompt: str, settings: Optional[Settings] = None,
               client: Optional[httpx.Client] = None) -> str:
    """
    Send the prompt and return the markdown reading.

    Args:
        prompt: full astrologer prompt
        settings: endpoint URL and timeout (defaults from the environment)
        client: optional httpx.Client to reuse (tests pass a mock transport)

    Raises:
        OracleError: on transport failure, non-2xx status or a response
            without a usable 'result'.
    """
    settings = settings or Settings.from_env()
    headers = {"Content-Type": "application/json"}

    logger.info("Requesting reading from %s", settings.oracle_url)
    try:
        if client is None:
            with httpx.Client(timeout=settings.oracle_timeout) as own_client:
                response = own_client.post(settings.oracle_url, json={"prompt": prompt},
                                           headers=headers)
        else:
            response = client.post(settings.oracle_url, json={"prompt": prompt},
                                   headers=headers, timeout=settings.oracle_timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise OracleError(f"Reading endpoint returned status {e.response.status_code}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise OracleError(f"Reading endpoint unreachable: {e}") from e

    return _extract_result(response)
