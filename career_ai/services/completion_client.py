import json
import logging
import re
from typing import Any, Optional, Protocol

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from career_ai.core.config import settings
from career_ai.core.exceptions import AIKillSwitchError, InvalidAIResponse

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """Transport or protocol failure talking to the completion API."""


class CompletionClient(Protocol):
    def complete(self, system_prompt: str, user_prompt: str, temperature: float) -> str:
        ...


class GroqCompletionClient:
    """
    Chat-completions client for Groq's OpenAI-compatible endpoint.

    Always sends exactly one system and one user message to the configured
    model. Timeouts and connection errors are retried up to
    `settings.ai.max_attempts`; HTTP error statuses are not.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
    ):
        self.api_key = api_key or settings.ai.groq_api_key
        self.model_name = model_name or settings.ai.model_name
        self.base_url = base_url or settings.ai.base_url
        self.timeout = timeout or settings.ai.timeout_seconds
        self.max_attempts = max_attempts or settings.ai.max_attempts

    def complete(self, system_prompt: str, user_prompt: str, temperature: float) -> str:
        if settings.ai.kill_switch:
            logger.warning("AI Kill-switch is active. Blocking request.")
            raise AIKillSwitchError()

        if not self.api_key:
            raise CompletionError("GROQ_API_KEY is not configured. Set it in the environment.")

        payload = {
            "model": self.model_name,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
        }

        retryer = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type((requests.exceptions.Timeout, requests.exceptions.ConnectionError)),
            reraise=True,
        )

        logger.info(f"Calling AI Model: {self.model_name}")
        try:
            data = retryer(self._post, payload)
        except requests.exceptions.Timeout as e:
            logger.error("AI service timeout.")
            raise CompletionError("AI service reached timeout limit.") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            logger.error(f"AI service HTTP error: {status}")
            raise CompletionError(f"AI service returned error: {status}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"AI service request failed: {e}")
            raise CompletionError(f"AI service error: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise CompletionError("AI service returned an unexpected payload.") from e
        return (content or "").strip()

    def _post(self, payload: dict) -> dict:
        response = requests.post(
            self.base_url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            json=payload,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()


def parse_json_response(text: str) -> Any:
    """
    Parse model output as JSON.

    Falls back to the outermost {...} span when the model wraps the object
    in prose or a code fence. Raises InvalidAIResponse when nothing parses.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    json_match = re.search(r'\{.*\}', text, re.DOTALL)
    if json_match:
        try:
            return json.loads(json_match.group())
        except json.JSONDecodeError:
            pass

    logger.error(f"Failed to decode AI JSON response: {text[:500]}")
    raise InvalidAIResponse()
