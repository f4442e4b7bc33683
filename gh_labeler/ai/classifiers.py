"""LLM classifiers that turn issue text into category lists.

Each provider gets one concrete ``Classifier`` subclass. The provider is
chosen once at startup through ``create_classifier`` and every item of the
run is classified by the same instance.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any

import httpx
import openai
from openai import OpenAI

from .prompts import SYSTEM_PROMPT, build_classification_prompt

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 15.0

_FENCE_PATTERN = re.compile(r"```(json)?", re.IGNORECASE)


def strip_code_fence(reply: str) -> str:
    """Remove markdown code fence markers wrapping a reply."""
    reply = reply.strip()
    if reply.startswith("```"):
        reply = _FENCE_PATTERN.sub("", reply).strip()
    return reply


def parse_categories(
    reply: str | None, provider: str, log: logging.Logger | None = None
) -> list[str]:
    """Parse a classifier reply into a list of category names.

    Returns an empty list when the reply is empty, is not JSON or is not a
    JSON array. Non-string members of the array are ignored.
    """
    log = log or logger
    if not reply or not reply.strip():
        log.warning("No response content from %s.", provider)
        return []

    cleaned = strip_code_fence(reply)
    try:
        categories = json.loads(cleaned)
    except json.JSONDecodeError:
        log.warning("%s returned invalid JSON after cleanup: %s", provider, cleaned)
        return []

    if not isinstance(categories, list):
        log.warning("%s returned non-array data: %s", provider, cleaned)
        return []

    return [category for category in categories if isinstance(category, str)]


class Classifier(ABC):
    """Best-effort classification of item text through an LLM provider."""

    provider: str = ""
    default_model: str = ""
    api_key_env: str = ""

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
        log: logging.Logger | None = None,
    ):
        if not api_key:
            raise ValueError(
                f"{self.provider} API key is required. "
                f"Set LLM_API_KEY or {self.api_key_env} environment variable."
            )
        self.api_key = api_key
        self.model = model or self.default_model
        self.timeout = timeout
        self.log = log or logger

    @abstractmethod
    def _complete(self, prompt: str) -> str | None:
        """Send the prompt to the provider and return the raw reply text."""

    def classify(self, content: str) -> list[str]:
        """Classify item content into categories.

        Never raises for provider problems: request failures and unusable
        replies are logged as warnings and yield an empty list.
        """
        prompt = build_classification_prompt(content)
        try:
            reply = self._complete(prompt)
        except httpx.HTTPStatusError as e:
            self.log.warning(
                "%s API error: %s - %s",
                self.provider,
                e.response.status_code,
                e.response.text,
            )
            return []
        except openai.APIStatusError as e:
            self.log.warning(
                "%s API error: %s - %s", self.provider, e.status_code, e.response.text
            )
            return []
        except (httpx.HTTPError, openai.OpenAIError) as e:
            self.log.warning("%s request failed: %s", self.provider, e)
            return []

        return parse_categories(reply, self.provider, self.log)


class GeminiClassifier(Classifier):
    """Google Gemini through the generateContent REST endpoint."""

    provider = "Gemini"
    default_model = "gemini-2.0-flash"
    api_key_env = "GEMINI_API_KEY"
    base_url = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
        log: logging.Logger | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(api_key, model=model, timeout=timeout, log=log)
        self.transport = transport

    def _complete(self, prompt: str) -> str | None:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        # API key must never appear in the request URL
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.post(
                url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": self.api_key,
                },
            )
            response.raise_for_status()

        try:
            data = response.json()
        except ValueError:
            return None
        return self._extract_text(data)

    @staticmethod
    def _extract_text(data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return None
        candidate = candidates[0]
        if not isinstance(candidate, dict):
            return None
        content = candidate.get("content")
        if not isinstance(content, dict):
            return None
        parts = content.get("parts")
        if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
            return None
        text = parts[0].get("text")
        return text.strip() if isinstance(text, str) else None


class OpenAIClassifier(Classifier):
    """OpenAI chat completions."""

    provider = "OpenAI"
    default_model = "gpt-4.1"
    api_key_env = "OPENAI_API_KEY"
    base_url: str | None = None
    temperature: float | None = None
    system_prompt: str | None = None

    def _messages(self, prompt: str) -> list[dict[str, str]]:
        messages = []
        if self.system_prompt:
            messages.append({"role": "system", "content": self.system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

    def _complete(self, prompt: str) -> str | None:
        request: dict[str, Any] = {
            "model": self.model,
            "messages": self._messages(prompt),
        }
        if self.temperature is not None:
            request["temperature"] = self.temperature

        with OpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        ) as client:
            response = client.chat.completions.create(**request)

        if not response.choices:
            return None
        return (response.choices[0].message.content or "").strip()


class DeepSeekClassifier(OpenAIClassifier):
    """DeepSeek through its OpenAI-compatible API."""

    provider = "DeepSeek"
    default_model = "deepseek-reasoner"
    api_key_env = "DEEPSEEK_API_KEY"
    base_url = "https://api.deepseek.com"
    temperature = 0.2
    system_prompt = SYSTEM_PROMPT


CLASSIFIERS: dict[str, type[Classifier]] = {
    "gemini": GeminiClassifier,
    "openai": OpenAIClassifier,
    "deepseek": DeepSeekClassifier,
}


def create_classifier(
    provider: str,
    api_key: str,
    model: str | None = None,
    log: logging.Logger | None = None,
) -> Classifier:
    """Build the classifier for ``provider``.

    Raises:
        ValueError: If the provider is unknown or the API key is empty
    """
    classifier_class = CLASSIFIERS.get(provider.lower())
    if classifier_class is None:
        raise ValueError(
            f"Unknown LLM provider '{provider}'. "
            f"Expected one of: {', '.join(CLASSIFIERS)}"
        )
    return classifier_class(api_key, model=model, log=log)
