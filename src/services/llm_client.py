
import httpx
from loguru import logger
from ..core.config import Settings, settings as default_settings

# Thin client for an OpenAI-compatible chat completions endpoint.
# Used for invoice field extraction and cashflow narration.


class LLMNotConfiguredError(RuntimeError):
    """Raised when LLM_BASE_URL / LLM_API_KEY / LLM_DEPLOYMENT are not all set"""


class LLMClient:
    def __init__(self, config: Settings | None = None):
        self.config = config or default_settings

    @property
    def configured(self) -> bool:
        return bool(self.config.llm_base_url and self.config.llm_api_key and self.config.llm_deployment)

    @property
    def completions_url(self) -> str:
        return f"{self.config.llm_base_url.rstrip('/')}/chat/completions"

    async def complete(self, system_prompt: str, user_prompt: str, json_mode: bool = False) -> str:
        """
        Send one chat completion request and return the assistant message text.

        Raises:
            LLMNotConfiguredError: if the endpoint is not configured
            httpx.HTTPError: on transport errors, timeouts and non-2xx responses
            ValueError: if the response has no message content
        """
        if not self.configured:
            raise LLMNotConfiguredError("LLM endpoint not configured")

        payload = {
            "model": self.config.llm_deployment,
            "temperature": 0,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        headers = {"Authorization": f"Bearer {self.config.llm_api_key}"}

        logger.debug("Sending LLM completion request", model=self.config.llm_deployment, json_mode=json_mode)

        async with httpx.AsyncClient(timeout=self.config.llm_timeout_seconds) as client:
            r = await client.post(self.completions_url, json=payload, headers=headers)
            r.raise_for_status()
            body = r.json()

        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ValueError(f"Unexpected LLM response shape: {e}") from e

        if not isinstance(content, str):
            raise ValueError("LLM response content is not text")
        return content
