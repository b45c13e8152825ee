"""Chat-completion gateway client with a pluggable HTTP transport."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from resume_insight.errors import GatewayError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.deepseek.com/v1/chat/completions"
DEFAULT_MODEL = "deepseek-chat"
API_KEY_ENV = "DEEPSEEK_API_KEY"


@dataclass(frozen=True)
class GatewayRequest:
    url: str
    headers: dict[str, str]
    payload: dict[str, Any]


@dataclass(frozen=True)
class GatewayResponse:
    status_code: int
    body: bytes | str = b""


@dataclass
class LLMResponse:
    """Response from the gateway including usage metadata."""

    text: str
    input_tokens: int = 0
    output_tokens: int = 0
    model: str = DEFAULT_MODEL


class Transport(Protocol):
    """Anything that can deliver one request and hand back one response."""

    async def send(self, request: GatewayRequest) -> GatewayResponse: ...


class HttpxTransport:
    """Default transport backed by ``httpx.AsyncClient``.

    Pass ``client`` to reuse a pooled client (or an ``httpx.MockTransport``
    backed one in tests); otherwise a short-lived client is opened per call.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float | None = None):
        self._client = client
        self._timeout = timeout

    async def send(self, request: GatewayRequest) -> GatewayResponse:
        try:
            if self._client is not None:
                response = await self._post(self._client, request)
            else:
                kwargs: dict = {}
                if self._timeout is not None:
                    kwargs["timeout"] = self._timeout
                async with httpx.AsyncClient(**kwargs) as client:
                    response = await self._post(client, request)
        except (httpx.HTTPError, OSError) as exc:
            raise GatewayError(f"Transport failure: {exc}") from exc
        return GatewayResponse(status_code=response.status_code, body=response.content)

    @staticmethod
    async def _post(client: httpx.AsyncClient, request: GatewayRequest) -> httpx.Response:
        return await client.post(request.url, headers=request.headers, json=request.payload)


class GatewayClient:
    """Single-shot chat-completion client. No retries, no state between calls."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        api_url: str = DEFAULT_API_URL,
        model: str = DEFAULT_MODEL,
        timeout: float | None = None,
        transport: Transport | None = None,
    ):
        self.api_key = api_key if api_key is not None else os.environ.get(API_KEY_ENV, "")
        if not self.api_key:
            logger.warning("No gateway API key configured; set %s", API_KEY_ENV)
        self.api_url = api_url
        self.model = model
        self.transport = transport or HttpxTransport(timeout=timeout)

    def build_request(self, prompt: str, temperature: float, max_tokens: int) -> GatewayRequest:
        if not 0.0 <= temperature <= 1.0:
            raise ValueError(f"temperature must be between 0 and 1, got {temperature}")
        if max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {max_tokens}")
        return GatewayRequest(
            url=self.api_url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            payload={
                "model": self.model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": temperature,
                "max_tokens": max_tokens,
            },
        )

    async def generate(self, prompt: str, temperature: float, max_tokens: int) -> LLMResponse:
        """Send a prompt and return the first choice's message content.

        Raises:
            GatewayError: transport failure, non-2xx status, or a body without
                ``choices[0].message.content``.
        """
        request = self.build_request(prompt, temperature, max_tokens)
        logger.debug("Gateway call: model=%s max_tokens=%d", self.model, max_tokens)
        try:
            response = await self.transport.send(request)
        except OSError as exc:
            # host-supplied transports may surface raw socket errors and timeouts
            raise GatewayError(f"Transport failure: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise GatewayError(
                f"Gateway returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = json.loads(response.body)
        except (ValueError, TypeError, RecursionError) as exc:
            raise GatewayError("Gateway response body is not JSON") from exc

        text = _message_content(data)
        usage = data.get("usage")
        if not isinstance(usage, dict):
            usage = {}
        input_tokens = _token_count(usage.get("prompt_tokens"))
        output_tokens = _token_count(usage.get("completion_tokens"))
        model = data.get("model")
        logger.debug("Gateway response: %d input, %d output tokens", input_tokens, output_tokens)
        return LLMResponse(
            text=text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=model if isinstance(model, str) and model else self.model,
        )


def _message_content(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise GatewayError("Gateway response lacks choices[0].message.content") from exc
    if not isinstance(content, str):
        raise GatewayError("Gateway message content is not a string")
    return content


def _token_count(value: Any) -> int:
    # anything but a non-negative integer counts as zero
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)
