"""Provider-specific request building, HTTP dispatch and response parsing."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from smartcat.errors import MalformedResponse, MissingModel, TransportError, UnsupportedProvider
from smartcat.models import (
    ApiConfig,
    OpenAiPrompt,
    OpenAiResponse,
    Provider,
    RequestResult,
    ResolvedPrompt,
    TokenUsage,
    WireFormat,
    supported_providers,
)


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0
MAX_ERROR_DETAIL = 500


class RequestDispatcher:
    def __init__(self, client: Optional[httpx.Client] = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client: Optional[httpx.Client] = client
        self._timeout: float = timeout

    def ensure_supported(self, provider: Provider) -> WireFormat:
        wire_format = provider.wire_format
        if wire_format is WireFormat.NOT_IMPLEMENTED:
            raise UnsupportedProvider(provider.value, [p.value for p in supported_providers()])
        return wire_format

    def build_body(self, resolved: ResolvedPrompt) -> dict[str, Any]:
        self.ensure_supported(resolved.provider)
        if resolved.model is None:
            raise MissingModel(resolved.provider.value)
        payload = OpenAiPrompt(
            model=resolved.model,
            messages=list(resolved.messages),
            temperature=resolved.temperature,
        )
        return payload.model_dump(mode="json", exclude_none=True)

    def dispatch(self, resolved: ResolvedPrompt, api_config: ApiConfig, credential: str) -> RequestResult:
        body = self.build_body(resolved)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {credential}",
        }
        logger.debug("Trying to reach %s with model %s", api_config.url, resolved.model)
        logger.debug("request content: %s", body)

        response = self._post(api_config.url, body, headers)
        return parse_openai_response(response)

    def _post(self, url: str, body: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        try:
            if self._client is not None:
                response = self._client.post(url, json=body, headers=headers, timeout=self._timeout)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.post(url, json=body, headers=headers)
        except httpx.TimeoutException as exc:
            raise TransportError(f"timed out after {self._timeout}s ({exc})") from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise TransportError(response.text[:MAX_ERROR_DETAIL], status=response.status_code)
        return response


def parse_openai_response(response: httpx.Response) -> RequestResult:
    try:
        parsed = OpenAiResponse.model_validate_json(response.content)
    except ValidationError as exc:
        raise MalformedResponse(str(exc)) from exc
    usage = parsed.usage
    logger.debug("token usage: %s", usage)
    return RequestResult(
        text=parsed.choices[0].message.content,
        token_usage=TokenUsage(
            prompt=usage.prompt_tokens,
            completion=usage.completion_tokens,
            total=usage.total_tokens,
        ),
    )
