"""Model types for configuration, prompts and requests."""

from smartcat.models.api_config import ApiConfig
from smartcat.models.openai_wire import OpenAiPrompt
from smartcat.models.openai_wire import OpenAiResponse
from smartcat.models.prompt import PLACEHOLDER_TOKEN
from smartcat.models.prompt import Message
from smartcat.models.prompt import Prompt
from smartcat.models.provider import Provider
from smartcat.models.provider import WireFormat
from smartcat.models.provider import supported_providers
from smartcat.models.request_result import RequestResult
from smartcat.models.request_result import TokenUsage
from smartcat.models.resolved_prompt import ResolvedPrompt

__all__ = [
    "PLACEHOLDER_TOKEN",
    "ApiConfig",
    "Message",
    "OpenAiPrompt",
    "OpenAiResponse",
    "Prompt",
    "Provider",
    "RequestResult",
    "ResolvedPrompt",
    "TokenUsage",
    "WireFormat",
    "supported_providers",
]
