"""Public package exports."""

from smartcat.config_store import ConfigStore
from smartcat.credentials import CredentialResolver
from smartcat.dispatcher import RequestDispatcher
from smartcat.pipeline import Pipeline
from smartcat.prompt_resolver import PlaceholderPolicy
from smartcat.prompt_resolver import PromptResolver

__all__ = [
    "ConfigStore",
    "CredentialResolver",
    "Pipeline",
    "PlaceholderPolicy",
    "PromptResolver",
    "RequestDispatcher",
]
