"""Composition root for dashbridge.

Builds the immutable configuration snapshot once and constructs one
long-lived instance of each provider variant plus the comparator. The HTTP
service holds a single container for its whole lifetime; tests build one
with explicit config and fake providers.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.comparison import ProviderComparator
from ..base.interfaces import ChatEmbeddingProvider
from ..config import AIConfig, ServiceSettings, load_ai_config, load_service_settings
from ..dashscope import DashScopeHttpProvider
from ..openai import OpenAISdkProvider


class ProvidersContainer:
    """Dependency injection container for configuration and providers.

    Every constructor argument is optional; anything omitted is resolved
    lazily from the environment on first access and cached thereafter.
    """

    def __init__(
        self,
        config: Optional[AIConfig] = None,
        settings: Optional[ServiceSettings] = None,
        sdk_provider: Optional[ChatEmbeddingProvider] = None,
        http_provider: Optional[ChatEmbeddingProvider] = None,
    ) -> None:
        self._config = config
        self._settings = settings
        self._singletons: Dict[str, Any] = {}
        if sdk_provider is not None:
            self._singletons["sdk_provider"] = sdk_provider
        if http_provider is not None:
            self._singletons["http_provider"] = http_provider

    # ---- Configuration ----
    @property
    def config(self) -> AIConfig:
        if self._config is None:
            self._config = load_ai_config()
        return self._config

    @property
    def settings(self) -> ServiceSettings:
        if self._settings is None:
            self._settings = load_service_settings()
        return self._settings

    # ---- Providers ----
    @property
    def sdk_provider(self) -> ChatEmbeddingProvider:
        if "sdk_provider" not in self._singletons:
            self._singletons["sdk_provider"] = OpenAISdkProvider(self.config)
        return self._singletons["sdk_provider"]

    @property
    def http_provider(self) -> ChatEmbeddingProvider:
        if "http_provider" not in self._singletons:
            self._singletons["http_provider"] = DashScopeHttpProvider(self.config)
        return self._singletons["http_provider"]

    @property
    def comparator(self) -> ProviderComparator:
        if "comparator" not in self._singletons:
            self._singletons["comparator"] = ProviderComparator([self.sdk_provider, self.http_provider])
        return self._singletons["comparator"]

    def clear(self) -> None:  # testing convenience
        """Drop cached providers and the comparator."""
        self._singletons.clear()


def build_container(
    config: Optional[AIConfig] = None,
    settings: Optional[ServiceSettings] = None,
) -> ProvidersContainer:
    """Return a :class:`ProvidersContainer` for the given (or environment) config."""
    return ProvidersContainer(config=config, settings=settings)


__all__ = ["ProvidersContainer", "build_container"]
