from typing import Callable, Dict, List, Type, TypeVar
import structlog

from reliability_review.core.exceptions import ConfigurationError
from reliability_review.modules.review.domain.analyzer import ServiceAnalyzer

logger = structlog.get_logger()

AnalyzerT = TypeVar("AnalyzerT", bound=Type[ServiceAnalyzer])


class AnalyzerRegistry:
    """Analyzer classes grouped by cloud provider, keyed by service."""

    def __init__(self) -> None:
        self._analyzers: Dict[str, Dict[str, Type[ServiceAnalyzer]]] = {}

    def register(self, provider: str) -> Callable[[AnalyzerT], AnalyzerT]:
        def decorator(analyzer_cls: AnalyzerT) -> AnalyzerT:
            key = analyzer_cls.service_key
            if not key:
                raise ConfigurationError(
                    f"{analyzer_cls.__name__} does not declare a service_key"
                )
            provider_analyzers = self._analyzers.setdefault(provider, {})
            existing = provider_analyzers.get(key)
            if existing is not None and existing is not analyzer_cls:
                raise ConfigurationError(
                    f"Duplicate analyzer for {provider}/{key}",
                    details={"existing": existing.__name__, "new": analyzer_cls.__name__},
                )
            provider_analyzers[key] = analyzer_cls
            logger.debug("analyzer_registered", provider=provider, service=key)
            return analyzer_cls

        return decorator

    def get_analyzers_for_provider(self, provider: str) -> List[Type[ServiceAnalyzer]]:
        return list(self._analyzers.get(provider, {}).values())

    def service_keys(self, provider: str) -> List[str]:
        return list(self._analyzers.get(provider, {}))

    def get(self, provider: str, service_key: str) -> Type[ServiceAnalyzer]:
        try:
            return self._analyzers[provider][service_key]
        except KeyError:
            raise ConfigurationError(
                f"No analyzer registered for {provider}/{service_key}",
                code="unknown_analyzer",
                details={"available": self.service_keys(provider)},
            ) from None


registry = AnalyzerRegistry()
