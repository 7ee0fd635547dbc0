from __future__ import annotations
from typing import TYPE_CHECKING, Any, Dict, Iterator, List

if TYPE_CHECKING:
    from .logger import Logger

class LoggerRegistry:
    """Directory of every logger created against it.

    Create one per process and pass it to each Logger. Entries are never
    removed. Not thread-safe: mutate from one thread or lock externally.
    """
    def __init__(self):
        self._loggers: Dict[str, Logger] = {}
        self._components: Dict[str, str] = {}

    def register(self, logger: Logger) -> None:
        self._loggers[logger.id] = logger

    def claim_component(self, component_id: str, logger_id: str) -> None:
        # Last claimant wins; earlier claims are dropped silently.
        self._components[component_id] = logger_id

    def by_id(self, logger_id: str) -> Logger | None:
        return self._loggers.get(logger_id)

    def by_component(self, component_id: str) -> Logger | None:
        logger_id = self._components.get(component_id)
        if logger_id is None:
            return None
        return self.by_id(logger_id)

    def all(self) -> List[Logger]:
        return list(self._loggers.values())

    def components(self) -> Dict[str, str]:
        return dict(self._components)

    def logger(self, **options: Any) -> Logger:
        from .logger import Logger
        return Logger(self, **options)

    def __len__(self) -> int:
        return len(self._loggers)

    def __contains__(self, logger_id: object) -> bool:
        return logger_id in self._loggers

    def __iter__(self) -> Iterator[Logger]:
        return iter(self.all())
