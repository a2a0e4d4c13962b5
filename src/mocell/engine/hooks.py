from __future__ import annotations

from typing import Any, Protocol


class GenerationObserver(Protocol):
    """Receives progress callbacks from the engine; the engine itself performs no I/O."""

    def on_start(self, *, problem: Any, config: Any) -> None: ...

    def on_generation(self, generation: int, *, evaluations: int, archive_size: int) -> None: ...

    def on_end(self, *, evaluations: int, generations: int) -> None: ...


class NoOpObserver:
    def on_start(self, *, problem: Any, config: Any) -> None:
        return None

    def on_generation(self, generation: int, *, evaluations: int, archive_size: int) -> None:
        return None

    def on_end(self, *, evaluations: int, generations: int) -> None:
        return None


__all__ = ["GenerationObserver", "NoOpObserver"]
