"""MOCell configuration: a fluent builder producing a frozen, serializable dataclass."""

from __future__ import annotations

import json
import numbers
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional, Tuple

from mocell.exceptions import ConfigurationError, MissingConfigError

OperatorSpec = Tuple[str, Dict[str, Any]]


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _require_fields(cfg: Dict[str, Any], names: Tuple[str, ...], config_class: str) -> None:
    for name in names:
        if cfg.get(name) is None:
            raise MissingConfigError(name, config_class)


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}.")
    if isinstance(value, str):
        text = value.strip()
        try:
            value = float(text) if any(c in text for c in ".eE") else int(text)
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer, got {value!r}.") from None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise ConfigurationError(f"{name} must be an integer, got {value!r}.")


def _as_optional_int(value: Any, name: str) -> Optional[int]:
    return None if value is None else _as_int(value, name)


def _as_operator(value: Any, name: str) -> OperatorSpec:
    if isinstance(value, str):
        return value, {}
    if isinstance(value, dict):
        params = dict(value)
        method = params.pop("method", None)
        if method is None:
            raise ConfigurationError(f"'{name}' mapping needs a 'method' key.")
        return str(method), params
    if isinstance(value, (tuple, list)) and len(value) == 2 and isinstance(value[1], dict):
        return str(value[0]), dict(value[1])
    raise ConfigurationError(f"Cannot interpret '{name}' operator specification {value!r}.")


@dataclass(frozen=True)
class MOCellConfigData(_SerializableConfig):
    pop_size: int
    archive_size: int
    max_evaluations: Optional[int] = 25000
    max_generations: Optional[int] = None
    neighborhood: str = "c9"
    grid_shape: Optional[Tuple[int, int]] = None
    selection: OperatorSpec = ("binary_tournament", {})
    crossover: OperatorSpec = ("sbx", {"prob": 0.9, "eta": 20.0})
    mutation: OperatorSpec = ("pm", {"prob": "1/n", "eta": 20.0})
    allow_duplicates: bool = False
    eval_backend: str = "serial"
    n_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.pop_size, int) or self.pop_size <= 0:
            raise ConfigurationError(f"pop_size must be a positive integer, got {self.pop_size!r}.")
        if not isinstance(self.archive_size, int) or self.archive_size <= 0:
            raise ConfigurationError(f"archive_size must be a positive integer, got {self.archive_size!r}.")
        if self.max_evaluations is None and self.max_generations is None:
            raise ConfigurationError(
                "No stopping condition configured.",
                suggestion="Set max_evaluations and/or max_generations",
            )
        if self.max_evaluations is not None and self.max_evaluations <= 0:
            raise ConfigurationError(f"max_evaluations must be positive, got {self.max_evaluations}.")
        if self.max_generations is not None and self.max_generations < 0:
            raise ConfigurationError(f"max_generations must be non-negative, got {self.max_generations}.")
        if self.grid_shape is not None and len(self.grid_shape) != 2:
            raise ConfigurationError(f"grid_shape must be (rows, cols), got {self.grid_shape!r}.")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MOCellConfigData":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown MOCell configuration keys: {', '.join(unknown)}.",
                suggestion=f"Valid keys: {', '.join(sorted(known))}",
            )
        builder = MOCellConfig()
        for key, value in data.items():
            builder._cfg[key] = value
        return builder.fixed()


class MOCellConfig:
    """Declarative configuration holder for MOCell settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls, pop_size: int = 100, archive_size: int = 100, max_evaluations: int = 25000) -> "MOCellConfig":
        return cls().pop_size(pop_size).archive_size(archive_size).max_evaluations(max_evaluations)

    def pop_size(self, value: int) -> "MOCellConfig":
        self._cfg["pop_size"] = value
        return self

    def archive_size(self, value: int) -> "MOCellConfig":
        self._cfg["archive_size"] = value
        return self

    def max_evaluations(self, value: int | None) -> "MOCellConfig":
        self._cfg["max_evaluations"] = value
        return self

    def max_generations(self, value: int | None) -> "MOCellConfig":
        self._cfg["max_generations"] = value
        return self

    def neighborhood(self, kind: str, shape: tuple[int, int] | None = None) -> "MOCellConfig":
        self._cfg["neighborhood"] = kind
        if shape is not None:
            self._cfg["grid_shape"] = tuple(shape)
        return self

    def selection(self, method: str, **kwargs) -> "MOCellConfig":
        self._cfg["selection"] = (method, kwargs)
        return self

    def crossover(self, method: str, **kwargs) -> "MOCellConfig":
        self._cfg["crossover"] = (method, kwargs)
        return self

    def mutation(self, method: str, **kwargs) -> "MOCellConfig":
        self._cfg["mutation"] = (method, kwargs)
        return self

    def allow_duplicates(self, enabled: bool = True) -> "MOCellConfig":
        self._cfg["allow_duplicates"] = bool(enabled)
        return self

    def eval_backend(self, name: str, n_workers: int | None = None) -> "MOCellConfig":
        self._cfg["eval_backend"] = name
        if n_workers is not None:
            self._cfg["n_workers"] = n_workers
        return self

    def fixed(self) -> MOCellConfigData:
        _require_fields(self._cfg, ("pop_size", "archive_size"), "MOCellConfig")
        cfg = self._cfg
        if "max_evaluations" in cfg:
            max_evals = cfg["max_evaluations"]
        elif cfg.get("max_generations") is None:
            max_evals = 25000
        else:
            max_evals = None
        grid = cfg.get("grid_shape")
        if grid is not None and (isinstance(grid, (str, bytes)) or not hasattr(grid, "__iter__")):
            raise ConfigurationError(f"grid_shape must be (rows, cols), got {grid!r}.")
        return MOCellConfigData(
            pop_size=_as_int(cfg["pop_size"], "pop_size"),
            archive_size=_as_int(cfg["archive_size"], "archive_size"),
            max_evaluations=_as_optional_int(max_evals, "max_evaluations"),
            max_generations=_as_optional_int(cfg.get("max_generations"), "max_generations"),
            neighborhood=str(cfg.get("neighborhood", "c9")),
            grid_shape=None if grid is None else tuple(_as_int(v, "grid_shape") for v in grid),
            selection=_as_operator(cfg.get("selection", ("binary_tournament", {})), "selection"),
            crossover=_as_operator(cfg.get("crossover", ("sbx", {"prob": 0.9, "eta": 20.0})), "crossover"),
            mutation=_as_operator(cfg.get("mutation", ("pm", {"prob": "1/n", "eta": 20.0})), "mutation"),
            allow_duplicates=bool(cfg.get("allow_duplicates", False)),
            eval_backend=str(cfg.get("eval_backend", "serial")),
            n_workers=_as_optional_int(cfg.get("n_workers"), "n_workers"),
        )


__all__ = ["MOCellConfig", "MOCellConfigData"]
