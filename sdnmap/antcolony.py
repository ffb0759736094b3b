"""Ant colony run parameters and parsing of the controller's status replies.

The controller identifies switches by their position in the switch list.
The map identifies them by global id. The helpers here translate between
the two, and they turn status objects into plain values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

__all__ = [
    "DEFAULT_BASE_URL",
    "START_PATH_ENDPOINT",
    "START_TREE_ENDPOINT",
    "PATH_STATUS_ENDPOINT",
    "TREE_STATUS_ENDPOINT",
    "POLL_INTERVAL_MS",
    "AntColonyParams",
    "PathStatus",
    "TreeStatus",
    "map_indices_to_ids",
    "parse_path_status",
    "parse_tree_status",
    "path_length",
    "format_path",
]

DEFAULT_BASE_URL = "http://127.0.0.1:8080"
START_PATH_ENDPOINT = "/antcolony/start"
START_TREE_ENDPOINT = "/antcolony/tree"
PATH_STATUS_ENDPOINT = "/antcolony/status"
TREE_STATUS_ENDPOINT = "/antcolony/status_tree"
POLL_INTERVAL_MS = 350


def _json_int(value: Any) -> int:
    """Read a JSON value as an integer; anything that is not one gives 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _json_float(value: Any) -> float:
    """Read a JSON value as a number; anything that is not a number gives 0.0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def _json_array(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else []


@dataclass
class AntColonyParams:
    """Settings for one ant colony run, with the dialog's defaults."""

    num_ants: int = 20
    num_iterations: int = 50
    alpha: float = 1.0
    beta: float = 3.0
    evaporation: float = 0.5
    q: float = 100.0
    start_index: int = 0
    end_index: int = 0
    percentage: int = 40
    tree_mode: bool = False

    @classmethod
    def for_switches(
        cls,
        switch_names: Sequence[str],
        start_name: str,
        end_name: str,
        **settings: Any,
    ) -> "AntColonyParams":
        """Build parameters with endpoints chosen by switch name (-1 if absent)."""
        names = list(switch_names)
        start = names.index(start_name) if start_name in names else -1
        end = names.index(end_name) if end_name in names else -1
        return cls(start_index=start, end_index=end, **settings)

    @property
    def start_endpoint(self) -> str:
        """Path of the request that starts this run."""
        return START_TREE_ENDPOINT if self.tree_mode else START_PATH_ENDPOINT

    @property
    def status_endpoint(self) -> str:
        """Path of the request that polls this run."""
        return TREE_STATUS_ENDPOINT if self.tree_mode else PATH_STATUS_ENDPOINT

    def to_payload(self, metric_content: str) -> dict[str, Any]:
        """The JSON body that starts the run; tree runs carry no ``end``."""
        payload: dict[str, Any] = {
            "num_ants": self.num_ants,
            "num_iterations": self.num_iterations,
            "alpha": self.alpha,
            "beta": self.beta,
            "evaporation": self.evaporation,
            "Q": self.q,
            "start": self.start_index,
            "percentage": self.percentage,
            "metric_content": metric_content,
        }
        if not self.tree_mode:
            payload["end"] = self.end_index
        return payload


@dataclass
class PathStatus:
    """Progress of a single-path run, in switch global ids."""

    best_path: list[int] = field(default_factory=list)
    all_paths: Optional[list[list[int]]] = None
    best_length: Optional[float] = None
    finished: bool = False


@dataclass
class TreeStatus:
    """Progress of a path-tree run, in switch global ids."""

    edges: list[tuple[int, int]] = field(default_factory=list)
    all_paths: Optional[list[list[int]]] = None
    finished: bool = False


def map_indices_to_ids(indices: Iterable[Any], switch_ids: Sequence[int]) -> list[int]:
    """Turn switch list positions into global ids, dropping those out of range."""
    count = len(switch_ids)
    result = []
    for value in indices:
        index = _json_int(value)
        if 0 <= index < count:
            result.append(switch_ids[index])
    return result


def _mapped_paths(value: Any, switch_ids: Sequence[int], keep_empty: bool) -> list[list[int]]:
    paths = (map_indices_to_ids(_json_array(item), switch_ids) for item in _json_array(value))
    return [path for path in paths if keep_empty or path]


def _finished(obj: Mapping[str, Any]) -> bool:
    return obj.get("finished") is True


def parse_path_status(obj: Mapping[str, Any], switch_ids: Sequence[int]) -> PathStatus:
    """Read a single-path status reply."""
    best_path = map_indices_to_ids(_json_array(obj.get("best_path")), switch_ids)
    all_paths = (
        _mapped_paths(obj["all_paths"], switch_ids, keep_empty=True)
        if "all_paths" in obj
        else None
    )
    if "best_length" in obj:
        length = _json_float(obj["best_length"])
    elif "length" in obj:
        length = _json_float(obj["length"])
    else:
        length = -1.0
    return PathStatus(
        best_path=best_path,
        all_paths=all_paths,
        best_length=length if length >= 0 else None,
        finished=_finished(obj),
    )


def parse_tree_status(obj: Mapping[str, Any], switch_ids: Sequence[int]) -> TreeStatus:
    """Read a path-tree status reply; malformed or out-of-range edges are dropped."""
    count = len(switch_ids)
    edges = []
    for item in _json_array(obj.get("edges")):
        pair = _json_array(item)
        if len(pair) != 2:
            continue
        first, second = (_json_int(value) for value in pair)
        if 0 <= first < count and 0 <= second < count:
            edges.append((switch_ids[first], switch_ids[second]))
    all_paths = (
        _mapped_paths(obj["all_paths"], switch_ids, keep_empty=False)
        if "all_paths" in obj
        else None
    )
    return TreeStatus(edges=edges, all_paths=all_paths, finished=_finished(obj))


def path_length(
    path: Sequence[int], delay_of: Callable[[int, int], Optional[float]]
) -> float:
    """Sum the delays of consecutive hops; hops without a link add nothing."""
    total = 0.0
    for first, second in zip(path, path[1:]):
        delay = delay_of(first, second)
        if delay is not None:
            total += delay
    return total


def format_path(path: Iterable[int], names_by_id: Mapping[int, str]) -> str:
    """Render a path as switch names joined by arrows, skipping unknown ids."""
    return " -> ".join(names_by_id[node] for node in path if node in names_by_id)