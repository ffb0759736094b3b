"""HTTP client for the ant colony service running next to the controller."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from sdnmap.antcolony import (
    DEFAULT_BASE_URL,
    PATH_STATUS_ENDPOINT,
    TREE_STATUS_ENDPOINT,
    AntColonyParams,
    PathStatus,
    TreeStatus,
    parse_path_status,
    parse_tree_status,
)

__all__ = ["AntColonyError", "AntColonyClient"]

PathLike = Union[str, Path]


class AntColonyError(Exception):
    """A run could not be started or its status could not be fetched."""


class AntColonyClient:
    """Start ant colony runs and poll their progress over HTTP."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 5.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, endpoint: str, body: Optional[bytes] = None) -> bytes:
        url = self.base_url + endpoint
        headers = {"Content-Type": "application/json"} if body is not None else {}
        request = urllib.request.Request(
            url,
            data=body,
            headers=headers,
            method="POST" if body is not None else "GET",
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return response.read()
        except urllib.error.HTTPError as exc:
            raise AntColonyError(f"{url}: HTTP {exc.code} {exc.reason}") from exc
        except (urllib.error.URLError, OSError) as exc:
            raise AntColonyError(f"{url}: {exc}") from exc

    def _get_object(self, endpoint: str) -> Mapping[str, Any]:
        raw = self._request(endpoint)
        try:
            document = json.loads(raw.decode("utf-8", errors="replace"))
        except ValueError:
            return {}
        return document if isinstance(document, dict) else {}

    def start(self, params: AntColonyParams, metric_file_path: PathLike) -> None:
        """Send the metric file and settings to start a path or tree run."""
        try:
            with open(metric_file_path, encoding="utf-8", errors="replace") as handle:
                metric_content = handle.read()
        except OSError as exc:
            raise AntColonyError(f"cannot open metric file {metric_file_path}") from exc
        body = json.dumps(params.to_payload(metric_content)).encode("utf-8")
        self._request(params.start_endpoint, body)

    def path_status(self, switch_ids: Sequence[int]) -> PathStatus:
        """Fetch the progress of a single-path run."""
        return parse_path_status(self._get_object(PATH_STATUS_ENDPOINT), switch_ids)

    def tree_status(self, switch_ids: Sequence[int]) -> TreeStatus:
        """Fetch the progress of a path-tree run."""
        return parse_tree_status(self._get_object(TREE_STATUS_ENDPOINT), switch_ids)