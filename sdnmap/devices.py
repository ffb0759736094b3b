"""Device kinds on the network map and rules for connecting them."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

__all__ = ["DeviceType", "is_ss_connection", "is_cs_connection", "is_hs_connection"]


class DeviceType(IntEnum):
    """Kinds of elements that can be placed on the map."""

    SDNCONTROLLER = 0
    HOST = 1
    SWITCH = 2
    SSLINK = 3
    CSLINK = 4
    TEXTLABEL = 5


def _types(node1: Any, node2: Any) -> set[DeviceType]:
    return {node1.device_type, node2.device_type}


def is_cs_connection(node1: Any, node2: Any) -> bool:
    """True when one node is a controller and the other a switch."""
    return _types(node1, node2) == {DeviceType.SDNCONTROLLER, DeviceType.SWITCH}


def is_ss_connection(node1: Any, node2: Any) -> bool:
    """True when both nodes are switches."""
    return _types(node1, node2) == {DeviceType.SWITCH}


def is_hs_connection(node1: Any, node2: Any) -> bool:
    """True when one node is a host and the other a switch."""
    return _types(node1, node2) == {DeviceType.HOST, DeviceType.SWITCH}