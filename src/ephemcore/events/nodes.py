"""
ephemcore.events.nodes
----------------------
Crossings of the ecliptic plane by the Moon.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..core.errors import InternalError, InvalidArgumentError
from ..core.time import Instant
from ..engines._solver import search
from ..positions import ecliptic_geo_moon

# short enough never to step over a node (they are ~13.6 days apart)
MOON_NODE_STEP_DAYS = 10.0
MOON_NODE_STEP_LIMIT = 10


@enum.unique
class NodeEventKind(enum.Enum):
    INVALID = 0
    ASCENDING = +1
    DESCENDING = -1


@dataclass(frozen=True)
class NodeEventInfo:
    kind: NodeEventKind
    time: Instant


def search_moon_node(start: Instant) -> NodeEventInfo:
    """First time after `start` the Moon's ecliptic latitude changes sign."""
    time1 = start
    lat1 = ecliptic_geo_moon(time1).lat
    for _ in range(MOON_NODE_STEP_LIMIT):
        time2 = time1.add_days(MOON_NODE_STEP_DAYS)
        lat2 = ecliptic_geo_moon(time2).lat
        if lat1 * lat2 <= 0.0:
            kind = NodeEventKind.ASCENDING if lat2 > lat1 else NodeEventKind.DESCENDING
            sign = kind.value
            result = search(lambda t: sign * ecliptic_geo_moon(t).lat, time1, time2, 1.0)
            if result is None:
                raise InternalError(f"Lunar node search failed between {time1} and {time2}")
            return NodeEventInfo(kind, result)
        time1 = time2
        lat1 = lat2
    raise InternalError(f"No lunar node within {MOON_NODE_STEP_LIMIT * MOON_NODE_STEP_DAYS} days of {start}")


def next_moon_node(prev: NodeEventInfo) -> NodeEventInfo:
    if prev.kind is NodeEventKind.ASCENDING:
        expected = NodeEventKind.DESCENDING
    elif prev.kind is NodeEventKind.DESCENDING:
        expected = NodeEventKind.ASCENDING
    else:
        raise InvalidArgumentError(f"Invalid node kind: {prev.kind}")
    node = search_moon_node(prev.time.add_days(MOON_NODE_STEP_DAYS))
    if node.kind is not expected:
        raise InternalError(f"Expected {expected.name} node, found {node.kind.name}")
    return node
