"""Map model extended with search nodes for route planning."""

from __future__ import annotations

import math

from .model import Model, Road, RoadType

FLT_MAX = 3.4028234663852886e38


def _distance(a, b) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


class RouteNode:
    """A map node carrying A* search state."""

    def __init__(self, x=0.0, y=0.0, index=-1, parent_model=None):
        self.x = x
        self.y = y
        self.index = index
        self.parent: RouteNode | None = None
        self.h_value = FLT_MAX
        self.g_value = 0.0
        self.visited = False
        self.neighbors: list[RouteNode] = []
        self._model = parent_model

    def __repr__(self):
        return f"RouteNode(index={self.index}, x={self.x!r}, y={self.y!r})"

    def distance(self, other) -> float:
        """Euclidean distance to another point."""
        return _distance(self, other)

    def _find_neighbor(self, node_indices: list[int]) -> RouteNode | None:
        closest = None
        for node_index in node_indices:
            node = self._model.route_nodes[node_index]
            dist = self.distance(node)
            if dist != 0 and not node.visited:
                if closest is None or dist < self.distance(closest):
                    closest = node
        return closest

    def find_neighbors(self) -> None:
        """Append the closest unvisited node of every road through this node."""
        if self._model is None:
            raise ValueError("node is not attached to a model")
        for road in self._model.node_to_road.get(self.index, []):
            neighbor = self._find_neighbor(self._model.ways[road.way].nodes)
            if neighbor is not None:
                self.neighbors.append(neighbor)


class RouteModel(Model):
    """A map model whose road nodes can be searched."""

    def __init__(self, xml):
        super().__init__(xml)
        self.route_nodes = [
            RouteNode(node.x, node.y, index, self) for index, node in enumerate(self.nodes)
        ]
        self.path: list[RouteNode] = []
        self.node_to_road: dict[int, list[Road]] = {}
        for road in self.roads:
            if road.type == RoadType.FOOTWAY:
                continue
            for node_index in self.ways[road.way].nodes:
                self.node_to_road.setdefault(node_index, []).append(road)

    def find_closest_node(self, x: float, y: float) -> RouteNode:
        """Return the road node nearest to ``(x, y)``, footways excluded."""
        point = RouteNode(x, y)
        closest = None
        min_dist = FLT_MAX
        for road in self.roads:
            if road.type == RoadType.FOOTWAY:
                continue
            for node_index in self.ways[road.way].nodes:
                dist = point.distance(self.route_nodes[node_index])
                if dist < min_dist:
                    closest = node_index
                    min_dist = dist
        if closest is None:
            raise ValueError("the map has no road nodes")
        return self.route_nodes[closest]