"""A* search over the road network of a route model."""

from __future__ import annotations

from .route_model import RouteModel, RouteNode


def _f_value(node: RouteNode) -> float:
    return node.g_value + node.h_value


class RoutePlanner:
    """Finds a route between two points given in percent of the map size."""

    def __init__(self, model: RouteModel, start_x, start_y, end_x, end_y):
        self.model = model
        self.start_node = model.find_closest_node(start_x * 0.01, start_y * 0.01)
        self.end_node = model.find_closest_node(end_x * 0.01, end_y * 0.01)
        self.open_list: list[RouteNode] = []
        self.distance = 0.0

    def calculate_h_value(self, node: RouteNode) -> float:
        """Heuristic: straight-line distance to the end node."""
        return node.distance(self.end_node)

    def add_neighbors(self, current_node: RouteNode) -> None:
        """Expand ``current_node`` and put its unvisited neighbours on the open list."""
        current_node.find_neighbors()
        for node in current_node.neighbors:
            node.parent = current_node
            node.h_value = self.calculate_h_value(node)
            node.g_value = current_node.g_value + current_node.distance(node)
            node.visited = True
            self.open_list.append(node)

    def next_node(self) -> RouteNode:
        """Remove and return the open node with the lowest g + h."""
        self.open_list.sort(key=_f_value, reverse=True)
        return self.open_list.pop()

    def construct_final_path(self, current_node: RouteNode) -> list[RouteNode]:
        """Follow parents back to the start; set ``distance`` in metres."""
        self.distance = 0.0
        path = []
        while current_node.parent is not None:
            path.append(current_node)
            self.distance += current_node.distance(current_node.parent)
            current_node = current_node.parent
        path.append(self.start_node)
        path.reverse()
        self.distance *= self.model.metric_scale
        return path

    def a_star_search(self) -> None:
        """Search from the start to the end node and store the path in the model."""
        self.start_node.visited = True
        self.open_list.append(self.start_node)
        while self.open_list:
            current = self.next_node()
            if current.distance(self.end_node) == 0:
                self.model.path = self.construct_final_path(current)
                break
            self.add_neighbors(current)