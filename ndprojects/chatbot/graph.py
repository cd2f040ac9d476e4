"""Nodes and edges of the chatbot's answer graph."""

from __future__ import annotations


class GraphEdge:
    """A directed edge labelled with the keywords that lead along it."""

    def __init__(self, id: int):
        self.id = id
        self.child_node: GraphNode | None = None
        self.parent_node: GraphNode | None = None
        self.keywords: list[str] = []

    def __repr__(self):
        return f"GraphEdge(id={self.id}, keywords={self.keywords!r})"

    def add_token(self, token: str) -> None:
        """Add a keyword."""
        self.keywords.append(token)


class GraphNode:
    """A node holding possible answers and, at most, the chatbot."""

    def __init__(self, id: int):
        self.id = id
        self.child_edges: list[GraphEdge] = []
        self.parent_edges: list[GraphEdge] = []
        self.answers: list[str] = []
        self.chatbot = None

    def __repr__(self):
        return f"GraphNode(id={self.id})"

    def add_token(self, token: str) -> None:
        """Add an answer."""
        self.answers.append(token)

    def add_parent_edge(self, edge: GraphEdge) -> None:
        self.parent_edges.append(edge)

    def add_child_edge(self, edge: GraphEdge) -> None:
        self.child_edges.append(edge)

    def move_chatbot_here(self, chatbot) -> None:
        """Take the chatbot and let it answer from this node."""
        self.chatbot = chatbot
        chatbot.set_current_node(self)

    def move_chatbot_to_new_node(self, new_node: GraphNode) -> None:
        """Hand the chatbot over to ``new_node``."""
        chatbot, self.chatbot = self.chatbot, None
        new_node.move_chatbot_here(chatbot)