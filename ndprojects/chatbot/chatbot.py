"""The chatbot that walks the answer graph by keyword similarity."""

from __future__ import annotations

import random


def levenshtein_distance(s1: str, s2: str) -> int:
    """Case-insensitive edit distance between two strings."""
    s1 = s1.upper()
    s2 = s2.upper()
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    costs = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        costs[0] = i + 1
        corner = i
        for j, c2 in enumerate(s2):
            upper = costs[j + 1]
            if c1 == c2:
                costs[j + 1] = corner
            else:
                costs[j + 1] = min(costs[j], upper, corner) + 1
            corner = upper
    return costs[len(s2)]


class ChatBot:
    """Answers from its current graph node and follows the best-matching edge."""

    def __init__(self, image_path=None, rng=None):
        self.image_path = image_path
        self.current_node = None
        self.root_node = None
        self.chat_logic = None
        self._rng = rng if rng is not None else random.Random()

    def set_current_node(self, node) -> None:
        """Move to ``node`` and send one of its answers to the user."""
        self.current_node = node
        if not node.answers:
            raise ValueError(f"node {node.id} has no answers")
        answer = self._rng.choice(node.answers)
        if self.chat_logic is not None:
            self.chat_logic.send_message_to_user(answer)

    def receive_message_from_user(self, message: str) -> None:
        """Follow the edge whose keyword is closest to ``message``, or return to the root."""
        candidates = [
            (levenshtein_distance(keyword, message), edge)
            for edge in self.current_node.child_edges
            for keyword in edge.keywords
        ]
        if candidates:
            _, best_edge = min(candidates, key=lambda candidate: candidate[0])
            new_node = best_edge.child_node
        else:
            new_node = self.root_node
        self.current_node.move_chatbot_to_new_node(new_node)