"""Loading the answer graph and passing messages between user and chatbot."""

from __future__ import annotations

import argparse
import logging
import re
import sys

from .chatbot import ChatBot
from .graph import GraphEdge, GraphNode

DATA_PATH = "../"
DEFAULT_GRAPH = DATA_PATH + "src/answergraph.txt"
DEFAULT_IMAGE = DATA_PATH + "images/chatbot.png"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

log = logging.getLogger(__name__)


def _stoi(text: str) -> int:
    """Parse the leading integer of ``text``."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def parse_tokens(line: str) -> list[tuple[str, str]]:
    """Split a graph file line into ``(type, info)`` pairs from ``<TYPE:INFO>`` tokens.

    Tokens without a colon are skipped; parsing stops at the first
    incomplete token.
    """
    tokens: list[tuple[str, str]] = []
    while line:
        front = line.find("<")
        back = line.find(">")
        if front < 0 or back < 0:
            break
        start = front + 1
        length = back - 1
        token = line[start:] if length < 0 else line[start : start + length]
        kind, sep, info = token.partition(":")
        if sep:
            tokens.append((kind, info))
        line = line[back + 1 :]
    return tokens


def _first(tokens, key: str) -> str | None:
    return next((info for kind, info in tokens if kind == key), None)


def _all(tokens, key: str) -> list[str]:
    return [info for kind, info in tokens if kind == key]


class ChatLogic:
    """Owns the answer graph and routes messages to and from the chatbot."""

    def __init__(self, on_response=None, image_path=DEFAULT_IMAGE):
        self.nodes: list[GraphNode] = []
        self.chatbot: ChatBot | None = None
        self.image_path = image_path
        self._on_response = on_response

    def _node(self, node_id: int) -> GraphNode | None:
        return next((node for node in self.nodes if node.id == node_id), None)

    def _require_node(self, node_id: int) -> GraphNode:
        node = self._node(node_id)
        if node is None:
            raise ValueError(f"edge refers to unknown node {node_id}")
        return node

    def _process_line(self, tokens) -> None:
        kind = _first(tokens, "TYPE")
        if kind is None:
            return
        id_text = _first(tokens, "ID")
        if id_text is None:
            log.warning("ID missing. Line is ignored!")
            return
        element_id = _stoi(id_text)

        if kind == "NODE" and self._node(element_id) is None:
            node = GraphNode(element_id)
            for answer in _all(tokens, "ANSWER"):
                node.add_token(answer)
            self.nodes.append(node)

        if kind == "EDGE":
            parent_text = _first(tokens, "PARENT")
            child_text = _first(tokens, "CHILD")
            if parent_text is None or child_text is None:
                return
            parent = self._require_node(_stoi(parent_text))
            child = self._require_node(_stoi(child_text))
            edge = GraphEdge(element_id)
            edge.child_node = child
            edge.parent_node = parent
            for keyword in _all(tokens, "KEYWORD"):
                edge.add_token(keyword)
            child.add_parent_edge(edge)
            parent.add_child_edge(edge)

    def _find_root(self) -> GraphNode:
        roots = [node for node in self.nodes if not node.parent_edges]
        if not roots:
            raise ValueError("the answer graph has no root node")
        if len(roots) > 1:
            log.error("Multiple root nodes detected")
        return roots[0]

    def load_answer_graph(self, filename) -> None:
        """Build the graph from ``filename`` and place a new chatbot at its root."""
        with open(filename, encoding="utf-8") as stream:
            for line in stream:
                self._process_line(parse_tokens(line.rstrip("\n")))

        root = self._find_root()
        chatbot = ChatBot(self.image_path)
        chatbot.root_node = root
        chatbot.chat_logic = self
        self.chatbot = chatbot
        root.move_chatbot_here(chatbot)

    def send_message_to_chatbot(self, message: str) -> None:
        """Pass a user message to the chatbot."""
        if self.chatbot is None:
            raise RuntimeError("no answer graph has been loaded")
        self.chatbot.receive_message_from_user(message)

    def send_message_to_user(self, message: str) -> None:
        """Deliver a chatbot answer to the user."""
        if self._on_response is not None:
            self._on_response(message)
        else:
            print(message)


def main(argv=None) -> int:
    """Chat on the console: one message per input line, answers on output."""
    parser = argparse.ArgumentParser(description="Talk to the chatbot.")
    parser.add_argument("--graph", default=DEFAULT_GRAPH, help="answer graph file")
    parser.add_argument("--image", default=DEFAULT_IMAGE, help="chatbot avatar image")
    args = parser.parse_args(argv)

    logic = ChatLogic(image_path=args.image)
    try:
        logic.load_answer_graph(args.graph)
    except OSError:
        print("File could not be opened!", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for line in sys.stdin:
        message = line.strip()
        if message:
            logic.send_message_to_chatbot(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())