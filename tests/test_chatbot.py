import random

import pytest

from ndprojects.chatbot.chatbot import ChatBot, levenshtein_distance
from ndprojects.chatbot.graph import GraphEdge, GraphNode


class RecordingLogic:
    def __init__(self):
        self.messages = []

    def send_message_to_user(self, message):
        self.messages.append(message)


def connect(parent, child, edge_id, *keywords):
    edge = GraphEdge(edge_id)
    edge.parent_node = parent
    edge.child_node = child
    for keyword in keywords:
        edge.add_token(keyword)
    parent.add_child_edge(edge)
    child.add_parent_edge(edge)
    return edge


def node(node_id, *answers):
    result = GraphNode(node_id)
    for answer in answers:
        result.add_token(answer)
    return result


def test_levenshtein_known_example():
    assert levenshtein_distance("kitten", "sitting") == 3


def test_levenshtein_identity_and_case():
    assert levenshtein_distance("weather", "weather") == 0
    assert levenshtein_distance("Hello", "hELLO") == 0


def test_levenshtein_empty_strings():
    assert levenshtein_distance("", "abcd") == len("abcd")
    assert levenshtein_distance("abc", "") == len("abc")
    assert levenshtein_distance("", "") == 0


@pytest.mark.parametrize("a,b", [("flaw", "lawn"), ("graph", "giraffe"), ("abc", "yabd")])
def test_levenshtein_symmetric_and_bounded(a, b):
    d = levenshtein_distance(a, b)
    assert d == levenshtein_distance(b, a)
    assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))


def make_bot():
    bot = ChatBot(rng=random.Random(0))
    logic = RecordingLogic()
    bot.chat_logic = logic
    return bot, logic


def test_set_current_node_sends_answer():
    bot, logic = make_bot()
    start = node(1, "hello")
    bot.set_current_node(start)
    assert bot.current_node is start
    assert logic.messages == ["hello"]


def test_set_current_node_picks_one_of_the_answers():
    bot, logic = make_bot()
    start = node(1, "hi", "hey", "howdy")
    for _ in range(10):
        bot.set_current_node(start)
    assert set(logic.messages) <= {"hi", "hey", "howdy"}
    assert len(logic.messages) == 10


def test_set_current_node_without_answers():
    bot, _ = make_bot()
    with pytest.raises(ValueError):
        bot.set_current_node(node(1))


def test_receive_message_follows_closest_keyword_then_returns_to_root():
    bot, logic = make_bot()
    root = node(1, "hello")
    weather = node(2, "sunny")
    food = node(3, "pizza")
    connect(root, weather, 10, "weather")
    connect(root, food, 11, "food", "dinner")
    bot.root_node = root
    root.move_chatbot_here(bot)

    bot.receive_message_from_user("wether")
    assert weather.chatbot is bot
    assert root.chatbot is None
    assert bot.current_node is weather
    assert logic.messages[-1] == "sunny"

    bot.receive_message_from_user("anything")
    assert root.chatbot is bot
    assert weather.chatbot is None
    assert logic.messages == ["hello", "sunny", "hello"]


def test_receive_message_chooses_best_keyword_among_edges():
    bot, logic = make_bot()
    root = node(1, "hello")
    weather = node(2, "sunny")
    food = node(3, "pizza")
    connect(root, weather, 10, "weather")
    connect(root, food, 11, "food", "dinner")
    bot.root_node = root
    root.move_chatbot_here(bot)
    bot.receive_message_from_user("DINNER")
    assert food.chatbot is bot
    assert logic.messages[-1] == "pizza"