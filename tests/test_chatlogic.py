import io

import pytest

from ndprojects.chatbot.chatlogic import ChatLogic, main, parse_tokens

GRAPH = "\n".join(
    [
        "<TYPE:NODE><ID:0><ANSWER:Welcome>",
        "<TYPE:NODE><ID:1><ANSWER:Pizza is great>",
        "<TYPE:NODE><ID:2><ANSWER:Pasta too>",
        "<TYPE:EDGE><ID:0><PARENT:0><CHILD:1><KEYWORD:pizza>",
        "<TYPE:EDGE><ID:1><PARENT:0><CHILD:2><KEYWORD:pasta>",
    ]
) + "\n"


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "answergraph.txt"
    path.write_text(GRAPH, encoding="utf-8")
    return path


@pytest.fixture
def loaded(graph_file):
    responses = []
    logic = ChatLogic(on_response=responses.append, image_path="avatar.png")
    logic.load_answer_graph(graph_file)
    return logic, responses


def test_parse_tokens_splits_pairs():
    tokens = parse_tokens("<TYPE:NODE><ID:0><ANSWER:Hello there>")
    assert tokens == [("TYPE", "NODE"), ("ID", "0"), ("ANSWER", "Hello there")]


def test_parse_tokens_keeps_colons_in_info():
    assert parse_tokens("<ANSWER:a:b>") == [("ANSWER", "a:b")]


def test_parse_tokens_skips_tokens_without_colon():
    assert parse_tokens("<AB><C:d>") == [("C", "d")]


def test_parse_tokens_stops_at_incomplete_token():
    assert parse_tokens("<A:b") == []
    assert parse_tokens("") == []


def test_load_builds_graph(loaded):
    logic, _ = loaded
    assert [node.id for node in logic.nodes] == [0, 1, 2]
    root = logic.nodes[0]
    assert [edge.keywords for edge in root.child_edges] == [["pizza"], ["pasta"]]
    assert [edge.child_node for edge in root.child_edges] == logic.nodes[1:]
    assert logic.nodes[1].parent_edges[0].parent_node is root


def test_chatbot_starts_at_root_and_greets(loaded):
    logic, responses = loaded
    assert responses == ["Welcome"]
    assert logic.chatbot.current_node is logic.nodes[0]
    assert logic.nodes[0].chatbot is logic.chatbot
    assert logic.chatbot.image_path == "avatar.png"


def test_message_follows_closest_keyword(loaded):
    logic, responses = loaded
    logic.send_message_to_chatbot("PASTA")
    assert responses[-1] == "Pasta too"
    assert logic.chatbot.current_node is logic.nodes[2]
    assert logic.nodes[0].chatbot is None


def test_leaf_returns_to_root(loaded):
    logic, responses = loaded
    logic.send_message_to_chatbot("pizza")
    logic.send_message_to_chatbot("anything")
    assert responses == ["Welcome", "Pizza is great", "Welcome"]
    assert logic.chatbot.current_node is logic.nodes[0]


def test_duplicate_node_keeps_first(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(
        "<TYPE:NODE><ID:0><ANSWER:first>\n<TYPE:NODE><ID:0><ANSWER:second>\n",
        encoding="utf-8",
    )
    logic = ChatLogic(on_response=lambda message: None)
    logic.load_answer_graph(path)
    assert len(logic.nodes) == 1
    assert logic.nodes[0].answers == ["first"]


def test_line_without_id_is_ignored(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(
        "<TYPE:NODE><ID:0><ANSWER:hi>\n<TYPE:NODE><ANSWER:lost>\n", encoding="utf-8"
    )
    logic = ChatLogic(on_response=lambda message: None)
    logic.load_answer_graph(path)
    assert [node.answers for node in logic.nodes] == [["hi"]]


def test_missing_file_raises(tmp_path):
    logic = ChatLogic(on_response=lambda message: None)
    with pytest.raises(FileNotFoundError):
        logic.load_answer_graph(tmp_path / "missing.txt")


def test_edge_to_unknown_node_raises(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(
        "<TYPE:NODE><ID:0><ANSWER:hi>\n<TYPE:EDGE><ID:0><PARENT:0><CHILD:7>\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        ChatLogic(on_response=lambda message: None).load_answer_graph(path)


def test_send_before_load_raises():
    with pytest.raises(RuntimeError):
        ChatLogic().send_message_to_chatbot("hello")


def test_main_chats_over_stdin(graph_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pizza\n\nhello\n"))
    assert main(["--graph", str(graph_file)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Welcome", "Pizza is great", "Welcome"]


def test_main_reports_missing_file(tmp_path, capsys):
    assert main(["--graph", str(tmp_path / "none.txt")]) == 1
    assert "File could not be opened!" in capsys.readouterr().err