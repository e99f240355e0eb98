"""Tests for form parsing, validation and random inputs."""

import pytest

import inputs
from config import Settings
from inputs import InputError

SETTINGS = Settings(max_array_length=8, max_word_length=6, max_graph_nodes=4, max_dp_dimension=10, max_value=100)


def _error(parser, form) -> InputError:
    with pytest.raises(InputError) as excinfo:
        parser(form, SETTINGS)
    return excinfo.value


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("raw", ["3, 1 2;5", [3, 1, 2, 5], ["3", "1", "2", "5"], "  3,,1  2 ;5 "])
def test_int_list_accepts_text_and_lists(raw) -> None:
    assert inputs.parse_int_list(raw, "array", 8, 100) == [3, 1, 2, 5]


def test_int_list_empty_and_bounds() -> None:
    assert inputs.parse_int_list("", "array", 8, 100) == []
    with pytest.raises(InputError, match="at least one"):
        inputs.parse_int_list(" ", "coins", 8, 100, allow_empty=False)
    with pytest.raises(InputError, match="at most 2"):
        inputs.parse_int_list("1 2 3", "array", 2, 100)
    with pytest.raises(InputError, match="≤ 100"):
        inputs.parse_int_list("1 101", "array", 8, 100)
    with pytest.raises(InputError, match="≥ 1"):
        inputs.parse_int_list("0", "coins", 8, 100, minimum=1)


@pytest.mark.parametrize("raw", ["abc", "1.5", "", None, True])
def test_parse_int_rejects_non_integers(raw) -> None:
    with pytest.raises(InputError) as excinfo:
        inputs.parse_int(raw, "target")
    assert excinfo.value.field == "target"


def test_parse_int_accepts_numbers_and_strings() -> None:
    assert inputs.parse_int(" 42 ", "n") == 42
    assert inputs.parse_int(-3, "n") == -3


def test_parse_word_lowercases_and_checks_alphabet() -> None:
    assert inputs.parse_word(" Cat ", "word", 6) == "cat"
    with pytest.raises(InputError, match="a–z"):
        inputs.parse_word("c4t", "word", 6)
    with pytest.raises(InputError, match="at most 6"):
        inputs.parse_word("caterpillar", "word", 6)
    assert inputs.parse_word("", "word", 6, allow_empty=True) == ""


@pytest.mark.parametrize(("raw", "expected"), [(True, True), ("on", True), ("1", True), ("", False), ("no", False)])
def test_parse_bool(raw, expected: bool) -> None:
    assert inputs.parse_bool(raw) is expected


def test_input_error_carries_field_and_message() -> None:
    err = InputError("target", "is required")
    assert isinstance(err, ValueError)
    assert err.field == "target"
    assert str(err) == "target: is required"


# ---------------------------------------------------------------------------
# Form parsers
# ---------------------------------------------------------------------------
def test_sorted_search_form_requires_ascending_array() -> None:
    form = {"array": "1 2 3", "target": "2"}
    assert inputs.sorted_search_form(form, SETTINGS) == {"array": [1, 2, 3], "target": 2}
    err = _error(inputs.sorted_search_form, {"array": "3 1", "target": "1"})
    assert err.field == "array"


def test_search_form_requires_target() -> None:
    assert _error(inputs.search_form, {"array": "1 2"}).field == "target"


def test_graph_form_parses_and_checks_start() -> None:
    kwargs = inputs.graph_form({"graph": "A: B\nB: C", "start": "A", "directed": "on"}, SETTINGS)
    assert kwargs["graph"].directed is True
    assert kwargs["start"] == "A"
    assert _error(inputs.graph_form, {"graph": "A: B", "start": "Z"}).field == "start"
    assert _error(inputs.graph_form, {"graph": "A: B", "start": ""}).field == "start"


@pytest.mark.parametrize(
    "graph",
    ["", "A B", "A: B C D E", "A: B(500)"],
)
def test_graph_form_rejects_bad_graphs(graph: str) -> None:
    assert _error(inputs.graph_form, {"graph": graph, "start": "A"}).field == "graph"


def test_weighted_graph_form_rejects_negative_weights() -> None:
    err = _error(inputs.weighted_graph_form, {"graph": "A: B(-1)", "start": "A"})
    assert err.field == "graph"
    assert "negative" in err.message


def test_knapsack_form_checks_lengths_and_bounds() -> None:
    form = {"weights": "1 2", "values": "3 4", "capacity": "5"}
    assert inputs.knapsack_form(form, SETTINGS) == {"weights": [1, 2], "values": [3, 4], "capacity": 5}
    assert _error(inputs.knapsack_form, {**form, "values": "3"}).field == "values"
    assert _error(inputs.knapsack_form, {**form, "weights": "0 2"}).field == "weights"
    assert _error(inputs.knapsack_form, {**form, "capacity": "11"}).field == "capacity"


def test_fibonacci_form_bounds() -> None:
    assert inputs.fibonacci_form({"n": "10"}, SETTINGS) == {"n": 10}
    assert _error(inputs.fibonacci_form, {"n": "-1"}).field == "n"
    assert _error(inputs.fibonacci_form, {"n": "11"}).field == "n"


def test_coin_change_form_dedupes_and_sorts_coins() -> None:
    kwargs = inputs.coin_change_form({"coins": "4 1 3 1", "amount": "6"}, SETTINGS)
    assert kwargs == {"coins": [1, 3, 4], "amount": 6}
    assert _error(inputs.coin_change_form, {"coins": "", "amount": "6"}).field == "coins"


def test_lcs_form_limits_length() -> None:
    assert inputs.lcs_form({"text_a": "AB", "text_b": ""}, SETTINGS) == {"text_a": "AB", "text_b": ""}
    assert _error(inputs.lcs_form, {"text_a": "ABCDEFG", "text_b": "A"}).field == "text_a"


def test_tree_forms_build_trees() -> None:
    kwargs = inputs.tree_form({"values": "5 3 8", "value": "4"}, SETTINGS)
    assert kwargs["tree"].inorder() == [3, 5, 8]
    assert kwargs["value"] == 4
    avl = inputs.avl_form({"values": "1 2 3", "value": "4"}, SETTINGS)
    assert avl["tree"].is_balanced()
    assert inputs.traversal_form({"values": ""}, SETTINGS)["tree"].root is None


def test_trie_forms() -> None:
    kwargs = inputs.trie_form({"words": "car, Cart", "word": "cat"}, SETTINGS)
    assert kwargs["trie"].words() == ["car", "cart"]
    assert kwargs["word"] == "cat"
    assert inputs.prefix_form({"words": "car", "word": "ca"}, SETTINGS)["prefix"] == "ca"
    assert _error(inputs.trie_form, {"words": "c-r", "word": "cat"}).field == "words"
    assert _error(inputs.trie_form, {"words": "car", "word": ""}).field == "word"


def test_brackets_form_strips_spaces_and_rejects_other_characters() -> None:
    assert inputs.brackets_form({"text": "( [ ] )"}, SETTINGS) == {"text": "([])"}
    err = _error(inputs.brackets_form, {"text": "(a)"})
    assert err.field == "text"
    assert "'a'" in err.message
    assert _error(inputs.brackets_form, {"text": "()" * 5}).field == "text"


def test_linked_list_form() -> None:
    kwargs = inputs.linked_list_form({"values": "1 2 3"}, SETTINGS)
    assert kwargs["linked_list"].values() == [1, 2, 3]


# ---------------------------------------------------------------------------
# Random inputs
# ---------------------------------------------------------------------------
def test_make_rng_is_deterministic_for_a_seed() -> None:
    first = inputs.random_array(inputs.make_rng("7"), 10)
    second = inputs.random_array(inputs.make_rng(7), 10)
    assert first == second
    assert all(1 <= v <= 99 for v in first)


def test_make_rng_rejects_bad_seed() -> None:
    with pytest.raises(InputError):
        inputs.make_rng("seven")


def test_random_sorted_array_is_sorted_and_distinct() -> None:
    values = inputs.random_sorted_array(inputs.make_rng(3), 20)
    assert values == sorted(set(values))
    assert len(values) == 20


def test_random_sorted_array_falls_back_to_repeats() -> None:
    values = inputs.random_sorted_array(inputs.make_rng(3), 10, low=1, high=3)
    assert values == sorted(values)
    assert len(values) == 10
