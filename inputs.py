"""
inputs.py — Input Parsing, Validation & Random Inputs
======================================================
Producers never validate: everything they receive has been through one
of the form parsers below, which either return ready-to-use keyword
arguments or raise InputError naming the offending field.

Form values arrive from JSON, so each field may be a string
("3, 1, 2"), a number, or a list.

Random inputs take an explicit random.Random so a seed reproduces them.
"""

import random
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from config import Settings, get_settings
from structures import BinarySearchTree, Graph, GraphFormatError, LinkedList, Trie


_SPLIT = re.compile(r"[\s,;]+")
_WORD = re.compile(r"^[a-z]+$")
BRACKETS = set("()[]{}")


class InputError(ValueError):
    """Rejected user input.  `field` names the form field at fault."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


@dataclass(frozen=True)
class FormField:
    name:    str
    label:   str
    default: str = ""
    kind:    str = "text"      # text | checkbox


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------
def parse_int(raw: Any, field: str, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    if isinstance(raw, bool):
        raise InputError(field, "expected an integer")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw if raw is not None else "").strip()
        if not text:
            raise InputError(field, "is required")
        try:
            value = int(text)
        except ValueError:
            raise InputError(field, f"{text!r} is not an integer") from None
    if minimum is not None and value < minimum:
        raise InputError(field, f"must be ≥ {minimum}")
    if maximum is not None and value > maximum:
        raise InputError(field, f"must be ≤ {maximum}")
    return value


def parse_int_list(
    raw: Any,
    field: str,
    max_length: int,
    max_value: int,
    allow_empty: bool = True,
    minimum: Optional[int] = None,
) -> List[int]:
    """Accepts "3, 1 2;5" or [3, 1, 2, 5]."""
    if isinstance(raw, (list, tuple)):
        tokens = list(raw)
    else:
        tokens = [t for t in _SPLIT.split(str(raw if raw is not None else "").strip()) if t]
    if not tokens and not allow_empty:
        raise InputError(field, "needs at least one number")
    if len(tokens) > max_length:
        raise InputError(field, f"at most {max_length} values allowed (got {len(tokens)})")
    low = -max_value if minimum is None else max(minimum, -max_value)
    return [parse_int(t, field, low, max_value) for t in tokens]


def parse_word(raw: Any, field: str, max_length: int, allow_empty: bool = False) -> str:
    """Lower-case a–z only (trie alphabet)."""
    word = str(raw if raw is not None else "").strip().lower()
    if not word:
        if allow_empty:
            return ""
        raise InputError(field, "is required")
    if len(word) > max_length:
        raise InputError(field, f"at most {max_length} characters allowed")
    if not _WORD.match(word):
        raise InputError(field, "only letters a–z are allowed")
    return word


def parse_text(raw: Any, field: str, max_length: int) -> str:
    text = str(raw if raw is not None else "")
    if len(text) > max_length:
        raise InputError(field, f"at most {max_length} characters allowed")
    return text


def parse_word_list(raw: Any, field: str, max_length: int, max_word_length: int) -> List[str]:
    if isinstance(raw, (list, tuple)):
        tokens = [str(t) for t in raw]
    else:
        tokens = [t for t in _SPLIT.split(str(raw if raw is not None else "").strip()) if t]
    if len(tokens) > max_length:
        raise InputError(field, f"at most {max_length} words allowed")
    return [parse_word(t, field, max_word_length) for t in tokens]


def parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in ("1", "true", "yes", "on")


def parse_graph(raw: Any, field: str, directed: bool, max_nodes: int, max_value: int) -> Graph:
    text = str(raw if raw is not None else "")
    if not text.strip():
        raise InputError(field, "is required")
    try:
        graph = Graph.from_adjacency_list(text, directed=directed)
    except GraphFormatError as exc:
        raise InputError(field, str(exc)) from None
    if len(graph) > max_nodes:
        raise InputError(field, f"at most {max_nodes} nodes allowed (got {len(graph)})")
    if any(abs(w) > max_value for _, _, w in graph.edges()):
        raise InputError(field, f"edge weights must be within ±{max_value}")
    return graph


def require_sorted(values: List[int], field: str) -> List[int]:
    if any(a > b for a, b in zip(values, values[1:])):
        raise InputError(field, "must be sorted in ascending order")
    return values


# ---------------------------------------------------------------------------
# Random inputs
# ---------------------------------------------------------------------------
def random_array(rng: random.Random, size: int, low: int = 1, high: int = 99) -> List[int]:
    return [rng.randint(low, high) for _ in range(size)]


def random_sorted_array(rng: random.Random, size: int, low: int = 1, high: int = 99) -> List[int]:
    """Distinct sorted values (falls back to repeats when the range is too small)."""
    span = high - low + 1
    if size <= span:
        return sorted(rng.sample(range(low, high + 1), size))
    return sorted(random_array(rng, size, low, high))


def make_rng(seed: Any = None) -> random.Random:
    if seed is None or seed == "":
        return random.Random()
    return random.Random(parse_int(seed, "seed"))


# ---------------------------------------------------------------------------
# Form parsers: one per input shape; referenced from the registry
# ---------------------------------------------------------------------------
def _s(settings: Optional[Settings]) -> Settings:
    return settings or get_settings()


def array_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    return {"array": parse_int_list(form.get("array"), "array", s.max_array_length, s.max_value)}


def search_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    return {
        "array":  parse_int_list(form.get("array"), "array", s.max_array_length, s.max_value),
        "target": parse_int(form.get("target"), "target", -s.max_value, s.max_value),
    }


def sorted_search_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    kwargs = search_form(form, settings)
    require_sorted(kwargs["array"], "array")
    return kwargs


def graph_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    graph = parse_graph(
        form.get("graph"), "graph", parse_bool(form.get("directed", False)),
        s.max_graph_nodes, s.max_value,
    )
    start = str(form.get("start") or "").strip()
    if not start:
        raise InputError("start", "is required")
    if start not in graph:
        raise InputError("start", f"node {start!r} is not in the graph")
    return {"graph": graph, "start": start}


def weighted_graph_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    kwargs = graph_form(form, settings)
    if kwargs["graph"].has_negative_weights():
        raise InputError("graph", "negative edge weights are not supported")
    return kwargs


def fibonacci_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    return {"n": parse_int(form.get("n"), "n", 0, s.max_dp_dimension)}


def knapsack_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    weights = parse_int_list(form.get("weights"), "weights", s.max_dp_dimension, s.max_value, minimum=1)
    values = parse_int_list(form.get("values"), "values", s.max_dp_dimension, s.max_value, minimum=0)
    if len(weights) != len(values):
        raise InputError("values", f"expected {len(weights)} value(s) to match the weights")
    capacity = parse_int(form.get("capacity"), "capacity", 0, s.max_dp_dimension)
    return {"weights": weights, "values": values, "capacity": capacity}


def lcs_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    return {
        "text_a": parse_text(form.get("text_a"), "text_a", s.max_word_length),
        "text_b": parse_text(form.get("text_b"), "text_b", s.max_word_length),
    }


def coin_change_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    coins = parse_int_list(form.get("coins"), "coins", s.max_array_length, s.max_value,
                           allow_empty=False, minimum=1)
    amount = parse_int(form.get("amount"), "amount", 0, s.max_dp_dimension)
    return {"coins": sorted(set(coins)), "amount": amount}


def tree_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    values = parse_int_list(form.get("values"), "values", s.max_array_length, s.max_value)
    value = parse_int(form.get("value"), "value", -s.max_value, s.max_value)
    return {"tree": BinarySearchTree.from_values(values), "value": value}


def avl_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    values = parse_int_list(form.get("values"), "values", s.max_array_length, s.max_value)
    value = parse_int(form.get("value"), "value", -s.max_value, s.max_value)
    return {"tree": BinarySearchTree.from_values(values, balanced=True), "value": value}


def traversal_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    values = parse_int_list(form.get("values"), "values", s.max_array_length, s.max_value)
    return {"tree": BinarySearchTree.from_values(values)}


def trie_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    words = parse_word_list(form.get("words"), "words", s.max_array_length, s.max_word_length)
    word = parse_word(form.get("word"), "word", s.max_word_length)
    return {"trie": Trie.from_words(words), "word": word}


def prefix_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    kwargs = trie_form(form, settings)
    return {"trie": kwargs["trie"], "prefix": kwargs["word"]}


def brackets_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    text = "".join(str(form.get("text") or "").split())
    if len(text) > s.max_array_length:
        raise InputError("text", f"at most {s.max_array_length} brackets allowed")
    bad = sorted(set(text) - BRACKETS)
    if bad:
        raise InputError("text", f"only ()[]{{}} are allowed, found {''.join(bad)!r}")
    return {"text": text}


def linked_list_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    values = parse_int_list(form.get("values"), "values", s.max_array_length, s.max_value)
    return {"linked_list": LinkedList.from_values(values)}


def window_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    array = parse_int_list(form.get("array"), "array", s.max_array_length, s.max_value, allow_empty=False)
    k = parse_int(form.get("k"), "k", 1, len(array))
    return {"array": array, "k": k}


def bits_form(form: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = _s(settings)
    return {"n": parse_int(form.get("n"), "n", 0, s.max_value)}
