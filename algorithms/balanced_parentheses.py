"""
balanced_parentheses.py — Bracket Matching with a Stack
========================================================
The stack (bottom → top) is the structure; the input cursor lives in
`overlay["input"]` / pointer "i".
"""

from typing import Iterator, List

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def balanced(text):",                              # 0
    "    stack ← []",                                   # 1
    "    for ch in text:",                              # 2
    "        if ch is an opener: stack.push(ch)",       # 3
    "        else:",                                    # 4
    "            if stack is empty: return False",      # 5
    "            if stack.top does not match ch: return False",  # 6
    "            stack.pop()",                          # 7
    "    return stack is empty",                        # 8
]

PAIRS = {")": "(", "]": "[", "}": "{"}
OPENERS = set(PAIRS.values())


def balanced_parentheses(text: str) -> Iterator[Snapshot]:
    stack: List[str] = []
    sb = SnapshotBuilder(StructureKind.STACK, stack)

    def _frame(i: int, line: int, message: str) -> None:
        sb.reset()
        sb.overlay["input"] = text
        sb.point("i", i)
        sb.pseudocode_line = line
        sb.message = message

    _frame(0, 1, f"Check '{text}' with an empty stack." if text else "Empty input.")
    yield sb.build()

    for i, ch in enumerate(text):
        if ch in OPENERS:
            stack.append(ch)
            _frame(i, 3, f"'{ch}' opens a group: push it.")
            sb.highlight(len(stack) - 1)
            yield sb.build()
            continue

        if ch not in PAIRS:
            _frame(i, 2, f"'{ch}' is not a bracket: ignore it.")
            yield sb.build()
            continue

        if not stack:
            _frame(i, 5, f"'{ch}' closes a group but the stack is empty: unbalanced.")
            yield sb.build(is_final=True, result={"balanced": False, "position": i})
            return

        top = len(stack) - 1
        _frame(i, 6, f"Compare top '{stack[top]}' with '{ch}'.")
        sb.compare(top)
        yield sb.build()

        if stack[top] != PAIRS[ch]:
            _frame(i, 6, f"'{stack[top]}' does not match '{ch}': unbalanced.")
            sb.compare(top)
            yield sb.build(is_final=True, result={"balanced": False, "position": i})
            return

        stack.pop()
        _frame(i, 7, f"'{PAIRS[ch]}' matches '{ch}': pop.")
        yield sb.build()

    balanced = not stack
    _frame(len(text), 8, "Stack is empty: balanced." if balanced else f"{len(stack)} unmatched opener(s) left: unbalanced.")
    sb.highlight(*range(len(stack)))
    yield sb.build(is_final=True, result={"balanced": balanced, "position": None if balanced else len(text)})
