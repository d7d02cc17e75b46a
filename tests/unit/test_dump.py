"""Tests for dump and walk."""

import pytest

from contools.colors import Color
from contools.dump import dump, walk


def lines(term) -> list[str]:
    return term.output.splitlines()


class TestDump:
    """Tests for dump."""

    def test_scalar(self, make_terminal) -> None:
        term = make_terminal()
        dump(42, terminal=term)
        assert lines(term) == ["42"]

    def test_nested_sequence_is_pre_order(self, make_terminal) -> None:
        term = make_terminal()
        dump([1, [2, 3], 4], terminal=term)
        assert lines(term) == ["[1, [2, 3], 4]", "1", "[2, 3]", "2", "3", "4"]

    def test_string_is_not_iterated(self, make_terminal) -> None:
        term = make_terminal()
        dump("abc", terminal=term)
        assert lines(term) == ["abc"]

    def test_strings_inside_collections(self, make_terminal) -> None:
        term = make_terminal()
        dump(("ab", "cd"), terminal=term)
        assert lines(term) == ["('ab', 'cd')", "ab", "cd"]

    def test_none_elements_are_skipped(self, make_terminal) -> None:
        term = make_terminal()
        dump([1, None, 2], terminal=term)
        assert lines(term) == ["[1, None, 2]", "1", "2"]

    def test_top_level_none_is_printed(self, make_terminal) -> None:
        term = make_terminal()
        dump(None, terminal=term)
        assert lines(term) == ["None"]

    def test_mapping_items(self, make_terminal) -> None:
        term = make_terminal()
        dump({"a": 1, "b": [2]}, terminal=term)
        assert lines(term) == ["{'a': 1, 'b': [2]}", "('a', 1)", "('b', [2])"]

    def test_mapping_nested_in_sequence(self, make_terminal) -> None:
        term = make_terminal()
        dump([{"k": "v"}, 3], terminal=term)
        assert lines(term) == ["[{'k': 'v'}, 3]", "{'k': 'v'}", "('k', 'v')", "3"]

    def test_generator_is_printed_then_consumed(self, make_terminal) -> None:
        term = make_terminal()
        gen = (n * 2 for n in range(2))
        dump(gen, terminal=term)
        output = lines(term)
        assert output[0].startswith("<generator object")
        assert output[1:] == ["0", "2"]

    def test_text_is_literal(self, make_terminal) -> None:
        term = make_terminal()
        dump(["[bold]x[/bold]"], terminal=term)
        assert lines(term) == ["['[bold]x[/bold]']", "[bold]x[/bold]"]

    def test_uses_current_colors(self, make_terminal) -> None:
        term = make_terminal()
        term.foreground = Color.GREEN
        seen = []
        term.write = lambda text, newline=False: seen.append((text, newline, term.foreground))
        dump([1], terminal=term)
        assert seen == [("[1]", True, Color.GREEN), ("1", True, Color.GREEN)]


class TestWalk:
    """Tests for walk."""

    def test_is_lazy(self) -> None:
        consumed = []

        def source():
            for n in (1, 2, 3):
                consumed.append(n)
                yield n

        items = walk(source())
        next(items)
        assert consumed == []
        assert next(items) == 1
        assert consumed == [1]

    def test_siblings_follow_completed_subtrees(self) -> None:
        assert list(walk([[1, [2]], 3]))[1:] == [[1, [2]], 1, [2], 2, 3]

    def test_sets_and_tuples(self) -> None:
        assert list(walk((frozenset({5}),))) == [(frozenset({5}),), frozenset({5}), 5]

    def test_cycle_without_detection_recurses(self) -> None:
        items = [1]
        items.append(items)
        with pytest.raises(RecursionError):
            list(walk(items))

    def test_cycle_detection(self) -> None:
        items = [1]
        items.append(items)
        result = list(walk(items, detect_cycles=True))
        assert len(result) == 3
        assert result[0] is items
        assert result[1] == 1
        assert result[2] is items

    def test_shared_container_is_not_a_cycle(self) -> None:
        shared = [1]
        result = list(walk([shared, shared], detect_cycles=True))
        assert result[1:] == [[1], 1, [1], 1]

    def test_dump_with_cycle_detection(self, make_terminal) -> None:
        term = make_terminal()
        items = ["a"]
        items.append(items)
        dump(items, detect_cycles=True, terminal=term)
        assert lines(term) == ["['a', [...]]", "a", "['a', [...]]"]
