from itertools import permutations

import pytest

from keyedit.edit_list import (
    APPEND,
    CREATE,
    KEEP,
    MOVE_AFTER,
    MOVE_BEFORE,
    REMOVE,
    Edit,
    EditList,
)
from keyedit.replay import apply_edits


def edits(old, new):
    return [
        (edit.ty, edit.key) if edit.ref is None else (edit.ty, edit.key, edit.ref)
        for edit in EditList.diff(old, new)
    ]


CASES = [
    (
        "identical lists",
        "ABCDE",
        "ABCDE",
        [(KEEP, "A"), (KEEP, "B"), (KEEP, "C"), (KEEP, "D"), (KEEP, "E")],
    ),
    (
        "completely empty old",
        "",
        "ABCDE",
        [(APPEND, "A"), (APPEND, "B"), (APPEND, "C"), (APPEND, "D"), (APPEND, "E")],
    ),
    (
        "completely empty target",
        "ABCDE",
        "",
        [(REMOVE, "A"), (REMOVE, "B"), (REMOVE, "C"), (REMOVE, "D"), (REMOVE, "E")],
    ),
    (
        "complete swap",
        "ABCDE",
        "FGHIJ",
        [
            (CREATE, "F", "A"),
            (CREATE, "G", "A"),
            (CREATE, "H", "A"),
            (CREATE, "I", "A"),
            (CREATE, "J", "A"),
            (REMOVE, "A"),
            (REMOVE, "B"),
            (REMOVE, "C"),
            (REMOVE, "D"),
            (REMOVE, "E"),
        ],
    ),
    (
        "swap middle",
        "ABCDE",
        "ABDCE",
        [(KEEP, "A"), (KEEP, "B"), (KEEP, "E"), (MOVE_AFTER, "C", "D"), (KEEP, "D")],
    ),
    (
        "middle subset",
        "ABCDE",
        "BCD",
        [
            (MOVE_BEFORE, "B", "A"),
            (MOVE_BEFORE, "C", "A"),
            (MOVE_BEFORE, "D", "A"),
            (REMOVE, "A"),
            (REMOVE, "E"),
        ],
    ),
    (
        "single item overlap",
        "ABC",
        "CDE",
        [
            (MOVE_BEFORE, "C", "A"),
            (CREATE, "D", "A"),
            (CREATE, "E", "A"),
            (REMOVE, "A"),
            (REMOVE, "B"),
        ],
    ),
    (
        "remove initial and from middle",
        "ABCDE",
        "BCE",
        [
            (KEEP, "E"),
            (MOVE_BEFORE, "B", "A"),
            (MOVE_BEFORE, "C", "A"),
            (REMOVE, "A"),
            (REMOVE, "D"),
        ],
    ),
    (
        "remove initial",
        "ABCDE",
        "BCDE",
        [(KEEP, "E"), (KEEP, "D"), (KEEP, "C"), (KEEP, "B"), (REMOVE, "A")],
    ),
    (
        "append",
        "ABCDE",
        "ABCDEF",
        [
            (KEEP, "A"),
            (KEEP, "B"),
            (KEEP, "C"),
            (KEEP, "D"),
            (KEEP, "E"),
            (APPEND, "F"),
        ],
    ),
    (
        "insert",
        "AB",
        "ACB",
        [(KEEP, "A"), (KEEP, "B"), (CREATE, "C", "B")],
    ),
    (
        "insert multiple",
        "AB",
        "ACDEB",
        [
            (KEEP, "A"),
            (KEEP, "B"),
            (CREATE, "C", "B"),
            (CREATE, "D", "B"),
            (CREATE, "E", "B"),
        ],
    ),
    (
        "move head to tail",
        "ABC",
        "BCA",
        [(MOVE_AFTER, "A", "C"), (KEEP, "B"), (KEEP, "C")],
    ),
    (
        "move tail to head",
        "ABC",
        "CAB",
        [(MOVE_BEFORE, "C", "A"), (KEEP, "A"), (KEEP, "B")],
    ),
    (
        "reverse",
        "ABCD",
        "DCBA",
        [
            (MOVE_AFTER, "A", "D"),
            (MOVE_AFTER, "B", "D"),
            (MOVE_AFTER, "C", "D"),
            (KEEP, "D"),
        ],
    ),
]


@pytest.mark.parametrize(
    "old, new, expected",
    [case[1:] for case in CASES],
    ids=[case[0] for case in CASES],
)
def test_it_computes_the_edit_list(old, new, expected):
    assert edits(list(old), list(new)) == expected


@pytest.mark.parametrize(
    "old, new",
    [case[1:3] for case in CASES],
    ids=[case[0] for case in CASES],
)
def test_replaying_the_edits_produces_the_new_list(old, new):
    assert apply_edits(list(old), EditList.diff(list(old), list(new))) == list(new)


def test_it_does_not_mutate_the_inputs():
    old = ["A", "B", "C", "D", "E"]
    new = ["B", "C", "D"]
    EditList.diff(old, new)

    assert old == ["A", "B", "C", "D", "E"]
    assert new == ["B", "C", "D"]


def test_it_treats_falsy_keys_like_any_other_key():
    assert edits(["", 0, "x"], ["x", "", 0, None]) == [
        (MOVE_BEFORE, "x", ""),
        (KEEP, ""),
        (KEEP, 0),
        (APPEND, None),
    ]


def test_it_uses_a_falsy_key_as_an_insertion_anchor():
    assert edits(["a", ""], ["a", "b", ""]) == [
        (KEEP, "a"),
        (KEEP, ""),
        (CREATE, "b", ""),
    ]
    assert edits(["a", 0], ["a", "b", 0]) == [
        (KEEP, "a"),
        (KEEP, 0),
        (CREATE, "b", 0),
    ]


def test_it_never_anchors_on_a_relocated_key():
    old = ["A", "B", "C", "D"]
    new = ["C", "A", "B", "X"]

    assert edits(old, new) == [
        (MOVE_BEFORE, "C", "A"),
        (KEEP, "A"),
        (KEEP, "B"),
        (CREATE, "X", "D"),
        (REMOVE, "D"),
    ]
    assert apply_edits(old, EditList.diff(old, new)) == new


def test_each_is_lazy():
    stream = EditList(["A", "B"], ["B", "A"]).each()
    assert next(stream) == Edit(MOVE_AFTER, "A", "B")
    assert list(stream) == [Edit(KEEP, "B")]


class TestProperties:
    KEYS = "ABCDE"

    @staticmethod
    def sequences(alphabet, max_len):
        for n in range(max_len + 1):
            yield from permutations(alphabet, n)

    @pytest.fixture
    def pairs(self):
        olds = list(self.sequences(self.KEYS[:4], 4))
        news = list(self.sequences(self.KEYS, 3)) + list(permutations(self.KEYS))
        return [(list(o), list(n)) for o in olds for n in news]

    def test_replay_reproduces_the_new_list(self, pairs):
        for old, new in pairs:
            assert apply_edits(old, EditList.diff(old, new)) == new, (old, new)

    def test_every_key_gets_exactly_one_edit_of_the_right_kind(self, pairs):
        for old, new in pairs:
            result = EditList.diff(old, new)
            by_key = {}
            for edit in result:
                assert edit.key not in by_key, (old, new, edit)
                by_key[edit.key] = edit.ty

            assert set(by_key) == set(old) | set(new)
            for key, ty in by_key.items():
                if key in old and key in new:
                    assert ty in (KEEP, MOVE_BEFORE, MOVE_AFTER)
                elif key in new:
                    assert ty in (CREATE, APPEND)
                else:
                    assert ty == REMOVE

    def test_identical_lists_are_all_kept(self):
        for seq in self.sequences(self.KEYS, 5):
            assert EditList.diff(seq, seq) == [Edit(KEEP, key) for key in seq]

    def test_empty_old_list_appends_everything(self):
        for seq in self.sequences(self.KEYS, 3):
            assert EditList.diff([], seq) == [Edit(APPEND, key) for key in seq]

    def test_empty_new_list_removes_everything(self):
        for seq in self.sequences(self.KEYS, 3):
            assert EditList.diff(seq, []) == [Edit(REMOVE, key) for key in seq]


class TestEditText:
    @pytest.mark.parametrize(
        "edit, text",
        [
            (Edit(KEEP, "a"), "keep a"),
            (Edit(MOVE_BEFORE, "a", "b"), "move-before a b"),
            (Edit(MOVE_AFTER, "a", "b"), "move-after a b"),
            (Edit(CREATE, "a", "b"), "create a b"),
            (Edit(APPEND, "a"), "append a"),
            (Edit(REMOVE, "a"), "remove a"),
        ],
    )
    def test_it_renders_and_parses_edits(self, edit, text):
        assert str(edit) == text
        assert Edit.parse(text) == edit

    def test_it_ignores_surrounding_whitespace(self):
        assert Edit.parse("  create x   y \n") == Edit(CREATE, "x", "y")

    @pytest.mark.parametrize(
        "line, message",
        [
            ("", "empty edit line"),
            ("swap a b", "unknown edit type: swap"),
            ("keep a b", "wrong number of fields for keep: keep a b"),
            ("create a", "wrong number of fields for create: create a"),
        ],
    )
    def test_it_rejects_malformed_lines(self, line, message):
        with pytest.raises(Edit.ParseError, match=message):
            Edit.parse(line)
