import logging

import pytest

from grouplist import (
    DuplicateGroupLabelError,
    GroupedListModel,
    IndexOutOfRangeError,
    MissingGroupDataError,
)


@pytest.fixture()
def model() -> GroupedListModel:
    return GroupedListModel(["A", "B"], {"A": ["a1", "a2"], "B": ["b1"]})


def test_example_queries(model: GroupedListModel) -> None:
    assert model.group_count() == 2
    assert model.child_count(0) == 2
    assert model.child_label(0, 1) == "a2"
    assert model.child_count(1) == 1
    assert model.child_label(1, 0) == "b1"


def test_group_labels_follow_display_order(model: GroupedListModel) -> None:
    assert [model.group_label(i) for i in range(model.group_count())] == ["A", "B"]


def test_child_labels_match_resolved_sequence() -> None:
    children = {"x": ["1", "2", "3"], "y": [], "z": ["only"]}
    model = GroupedListModel(["z", "x", "y"], children)
    for group_index in range(model.group_count()):
        expected = children[model.group_label(group_index)]
        assert model.child_count(group_index) == len(expected)
        assert [model.child_label(group_index, c) for c in range(len(expected))] == expected


def test_empty_model() -> None:
    model = GroupedListModel([], {})
    assert model.group_count() == 0
    assert len(model) == 0
    assert list(model.iter_rows()) == []


@pytest.mark.parametrize("index", [5, 2, -1, True, "0", None])
def test_group_label_out_of_range(model: GroupedListModel, index) -> None:
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        model.group_label(index)
    assert excinfo.value.kind == "group"
    assert excinfo.value.size == 2


def test_child_label_out_of_range(model: GroupedListModel) -> None:
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        model.child_label(1, 1)
    assert excinfo.value.kind == "child"
    assert excinfo.value.index == 1
    with pytest.raises(IndexOutOfRangeError):
        model.child_label(0, -1)
    with pytest.raises(IndexOutOfRangeError):
        model.child_label(7, 0)


def test_child_count_out_of_range(model: GroupedListModel) -> None:
    with pytest.raises(IndexOutOfRangeError):
        model.child_count(2)


def test_index_error_is_builtin_compatible(model: GroupedListModel) -> None:
    with pytest.raises(IndexError):
        model.group_label(5)


def test_missing_group_data_is_explicit(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="grouplist.model"):
        model = GroupedListModel(["A", "B"], {"A": ["a1"]})
    assert "B" in caplog.text
    assert model.child_count(0) == 1
    with pytest.raises(MissingGroupDataError) as excinfo:
        model.child_count(1)
    assert excinfo.value.label == "B"
    with pytest.raises(MissingGroupDataError):
        model.child_label(1, 0)
    # Group-level queries still work for the incomplete group.
    assert model.group_label(1) == "B"


def test_strict_rejects_missing_group_data() -> None:
    with pytest.raises(MissingGroupDataError):
        GroupedListModel(["A", "B"], {"A": []}, strict=True)


def test_duplicate_group_labels_rejected() -> None:
    with pytest.raises(DuplicateGroupLabelError) as excinfo:
        GroupedListModel(["A", "B", "A"], {"A": [], "B": []})
    assert excinfo.value.label == "A"


def test_selectability_is_constant(model: GroupedListModel) -> None:
    for group_index, child_index in [(0, 0), (1, 0), (5, 9), (-1, -1)]:
        assert model.is_child_selectable(group_index, child_index) is True


def test_identities_are_positional(model: GroupedListModel) -> None:
    assert model.has_stable_identities() is False
    assert model.group_identity(1) == 1
    assert model.child_identity(0, 1) == 1
    assert model.child_identity(1, 0) == 0


def test_model_copies_its_inputs() -> None:
    groups = ["A"]
    children = {"A": ["a1"]}
    model = GroupedListModel(groups, children)
    groups.append("B")
    children["A"].append("a2")
    assert model.group_count() == 1
    assert model.child_count(0) == 1
    with pytest.raises(TypeError):
        model.children_by_group["A"] = ("x",)  # type: ignore[index]


def test_iter_rows_in_display_order(model: GroupedListModel) -> None:
    assert list(model.iter_rows()) == [
        (0, None, "A"),
        (0, 0, "a1"),
        (0, 1, "a2"),
        (1, None, "B"),
        (1, 0, "b1"),
    ]


def test_from_pairs_keeps_order_and_rejects_duplicates() -> None:
    model = GroupedListModel.from_pairs([("B", ["b1"]), ("A", [])])
    assert model.groups == ("B", "A")
    assert model.child_count(1) == 0
    with pytest.raises(DuplicateGroupLabelError):
        GroupedListModel.from_pairs([("A", []), ("A", ["x"])])


def test_repr_lists_groups(model: GroupedListModel) -> None:
    assert repr(model) == "GroupedListModel(groups=['A', 'B'])"
