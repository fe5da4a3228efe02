"""Tests for the blueprint store."""

from collections import Counter

import pytest
from hypothesis import given, strategies as st

from pageforge.core import DuplicateIdError
from pageforge.blueprint import BlueprintStore, ComponentInstance, Upload


@pytest.mark.unit
def test_insert_at_positions(store, instance_factory):
    """Test inserting at front, middle and end."""
    store.insert_at(0, instance_factory("B"))
    store.insert_at(0, instance_factory("A"))
    store.insert_at(2, instance_factory("D"))
    store.insert_at(2, instance_factory("C"))

    assert store.ids() == ["A", "B", "C", "D"]


@pytest.mark.unit
@pytest.mark.parametrize("index", [99, -1, -50])
def test_insert_out_of_range_appends(abc_store, instance_factory, index):
    """Test out-of-range indices clamp to append."""
    landed = abc_store.insert_at(index, instance_factory("Z"))

    assert landed == 3
    assert abc_store.ids() == ["A", "B", "C", "Z"]


@pytest.mark.unit
def test_insert_duplicate_id(abc_store, instance_factory):
    """Test a present id cannot be inserted again."""
    with pytest.raises(DuplicateIdError):
        abc_store.insert_at(0, instance_factory("B"))
    assert abc_store.ids() == ["A", "B", "C"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "from_index,to_index,expected",
    [
        (0, 2, ["B", "C", "A"]),
        (2, 0, ["C", "A", "B"]),
        (0, 1, ["B", "A", "C"]),
        (1, 2, ["A", "C", "B"]),
        (1, 1, ["A", "B", "C"]),
    ],
)
def test_move_range(abc_store, from_index, to_index, expected):
    """Test to_index applies to the post-removal sequence."""
    assert abc_store.move_range(from_index, to_index) is True
    assert abc_store.ids() == expected


@pytest.mark.unit
@pytest.mark.parametrize("from_index,to_index", [(-1, 0), (0, 3), (5, 1)])
def test_move_range_out_of_range(abc_store, from_index, to_index):
    """Test invalid indices move nothing."""
    assert abc_store.move_range(from_index, to_index) is False
    assert abc_store.ids() == ["A", "B", "C"]


@given(
    st.integers(min_value=1, max_value=12).flatmap(
        lambda n: st.tuples(
            st.just(n), st.integers(min_value=0, max_value=n - 1), st.integers(min_value=0, max_value=n - 1)
        )
    )
)
def test_move_range_is_permutation(case):
    """Property test: moving changes only positions."""
    size, from_index, to_index = case
    store = BlueprintStore()
    for i in range(size):
        store.insert_at(i, ComponentInstance(id=f"id-{i}", type="Text", props={"styles": {}}))
    before = store.ids()

    store.move_range(from_index, to_index)

    after = store.ids()
    assert Counter(after) == Counter(before)
    assert after[to_index] == before[from_index]
    rest_before = [i for i in before if i != before[from_index]]
    rest_after = [i for i in after if i != before[from_index]]
    assert rest_before == rest_after


@pytest.mark.unit
def test_update_props_replaces(store, instance_factory):
    """Test update is whole-object replace, not merge."""
    store.insert_at(0, instance_factory("X", label="Old", placeholder="X"))

    store.update_props("X", {"label": "New"})

    assert store.get("X").props == {"label": "New"}


@pytest.mark.unit
def test_update_props_full_object(store):
    """Test a full props object comes back exactly as submitted."""
    store.insert_at(0, ComponentInstance(id="X", type="Input", props={"label": "Old", "placeholder": "X"}))

    store.update_props("X", {"label": "New", "placeholder": "X"})

    assert store.snapshot()[0].props == {"label": "New", "placeholder": "X"}


@pytest.mark.unit
def test_update_props_unknown_id(abc_store):
    """Test unknown ids are a silent no-op."""
    before = abc_store.snapshot()
    assert abc_store.update_props("missing", {"label": "x"}) is False
    assert abc_store.snapshot() == before


@pytest.mark.unit
def test_update_props_copies_input(store, instance_factory):
    """Test later mutation of the caller's dict does not reach the store."""
    store.insert_at(0, instance_factory("X"))
    new_props = {"label": "New", "styles": {"marginTop": 1}}

    store.update_props("X", new_props)
    new_props["styles"]["marginTop"] = 50

    assert store.get("X").props["styles"]["marginTop"] == 1


@pytest.mark.unit
def test_snapshot_is_detached(abc_store):
    """Test snapshots cannot be used to mutate the store."""
    snapshot = abc_store.snapshot()
    snapshot[0].props["label"] = "hacked"

    assert abc_store.get("A").props["label"] == "A"
    assert isinstance(snapshot, tuple)


@pytest.mark.unit
def test_remove(abc_store):
    """Test removing one instance."""
    assert abc_store.remove("B") is True
    assert abc_store.remove("B") is False
    assert abc_store.ids() == ["A", "C"]


@pytest.mark.unit
def test_remove_all_releases_resources(abc_store, resources, releaser):
    """Test clearing empties the store and releases live handles."""
    url = resources.acquire("A", "src", Upload("a.png", "image/png"))

    abc_store.remove_all()

    assert len(abc_store) == 0
    assert abc_store.snapshot() == ()
    releaser.assert_called_once_with(url)


@pytest.mark.unit
def test_remove_releases_owned_resources(abc_store, resources, releaser):
    """Test removing an instance releases only what it owns."""
    owned = resources.acquire("A", "src", Upload("a.png", "image/png"))
    other = resources.acquire("C", "src", Upload("c.png", "image/png"))

    abc_store.remove("A")

    releaser.assert_called_once_with(owned)
    assert resources.is_live(other)


@pytest.mark.unit
def test_load_replaces_sequence(abc_store, instance_factory):
    """Test loading swaps in a whole new sequence."""
    abc_store.load([instance_factory("X"), instance_factory("Y")])
    assert abc_store.ids() == ["X", "Y"]


@pytest.mark.unit
def test_load_duplicate_ids_leaves_store(abc_store, instance_factory):
    """Test a bad import does not disturb the current blueprint."""
    with pytest.raises(DuplicateIdError):
        abc_store.load([instance_factory("X"), instance_factory("X")])
    assert abc_store.ids() == ["A", "B", "C"]


@pytest.mark.unit
def test_observers_see_post_state(store, instance_factory):
    """Test observers receive the committed sequence once per mutation."""
    seen = []
    unsubscribe = store.subscribe(lambda items: seen.append([i.id for i in items]))

    store.insert_at(0, instance_factory("A"))
    store.insert_at(1, instance_factory("B"))
    store.move_range(0, 1)
    unsubscribe()
    store.remove_all()

    assert seen == [["A"], ["A", "B"], ["B", "A"]]


@pytest.mark.unit
def test_index_of_and_contains(abc_store):
    """Test lookups."""
    assert abc_store.index_of("C") == 2
    assert abc_store.index_of("missing") == -1
    assert abc_store.contains("A")
    assert abc_store.get("missing") is None
