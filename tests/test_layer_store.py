"""
Tests for LayerStore.

Covers:
- Adding layers (auto-select, history, ids)
- Updating one or all selected layers, recentering on rotation/scale
- Rejected and sanitized changes
- Delete, reorder, visibility, nudge
- Selection and export-check sets
- Undo/redo through the store, including selection pruning
- Common-value queries for the property panel
"""
import math
import pytest

from models.layer_store import LayerStore, CHANGE_LAYERS, CHANGE_SELECTION, CHANGE_CHECKED
from conftest import make_decoded


def names(store):
    return [layer.name for layer in store.layers]


class TestAddLayers:

    def test_adds_in_order_at_origin(self, store):
        ids = store.add_layers([make_decoded("a.png"), make_decoded("b.png", 20, 30)])
        assert names(store) == ["a.png", "b.png"]
        assert len(set(ids)) == 2
        second = store.get_layer(ids[1])
        assert (second.x, second.y, second.rotation, second.scale, second.opacity) == (0, 0, 0, 1, 1)
        assert (second.width, second.height) == (20, 30)
        assert second.visible

    def test_selects_first_new_layer_when_nothing_selected(self, store):
        ids = store.add_layers([make_decoded("a.png"), make_decoded("b.png")])
        assert store.selected_ids == {ids[0]}

    def test_keeps_existing_selection(self, three_layer_store):
        before = three_layer_store.selected_ids
        three_layer_store.add_layers([make_decoded("d.png")])
        assert three_layer_store.selected_ids == before

    def test_empty_batch_is_noop(self, store):
        assert store.add_layers([]) == []
        assert not store.history.can_undo()

    def test_one_history_step_per_batch(self, store):
        store.add_layers([make_decoded("a.png"), make_decoded("b.png")])
        assert len(store.history.past) == 1
        store.undo()
        assert store.get_layer_count() == 0
        assert store.selected_ids == frozenset()


class TestUpdateLayer:

    def test_position_update(self, three_layer_store):
        layer_id = three_layer_store.layers[1].id
        three_layer_store.update_layer(layer_id, {'x': 12.5, 'y': -3})
        layer = three_layer_store.get_layer(layer_id)
        assert (layer.x, layer.y) == (12.5, -3)

    def test_rotation_recenters(self, store):
        [layer_id] = store.add_layers([make_decoded("a.png", 100, 50)])
        store.update_layer(layer_id, {'x': 10, 'y': 10}, record_history=False)
        store.update_layer(layer_id, {'rotation': 90})
        layer = store.get_layer(layer_id)
        assert (layer.x, layer.y, layer.rotation) == (35, -15, 90)

    def test_unknown_id_raises(self, three_layer_store):
        with pytest.raises(ValueError, match="not found"):
            three_layer_store.update_layer("missing", {'x': 1})

    @pytest.mark.parametrize("field", ['id', 'width', 'height', 'image_ref'])
    def test_immutable_fields_rejected(self, three_layer_store, field):
        layer_id = three_layer_store.layers[0].id
        with pytest.raises(ValueError):
            three_layer_store.update_layer(layer_id, {field: 1})
        assert not three_layer_store.history.can_undo()

    def test_unknown_field_rejected(self, three_layer_store):
        with pytest.raises(ValueError, match="Unknown layer property"):
            three_layer_store.update_layer(three_layer_store.layers[0].id, {'colour': 'red'})

    @pytest.mark.parametrize("bad", [float('nan'), float('inf'), 'abc', None])
    def test_non_finite_values_dropped(self, three_layer_store, bad):
        layer_id = three_layer_store.layers[0].id
        three_layer_store.update_layer(layer_id, {'x': bad})
        assert three_layer_store.get_layer(layer_id).x == 0
        assert not three_layer_store.history.can_undo()

    def test_non_positive_scale_dropped(self, three_layer_store):
        layer_id = three_layer_store.layers[0].id
        three_layer_store.update_layer(layer_id, {'scale': 0})
        assert three_layer_store.get_layer(layer_id).scale == 1

    def test_opacity_clamped(self, three_layer_store):
        layer_id = three_layer_store.layers[0].id
        three_layer_store.update_layer(layer_id, {'opacity': 1.7})
        assert three_layer_store.get_layer(layer_id).opacity == 1.0
        three_layer_store.update_layer(layer_id, {'opacity': -2})
        assert three_layer_store.get_layer(layer_id).opacity == 0.0

    def test_no_history_when_requested(self, three_layer_store):
        three_layer_store.update_layer(three_layer_store.layers[0].id, {'x': 5}, record_history=False)
        assert not three_layer_store.history.can_undo()


class TestUpdateSelected:

    def test_applies_to_all_selected_as_one_step(self, three_layer_store):
        a, b, c = three_layer_store.layers
        three_layer_store.set_selection({a.id, c.id})
        three_layer_store.update_selected({'rotation': 90})

        assert three_layer_store.get_layer(a.id).rotation == 90
        assert three_layer_store.get_layer(b.id).rotation == 0
        assert three_layer_store.get_layer(c.id).rotation == 90
        assert len(three_layer_store.history.past) == 1

        three_layer_store.undo()
        assert all(layer.rotation == 0 for layer in three_layer_store.layers)

    def test_each_layer_recenters_around_its_own_box(self, store):
        first, second = store.add_layers([make_decoded("a.png", 100, 50), make_decoded("b.png", 20, 20)])
        store.update_layer(second, {'x': 200, 'y': 100}, record_history=False)
        store.select_all()
        store.update_selected({'scale': 2})
        assert (store.get_layer(first).x, store.get_layer(first).y) == (-50, -25)
        assert (store.get_layer(second).x, store.get_layer(second).y) == (190, 90)

    def test_empty_selection_is_noop(self, three_layer_store):
        three_layer_store.clear_selection()
        three_layer_store.update_selected({'x': 40})
        assert all(layer.x == 0 for layer in three_layer_store.layers)
        assert not three_layer_store.history.can_undo()

    def test_invalid_field_records_nothing(self, three_layer_store):
        with pytest.raises(ValueError):
            three_layer_store.update_selected({'width': 3})
        assert not three_layer_store.history.can_undo()


class TestDeleteAndReorder:

    def test_delete_selected_prunes_checked(self, three_layer_store):
        a, b, c = three_layer_store.layers
        three_layer_store.toggle_checked(a.id)
        three_layer_store.toggle_checked(b.id)
        three_layer_store.set_selection({a.id})

        three_layer_store.delete_selected()

        assert names(three_layer_store) == ["b.png", "c.png"]
        assert three_layer_store.checked_ids == {b.id}
        assert three_layer_store.selected_ids == frozenset()

    def test_delete_with_nothing_selected(self, three_layer_store):
        three_layer_store.clear_selection()
        three_layer_store.delete_selected()
        assert three_layer_store.get_layer_count() == 3
        assert not three_layer_store.history.can_undo()

    def test_reorder_moves_layer(self, three_layer_store):
        three_layer_store.reorder(0, 2)
        assert names(three_layer_store) == ["b.png", "c.png", "a.png"]
        three_layer_store.reorder(2, 0)
        assert names(three_layer_store) == ["a.png", "b.png", "c.png"]
        assert len(three_layer_store.history.past) == 2

    def test_reorder_same_index_is_noop(self, three_layer_store):
        three_layer_store.reorder(1, 1)
        assert not three_layer_store.history.can_undo()

    @pytest.mark.parametrize("src,dst", [(-1, 0), (0, 3), (5, 1)])
    def test_reorder_out_of_range(self, three_layer_store, src, dst):
        with pytest.raises(ValueError):
            three_layer_store.reorder(src, dst)

    def test_toggle_visibility_not_in_history(self, three_layer_store):
        layer_id = three_layer_store.layers[0].id
        three_layer_store.toggle_visibility(layer_id)
        assert not three_layer_store.get_layer(layer_id).visible
        assert not three_layer_store.history.can_undo()
        three_layer_store.toggle_visibility(layer_id)
        assert three_layer_store.get_layer(layer_id).visible


class TestMoveAndNudge:

    def test_move_layers_without_history(self, three_layer_store):
        a, b, _ = three_layer_store.layers
        three_layer_store.move_layers({a.id: (5, 6), b.id: (-1, 2)})
        assert (three_layer_store.get_layer(a.id).x, three_layer_store.get_layer(a.id).y) == (5, 6)
        assert (three_layer_store.get_layer(b.id).x, three_layer_store.get_layer(b.id).y) == (-1, 2)
        assert not three_layer_store.history.can_undo()

    def test_nudge_selected(self, three_layer_store):
        a, b, _ = three_layer_store.layers
        three_layer_store.set_selection({a.id, b.id})
        three_layer_store.nudge_selected(10, -1)
        assert (three_layer_store.get_layer(a.id).x, three_layer_store.get_layer(a.id).y) == (10, -1)
        assert (three_layer_store.get_layer(b.id).x, three_layer_store.get_layer(b.id).y) == (10, -1)
        assert three_layer_store.layers[2].x == 0
        assert three_layer_store.history.get_undo_description() == "Nudge"


class TestSelection:

    def test_toggle_non_additive_replaces(self, three_layer_store):
        a, b, _ = three_layer_store.layers
        three_layer_store.toggle_selection(b.id)
        assert three_layer_store.selected_ids == {b.id}

    def test_toggle_additive_flips(self, three_layer_store):
        a, b, _ = three_layer_store.layers
        three_layer_store.toggle_selection(b.id, additive=True)
        assert three_layer_store.selected_ids == {a.id, b.id}
        three_layer_store.toggle_selection(a.id, additive=True)
        assert three_layer_store.selected_ids == {b.id}

    def test_toggle_unknown_raises(self, three_layer_store):
        with pytest.raises(ValueError):
            three_layer_store.toggle_selection("missing")

    def test_set_selection_ignores_unknown_ids(self, three_layer_store):
        a = three_layer_store.layers[0]
        three_layer_store.set_selection({a.id, "missing"})
        assert three_layer_store.selected_ids == {a.id}

    def test_select_all(self, three_layer_store):
        three_layer_store.select_all()
        assert three_layer_store.selected_ids == {layer.id for layer in three_layer_store.layers}

    def test_toggle_all_checked(self, three_layer_store):
        a = three_layer_store.layers[0]
        three_layer_store.toggle_checked(a.id)
        three_layer_store.toggle_all_checked()
        assert len(three_layer_store.checked_ids) == 3
        three_layer_store.toggle_all_checked()
        assert three_layer_store.checked_ids == frozenset()

    def test_selection_not_in_history(self, three_layer_store):
        three_layer_store.select_all()
        three_layer_store.toggle_checked(three_layer_store.layers[0].id)
        assert not three_layer_store.history.can_undo()


class TestUndoRedo:

    def test_undo_redo_roundtrip(self, three_layer_store):
        layer_id = three_layer_store.layers[0].id
        three_layer_store.update_layer(layer_id, {'x': 50})
        assert three_layer_store.undo()
        assert three_layer_store.get_layer(layer_id).x == 0
        assert three_layer_store.redo()
        assert three_layer_store.get_layer(layer_id).x == 50

    def test_multi_step_undo_redo_walks_every_state(self, three_layer_store):
        layer_id = three_layer_store.layers[0].id
        snapshots = [three_layer_store.layers]
        for x in range(1, 51):
            three_layer_store.update_layer(layer_id, {'x': x})
            snapshots.append(three_layer_store.layers)

        for expected in reversed(snapshots[:-1]):
            assert three_layer_store.undo()
            assert three_layer_store.layers == expected
        assert not three_layer_store.undo()

        for expected in snapshots[1:]:
            assert three_layer_store.redo()
            assert three_layer_store.layers == expected
        assert not three_layer_store.redo()

    def test_oldest_state_dropped_after_fifty(self, three_layer_store):
        layer_id = three_layer_store.layers[0].id
        for x in range(1, 52):
            three_layer_store.update_layer(layer_id, {'x': x})

        undos = 0
        while three_layer_store.undo():
            undos += 1

        assert undos == 50
        # x=0 is no longer reachable
        assert three_layer_store.get_layer(layer_id).x == 1

    def test_nothing_to_undo(self, store):
        assert store.undo() is False
        assert store.redo() is False

    def test_undo_prunes_selection_and_checks(self, three_layer_store):
        [new_id] = three_layer_store.add_layers([make_decoded("d.png")])
        three_layer_store.set_selection({new_id})
        three_layer_store.toggle_checked(new_id)

        three_layer_store.undo()

        assert three_layer_store.get_layer_count() == 3
        assert three_layer_store.selected_ids == frozenset()
        assert three_layer_store.checked_ids == frozenset()

    def test_new_change_clears_redo(self, three_layer_store):
        layer_id = three_layer_store.layers[0].id
        three_layer_store.update_layer(layer_id, {'x': 1})
        three_layer_store.undo()
        three_layer_store.update_layer(layer_id, {'y': 1})
        assert not three_layer_store.history.can_redo()

    def test_delete_undo_restores_layer(self, three_layer_store):
        three_layer_store.delete_selected()
        three_layer_store.undo()
        assert names(three_layer_store) == ["a.png", "b.png", "c.png"]


class TestQueries:

    def test_common_value(self, three_layer_store):
        three_layer_store.select_all()
        assert three_layer_store.get_common_value('rotation') == 0
        three_layer_store.update_layer(three_layer_store.layers[0].id, {'rotation': 10})
        assert three_layer_store.get_common_value('rotation') is None

    def test_common_value_empty_selection(self, three_layer_store):
        three_layer_store.clear_selection()
        assert three_layer_store.get_common_value('x') is None

    def test_index_of(self, three_layer_store):
        c = three_layer_store.layers[2]
        assert three_layer_store.index_of(c.id) == 2
        with pytest.raises(ValueError):
            three_layer_store.index_of("missing")

    def test_layers_is_read_only_view(self, three_layer_store):
        assert isinstance(three_layer_store.layers, tuple)


class TestNotifications:

    def test_update_notifies_layers(self, three_layer_store):
        kinds = []
        three_layer_store.add_listener(kinds.append)
        three_layer_store.update_layer(three_layer_store.layers[0].id, {'x': 3})
        assert kinds == [CHANGE_LAYERS]

    def test_delete_notifies_all_kinds(self, three_layer_store):
        kinds = []
        three_layer_store.add_listener(kinds.append)
        three_layer_store.delete_selected()
        assert set(kinds) == {CHANGE_LAYERS, CHANGE_SELECTION, CHANGE_CHECKED}

    def test_unchanged_selection_does_not_notify(self, three_layer_store):
        kinds = []
        three_layer_store.add_listener(kinds.append)
        three_layer_store.set_selection(three_layer_store.selected_ids)
        assert kinds == []

    def test_remove_listener(self, three_layer_store):
        kinds = []
        three_layer_store.add_listener(kinds.append)
        three_layer_store.remove_listener(kinds.append)
        three_layer_store.select_all()
        assert kinds == []
