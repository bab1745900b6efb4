"""
Widget integration tests using pytest-qt.

These tests use qtbot to:
- Drive the property fields and check the store receives valid values only
- Check layer panel rows, export checks and button states
- Click and drag on the canvas
- Build the main window against a temporary config directory
"""
import pytest
from PyQt5.QtCore import Qt, QPoint

from components.property_sidebar import PropertySidebar
from components.layer_panel import LayerPanel
from components.canvas_widget import StitchCanvas
from components.property_sidebar_widgets import NumberField, AngleField
from models.layer_store import LayerStore
from models.viewport import Viewport
from conftest import make_decoded


@pytest.fixture
def populated_store():
    store = LayerStore()
    store.add_layers([make_decoded("a.png"), make_decoded("b.png")])
    store.history.clear()
    return store


class TestNumberField:

    def test_partial_text_not_emitted(self, qtbot):
        field = NumberField("X")
        qtbot.addWidget(field)
        values = []
        field.value_committed.connect(values.append)

        qtbot.keyClicks(field.line_edit, "-")
        assert values == []
        qtbot.keyClicks(field.line_edit, "4")
        assert values == [-4.0]

    def test_angle_buttons_use_step(self, qtbot):
        field = AngleField("Angle", 2.5)
        qtbot.addWidget(field)
        field.set_value(10)
        values = []
        field.value_committed.connect(values.append)

        field.up_btn.click()
        field.down_btn.click()
        assert values == [12.5, 7.5]


class TestPropertySidebar:

    def test_disabled_without_selection(self, qtbot, populated_store):
        populated_store.clear_selection()
        sidebar = PropertySidebar(populated_store)
        qtbot.addWidget(sidebar)
        assert not sidebar.fields_widget.isEnabled()

    def test_shows_common_values(self, qtbot, populated_store):
        a, b = populated_store.layers
        populated_store.update_layer(a.id, {'x': 15}, record_history=False)
        sidebar = PropertySidebar(populated_store)
        qtbot.addWidget(sidebar)

        populated_store.set_selection({a.id})
        assert sidebar.x_field.line_edit.text() == "15"

        populated_store.select_all()
        assert sidebar.x_field.line_edit.text() == ""
        assert sidebar.y_field.line_edit.text() == "0"

    def test_typing_updates_selected_layers(self, qtbot, populated_store):
        sidebar = PropertySidebar(populated_store)
        qtbot.addWidget(sidebar)
        populated_store.select_all()

        sidebar.y_field.line_edit.clear()
        qtbot.keyClicks(sidebar.y_field.line_edit, "12")
        assert all(layer.y == 12 for layer in populated_store.layers)

    def test_rotation_slider_snaps(self, qtbot, populated_store):
        sidebar = PropertySidebar(populated_store)
        qtbot.addWidget(sidebar)
        a = populated_store.layers[0]
        populated_store.set_selection({a.id})

        sidebar.rotation_slider.setValue(88)
        assert populated_store.get_layer(a.id).rotation == 90

    def test_opacity_slider(self, qtbot, populated_store):
        sidebar = PropertySidebar(populated_store)
        qtbot.addWidget(sidebar)
        a = populated_store.layers[0]
        populated_store.set_selection({a.id})

        sidebar.opacity_slider.setValue(40)
        assert populated_store.get_layer(a.id).opacity == pytest.approx(0.4)
        assert sidebar.opacity_value_label.text() == "40%"

    def test_refresh_does_not_write_back(self, qtbot, populated_store):
        sidebar = PropertySidebar(populated_store)
        qtbot.addWidget(sidebar)
        populated_store.select_all()
        assert not populated_store.history.can_undo()

    def test_step_field_emits(self, qtbot, populated_store):
        sidebar = PropertySidebar(populated_store, angle_step=1)
        qtbot.addWidget(sidebar)
        with qtbot.waitSignal(sidebar.angle_step_changed) as blocker:
            sidebar.step_field.line_edit.clear()
            qtbot.keyClicks(sidebar.step_field.line_edit, "5")
        assert blocker.args == [5.0]
        assert sidebar.angle_field.step == 5.0


class TestLayerPanel:

    def test_empty_store(self, qtbot, store):
        panel = LayerPanel(store)
        qtbot.addWidget(panel)
        assert not panel.export_json_btn.isEnabled()
        assert not panel.export_csv_btn.isEnabled()
        assert panel.layer_list_widget.empty_label.isVisibleTo(panel.layer_list_widget)

    def test_rows_listed_top_first(self, qtbot, populated_store):
        panel = LayerPanel(populated_store)
        qtbot.addWidget(panel)
        row_ids = [layer_id for layer_id, _ in panel.layer_list_widget.layer_buttons]
        assert row_ids == [layer.id for layer in reversed(populated_store.layers)]
        assert panel.export_json_btn.isEnabled()

    def test_check_all(self, qtbot, populated_store):
        panel = LayerPanel(populated_store)
        qtbot.addWidget(panel)
        panel.check_all_btn.click()
        assert len(populated_store.checked_ids) == 2
        assert panel.check_all_btn.text() == "Uncheck all"
        assert "2 checked" in panel.export_hint.text()

    def test_export_signal(self, qtbot, populated_store):
        panel = LayerPanel(populated_store)
        qtbot.addWidget(panel)
        with qtbot.waitSignal(panel.export_requested) as blocker:
            panel.export_csv_btn.click()
        assert blocker.args == ['csv']

    def test_row_click_selects(self, qtbot, populated_store):
        panel = LayerPanel(populated_store)
        qtbot.addWidget(panel)
        b_id, b_row = panel.layer_list_widget.layer_buttons[0]
        b_row.click()
        assert populated_store.selected_ids == {b_id}
        assert b_row.isChecked()


class TestCanvas:

    @pytest.fixture
    def canvas(self, qtbot, populated_store):
        populated_store.move_layers({populated_store.layers[1].id: (200, 0)})
        populated_store.clear_selection()
        canvas = StitchCanvas(populated_store, Viewport())
        canvas.resize(600, 400)
        qtbot.addWidget(canvas)
        return canvas

    def test_click_selects_layer(self, qtbot, canvas, populated_store):
        qtbot.mouseClick(canvas, Qt.LeftButton, pos=QPoint(210, 10))
        assert populated_store.selected_ids == {populated_store.layers[1].id}

    def test_click_empty_clears(self, qtbot, canvas, populated_store):
        populated_store.select_all()
        qtbot.mouseClick(canvas, Qt.LeftButton, pos=QPoint(150, 300))
        assert populated_store.selected_ids == frozenset()

    def test_fit_to_view(self, canvas):
        canvas.fit_to_view()
        assert canvas.viewport.zoom == 1.0
        # Content 300x50 centred in 600x400
        assert canvas.viewport.pan.x == pytest.approx(150)
        assert canvas.viewport.pan.y == pytest.approx(175)

    def test_paints_without_error(self, qtbot, canvas):
        canvas.show()
        qtbot.waitExposed(canvas)
        canvas.grab()


class TestMainWindow:

    @pytest.fixture
    def window(self, qtbot, tmp_path):
        from main import StitchCraftEditor
        window = StitchCraftEditor(config_dir=str(tmp_path))
        qtbot.addWidget(window)
        return window

    def test_initial_state(self, window):
        assert not window.undo_action.isEnabled()
        assert not window.export_json_action.isEnabled()
        assert window.status_left.text() == "Ready"

    def test_import_batch_adds_layers(self, window):
        window.importer.batch_finished.emit([make_decoded("a.png"), make_decoded("b.png")])
        assert window.store.get_layer_count() == 2
        assert window.undo_action.isEnabled()
        assert window.export_csv_action.isEnabled()

    def test_undo_action(self, window):
        window.store.add_layers([make_decoded("a.png")])
        window.undo_action.trigger()
        assert window.store.get_layer_count() == 0
        assert window.redo_action.isEnabled()

    def test_sidebar_toggle_persists(self, window, tmp_path):
        window.right_sidebar_action.setChecked(False)
        assert window.right_sidebar_collapsed is True

        from main_window.config_mixin import ConfigMixin

        class Host(ConfigMixin):
            config_dir = window.config_dir
            config_file = window.config_file

        host = Host()
        host._load_config()
        assert host.right_sidebar_collapsed is True

    def test_angle_step_persists(self, window):
        window.right_sidebar.angle_step_changed.emit(3.0)
        assert window.angle_step == 3.0

    def test_import_paths_skips_unsupported(self, qtbot, window, tmp_path):
        from PIL import Image
        png = tmp_path / "tile.png"
        Image.new('RGBA', (12, 8)).save(png)
        notes = tmp_path / "notes.txt"
        notes.write_text("not an image")

        with qtbot.waitSignal(window.importer.batch_finished, timeout=5000):
            window.file_actions.import_paths([str(png), str(notes)])

        assert [layer.name for layer in window.store.layers] == ["tile.png"]
        assert (window.store.layers[0].width, window.store.layers[0].height) == (12, 8)

    def test_export_shows_dialog(self, window, monkeypatch):
        from components.gui_widgets import ExportDialog
        shown = []
        monkeypatch.setattr(ExportDialog, 'exec_', lambda dialog: shown.append(dialog.content))

        window.store.add_layers([make_decoded("a.png")])
        content = window.file_actions.export('csv')

        assert content == 'filename,shift_x,shift_y,rotate,layer_order\n"a.png",0,0,0,0'
        assert shown == [content]
