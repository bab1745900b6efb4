"""Undo/redo wiring and status bar updates for StitchCraftEditor"""


class HistoryMixin:
    """Undo/redo actions, history listener and status bar"""

    def undo(self):
        """Undo the last action"""
        self.store.undo()

    def redo(self):
        """Redo the last undone action"""
        self.store.redo()

    def _on_history_changed(self, can_undo, can_redo):
        """Called when history state changes to update UI"""
        if hasattr(self, 'undo_action'):
            self.undo_action.setEnabled(can_undo)
        if hasattr(self, 'redo_action'):
            self.redo_action.setEnabled(can_redo)
        self._update_status_bar()

    def _on_store_changed(self, kind):
        self._update_status_bar()
        if hasattr(self, 'delete_action'):
            self.delete_action.setEnabled(bool(self.store.selected_ids))
        if hasattr(self, 'export_json_action'):
            has_layers = self.store.get_layer_count() > 0
            self.export_json_action.setEnabled(has_layers)
            self.export_csv_action.setEnabled(has_layers)

    def _update_status_bar(self):
        """Update status bar with last action and stats"""
        # Left side: Last action
        undo_desc = self.store.history.get_undo_description()
        left_msg = f"Last action: {undo_desc}" if undo_desc else "Ready"

        # Right side: Stats
        layer_count = self.store.get_layer_count()
        selected = self.store.get_selected_layers()
        checked = len(self.store.checked_ids)

        if len(selected) == 1:
            right_msg = f"Layers: {layer_count} | Selected: {selected[0].name}"
        elif selected:
            right_msg = f"Layers: {layer_count} | Selected: {len(selected)} layers"
        else:
            right_msg = f"Layers: {layer_count} | No selection"
        if checked:
            right_msg += f" | Checked: {checked}"

        if hasattr(self, 'status_left'):
            self.status_left.setText(left_msg)
        if hasattr(self, 'status_right'):
            self.status_right.setText(right_msg)
