"""Menu bar creation and menu action handlers for StitchCraftEditor"""

from PyQt5.QtGui import QKeySequence

from services.export_service import FORMAT_JSON, FORMAT_CSV


class MenuMixin:
    """Menu bar and menu action handlers"""

    def _create_menu_bar(self):
        """Create the menu bar with File, Edit, View, Help menus"""
        menubar = self.menuBar()

        # File Menu
        file_menu = menubar.addMenu("&File")

        import_action = file_menu.addAction("&Import Images...")
        import_action.setShortcut("Ctrl+O")
        import_action.triggered.connect(self.file_actions.import_images)

        file_menu.addSeparator()

        self.export_json_action = file_menu.addAction("Export &JSON...")
        self.export_json_action.triggered.connect(lambda: self.file_actions.export(FORMAT_JSON))
        self.export_json_action.setEnabled(False)

        self.export_csv_action = file_menu.addAction("Export &CSV...")
        self.export_csv_action.triggered.connect(lambda: self.file_actions.export(FORMAT_CSV))
        self.export_csv_action.setEnabled(False)

        file_menu.addSeparator()

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)

        # Edit Menu
        self.edit_menu = menubar.addMenu("&Edit")

        self.undo_action = self.edit_menu.addAction("&Undo")
        self.undo_action.setShortcut("Ctrl+Z")
        self.undo_action.triggered.connect(self.undo)
        self.undo_action.setEnabled(False)

        self.redo_action = self.edit_menu.addAction("&Redo")
        self.redo_action.setShortcuts([QKeySequence("Ctrl+Shift+Z"), QKeySequence("Ctrl+Y")])
        self.redo_action.triggered.connect(self.redo)
        self.redo_action.setEnabled(False)

        self.edit_menu.addSeparator()

        self.delete_action = self.edit_menu.addAction("&Delete Selected")
        self.delete_action.setShortcut("Delete")
        self.delete_action.triggered.connect(self._delete_selected)
        self.delete_action.setEnabled(False)

        select_all_action = self.edit_menu.addAction("Select &All Layers")
        select_all_action.setShortcut("Ctrl+A")
        select_all_action.triggered.connect(self._select_all_layers)

        # View Menu
        view_menu = menubar.addMenu("&View")

        zoom_in_action = view_menu.addAction("Zoom &In")
        zoom_in_action.setShortcuts([QKeySequence("Ctrl+="), QKeySequence("Ctrl++")])
        zoom_in_action.triggered.connect(self._zoom_in)

        zoom_out_action = view_menu.addAction("Zoom &Out")
        zoom_out_action.setShortcut("Ctrl+-")
        zoom_out_action.triggered.connect(self._zoom_out)

        zoom_reset_action = view_menu.addAction("&Reset View")
        zoom_reset_action.setShortcut("Ctrl+0")
        zoom_reset_action.triggered.connect(self._zoom_reset)

        fit_action = view_menu.addAction("&Fit to View")
        fit_action.setShortcut("Ctrl+1")
        fit_action.triggered.connect(self._fit_to_view)

        view_menu.addSeparator()

        self.guides_action = view_menu.addAction("Show &Guides")
        self.guides_action.setCheckable(True)
        self.guides_action.setChecked(True)
        self.guides_action.toggled.connect(self._on_guides_toggled)

        view_menu.addSeparator()

        self.left_sidebar_action = view_menu.addAction("Show &Layers Panel")
        self.left_sidebar_action.setCheckable(True)
        self.left_sidebar_action.setChecked(not self.left_sidebar_collapsed)
        self.left_sidebar_action.toggled.connect(lambda checked: self._set_sidebar_visible('left', checked))

        self.right_sidebar_action = view_menu.addAction("Show &Properties Panel")
        self.right_sidebar_action.setCheckable(True)
        self.right_sidebar_action.setChecked(not self.right_sidebar_collapsed)
        self.right_sidebar_action.toggled.connect(lambda checked: self._set_sidebar_visible('right', checked))

        # Help Menu
        help_menu = menubar.addMenu("&Help")

        info_action = help_menu.addAction("&How it Works")
        info_action.setShortcut("F1")
        info_action.triggered.connect(self._show_info)

    def _select_all_layers(self):
        self.store.select_all()

    def _delete_selected(self):
        self.store.delete_selected()

    def _show_info(self):
        self.canvas_area.show_info()

    # ========================================
    # View
    # ========================================

    def _zoom_in(self):
        self.canvas_area.canvas_widget.zoom_in()

    def _zoom_out(self):
        self.canvas_area.canvas_widget.zoom_out()

    def _zoom_reset(self):
        self.canvas_area.canvas_widget.zoom_reset()

    def _fit_to_view(self):
        self.canvas_area.canvas_widget.fit_to_view()

    def _on_guides_toggled(self, checked):
        self.canvas_area.set_show_guides(checked)

    def _on_toolbar_guides_toggled(self, checked):
        """Keep the menu check in step with the toolbar button"""
        if self.guides_action.isChecked() != checked:
            self.guides_action.blockSignals(True)
            self.guides_action.setChecked(checked)
            self.guides_action.blockSignals(False)

    def _set_sidebar_visible(self, side, visible):
        sidebar = self.left_sidebar if side == 'left' else self.right_sidebar
        sidebar.setVisible(visible)
        self.set_sidebar_collapsed(side, not visible)
