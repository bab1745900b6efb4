"""'How it Works' help dialog."""

from PyQt5.QtWidgets import QDialog, QVBoxLayout, QTextEdit, QPushButton


class InfoDialog(QDialog):
    """Dialog explaining the coordinate model, with FAQ and controls"""
    
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("How it Works")
        self.setMinimumWidth(560)
        self.setMinimumHeight(520)
        
        layout = QVBoxLayout()
        
        text_edit = QTextEdit()
        text_edit.setReadOnly(True)
        text_edit.setHtml("""
        <h2>How it Works</h2>
        
        <h3>Coordinate System</h3>
        <p>Exported coordinates follow <code>cv2.warpAffine</code> conventions for image stitching.</p>
        <ul>
        <li><b>Bounding Box:</b> A rotated image takes up a larger axis-aligned footprint.
            Its size is computed the same way OpenCV expands the output canvas.</li>
        <li><b>Shift X / Shift Y:</b> The <b>top-left corner of the bounding box</b>,
            not the corner of the unrotated image.</li>
        <li><b>Rotation:</b> Happens around the centre of the image.</li>
        </ul>
        <p><code>New Width = H * |sin(&theta;)| + W * |cos(&theta;)|</code><br>
        <code>New Height = H * |cos(&theta;)| + W * |sin(&theta;)|</code></p>
        
        <h3>FAQ</h3>
        <p><b>Q: Why does X/Y change when I rotate?</b><br>
        A: Rotating changes the size of the bounding box. To keep the image visually centred
        in the same spot, the top-left corner (Shift X/Y) has to move.</p>
        <p><b>Q: Which layers are exported?</b><br>
        A: The checked layers, or every layer when none are checked. <i>layer_order</i>
        counts from 0 (bottom) within the exported set.</p>
        
        <h3>Controls</h3>
        <table width="100%">
        <tr><td width="35%"><b>Ctrl/Cmd + Drag</b></td><td>Pan (on empty canvas)</td></tr>
        <tr><td><b>Space + Drag</b></td><td>Pan</td></tr>
        <tr><td><b>Middle Drag</b></td><td>Pan</td></tr>
        <tr><td><b>Ctrl/Cmd + Wheel</b></td><td>Zoom in/out</td></tr>
        <tr><td><b>Drag on empty canvas</b></td><td>Box select (Shift adds to selection)</td></tr>
        <tr><td><b>Shift/Ctrl + Click</b></td><td>Add/remove layer from selection</td></tr>
        <tr><td><b>Arrow keys</b></td><td>Move selection 1 px (Shift: 10 px)</td></tr>
        <tr><td><b>Delete / Backspace</b></td><td>Delete selected layer(s)</td></tr>
        <tr><td><b>Ctrl+Z</b></td><td>Undo</td></tr>
        <tr><td><b>Ctrl+Shift+Z / Ctrl+Y</b></td><td>Redo</td></tr>
        </table>
        """)
        
        layout.addWidget(text_edit)
        
        close_btn = QPushButton("Got it")
        close_btn.clicked.connect(self.accept)
        layout.addWidget(close_btn)
        
        self.setLayout(layout)
