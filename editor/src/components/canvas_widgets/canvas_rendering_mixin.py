"""Canvas rendering mixin.

Paints the layer stack with QPainter: each visible layer's image rotated
about the centre of its bounding box, then guides, selection outlines and
the marquee on top.
"""

from PyQt5.QtCore import Qt, QRectF
from PyQt5.QtGui import QColor, QImage, QPainter, QPen, QPixmap

from models.transform import Vec2
from utils.geometry import layer_bounding_box, sanitize_scale
from utils.number_utils import round_half_up, round_to_hundredths


BACKGROUND_COLOR = QColor('#e9eef3')
GUIDE_COLOR = QColor('#38bdf8')
SELECTION_COLOR = QColor('#0284c7')
MARQUEE_BORDER_COLOR = QColor('#0ea5e9')
MARQUEE_FILL_COLOR = QColor(14, 165, 233, 40)
EMPTY_TEXT_COLOR = QColor('#94a3b8')


def pil_to_qimage(image):
    """RGBA PIL image -> detached QImage"""
    rgba = image if image.mode == 'RGBA' else image.convert('RGBA')
    width, height = rgba.size
    data = rgba.tobytes('raw', 'RGBA')
    return QImage(data, width, height, width * 4, QImage.Format_RGBA8888).copy()


class CanvasRenderingMixin:
    """Mixin providing QPainter rendering for the canvas.
    
    Requires from the parent class:
    - self.store, self.viewport, self.controller
    - self.show_guides (bool)
    - self._pixmap_cache (dict)
    """
    
    # ========================================
    # Pixmap cache
    # ========================================
    
    def get_pixmap(self, image_ref):
        """QPixmap for a layer's image, converted once per image"""
        if image_ref is None:
            return None
        key = id(image_ref)
        cached = self._pixmap_cache.get(key)
        if cached is not None and cached[0] is image_ref:
            return cached[1]
        pixmap = QPixmap.fromImage(pil_to_qimage(image_ref))
        # Hold the ref so its id cannot be reused while cached
        self._pixmap_cache[key] = (image_ref, pixmap)
        return pixmap
    
    def prune_pixmap_cache(self):
        """Drop pixmaps for images no longer referenced by any layer or snapshot"""
        live = {id(layer.image_ref) for layer in self.store.layers}
        for entry in self.store.history.past + self.store.history.future:
            live.update(id(layer.image_ref) for layer in entry['data'])
        for key in list(self._pixmap_cache):
            if key not in live:
                del self._pixmap_cache[key]
    
    # ========================================
    # Painting
    # ========================================
    
    def render_canvas(self, painter):
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setRenderHint(QPainter.SmoothPixmapTransform)
        painter.fillRect(self.rect(), BACKGROUND_COLOR)
        
        layers = self.store.layers
        if not layers:
            self._render_empty_hint(painter)
            return
        
        for layer in layers:
            if layer.visible:
                self._render_layer_image(painter, layer)
        
        for layer in layers:
            if not layer.visible:
                continue
            if self.show_guides:
                self._render_guide(painter, layer)
            if self.store.is_selected(layer.id):
                self._render_selection(painter, layer)
        
        self._render_marquee(painter)
    
    def _render_empty_hint(self, painter):
        painter.setPen(EMPTY_TEXT_COLOR)
        painter.drawText(self.rect(), Qt.AlignCenter,
                         "Import images or drop them here to start aligning")
    
    def _render_layer_image(self, painter, layer):
        pixmap = self.get_pixmap(layer.image_ref)
        if pixmap is None:
            return
        box = self.viewport.rect_to_screen(layer_bounding_box(layer))
        center = box.center
        draw_scale = self.viewport.zoom * sanitize_scale(layer.scale)
        
        painter.save()
        painter.setOpacity(layer.opacity)
        painter.translate(center.x, center.y)
        painter.rotate(layer.rotation)
        painter.scale(draw_scale, draw_scale)
        painter.drawPixmap(QRectF(-layer.width / 2, -layer.height / 2, layer.width, layer.height),
                           pixmap, QRectF(pixmap.rect()))
        painter.restore()
    
    def _render_guide(self, painter, layer):
        box = self.viewport.rect_to_screen(layer_bounding_box(layer))
        pen = QPen(GUIDE_COLOR, 1, Qt.DashLine)
        pen.setCosmetic(True)
        painter.save()
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        painter.drawRect(self.rect_to_qrectf(box))
        label = (f"{layer.name}  X {round_half_up(layer.x)}  Y {round_half_up(layer.y)}"
                 f"  {round_to_hundredths(layer.rotation)}°")
        painter.drawText(self.vec2_to_qpointf(Vec2(box.x + 4, box.y - 6)), label)
        painter.restore()
    
    def _render_selection(self, painter, layer):
        box = self.viewport.rect_to_screen(layer_bounding_box(layer))
        pen = QPen(SELECTION_COLOR, 2)
        pen.setCosmetic(True)
        painter.save()
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        painter.drawRect(self.rect_to_qrectf(box))
        painter.restore()
    
    def _render_marquee(self, painter):
        marquee = self.controller.marquee_rect
        if marquee is None:
            return
        painter.save()
        painter.setPen(QPen(MARQUEE_BORDER_COLOR, 1))
        painter.setBrush(MARQUEE_FILL_COLOR)
        painter.drawRect(self.rect_to_qrectf(marquee))
        painter.restore()
