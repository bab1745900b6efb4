"""
Background image decoding.

Each file decodes in a QRunnable on the global QThreadPool. Results come
back through a queued signal, so ImportBatch bookkeeping and the final
store commit always run on the GUI thread.
"""

import logging

from PyQt5.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal, pyqtSlot

from services.image_import import DecodeResult, ImportBatch, decode_image_file

logger = logging.getLogger('ImageImport')


class _DecodeSignals(QObject):
    """QRunnable is not a QObject, so its signals live here."""
    decoded = pyqtSignal(int, object)  # batch id, DecodeResult


class DecodeTask(QRunnable):
    """Decode one file off the GUI thread."""

    def __init__(self, batch_id, path, signals):
        super().__init__()
        self.batch_id = batch_id
        self.path = path
        self.signals = signals

    @pyqtSlot()
    def run(self):
        # Every task must settle its batch, even on an unexpected decoder error
        try:
            result = decode_image_file(self.path)
        except Exception as e:
            logger.exception(f"Unexpected error decoding {self.path}")
            result = DecodeResult(path=self.path, error=str(e))
        self.signals.decoded.emit(self.batch_id, result)


class ImageImporter(QObject):
    """Starts import batches and reports each one when it has fully settled."""

    batch_finished = pyqtSignal(list)  # List[DecodedImage], completion order

    def __init__(self, parent=None, thread_pool=None):
        super().__init__(parent)
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        self._signals = _DecodeSignals()
        self._signals.decoded.connect(self._on_decoded)
        self._batches = {}
        self._next_batch_id = 0

    def import_files(self, paths):
        """Queue every path for decoding as one batch

        Returns:
            The batch id, or None when paths is empty
        """
        paths = list(paths)
        if not paths:
            return None

        batch_id = self._next_batch_id
        self._next_batch_id += 1
        self._batches[batch_id] = ImportBatch(
            len(paths), lambda images, b=batch_id: self._on_batch_complete(b, images))

        logger.debug(f"Import batch {batch_id}: {len(paths)} file(s)")
        for path in paths:
            self.thread_pool.start(DecodeTask(batch_id, path, self._signals))
        return batch_id

    def pending_batches(self):
        return len(self._batches)

    def _on_decoded(self, batch_id, result):
        batch = self._batches.get(batch_id)
        if batch is None:
            logger.warning(f"Decode result for unknown batch {batch_id}")
            return
        batch.add_result(result)

    def _on_batch_complete(self, batch_id, images):
        del self._batches[batch_id]
        self.batch_finished.emit(images)
