"""
Undo/Redo History Manager for StitchCraft

Keeps two stacks of layer-sequence snapshots. A snapshot is recorded
immediately BEFORE a mutation, so undo swaps the current sequence for the
most recent snapshot and parks the current one on the redo stack.
"""

import logging

from constants import MAX_HISTORY_ENTRIES

logger = logging.getLogger('HistoryManager')


class HistoryManager:
	"""Manages undo/redo history with state snapshots"""

	def __init__(self, max_history=MAX_HISTORY_ENTRIES):
		"""
		Initialize the history manager

		Args:
			max_history: Maximum number of snapshots kept on the undo stack
		"""
		self.max_history = max_history
		self.past = []  # Oldest first
		self.future = []  # Next redo first
		self._listeners = []  # Callbacks to notify on state changes

	def record(self, current_state, description=""):
		"""
		Push a snapshot of the state about to be changed

		Args:
			current_state: Sequence of layers (copied into a tuple)
			description: Optional description of the change
		"""
		self.past.append({
			'data': tuple(current_state),
			'description': description
		})

		# Evict oldest beyond the cap
		if len(self.past) > self.max_history:
			del self.past[:len(self.past) - self.max_history]

		# A new branch of edits invalidates redo
		self.future.clear()

		self._notify_listeners()
		logger.debug(f"State recorded: {description} (undo: {len(self.past)})")

	def undo(self, current_state):
		"""
		Step back one snapshot

		Args:
			current_state: The live sequence, moved onto the redo stack

		Returns:
			Tuple of layers to restore, or None if nothing to undo
		"""
		if not self.can_undo():
			logger.debug("Cannot undo - history empty")
			return None

		entry = self.past.pop()
		self.future.insert(0, {
			'data': tuple(current_state),
			'description': entry['description']
		})

		self._notify_listeners()
		logger.debug(f"Undo: {entry['description']} (undo: {len(self.past)}, redo: {len(self.future)})")
		return entry['data']

	def redo(self, current_state):
		"""
		Step forward one snapshot

		Args:
			current_state: The live sequence, moved back onto the undo stack

		Returns:
			Tuple of layers to restore, or None if nothing to redo
		"""
		if not self.can_redo():
			logger.debug("Cannot redo - at end of history")
			return None

		entry = self.future.pop(0)
		self.past.append({
			'data': tuple(current_state),
			'description': entry['description']
		})

		self._notify_listeners()
		logger.debug(f"Redo: {entry['description']} (undo: {len(self.past)}, redo: {len(self.future)})")
		return entry['data']

	def can_undo(self):
		"""Check if undo is available"""
		return len(self.past) > 0

	def can_redo(self):
		"""Check if redo is available"""
		return len(self.future) > 0

	def clear(self):
		"""Clear all history"""
		self.past = []
		self.future = []
		self._notify_listeners()
		logger.debug("History cleared")

	def add_listener(self, callback):
		"""
		Add a listener to be notified when history state changes

		Args:
			callback: Function to call when history changes (receives can_undo, can_redo)
		"""
		self._listeners.append(callback)

	def remove_listener(self, callback):
		"""Remove a listener"""
		if callback in self._listeners:
			self._listeners.remove(callback)

	def _notify_listeners(self):
		"""Notify all listeners of history state change"""
		for callback in self._listeners:
			try:
				callback(self.can_undo(), self.can_redo())
			except Exception:
				logger.exception("Error notifying history listener")

	def get_undo_description(self):
		"""Description of the change undo would revert"""
		if self.can_undo():
			return self.past[-1]['description']
		return ""

	def get_redo_description(self):
		"""Description of the change redo would re-apply"""
		if self.can_redo():
			return self.future[0]['description']
		return ""
