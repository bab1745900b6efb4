"""Preference persistence for StitchCraftEditor"""

import os
import json
import logging
from utils.logger import loggerRaise
from constants import (DEFAULT_ANGLE_STEP, MAX_ANGLE_STEP,
                       CONFIG_DIR_NAME, CONFIG_FILE_NAME)

logger = logging.getLogger('Config')


def default_config_dir():
	return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)


class ConfigMixin:
	"""Configuration file operations: angle step and sidebar collapse flags

	Expects self.config_dir and self.config_file to be set before _load_config().
	"""

	def _init_config_defaults(self):
		self.angle_step = DEFAULT_ANGLE_STEP
		self.left_sidebar_collapsed = False
		self.right_sidebar_collapsed = False

	def _load_config(self):
		"""Load preferences; missing or unreadable files fall back to defaults"""
		self._init_config_defaults()
		if not os.path.exists(self.config_file):
			return

		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				config = json.load(f)
		except (OSError, ValueError) as e:
			logger.warning(f"Ignoring unreadable config {self.config_file}: {e}")
			return

		if not isinstance(config, dict):
			logger.warning(f"Ignoring config with unexpected structure: {type(config).__name__}")
			return

		step = config.get('angle_step', DEFAULT_ANGLE_STEP)
		if isinstance(step, (int, float)) and not isinstance(step, bool) and 0 < step <= MAX_ANGLE_STEP:
			self.angle_step = float(step)
		else:
			logger.warning(f"Ignoring invalid angle_step in config: {step!r}")

		for key in ('left_sidebar_collapsed', 'right_sidebar_collapsed'):
			value = config.get(key, False)
			if isinstance(value, bool):
				setattr(self, key, value)
			else:
				logger.warning(f"Ignoring invalid {key} in config: {value!r}")

	def _save_config(self):
		"""Save preferences to config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)

			config = {
				'angle_step': self.angle_step,
				'left_sidebar_collapsed': self.left_sidebar_collapsed,
				'right_sidebar_collapsed': self.right_sidebar_collapsed,
			}

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")

	def set_angle_step(self, step):
		"""Persist a new angle step (caller has validated the range)"""
		self.angle_step = step
		self._save_config()

	def set_sidebar_collapsed(self, side, collapsed):
		"""Persist a sidebar collapse flag

		Args:
			side: 'left' or 'right'
			collapsed: bool
		"""
		if side not in ('left', 'right'):
			raise ValueError(f"Unknown sidebar: {side}")
		setattr(self, f'{side}_sidebar_collapsed', bool(collapsed))
		self._save_config()
