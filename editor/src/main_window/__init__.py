"""Main window mixins for StitchCraftEditor"""

from .config_mixin import ConfigMixin
from .event_mixin import EventMixin
from .history_mixin import HistoryMixin
from .menu_mixin import MenuMixin
from .ui_setup_mixin import UISetupMixin

__all__ = ['ConfigMixin', 'EventMixin', 'HistoryMixin', 'MenuMixin', 'UISetupMixin']
