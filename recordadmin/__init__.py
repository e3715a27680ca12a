"""
__init__

Admin module entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import RecordAdminSettings, configure, current_settings
from .core.capabilities import OperationKind, SortOrder
from .core.model import AdminAction, ModelAdmin
from .core.site import AdminSite
from .router import AdminRouter
from .meta import __version__

# The End
