"""
API views for the tabletop application.
"""

from .campaigns import *  # noqa: F401,F403
from .memberships import *  # noqa: F401,F403
from .scene_views import *  # noqa: F401,F403
