"""ASGI config for the tabletop campaign service."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tabletop_app.settings")

application = get_asgi_application()
