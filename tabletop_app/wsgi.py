"""WSGI config for the tabletop campaign service."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tabletop_app.settings")

application = get_wsgi_application()
