# FILE: sitecounts/asgi.py
"""
ASGI config for the sitecounts project.
Exposes the ASGI callable as a module-level variable named `application`.
"""

import os
from pathlib import Path

from django.core.asgi import get_asgi_application
from dotenv import load_dotenv

env_file = Path(__file__).resolve().parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file.as_posix())

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sitecounts.settings")

application = get_asgi_application()
