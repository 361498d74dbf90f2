# FILE: sitecounts/wsgi.py
"""
WSGI config for the sitecounts project.
Exposes the WSGI callable as a module-level variable named `application`.
"""

import os
from pathlib import Path

from django.core.wsgi import get_wsgi_application
from dotenv import load_dotenv

# ── Load .env early (so DJANGO_SETTINGS_MODULE and others can come from env) ──
env_file = Path(__file__).resolve().parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file.as_posix())

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sitecounts.settings")

application = get_wsgi_application()
