"""ASGI entrypoint for the yoga studio API."""

from yoga_studio.api.app import create_app
from yoga_studio.containers import build_container

app = create_app(build_container())
