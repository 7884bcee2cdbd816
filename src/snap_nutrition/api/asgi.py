"""ASGI entrypoint for the snap nutrition API."""

from snap_nutrition.api.app import create_app
from snap_nutrition.containers import build_container

app = create_app(build_container())
