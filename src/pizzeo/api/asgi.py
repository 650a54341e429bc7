"""ASGI entrypoint for the Pizzeo API."""

from pizzeo.api.app import create_app
from pizzeo.containers import build_container

app = create_app(build_container())
