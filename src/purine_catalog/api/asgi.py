"""ASGI entrypoint for the catalog API."""

from purine_catalog.api.app import create_app
from purine_catalog.containers import build_container

app = create_app(build_container())
