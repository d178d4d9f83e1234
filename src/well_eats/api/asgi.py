"""ASGI entrypoint for the WellEats API."""

from well_eats.api.app import create_app
from well_eats.containers import build_container

app = create_app(build_container())
