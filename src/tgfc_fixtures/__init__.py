"""TGFC fixture schedule builder.

Turns a CSV listing of fixtures into a venue -> day -> fixture schedule and
renders it through a Jinja2 template.
"""

__version__ = "0.3.0"

from tgfc_fixtures.classifier import classify_opponent
from tgfc_fixtures.models import Day, Fixture, Location
from tgfc_fixtures.pipeline import build_context, build_locations

__all__ = [
    "build_locations",
    "build_context",
    "classify_opponent",
    "Fixture",
    "Day",
    "Location",
    "__version__",
]
