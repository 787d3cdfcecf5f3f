"""Small object utilities: a rectangle value and JSON round-tripping."""

from cssbuilder.objects.rectangle import Rectangle
from cssbuilder.objects.serialization import from_json, to_json

__all__ = ["Rectangle", "to_json", "from_json"]
