"""Small object helpers: a Rectangle value and a JSON encode/decode pair."""

from cssbuilder.objects.json_codec import from_json, get_json
from cssbuilder.objects.rectangle import Rectangle

__all__ = ["Rectangle", "get_json", "from_json"]
