"""Serialization module: hand a parsed workout to the rest of the app."""

from notation_parser.serialization.json_export import to_dict, to_json_string

__all__ = ["to_dict", "to_json_string"]
