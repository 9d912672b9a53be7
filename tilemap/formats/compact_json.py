"""
Compact JSON formatter for map files.

Keeps arrays of scalars and objects whose values are all scalars on a
single line, so a map file has one line per tile. Everything else is
indented normally.
"""

import json


def _is_scalar(value) -> bool:
    return value is None or isinstance(value, (bool, int, float, str))


def _is_flat(value) -> bool:
    if isinstance(value, list):
        return all(_is_scalar(item) for item in value)
    if isinstance(value, dict):
        return all(_is_scalar(item) for item in value.values())
    return True


def _inline(value) -> str:
    return json.dumps(value, separators=(", ", ": "))


def dumps(obj, indent: int = 2) -> str:
    """
    Serialize obj to a JSON formatted string.

    Args:
        obj: The object to serialize
        indent: Number of spaces for indentation (default: 2)
    """

    def format_value(value, level: int) -> str:
        if _is_flat(value):
            return _inline(value)

        pad = " " * (indent * level)
        child_pad = " " * (indent * (level + 1))
        if isinstance(value, list):
            items = [child_pad + format_value(item, level + 1) for item in value]
            return "[\n" + ",\n".join(items) + "\n" + pad + "]"

        items = [
            f"{child_pad}{json.dumps(key)}: {format_value(item, level + 1)}"
            for key, item in value.items()
        ]
        return "{\n" + ",\n".join(items) + "\n" + pad + "}"

    return format_value(obj, 0)


def dump(obj, fp, indent: int = 2):
    """Serialize obj to a file-like object, ending with a newline."""
    fp.write(dumps(obj, indent))
    fp.write("\n")


def load(fp):
    return json.load(fp)
