"""JSON handling utilities with orjson for performance."""

from pathlib import Path
from typing import Any

import orjson


class JsonHandler:
    """JSON handler for build summaries, backed by orjson."""

    @staticmethod
    def _options(pretty: bool) -> int:
        options = orjson.OPT_SORT_KEYS
        if pretty:
            options |= orjson.OPT_INDENT_2
        return options

    @staticmethod
    def dumps(data: Any, pretty: bool = False) -> str:
        """
        Serialize data to JSON string.

        Args:
            data: Data to serialize
            pretty: Whether to format with indentation

        Returns:
            JSON string
        """
        return orjson.dumps(data, option=JsonHandler._options(pretty)).decode("utf-8")

    @staticmethod
    def loads(json_str: str | bytes) -> Any:
        """Parse a JSON document."""
        return orjson.loads(json_str)

    @staticmethod
    def dump_file(data: Any, path: Path, pretty: bool = True) -> None:
        """
        Write data to JSON file.

        Args:
            data: Data to write
            path: File path
            pretty: Whether to format with indentation
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "wb") as f:
            f.write(orjson.dumps(data, option=JsonHandler._options(pretty)))
