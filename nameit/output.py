"""Serialization of generated names to text, JSON or YAML."""
from __future__ import annotations

import json
import logging
import warnings
from enum import Enum
from typing import Sequence, TextIO, Union

import yaml

from .errors import OutputEncodingError, UnknownOutputFormatWarning


logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"
    yaml = "yaml"


def resolve_format(output: Union[OutputFormat, str, None]) -> OutputFormat:
    """Map a format name to an OutputFormat, falling back to text.

    Unknown names issue an UnknownOutputFormatWarning instead of failing.
    """
    if isinstance(output, OutputFormat):
        return output
    value = (output or OutputFormat.text.value).strip().lower()
    try:
        return OutputFormat(value)
    except ValueError:
        warnings.warn(
            f"Unknown output format '{output}'. Using text format.",
            UnknownOutputFormatWarning,
            stacklevel=3,
        )
        return OutputFormat.text


def format_names(names: Sequence[str], output: Union[OutputFormat, str, None] = OutputFormat.text) -> str:
    """Render names in the requested format.

    - text: one name per line, each newline-terminated
    - json: array indented with 2 spaces, no trailing newline
    - yaml: block sequence

    Raises:
        OutputEncodingError: If the names cannot be serialized
    """
    fmt = resolve_format(output)
    names = list(names)

    if fmt is OutputFormat.json:
        try:
            return json.dumps(names, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise OutputEncodingError(f"Failed to encode names as JSON: {e}") from e

    if fmt is OutputFormat.yaml:
        try:
            return yaml.safe_dump(names, default_flow_style=False, allow_unicode=True)
        except yaml.YAMLError as e:
            raise OutputEncodingError(f"Failed to encode names as YAML: {e}") from e

    return "".join(f"{name}\n" for name in names)


def write_names(names: Sequence[str], output: Union[OutputFormat, str, None], stream: TextIO) -> None:
    """Render names and write them to stream.

    The whole document is rendered before writing, so an encoding error
    leaves the stream untouched. JSON output gets a trailing newline.
    """
    fmt = resolve_format(output)
    content = format_names(names, fmt)
    if fmt is OutputFormat.json:
        content += "\n"
    stream.write(content)
    logger.debug(f"Wrote {len(names)} names as {fmt.value}")
