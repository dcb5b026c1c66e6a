"""Built-in string encoders."""

import html
import re
from typing import ClassVar

from ..engine.interface import Encoder


class XssEncoder(Encoder):
    """Escapes HTML special characters, quotes included."""

    def encode(self, value: str) -> str:
        return html.escape(value, quote=True)


class StripTagsEncoder(Encoder):
    """Removes ``<...>`` markup tags."""

    TAG_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"<[^>]*>")

    def encode(self, value: str) -> str:
        return self.TAG_PATTERN.sub("", value)


class TrimEncoder(Encoder):
    def encode(self, value: str) -> str:
        return value.strip()
