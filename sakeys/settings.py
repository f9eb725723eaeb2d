from __future__ import annotations

import dataclasses
from collections import abc
from typing import Any


@dataclasses.dataclass
class KeyFormat:
    """ Settings for rendering key values as a string

    The default format is: "(id)=[1]; (version)=[2]"

    Override the callbacks in a subclass to customize rendering further.
    """
    # Placed between key parts
    separator: str = '; '

    # Template for a single key part. Receives `name` and `value` (already rendered)
    segment: str = '({name})=[{value}]'

    def format_value(self, value: Any) -> str:
        """ Callback: render a single value. None renders as an empty string """
        if value is None:
            return ''
        return str(value)

    def format_segment(self, name: str, value: Any) -> str:
        """ Callback: render one key part """
        return self.segment.format(name=name, value=self.format_value(value))

    def format(self, key_values: abc.Iterable[tuple[str, Any]]) -> str:
        """ Render (name, value) pairs into a string """
        return self.separator.join(
            self.format_segment(name, value)
            for name, value in key_values
        )
