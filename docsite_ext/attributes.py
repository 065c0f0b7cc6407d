from __future__ import annotations

import re
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

Key = Union[int, str]

_ATTR_RX = re.compile(
    r"""\s*
    (?:(?P<name>[A-Za-z_][\w-]*)\s*=\s*)?
    (?:"(?P<dq>(?:[^"\\]|\\.)*)"|'(?P<sq>(?:[^'\\]|\\.)*)'|(?P<bare>[^,]*))
    \s*(?:,|$)""",
    re.VERBOSE,
)


class MacroAttributes(Mapping[Key, Optional[str]]):
    """
    Ordered macro attributes that keep "present without a value" apart from "absent".

    Positional attributes are keyed by their 1-based position, named ones by
    their name. A key mapped to ``None`` was given without a value, e.g. the
    ``version`` in ``component:foo[version]`` is stored as ``{1: "version"}``
    while an empty ``[]`` stores nothing at all.
    """

    def __init__(self, items: Optional[Union[Mapping[Key, Optional[str]], List[Tuple[Key, Optional[str]]]]] = None) -> None:
        self._data: Dict[Key, Optional[str]] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for k, v in pairs:
            self._data[k] = v

    @classmethod
    def of(cls, *positional: Optional[str], **named: Optional[str]) -> "MacroAttributes":
        pairs: List[Tuple[Key, Optional[str]]] = [(i, v) for i, v in enumerate(positional, start=1)]
        pairs.extend(named.items())
        return cls(pairs)

    def __getitem__(self, key: Key) -> Optional[str]:
        return self._data[key]

    def __iter__(self) -> Iterator[Key]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MacroAttributes({self._data!r})"

    def has(self, key: Key) -> bool:
        return key in self._data

    def positional(self, position: int) -> Optional[str]:
        return self._data.get(position)

    def named(self, name: str) -> Optional[str]:
        return self._data.get(name)

    def only_positional(self) -> Optional[str]:
        """Value of the single positional attribute, or None unless exactly one attribute is present."""
        if len(self._data) != 1 or 1 not in self._data:
            return None
        return self._data[1]


def _unescape(s: str) -> str:
    return re.sub(r"\\(.)", r"\1", s)


def parse_attrlist(text: str) -> MacroAttributes:
    """
    Parse the text between the brackets of a macro.

    ``version`` -> {1: "version"}; ``refs=news/*.adoc`` -> {"refs": "news/*.adoc"};
    ``"Hello, world"`` -> {1: "Hello, world"}. An empty string yields no attributes.
    """
    pairs: List[Tuple[Key, Optional[str]]] = []
    if not text or not text.strip():
        return MacroAttributes(pairs)

    pos = 0
    position = 0
    while pos < len(text):
        m = _ATTR_RX.match(text, pos)
        if not m:
            break
        if m.group("dq") is not None:
            value: Optional[str] = _unescape(m.group("dq"))
        elif m.group("sq") is not None:
            value = _unescape(m.group("sq"))
        else:
            value = (m.group("bare") or "").strip()
        name = m.group("name")
        if name:
            pairs.append((name, value))
        else:
            position += 1
            pairs.append((position, value))
        if m.end() == len(text):
            break
        pos = m.end()
    return MacroAttributes(pairs)
