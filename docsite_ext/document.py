"""
Minimal AsciiDoc model.

The host pipeline owns real document parsing. This module only understands
what the extensions have to read or produce: the document header (title and
attribute entries) and plain paragraph blocks with an optional role.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

_ATTR_ENTRY_RX = re.compile(r"^:(?P<name>!?[\w][\w-]*!?):(?:\s+(?P<value>.*))?$")
_DOCTITLE_RX = re.compile(r"^=\s+(?P<title>\S.*)$")
_SECTION_RX = re.compile(r"^={2,6}\s+\S")
_BLOCK_ATTRS_RX = re.compile(r"^\[(?P<attrs>[^\]]*)\]$")
_ROLE_RX = re.compile(r"(?:^|[#%])\.(?P<role>[\w-]+)")


@dataclass
class Block:
    lines: List[str]
    role: Optional[str] = None

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass
class Section:
    title: str
    blocks: List[Block] = field(default_factory=list)

    def append(self, block: Block) -> None:
        self.blocks.append(block)


@dataclass
class Document:
    attributes: Dict[str, str] = field(default_factory=dict)
    blocks: List[Union[Block, Section]] = field(default_factory=list)

    @property
    def doctitle(self) -> Optional[str]:
        return self.attributes.get("doctitle")

    def append(self, node: Union[Block, Section]) -> None:
        self.blocks.append(node)


def _role_of(attrlist: str) -> Optional[str]:
    first = attrlist.split(",", 1)[0].strip()
    m = _ROLE_RX.search(first)
    return m.group("role") if m else None


def _strip_block_comments(lines: List[str]) -> List[str]:
    out: List[str] = []
    in_comment = False
    for line in lines:
        if line.rstrip() == "////":
            in_comment = not in_comment
            continue
        if not in_comment:
            out.append(line)
    return out


def _apply_attribute_entry(attributes: Dict[str, str], m: "re.Match[str]") -> None:
    name = m.group("name")
    if name.startswith("!") or name.endswith("!"):
        attributes.pop(name.strip("!"), None)
    else:
        attributes[name] = (m.group("value") or "").strip()


def parse_blocks(text: str, attributes: Optional[Dict[str, str]] = None) -> List[Block]:
    """
    Split AsciiDoc body text into paragraph blocks separated by blank lines.

    Attribute entries between blocks go to ``attributes`` when given and are
    never block content. Comment lines and ``////`` comment blocks are skipped.
    """
    blocks: List[Block] = []
    lines: List[str] = []
    role: Optional[str] = None

    def flush() -> None:
        nonlocal lines, role
        if lines:
            blocks.append(Block(lines=lines, role=role))
            role = None
        lines = []

    for raw in _strip_block_comments(text.splitlines()):
        line = raw.rstrip()
        if not line:
            flush()
            continue
        if line.startswith("//"):
            continue
        if not lines:
            m = _ATTR_ENTRY_RX.match(line)
            if m:
                if attributes is not None:
                    _apply_attribute_entry(attributes, m)
                continue
            m = _BLOCK_ATTRS_RX.match(line)
            if m:
                role = _role_of(m.group("attrs"))
                continue
            if _SECTION_RX.match(line):
                continue
        lines.append(line)
    flush()
    return blocks


def load_document(text: str) -> Document:
    """
    Load the header attributes and the top-level paragraphs of an AsciiDoc document.

    The header runs from the top of the document to the first blank line
    following the title or an attribute entry. ``= Title`` becomes the
    ``doctitle`` attribute; ``:name: value`` entries become attributes and
    ``:name!:`` unsets one.
    """
    doc = Document()
    lines = _strip_block_comments(text.splitlines())
    i = 0
    in_header = False
    while i < len(lines):
        line = lines[i].rstrip()
        if not line:
            if in_header:
                i += 1
                break
            i += 1
            continue
        if line.startswith("//"):
            i += 1
            continue
        m = _DOCTITLE_RX.match(line)
        if m and "doctitle" not in doc.attributes:
            doc.attributes["doctitle"] = m.group("title").strip()
            in_header = True
            i += 1
            continue
        m = _ATTR_ENTRY_RX.match(line)
        if m:
            _apply_attribute_entry(doc.attributes, m)
            in_header = True
            i += 1
            continue
        if in_header and "doctitle" in doc.attributes and not _BLOCK_ATTRS_RX.match(line):
            # author or revision line
            i += 1
            continue
        break

    doc.blocks.extend(parse_blocks("\n".join(lines[i:]), doc.attributes))
    return doc
