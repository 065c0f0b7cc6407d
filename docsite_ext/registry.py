from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, Union

from .attributes import MacroAttributes, parse_attrlist
from .component import ComponentMacro
from .config import ExtensionContext
from .fref import FrefMacro
from .news import NewsBlockMacro, NewsInlineMacro

logger = logging.getLogger(__name__)


class MacroProcessor(Protocol):
    def process(self, parent: Any, target: str, attributes: MacroAttributes) -> Any:  # pragma: no cover - interface
        ...


def _attributes(attributes: Union[MacroAttributes, str, None]) -> MacroAttributes:
    if attributes is None:
        return MacroAttributes()
    if isinstance(attributes, str):
        return parse_attrlist(attributes)
    return attributes


class MacroRegistry:
    """
    Inline and block macro processors by macro name, as the host document processor sees them.
    """

    def __init__(self) -> None:
        self.inline_macros: Dict[str, MacroProcessor] = {}
        self.block_macros: Dict[str, MacroProcessor] = {}

    def inline_macro(self, name: str, processor: MacroProcessor) -> None:
        self.inline_macros[name] = processor

    def block_macro(self, name: str, processor: MacroProcessor) -> None:
        self.block_macros[name] = processor

    def process_inline(self, name: str, parent: Any, target: str, attributes: Union[MacroAttributes, str, None] = None) -> Optional[str]:
        processor = self.inline_macros.get(name)
        if processor is None:
            logger.debug("No inline macro registered as %r", name)
            return None
        return processor.process(parent, target, _attributes(attributes))

    def process_block(self, name: str, parent: Any, target: str, attributes: Union[MacroAttributes, str, None] = None) -> None:
        processor = self.block_macros.get(name)
        if processor is None:
            logger.debug("No block macro registered as %r", name)
            return None
        processor.process(parent, target, _attributes(attributes))
        return None


def register_extensions(registry: MacroRegistry, context: ExtensionContext) -> MacroRegistry:
    """Register every extension of this package for the file described by ``context``."""
    registry.inline_macro(ComponentMacro.name, ComponentMacro(context))
    registry.inline_macro(NewsInlineMacro.name, NewsInlineMacro(context))
    registry.block_macro(NewsBlockMacro.name, NewsBlockMacro(context))
    registry.inline_macro(FrefMacro.name, FrefMacro(context))
    return registry
