from __future__ import annotations

import logging

from .attributes import MacroAttributes
from .config import ExtensionContext
from .resource import split_fragment
from .urls import compute_relative_url_path

logger = logging.getLogger(__name__)


class FrefMacro:
    """
    ``fref:<target>[link text]``: like ``xref`` but for resources of any family.

    A target the catalog cannot resolve becomes a plain ``#<target>`` link.
    """

    name = "fref"

    def __init__(self, context: ExtensionContext) -> None:
        self.context = context

    def process(self, parent, target: str, attributes: MacroAttributes) -> str:
        link, hash = split_fragment(target)
        text = attributes.only_positional()

        resolved = self.context.catalog.resolve_resource(link, self.context.file.src, "page")
        if resolved is None or resolved.pub is None:
            logger.debug("Unresolved fref target %r in %s", target, self.context.file.src.relative)
            return f'<a href="#{target}">{text or target}</a>'

        here = self.context.file.pub.url if self.context.file.pub else "/"
        url = compute_relative_url_path(here, resolved.pub.url, hash)
        return f'<a href="{url}">{text or url}</a>'
