from __future__ import annotations

import logging
from typing import Optional

from .attributes import MacroAttributes
from .config import ExtensionContext
from .models import ComponentModel, ComponentVersion

logger = logging.getLogger(__name__)

FIELDS = {
    "version": lambda v: v.version,
    "displayVersion": lambda v: v.display_version,
    "title": lambda v: v.title,
}


def select_version(model: ComponentModel, version: Optional[str]) -> Optional[ComponentVersion]:
    """
    Pick a version of a component.

    - no version: the component's designated latest version
    - ``latest``: the first listed version, skipping a first listed ``main``
      when there are others
    - anything else: the version with exactly that identifier
    """
    if version is None:
        return model.latest
    if version == "latest":
        if not model.versions:
            return None
        if len(model.versions) > 1 and model.versions[0].version == "main":
            return model.versions[1]
        return model.versions[0]
    for v in model.versions:
        if v.version == version:
            return v
    return None


def resolve_component_field(model: Optional[ComponentModel], version: Optional[str], field: Optional[str]) -> str:
    if model is None:
        return ""
    selected = select_version(model, version)
    if selected is None:
        logger.debug("Component %s has no version %r", model.name, version)
        return ""
    getter = FIELDS.get(field or "")
    if getter is None:
        logger.debug("Unknown component field %r", field)
        return ""
    return getter(selected) or ""


class ComponentMacro:
    """
    ``component:<name>[@<version>][<field>]``: inline text taken from a component version.

    Unknown components, versions and fields render as nothing so that a stale
    reference does not break the build.
    """

    name = "component"

    def __init__(self, context: ExtensionContext) -> None:
        self.context = context

    def process(self, parent, target: str, attributes: MacroAttributes) -> str:
        field = attributes.only_positional()
        if field is None:
            return ""

        name, sep, version = target.partition("@")
        model = self.context.catalog.get_component(name)
        if model is None:
            logger.debug("Unknown component %r", name)
        return resolve_component_field(model, version if sep else None, field)
