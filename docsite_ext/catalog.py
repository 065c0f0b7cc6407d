from __future__ import annotations

import logging
import posixpath
from typing import Iterable, List, Optional, Protocol

from .models import ComponentModel, ContentFile, FileSrc
from .resource import RESOURCE_ID_RX, parse_resource_id

logger = logging.getLogger(__name__)


class ContentCatalog(Protocol):
    """
    What the extensions need from the host's content catalog.
    """

    def get_files(self) -> List[ContentFile]:  # pragma: no cover - interface
        ...

    def get_component(self, name: str) -> Optional[ComponentModel]:  # pragma: no cover - interface
        ...

    def resolve_resource(self, ref: str, src: FileSrc, default_family: str = "page") -> Optional[ContentFile]:  # pragma: no cover - interface
        ...

    def add_file(self, file: ContentFile) -> ContentFile:  # pragma: no cover - interface
        ...


class InMemoryCatalog:
    """
    Simple list-backed catalog. Useful for hosts that load everything up front, and for tests.
    """

    def __init__(self, files: Optional[Iterable[ContentFile]] = None, components: Optional[Iterable[ComponentModel]] = None) -> None:
        self._files: List[ContentFile] = list(files or [])
        self._components = {c.name: c for c in (components or [])}

    def get_files(self) -> List[ContentFile]:
        return list(self._files)

    def get_component(self, name: str) -> Optional[ComponentModel]:
        return self._components.get(name)

    def add_component(self, component: ComponentModel) -> None:
        self._components[component.name] = component

    def add_file(self, file: ContentFile) -> ContentFile:
        s = file.src
        # a regenerated attachment replaces the previous one
        self._files = [
            f for f in self._files
            if (f.src.component, f.src.version, f.src.module, f.src.family, f.src.relative)
            != (s.component, s.version, s.module, s.family, s.relative)
        ]
        self._files.append(file)
        return file

    def resolve_resource(self, ref: str, src: FileSrc, default_family: str = "page") -> Optional[ContentFile]:
        defaults = FileSrc(
            component=src.component,
            version=src.version,
            module=src.module,
            family=default_family,
            relative=src.relative,
        )
        parsed = parse_resource_id(ref, defaults)
        if parsed is None:
            return None

        version = parsed.version
        explicit_version = RESOURCE_ID_RX.match(ref).group(1)
        if parsed.component != src.component and not explicit_version:
            # another component without an explicit version means its latest one
            component = self.get_component(parsed.component or "")
            if component is None or component.latest is None:
                return None
            version = component.latest.version

        relative = parsed.relative
        if parsed.family == "page" and not posixpath.splitext(relative)[1]:
            relative += ".adoc"

        for f in self._files:
            fs = f.src
            if (fs.component, fs.version, fs.module, fs.family, fs.relative) == (
                parsed.component, version, parsed.module, parsed.family, relative
            ):
                return f
        logger.debug("Could not resolve %r from %s", ref, src.relative)
        return None
