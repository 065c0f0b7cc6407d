from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, List, Optional, Tuple

from .models import ContentFile, FileSrc, ResourceRef

if TYPE_CHECKING:  # pragma: no cover
    from .catalog import ContentCatalog

logger = logging.getLogger(__name__)

# version@component:module:family$relative
RESOURCE_ID_RX = re.compile(
    r"^(?:([^@:$]+)@)?(?:(?:([^@:$]+):)?(?:([^@:$]+))?:)?(?:([^@:$]+)\$)?([^@:$]+)$"
)
_GROUP_VERSION, _GROUP_COMPONENT, _GROUP_MODULE, _GROUP_FAMILY, _GROUP_RELATIVE = 1, 2, 3, 4, 5


def parse_resource_id(ref: str, defaults: FileSrc) -> Optional[ResourceRef]:
    """
    Parse a resource reference, inheriting omitted fields from ``defaults``.

    Returns None when the reference does not follow the resource grammar.
    """
    m = RESOURCE_ID_RX.match(ref)
    if not m:
        return None
    return ResourceRef(
        version=m.group(_GROUP_VERSION) or defaults.version,
        component=m.group(_GROUP_COMPONENT) or defaults.component,
        module=m.group(_GROUP_MODULE) or defaults.module,
        family=m.group(_GROUP_FAMILY) or defaults.family,
        relative=m.group(_GROUP_RELATIVE),
    )


def split_fragment(target: str) -> Tuple[str, str]:
    """Split ``page.adoc#anchor`` into ``("page.adoc", "#anchor")``."""
    idx = target.find("#")
    if idx == -1:
        return target, ""
    return target[:idx], target[idx:]


def _matches_in_order(relative: str, fragments: List[str]) -> bool:
    last = -1
    for frag in fragments:
        idx = relative.find(frag)
        if idx <= last:
            return False
        last = idx
    return True


def match_content_catalog(ref_glob: str, src: FileSrc, catalog: "ContentCatalog") -> List[ContentFile]:
    """
    Find every catalog file matched by a glob-like resource reference.

    The relative part is split on ``*``; a file matches when its coordinates
    equal the (defaulted) reference and each literal fragment occurs in its
    relative path after the previous one. Catalog order is kept.
    """
    ref = parse_resource_id(ref_glob, src)
    if ref is None:
        logger.debug("Reference %r is not a resource reference; nothing to match", ref_glob)
        return []
    fragments = [s for s in ref.relative.split("*") if s]

    out: List[ContentFile] = []
    for f in catalog.get_files():
        fs = f.src
        if (ref.version, ref.component, ref.module, ref.family) != (fs.version, fs.component, fs.module, fs.family):
            continue
        if _matches_in_order(fs.relative, fragments):
            out.append(f)
    logger.debug("Reference %r matched %d file(s)", ref_glob, len(out))
    return out


def qualify_resource_id(target: FileSrc, base: FileSrc) -> str:
    """
    A reference to ``target`` that resolves the same way from a document at ``base``.

    Coordinates shared with ``base`` are left out.
    """
    if (target.component, target.version) != (base.component, base.version):
        return f"{target.version}@{target.component}:{target.module}:{target.relative}"
    if target.module != base.module:
        return f"{target.module}:{target.relative}"
    return target.relative
