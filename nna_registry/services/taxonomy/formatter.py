"""
Input normalization for taxonomy addresses.

UI forms hand us whatever the user typed or picked: lower-case codes,
display names ("Hip_Hop", "dance clubs"), unpadded numbers. These helpers
turn that into the canonical HFN/MFA the resolver expects. Anything that
cannot be matched raises TaxonomyLookupError; nothing is guessed.
"""

import logging
import re
from collections.abc import Iterable
from typing import Optional

from nna_registry.services.taxonomy.resolver import (
    TaxonomyResolver,
    format_sequential,
    get_resolver,
    split_address,
)
from nna_registry.taxonomy.exceptions import TaxonomyLookupError
from nna_registry.taxonomy.models import TaxonomyNode

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[_\s\-]+")

__all__ = [
    "display_name",
    "format_hfn",
    "format_mfa",
    "format_sequential",
    "lookup_category_code",
    "lookup_subcategory_code",
]


def _squash(value: str) -> str:
    """'Hip_Hop' / 'hip-hop' / 'HIP HOP' -> 'HIPHOP'"""
    return _SEPARATORS.sub("", value).upper()


def _match_node(nodes: Iterable[TaxonomyNode], value: str) -> Optional[TaxonomyNode]:
    nodes = list(nodes)
    wanted = value.strip().upper()
    for node in nodes:
        if node.code == wanted:
            return node
    squashed = _squash(value)
    for node in nodes:
        if _squash(node.name) == squashed:
            return node
    return None


def display_name(node: TaxonomyNode) -> str:
    """'Dance_Clubs' -> 'Dance Clubs'"""
    return node.name.replace("_", " ")


def lookup_category_code(
    layer: str, value: str, resolver: Optional[TaxonomyResolver] = None
) -> str:
    """
    Canonical category code for a code or display name.

    >>> lookup_category_code("S", "hip_hop")
    'HIP'
    """
    resolver = resolver or get_resolver()
    node = _match_node(resolver.get_categories(layer), value or "")
    if node is None:
        raise TaxonomyLookupError(f"No category {value!r} in layer {layer!r}", value)
    return node.code


def lookup_subcategory_code(
    layer: str, category: str, value: str, resolver: Optional[TaxonomyResolver] = None
) -> str:
    """Canonical subcategory code for a code or display name ('base' -> 'BAS')."""
    resolver = resolver or get_resolver()
    category_code = lookup_category_code(layer, category, resolver)
    node = _match_node(resolver.get_subcategories(layer, category_code), value or "")
    if node is None:
        raise TaxonomyLookupError(
            f"No subcategory {value!r} in {layer}.{category_code}", value
        )
    return node.code


def format_hfn(hfn: str, resolver: Optional[TaxonomyResolver] = None) -> str:
    """
    Canonical HFN: upper-case codes, names resolved to codes, sequential
    padded (defaulting to 001), trailing segments kept as-is.

    'w.beach.sunset.2.mp4' -> 'W.BCH.SUN.002.mp4'
    """
    resolver = resolver or get_resolver()
    parts = split_address(hfn, "HFN")
    layer = parts[0].strip().upper()
    if resolver.get_layer_numeric_code(layer) is None:
        raise TaxonomyLookupError(f"Unknown layer {parts[0]!r} in HFN {hfn!r}", hfn)
    category = lookup_category_code(layer, parts[1], resolver)
    subcategory = lookup_subcategory_code(layer, category, parts[2], resolver)
    sequential = format_sequential(parts[3] if len(parts) > 3 else None)
    return ".".join([layer, category, subcategory, sequential, *parts[4:]])


def format_mfa(mfa: str) -> str:
    """
    Canonical MFA padding; existence is not checked.

    '05.4.3.2' -> '5.004.003.002'
    """
    parts = split_address(mfa, "MFA")
    head = [p.strip() for p in parts[:3]]
    if not all(p.isascii() and p.isdigit() for p in head):
        raise TaxonomyLookupError(f"Invalid MFA {mfa!r}: segments must be numeric", mfa)
    sequential = format_sequential(parts[3] if len(parts) > 3 else None)
    return ".".join(
        [str(int(head[0])), head[1].zfill(3), head[2].zfill(3), sequential, *parts[4:]]
    )
