"""
Taxonomy resolver: enumeration, HFN validation and HFN <-> MFA conversion.

Resolution order (both directions):
  1. Special-case override keyed by the full triple
  2. Reference table lookup, segment by segment
  3. TaxonomyLookupError naming the segment that failed

Failure policy:
  - get_categories / get_subcategories on unknown keys return [] (UI renders
    an empty state).
  - validate_hfn never raises.
  - convert_* always raise TaxonomyLookupError; they never return ''.

Reverse lookups where several codes share a numeric code (W.BCH.SUN and
W.BCH.FES are both 003) pick the first code in canonical table order and
log the AmbiguousMappingError; pass strict=True to have it raised instead.
"""

import logging
from typing import Optional

from nna_registry.taxonomy.exceptions import AmbiguousMappingError, TaxonomyLookupError
from nna_registry.taxonomy.loader import (
    ReferenceTable,
    get_reference_table,
    normalize_code,
    normalize_layer_numeric,
)
from nna_registry.taxonomy.models import (
    Category,
    Layer,
    MappingEntry,
    Subcategory,
)

logger = logging.getLogger(__name__)

DEFAULT_SEQUENTIAL = "001"


# ── Address helpers ───────────────────────────────────────────────────────────


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def format_sequential(value: Optional[object]) -> str:
    """
    Zero-pad a sequential number to 3 digits ('1' -> '001', 42 -> '042').
    None means "not given" and yields the default '001'.
    """
    if value is None:
        return DEFAULT_SEQUENTIAL
    text = str(value).strip()
    if not _is_digits(text):
        raise TaxonomyLookupError(f"Sequential number must be numeric, got {value!r}", str(value))
    return text.zfill(3)


def split_address(value: object, kind: str) -> list[str]:
    """
    Split an HFN or MFA into its dot segments.

    Raises TaxonomyLookupError when there are fewer than three segments or
    one of the first three is blank.
    """
    if not isinstance(value, str) or not value.strip():
        raise TaxonomyLookupError(f"{kind} must be a non-empty string", None)
    parts = value.strip().split(".")
    if len(parts) < 3:
        raise TaxonomyLookupError(
            f"Invalid {kind} {value!r}: expected at least 3 dot-separated segments", value
        )
    if not all(p.strip() for p in parts[:3]):
        raise TaxonomyLookupError(f"Invalid {kind} {value!r}: empty segment", value)
    return parts


# ── Resolver ──────────────────────────────────────────────────────────────────


class TaxonomyResolver:
    """
    Stateless lookups over an immutable ReferenceTable.

    Safe to share across threads: nothing here is mutated after __init__.
    """

    def __init__(self, table: Optional[ReferenceTable] = None):
        self.table = table if table is not None else get_reference_table()

    # ── Enumeration ──────────────────────────────────────────────────────────

    def get_layers(self) -> list[Layer]:
        return list(self.table.layers)

    def get_layer_numeric_code(self, layer: str) -> Optional[str]:
        node = self.table.layer(normalize_code(layer))
        return node.numeric_code if node else None

    def get_layer_code(self, numeric_code: str) -> Optional[str]:
        text = str(numeric_code).strip()
        if not _is_digits(text):
            return None
        node = self.table.layer_by_numeric(normalize_layer_numeric(text))
        return node.code if node else None

    def get_categories(self, layer: str) -> list[Category]:
        """Categories of `layer` in canonical order; [] for an unknown layer."""
        node = self.table.layer(normalize_code(layer))
        if node is None:
            logger.debug("No categories: unknown layer %r", layer)
            return []
        return list(node.categories)

    def get_subcategories(self, layer: str, category: str) -> list[Subcategory]:
        """Subcategories of (layer, category) in canonical order; [] if unknown."""
        node = self.table.category(normalize_code(layer), normalize_code(category))
        if node is None:
            logger.debug("No subcategories: unknown category %r.%r", layer, category)
            return []
        return list(node.subcategories)

    # ── Validation ───────────────────────────────────────────────────────────

    def validate_hfn(self, hfn: str) -> bool:
        """True if layer, category and subcategory of `hfn` all exist."""
        try:
            parts = split_address(hfn, "HFN")
        except TaxonomyLookupError:
            return False
        layer, category, subcategory = (normalize_code(p) for p in parts[:3])
        return self.table.subcategory(layer, category, subcategory) is not None

    # ── HFN -> MFA ───────────────────────────────────────────────────────────

    def convert_hfn_to_mfa(self, hfn: str) -> str:
        """
        'W.BCH.SUN.001'     -> '5.004.003.001'
        'W.BCH.SUN.2.mp4'   -> '5.004.003.002.mp4'

        Raises:
            TaxonomyLookupError: malformed HFN or unknown segment.
        """
        parts = split_address(hfn, "HFN")
        layer, category, subcategory = (normalize_code(p) for p in parts[:3])
        sequential = format_sequential(parts[3] if len(parts) > 3 else None)
        rest = parts[4:]

        triple = f"{layer}.{category}.{subcategory}"
        numeric = self.table.overrides.get(triple)
        if numeric is not None:
            logger.debug("Special-case override %s -> %s", triple, numeric)
        else:
            numeric = self._numeric_triple(layer, category, subcategory, hfn)

        mfa = ".".join([numeric, sequential, *rest])
        logger.debug("Converted HFN to MFA: %s -> %s", hfn, mfa)
        return mfa

    def _numeric_triple(self, layer: str, category: str, subcategory: str, hfn: str) -> str:
        layer_node = self.table.layer(layer)
        if layer_node is None:
            raise TaxonomyLookupError(f"Unknown layer {layer!r} in HFN {hfn!r}", hfn)
        category_node = self.table.category(layer, category)
        if category_node is None:
            raise TaxonomyLookupError(f"Unknown category {layer}.{category} in HFN {hfn!r}", hfn)
        sub_node = self.table.subcategory(layer, category, subcategory)
        if sub_node is None:
            raise TaxonomyLookupError(
                f"Unknown subcategory {layer}.{category}.{subcategory} in HFN {hfn!r}", hfn
            )
        return (
            f"{layer_node.numeric_code}."
            f"{category_node.numeric_code.zfill(3)}."
            f"{sub_node.numeric_code.zfill(3)}"
        )

    # ── MFA -> HFN ───────────────────────────────────────────────────────────

    def convert_mfa_to_hfn(self, mfa: str, strict: bool = False) -> str:
        """
        '5.004.003.001' -> 'W.BCH.SUN.001'

        Not a perfect inverse where numeric codes collide: the first code in
        canonical order wins. With strict=True a collision raises
        AmbiguousMappingError instead of being logged.

        Raises:
            TaxonomyLookupError: malformed MFA or unknown numeric segment.
            AmbiguousMappingError: strict=True and a segment is ambiguous.
        """
        parts = split_address(mfa, "MFA")
        head = [p.strip() for p in parts[:3]]
        if not all(_is_digits(p) for p in head):
            raise TaxonomyLookupError(f"Invalid MFA {mfa!r}: segments must be numeric", mfa)
        layer_num = normalize_layer_numeric(head[0])
        category_num = head[1].zfill(3)
        sub_num = head[2].zfill(3)
        sequential = format_sequential(parts[3] if len(parts) > 3 else None)
        rest = parts[4:]

        numeric_triple = f"{layer_num}.{category_num}.{sub_num}"
        alpha = self.table.reverse_overrides.get(numeric_triple)
        if alpha is not None:
            logger.debug("Special-case override %s -> %s", numeric_triple, alpha)
        else:
            alpha = self._alpha_triple(layer_num, category_num, sub_num, mfa, strict)

        hfn = ".".join([alpha, sequential, *rest])
        logger.debug("Converted MFA to HFN: %s -> %s", mfa, hfn)
        return hfn

    def _alpha_triple(
        self, layer_num: str, category_num: str, sub_num: str, mfa: str, strict: bool
    ) -> str:
        layer_node = self.table.layer_by_numeric(layer_num)
        if layer_node is None:
            raise TaxonomyLookupError(f"Unknown layer number {layer_num} in MFA {mfa!r}", mfa)

        categories = self.table.categories_by_numeric(layer_node.code, category_num)
        if not categories:
            raise TaxonomyLookupError(
                f"Unknown category number {layer_num}.{category_num} in MFA {mfa!r}", mfa
            )
        category = self._pick(categories, layer_node.code, category_num, mfa, strict)

        subs = self.table.subcategories_by_numeric(layer_node.code, category.code, sub_num)
        if not subs:
            raise TaxonomyLookupError(
                f"Unknown subcategory number {layer_num}.{category_num}.{sub_num} in MFA {mfa!r}",
                mfa,
            )
        sub = self._pick(subs, f"{layer_node.code}.{category.code}", sub_num, mfa, strict)

        return f"{layer_node.code}.{category.code}.{sub.code}"

    @staticmethod
    def _pick(candidates: tuple, scope: str, numeric_code: str, mfa: str, strict: bool):
        if len(candidates) == 1:
            return candidates[0]
        codes = tuple(c.code for c in candidates)
        error = AmbiguousMappingError(
            f"Numeric code {numeric_code} in {scope} matches {', '.join(codes)}",
            mfa,
            codes,
        )
        if strict:
            raise error
        logger.warning("%s (MFA %s); using %s", error, mfa, codes[0])
        return candidates[0]

    # ── Batch ────────────────────────────────────────────────────────────────

    def generate_all_mappings(self, layer: str) -> list[MappingEntry]:
        """
        Every (category, subcategory) of `layer` as a canonical HFN with
        sequential 001 and its MFA. Entries that fail to convert are logged
        and skipped. Auditing helper; not meant for hot paths.
        """
        layer_code = normalize_code(layer)
        entries: list[MappingEntry] = []
        skipped = 0
        for category in self.get_categories(layer_code):
            for sub in self.get_subcategories(layer_code, category.code):
                hfn = f"{layer_code}.{category.code}.{sub.code}.{DEFAULT_SEQUENTIAL}"
                try:
                    mfa = self.convert_hfn_to_mfa(hfn)
                except TaxonomyLookupError as e:
                    skipped += 1
                    logger.warning("Skipping mapping for %s: %s", hfn, e)
                    continue
                entries.append(
                    MappingEntry(
                        hfn=hfn,
                        mfa=mfa,
                        category=category.code,
                        subcategory=sub.code,
                        category_name=category.name,
                        subcategory_name=sub.name,
                    )
                )
        if skipped:
            logger.warning("Layer %s: %d mapping(s) skipped", layer_code, skipped)
        return entries


# ── Shared instance ───────────────────────────────────────────────────────────

_RESOLVER: Optional[TaxonomyResolver] = None


def get_resolver() -> TaxonomyResolver:
    """Resolver bound to the process-wide reference table."""
    global _RESOLVER
    table = get_reference_table()
    if _RESOLVER is None or _RESOLVER.table is not table:
        _RESOLVER = TaxonomyResolver(table)
    return _RESOLVER