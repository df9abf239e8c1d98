"""
Reference table loader.

Builds the immutable ReferenceTable from row tuples (constants.py or a JSON
export), running the integrity check first. Any problem fails the whole
load with TaxonomyIntegrityError; the table is never patched at request
time.

The process-wide table is built lazily, exactly once, behind a lock:
  from nna_registry.taxonomy.loader import get_reference_table
  table = get_reference_table()
"""

import json
import logging
import re
import threading
from collections import defaultdict
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

from nna_registry.settings import settings
from nna_registry.taxonomy.constants import CATEGORIES, LAYERS, SUBCATEGORIES
from nna_registry.taxonomy.exceptions import TaxonomyIntegrityError
from nna_registry.taxonomy.models import Category, Layer, NumericCollision, Subcategory
from nna_registry.taxonomy.special_cases import SPECIAL_CASE_MAPPINGS

logger = logging.getLogger(__name__)

LayerRow = tuple[str, str, str]
CategoryRow = tuple[str, str, str, str]
SubcategoryRow = tuple[str, str, str, str, str]

# Codes become dot-separated address segments
_CODE_PATTERN = re.compile(r"^[A-Z0-9]+$")


def normalize_code(value: object) -> str:
    """Upper-case and strip an alphabetic code; non-strings become ''."""
    if not isinstance(value, str):
        return ""
    return value.strip().upper()


def normalize_layer_numeric(value: str) -> str:
    """'05' -> '5'. Caller guarantees value is all digits."""
    return str(int(value))


# ── Reference table ───────────────────────────────────────────────────────────


class ReferenceTable:
    """
    Immutable, indexed view of the taxonomy.

    Alphabetic indexes hold exactly one node per key. Numeric indexes hold
    every node sharing the numeric code, in canonical order, so reverse
    lookups can see (and report) collisions.
    """

    def __init__(
        self,
        layers: tuple[Layer, ...],
        overrides: Mapping[str, str],
        collisions: tuple[NumericCollision, ...] = (),
    ):
        self.layers = layers
        self.collisions = collisions
        self.overrides = MappingProxyType(dict(overrides))
        self.reverse_overrides = MappingProxyType({v: k for k, v in overrides.items()})

        layers_by_code = {}
        layers_by_numeric = {}
        categories = {}
        subcategories = {}
        categories_by_numeric = defaultdict(list)
        subcategories_by_numeric = defaultdict(list)

        for layer in layers:
            layers_by_code[layer.code] = layer
            layers_by_numeric[layer.numeric_code] = layer
            for category in layer.categories:
                categories[(layer.code, category.code)] = category
                categories_by_numeric[(layer.code, category.numeric_code)].append(category)
                for sub in category.subcategories:
                    subcategories[(layer.code, category.code, sub.code)] = sub
                    subcategories_by_numeric[
                        (layer.code, category.code, sub.numeric_code)
                    ].append(sub)

        self._layers_by_code = MappingProxyType(layers_by_code)
        self._layers_by_numeric = MappingProxyType(layers_by_numeric)
        self._categories = MappingProxyType(categories)
        self._subcategories = MappingProxyType(subcategories)
        self._categories_by_numeric = MappingProxyType(
            {k: tuple(v) for k, v in categories_by_numeric.items()}
        )
        self._subcategories_by_numeric = MappingProxyType(
            {k: tuple(v) for k, v in subcategories_by_numeric.items()}
        )

    # ── Alphabetic lookups ───────────────────────────────────────────────────

    def layer(self, code: str) -> Optional[Layer]:
        return self._layers_by_code.get(code)

    def category(self, layer: str, code: str) -> Optional[Category]:
        return self._categories.get((layer, code))

    def subcategory(self, layer: str, category: str, code: str) -> Optional[Subcategory]:
        return self._subcategories.get((layer, category, code))

    # ── Numeric lookups ──────────────────────────────────────────────────────

    def layer_by_numeric(self, numeric_code: str) -> Optional[Layer]:
        return self._layers_by_numeric.get(numeric_code)

    def categories_by_numeric(self, layer: str, numeric_code: str) -> tuple[Category, ...]:
        return self._categories_by_numeric.get((layer, numeric_code), ())

    def subcategories_by_numeric(
        self, layer: str, category: str, numeric_code: str
    ) -> tuple[Subcategory, ...]:
        return self._subcategories_by_numeric.get((layer, category, numeric_code), ())

    # ── Counts ───────────────────────────────────────────────────────────────

    @property
    def category_count(self) -> int:
        return len(self._categories)

    @property
    def subcategory_count(self) -> int:
        return len(self._subcategories)

    def __repr__(self) -> str:
        return (
            f"<ReferenceTable layers={len(self.layers)} categories={self.category_count} "
            f"subcategories={self.subcategory_count} collisions={len(self.collisions)}>"
        )


# ── Build + integrity check ───────────────────────────────────────────────────


def _is_padded_numeric(value: object) -> bool:
    return isinstance(value, str) and len(value) == 3 and value.isdigit()


def _find_collisions(
    nodes: Iterable, layer: str, category: Optional[str]
) -> list[NumericCollision]:
    groups: dict[str, list[str]] = defaultdict(list)
    for node in nodes:
        groups[node.numeric_code].append(node.code)
    return [
        NumericCollision(layer=layer, category=category, numeric_code=num, codes=tuple(codes))
        for num, codes in groups.items()
        if len(codes) > 1
    ]


def _check_overrides(
    overrides: Mapping[str, str], layers: dict, problems: list[str]
) -> dict[str, str]:
    """
    Validate override entries; return them normalized.

    An override may re-point the subcategory number only: its layer and
    category numbers must be the ones the table already assigns.
    """
    normalized: dict[str, str] = {}
    seen_numeric: dict[str, str] = {}
    for key, value in overrides.items():
        parts = [normalize_code(p) for p in str(key).split(".")]
        numeric = str(value).split(".")
        if len(parts) != 3 or not all(parts):
            problems.append(f"Override key {key!r} is not LAYER.CATEGORY.SUBCATEGORY")
            continue
        layer, cat, sub = parts
        if layer not in layers or cat not in layers[layer]["categories"]:
            problems.append(f"Override {key!r} references an unknown layer or category")
            continue
        if sub not in layers[layer]["categories"][cat]["subcategories"]:
            problems.append(f"Override {key!r} references an unknown subcategory")
            continue
        if (
            len(numeric) != 3
            or not (numeric[0].isascii() and numeric[0].isdigit())
            or not _is_padded_numeric(numeric[1])
            or not _is_padded_numeric(numeric[2])
        ):
            problems.append(f"Override {key!r} has malformed numeric address {value!r}")
            continue
        layer_num = normalize_layer_numeric(numeric[0])
        if layer_num != layers[layer]["row"][0]:
            problems.append(
                f"Override {key!r} layer number {layer_num} does not match layer {layer} "
                f"({layers[layer]['row'][0]})"
            )
            continue
        category_num = layers[layer]["categories"][cat]["row"][0]
        if numeric[1] != category_num:
            problems.append(
                f"Override {key!r} category number {numeric[1]} does not match "
                f"category {layer}.{cat} ({category_num})"
            )
            continue
        numeric_key = f"{layer_num}.{numeric[1]}.{numeric[2]}"
        if numeric_key in seen_numeric:
            problems.append(
                f"Overrides {seen_numeric[numeric_key]!r} and {key!r} share numeric address {numeric_key}"
            )
            continue
        seen_numeric[numeric_key] = key
        normalized[f"{layer}.{cat}.{sub}"] = numeric_key
    return normalized


def build_reference_table(
    layers: Iterable[LayerRow] = LAYERS,
    categories: Iterable[CategoryRow] = CATEGORIES,
    subcategories: Iterable[SubcategoryRow] = SUBCATEGORIES,
    overrides: Optional[Mapping[str, str]] = None,
    strict_numeric_codes: bool = False,
) -> ReferenceTable:
    """
    Validate the rows and build a ReferenceTable.

    Collects every problem before failing so one run reports the whole
    damage. Numeric collisions are recorded on the table unless
    strict_numeric_codes is set, in which case they are problems too.

    Raises:
        TaxonomyIntegrityError: if any check fails.
    """
    if overrides is None:
        overrides = SPECIAL_CASE_MAPPINGS

    problems: list[str] = []
    # code -> {"row": (numeric, name), "categories": {code: {"row":..., "subcategories": {...}}}}
    tree: dict[str, dict] = {}
    layer_numerics: dict[str, str] = {}

    for code, numeric, name in layers:
        code = normalize_code(code)
        numeric = str(numeric).strip()
        if not _CODE_PATTERN.match(code):
            problems.append(f"Layer code {code!r} must be letters and digits only")
            continue
        if code in tree:
            problems.append(f"Duplicate layer code {code!r}")
            continue
        if not numeric.isdigit():
            problems.append(f"Layer {code!r} has non-numeric code {numeric!r}")
            continue
        numeric = normalize_layer_numeric(numeric)
        if numeric in layer_numerics:
            problems.append(
                f"Layers {layer_numerics[numeric]!r} and {code!r} share numeric code {numeric}"
            )
            continue
        layer_numerics[numeric] = code
        tree[code] = {"row": (numeric, name), "categories": {}}

    for layer, code, numeric, name in categories:
        layer, code = normalize_code(layer), normalize_code(code)
        if layer not in tree:
            problems.append(f"Category {layer}.{code} references unknown layer {layer!r}")
            continue
        if not _CODE_PATTERN.match(code):
            problems.append(
                f"Category code {code!r} in layer {layer!r} must be letters and digits only"
            )
            continue
        scope = tree[layer]["categories"]
        if code in scope:
            problems.append(f"Duplicate category code {layer}.{code}")
            continue
        if not _is_padded_numeric(numeric):
            problems.append(f"Category {layer}.{code} has malformed numeric code {numeric!r}")
            continue
        scope[code] = {"row": (numeric, name), "subcategories": {}}

    for layer, category, code, numeric, name in subcategories:
        layer, category, code = normalize_code(layer), normalize_code(category), normalize_code(code)
        if layer not in tree or category not in tree[layer]["categories"]:
            problems.append(
                f"Subcategory {layer}.{category}.{code} references unknown category {layer}.{category}"
            )
            continue
        if not _CODE_PATTERN.match(code):
            problems.append(
                f"Subcategory code {code!r} in {layer}.{category} must be letters and digits only"
            )
            continue
        scope = tree[layer]["categories"][category]["subcategories"]
        if code in scope:
            problems.append(f"Duplicate subcategory code {layer}.{category}.{code}")
            continue
        if not _is_padded_numeric(numeric):
            problems.append(
                f"Subcategory {layer}.{category}.{code} has malformed numeric code {numeric!r}"
            )
            continue
        scope[code] = (numeric, name)

    # ── Assemble nodes (canonical order = insertion order) ───────────────────
    built_layers: list[Layer] = []
    collisions: list[NumericCollision] = []
    for layer_code, layer_data in tree.items():
        if not layer_data["categories"]:
            problems.append(f"Layer {layer_code!r} has no categories")
        built_categories = []
        for cat_code, cat_data in layer_data["categories"].items():
            if not cat_data["subcategories"]:
                problems.append(f"Category {layer_code}.{cat_code} has no subcategories")
            subs = tuple(
                Subcategory(code=sub_code, numeric_code=num, name=name)
                for sub_code, (num, name) in cat_data["subcategories"].items()
            )
            collisions.extend(_find_collisions(subs, layer_code, cat_code))
            num, name = cat_data["row"]
            built_categories.append(
                Category(code=cat_code, numeric_code=num, name=name, subcategories=subs)
            )
        collisions.extend(_find_collisions(built_categories, layer_code, None))
        num, name = layer_data["row"]
        built_layers.append(
            Layer(code=layer_code, numeric_code=num, name=name, categories=tuple(built_categories))
        )

    normalized_overrides = _check_overrides(overrides, tree, problems)

    if strict_numeric_codes:
        for c in collisions:
            problems.append(
                f"Numeric code {c.numeric_code} is shared by {', '.join(c.codes)} in {c.scope}"
            )

    if problems:
        logger.error("Taxonomy integrity check failed with %d problem(s)", len(problems))
        raise TaxonomyIntegrityError(problems)

    for c in collisions:
        logger.warning(
            "Numeric code %s is shared by %s in %s; reverse lookups resolve to %s",
            c.numeric_code, ", ".join(c.codes), c.scope, c.codes[0],
        )

    return ReferenceTable(tuple(built_layers), normalized_overrides, tuple(collisions))


# ── JSON source ───────────────────────────────────────────────────────────────


def load_rows_from_json(
    path: str,
) -> tuple[list[LayerRow], list[CategoryRow], list[SubcategoryRow]]:
    """
    Read taxonomy rows from a JSON export:
      {"layers":        [{"code", "numeric_code", "name"}, ...],
       "categories":    [{"layer", "code", "numeric_code", "name"}, ...],
       "subcategories": [{"layer", "category", "code", "numeric_code", "name"}, ...]}
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TaxonomyIntegrityError([f"Cannot read taxonomy data file {path!r}: {e}"]) from e

    try:
        layers = [(r["code"], str(r["numeric_code"]), r["name"]) for r in data["layers"]]
        categories = [
            (r["layer"], r["code"], str(r["numeric_code"]), r["name"])
            for r in data["categories"]
        ]
        subcategories = [
            (r["layer"], r["category"], r["code"], str(r["numeric_code"]), r["name"])
            for r in data["subcategories"]
        ]
    except (KeyError, TypeError) as e:
        raise TaxonomyIntegrityError(
            [f"Malformed taxonomy data file {path!r}: missing or invalid field {e}"]
        ) from e

    return layers, categories, subcategories


# ── Process-wide table ────────────────────────────────────────────────────────

_REFERENCE_TABLE: Optional[ReferenceTable] = None
_LOCK = threading.Lock()


def _load_configured_table() -> ReferenceTable:
    if settings.taxonomy_data_path:
        logger.info("Loading taxonomy from %s", settings.taxonomy_data_path)
        layers, categories, subcategories = load_rows_from_json(settings.taxonomy_data_path)
    else:
        layers, categories, subcategories = LAYERS, CATEGORIES, SUBCATEGORIES

    table = build_reference_table(
        layers,
        categories,
        subcategories,
        strict_numeric_codes=settings.taxonomy_strict_numeric_codes,
    )
    logger.info("Taxonomy loaded: %r", table)
    return table


def get_reference_table() -> ReferenceTable:
    """Return the shared table, building it on first use. Raises TaxonomyIntegrityError."""
    global _REFERENCE_TABLE
    if _REFERENCE_TABLE is None:
        with _LOCK:
            if _REFERENCE_TABLE is None:
                _REFERENCE_TABLE = _load_configured_table()
    return _REFERENCE_TABLE


def reset_reference_table() -> None:
    """Drop the cached table; the next get_reference_table() rebuilds it."""
    global _REFERENCE_TABLE
    with _LOCK:
        _REFERENCE_TABLE = None
