"""
Taxonomy mapping audit: enumerate every canonical HFN, convert it to an MFA
and back, and report anything that does not round-trip.

Run via:
  python -m nna_registry.taxonomy.audit            (all layers)
  python -m nna_registry.taxonomy.audit W S        (selected layers)

Exit code 1 if any round-trip failure is found or a requested layer does
not exist. Entries that only fail because of a recorded numeric collision
are listed as ambiguous and do not fail the run.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

from nna_registry.services.taxonomy.resolver import TaxonomyResolver, get_resolver
from nna_registry.taxonomy.exceptions import TaxonomyError
from nna_registry.taxonomy.models import MappingEntry

logger = logging.getLogger(__name__)


@dataclass
class LayerAudit:
    layer: str
    mappings: list[MappingEntry] = field(default_factory=list)
    round_trip_failures: list[str] = field(default_factory=list)
    ambiguous: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.round_trip_failures


def _collides(resolver: TaxonomyResolver, layer: str, entry: MappingEntry) -> bool:
    for c in resolver.table.collisions:
        if c.layer != layer:
            continue
        if c.category is None and entry.category in c.codes:
            return True
        if c.category == entry.category and entry.subcategory in c.codes:
            return True
    return False


def audit_layer(layer: str, resolver: Optional[TaxonomyResolver] = None) -> LayerAudit:
    resolver = resolver or get_resolver()
    layer_code = layer.strip().upper()
    audit = LayerAudit(layer=layer_code, mappings=resolver.generate_all_mappings(layer_code))

    for entry in audit.mappings:
        try:
            back = resolver.convert_mfa_to_hfn(entry.mfa)
        except TaxonomyError as e:
            audit.round_trip_failures.append(f"{entry.hfn} -> {entry.mfa} -> error: {e}")
            continue
        if back == entry.hfn:
            continue
        line = f"{entry.hfn} -> {entry.mfa} -> {back}"
        if _collides(resolver, layer_code, entry):
            audit.ambiguous.append(line)
        else:
            audit.round_trip_failures.append(line)

    logger.info(
        "Audit %s: %d mappings, %d failures, %d ambiguous",
        layer_code, len(audit.mappings), len(audit.round_trip_failures), len(audit.ambiguous),
    )
    return audit


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Audit NNA taxonomy HFN/MFA mappings")
    parser.add_argument("layers", nargs="*", help="Layer codes to audit (default: all)")
    args = parser.parse_args(argv)

    try:
        resolver = get_resolver()
    except TaxonomyError as e:
        print(f"✗ Taxonomy failed to load: {e}", file=sys.stderr)
        return 1

    layers = args.layers or [layer.code for layer in resolver.get_layers()]
    failed = False
    for layer in layers:
        if resolver.get_layer_numeric_code(layer) is None:
            print(f"✗ {layer.strip().upper()}: unknown layer")
            failed = True
            continue
        audit = audit_layer(layer, resolver)
        mark = "✓" if audit.ok else "✗"
        print(
            f"{mark} {audit.layer}: {len(audit.mappings)} mappings, "
            f"{len(audit.round_trip_failures)} failures, {len(audit.ambiguous)} ambiguous"
        )
        for line in audit.round_trip_failures:
            print(f"    FAIL  {line}")
        for line in audit.ambiguous:
            print(f"    AMBIG {line}")
        failed = failed or not audit.ok
    return 1 if failed else 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")
    sys.exit(main())
