from nna_registry.services.taxonomy.initializer import InitializationResult, initialize_taxonomy  # noqa: F401
from nna_registry.services.taxonomy.resolver import TaxonomyResolver, get_resolver  # noqa: F401
