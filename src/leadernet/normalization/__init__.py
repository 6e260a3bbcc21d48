"""Entity name normalization and graph cleanup for leader networks."""

from .aliases import AliasResolver, normalize_entity_name
from .language import is_likely_english
from .normalizer import normalize_network_data

__all__ = ["AliasResolver", "is_likely_english", "normalize_entity_name", "normalize_network_data"]
