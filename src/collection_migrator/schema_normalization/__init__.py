"""Schema normalization exports."""

from .field_set_normalizer import normalize_field_set
from .normalized_models import IndexDecl, NormalizedFieldSet

__all__ = ["IndexDecl", "NormalizedFieldSet", "normalize_field_set"]
