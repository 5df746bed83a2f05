"""Collection descriptor exports."""

from .descriptor_models import CollectionDescriptor
from .descriptor_reader import (
    DescriptorError,
    load_collection_descriptor,
    parse_collection_descriptor,
    write_collection_descriptor,
)

__all__ = [
    "CollectionDescriptor",
    "DescriptorError",
    "load_collection_descriptor",
    "parse_collection_descriptor",
    "write_collection_descriptor",
]
