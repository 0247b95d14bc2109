"""Reference resolvers injected into validators for ``extends`` URIs."""

from .reference_resolver import (
    FileReferenceResolver,
    MappingReferenceResolver,
    ReferenceResolver,
    resolve_pointer,
)
