# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Reference resolution collaborators.

The engine never fetches anything itself; a resolver is injected into the
validator and consulted when ``extends`` names a schema by URI.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import unquote, urldefrag, urlparse

import yaml

from ..exceptions import UnresolvableReferenceError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')

TIMESTAMP_TAG = 'tag:yaml.org,2002:timestamp'


class SchemaYamlLoader(yaml.SafeLoader):
    """SafeLoader that keeps unquoted timestamps as plain strings."""


SchemaYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def resolve_pointer(document: Any, fragment: str, uri: str) -> Any:
    """Walk a JSON pointer fragment (``/definitions/foo``) inside a document."""
    if not fragment:
        return document

    if not fragment.startswith('/'):
        raise UnresolvableReferenceError(uri, f"unsupported fragment '#{fragment}'")

    target = document
    for token in fragment[1:].split('/'):
        # JSON Pointer unescaping: "~1" -> "/", "~0" -> "~"
        token = unquote(token).replace('~1', '/').replace('~0', '~')
        if isinstance(target, dict) and token in target:
            target = target[token]
        elif isinstance(target, list) and token.isdigit() and int(token) < len(target):
            target = target[int(token)]
        else:
            raise UnresolvableReferenceError(uri, f"pointer segment '{token}' not found")
    return target


class ReferenceResolver(ABC):
    """Abstract base resolver."""

    @abstractmethod
    def resolve(self, uri: str) -> Dict[str, Any]:
        """Return the schema object the URI points to.

        Raises:
            UnresolvableReferenceError: If the URI cannot be resolved
        """


class MappingReferenceResolver(ReferenceResolver):
    """Resolver over an in-memory registry of schema documents keyed by URI."""

    def __init__(self, documents: Optional[Mapping[str, Any]] = None):
        self._documents: Dict[str, Any] = {}
        for uri, document in (documents or {}).items():
            self.register(uri, document)

    def register(self, uri: str, document: Any) -> None:
        base, _fragment = urldefrag(uri)
        self._documents[base] = document

    def resolve(self, uri: str) -> Dict[str, Any]:
        base, fragment = urldefrag(uri)
        if base not in self._documents:
            raise UnresolvableReferenceError(uri, "unknown document")

        logger.debug(f"Resolving reference from registry: {uri}")
        return resolve_pointer(self._documents[base], fragment, uri)


class FileReferenceResolver(ReferenceResolver):
    """Resolver for local JSON and YAML schema files.

    Accepts ``file://`` URIs and plain paths; relative paths are taken from
    ``base_dir``. Loaded documents are cached per resolver instance.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None, cache_enabled: bool = True):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.cache_enabled = cache_enabled
        self._cache: Dict[Path, Any] = {}

    def _to_path(self, location: str) -> Path:
        parsed = urlparse(location)
        if parsed.scheme == 'file':
            path = Path(unquote(parsed.path))
        elif parsed.scheme and len(parsed.scheme) > 1:
            # Single-letter schemes are Windows drive letters.
            raise UnresolvableReferenceError(location, f"unsupported scheme '{parsed.scheme}'")
        else:
            path = Path(location)

        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    def load_document(self, path: Path) -> Any:
        """Load a schema document from disk.

        Args:
            path: Path to a ``.json``, ``.yaml`` or ``.yml`` file

        Returns:
            Decoded document

        Raises:
            UnresolvableReferenceError: If the file is missing or cannot be decoded
        """
        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading schema from cache: {path}")
            return self._cache[path]

        if not path.is_file():
            raise UnresolvableReferenceError(str(path), "schema file not found")

        try:
            logger.debug(f"Loading schema file: {path}")
            content = path.read_text(encoding="utf-8")
            if path.suffix.lower() in YAML_SUFFIXES:
                document = yaml.load(content, Loader=SchemaYamlLoader)
            else:
                document = json.loads(content)
        except json.JSONDecodeError as exc:
            raise UnresolvableReferenceError(str(path), f"invalid JSON: {exc.msg}") from exc
        except yaml.YAMLError as exc:
            raise UnresolvableReferenceError(str(path), f"invalid YAML: {exc}") from exc
        except OSError as exc:
            raise UnresolvableReferenceError(str(path), f"failed to read file: {exc}") from exc

        if self.cache_enabled:
            self._cache[path] = document
        return document

    def resolve(self, uri: str) -> Dict[str, Any]:
        location, fragment = urldefrag(uri)
        if not location:
            raise UnresolvableReferenceError(uri, "no document location")

        document = self.load_document(self._to_path(location))
        return resolve_pointer(document, fragment, uri)

    def clear_cache(self) -> None:
        """Clear the document cache."""
        self._cache.clear()
        logger.debug("Schema cache cleared")
