"""Provider registry.

Purpose
-------
Dispatch raw traffic to the parser that handles it and expose cross-provider
introspection. Parsers are tried in registration order and the first whose
``can_handle`` accepts the query wins, so the order encodes precedence.

Default order
-------------
1. ``anthropic``: distinctive host and ``/v1/messages`` path.
2. ``huggingface``: HuggingFace hosts and TGI ``/generate*`` paths.
3. ``openai``: OpenAI/Together hosts plus the generic ``/chat/completions``
   fallback, which would otherwise shadow TGI's OpenAI-compatible route.

Parser modules are imported lazily with ``importlib`` when the default
registry is built.

Failure semantics
-----------------
``resolve`` never raises; it returns a falsy :class:`ProviderNotFound`.
``register`` raises :class:`ProviderRegistrationError` for duplicate ids and
for objects missing contract operations. ``require`` is the raising variant
of ``resolve`` for callers that prefer exceptions.
"""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .capabilities import missing_operations
from .errors import ProviderNotFoundError, ProviderRegistrationError
from .interfaces import ProviderParser
from .logging import get_logger, log_event
from .models import ProviderMetadata
from .registry_parts import (
    UNIMPLEMENTED_PROVIDERS,
    CapabilityReportEntry,
    ProviderNotFound,
    UnimplementedProvider,
    build_capability_report,
)

_logger = get_logger(__name__)

# (module, class) in precedence order
_DEFAULT_PARSERS: Tuple[Tuple[str, str], ...] = (
    ("forge_providers.anthropic.parser", "AnthropicParser"),
    ("forge_providers.huggingface.parser", "HuggingFaceParser"),
    ("forge_providers.openai.parser", "OpenAICompatibleParser"),
)


class ProviderRegistry:
    """Ordered collection of provider parsers.

    The registry holds parser instances only; parsers are stateless, so one
    registry may be shared across threads once populated.
    """

    def __init__(
        self,
        parsers: Iterable[ProviderParser] = (),
        *,
        unimplemented: Iterable[UnimplementedProvider] = UNIMPLEMENTED_PROVIDERS,
    ) -> None:
        self._parsers: List[ProviderParser] = []
        self._unimplemented: Tuple[UnimplementedProvider, ...] = tuple(unimplemented)
        for parser in parsers:
            self.register(parser)

    def __len__(self) -> int:
        return len(self._parsers)

    def __iter__(self) -> Iterator[ProviderParser]:
        return iter(tuple(self._parsers))

    def register(self, parser: ProviderParser) -> ProviderParser:
        """Append ``parser`` at the lowest precedence.

        Raises:
            ProviderRegistrationError: duplicate provider id, or the object
                does not implement every contract operation.
        """
        if missing := missing_operations(parser):
            raise ProviderRegistrationError(
                f"{type(parser).__name__} does not implement the ProviderParser contract; "
                f"missing: {', '.join(missing)}"
            )
        if not isinstance(parser, ProviderParser):
            raise ProviderRegistrationError(f"{type(parser).__name__} does not satisfy ProviderParser")
        provider_id = parser.provider_id
        if self.get(provider_id) is not None:
            raise ProviderRegistrationError(f"Provider '{provider_id}' is already registered")
        self._parsers.append(parser)
        log_event(_logger, "registry.register", provider=provider_id, position=len(self._parsers) - 1)
        return parser

    def get(self, provider_id: str) -> Optional[ProviderParser]:
        """Return the parser registered under ``provider_id``, else ``None``."""
        return next((p for p in self._parsers if p.provider_id == provider_id), None)

    def resolve(self, endpoint_or_id: Any) -> Union[ProviderParser, ProviderNotFound]:
        """Return the first parser whose ``can_handle`` accepts the query."""
        for parser in self._parsers:
            if parser.can_handle(endpoint_or_id):
                log_event(
                    _logger,
                    "registry.resolve",
                    level=logging.DEBUG,
                    query=endpoint_or_id,
                    provider=parser.provider_id,
                )
                return parser
        stub = next((u for u in self._unimplemented if u.matches(endpoint_or_id)), None)
        log_event(
            _logger,
            "registry.resolve",
            level=logging.DEBUG,
            query=endpoint_or_id,
            found=False,
            unimplemented=stub.id if stub else None,
        )
        return ProviderNotFound(query=endpoint_or_id, unimplemented=stub)

    def require(self, endpoint_or_id: Any) -> ProviderParser:
        """Like :meth:`resolve` but raise :class:`ProviderNotFoundError` on a miss."""
        found = self.resolve(endpoint_or_id)
        if isinstance(found, ProviderNotFound):
            reason = found.reason if found.unimplemented is not None else None
            raise ProviderNotFoundError(str(endpoint_or_id), reason)
        return found

    def list_providers(self) -> List[ProviderMetadata]:
        """Metadata of exactly the registered parsers, in precedence order."""
        return [p.get_metadata() for p in self._parsers]

    def capability_report(self) -> List[CapabilityReportEntry]:
        """Registered providers plus documented-unimplemented ones."""
        registered_ids = {p.provider_id for p in self._parsers}
        stubs = [u for u in self._unimplemented if u.id not in registered_ids]
        return build_capability_report(self.list_providers(), stubs)


def _load_parser(module_path: str, class_name: str) -> ProviderParser:
    try:
        mod = import_module(module_path)
    except ImportError as exc:  # pragma: no cover - import failure path
        raise ProviderRegistrationError(f"Failed to import parser module '{module_path}': {exc}") from exc
    try:
        klass = getattr(mod, class_name)
    except AttributeError as exc:
        raise ProviderRegistrationError(f"Parser class '{class_name}' not found in '{module_path}'") from exc
    return klass()


def default_registry() -> ProviderRegistry:
    """Build a fresh registry with the built-in parsers in precedence order."""
    return ProviderRegistry(_load_parser(module, cls) for module, cls in _DEFAULT_PARSERS)


__all__ = ["ProviderRegistry", "default_registry"]
