# cypher_compose/core/environment.py
"""Assign compile-local identifiers to references and parameters.

An `Environment` lives for exactly one build. It hands out labels for
References (nodes, relationships, variables, paths) and keys for Params from a
single shared counter, so identifiers interleave in the order the compiler
first meets them and two builds of equivalent trees produce the same text.

Notes:
    Lookups are keyed on object identity. References and Params never define
    value equality, so two handles with identical content are still distinct
    unless they are the same instance.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

from cypher_compose import config
from cypher_compose.references.reference import ReferenceKind

if TYPE_CHECKING:
    from cypher_compose.references.param import Param
    from cypher_compose.references.reference import Reference

logger = structlog.get_logger(__name__)


def default_prefixes() -> dict[ReferenceKind, str]:
    """Read the per-kind identifier prefixes from the current settings."""
    current = config.settings
    return {
        ReferenceKind.NODE: current.NODE_PREFIX,
        ReferenceKind.RELATIONSHIP: current.RELATIONSHIP_PREFIX,
        ReferenceKind.VARIABLE: current.VARIABLE_PREFIX,
        ReferenceKind.PATH: current.PATH_PREFIX,
        ReferenceKind.PARAM: current.PARAM_PREFIX,
    }


class Environment:
    """Per-compile registry of labels, parameter keys and parameter values.

    Args:
        prefixes: Optional per-kind overrides of the configured prefixes.
        unsuffixed_first: Render allocation index 0 as the bare prefix. Defaults
            to `UNSUFFIXED_FIRST_IDENTIFIER`.
        separator: Text placed between clauses and clause fragments. Defaults to
            `CLAUSE_SEPARATOR`.
    """

    def __init__(
        self,
        prefixes: Mapping[ReferenceKind, str] | None = None,
        *,
        unsuffixed_first: bool | None = None,
        separator: str | None = None,
    ) -> None:
        current = config.settings
        self._prefixes = default_prefixes()
        if prefixes:
            self._prefixes.update(prefixes)
        self._unsuffixed_first = (
            current.UNSUFFIXED_FIRST_IDENTIFIER
            if unsuffixed_first is None
            else unsuffixed_first
        )
        self.separator = current.CLAUSE_SEPARATOR if separator is None else separator

        self._counter = 0
        self._issued: set[str] = set()
        self._labels: dict[Reference, str] = {}
        self._keys: dict[Param, str] = {}
        self._params: dict[str, Any] = {}

    @property
    def size(self) -> int:
        """Number of counter values consumed so far."""
        return self._counter

    def label_for(self, reference: Reference) -> str:
        """Return the label of `reference`, allocating one on first sight."""
        label = self._labels.get(reference)
        if label is None:
            label = self._allocate(reference.prefix or self._prefixes[reference.kind])
            self._labels[reference] = label
        return label

    def key_for(self, param: Param) -> str:
        """Return the parameter key of `param`, allocating one on first sight.

        The first allocation also records the param's value under the new key.
        """
        key = self._keys.get(param)
        if key is None:
            key = self._allocate(param.prefix or self._prefixes[ReferenceKind.PARAM])
            self._keys[param] = key
            self._params[key] = param.value
        return key

    def is_registered(self, item: Reference | Param) -> bool:
        return item in self._labels or item in self._keys

    def parameters(self) -> dict[str, Any]:
        """Return the key -> value map in allocation order."""
        return dict(self._params)

    def _allocate(self, prefix: str) -> str:
        # A suggested prefix such as "n1" can render the same text as "n" with
        # a later index; skip forward until the text is unused.
        while True:
            index = self._counter
            self._counter += 1
            if index == 0 and self._unsuffixed_first:
                identifier = prefix
            else:
                identifier = f"{prefix}{index}"
            if identifier not in self._issued:
                self._issued.add(identifier)
                return identifier
            logger.debug(
                "Skipping colliding identifier", identifier=identifier, index=index
            )
