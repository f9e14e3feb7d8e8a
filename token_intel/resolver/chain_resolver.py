"""Infer a canonical chain id from natural-language cues in a message."""

from __future__ import annotations

import logging
import re

from token_intel.resolver.chain_aliases import CHAIN_ALIASES

logger = logging.getLogger(__name__)

# "on base", "for bsc", "chain sol"... The keyword is not word-bounded,
# so "coin 0x.." also reads as a cue.
_PREPOSITION_PATTERN = re.compile(r"(?:on|for|in|at|chain)\s+([a-zA-Z0-9]+)")


def _lookup_alias(name: str) -> str | None:
    for canonical, aliases in CHAIN_ALIASES.items():
        if name in aliases:
            return canonical
    return None


def normalize_chain_name(chain: str) -> str:
    """Map *chain* to its canonical id.

    Unknown names come back lowercased and trimmed rather than rejected,
    so chains missing from the alias table still pass through.
    """
    normalized = chain.lower().strip()
    canonical = _lookup_alias(normalized)
    return canonical if canonical is not None else normalized


def is_known_chain(chain: str) -> bool:
    """Return whether *chain* is a canonical id or one of its aliases."""
    normalized = chain.lower().strip()
    return normalized in CHAIN_ALIASES or _lookup_alias(normalized) is not None


class ChainResolver:
    """Resolve the chain a message talks about.

    An explicit prepositional cue wins. Otherwise each whitespace-separated
    word is checked against the alias table. Aliases containing spaces can
    never equal a single word, so they are only reachable through the
    prepositional cue, and then only by their first word.
    """

    def resolve(self, message: str) -> str | None:
        clean = message.lower().strip()
        if not clean:
            return None

        m = _PREPOSITION_PATTERN.search(clean)
        if m is not None:
            chain = normalize_chain_name(m.group(1))
            logger.debug("Chain cue %r resolved to %s", m.group(0), chain)
            return chain

        words = set(clean.split())
        for canonical, aliases in CHAIN_ALIASES.items():
            if any(alias in words for alias in aliases):
                logger.debug("Chain keyword resolved to %s", canonical)
                return canonical

        return None
