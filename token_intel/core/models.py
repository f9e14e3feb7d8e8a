"""Domain models used across the package."""

from __future__ import annotations

from dataclasses import dataclass

from token_intel.core.types import AddressFamily


@dataclass(frozen=True, slots=True)
class AddressMatch:
    """A single address found by one detector."""

    address: str
    family: AddressFamily
    implied_chain: str


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Chain and token address pulled out of one message.

    Both fields are independently optional.
    """

    chain: str | None = None
    token_address: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.chain is None and self.token_address is None

    def to_dict(self) -> dict[str, str | None]:
        """Render the shape message handlers and API clients consume."""
        return {"chain": self.chain, "tokenAddress": self.token_address}
