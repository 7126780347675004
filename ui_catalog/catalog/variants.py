"""Variant Resolver - narrows a name match down to one variant."""

from returns.result import Failure, Result, Success

from ..core.errors import ComponentNotFound, LookupFailure, VariantNotFound
from .models import ComponentSpec

BASE_VARIANT = "base"


class VariantResolver:
    """Applies the variant rule: exact match, or ``"base"`` for the null variant."""

    @staticmethod
    def accepts(component: ComponentSpec, variant: str) -> bool:
        if component.variant is None:
            return variant == BASE_VARIANT
        return component.variant == variant

    def resolve(self, matches: list[ComponentSpec], variant: str | None = None) -> list[ComponentSpec]:
        """
        Keep the entries for ``variant``.

        Args:
            matches: Entries already matched by name
            variant: Requested variant; None returns ``matches`` unchanged

        Returns:
            Entries for the requested variant, possibly empty
        """
        if variant is None:
            return matches
        return [c for c in matches if self.accepts(c, variant)]

    def narrow(
        self, name: str, matches: list[ComponentSpec], variant: str | None = None
    ) -> Result[list[ComponentSpec], LookupFailure]:
        """
        Resolve ``variant`` and tell an unknown component apart from an unknown variant.

        Returns:
            Success with the resolved entries, Failure(ComponentNotFound) when
            ``matches`` is empty, Failure(VariantNotFound) when no entry has
            the requested variant
        """
        if not matches:
            return Failure(ComponentNotFound(name))

        resolved = self.resolve(matches, variant)
        if not resolved:
            return Failure(VariantNotFound(name, variant or ""))
        return Success(resolved)
