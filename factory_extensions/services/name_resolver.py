"""
Name Resolver Service

Turns a base name plus up to two prefix/suffix modifiers into candidate
factory names and returns the first one the registry knows about.
"""

from typing import Any, Optional, Sequence, Tuple

from factory_extensions.config_factory import ResolverConfig
from factory_extensions.core.errors import (
    FactoryNotRegisteredError, InvalidModifierError, NotFoundError,
    UnsupportedArityError, format_modifiers
)
from factory_extensions.core.naming import modifier_tokens, token_text
from factory_extensions.registry.factory_registry import FactoryRegistry, RegisteredFactory
from .base_service import BaseService


class NameResolver(BaseService):
    """
    Resolves factories by naming convention.

    With one modifier ``m`` both ``m_base`` and ``base_m`` are tried, so callers
    need not know whether a modifier is registered as a prefix or a suffix.
    With two modifiers both ``m1_base_m2`` and ``m2_base_m1`` are tried.
    """

    MAX_MODIFIERS = 2

    def __init__(self, registry: FactoryRegistry, config: Optional[ResolverConfig] = None):
        self.registry = registry
        super().__init__(config)

    def _initialize(self) -> None:
        pass

    @property
    def separator(self) -> str:
        """Current ``name_separator``, read on every call so config overrides apply."""
        return self.get_config_value('name_separator', '_')

    def candidate_names(self, base_name: str, modifiers: Sequence[Any] = ()) -> Tuple[str, ...]:
        """
        Build the ordered candidate names for a base name and modifiers.

        Raises:
            InvalidModifierError: If the base name or a modifier is blank
            UnsupportedArityError: If more than two modifiers are given
        """
        parts = [token_text(m) for m in modifier_tokens(modifiers)]

        if len(parts) > self.MAX_MODIFIERS:
            raise UnsupportedArityError(
                f"Don't know how to find factory for {base_name} with {format_modifiers(parts)}",
                details={'base_name': base_name, 'modifiers': parts}
            )

        if not isinstance(base_name, str) or not base_name.strip():
            raise InvalidModifierError(f"Invalid base name: {base_name!r}")
        for part in parts:
            if not part.strip():
                raise InvalidModifierError(
                    f"Invalid modifier {part!r} for {base_name} in {format_modifiers(parts)}",
                    details={'base_name': base_name, 'modifiers': parts}
                )

        sep = self.separator
        if not parts:
            candidates = (base_name,)
        elif len(parts) == 1:
            m = parts[0]
            candidates = (f"{m}{sep}{base_name}", f"{base_name}{sep}{m}")
        else:
            first, last = parts
            candidates = (f"{first}{sep}{base_name}{sep}{last}", f"{last}{sep}{base_name}{sep}{first}")

        # m1 == m2 yields the same name twice
        return tuple(dict.fromkeys(candidates))

    def resolve(self, base_name: str, modifiers: Sequence[Any] = ()) -> RegisteredFactory:
        """
        Find the first registered factory among the candidate names.

        Args:
            base_name: Snake-cased name of the calling type
            modifiers: Zero, one or two prefix/suffix tokens

        Returns:
            The resolved RegisteredFactory

        Raises:
            UnsupportedArityError: If more than two modifiers are given
            NotFoundError: If no candidate is registered
            Exception: Any other registry failure, unchanged
        """
        candidates = self.candidate_names(base_name, modifiers)

        for candidate in candidates:
            try:
                registered = self.registry.lookup_by_exact_name(candidate)
            except FactoryNotRegisteredError:
                self.log_debug(f"No factory registered as {candidate}", candidate=candidate)
                continue

            self.log_debug(f"Resolved {base_name} to factory {candidate}", candidate=candidate)
            return registered

        parts = [token_text(m) for m in modifier_tokens(modifiers)]
        self.log_info(
            f"Could not resolve factory for {base_name}",
            base_name=base_name, candidates=list(candidates)
        )
        raise NotFoundError(
            f"Could not find factory for {base_name} with {format_modifiers(parts)}",
            details={'base_name': base_name, 'modifiers': parts, 'candidates': list(candidates)}
        )
