"""Resolver configuration.

Provides a single frozen dataclass that encapsulates the resolver's
behavioral switches. Everything else a resolution needs (structure,
parameters, locale) is passed explicitly per call.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from variantengine.constants import DEFAULT_LOCALE

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for VariantResolver.

    All fields have defaults compatible with the message compiler that
    produces variant structures; ``ResolverConfig()`` is the usual choice.

    Attributes:
        default_locale: Locale used when a caller passes none (default: "en").
        first_entry_fallback: When no entry matches, use the first entry of
            the match table (default: True). If False, render yields "" and
            detect yields None on no match.
        log_diagnostics: Log collected errors from the convenience functions
            ``render`` and ``detect_active_key`` (default: True).

    Example:
        >>> config = ResolverConfig(default_locale="de", first_entry_fallback=False)
        >>> resolver = VariantResolver(config=config)
        >>> resolver.locale
        'de'
    """

    default_locale: str = DEFAULT_LOCALE
    first_entry_fallback: bool = True
    log_diagnostics: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale is empty or whitespace.
        """
        if not self.default_locale or not self.default_locale.strip():
            msg = "default_locale must be a non-empty locale code"
            raise ValueError(msg)
