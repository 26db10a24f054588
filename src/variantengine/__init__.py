"""variantengine - Variant resolution for pluralized translation strings.

Evaluates the variant sub-language emitted by message compilers for
pluralized and conditionally-selected translations: input and local
declarations, selectors, and an ordered match table of pattern keys to
templates. Cardinal and ordinal plural categories come from Babel's CLDR
data.

Public API:
    render - Render a variant structure for a parameter set and locale
    detect_active_key - Pattern key of the entry render would use
    extract_variant_structure - Normalize a stored value into a VariantStructure
    encode_variant_structure - Encode a VariantStructure in its storage shape
    parse_declarations - Parse declaration strings
    render_template - Render any stored value (plain template or variant)
    VariantResolver - Error-collecting resolver returning (result, errors)
    VariantStructure - Declarations, selectors and ordered match table

Exceptions (collected, never raised for malformed data):
    VariantError - Base exception class
    VariantSyntaxError - Declaration or pattern-key parse degradation
    VariantResolutionError - No match, non-numeric plural operand, ...
    VariantStructureError - Missing or malformed match table

Submodules:
    variantengine.syntax - Data model, parsers, storage codec
    variantengine.runtime - Selector evaluation, matching, substitution
    variantengine.introspection - Editor-facing variant summaries
    variantengine.diagnostics - Error types, codes and formatters
"""

from .diagnostics import (
    VariantError,
    VariantResolutionError,
    VariantStructureError,
    VariantSyntaxError,
)
from .runtime import (
    ResolverConfig,
    VariantResolver,
    detect_active_key,
    render,
    render_template,
)
from .syntax import (
    MatchEntry,
    VariantStructure,
    encode_variant_structure,
    extract_variant_structure,
    parse_declarations,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("variantengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "MatchEntry",
    "ResolverConfig",
    "VariantError",
    "VariantResolutionError",
    "VariantResolver",
    "VariantStructure",
    "VariantStructureError",
    "VariantSyntaxError",
    "__version__",
    "detect_active_key",
    "encode_variant_structure",
    "extract_variant_structure",
    "parse_declarations",
    "render",
    "render_template",
]
