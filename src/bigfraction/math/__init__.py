"""
Math modules для bigfraction

Точные алгоритмы над парами целых (numerator, denominator) без потерь точности.
"""

# Safeguards
from src.bigfraction.math.safeguards import (
    DEFAULT_RADIX,
    MAX_RADIX,
    MIN_RADIX,
    clamp,
    is_strict_int,
    is_valid_float,
    require_finite,
    require_int,
    validate_positive,
    validate_radix,
)

# Reduction
from src.bigfraction.math.reduction import reduce_ratio

# Rounding
from src.bigfraction.math.rounding import (
    DEFAULT_ROUNDING_MODE,
    DivisionMode,
    RoundingMode,
    RoundingNecessaryError,
    integral_quotient,
    round_ratio,
    should_increment,
    truncated_divmod,
)

# Narrowing
from src.bigfraction.math.narrowing import (
    IntegerWidth,
    NoExactValueError,
    fits,
    narrow_ratio,
    narrow_ratio_exact,
    saturate,
)

# IEEE-754 Bridge
from src.bigfraction.math.ieee754 import (
    BINARY32,
    BINARY64,
    DEFAULT_FLOAT_FORMAT,
    FloatFormat,
    FloatParts,
    decompose,
    float_to_ratio,
    get_float_format,
    is_representable,
    ratio_to_float,
)

# Scaled Decimal Bridge
from src.bigfraction.math.scaled_decimal import (
    DECIMAL_FALLBACK_PRECISION,
    ScaledDecimal,
    decimal_to_ratio,
    decimal_to_scaled,
    ratio_to_decimal,
    ratio_to_scaled,
    scaled_to_ratio,
    terminating_scale,
)

# Parsing
from src.bigfraction.math.parsing import FractionFormatError, parse_number, parse_ratio

# Rendering
from src.bigfraction.math.rendering import (
    DIGITS,
    canonical_string,
    decimal_string,
    format_int,
    mixed_string,
    repeating_digit_string,
)

# Farey
from src.bigfraction.math.farey import farey_closest, farey_next, farey_prev, mediant

__all__ = [
    # Safeguards — Constants
    "DEFAULT_RADIX",
    "MAX_RADIX",
    "MIN_RADIX",
    # Safeguards — Functions
    "clamp",
    "is_strict_int",
    "is_valid_float",
    "require_finite",
    "require_int",
    "validate_positive",
    "validate_radix",
    # Reduction
    "reduce_ratio",
    # Rounding — Types
    "DivisionMode",
    "RoundingMode",
    # Rounding — Constants
    "DEFAULT_ROUNDING_MODE",
    # Rounding — Exceptions
    "RoundingNecessaryError",
    # Rounding — Functions
    "integral_quotient",
    "round_ratio",
    "should_increment",
    "truncated_divmod",
    # Narrowing — Types
    "IntegerWidth",
    # Narrowing — Exceptions
    "NoExactValueError",
    # Narrowing — Functions
    "fits",
    "narrow_ratio",
    "narrow_ratio_exact",
    "saturate",
    # IEEE-754 — Constants
    "BINARY32",
    "BINARY64",
    "DEFAULT_FLOAT_FORMAT",
    # IEEE-754 — Types
    "FloatFormat",
    "FloatParts",
    # IEEE-754 — Functions
    "decompose",
    "float_to_ratio",
    "get_float_format",
    "is_representable",
    "ratio_to_float",
    # Scaled Decimal — Constants
    "DECIMAL_FALLBACK_PRECISION",
    # Scaled Decimal — Types
    "ScaledDecimal",
    # Scaled Decimal — Functions
    "decimal_to_ratio",
    "decimal_to_scaled",
    "ratio_to_decimal",
    "ratio_to_scaled",
    "scaled_to_ratio",
    "terminating_scale",
    # Parsing
    "FractionFormatError",
    "parse_number",
    "parse_ratio",
    # Rendering — Constants
    "DIGITS",
    # Rendering — Functions
    "canonical_string",
    "decimal_string",
    "format_int",
    "mixed_string",
    "repeating_digit_string",
    # Farey
    "farey_closest",
    "farey_next",
    "farey_prev",
    "mediant",
]
