"""ryandata-postcode-utils: rule-driven postcode validation for many countries.

This package provides:
- Per-country postcode format validation from a bundled rule table
- Normalization (zero padding, format fixes) before range comparisons
- Inclusive range containment and overlap detection for range lists
- Province/state lookup by code or name
- Composable record validators, pandas helpers, a FastAPI app and a CLI

Quick Start:
    >>> from ryandata_postcode_utils import PostcodeService
    >>> service = PostcodeService()
    >>> service.validate_format("US", "12345").success
    True

    # Range checks
    >>> result = service.check_in_range("US", "50000", "99999", "12345")
    >>> result.error_kind
    <ErrorKind.BELOW_RANGE: 'below_range'>

    # Overlap detection
    >>> service.check_no_overlap("US", [("00000", "09999"), ("10000", "19999")]).success
    True

    # Pandas integration
    >>> import pandas as pd
    >>> df = pd.DataFrame({"zip": ["12345", "1234A"]})
    >>> result_df = service.validate_dataframe(df, "zip", country_code="US")
"""

from __future__ import annotations  # noqa: I001

__version__ = "0.1.0"
__package_name__ = "ryandata-postcode-utils"

# Import order is intentional to avoid circular imports - do not auto-fix
from ryandata_postcode_utils.models import (
    PACKAGE_NAME,
    CheckResult,
    Comparison,
    ErrorKind,
    FormatFixResult,
    PostalRange,
    PostcodeRecord,
    PostcodeRule,
    ProvinceInfo,
    RyanDataPostcodeError,
)
from ryandata_postcode_utils.core import (
    check_in_range,
    check_no_overlap,
    check_range_bounds,
    compare,
    extract_comparable,
    normalize,
    validate_format,
)
from ryandata_postcode_utils.data import (
    BaseProvinceSource,
    BaseRuleSource,
    CSVProvinceSource,
    CSVRuleSource,
    ProvinceSourceFactory,
    RuleSourceFactory,
    get_province,
    get_provinces,
    get_rule,
)
from ryandata_postcode_utils.pandas_ext import register_accessor, validate_postcodes
from ryandata_postcode_utils.protocols import ProvinceSourceProtocol, RuleSourceProtocol
from ryandata_postcode_utils.service import PostcodeService, get_default_service
from ryandata_postcode_utils.validation import (
    BaseValidator,
    CompositeValidator,
    PostcodeFormatValidator,
    ProvinceValidator,
    create_default_validators,
)
from ryandata_postcode_utils.validation.base import RyanDataValidationBase

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "PostcodeService",
    "get_default_service",
    # Core checks (rule supplied by the caller)
    "validate_format",
    "normalize",
    "extract_comparable",
    "compare",
    "check_range_bounds",
    "check_in_range",
    "check_no_overlap",
    # Models
    "PostcodeRule",
    "FormatFixResult",
    "PostalRange",
    "ProvinceInfo",
    "PostcodeRecord",
    "CheckResult",
    "Comparison",
    "ErrorKind",
    # Errors
    "PACKAGE_NAME",
    "RyanDataPostcodeError",
    # Process logging
    "RyanDataValidationBase",
    # Protocols
    "RuleSourceProtocol",
    "ProvinceSourceProtocol",
    # Data sources
    "BaseRuleSource",
    "BaseProvinceSource",
    "CSVRuleSource",
    "CSVProvinceSource",
    "RuleSourceFactory",
    "ProvinceSourceFactory",
    # Validators
    "BaseValidator",
    "CompositeValidator",
    "PostcodeFormatValidator",
    "ProvinceValidator",
    "create_default_validators",
    # Convenience functions
    "get_rule",
    "get_provinces",
    "get_province",
    # Pandas integration
    "register_accessor",
    "validate_postcodes",
]


def main() -> None:
    """CLI entry point."""
    from ryandata_postcode_utils.cli import main as cli_main

    cli_main()
