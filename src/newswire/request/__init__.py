from newswire.request.builder import (
    build_url,
    merge_config,
    normalize_date,
    parse_date,
    serialize_params,
    validate_config,
)

__all__ = [
    "build_url",
    "merge_config",
    "normalize_date",
    "parse_date",
    "serialize_params",
    "validate_config",
]
