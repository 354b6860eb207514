"""Map provider type names onto canonical data types."""

from srcsync.types import CanonicalType

PROVIDER_TYPE_GROUPS: list[tuple[CanonicalType, tuple[str, ...]]] = [
    (
        CanonicalType.BINARY,
        ("binary.type", "binary", "varbinary", "variant", "sqlvariant"),
    ),
    (
        CanonicalType.STRING,
        ("any.type", "text.type", "text", "string", "char", "nchar", "varchar", "nvarchar"),
    ),
    (
        CanonicalType.DOUBLE,
        (
            "number.type",
            "double.type",
            "single.type",
            "percentage.type",
            "duration.type",
            "number",
            "real",
            "float",
            "single",
            "double",
        ),
    ),
    (
        CanonicalType.DECIMAL,
        ("currency.type", "decimal.type", "currency", "decimal", "numeric", "money", "smallmoney"),
    ),
    (
        CanonicalType.INT64,
        (
            "int64.type",
            "int32.type",
            "int16.type",
            "byte.type",
            "int",
            "integer",
            "whole",
            "byte",
            "bigint",
            "smallint",
            "tinyint",
            "int64",
            "int32",
            "long",
        ),
    ),
    (
        CanonicalType.DATETIME,
        ("datetimezone.type", "datetime.type", "date.type", "time.type", "datetime", "date", "time"),
    ),
    (
        CanonicalType.BOOLEAN,
        ("logical.type", "boolean", "bool", "bit"),
    ),
]


def _build_lookup() -> dict[str, CanonicalType]:
    lookup: dict[str, CanonicalType] = {}
    for canonical, names in PROVIDER_TYPE_GROUPS:
        for name in names:
            lookup.setdefault(name, canonical)
    return lookup


_LOOKUP = _build_lookup()


def map_provider_type(provider_type: str) -> CanonicalType:
    """Return the canonical type for a provider type name.

    Known names are matched case-insensitively. Anything else is inferred from
    its name: "int" anywhere means Int64, otherwise "date" means DateTime,
    otherwise String. The "int" check wins when both substrings occur.
    """
    src_type = provider_type.lower()
    mapped = _LOOKUP.get(src_type)
    if mapped is not None:
        return mapped
    if "int" in src_type:
        return CanonicalType.INT64
    if "date" in src_type:
        return CanonicalType.DATETIME
    return CanonicalType.STRING
