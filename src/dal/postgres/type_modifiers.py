"""Numeric precision and scale derived from pg_type OIDs and packed atttypmod values."""

from typing import Optional

INT2_OID = 21
INT4_OID = 23
INT8_OID = 20
NUMERIC_OID = 1700
FLOAT4_OID = 700
FLOAT8_OID = 701

# atttypmod of -1 means the column was declared without a precision.
NO_MODIFIER = -1
# atttypmod carries a VARHDRSZ offset; precision is in the high 16 bits, scale in the low.
VARHDRSZ = 4

_FIXED_PRECISION = {
    INT2_OID: 16,
    INT4_OID: 32,
    INT8_OID: 64,
    FLOAT4_OID: 24,  # FLT_MANT_DIG
    FLOAT8_OID: 53,  # DBL_MANT_DIG
}

_INTEGER_OIDS = frozenset({INT2_OID, INT4_OID, INT8_OID})


def numeric_precision(type_oid: Optional[int], modifier: Optional[int]) -> Optional[int]:
    """Return the precision in bits (integers, floats) or digits (numeric)."""
    if type_oid == NUMERIC_OID:
        if modifier is None or modifier == NO_MODIFIER:
            return None
        return ((modifier - VARHDRSZ) >> 16) & 0xFFFF
    return _FIXED_PRECISION.get(type_oid)


def numeric_scale(type_oid: Optional[int], modifier: Optional[int]) -> Optional[int]:
    """Return the scale: 0 for integers, the declared scale for numeric, else None."""
    if type_oid in _INTEGER_OIDS:
        return 0
    if type_oid == NUMERIC_OID:
        if modifier is None or modifier == NO_MODIFIER:
            return None
        return (modifier - VARHDRSZ) & 0xFFFF
    return None
