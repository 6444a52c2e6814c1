"""SKU identifiers and option-combination expansion.

A SKU id reads like ``TSHIRT-4F2A91C0-Red-M-1B7E0A3C``: the product code,
the chosen option values ordered by option-group name, and a CRC-32 of the
canonical ``group=value`` pairs so that two mappings with the same joined
values but different group names still get different ids.
The hash input is the ``group=value`` list rather than the joined option
string, and a product without options gets ``{code}-{hash}`` with no empty
segment.
"""

import itertools
import json
import zlib

OPTION_DELIMITER = "-"


def _canonical_items(options: dict[str, str]) -> list[tuple[str, str]]:
    return sorted(options.items(), key=lambda item: item[0])


def option_hash(options: dict[str, str]) -> str:
    """Short uppercase hex digest of an option mapping."""
    payload = ";".join(f"{name}={value}" for name, value in _canonical_items(options))
    return format(zlib.crc32(payload.encode("utf-8")), "08X")


def generate_sku_id(product_code: str, options: dict[str, str]) -> str:
    """Derive the SKU id for ``options`` under ``product_code``.

    Pure: the same code and mapping always produce the same id.
    """
    option_string = OPTION_DELIMITER.join(value for _, value in _canonical_items(options))
    parts = [product_code]
    if option_string:
        parts.append(option_string)
    parts.append(option_hash(options))
    return OPTION_DELIMITER.join(parts)


def canonical_option_values(options: dict[str, str]) -> str:
    """Serialize an option mapping as JSON with keys in sorted order."""
    return json.dumps(dict(_canonical_items(options)), ensure_ascii=False)


def expand_option_combinations(groups):
    """Cartesian product of one option from each group.

    ``groups`` is a sequence of ``(group, options)`` pairs; each combination
    comes back as a tuple of ``(group, option)`` pairs in group order. No
    groups at all yields a single empty combination.
    """
    axes = [[(group, option) for option in options] for group, options in groups]
    return list(itertools.product(*axes))
