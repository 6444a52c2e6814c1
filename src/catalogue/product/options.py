"""Option-group specifications and the pluggable product validator.

Specifications are the parsed form of a create-product request's option
groups. The validator runs before anything is built, so a rejected
specification never leaves partial state behind.
"""

import json
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from math import prod

from protean.exceptions import ValidationError

DEFAULT_MAX_SKU_COUNT = 100


@dataclass(frozen=True)
class OptionSpec:
    name: str
    additional_price: int = 0
    ordering: int = 0


@dataclass(frozen=True)
class OptionGroupSpec:
    name: str
    ordering: int = 0
    options: list[OptionSpec] = field(default_factory=list)


def parse_option_groups(raw) -> list[OptionGroupSpec]:
    """Build specs from the JSON text (or list of dicts) carried by a command."""
    if not raw:
        return []

    data = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(data, list):
        raise ValidationError({"option_groups": ["Option groups must be a list"]})

    groups = []
    for index, group in enumerate(data):
        if not isinstance(group, dict) or not str(group.get("name") or "").strip():
            raise ValidationError({"option_groups": [f"Option group #{index} requires a name"]})

        options = []
        for option in group.get("options") or []:
            if not isinstance(option, dict) or not str(option.get("name") or "").strip():
                raise ValidationError({"option_groups": [f"Every option in '{group['name']}' requires a name"]})
            additional_price = int(option.get("additional_price") or 0)
            ordering = int(option.get("ordering") or 0)
            if additional_price < 0 or ordering < 0:
                raise ValidationError(
                    {"option_groups": [f"Option '{option['name']}' must have non-negative price and ordering"]}
                )
            options.append(OptionSpec(name=option["name"], additional_price=additional_price, ordering=ordering))

        ordering = int(group.get("ordering") or 0)
        if ordering < 0:
            raise ValidationError({"option_groups": [f"Option group '{group['name']}' must have non-negative ordering"]})
        groups.append(OptionGroupSpec(name=group["name"], ordering=ordering, options=options))

    return groups


def sku_count(groups: list[OptionGroupSpec]) -> int:
    """Number of SKUs the cartesian expansion of ``groups`` would produce."""
    return prod(len(group.options) for group in groups)


class ProductValidator(ABC):
    """Policy hook consulted before a product is assembled."""

    @abstractmethod
    def validate(self, groups: list[OptionGroupSpec]) -> None:
        """Raise ValidationError to reject the specification."""
        ...


class DefaultProductValidator(ProductValidator):
    """Rejects empty or duplicated groups and oversized SKU expansions."""

    def __init__(self, max_sku_count: int | None = None):
        if max_sku_count is None:
            max_sku_count = int(os.environ.get("MAX_SKU_COUNT", DEFAULT_MAX_SKU_COUNT))
        self.max_sku_count = max_sku_count

    def validate(self, groups: list[OptionGroupSpec]) -> None:
        errors = []

        group_names = [group.name for group in groups]
        duplicated_groups = sorted({name for name in group_names if group_names.count(name) > 1})
        if duplicated_groups:
            errors.append(f"Duplicate option group names: {', '.join(duplicated_groups)}")

        for group in groups:
            if not group.options:
                errors.append(f"Option group '{group.name}' must have at least one option")
                continue

            option_names = [option.name for option in group.options]
            duplicated_options = sorted({name for name in option_names if option_names.count(name) > 1})
            if duplicated_options:
                errors.append(f"Option group '{group.name}' has duplicate options: {', '.join(duplicated_options)}")

        count = sku_count(groups)
        if count > self.max_sku_count:
            errors.append(f"Option combinations produce {count} SKUs, above the limit of {self.max_sku_count}")

        if errors:
            raise ValidationError({"option_groups": errors})


_current_validator: ProductValidator | None = None


def get_product_validator() -> ProductValidator:
    """Return the active validator. Defaults to DefaultProductValidator."""
    global _current_validator
    if _current_validator is None:
        _current_validator = DefaultProductValidator()
    return _current_validator


def set_product_validator(validator: ProductValidator) -> None:
    """Override the active validator (useful for tests)."""
    global _current_validator
    _current_validator = validator


def reset_product_validator() -> None:
    """Reset to the default validator."""
    global _current_validator
    _current_validator = None
