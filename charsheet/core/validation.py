"""
Input validation system for reference data, snapshots and user inputs.

The aggregation engine itself is permissive, these checks run in front of it
(when loading files or reading what the user typed).
"""
from typing import Any, Dict, List, Optional, Type, Union
from dataclasses import dataclass

from charsheet.core.constants import MAX_CLASS_LEVEL, MIN_CLASS_LEVEL, SheetField


class ValidationResult:
    def __init__(self, is_valid: bool = True, errors: Optional[List[str]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str):
        self.is_valid = False
        self.errors.append(error)

    def merge(self, other: 'ValidationResult'):
        if not other.is_valid:
            self.is_valid = False
            self.errors.extend(other.errors)


@dataclass
class FieldValidator:
    """Defines validation rules for a field."""
    required: bool = False
    field_type: Optional[Type] = None
    item_type: Optional[Type] = None
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    allowed_values: Optional[List[Any]] = None


class DataValidator:
    """Validates data structures against defined schemas."""

    def __init__(self, schema: Dict[str, FieldValidator]):
        self.schema = schema

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        """Validate data against the schema."""
        result = ValidationResult()

        # Check required fields
        for field_name, validator in self.schema.items():
            if validator.required and field_name not in data:
                result.add_error(f"Required field '{field_name}' is missing")
                continue

            if field_name not in data:
                continue

            field_value = data[field_name]
            field_result = self._validate_field(field_name, field_value, validator)
            result.merge(field_result)

        return result

    def _validate_field(self, field_name: str, value: Any, validator: FieldValidator) -> ValidationResult:
        """Validate a single field."""
        result = ValidationResult()

        # Type checking, bool is not accepted where a number is expected
        if validator.field_type and (
            not isinstance(value, validator.field_type)
            or (isinstance(value, bool) and validator.field_type is not bool)
        ):
            result.add_error(f"Field '{field_name}' must be of type {validator.field_type.__name__}")
            return result

        # Item type checking for lists
        if validator.item_type and isinstance(value, list):
            for index, item in enumerate(value):
                if not isinstance(item, validator.item_type):
                    result.add_error(
                        f"Field '{field_name}[{index}]' must be of type {validator.item_type.__name__}"
                    )

        # Numeric range checking
        if isinstance(value, (int, float)):
            if validator.min_value is not None and value < validator.min_value:
                result.add_error(f"Field '{field_name}' must be >= {validator.min_value}")
            if validator.max_value is not None and value > validator.max_value:
                result.add_error(f"Field '{field_name}' must be <= {validator.max_value}")

        # String length checking
        if isinstance(value, str):
            if validator.min_length is not None and len(value.strip()) < validator.min_length:
                result.add_error(f"Field '{field_name}' must be at least {validator.min_length} characters")
            if validator.max_length is not None and len(value) > validator.max_length:
                result.add_error(f"Field '{field_name}' must be at most {validator.max_length} characters")

        # Allowed values checking
        if validator.allowed_values and value not in validator.allowed_values:
            result.add_error(f"Field '{field_name}' must be one of: {validator.allowed_values}")

        return result


# Common validation schemas
SELECTION_SCHEMA = DataValidator({
    "className": FieldValidator(required=True, field_type=str, min_length=1),
    "level": FieldValidator(required=True, field_type=int, min_value=MIN_CLASS_LEVEL, max_value=MAX_CLASS_LEVEL),
})

CLASS_ENTRY_SCHEMA = DataValidator({
    "weapons": FieldValidator(field_type=list, item_type=str),
    "tools": FieldValidator(field_type=list, item_type=str),
    "resistances_immunities": FieldValidator(field_type=list, item_type=str),
    "spell_chunks": FieldValidator(field_type=list, item_type=str),
    "casual_abilities": FieldValidator(field_type=dict),
})

SNAPSHOT_SCHEMA = DataValidator({
    **{field.snapshot_key: FieldValidator(field_type=str) for field in SheetField},
    "selectedClasses": FieldValidator(field_type=list, item_type=dict),
})


def validate_selection_data(data: Dict[str, Any]) -> ValidationResult:
    """Validate a single class selection."""
    return SELECTION_SCHEMA.validate(data)


def validate_class_entry_data(data: Any) -> ValidationResult:
    """Validate one entry of the class reference table."""
    if not isinstance(data, dict):
        return ValidationResult(False, [f"Class entry must be an object, got {type(data).__name__}"])

    result = CLASS_ENTRY_SCHEMA.validate(data)

    # Validate each unlock list of the casual abilities
    casual = data.get("casual_abilities")
    if isinstance(casual, dict):
        for range_token, abilities in casual.items():
            ability_validator = FieldValidator(field_type=list, item_type=str)
            result.merge(
                CLASS_ENTRY_SCHEMA._validate_field(
                    f"casual_abilities.{range_token}", abilities, ability_validator
                )
            )

    return result


def validate_snapshot_data(data: Any) -> ValidationResult:
    """Validate a saved character snapshot."""
    if not isinstance(data, dict):
        return ValidationResult(False, [f"Snapshot must be an object, got {type(data).__name__}"])

    result = SNAPSHOT_SCHEMA.validate(data)

    # Validate selections if present
    selections = data.get("selectedClasses")
    if isinstance(selections, list):
        for selection in selections:
            if isinstance(selection, dict):
                result.merge(validate_selection_data(selection))

    return result
