"""
Parameter processing utilities.

Handles preparation of operation parameters, providing unified
parameter handling across all filter operations.
"""

from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def prepare_params(params: Optional[Union[T, Dict[str, Any]]], params_class: Type[T]) -> T:
    """
    Prepare operation parameters with default initialization.

    If params is None, creates a new instance with defaults.
    If params is a dict, validates it into params_class.
    If params is already an instance, returns it unchanged.

    Args:
        params: Parameters instance, dict or None
        params_class: Pydantic parameter class for defaults

    Returns:
        Initialized parameters instance

    Raises:
        pydantic.ValidationError: If a dict fails validation

    Example:
        >>> params = prepare_params({"level": 100}, ThresholdParams)
        >>> # Returns ThresholdParams(level=100)
    """
    if params is None:
        return params_class()
    if isinstance(params, params_class):
        return params
    if isinstance(params, BaseModel):
        params = params.model_dump()
    return params_class.model_validate(params)


def merge_params(base_params: Dict[str, Any], override_params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two parameter dictionaries.

    Override params take precedence over base params.

    Example:
        >>> merge_params({"iterations": 1}, {"iterations": 3})
        >>> # Returns {"iterations": 3}
    """
    result = base_params.copy()
    result.update(override_params)
    return result


def params_to_dict(params: Optional[BaseModel]) -> Dict[str, Any]:
    """
    Convert Pydantic params to a plain dictionary (empty for None).

    Enum members are converted to their values.
    """
    if params is None:
        return {}
    return params.model_dump(mode="json", exclude_none=True)
