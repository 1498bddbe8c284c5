"""
Reusable validators for hopfviz Pydantic models.

Exports:
    - asdict: Version-agnostic model-to-dict converter (Pydantic v1/v2).
    - positive_value: Field validator (value must be strictly positive).
    - unit_point: Field validator (3-vector renormalized onto S²).
"""

from hopfviz.geometry.hopf import as_unit_point

__all__ = [
    "asdict",
    "positive_value",
    "unit_point",
]


def asdict(model):
    """
    Return the dictionary representation of a Pydantic model,
    compatible with both Pydantic v1 and v2.

    Args:
        model (BaseModel): The Pydantic model instance.

    Returns:
        dict: Dictionary representation of the model.
    """
    return model.model_dump() if hasattr(model, "model_dump") else model.dict()


def positive_value(cls, v):
    """
    Ensure a field's value is strictly positive.

    Raises:
        ValueError: If the value is zero or negative.
    """
    if v <= 0:
        raise ValueError("Value must be positive")
    return v


def unit_point(cls, v):
    """
    Renormalize a 3-vector onto the unit sphere.

    Returns:
        tuple: The normalized point as a float triple.

    Raises:
        ValueError: If the vector is zero-length, non-finite or not 3D.
    """
    return tuple(float(c) for c in as_unit_point(v))
