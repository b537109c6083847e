from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# ages are stored in a 32-bit INTEGER column
MAX_AGE = 2**31 - 1


class AnimalIn(BaseModel):
    """Client-supplied fields of an Animal. Unknown fields, ``id`` included, are dropped."""
    name: str = Field(..., min_length=1, examples=['Lion'])
    species: str = Field(..., min_length=1, examples=['Mammal'])
    age: int = Field(..., ge=0, le=MAX_AGE, examples=[5])

    @field_validator('age', mode='before')
    @classmethod
    def reject_bool_age(cls, v):
        if isinstance(v, bool):
            raise ValueError('Input should be a valid integer')
        return v


class Animal(AnimalIn):
    id: str = Field(..., description='Store generated ID', examples=['65f1c2a9e4b0a1b2c3d4e5f6'])

    model_config = ConfigDict(from_attributes=True)


class Error(BaseModel):
    error: str


class FieldError(BaseModel):
    field: str
    message: str


class ValidationResult(BaseModel):
    ok: bool
    value: Optional[AnimalIn] = None
    errors: list[FieldError] = []

    @property
    def message(self) -> str:
        details = ', '.join(f'{e.field}: {e.message}' for e in self.errors)
        return f'Animal validation failed: {details}'


def validate_animal(payload: Any) -> ValidationResult:
    if not isinstance(payload, dict):
        return ValidationResult(ok=False, errors=[FieldError(field='body', message='Input should be an object')])
    try:
        value = AnimalIn.model_validate(payload)
    except ValidationError as e:
        errors = [FieldError(field='.'.join(str(loc) for loc in err['loc']), message=err['msg'])
                  for err in e.errors()]
        return ValidationResult(ok=False, errors=errors)
    return ValidationResult(ok=True, value=value)
