from typing import Any, Optional
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session
from animals_api import models
from animals_api import schemas

_returned_columns = (models.Animal.id, models.Animal.name, models.Animal.species, models.Animal.age)


class AnimalValidationError(Exception):
    """A write was rejected by the schema before reaching the database."""

    def __init__(self, result: schemas.ValidationResult):
        super().__init__(result.message)
        self.result = result


def _validated(payload: Any) -> schemas.AnimalIn:
    result = schemas.validate_animal(payload)
    if not result.ok:
        raise AnimalValidationError(result)
    return result.value


def create_animal(db: Session, payload: Any) -> schemas.Animal:
    """Validate and insert; the id is generated by the column default."""
    data = _validated(payload)
    animal_model: models.Animal = models.Animal(**data.model_dump())
    db.add(animal_model)
    db.commit()
    return schemas.Animal.model_validate(animal_model)


def get_animals(db: Session) -> list[schemas.Animal]:
    result = db.execute(select(models.Animal)).scalars().all()
    return [schemas.Animal.model_validate(r) for r in result]


def get_animal(db: Session, animal_id: str) -> Optional[schemas.Animal]:
    animal_model = db.get(models.Animal, animal_id.lower())
    if animal_model is None:
        return None
    return schemas.Animal.model_validate(animal_model)


def replace_animal(db: Session, animal_id: str, payload: Any) -> Optional[schemas.Animal]:
    """Full replace of the three business fields. Returns the post-update record or None."""
    data = _validated(payload)
    stmt = update(models.Animal) \
        .where(models.Animal.id == animal_id.lower()) \
        .values(**data.model_dump()) \
        .returning(*_returned_columns)
    row = db.execute(stmt).mappings().first()
    db.commit()
    if row is None:
        return None
    return schemas.Animal(**row)


def delete_animal(db: Session, animal_id: str) -> Optional[schemas.Animal]:
    stmt = delete(models.Animal) \
        .where(models.Animal.id == animal_id.lower()) \
        .returning(*_returned_columns)
    row = db.execute(stmt).mappings().first()
    db.commit()
    if row is None:
        return None
    return schemas.Animal(**row)
