"""Animal operations: one store call each, store outcomes mapped to HTTP errors.

Store failures on List become 500. On the other operations they are folded
into 400, matching the behaviour existing clients were built against.
"""
import logging
from typing import Any
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from animals_api import repositories
from animals_api import schemas
from animals_api.utils import exceptions
from animals_api.utils.object_id import is_valid_object_id

logger = logging.getLogger(__name__)


def _check_id(animal_id: str):
    if not is_valid_object_id(animal_id):
        raise exceptions.invalid_id_exception()


def create_animal(db: Session, payload: Any) -> schemas.Animal:
    try:
        return repositories.create_animal(db, payload)
    except repositories.AnimalValidationError as e:
        raise exceptions.bad_request_exception(str(e))
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception('Failed to create animal')
        raise exceptions.bad_request_exception(str(e))


def get_animals(db: Session) -> list[schemas.Animal]:
    try:
        return repositories.get_animals(db)
    except SQLAlchemyError as e:
        logger.exception('Failed to list animals')
        raise exceptions.internal_server_error_exception(str(e))


def get_animal(db: Session, animal_id: str) -> schemas.Animal:
    _check_id(animal_id)
    try:
        animal = repositories.get_animal(db, animal_id)
    except SQLAlchemyError:
        logger.exception(f'Failed to get animal {animal_id}')
        raise exceptions.invalid_id_exception()
    if animal is None:
        raise exceptions.not_found_exception()
    return animal


def update_animal(db: Session, animal_id: str, payload: Any) -> schemas.Animal:
    _check_id(animal_id)
    try:
        animal = repositories.replace_animal(db, animal_id, payload)
    except repositories.AnimalValidationError as e:
        raise exceptions.bad_request_exception(str(e))
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f'Failed to update animal {animal_id}')
        raise exceptions.bad_request_exception(str(e))
    if animal is None:
        raise exceptions.not_found_exception()
    return animal


def delete_animal(db: Session, animal_id: str):
    _check_id(animal_id)
    try:
        animal = repositories.delete_animal(db, animal_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f'Failed to delete animal {animal_id}')
        raise exceptions.invalid_id_exception()
    if animal is None:
        raise exceptions.not_found_exception()
