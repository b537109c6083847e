from typing import Any
from fastapi import APIRouter, Body, Depends, Path, Response, status
from sqlalchemy.orm import Session
from animals_api import schemas
from animals_api import services
from animals_api import database

router = APIRouter()

_id_param = Path(..., description='Animal ID')
_animal_body = Body(...)
# the body is checked by schemas.validate_animal, not by FastAPI, so it is documented by hand
_animal_request = {'requestBody': {
    'required': True,
    'content': {'application/json': {'schema': schemas.AnimalIn.model_json_schema()}},
}}
_invalid_id = {'model': schemas.Error, 'description': 'Invalid ID format'}
_not_found = {'model': schemas.Error, 'description': 'Animal not found'}


@router.post('', status_code=status.HTTP_201_CREATED, response_model=schemas.Animal,
             summary='Create a new animal', openapi_extra=_animal_request,
             responses={400: {'model': schemas.Error, 'description': 'Invalid input data'}})
def create_animal(animal: Any = _animal_body, db: Session = Depends(database.get_db)):
    return services.animal.create_animal(db, animal)


@router.get('', status_code=status.HTTP_200_OK, response_model=list[schemas.Animal],
            summary='Get all animals',
            responses={500: {'model': schemas.Error, 'description': 'Internal server error'}})
def get_animals(db: Session = Depends(database.get_db)):
    return services.animal.get_animals(db)


@router.get('/{animal_id}', status_code=status.HTTP_200_OK, response_model=schemas.Animal,
            summary='Get an animal by ID', responses={400: _invalid_id, 404: _not_found})
def get_animal(animal_id: str = _id_param, db: Session = Depends(database.get_db)):
    return services.animal.get_animal(db, animal_id)


@router.put('/{animal_id}', status_code=status.HTTP_200_OK, response_model=schemas.Animal,
            summary='Update an animal', openapi_extra=_animal_request,
            responses={400: {'model': schemas.Error, 'description': 'Invalid input or ID'}, 404: _not_found})
def update_animal(animal_id: str = _id_param, animal: Any = _animal_body,
                  db: Session = Depends(database.get_db)):
    return services.animal.update_animal(db, animal_id, animal)


@router.delete('/{animal_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
               summary='Delete an animal', responses={400: _invalid_id, 404: _not_found})
def delete_animal(animal_id: str = _id_param, db: Session = Depends(database.get_db)):
    services.animal.delete_animal(db, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
