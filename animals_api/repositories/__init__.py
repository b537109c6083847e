from .animal import (
    AnimalValidationError,
    create_animal,
    get_animals,
    get_animal,
    replace_animal,
    delete_animal
)
