from .animal import Animal, AnimalIn, Error, FieldError, ValidationResult, validate_animal
