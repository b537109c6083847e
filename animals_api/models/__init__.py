from .animal import Animal
