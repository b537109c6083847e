from sqlalchemy import Column, Integer, String

from animals_api.database import Base
from animals_api.utils.object_id import new_object_id


class Animal(Base):
    __tablename__ = 'animals'
    id = Column(String(24), primary_key=True, index=True, default=new_object_id)
    name = Column(String, nullable=False)
    species = Column(String, nullable=False)
    age = Column(Integer, nullable=False)

    def __repr__(self):
        return f'Animal ID:{self.id} Name:{self.name} Species:{self.species} Age:{self.age}'
