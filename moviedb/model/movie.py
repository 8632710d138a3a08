from sqlalchemy import Column, Integer, String, Float, Numeric
from moviedb.database import Base


class Movie(Base):
    __tablename__ = "movies"
    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    director = Column(String(100), nullable=True)
    genre = Column(String(50), nullable=True)
    release_year = Column(Integer, nullable=True)
    rating = Column(Float, nullable=True)  # e.g., 4.5 out of 5.0
    actor = Column(String(100), nullable=True)
    box_office_collection = Column(Numeric(asdecimal=False), nullable=True)  # in crores
