from kindiary.models.diary import Diary
from kindiary.models.kindergarten import Kindergarten

__all__ = [
    "Diary",
    "Kindergarten",
]
