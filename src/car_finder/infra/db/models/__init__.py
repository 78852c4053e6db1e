from car_finder.infra.db.models.base import Base
from car_finder.infra.db.models.preference import PreferenceRow

__all__ = ["Base", "PreferenceRow"]
