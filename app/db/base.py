from app.db.base_class import Base

# Import ALL models so SQLAlchemy registers them
from app.models.user import User  # noqa: F401
from app.models.group import Group  # noqa: F401
from app.models.user_group import UserGroup  # noqa: F401
