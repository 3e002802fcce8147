from identity.models.group import Group
from identity.models.user import User
from identity.models.user_group_binding import UserGroupBinding

__all__ = ["User", "Group", "UserGroupBinding"]
