"""Identity manager service: users, groups and group membership."""

__version__ = "0.1.0"
