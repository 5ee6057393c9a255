"""Implementation modules for polycross; import public names from ``polycross``."""
