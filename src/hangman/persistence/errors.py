class SaveError(Exception):
    """Base exception for save/load errors."""


class SaveNotFoundError(SaveError):
    """Raised when the requested save file does not exist."""


class CorruptSaveError(SaveError):
    """Raised when a save file cannot be parsed or describes an impossible game."""


class SaveTargetUnwritableError(SaveError):
    """Raised when a save cannot be written (bad name, permissions, full disk)."""
