from typing import Literal

from lazywire.lock_mode import LockMode

DEFAULT_LOCK_MODE: LockMode | Literal["auto"] = "auto"
"""Lock mode used by lazy values when no ``lock_mode`` is passed."""
