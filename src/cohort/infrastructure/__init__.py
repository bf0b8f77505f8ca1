"""Infrastructure layer: concrete implementations of application ports."""

from cohort.infrastructure.config import Settings, load_env_file, load_settings
from cohort.infrastructure.memory_model import InMemoryModel
from cohort.infrastructure.phone import canonical_phone, to_e164

__all__ = [
    "InMemoryModel",
    "Settings",
    "canonical_phone",
    "load_env_file",
    "load_settings",
    "to_e164",
]
