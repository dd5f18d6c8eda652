"""Configuration models and utilities for the completeness checks."""

from option_docs.library.config.models import (
    CompletenessCheckConfig,
    load_check_config,
)

__all__ = [
    "CompletenessCheckConfig",
    "load_check_config",
]
