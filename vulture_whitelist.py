"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validator - used by framework via @field_validator decorator
_.parse_inputs  # noqa: F821  # unused method (concatwords/core/config.py)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_sources  # noqa: F821  # unused method (concatwords/core/config.py)

# Pydantic model_config class variables - read by framework at class definition time
model_config  # noqa: F821  # unused variable (concatwords/core/types.py)

# Public API consumed by callers outside the package
_.contains  # noqa: F821  # unused method (concatwords/core/index.py)
_.sorted_words  # noqa: F821  # unused method (concatwords/core/index.py)
