"""
Configuration loading from the environment.
"""

import os

from dotenv import load_dotenv

from sort_translator.core.models import TranslatorConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_config() -> TranslatorConfig:
    """
    Build a TranslatorConfig from environment variables.

    Values from a local .env file are loaded first; variables already set in
    the environment take precedence.

    Returns:
        TranslatorConfig populated from SORT_PARAMETER, SORT_PROPERTY_DELIMITER,
        SORT_BY_ALIAS, REPOSITORY_BASE_PATH and LOG_LEVEL
    """
    load_dotenv()
    defaults = TranslatorConfig()

    return TranslatorConfig(
        sort_parameter=os.getenv("SORT_PARAMETER", defaults.sort_parameter),
        property_delimiter=os.getenv("SORT_PROPERTY_DELIMITER", defaults.property_delimiter),
        by_alias=os.getenv("SORT_BY_ALIAS", str(defaults.by_alias)).strip().lower() in _TRUE_VALUES,
        base_path=os.getenv("REPOSITORY_BASE_PATH", defaults.base_path),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
    )
