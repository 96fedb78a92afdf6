import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .type_validations import TRUE_TOKENS
from .values import trim
from .validators import VALIDATOR_TYPE_MAP, get_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "VALUE_VALIDATORS_"


def _env_flag(name: str) -> bool:
    return trim(os.getenv(name, "")).lower() in TRUE_TOKENS


class ValidatorConfig:

    def __init__(self, env_file: str | Path | None = None):

        # Variables already set in the environment win over the .env file
        load_dotenv(env_file)

        self.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").strip().upper()
        self.default_type = os.getenv(f"{ENV_PREFIX}DEFAULT_TYPE", "Text").strip()
        self.json_input = _env_flag(f"{ENV_PREFIX}JSON_INPUT")

        try:
            get_validator(self.default_type)
        except ValueError:
            logger.error(
                f"Unknown default validator type: {self.default_type} "
                f"(expected one of {', '.join(VALIDATOR_TYPE_MAP)})"
            )
            raise

        logger.info(f"Initialized ValidatorConfig with default type: {self.default_type}")
