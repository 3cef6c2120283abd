"""
Environment-driven defaults for pass requests.

Values are read from the process environment after loading a .env file with
python-dotenv. Anything set in a pass description overrides them.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class GeneratorSettings:
    """Identifiers shared by every pass issued with one certificate"""

    pass_type_identifier: Optional[str] = None
    team_identifier: Optional[str] = None
    organization_name: Optional[str] = None
    web_service_url: Optional[str] = None


def load_settings(env_file: Optional[Union[str, Path]] = None) -> GeneratorSettings:
    """Load settings from env_file (or a .env found from the working directory) and the environment."""
    if env_file is not None:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)
            logger.debug(f"Loaded environment variables from: {env_path}")
        else:
            logger.warning(f".env file not found at {env_path}, using system environment variables")
    else:
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)
            logger.debug(f"Loaded environment variables from: {dotenv_path}")

    return GeneratorSettings(
        pass_type_identifier=os.getenv("PASS_TYPE_IDENTIFIER"),
        team_identifier=os.getenv("TEAM_IDENTIFIER"),
        organization_name=os.getenv("ORGANIZATION_NAME"),
        web_service_url=os.getenv("WEB_SERVICE_URL"),
    )
