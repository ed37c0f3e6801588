import os
from typing import Optional


class EnvManager:
    """Read configuration values from the process environment."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> str:
        value = os.getenv(name)
        if value is None or value == "":
            if default is None:
                raise KeyError(f"Environment variable '{name}' is not set")
            return default
        return value
