"""Environment configuration for optscope"""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Minimal configuration"""

    # Environment variable holding the scope text for the root scope
    OPTIONS_VAR = os.getenv("OPTSCOPE_OPTIONS_VAR", "OPTSCOPE_OPTIONS")

    DEBUG = os.getenv("OPTSCOPE_DEBUG", "false").lower() == "true"


config = Config()
