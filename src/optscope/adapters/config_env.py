"""Env configuration adapter producing option scopes."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from ..config import config as env_config
from ..core.config_model import AppConfig
from ..core.parser import parse_scope
from ..core.validation import check_tree_read, find_unread
from ..errors import OptionsError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..core.scope import ConfigScope

logger = logging.getLogger(__name__)


def load_app_config() -> AppConfig:
    return AppConfig(
        debug=env_config.DEBUG,
        options_var=env_config.OPTIONS_VAR,
    )


def load_scope_from_env(
    var: str | None = None, environ: Mapping[str, str] | None = None
) -> ConfigScope:
    """Parse the scope text held in an environment variable into a root scope.

    Args:
        var: Variable to read. Defaults to the configured OPTIONS_VAR.
        environ: Mapping to read from instead of ``os.environ``.

    Returns:
        A new root ConfigScope; empty when the variable is unset or blank.
    """
    var = var or env_config.OPTIONS_VAR
    environ = os.environ if environ is None else environ
    text = environ.get(var, "")

    try:
        scope = parse_scope(text)
    except OptionsError as e:
        logger.error("Invalid options in %s: %s", var, e)
        raise

    logger.info("Loaded options from %s: %r", var, scope)
    return scope


def ensure_all_read(scope: ConfigScope, var: str | None = None) -> None:
    """Fail if any option loaded from the environment was never read.

    Call once every consumer has pulled its settings. Each unread option is
    logged as a warning before the first one is raised.

    Raises:
        UnrecognizedOptionError: For the first unread option in the tree
    """
    var = var or env_config.OPTIONS_VAR
    for path in find_unread(scope):
        logger.warning("Unrecognized option in %s: %s", var, path)
    check_tree_read(scope)
