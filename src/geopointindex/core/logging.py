"""
Logging configuration.

The library only emits records through module-level loggers under the
`geopointindex` namespace. Applications that want the packaged setup call
`configure_logging()`: it applies `src/geopointindex/config/logging.yaml` and sets
the logger named by `settings.app.name` (and the handlers) to the settings level,
e.g. `GEOPOINTINDEX_LOG_LEVEL=DEBUG`. The root logger keeps its YAML level, so
other libraries stay quiet.
"""

from __future__ import annotations

import copy
import logging.config

from geopointindex.config.settings import get_logging_config, get_settings


def configure_logging() -> None:
    settings = get_settings()
    # The loaded config is cached; never mutate the shared copy.
    config = copy.deepcopy(get_logging_config())

    level = settings.app.log_level
    config.setdefault("loggers", {}).setdefault(settings.app.name, {})["level"] = level
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict):
            handler["level"] = level

    logging.config.dictConfig(config)
