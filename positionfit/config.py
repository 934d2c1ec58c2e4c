import os
import json
import logging

BASE = os.environ.get("POSITIONFIT_DATA_DIR",
                      os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data"))
LOG_LEVEL = os.environ.get("POSITIONFIT_LOG_LEVEL", "INFO").upper()

DEFAULT_FIT_CONF = {"tiers": {"high": 80, "medium": 50}}


def load_fit_conf(base=None):
    """Read fit_conf.json from the data dir; fall back to the defaults."""
    conf_path = os.path.join(base or BASE, "fit_conf.json")
    conf = {"tiers": dict(DEFAULT_FIT_CONF["tiers"])}
    if os.path.exists(conf_path):
        with open(conf_path, "r") as f:
            data = json.load(f)
        conf["tiers"].update(data.get("tiers", {}))
    return conf


FIT_CONF = load_fit_conf()


def configure_logging(level=None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
