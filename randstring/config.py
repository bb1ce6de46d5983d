# randstring/config.py
"""
Default generation settings for the randstring CLI.
Settings saved as JSON in %APPDATA%/randstring/config.json (Windows) or ~/.randstring/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .validator import AlphaCase, GenerationConfig

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "min_length": None,  # min_length and max_length together switch to ranged mode
    "max_length": None,
    "letters": True,
    "letter_case": "MIXED",
    "digits": True,
    "symbols": True,
    "force_each": True,
    "custom_symbols": None,
    "copies": 1,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "randstring")
    return os.path.join(os.path.expanduser("~"), ".randstring")

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    if isinstance(data, dict):
        out.update(data)
    else:
        logger.warning("ignoring settings file %s: expected a JSON object", p)
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def letter_case_from_name(name: str) -> AlphaCase:
    """Accepts enum names ("MIXED") or values ("mixed")."""
    if not isinstance(name, str):
        raise ValueError(f"unknown letter case {name!r}; expected one of upper, lower, mixed")
    for case in AlphaCase:
        if name.upper() == case.name or name.lower() == case.value:
            return case
    raise ValueError(f"unknown letter case {name!r}; expected one of upper, lower, mixed")

def to_generation_config(settings: Dict[str, Any]) -> GenerationConfig:
    merged = DEFAULTS.copy()
    merged.update(settings)
    ranged = merged["min_length"] is not None or merged["max_length"] is not None
    custom_symbols = merged["custom_symbols"]
    return GenerationConfig(
        fixed_length=None if ranged else merged["length"],
        min_length=merged["min_length"],
        max_length=merged["max_length"],
        include_letters=merged["letters"],
        letter_case=letter_case_from_name(merged["letter_case"]),
        include_digits=merged["digits"],
        include_symbols=merged["symbols"],
        require_one_of_each=merged["force_each"],
        custom_symbols=list(custom_symbols) if custom_symbols else None,
    )
