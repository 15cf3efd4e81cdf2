"""Report settings, read from the ``[tool.sales_report]`` table of pyproject.toml."""

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


@dataclass(frozen=True)
class ReportSettings:
    top_products_limit: int = 10
    decimal_places: int = 2
    log_level: str = "INFO"


DEFAULT_SETTINGS = ReportSettings()


def load_settings(path: Optional[Path] = None) -> ReportSettings:
    pyproject = Path(path) if path is not None else PYPROJECT
    if not pyproject.exists():
        return DEFAULT_SETTINGS

    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    table = data.get("tool", {}).get("sales_report", {})

    known = {f.name for f in fields(ReportSettings)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ValueError(f"Unknown sales_report settings: {', '.join(unknown)}")

    settings = replace(DEFAULT_SETTINGS, **table)
    if settings.top_products_limit < 1:
        raise ValueError("top_products_limit must be positive")
    if settings.decimal_places < 0:
        raise ValueError("decimal_places must not be negative")
    return settings
