"""Package discovery covers every subpackage, including ``lib``."""

from __future__ import annotations

import tomllib
from pathlib import Path

from setuptools import find_namespace_packages

_ROOT = Path(__file__).resolve().parent.parent


def test_package_find_includes_lib() -> None:
    config = tomllib.loads((_ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    find = config["tool"]["setuptools"]["packages"]["find"]

    assert find["namespaces"] is True
    packages = find_namespace_packages(where=str(_ROOT / find["where"][0]), include=find["include"])
    assert {"ptp_stats", "ptp_stats.lib", "ptp_stats.reporter"} <= set(packages)
