from __future__ import annotations

from typing import Any

import pytest

import sexpr


def pytest_benchmark_update_machine_info(config: pytest.Config, machine_info: dict[str, Any]) -> None:
    machine_info["sexpr_max_depth"] = sexpr.DEFAULT_MAX_DEPTH
