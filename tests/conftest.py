"""Pytest configuration for the ordergraph test suite.

Hypothesis profiles (single source of truth for max_examples):
- dev: local development, 300 examples
- ci: CI runs, 50 derandomized examples
- verbose: debugging, 100 examples with progress output

Selection: HYPOTHESIS_PROFILE env var wins, then CI=true selects "ci",
otherwise "dev".

Tests marked @pytest.mark.fuzz build very large graphs and are skipped
unless requested with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile(
    "dev",
    max_examples=300,
    phases=_PHASES,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: Large-graph property tests (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): fuzz tests are skipped
    - Explicit fuzz run (pytest -m fuzz): fuzz tests run
    - Naming the deep-graph module on the command line runs it as requested
    """
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    for arg in config.invocation_params.args:
        if "test_analysis_deep_graphs" in str(arg):
            return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
