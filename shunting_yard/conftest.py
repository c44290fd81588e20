import logging

import pytest

from shunting_yard.config import ENV_PREFIX, Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CALC_* variables from the developer's shell (or a loaded .env) out of the tests."""
    for name in Settings.model_fields:
        # setenv first so teardown removes whatever load_dotenv() sets
        monkeypatch.setenv(ENV_PREFIX + name.upper(), "")
        monkeypatch.delenv(ENV_PREFIX + name.upper())


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the stderr handler main() installs so it does not outlive the capsys stream."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
