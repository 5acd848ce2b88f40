"""Configures pytest further: `slow` and `extreme` markers, skippable from the command line."""
import pytest


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower randomized key tests")
    parser.addoption("--run-extreme",
                     action="store_true",
                     default=False,
                     help="run trial division on very large primes")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: randomized or exhaustive test, skipped by --skip-slow")
    config.addinivalue_line("markers", "extreme: very slow test, needs --run-extreme")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)
