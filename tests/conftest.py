import pytest

from gunderscore import defaults


@pytest.fixture(autouse=True)
def restore_options():
    saved = dict(defaults.options)
    yield
    defaults.apply(saved)
