"""The shared fixture modules export only names they define."""

import pytest

from tests.fixtures import core, http


@pytest.mark.parametrize("module", [core, http], ids=lambda m: m.__name__)
def test_all_names_resolve(module):
    missing = [name for name in module.__all__ if not hasattr(module, name)]

    assert missing == []
