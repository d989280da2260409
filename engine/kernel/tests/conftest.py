"""
Engine kernel test configuration.

Kernel tests are synchronous and need no IO; views used here are small
producers defined next to the tests that use them.
"""

import pytest

from engine.kernel.host import MountPoint


@pytest.fixture
def mount():
    """A fresh, empty mount point."""
    return MountPoint("test", "div", {"class": "test"})
