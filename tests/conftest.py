"""Test configuration and fixtures for the User API."""

from tests.fixtures import *  # noqa: F401,F403
