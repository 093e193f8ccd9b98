"""Pytest configuration for all tests."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence

import pytest

from localstack_env.core.utils import logger
from localstack_env.settings import LocalstackSettings, get_settings
from localstack_env.types import ContainerStatus, PortBindingTable

FAKE_CONTAINER_ID = "f4k3c0nt41n3r"


class FakeBackend:
    """In-memory ContainerBackend that records every call.

    Args:
        fail_on: Operation name -> exception to raise when it is called.
    """

    def __init__(self, fail_on: dict[str, Exception] | None = None) -> None:
        self.calls: list[tuple[str, dict]] = []
        self.fail_on = fail_on or {}
        self.status = ContainerStatus.CREATED

    @property
    def ops(self) -> list[str]:
        return [op for op, _ in self.calls]

    def _record(self, op: str, **kwargs) -> None:
        self.calls.append((op, kwargs))
        if op in self.fail_on:
            raise self.fail_on[op]

    def image_pull(self, *, image: str) -> None:
        self._record("image_pull", image=image)

    def container_create(self, *, image: str, env: Sequence[str], port_bindings: PortBindingTable) -> str:
        self._record("container_create", image=image, env=env, port_bindings=port_bindings)
        return FAKE_CONTAINER_ID

    def container_start(self, *, container_id: str) -> None:
        self._record("container_start", container_id=container_id)
        self.status = ContainerStatus.RUNNING

    def container_stop(self, *, container_id: str) -> None:
        self._record("container_stop", container_id=container_id)
        self.status = ContainerStatus.EXITED

    def container_status(self, *, container_id: str) -> ContainerStatus:
        self._record("container_status", container_id=container_id)
        return self.status


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "docker: marks tests that require Docker")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logger():
    """Undo CLI logging setup so caplog sees package logs."""
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def settings() -> LocalstackSettings:
    """Settings with no settle delay so lifecycle tests don't sleep."""
    return LocalstackSettings(settle_delay_sec=0)


@pytest.fixture(scope="session")
def docker():
    """Check that docker is available and return the CLI name."""
    if shutil.which("docker") is None:
        pytest.skip("'docker' is missing or not available in PATH.")
    return "docker"
