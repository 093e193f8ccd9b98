"""Integration test driving a real LocalStack container.

Requires a Docker daemon and network access to pull the image.

Usage:
    pytest tests/integration/test_docker_lifecycle.py -m docker -v
"""

import subprocess

import pytest

from localstack_env import LocalstackEnvironment, Service, ServiceSelection
from localstack_env.environment import DockerBackend
from localstack_env.settings import LocalstackSettings
from localstack_env.types import ContainerStatus, EnvironmentState

pytestmark = pytest.mark.docker


@pytest.fixture
def environment(docker):
    env = LocalstackEnvironment.create(
        [ServiceSelection(service=Service.S3)],
        backend=DockerBackend(docker_cmd=docker),
        settings=LocalstackSettings(),
    )
    yield env
    subprocess.run([docker, "rm", "-f", env.container_id], capture_output=True)


def test_lifecycle(environment):
    assert environment.status() == ContainerStatus.CREATED

    environment.start()
    assert environment.state == EnvironmentState.RUNNING
    assert environment.status() == ContainerStatus.RUNNING

    environment.stop()
    assert environment.state == EnvironmentState.STOPPED
    assert environment.status() == ContainerStatus.EXITED
