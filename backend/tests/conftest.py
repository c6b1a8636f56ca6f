import textwrap

import pytest


VALID_CONFIG = textwrap.dedent(
    """\
    metadata:
      name: awesome
      env: prod
    settings:
      replicas: 2
      timeout: 60
    features:
      - name: featureA
        enabled: true
    """
)

SCENARIO_A = textwrap.dedent(
    """\
    metadata:
      env: unknown
    settings:
      replicas: 0
      timeout: -5
    features:
      - enabled: maybe
    """
)


@pytest.fixture
def valid_config() -> str:
    return VALID_CONFIG


@pytest.fixture
def scenario_a() -> str:
    return SCENARIO_A


@pytest.fixture
def write_config(tmp_path):
    """Write config text to a temp file and return its path."""

    def _write(content: str, name: str = "config.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
