"""Test basic package functionality."""

import gitlab_client_core


def test_version():
    """Test that package version is defined."""
    assert hasattr(gitlab_client_core, "__version__")
    assert gitlab_client_core.__version__ == "0.1.0"


def test_public_names():
    for name in gitlab_client_core.__all__:
        assert getattr(gitlab_client_core, name) is not None
