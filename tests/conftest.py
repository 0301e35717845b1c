"""
Pytest configuration and shared fixtures for finkbase tests.
"""

import pytest
from finkbase.core.base import ParameterObject
from finkbase.config.schema import ParameterConfig


@pytest.fixture
def empty_params():
    """Provide empty ParameterObject."""
    return ParameterObject()


@pytest.fixture
def package_params():
    """Provide ParameterObject seeded like a small package description."""
    return ParameterObject.create_from_mapping({
        "Package": "hello",
        "Version": "2.10",
        "Revision": "1",
        "BuildDependsOnly": "True",
        "NoSetMAKEFLAGS": " yes ",
        "UseMaxBuildJobs": "false",
        "Source": "mirror:gnu:hello/%n-%v.tar.gz",
        "Source2": "mirror:sourceforge:hello-extras.tar.gz",
        "Source2-MD5": "0123456789abcdef",
        "_filename": "/sw/fink/dists/stable/main/finkinfo/hello.info",
    })


@pytest.fixture
def default_config():
    """Provide default ParameterConfig."""
    return ParameterConfig()
