"""
Pytest configuration and shared fixtures.

Provides runtime descriptors, a configured registry, Maven project trees
with .mvn/ markers, and an isolated configuration environment.
"""

from pathlib import Path

import pytest

from mvnlaunch.core.launch import (
    ConfiguredRuntimeRegistry,
    LaunchAssembler,
    RuntimeDescriptor,
)

# ==============================================================================
# Runtime Fixtures
# ==============================================================================


@pytest.fixture
def maven3_runtime() -> RuntimeDescriptor:
    """A Maven 3.5 runtime with a two-entry boot classpath."""
    return RuntimeDescriptor(
        id="maven-3.5",
        version="3.5.0",
        boot_classpath=[
            "/opt/maven/boot/plexus-classworlds-2.5.2.jar",
            "/opt/maven/boot/extra.jar",
        ],
    )


@pytest.fixture
def maven2_runtime() -> RuntimeDescriptor:
    """A Maven 2.2 runtime."""
    return RuntimeDescriptor(
        id="maven-2.2",
        version="2.2.1",
        boot_classpath=["/opt/maven2/boot/classworlds-1.1.jar"],
    )


@pytest.fixture
def registry(maven3_runtime, maven2_runtime) -> ConfiguredRuntimeRegistry:
    """Registry holding both runtimes, defaulting to Maven 3.5."""
    return ConfiguredRuntimeRegistry([maven3_runtime, maven2_runtime], default="maven-3.5")


@pytest.fixture
def assembler(registry) -> LaunchAssembler:
    """Assembler without extensions and with default preferences."""
    return LaunchAssembler(registry, environ={})


# ==============================================================================
# Project Fixtures
# ==============================================================================


@pytest.fixture
def multi_module_project(tmp_path) -> Path:
    """
    Provide a multi-module project tree.

    Creates:
    - root/.mvn/jvm.config containing -Xmx512m
    - root/module/sub/ (module directory without a marker)
    """
    root = tmp_path / "root"
    mvn_dir = root / ".mvn"
    mvn_dir.mkdir(parents=True)
    (mvn_dir / "jvm.config").write_text("-Xmx512m\n")
    (root / "module" / "sub").mkdir(parents=True)
    return root


# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture
def isolated_config(tmp_path, monkeypatch) -> Path:
    """
    Point XDG_CONFIG_HOME at an empty directory and clear MVNLAUNCH_* vars.

    Returns the mvnlaunch user config directory (not created).
    """
    xdg = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    for name in (
        "MVNLAUNCH_OFFLINE",
        "MVNLAUNCH_DEBUG_OUTPUT",
        "MVNLAUNCH_USER_SETTINGS",
        "MVNLAUNCH_RUNTIME",
    ):
        monkeypatch.delenv(name, raising=False)
    return xdg / "mvnlaunch"
