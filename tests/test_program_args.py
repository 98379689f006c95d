"""
Tests for Maven program argument assembly.

Tests cover property parsing and variable substitution, profile
formatting, preference flag ordering, and settings file resolution.
"""

from pathlib import Path

import pytest

from mvnlaunch.core.config.models import GlobalPreferences
from mvnlaunch.core.launch import (
    ConfigurationError,
    LaunchConfiguration,
    ProgramArgumentBuilder,
    parse_property,
    substitute_variables,
)


@pytest.fixture
def builder() -> ProgramArgumentBuilder:
    return ProgramArgumentBuilder(environ={})


# ==============================================================================
# Helpers
# ==============================================================================


class TestParseProperty:
    """Tests for parse_property."""

    def test_name_and_value(self) -> None:
        assert parse_property("skip=true") == ("skip", "true")

    def test_name_only(self) -> None:
        assert parse_property("skip") == ("skip", None)

    def test_empty_value_means_no_value(self) -> None:
        assert parse_property("skip=") == ("skip", None)

    def test_single_character_name(self) -> None:
        assert parse_property("a=b") == ("a", "b")

    def test_value_may_contain_equals(self) -> None:
        assert parse_property("args=-Dx=1") == ("args", "-Dx=1")

    def test_missing_name_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_property("=value")


class TestSubstituteVariables:
    """Tests for substitute_variables."""

    def test_plain_value_unchanged(self) -> None:
        assert substitute_variables("plain", {}) == "plain"

    def test_env_var_syntax(self) -> None:
        assert substitute_variables("${env_var:HOME}/.m2", {"HOME": "/home/dev"}) == "/home/dev/.m2"

    def test_shorthand_syntax(self) -> None:
        assert substitute_variables("${A}-${B}", {"A": "1", "B": "2"}) == "1-2"

    def test_undefined_variable_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="MISSING"):
            substitute_variables("${env_var:MISSING}", {})

    def test_unknown_variable_type_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="workspace_loc"):
            substitute_variables("${workspace_loc:/x}", {"/x": "y"})

    def test_defaults_to_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("MVNLAUNCH_TEST_VALUE", "from-env")
        assert substitute_variables("${env_var:MVNLAUNCH_TEST_VALUE}") == "from-env"


# ==============================================================================
# ProgramArgumentBuilder
# ==============================================================================


class TestPropertyTokens:
    """Tests for -D and -P tokens."""

    def test_properties_in_configuration_order(self, builder) -> None:
        config = LaunchConfiguration(properties=["b=2", "a", "c="])
        assert builder.property_tokens(config) == ["-Db=2", "-Da", "-Dc"]

    def test_property_value_is_quoted(self, builder) -> None:
        config = LaunchConfiguration(properties=["msg=hello world"])
        assert builder.property_tokens(config) == ['-Dmsg="hello world"']

    def test_substituted_value_is_quoted(self) -> None:
        builder = ProgramArgumentBuilder(environ={"DIR": "/my repo"})
        config = LaunchConfiguration(properties=["repo=${env_var:DIR}/local"])
        assert builder.property_tokens(config) == ['-Drepo="/my repo/local"']

    def test_profiles_whitespace_collapsed(self, builder) -> None:
        config = LaunchConfiguration(profiles="ci  release\tfast")
        assert builder.property_tokens(config) == ["-Pci,release,fast"]

    def test_profiles_surrounding_whitespace_ignored(self, builder) -> None:
        config = LaunchConfiguration(profiles="  ci release ")
        assert builder.property_tokens(config) == ["-Pci,release"]

    @pytest.mark.parametrize("profiles", [None, "", "   "])
    def test_blank_profiles_omitted(self, builder, profiles) -> None:
        assert builder.property_tokens(LaunchConfiguration(profiles=profiles)) == []


class TestPreferenceTokens:
    """Tests for the flag-style options."""

    def test_batch_mode_always_present(self, builder) -> None:
        assert builder.preference_tokens(LaunchConfiguration()) == ["-B"]

    def test_all_flags_in_order(self, builder) -> None:
        config = LaunchConfiguration(
            debug_output=True,
            offline=True,
            update_snapshots=True,
            non_recursive=True,
            skip_tests=True,
            threads=8,
            user_settings="/home/dev/settings.xml",
        )
        assert builder.preference_tokens(config) == [
            "-B",
            "-X",
            "-e",
            "-o",
            "-U",
            "-N",
            "-Dmaven.test.skip=true",
            "-DskipTests",
            "--threads 8",
            "-s /home/dev/settings.xml",
        ]

    def test_single_thread_omitted(self, builder) -> None:
        assert "--threads 1" not in builder.preference_tokens(LaunchConfiguration(threads=1))

    def test_debug_and_offline_fall_back_to_preferences(self) -> None:
        builder = ProgramArgumentBuilder(GlobalPreferences(debug_output=True, offline=True))
        assert builder.preference_tokens(LaunchConfiguration()) == ["-B", "-X", "-e", "-o"]

    def test_launch_overrides_preferences(self) -> None:
        builder = ProgramArgumentBuilder(GlobalPreferences(debug_output=True, offline=True))
        config = LaunchConfiguration(debug_output=False, offline=False)
        assert builder.preference_tokens(config) == ["-B"]


class TestResolveSettingsFile:
    """Settings file selection: explicit first, then an existing global file."""

    def test_explicit_setting_used_verbatim(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "nope.xml")
        builder = ProgramArgumentBuilder(GlobalPreferences(user_settings_file=None))
        config = LaunchConfiguration(user_settings=missing)

        assert builder.resolve_settings_file(config) == missing
        assert builder.preference_tokens(config)[-1] == f"-s {missing}"

    def test_explicit_setting_wins_over_global(self, tmp_path: Path) -> None:
        global_settings = tmp_path / "global.xml"
        global_settings.write_text("<settings/>")
        builder = ProgramArgumentBuilder(GlobalPreferences(user_settings_file=str(global_settings)))

        config = LaunchConfiguration(user_settings="/explicit/settings.xml")
        assert builder.resolve_settings_file(config) == "/explicit/settings.xml"

    def test_existing_global_setting_used(self, tmp_path: Path) -> None:
        global_settings = tmp_path / "global.xml"
        global_settings.write_text("<settings/>")
        builder = ProgramArgumentBuilder(GlobalPreferences(user_settings_file=str(global_settings)))

        assert builder.resolve_settings_file(LaunchConfiguration()) == str(global_settings)

    def test_blank_explicit_setting_falls_back_to_global(self, tmp_path: Path) -> None:
        global_settings = tmp_path / "global.xml"
        global_settings.write_text("<settings/>")
        builder = ProgramArgumentBuilder(GlobalPreferences(user_settings_file=str(global_settings)))

        config = LaunchConfiguration(user_settings="   ")
        assert builder.resolve_settings_file(config) == str(global_settings)

    def test_missing_global_setting_discarded(self, tmp_path: Path) -> None:
        builder = ProgramArgumentBuilder(
            GlobalPreferences(user_settings_file=str(tmp_path / "missing.xml"))
        )
        assert builder.resolve_settings_file(LaunchConfiguration()) is None
        assert builder.preference_tokens(LaunchConfiguration()) == ["-B"]

    def test_settings_path_with_spaces_is_quoted(self) -> None:
        builder = ProgramArgumentBuilder()
        config = LaunchConfiguration(user_settings="/home/dev/my settings.xml")
        assert builder.preference_tokens(config)[-1] == '-s "/home/dev/my settings.xml"'


class TestBuild:
    """Tests for the complete program argument string."""

    def test_end_to_end_order(self, builder) -> None:
        config = LaunchConfiguration(
            goals="clean install",
            properties=["skip=true"],
            profiles="ci  release",
            offline=True,
            threads=4,
        )
        assert builder.build(config) == " -Dskip=true -Pci,release -B -o --threads 4 clean install"

    def test_unset_flags_absent(self, builder) -> None:
        result = builder.build(LaunchConfiguration(goals="verify"))
        for flag in ("-X", "-e", "-o", "-U", "-N", "-DskipTests", "--threads", "-s"):
            assert f" {flag} " not in f"{result} "

    def test_empty_goals(self, builder) -> None:
        assert builder.build(LaunchConfiguration()) == " -B"

    def test_goals_appended_verbatim(self, builder) -> None:
        config = LaunchConfiguration(goals="  dependency:tree  -Dverbose ")
        assert builder.build(config) == " -B   dependency:tree  -Dverbose "

    def test_extra_tokens_appended_last(self, builder) -> None:
        config = LaunchConfiguration(goals="test")
        result = builder.build(config, ["-Dmaven.surefire.debug", "--fail-at-end"])
        assert result == " -B test -Dmaven.surefire.debug --fail-at-end"

    def test_build_is_deterministic(self, builder) -> None:
        config = LaunchConfiguration(
            goals="package", properties=["x=a b", "y"], profiles="p1 p2", skip_tests=True
        )
        assert builder.build(config) == builder.build(config)
