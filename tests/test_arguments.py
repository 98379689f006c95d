"""Tests for VM argument accumulation and quoting."""

import pytest

from mvnlaunch.core.launch import (
    FrozenStateError,
    VMArguments,
    property_token,
    quote,
    split_arguments,
)


class TestQuote:
    """Tests for the quote function."""

    def test_plain_value_unchanged(self) -> None:
        assert quote("bar") == "bar"
        assert quote("/opt/maven/conf/settings.xml") == "/opt/maven/conf/settings.xml"

    def test_whitespace_is_quoted(self) -> None:
        assert quote("bar baz") == '"bar baz"'
        assert quote("tab\there") == '"tab\there"'

    def test_shell_characters_are_quoted(self) -> None:
        assert quote("a&b") == '"a&b"'
        assert quote("$HOME") == '"$HOME"'
        assert quote("x;y") == '"x;y"'

    def test_embedded_quotes_are_escaped(self) -> None:
        assert quote('say "hi"') == '"say \\"hi\\""'

    def test_empty_value_is_quoted(self) -> None:
        assert quote("") == '""'

    def test_backslashes_are_not_significant(self) -> None:
        """Windows paths without spaces quote the same on every host."""
        assert quote("C:\\maven\\settings.xml") == "C:\\maven\\settings.xml"
        assert quote("C:\\Program Files\\maven") == '"C:\\Program Files\\maven"'


class TestSplitArguments:
    """Tests for splitting argument strings into argv entries."""

    def test_whitespace_separates_arguments(self) -> None:
        assert split_arguments("  -B  -o\tclean install ") == ["-B", "-o", "clean", "install"]

    def test_double_quotes_group_and_are_removed(self) -> None:
        assert split_arguments('-Dfoo="bar baz" -s "C:\\My Docs\\s.xml"') == [
            "-Dfoo=bar baz",
            "-s",
            "C:\\My Docs\\s.xml",
        ]

    def test_apostrophe_is_literal(self) -> None:
        assert split_arguments("-Duser.name=O'Neil -Dx=it's") == [
            "-Duser.name=O'Neil",
            "-Dx=it's",
        ]

    def test_backslashes_are_kept(self) -> None:
        assert split_arguments(r"-s C:\Users\dev\settings.xml") == [
            "-s",
            r"C:\Users\dev\settings.xml",
        ]

    def test_unterminated_quote_runs_to_end(self) -> None:
        assert split_arguments('-Dx="open value') == ["-Dx=open value"]

    @pytest.mark.parametrize("value", ["bar baz", 'say "hi"', "", "it's", r"C:\a b\c"])
    def test_undoes_quote(self, value: str) -> None:
        assert split_arguments(property_token("p", value)) == [f"-Dp={value}"]


class TestPropertyToken:
    def test_without_value(self) -> None:
        assert property_token("foo") == "-Dfoo"

    def test_with_value(self) -> None:
        assert property_token("foo", "bar") == "-Dfoo=bar"

    def test_with_spaced_value(self) -> None:
        assert property_token("foo", "bar baz") == '-Dfoo="bar baz"'


class TestVMArguments:
    """Tests for the VMArguments accumulator."""

    def test_property_without_value(self) -> None:
        args = VMArguments()
        args.append_property("foo")
        assert args.to_final_string() == "-Dfoo"

    def test_property_with_whitespace_value(self) -> None:
        args = VMArguments()
        args.append_property("foo", "bar baz")
        assert args.to_final_string() == '-Dfoo="bar baz"'

    def test_tokens_joined_in_append_order(self) -> None:
        args = VMArguments()
        args.append("-Xmx512m")
        args.append_property("a", "1")
        args.extend(["-ea", "-Xss2m"])
        assert args.to_final_string() == "-Xmx512m -Da=1 -ea -Xss2m"
        assert args.tokens == ("-Xmx512m", "-Da=1", "-ea", "-Xss2m")

    def test_duplicates_are_preserved(self) -> None:
        args = VMArguments()
        args.append_property("x", "1")
        args.append_property("x", "2")
        assert args.to_final_string() == "-Dx=1 -Dx=2"

    def test_empty_arguments(self) -> None:
        assert VMArguments().to_final_string() == ""

    def test_initial_tokens(self) -> None:
        assert VMArguments(["-ea"]).to_final_string() == "-ea"

    def test_final_string_is_cached(self) -> None:
        args = VMArguments()
        args.append("-ea")
        first = args.to_final_string()
        assert args.to_final_string() is first
        assert args.frozen

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda a: a.append("-ea"),
            lambda a: a.append_property("foo"),
            lambda a: a.append_property("foo", "bar"),
            lambda a: a.extend(["-ea"]),
        ],
    )
    def test_append_after_serialization_fails(self, mutate) -> None:
        args = VMArguments()
        args.append("-Xmx1g")
        args.to_final_string()

        with pytest.raises(FrozenStateError):
            mutate(args)
        assert args.to_final_string() == "-Xmx1g"
