"""Tests for shared types: app identities, config model, argument values."""
from __future__ import annotations

from pathlib import Path
from typing import get_args

import pytest
from pydantic import ValidationError

from adobe_scripts.script_modules.types import (
    BUILTIN_SCRIPTS_PATH,
    SCRIPT_EXTENSIONS,
    Absent,
    AdobeAppName,
    AutomationConfig,
    ListValue,
    Scalar,
    Text,
    argument_value,
    script_extension,
)


class TestScriptExtensions:
    """Tests for the app -> script file type table."""

    def test_table_covers_every_app(self) -> None:
        """Every AdobeAppName has exactly one extension entry."""
        assert set(SCRIPT_EXTENSIONS) == set(get_args(AdobeAppName))

    def test_animate_is_jsfl(self) -> None:
        """Animate loads JSFL scripts."""
        assert script_extension("animate") == "jsfl"

    @pytest.mark.parametrize("app", ["photoshop", "illustrator", "indesign"])
    def test_extendscript_apps_are_jsx(self, app: AdobeAppName) -> None:
        """ExtendScript hosts load JSX scripts."""
        assert script_extension(app) == "jsx"

    def test_table_is_read_only(self) -> None:
        """The table cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            SCRIPT_EXTENSIONS["premiere"] = "jsx"  # type: ignore[index]


class TestAutomationConfig:
    """Tests for the AutomationConfig model."""

    def test_defaults(self) -> None:
        """Only app is required."""
        config = AutomationConfig(app="photoshop")
        assert config.host == "localhost"
        assert config.port == 5000
        assert config.js_path == Path("scripts")
        assert config.builtin_scripts_path == BUILTIN_SCRIPTS_PATH

    def test_builtin_scripts_ship_with_package(self) -> None:
        """Default built-in location holds a folder per app."""
        for app in get_args(AdobeAppName):
            assert (BUILTIN_SCRIPTS_PATH / app / "open.js").is_file()

    def test_unknown_app_rejected(self) -> None:
        """Apps outside the closed set fail validation."""
        with pytest.raises(ValidationError):
            AutomationConfig(app="premiere")  # type: ignore[arg-type]

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_out_of_range_rejected(self, port: int) -> None:
        """Ports must be valid TCP ports."""
        with pytest.raises(ValidationError):
            AutomationConfig(app="photoshop", port=port)

    @pytest.mark.parametrize(
        "host", ["localhost", "127.0.0.1", "build-box.example.com"],
    )
    def test_hostnames_accepted(self, host: str) -> None:
        """Plain host names and IPv4 addresses are valid hosts."""
        assert AutomationConfig(app="animate", host=host).host == host

    @pytest.mark.parametrize(
        "host", ["evil'host", 'a"b', "two words", "h;rm -rf", "", "-n"],
    )
    def test_shell_unsafe_hosts_rejected(self, host: str) -> None:
        """Hosts that would break the broadcast command lines fail."""
        with pytest.raises(ValidationError):
            AutomationConfig(app="animate", host=host)

    def test_is_frozen(self) -> None:
        """Config is immutable once built."""
        config = AutomationConfig(app="photoshop")
        with pytest.raises(ValidationError):
            config.port = 1  # type: ignore[misc]

    def test_string_paths_coerced(self) -> None:
        """Path fields accept strings from JSON config files."""
        config = AutomationConfig.model_validate(
            {"app": "indesign", "adobe_scripts_path": "/tmp/adobe"},
        )
        assert config.adobe_scripts_path == Path("/tmp/adobe")


class TestArgumentValue:
    """Tests for tagging raw values at the call boundary."""

    def test_none_is_absent(self) -> None:
        """None becomes Absent."""
        assert argument_value(None) == Absent()

    def test_str_is_text(self) -> None:
        """Strings become Text."""
        assert argument_value("abc") == Text("abc")

    def test_empty_str_is_text_not_absent(self) -> None:
        """Empty strings are values, not absent."""
        assert argument_value("") == Text("")

    @pytest.mark.parametrize("raw", [[1, 2, 3], (1, 2, 3)])
    def test_sequences_are_lists(self, raw: object) -> None:
        """Lists and tuples become ListValue."""
        assert argument_value(raw) == ListValue((1, 2, 3))

    @pytest.mark.parametrize("raw", [0, 800, 1.5, True, False])
    def test_numbers_and_bools_are_scalars(self, raw: object) -> None:
        """Falsy scalars are still scalars."""
        assert argument_value(raw) == Scalar(raw)

    def test_mapping_is_scalar(self) -> None:
        """Mappings take the literal path."""
        assert argument_value({"a": 1}) == Scalar({"a": 1})

    def test_tagged_value_passes_through(self) -> None:
        """Already tagged values are returned unchanged."""
        value = Text("x")
        assert argument_value(value) is value
