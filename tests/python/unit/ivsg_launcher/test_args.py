# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from ivsg_launcher import args as m, defaults


def test___all__() -> None:
    assert m.__all__ == (
        "ACCUMULATING_OPTIONS",
        "REJECT_POLICIES",
        "drop_overridden",
        "parser",
    )


def test_REJECT_POLICIES() -> None:
    assert m.REJECT_POLICIES == ("reap", "abandon")


def test_ACCUMULATING_OPTIONS() -> None:
    assert m.ACCUMULATING_OPTIONS == ("--backend",)


class TestParserDefaults:
    def test_prog(self) -> None:
        assert m.parser.prog == "ivsg-launch"

    def test_grace(self) -> None:
        assert m.parser.get_default("grace") == defaults.GRACE_PERIOD

    def test_backends(self) -> None:
        assert m.parser.get_default("backends") is None

    def test_no_abbreviations(self) -> None:
        with pytest.raises(SystemExit):
            m.parser.parse_args(["--back", "opengl-software"])


class Test_grace:
    @pytest.mark.parametrize("value", ("0", "0.5", "2"))
    def test_good(self, value: str) -> None:
        assert m.parser.parse_args(["--grace", value]).grace == float(value)

    @pytest.mark.parametrize(
        "value", ("-0.1", "nan", "NaN", "inf", "-inf", "Infinity", "soon")
    )
    def test_bad(self, value: str) -> None:
        with pytest.raises(SystemExit):
            m.parser.parse_args(["--grace", value])


class Test_drop_overridden:
    def test_nothing_on_command_line(self) -> None:
        env_args = ["--backend", "vulkan-lavapipe", "--grace", "3"]
        assert m.drop_overridden(env_args, ["--grace", "1"]) == env_args

    def test_separate_value(self) -> None:
        assert m.drop_overridden(
            ["--backend", "vulkan-lavapipe", "--grace", "3"],
            ["--backend", "opengl-software"],
        ) == ["--grace", "3"]

    def test_inline_value(self) -> None:
        assert m.drop_overridden(
            ["--backend=vulkan-lavapipe", "-v"],
            ["--backend=opengl-software"],
        ) == ["-v"]

    def test_repeated(self) -> None:
        assert (
            m.drop_overridden(
                ["--backend", "a", "--backend=b", "--backend", "c"],
                ["--backend", "d"],
            )
            == []
        )

    def test_forwarded_args_ignored(self) -> None:
        env_args = ["--backend", "vulkan-lavapipe"]
        cli_args = ["--", "--backend", "opengl-software"]
        assert m.drop_overridden(env_args, cli_args) == env_args

    def test_env_forwarded_args_kept(self) -> None:
        assert m.drop_overridden(
            ["--", "--backend", "x"], ["--backend", "opengl-software"]
        ) == ["--", "--backend", "x"]

    def test_inputs_unchanged(self) -> None:
        env_args = ["--backend", "vulkan-lavapipe"]
        cli_args = ["--backend", "opengl-software"]
        m.drop_overridden(env_args, cli_args)
        assert env_args == ["--backend", "vulkan-lavapipe"]
        assert cli_args == ["--backend", "opengl-software"]
