from __future__ import annotations

import pytest

from sweep.motion import ENV_VAR, prefers_reduced_motion, should_animate


@pytest.mark.parametrize("value", ["1", "true", "YES", " on ", "reduce"])
def test_env_var_requests_reduced_motion(value):
    assert prefers_reduced_motion({"reduced_motion": False}, {ENV_VAR: value})


@pytest.mark.parametrize("value", ["0", "false", "no-preference"])
def test_env_var_allows_motion_over_config(value):
    assert not prefers_reduced_motion({"reduced_motion": True}, {ENV_VAR: value})


def test_config_used_when_env_absent_or_blank():
    assert prefers_reduced_motion({"reduced_motion": True}, {})
    assert prefers_reduced_motion({"reduced_motion": True}, {ENV_VAR: "  "})
    assert not prefers_reduced_motion({}, {})


def test_should_animate_needs_motion_and_clock():
    clock = object()
    assert should_animate(False, clock)
    assert not should_animate(True, clock)
    assert not should_animate(False, None)
