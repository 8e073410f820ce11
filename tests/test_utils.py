"""Tests for npc resolution and padding helpers."""

import numpy as np
import pandas as pd
import pytest


def test_tokens_resolve_to_edges():
    from pnmisc._utils import compute_npcx, compute_npcy

    assert compute_npcx(["left", "right"]).tolist() == [0.0, 1.0]
    assert compute_npcy(["bottom", "top"]).tolist() == [0.0, 1.0]
    for token in ("centre", "center", "middle"):
        assert compute_npcx(token).tolist() == [0.5]
        assert compute_npcy(token).tolist() == [0.5]


def test_numeric_values_pass_through():
    from pnmisc._utils import compute_npcx

    assert compute_npcx(0.25).tolist() == [0.25]
    assert compute_npcx([0.1, "right"]).tolist() == [0.1, 1.0]


def test_margin_and_group_steps_move_inwards():
    from pnmisc._utils import compute_npcx, compute_npcy

    assert compute_npcx("right", margin_npc=0.05).tolist() == pytest.approx([0.95])
    assert compute_npcx("left", margin_npc=0.05).tolist() == pytest.approx([0.05])
    assert compute_npcy("top", group=3, v_step=0.1).tolist() == pytest.approx([0.8])
    assert compute_npcy("bottom", group=2, v_step=0.1).tolist() == pytest.approx([0.1])
    assert compute_npcy("centre", group=2, v_step=0.1).tolist() == [0.5]


def test_invalid_anchors():
    from pnmisc._utils import compute_npcx, compute_npcy

    with pytest.raises(ValueError, match="Unknown position token"):
        compute_npcx("top")
    with pytest.raises(ValueError, match="Unknown position token"):
        compute_npcy("left")
    with pytest.raises(ValueError, match=r"\[0, 1\]"):
        compute_npcx(1.5)
    with pytest.raises(TypeError):
        compute_npcx(True)
    with pytest.raises(TypeError):
        compute_npcx(None)


def test_fill_to_length():
    from pnmisc._utils import fill_to_length

    out = fill_to_length([1.0, 2.0], 4)
    assert out[:2].tolist() == [1.0, 2.0]
    assert np.isnan(out[2:]).all()
    assert fill_to_length([1.0, 2.0], 2).tolist() == [1.0, 2.0]
    with pytest.raises(ValueError):
        fill_to_length([1.0, 2.0, 3.0], 2)


def test_is_scalar_number():
    from pnmisc._utils import is_scalar_number

    assert is_scalar_number(0)
    assert is_scalar_number(np.float64(1.5))
    assert is_scalar_number([2.0])
    assert not is_scalar_number([0, 1])
    assert not is_scalar_number("0")
    assert not is_scalar_number(True)


def test_is_scalar_number_array_likes():
    from pnmisc._utils import is_scalar_number

    assert is_scalar_number(np.array(0.0))
    assert is_scalar_number(np.array([3]))
    assert is_scalar_number(pd.Series([1.5]))
    assert is_scalar_number((2,))
    assert not is_scalar_number(pd.Series([1.0, 2.0]))
    assert not is_scalar_number(np.array(True))
    assert not is_scalar_number(["a"])
