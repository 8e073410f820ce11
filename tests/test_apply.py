"""Tests for the apply-and-pad routines."""

import numpy as np
import pandas as pd
import pytest


def _df():
    return pd.DataFrame(
        {
            "x": [1.0, 2.0, 3.0, 4.0, 1.0, 2.0, 3.0, 4.0],
            "y": [1.0, 2.0, 3.0, 4.0, 10.0, 20.0, 30.0, 40.0],
            "group": [1, 1, 1, 1, 2, 2, 2, 2],
        }
    )


def test_diff_is_padded_with_nan():
    from pnmisc.compute.apply import apply_fun

    df = pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0], "y": [1.0, 2.0, 4.0, 7.0]})
    out = apply_fun(df, fun_y=np.diff)

    assert len(out) == 4
    assert out["y"].iloc[:3].tolist() == [1.0, 2.0, 3.0]
    assert np.isnan(out["y"].iloc[3])
    assert out["x"].tolist() == [1.0, 2.0, 3.0, 4.0]


def test_registered_name_is_resolved():
    from pnmisc.compute.apply import apply_fun

    df = pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0], "y": [1.0, 2.0, 3.0, 4.0]})
    out = apply_fun(df, fun_y="diff")

    assert out["y"].iloc[:3].tolist() == [1.0, 1.0, 1.0]
    assert np.isnan(out["y"].iloc[3])


def test_both_axes_transformed_independently():
    from pnmisc.compute.apply import apply_fun

    df = pd.DataFrame({"x": [1.0, 2.0, 3.0], "y": [3.0, 1.0, 2.0]})
    out = apply_fun(df, fun_x="cumsum", fun_y="cummax")

    assert out["x"].tolist() == [1.0, 3.0, 6.0]
    assert out["y"].tolist() == [3.0, 3.0, 3.0]


def test_extra_arguments_are_passed():
    from pnmisc.compute.apply import apply_fun

    df = pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0], "y": [1.0, 2.0, 4.0, 8.0]})
    out = apply_fun(df, fun_y="diff", fun_y_args={"lag": 2})

    assert out["y"].iloc[:2].tolist() == [3.0, 6.0]
    assert out["y"].iloc[2:].isna().all()


def test_neither_function_is_rejected():
    from pnmisc.compute.apply import apply_by_group, apply_fun

    df = _df()
    with pytest.raises(ValueError, match="At least one"):
        apply_fun(df)
    with pytest.raises(ValueError, match="At least one"):
        apply_by_group(df)


def test_longer_result_is_rejected():
    from pnmisc.compute.apply import apply_fun

    df = pd.DataFrame({"x": [1.0, 2.0], "y": [1.0, 2.0]})
    with pytest.raises(ValueError, match="longer than the input"):
        apply_fun(df, fun_y=lambda v: np.concatenate([v, v]))


def test_unknown_name_raises():
    from pnmisc.compute.apply import apply_fun

    df = pd.DataFrame({"x": [1.0], "y": [1.0]})
    with pytest.raises(KeyError, match="Unknown apply function"):
        apply_fun(df, fun_y="no_such_function_xyz")


def test_input_not_modified():
    from pnmisc.compute.apply import apply_fun

    df = _df()
    before = df.copy()
    apply_fun(df, fun_y="cumsum")
    pd.testing.assert_frame_equal(df, before)


def test_per_group_versus_per_panel():
    from pnmisc.compute.apply import apply_by_group, apply_by_panel

    df = _df()
    by_group = apply_by_group(df, fun_y="cumsum")
    by_panel = apply_by_panel(df, fun_y="cumsum")

    assert by_group["y"].tolist() == [1.0, 3.0, 6.0, 10.0, 10.0, 30.0, 60.0, 100.0]
    assert by_panel["y"].tolist() == [1.0, 3.0, 6.0, 10.0, 20.0, 40.0, 70.0, 110.0]
    assert by_group["group"].tolist() == df["group"].tolist()


def test_per_group_padding_and_order():
    from pnmisc.compute.apply import apply_by_group

    df = pd.DataFrame(
        {
            "x": [1.0, 1.0, 2.0, 2.0, 3.0, 3.0],
            "y": [1.0, 5.0, 2.0, 7.0, 4.0, 10.0],
            "group": [1, 2, 1, 2, 1, 2],
        }
    )
    out = apply_by_group(df, fun_y="diff")

    assert out.index.tolist() == df.index.tolist()
    assert out["group"].tolist() == [1, 2, 1, 2, 1, 2]
    np.testing.assert_array_equal(out["y"].to_numpy(), [1.0, 2.0, 2.0, 3.0, np.nan, np.nan])


def test_function_called_once_per_group():
    from pnmisc.compute.apply import apply_by_group

    calls = []

    def record(values):
        calls.append(len(values))
        return values

    apply_by_group(_df(), fun_x=record)
    assert calls == [4, 4]
