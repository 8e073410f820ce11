"""Tests for quadrant assignment and counting."""

import numpy as np
import pandas as pd
import pytest


def _df(points):
    return pd.DataFrame(points, columns=["x", "y"])


def test_one_point_per_quadrant():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (1, -1), (-1, -1), (-1, 1)])
    out = quadrant_counts(df)

    assert out["quadrant"].tolist() == [1, 2, 3, 4]
    assert out["count"].tolist() == [1, 1, 1, 1]


def test_origin_counts_in_first_quadrant():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(0, 0), (5, 5), (-5, -5)])
    out = quadrant_counts(df).set_index("quadrant")

    assert out.loc[1, "count"] == 2
    assert out.loc[3, "count"] == 1
    assert out["count"].sum() == 3


def test_ties_go_to_non_negative_side():
    from pnmisc.compute.quadrants import which_quadrant

    z = which_quadrant(
        np.array([0.0, 0.0, -1.0, 2.0]),
        np.array([0.0, -1.0, 0.0, 2.0]),
        xintercept=0.0,
        yintercept=0.0,
    )
    assert z.tolist() == [1, 2, 4, 1]


def test_which_quadrant_with_shifted_origin():
    from pnmisc.compute.quadrants import which_quadrant

    z = which_quadrant(np.array([50.0, 49.0]), np.array([9.0, 10.0]), xintercept=50, yintercept=10)
    assert z.tolist() == [2, 4]


def test_counts_sum_to_rows():
    from pnmisc.compute.quadrants import quadrant_counts

    rng = np.random.default_rng(42)
    df = _df(rng.standard_normal((200, 2)))
    out = quadrant_counts(df, quadrants=[1, 2, 3, 4])

    assert len(out) == 4
    assert (out["count"] >= 0).all()
    assert out["count"].dtype.kind == "i"
    assert out["count"].sum() == 200


def test_zero_count_quadrants_are_reported():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (2, 3)])
    out = quadrant_counts(df, quadrants=[1, 2, 3, 4])

    assert out["quadrant"].tolist() == [1, 2, 3, 4]
    assert out["count"].tolist() == [2, 0, 0, 0]
    assert out["count_label"].tolist() == ["n=2", "n=0", "n=0", "n=0"]


def test_pool_along_x_keeps_y_sign():
    from pnmisc.compute.quadrants import quadrant_counts, which_quadrant

    df = _df([(1, 1), (-1, 1), (-1, 2), (1, -1), (-1, -1)])
    z = which_quadrant(df["x"], df["y"], pool_along="x")
    assert z.tolist() == [1, 1, 1, 2, 2]

    out = quadrant_counts(df, pool_along="x")
    assert out["quadrant"].tolist() == [1, 2]
    assert out["count"].tolist() == [3, 2]
    assert out["count"].sum() == quadrant_counts(df, quadrants=[1, 2, 3, 4])["count"].sum()


def test_pool_along_y_keeps_x_sign():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (1, -1), (-1, 1), (-1, -1), (-2, -2)])
    out = quadrant_counts(df, pool_along="y")

    assert out["quadrant"].tolist() == [1, 4]
    assert out["count"].tolist() == [2, 3]


def test_pool_along_filters_explicit_quadrants():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (-1, -1)])
    out = quadrant_counts(df, pool_along="x", quadrants=[2, 3])

    assert out["quadrant"].tolist() == [2]
    assert out["count"].tolist() == [1]


@pytest.mark.parametrize("pool", ["x", "y"])
def test_pooling_away_derived_quadrants_reports_total(pool):
    from pnmisc.compute.quadrants import quadrant_counts

    # all-negative panel: the derived set is [3], which pooling removes
    out = quadrant_counts(_df([(-1, -1), (-2, -3)]), pool_along=pool)
    assert out["quadrant"].tolist() == [0]
    assert out["count"].tolist() == [2]


def test_pooling_away_explicit_quadrants_reports_total():
    from pnmisc.compute.quadrants import quadrant_counts

    out = quadrant_counts(_df([(-1, -1), (2, 3), (1, -5)]), quadrants=[3], pool_along="x")
    assert out["quadrant"].tolist() == [0]
    assert out["count"].tolist() == [3]
    assert out.loc[0, "x"] == 2
    assert out.loc[0, "y"] == 3


def test_whole_panel_total():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (1, -1), (-1, -1), (-1, 1), (0, 0)])
    for pool in ("none", "x", "y"):
        out = quadrant_counts(df, quadrants=0, pool_along=pool)
        assert len(out) == 1
        assert out.loc[0, "quadrant"] == 0
        assert out.loc[0, "count"] == 5


def test_whole_panel_total_from_list():
    from pnmisc.compute.quadrants import quadrant_counts

    out = quadrant_counts(_df([(1, 1), (2, 2)]), quadrants=[0])
    assert out["count"].tolist() == [2]
    assert out.loc[0, "x"] == 2
    assert out.loc[0, "y"] == 2
    assert out.loc[0, "npcx"] == 1.0
    assert out.loc[0, "npcy"] == 1.0


@pytest.mark.parametrize(
    "points, expected",
    [
        ([(1, 1), (2, 2)], [1]),
        ([(-1, -1), (-2, -2)], [3]),
        ([(1, 1), (2, -2)], [1, 2]),
        ([(1, 1), (-2, 2)], [1, 4]),
        ([(1, 1), (-2, -2)], [1, 2, 3, 4]),
    ],
)
def test_default_quadrants_follow_data_range(points, expected):
    from pnmisc.compute.quadrants import quadrant_counts

    out = quadrant_counts(_df(points))
    assert out["quadrant"].tolist() == expected


def test_label_positions():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(2, 3), (4, -1), (-5, -2), (-1, 6)])
    out = quadrant_counts(df).set_index("quadrant")

    assert out.loc[1, ["npcx", "npcy"]].tolist() == [1.0, 1.0]
    assert out.loc[2, ["npcx", "npcy"]].tolist() == [1.0, 0.0]
    assert out.loc[3, ["npcx", "npcy"]].tolist() == [0.0, 0.0]
    assert out.loc[4, ["npcx", "npcy"]].tolist() == [0.0, 1.0]

    assert out.loc[1, ["x", "y"]].tolist() == [4, 6]
    assert out.loc[3, ["x", "y"]].tolist() == [-5, -2]


def test_label_positions_with_pooling_are_centred():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (-1, -1)])
    out = quadrant_counts(df, pool_along="x")
    assert out["npcx"].tolist() == [0.5, 0.5]
    assert out["npcy"].tolist() == [1.0, 0.0]

    out = quadrant_counts(df, pool_along="y")
    assert out["npcx"].tolist() == [1.0, 0.0]
    assert out["npcy"].tolist() == [0.5, 0.5]


def test_explicit_label_positions():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (-1, -1)])
    out = quadrant_counts(df, label_x=[0.9, 0.1], label_y="top").set_index("quadrant")

    assert out.loc[1, "npcx"] == pytest.approx(0.9)
    assert out.loc[3, "npcx"] == pytest.approx(0.1)
    assert out["npcy"].tolist() == [1.0, 1.0, 1.0, 1.0]


def test_input_not_modified():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (-1, -1)])
    before = df.copy()
    quadrant_counts(df)
    pd.testing.assert_frame_equal(df, before)


def test_invalid_pool_along():
    from pnmisc.compute.quadrants import quadrant_counts

    with pytest.raises(ValueError, match="pool_along"):
        quadrant_counts(_df([(1, 1)]), pool_along="xy")


def test_intercept_must_be_scalar():
    from pnmisc.compute.quadrants import quadrant_counts

    with pytest.raises(ValueError, match="single numbers"):
        quadrant_counts(_df([(1, 1)]), xintercept=[0, 1])


def test_intercept_as_zero_dim_array():
    from pnmisc.compute.quadrants import quadrant_counts

    df = _df([(1, 1), (3, 1)])
    out = quadrant_counts(df, quadrants=[1, 4], xintercept=np.array(2.0), yintercept=pd.Series([0.0]))
    assert out["count"].tolist() == [1, 1]


def test_too_many_quadrants():
    from pnmisc.compute.quadrants import quadrant_counts

    with pytest.raises(ValueError, match="At most four"):
        quadrant_counts(_df([(1, 1)]), quadrants=[1, 2, 3, 4, 1])


def test_bad_label_anchor():
    from pnmisc.compute.quadrants import quadrant_counts

    with pytest.raises(TypeError):
        quadrant_counts(_df([(1, 1)]), label_x={"a": 1})
    with pytest.raises(ValueError, match="Unknown position token"):
        quadrant_counts(_df([(1, 1)]), label_y="up")


def test_missing_columns():
    from pnmisc.compute.quadrants import quadrant_counts

    with pytest.raises(ValueError, match="missing"):
        quadrant_counts(pd.DataFrame({"x": [1.0]}))
