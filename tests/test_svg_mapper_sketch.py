import matplotlib.pyplot as plt
import pytest
from sketch_script import DrawPath, Sketch
from svg_mapper_sketch import (
    PEN_DOWN,
    PEN_UP,
    plot_sketch,
    sample_instructions,
    check_density,
    sample_line,
    sample_sketch,
    split_segments,
    write_points,
)
from svg_shapes import DrawCircle, DrawEllipse

SQUARE = [
    ('M', [(0, 0)]),
    ('L', [(10, 0)]),
    ('V', [10]),
    ('H', [0]),
    ('Z', []),
]


def test_sample_line():
    assert sample_line(0j, 10+0j, 3) == [0j, 5+0j, 10+0j]


def test_sample_move_and_line():
    sampled = sample_instructions([('M', [(0, 0)]), ('L', [(10, 0)])], density=3)
    assert sampled == [(0j, PEN_UP), (5+0j, PEN_DOWN), (10+0j, PEN_DOWN)]


def test_sample_close_returns_to_contour_start():
    sampled = sample_instructions(SQUARE, density=2)
    assert sampled == [
        (0j, PEN_UP),
        (10+0j, PEN_DOWN),
        (10+10j, PEN_DOWN),
        (10j, PEN_DOWN),
        (0j, PEN_DOWN),
    ]


def test_sample_curves_end_on_their_end_point():
    sampled = sample_instructions([
        ('M', [(0, 0)]),
        ('Q', [(5, 5), (10, 0)]),
        ('C', [(10, 5), (15, 5), (20, 0)]),
    ], density=5)
    assert len(sampled) == 1 + 4 + 4
    assert sampled[4][0] == pytest.approx(10+0j)
    assert sampled[-1][0] == pytest.approx(20+0j)
    # midpoint of the quadratic
    assert sampled[2][0] == pytest.approx(5+2.5j)


def test_path_without_move_starts_at_origin():
    sampled = sample_instructions([('L', [(4, 0)])], density=2)
    assert sampled == [(0j, PEN_UP), (4+0j, PEN_DOWN)]


def test_sample_unknown_instruction():
    with pytest.raises(ValueError):
        sample_instructions([('A', [])])


def test_sample_sketch_with_circle():
    points = sample_sketch(Sketch([DrawCircle(2, (1, 1))]), density=5)
    assert len(points) == 5
    assert points[0] == pytest.approx((3, 1, PEN_UP))
    assert points[1] == pytest.approx((1, 3, PEN_DOWN))
    assert points[2] == pytest.approx((-1, 1, PEN_DOWN))
    assert points[-1] == pytest.approx((3, 1, PEN_DOWN))


def test_sample_sketch_with_ellipse_and_path():
    sketch = Sketch([DrawEllipse(4, 2, (0, 0)), DrawPath(SQUARE)])
    points = sample_sketch(sketch, density=3)
    assert points[0] == pytest.approx((4, 0, PEN_UP))
    assert points[1] == pytest.approx((-4, 0, PEN_DOWN))
    assert points[3:] == [
        (0, 0, PEN_UP),
        (5, 0, PEN_DOWN), (10, 0, PEN_DOWN),
        (10, 5, PEN_DOWN), (10, 10, PEN_DOWN),
        (5, 10, PEN_DOWN), (0, 10, PEN_DOWN),
        (0, 5, PEN_DOWN), (0, 0, PEN_DOWN),
    ]


def test_split_segments():
    points = [
        (0, 0, PEN_UP), (1, 0, PEN_DOWN), (1, 1, PEN_DOWN),
        (5, 5, PEN_UP),
        (9, 9, PEN_UP), (9, 8, PEN_DOWN),
    ]
    segments, pen_ups = split_segments(points)
    assert segments == [
        [(0, 0), (1, 0), (1, 1)],
        [(9, 9), (9, 8)],
    ]
    assert pen_ups == [(0, 0), (5, 5), (9, 9)]


def test_write_points(tmp_path):
    output_file = tmp_path / "points.txt"
    write_points([(1, 2.346, PEN_UP), (3.5, -4, PEN_DOWN)], str(output_file))
    assert output_file.read_text() == "1.00 2.35 1\n3.50 -4.00 0\n"


def test_plot_sketch():
    sketch = Sketch([DrawCircle(2, (1, 1)), DrawPath(SQUARE)])
    fig = plot_sketch(sketch, density=8, show=False)
    try:
        ax = fig.axes[0]
        assert len(ax.lines) == 2
        assert ax.get_legend() is not None
    finally:
        plt.close(fig)


def test_plot_empty_sketch():
    fig = plot_sketch(Sketch(), show=False)
    try:
        assert len(fig.axes[0].lines) == 0
    finally:
        plt.close(fig)


@pytest.mark.parametrize("density", [-1, 0, 1])
def test_density_below_two_is_rejected(density):
    with pytest.raises(ValueError):
        sample_instructions([('M', [(0, 0)]), ('L', [(10, 0)])], density=density)
    with pytest.raises(ValueError):
        sample_sketch(Sketch([DrawCircle(1, (0, 0))]), density=density)


def test_smallest_density_still_draws_every_segment():
    assert check_density(2) == 2
    sampled = sample_instructions([
        ('M', [(0, 0)]), ('L', [(10, 0)]), ('L', [(10, 10)])], density=2)
    assert sampled == [(0j, PEN_UP), (10+0j, PEN_DOWN), (10+10j, PEN_DOWN)]
