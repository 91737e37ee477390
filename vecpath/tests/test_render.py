import argparse

import pytest

from vecpath import render


def test_parse_args_collects_segments_and_boxes():
    args = render._parse_args(
        ["--segment", "0,0,10,0", "--segment", "1,1,2,2", "--box", "5,5,30,4,2", "--width", "3"]
    )

    assert args.segment == [(0.0, 0.0, 10.0, 0.0), (1.0, 1.0, 2.0, 2.0)]
    assert args.box == [(5.0, 5.0, 30.0, 4.0, 2.0)]
    assert args.width == 3.0


def test_coordinate_parser_rejects_wrong_arity():
    parse = render._float_tuple(4)

    with pytest.raises(argparse.ArgumentTypeError):
        parse("1,2,3")
    with pytest.raises(argparse.ArgumentTypeError):
        parse("1,2,x,4")


def test_build_paths_skips_zero_length_segments():
    paths = render.build_paths(
        segments=[(0.0, 0.0, 0.0, 0.0), (0.0, 0.0, 10.0, 0.0)],
        boxes=[(0.0, 0.0, 45.0, 4.0, 2.0)],
        width=2.0,
    )

    assert len(paths) == 2
    assert all(len(path) == 5 for path in paths)


def test_main_writes_image(tmp_path, capsys):
    output = tmp_path / "out" / "boxes.png"

    render.main(["--segment", "0,0,40,30", "--box", "10,10,15,20,8", "-o", str(output), "--dpi", "50"])

    assert output.exists()
    assert output.stat().st_size > 0
    assert "Wrote 2 boxes" in capsys.readouterr().out
