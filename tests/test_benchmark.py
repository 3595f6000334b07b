import os

import benchmark
from utils import ensure_output_path, format_move, get_plot_path


def test_benchmark_runs_every_match(tmp_path, capsys):
    stats = benchmark.main([
        "--games", "2", "--seed", "3",
        "--easy-iterations", "20", "--medium-iterations", "50",
        "--output-dir", str(tmp_path), "--log-level", "WARNING",
    ])

    assert len(stats) == 8
    assert all(s.games == 2 for s in stats)
    hard_vs_minimax = next(s for s in stats if s.name == "Hard vs Minimax")
    assert hard_vs_minimax.draws == 2
    assert os.path.exists(tmp_path / "benchmark.png")
    assert "Benchmark complete" in capsys.readouterr().out


def test_benchmark_no_plot(tmp_path):
    benchmark.main([
        "--games", "1", "--seed", "1",
        "--easy-iterations", "10", "--medium-iterations", "10",
        "--output-dir", str(tmp_path), "--no-plot",
    ])
    assert not os.path.exists(tmp_path / "benchmark.png")


def test_plot_path_helpers(tmp_path):
    out_dir = str(tmp_path / "reports")
    assert ensure_output_path(out_dir) == out_dir
    assert os.path.isdir(out_dir)
    assert get_plot_path("demo", output_dir=out_dir) == os.path.join(out_dir, "demo.png")
    assert format_move((0, 2)) == "(1,3)"
