import os
import sys
import importlib.util

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
SRC = os.path.join(ROOT, 'src')
SCRIPTS = os.path.join(ROOT, 'scripts')


def _load(path: str, name: str):
    spec = importlib.util.spec_from_file_location(name, path)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    spec.loader.exec_module(module)  # type: ignore
    return module


def test_procedural_demo(capsys):
    module = _load(os.path.join(SRC, "01_procedural_board.py"), "mod01")
    module.demo()
    out = capsys.readouterr().out
    assert "Board ......... turns=0 current=X" in out
    assert "Board XOX...... turns=3 current=O" in out


def test_object_demo(capsys):
    module = _load(os.path.join(SRC, "02_object_board.py"), "mod02")
    module.demo()
    out = capsys.readouterr().out
    assert "TicTacToe('.........') turns: 0 current: X" in out
    assert "TicTacToe('XOX......') turns: 3 current: O" in out


def test_side_by_side_demo(capsys):
    module = _load(os.path.join(SRC, "03_side_by_side.py"), "mod03")
    module.demo(seed=1)
    out = capsys.readouterr().out
    assert out.count("agree=True") == 4
    assert "agree=False" not in out


def test_benchmark_script_small_run():
    module = _load(os.path.join(SCRIPTS, "run_benchmarks.py"), "bench")
    summary = module.run(module.Config(seeds=2, boards=5, repeats=2))
    assert set(summary) == {
        "procedural.turn_count",
        "procedural.current_player",
        "procedural.display_board",
        "oop.turn_count",
        "oop.current_player",
        "oop.display_board",
    }
    for mean, half in summary.values():
        assert mean >= 0.0 and half >= 0.0
