"""Tests for the command-line scripts' error handling."""

import importlib.util
import sys
from pathlib import Path

import pytest


SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def load_script(name):
    spec = importlib.util.spec_from_file_location(f"{name}_script", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def compute_equity():
    return load_script("compute_equity")


@pytest.fixture
def texture_batch():
    return load_script("texture_batch")


def run(module, monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", [module.__name__, *argv])
    return module.main()


class TestComputeEquityScript:
    def test_runs(self, compute_equity, monkeypatch, capsys):
        code = run(compute_equity, monkeypatch, "-H", "AsKh", "-b", "Ks7d2c", "-n", "200", "--seed", "1")
        assert code == 0
        out = capsys.readouterr().out
        assert "Made hand: Pair (" in out
        assert "200 trials" in out

    def test_bad_env_value(self, compute_equity, monkeypatch, capsys):
        monkeypatch.setenv("POKERAI_TRIALS", "lots")
        assert run(compute_equity, monkeypatch, "-H", "AsKh") == 1
        assert "POKERAI_TRIALS must be an integer" in capsys.readouterr().out

    def test_negative_env_seed(self, compute_equity, monkeypatch, capsys):
        monkeypatch.setenv("POKERAI_SEED", "-1")
        assert run(compute_equity, monkeypatch, "-H", "AsKh", "-n", "10") == 1
        assert "seed must be non-negative" in capsys.readouterr().out

    def test_negative_seed_flag(self, compute_equity, monkeypatch, capsys):
        assert run(compute_equity, monkeypatch, "-H", "AsKh", "-n", "10", "--seed=-1") == 1
        assert "non-negative" in capsys.readouterr().out

    def test_bad_card(self, compute_equity, monkeypatch, capsys):
        assert run(compute_equity, monkeypatch, "-H", "AsXx", "-n", "10") == 1


class TestTextureBatchScript:
    def test_bad_env_value(self, texture_batch, monkeypatch, capsys):
        monkeypatch.setenv("POKERAI_FLOP_SAMPLES", "many")
        assert run(texture_batch, monkeypatch, "-H", "AsKh") == 1
        assert "POKERAI_FLOP_SAMPLES must be an integer" in capsys.readouterr().out

    def test_negative_seed_flag(self, texture_batch, monkeypatch, capsys):
        argv = ("-H", "AsKh", "--flops", "2", "--trials-per-flop", "5", "--seed=-3")
        assert run(texture_batch, monkeypatch, *argv) == 1
        assert "non-negative" in capsys.readouterr().out
