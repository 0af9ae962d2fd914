import sys

import mido
import pytest

import tempofeel.__main__


def test_load_config_missing_file_gives_defaults (tmp_path) -> None:

	assert tempofeel.__main__.load_config(str(tmp_path / "nope.yaml")) == {}


def test_load_config_reads_yaml (tmp_path) -> None:

	path = tmp_path / "config.yaml"
	path.write_text("adapter:\n  tempo: 220\n  seed: 3\n")

	assert tempofeel.__main__.load_config(str(path)) == {"adapter": {"tempo": 220, "seed": 3}}


def test_load_config_empty_file (tmp_path) -> None:

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert tempofeel.__main__.load_config(str(path)) == {}


def test_demo_phrases () -> None:

	bass = tempofeel.__main__.build_demo_bass()
	drums = tempofeel.__main__.build_demo_drums()

	assert not bass.is_drums and bass.channel == 1
	assert drums.is_drums and drums.channel == 9
	assert len(bass) == 18


def test_main_writes_adapted_file (tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:

	out = tmp_path / "fast.mid"
	config = tmp_path / "config.yaml"
	config.write_text(f"adapter:\n  tempo: 240\n  intensity: 1.0\n  seed: 7\noutput:\n  filename: {out}\n")

	monkeypatch.setattr(sys, "argv", ["tempofeel", str(config)])

	tempofeel.__main__.main()

	mid = mido.MidiFile(str(out))
	assert len(mid.tracks) == 3
	assert mid.tracks[0][0].tempo == mido.bpm2tempo(240)
