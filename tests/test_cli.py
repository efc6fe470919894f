import pytest

from chip8.__main__ import main
from chip8.config import DEFAULT_CPU_HZ, DEFAULT_SCALE, parse_args
from chip8.rom import assemble_words, write_rom


def test_defaults():
    config = parse_args(["pong.ch8"])
    assert config.rom == "pong.ch8"
    assert not config.debug
    assert not config.inspect
    assert config.scale == DEFAULT_SCALE
    assert config.cpu_hz == DEFAULT_CPU_HZ
    assert config.timer_hz == 60


def test_flags():
    config = parse_args(["-d", "-i", "-s", "4", "--cpu-hz", "700", "rom.ch8"])
    assert config.debug and config.inspect
    assert config.scale == 4
    assert config.cpu_hz == 700


@pytest.mark.parametrize("argv", [[], ["-s", "0", "rom.ch8"], ["--cpu-hz", "-5", "rom.ch8"]])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_inspect_prints_listing(tmp_path, capsys):
    path = tmp_path / "prog.ch8"
    write_rom(path, assemble_words(0x6001, 0x1202))
    assert main(["-i", str(path)]) == 0
    out = capsys.readouterr().out
    assert "200: 6001  LD V0, 0x01" in out
    assert "202: 1202  JP 0x202" in out


def test_missing_rom(tmp_path):
    assert main([str(tmp_path / "nope.ch8")]) == 1


def test_oversized_rom_never_starts(tmp_path):
    path = tmp_path / "big.ch8"
    write_rom(path, bytes(4000))
    assert main([str(path)]) == 1
