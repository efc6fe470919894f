import pytest

from chip8.driver import Driver
from chip8.errors import CPUFault


def test_cycles_follow_instruction_rate(make_cpu):
    driver = Driver(make_cpu(0x1200), cpu_hz=600)
    assert driver.run_cycles(0.1) == 60
    assert driver.cycle_count == 60


def test_fractional_time_carries_over(make_cpu):
    driver = Driver(make_cpu(0x1200), cpu_hz=600)
    assert driver.run_cycles(0.001) == 0
    assert driver.run_cycles(0.001) == 1
    assert driver.run_cycles(0.001) == 0
    assert driver.run_cycles(0.001) == 1


def test_timers_follow_wall_clock_not_cycles(make_cpu):
    cpu = make_cpu(0x6028, 0xF015, 0x1204)  # delay = 40
    driver = Driver(cpu, cpu_hz=600)
    driver.run_cycles(1.0)
    assert cpu.timers.delay == 40

    assert driver.run_timers(1 / 60) == 1
    assert cpu.timers.delay == 39
    assert driver.run_timers(0.5) == 30
    assert cpu.timers.delay == 9
    driver.run_timers(1.0)
    assert cpu.timers.delay == 0


def test_audio_receives_tone_flag(make_cpu):
    heard = []
    cpu = make_cpu(0x6002, 0xF018, 0x1204)
    driver = Driver(cpu, audio=heard.append)
    driver.step()
    driver.step()
    for _ in range(3):
        driver.run_timers(1 / 60)
    assert heard == [True, False, False]


def test_renderer_gets_frames_only_when_updated(make_cpu):
    frames = []
    driver = Driver(make_cpu(0xA000, 0xD015, 0x1204), renderer=frames.append)
    for _ in range(4):
        driver.step()
    assert len(frames) == 1
    assert len(frames[0]) == 64 * 32
    assert frames[0][0] == 1


def test_keypad_is_forwarded(make_cpu):
    cpu = make_cpu(0xF00A)
    driver = Driver(cpu)
    driver.step()
    driver.step([False] * 7 + [True] + [False] * 8)
    assert cpu.V[0] == 7


def test_fault_halts_driver(make_cpu):
    driver = Driver(make_cpu(0x00EE))
    with pytest.raises(CPUFault):
        driver.step()
    assert driver.halted
    assert isinstance(driver.error, CPUFault)
    assert driver.step() is None
    assert driver.run_cycles(1.0) == 0
    assert driver.run_timers(1.0) == 0
