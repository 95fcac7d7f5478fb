import pytest

from tomasulo.memory import MEMORY_SIZE, Memory


def test_preloaded_sample_data():
    mem = Memory()
    assert mem.read(10) == 42
    assert mem.read(12) == 99


def test_other_cells_start_at_zero():
    mem = Memory()
    assert all(mem.read(addr) == 0 for addr in (0, 11, 100, MEMORY_SIZE - 1))


def test_write_read_round_trip():
    mem = Memory()
    mem.write(200, -17)
    assert mem.read(200) == -17


def test_load_data_matches_write():
    mem = Memory()
    mem.load_data(104, 10)
    assert mem.read(104) == 10


def test_last_address_is_usable():
    mem = Memory()
    mem.write(MEMORY_SIZE - 1, 5)
    assert mem.read(MEMORY_SIZE - 1) == 5


@pytest.mark.parametrize("addr", [-1, MEMORY_SIZE, MEMORY_SIZE + 100])
def test_out_of_bounds_read(addr):
    with pytest.raises(IndexError):
        Memory().read(addr)


@pytest.mark.parametrize("addr", [-1, MEMORY_SIZE])
def test_out_of_bounds_write(addr):
    mem = Memory()
    with pytest.raises(IndexError):
        mem.write(addr, 1)
    with pytest.raises(IndexError):
        mem.load_data(addr, 1)


def test_instances_are_independent():
    first, second = Memory(), Memory()
    first.write(10, 7)
    assert second.read(10) == 42