import pytest

from barert.buffer import CircularBuffer

POEM = (
    b"\nIn the realm of code where logic reigns, \n"
    b"A language born from simple chains, \n"
    b"With curly braces and semicolons, \n"
    b"The art of C, where thought is woven.\n"
    b"Variables dance in memory's space, \n"
    b"Integers, floats, each finds its place, \n"
    b"Arrays align in a structured array, \n"
    b"While pointers guide the data's way.\n"
    b"Functions call with a rhythmic grace, \n"
    b"Parameters passed in a swift embrace, \n"
    b"Return values whisper, 'I'm here to stay,' \n"
    b"In the heart of the program, they find their way.\n\nAuthor: anon\n"
)


def _write(cb, data):
    view = cb.remaining()
    view[: len(data)] = data
    cb.produce(len(data))


def test_poem_then_messages():
    cb = CircularBuffer(4096)
    _write(cb, POEM)
    assert bytes(cb.unconsumed()) == POEM
    cb.consume(len(POEM))
    assert len(cb) == 0

    s = cb.remaining()
    parts = [b"Bla bla bla\n", b"Py py py...\n", b"158", b"\n"]
    n = 0
    for part in parts:
        s[n:n + len(part)] = part
        n += len(part)
    cb.produce(n)
    assert bytes(cb.unconsumed()) == b"Bla bla bla\nPy py py...\n158\n"
    cb.consume(n)
    assert len(cb) == 0


def test_space_accounting():
    cb = CircularBuffer(64)
    assert cb.remaining_space() == 64
    assert len(cb.remaining()) == 64
    _write(cb, b"abcdef")
    assert len(cb) == 6
    assert cb.remaining_space() == 58
    assert len(cb.remaining()) == cb.remaining_space()


def test_wrap_keeps_pending_data():
    cb = CircularBuffer(16)
    _write(cb, b"x" * 12)
    cb.consume(12)
    _write(cb, b"0123456789")
    cb.consume(3)
    assert cb.head <= 16
    assert bytes(cb.unconsumed()) == b"3456789"
    assert cb.remaining_space() == 16 - 7


def test_many_cycles_stay_consistent():
    cb = CircularBuffer(32)
    for i in range(50):
        chunk = bytes([65 + i % 26]) * 7
        _write(cb, chunk)
        assert bytes(cb.unconsumed())[-7:] == chunk
        cb.consume(5)
        assert len(cb.remaining()) == cb.remaining_space()
        cb.consume(len(cb))
        assert len(cb) == 0


def test_reset():
    cb = CircularBuffer(8)
    _write(cb, b"abc")
    cb.reset()
    assert len(cb) == 0
    assert cb.remaining_space() == 8


def test_overproduce_raises():
    cb = CircularBuffer(8)
    with pytest.raises(ValueError):
        cb.produce(9)


def test_overconsume_raises():
    cb = CircularBuffer(8)
    _write(cb, b"ab")
    with pytest.raises(ValueError):
        cb.consume(3)


def test_bad_size_raises():
    with pytest.raises(ValueError):
        CircularBuffer(0)


def test_unconsumed_is_read_only():
    cb = CircularBuffer(8)
    _write(cb, b"ab")
    with pytest.raises(TypeError):
        cb.unconsumed()[0] = 1