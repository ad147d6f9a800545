import pytest

from barert.errors import Errno, SyscallError, error_message, raise_for


def test_success_message():
    assert error_message(0) == "success"


@pytest.mark.parametrize(
    "code, message",
    [
        (Errno.ENOENT, "no such file or directory"),
        (Errno.EAGAIN, "try again"),
        (Errno.EINTR, "interrupted system call"),
        (Errno.ECONNRESET, "connection reset by peer"),
        (Errno.EHWPOISON, "memory page has hardware error"),
    ],
)
def test_messages_from_table(code, message):
    assert error_message(code) == message


def test_raise_for_zero_returns_none():
    assert raise_for(0) is None


def test_raise_for_nonzero_raises_with_code():
    with pytest.raises(SyscallError) as info:
        raise_for(Errno.EAGAIN)
    assert info.value.code == Errno.EAGAIN
    assert info.value.errno == Errno.EAGAIN
    assert str(info.value) == "try again"


def test_slot_41_resolves_to_eagain():
    err = SyscallError(41)
    assert err.code == Errno.EAGAIN
    assert err.msg == "try again"


def test_slot_58_resolves_to_deadlock():
    err = SyscallError(58)
    assert err.code == Errno.EDEADLK
    assert err.msg == "resource deadlock avoided"


@pytest.mark.parametrize("code", [134, 500, -1])
def test_out_of_range_resolves_to_last_slot(code):
    err = SyscallError(code)
    assert err.code == Errno.EHWPOISON
    assert error_message(code) == error_message(Errno.EHWPOISON)


def test_syscall_error_is_oserror():
    with pytest.raises(OSError) as info:
        raise_for(Errno.ENOENT)
    assert info.value.strerror == "no such file or directory"


def test_codes_round_trip_for_regular_errors():
    for member in Errno:
        if member in (Errno.SUCCESS, Errno.UNKNOWN_ERR):
            continue
        err = SyscallError(member)
        assert err.code == member
        assert err.msg == error_message(member)


def test_deadlock_alias():
    assert Errno.EDEADLOCK is Errno.EDEADLK
    assert error_message(Errno.EDEADLOCK) == "resource deadlock avoided"