import sys

import pytest


@pytest.fixture
def default_digit_limit():
    """Run with the interpreter's stock int/str digit cap in force."""
    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(sys.int_info.default_max_str_digits)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)
