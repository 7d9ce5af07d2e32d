import copy
import pickle

import pytest

from inilayer import SecureString
from inilayer.secure import secure_erase


class TestSecureErase:
    def test_zeroes_buffer(self):
        buf = bytearray(b"hunter2")
        secure_erase(buf)
        assert buf == bytearray(7)

    def test_buffer_still_resizable(self):
        buf = bytearray(b"abc")
        secure_erase(buf)
        buf.extend(b"d")
        assert len(buf) == 4

    def test_empty_buffer(self):
        buf = bytearray()
        secure_erase(buf)
        assert buf == bytearray()


class TestSecureString:
    def test_str_and_len(self):
        secret = SecureString("pässword")
        assert str(secret) == "pässword"
        assert len(secret) == len("pässword".encode("utf-8"))

    def test_repr_hides_value(self):
        assert "hunter2" not in repr(SecureString("hunter2"))

    def test_erase(self):
        secret = SecureString("hunter2")
        secret.erase()
        assert bytes(secret) == b"\0" * 7

    def test_equality(self):
        assert SecureString("a") == SecureString("a")
        assert SecureString("a") == "a"
        assert SecureString("a") != SecureString("b")

    def test_ordering(self):
        assert SecureString("a") < SecureString("b")
        assert SecureString("b") >= SecureString("a")

    def test_cannot_copy_or_pickle(self):
        secret = SecureString("hunter2")
        with pytest.raises(TypeError):
            copy.copy(secret)
        with pytest.raises(TypeError):
            copy.deepcopy(secret)
        with pytest.raises(TypeError):
            pickle.dumps(secret)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(SecureString("a"))
