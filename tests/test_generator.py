"""Tests for key generation and encoding."""
import base64
import binascii
import math
import re

import pytest

from secretkeygen import generator
from secretkeygen.errors import EntropyError
from secretkeygen.generator import KeyFormat, encoded_length, generate_key


class TestKeyFormat:
    """Format tags and their encoders."""

    def test_choices_in_declaration_order(self):
        assert KeyFormat.choices() == ["hex", "base64", "base64url"]

    def test_every_format_has_an_encoder(self):
        assert set(generator.ENCODERS) == set(KeyFormat)

    def test_lookup_by_value(self):
        assert KeyFormat("base64url") is KeyFormat.BASE64URL

    def test_hex_is_lowercase_without_separators(self):
        assert KeyFormat.HEX.encode(b"\xab\xcd\x01") == "abcd01"

    def test_base64_uses_standard_alphabet_with_padding(self):
        assert KeyFormat.BASE64.encode(b"\xfb\xff") == "+/8="

    def test_base64url_uses_safe_alphabet_and_keeps_padding(self):
        assert KeyFormat.BASE64URL.encode(b"\xfb\xff") == "-_8="


class TestGenerateKey:
    """Random draw plus encoding."""

    @pytest.mark.parametrize("nbytes", [1, 2, 3, 16, 31, 32, 33, 1023, 1024])
    @pytest.mark.parametrize("fmt", ["hex", "base64", "base64url"])
    def test_length_depends_only_on_size_and_format(self, nbytes, fmt):
        key = generate_key(nbytes, fmt)
        if fmt == "hex":
            assert len(key) == 2 * nbytes
        else:
            assert len(key) == 4 * math.ceil(nbytes / 3)
        assert len(key) == encoded_length(nbytes, fmt)

    def test_default_format_is_hex(self):
        key = generate_key(32)
        assert re.fullmatch(r"[0-9a-f]{64}", key)

    def test_hex_decodes_to_requested_size(self):
        assert len(binascii.unhexlify(generate_key(20, KeyFormat.HEX))) == 20

    def test_base64_decodes_to_requested_size(self):
        assert len(base64.b64decode(generate_key(17, KeyFormat.BASE64))) == 17

    def test_base64url_of_sixteen_bytes(self):
        key = generate_key(16, "base64url")
        assert len(key) == 24
        assert key.endswith("==")
        assert re.fullmatch(r"[A-Za-z0-9_=-]+", key)
        assert len(base64.urlsafe_b64decode(key)) == 16

    def test_successive_keys_differ(self):
        assert generate_key(32) != generate_key(32)

    def test_uses_os_urandom(self, monkeypatch):
        monkeypatch.setattr(generator.os, "urandom", lambda n: b"\x00" * n)
        assert generate_key(4, "hex") == "00000000"
        assert generate_key(3, "base64") == "AAAA"

    @pytest.mark.parametrize("nbytes", [0, -1, 1025])
    def test_rejects_out_of_range_sizes(self, nbytes):
        with pytest.raises(ValueError):
            generate_key(nbytes)

    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError):
            generate_key(8, "base32")

    def test_missing_randomness_source(self, monkeypatch):
        def no_urandom(n):
            raise NotImplementedError("no source")

        monkeypatch.setattr(generator.os, "urandom", no_urandom)
        with pytest.raises(EntropyError):
            generate_key(8)
