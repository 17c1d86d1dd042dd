"""
Tests for PIN hashing and validation
"""

import hashlib

import pytest

from bank_system.pin import hash_pin, verify_pin, is_valid_pin


class TestPinHashing:
    """Test digest generation and verification"""
    
    def test_hash_is_sha256_hex(self):
        """Test digest is the 64-char lowercase hex SHA-256 of the PIN"""
        digest = hash_pin("1234")
        assert digest == hashlib.sha256(b"1234").hexdigest()
        assert len(digest) == 64
        assert digest == digest.lower()
    
    def test_hash_is_deterministic(self):
        """Test same PIN always produces the same digest"""
        assert hash_pin("0000") == hash_pin("0000")
    
    @pytest.mark.parametrize("pin", ["0000", "1234", "9999", "0420"])
    def test_verify_matching_pin(self, pin):
        """Test a PIN verifies against its own digest"""
        assert verify_pin(pin, hash_pin(pin))
    
    def test_verify_rejects_other_pin(self):
        """Test a different PIN does not verify"""
        assert not verify_pin("1234", hash_pin("4321"))
        assert not verify_pin("1234", hash_pin("12345"))
        assert not verify_pin("", hash_pin("1234"))


class TestPinValidation:
    """Test PIN format rules"""
    
    def test_four_digits_valid(self):
        assert is_valid_pin("1234")
        assert is_valid_pin("0000")
    
    @pytest.mark.parametrize("pin", ["123", "12345", "", "12a4", "abcd", " 123", "12.4", "-123"])
    def test_invalid_formats(self, pin):
        """Test wrong lengths and non-digits are rejected"""
        assert not is_valid_pin(pin)
    
    def test_non_ascii_digits_rejected(self):
        """Test Unicode digits from other scripts do not count"""
        assert not is_valid_pin("١٢٣٤")
    
    def test_custom_length(self):
        assert is_valid_pin("123456", length=6)
        assert not is_valid_pin("1234", length=6)
