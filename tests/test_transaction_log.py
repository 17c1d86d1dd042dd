"""
Tests for the transaction log
"""

from datetime import datetime

import pytest

from bank_system.transaction_log import (
    TransactionLog, TransactionRecord, format_amount, format_line
)


FIXED_TIME = datetime(2026, 10, 18, 9, 30, 15, 123456)


def fixed_clock():
    return FIXED_TIME


class TestFormatting:
    """Test line and amount formatting"""
    
    @pytest.mark.parametrize("amount, expected", [
        (50, "50.0"),
        (50.0, "50.0"),
        (100.25, "100.25"),
        (-20.5, "-20.5"),
        (0, "0.0"),
    ])
    def test_format_amount(self, amount, expected):
        assert format_amount(amount) == expected
    
    def test_format_line(self):
        line = format_line("2026-10-18 09:30:15", "A1", "Deposit", 50)
        assert line == "2026-10-18 09:30:15 | A1 | Deposit | 50.0"
    
    def test_parse_line(self):
        record = TransactionRecord.parse("2026-10-18 09:30:15 | A1 | Transfer to B2 | 10.0\n")
        assert record == TransactionRecord("2026-10-18 09:30:15", "A1", "Transfer to B2", "10.0")
    
    def test_parse_label_containing_separator(self):
        record = TransactionRecord.parse("t | A1 | odd | label | 1.0")
        assert record.account_number == "A1"
        assert record.label == "odd | label"
        assert record.amount == "1.0"
    
    @pytest.mark.parametrize("line", ["", "garbage", "t | A1 | Deposit"])
    def test_parse_rejects_short_lines(self, line):
        assert TransactionRecord.parse(line) is None


class TestTransactionLog:
    """Test appending and reading the log file"""

    def test_append_creates_file(self, tmp_path):
        path = tmp_path / "transactions.txt"
        log = TransactionLog(path, clock=fixed_clock)
        assert log.append("A1", "Account Created", 100.0)
        assert path.read_text(encoding="utf-8") == "2026-10-18 09:30:15 | A1 | Account Created | 100.0\n"
    
    def test_append_preserves_order(self, tmp_path):
        log = TransactionLog(tmp_path / "transactions.txt", clock=fixed_clock)
        log.append("A1", "Deposit", 1)
        log.append("B2", "Deposit", 2)
        log.append("A1", "Withdraw", 3)
        labels = [TransactionRecord.parse(l).amount for l in log.read_lines()]
        assert labels == ["1.0", "2.0", "3.0"]
    
    def test_append_to_existing_file(self, tmp_path):
        path = tmp_path / "transactions.txt"
        path.write_text("old line\n", encoding="utf-8")
        TransactionLog(path, clock=fixed_clock).append("A1", "Deposit", 5)
        assert path.read_text(encoding="utf-8").splitlines()[0] == "old line"
    
    def test_append_failure_is_reported(self, tmp_path, capsys):
        """Test write failures print a diagnostic instead of raising"""
        log = TransactionLog(tmp_path / "missing" / "transactions.txt")
        assert not log.append("A1", "Deposit", 5)
        assert "Error logging transaction." in capsys.readouterr().out
    
    def test_read_missing_log(self, tmp_path):
        assert TransactionLog(tmp_path / "transactions.txt").read_lines() == []
    
    def test_history_exact_match(self, tmp_path):
        """Test history matches the account field, not substrings"""
        log = TransactionLog(tmp_path / "transactions.txt", clock=fixed_clock)
        log.append("A1", "Account Created", 10)
        log.append("A10", "Account Created", 20)
        log.append("B2", "Received from A1", 5)
        
        history = log.history("A1")
        assert len(history) == 1
        assert "| A1 | Account Created" in history[0]
    
    def test_history_substring_match(self, tmp_path):
        """Test the legacy substring scan also picks up foreign lines"""
        log = TransactionLog(tmp_path / "transactions.txt", clock=fixed_clock)
        log.append("A1", "Account Created", 10)
        log.append("A10", "Account Created", 20)
        log.append("B2", "Received from A1", 5)
        
        assert len(log.history("A1", substring=True)) == 3
    
    def test_history_skips_malformed_lines(self, tmp_path):
        path = tmp_path / "transactions.txt"
        path.write_text("A1\nnot | a record\n", encoding="utf-8")
        assert TransactionLog(path).history("A1") == []
    
    def test_read_undecodable_bytes(self, tmp_path):
        """Test invalid UTF-8 in the log does not break reading"""
        path = tmp_path / "transactions.txt"
        log = TransactionLog(path, clock=fixed_clock)
        log.append("A1", "Deposit", 5)
        with open(path, "ab") as f:
            f.write(b"\xff\xfe junk\n")
        log.append("A1", "Withdraw", 2)
        
        assert len(log.read_lines()) == 3
        assert [TransactionRecord.parse(l).label for l in log.history("A1")] == ["Deposit", "Withdraw"]
