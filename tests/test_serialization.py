"""
Tests for JSON serialization

Accounts and balances must survive a trip through JSON, and decoding
must apply the same rules as building them in code.
"""

import json

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError

from bookkeeping.models import (
    Account,
    Balance,
    Balances,
    EmptyNameError,
    InvalidCurrencyCodeError,
    InvalidTimeRangeError,
    TimeRange,
    close_time,
    parse_currency_code,
)
from bookkeeping.serialization import (
    decode_account,
    decode_balance,
    decode_balances,
    encode_account,
    encode_balance,
    encode_balances,
)


UTC = timezone.utc
NOW = datetime(2024, 12, 15, 10, 30, 45, 123456, tzinfo=UTC)


class TestBalanceJson:
    """Tests for Balance encoding."""

    @pytest.mark.parametrize("amount", [0, 98737879, -9876])
    def test_round_trip(self, amount):
        """Test Balance round trip for positive, negative and zero amounts."""
        balance = Balance.create(NOW, amount)
        decoded = decode_balance(encode_balance(balance))
        assert decoded.equals(balance)

    def test_wire_shape(self):
        """Test the encoded field names."""
        payload = json.loads(encode_balance(Balance.create(NOW, 5)))
        assert set(payload) == {"date", "amount"}
        assert payload["amount"] == 5

    def test_decode_rejects_fractional_amount(self):
        """Test that non-integer amounts are refused."""
        with pytest.raises(ValidationError):
            decode_balance('{"date": "2024-12-15T10:30:45Z", "amount": 1.5}')

    def test_offset_preserved_as_same_instant(self):
        """Test a non-UTC date decodes to the same instant."""
        plus_two = timezone(timedelta(hours=2))
        balance = Balance.create(NOW.astimezone(plus_two), 7)
        assert decode_balance(encode_balance(balance)) == Balance.create(NOW, 7)

    def test_indent(self):
        """Test pretty-printed output."""
        assert "\n" in encode_balance(Balance.create(NOW, 1), indent=2)

    def test_balances_round_trip_keeps_order(self):
        """Test a collection round trip keeps insertion order."""
        balances = Balances([
            Balance.create(NOW, 3),
            Balance.create(NOW - timedelta(days=1), 1),
            Balance.create(NOW, 2),
        ])
        decoded = decode_balances(encode_balances(balances))
        assert [b.amount for b in decoded] == [3, 1, 2]
        assert decoded.latest().amount == 2


class TestAccountJson:
    """Tests for Account encoding."""

    def test_open_account_round_trip(self):
        """Test an open account round trip."""
        account = Account.create("TEST ACCOUNT", parse_currency_code("EUR"), NOW)
        decoded = decode_account(encode_account(account))
        assert decoded.equals(account)
        assert decoded.currency_code == account.currency_code
        assert decoded.is_open()

    def test_closed_account_round_trip(self):
        """Test a closed account round trip."""
        account = Account.create(
            "TEST ACCOUNT",
            parse_currency_code("EUR"),
            NOW,
            close_time(NOW + timedelta(hours=48)),
        )
        decoded = decode_account(encode_account(account))
        assert decoded.equals(account)
        assert decoded.closed == NOW + timedelta(hours=48)

    def test_wire_shape(self):
        """Test the encoded field names and the close presence flag."""
        account = Account.create("A", parse_currency_code("GBP"), NOW)
        payload = json.loads(encode_account(account))
        assert payload["name"] == "A"
        assert payload["currency"] == "GBP"
        assert payload["closed"] == {"valid": False, "time": None}

    def test_encode_accepts_any_account_like_object(self):
        """Test that encoding depends only on the account contract."""

        class FakeAccount:
            name = "Fake"
            currency_code = parse_currency_code("USD")
            time_range = TimeRange(start=NOW)

        decoded = decode_account(encode_account(FakeAccount()))
        assert decoded.name == "Fake"
        assert str(decoded.currency_code) == "USD"

    def test_decode_invalid_currency(self):
        """Test that an invalid currency token is refused."""
        payload = json.dumps({
            "name": "A",
            "currency": "euro",
            "opened": "2000-01-01T00:00:00Z",
        })
        with pytest.raises(InvalidCurrencyCodeError):
            decode_account(payload)

    def test_decode_empty_name(self):
        """Test that an empty name is refused."""
        payload = json.dumps({
            "name": "  ",
            "currency": "EUR",
            "opened": "2000-01-01T00:00:00Z",
        })
        with pytest.raises(EmptyNameError):
            decode_account(payload)

    def test_decode_close_before_open(self):
        """Test that an account closing before it opens is refused."""
        payload = json.dumps({
            "name": "A",
            "currency": "EUR",
            "opened": "2000-01-02T00:00:00Z",
            "closed": {"valid": True, "time": "2000-01-01T00:00:00Z"},
        })
        with pytest.raises(InvalidTimeRangeError):
            decode_account(payload)

    def test_decode_valid_close_without_time(self):
        """Test that a set close flag needs a time."""
        payload = json.dumps({
            "name": "A",
            "currency": "EUR",
            "opened": "2000-01-01T00:00:00Z",
            "closed": {"valid": True, "time": None},
        })
        with pytest.raises(ValidationError):
            decode_account(payload)

    def test_decode_ignores_time_when_not_valid(self):
        """Test that a close time without the flag leaves the account open."""
        payload = json.dumps({
            "name": "A",
            "currency": "EUR",
            "opened": "2000-01-01T00:00:00Z",
            "closed": {"valid": False, "time": "2001-01-01T00:00:00Z"},
        })
        assert decode_account(payload).is_open()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
