"""Tests for the i18n module."""

import logging
from collections.abc import Iterator
from datetime import datetime, timezone

import pytest

from bank_kata.core.formatting import format_timestamp
from bank_kata.core.types import TransactionType
from bank_kata.i18n import _, active_language, available_languages, setup_i18n


@pytest.fixture(autouse=True)
def english() -> Iterator[None]:
    """Start and end every test with the English labels."""
    setup_i18n("en")
    yield
    setup_i18n("en")


class TestI18n:
    """Tests for internationalization setup and translation."""

    def test_default_returns_english(self) -> None:
        """Without a catalogue, _() returns the original English string."""
        assert _("Balance") == "Balance"
        assert _("Activity") == "Activity"
        assert active_language() == "en"

    def test_french_translation(self) -> None:
        """After setup_i18n('fr'), _() returns French translations."""
        assert setup_i18n("fr") is True
        assert active_language() == "fr"
        assert _("Balance") == "Solde"
        assert _("Time") == "Heure"
        assert _("Withdraw") == "Retrait"
        assert _("Aug") == "août"

    def test_unknown_language_falls_back_to_english(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An unknown language code falls back to English and warns."""
        with caplog.at_level(logging.WARNING, logger="bank_kata.i18n"):
            assert setup_i18n("de") is False
        assert _("Balance") == "Balance"
        assert active_language() == "en"
        assert "No 'de' catalogue" in caplog.text

    def test_unknown_msgid_returns_original(self) -> None:
        """An untranslated msgid returns the original string."""
        setup_i18n("fr")
        assert _("this string has no translation") == "this string has no translation"

    def test_available_languages(self) -> None:
        """English is always available, French ships a catalogue."""
        languages = available_languages()
        assert languages[0] == "en"
        assert "fr" in languages


def test_transaction_type_display_names() -> None:
    """Transaction types render as human labels."""
    assert TransactionType.ACCOUNT_OPEN.display_name == "Open"
    assert TransactionType.DEPOSIT.display_name == "Deposit"
    assert TransactionType.WITHDRAW.display_name == "Withdraw"


def test_french_transaction_type_display_names() -> None:
    """Labels follow the installed catalogue."""
    setup_i18n("fr")
    assert TransactionType.ACCOUNT_OPEN.display_name == "Ouverture"
    assert TransactionType.DEPOSIT.display_name == "Dépôt"


def test_french_timestamp() -> None:
    """Month names and the time label are translated, the ET suffix is not."""
    setup_i18n("fr")
    instant = datetime(2020, 12, 1, 17, 3, 3, tzinfo=timezone.utc)
    assert format_timestamp(instant) == "Date: déc. 01, 2020 Heure: 12:03:03 ET"


def test_transaction_type_values_are_language_neutral() -> None:
    """The enum values are stable keys."""
    assert [str(t) for t in TransactionType] == ["account_open", "deposit", "withdraw"]
