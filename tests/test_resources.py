from datetime import datetime, timezone
from urllib.parse import parse_qsl, urlsplit

import pytest

from razorpayx import (
    AccountType,
    ApiError,
    ConfigurationError,
    PayoutPurpose,
    ValidationError,
)
from razorpayx.resources.base import normalize_fetch_all_params

from .conftest import BAD_REQUEST

API = "https://api.razorpay.com/v1"
FROM_DATE = datetime(2002, 1, 1, tzinfo=timezone.utc)
FROM_SECS = 1009843200
TO_SECS = 1041379200


def query_of(request):
    return parse_qsl(urlsplit(request.url).query)


class TestFetchAllParams:
    def test_defaults_are_applied_last(self):
        assert normalize_fetch_all_params({"reference_id": "1234"}) == {
            "reference_id": "1234",
            "count": 10,
            "skip": 0,
        }
        assert normalize_fetch_all_params(None) == {"count": 10, "skip": 0}

    def test_caller_order_is_kept(self):
        params = {"contact_id": "cont_1", "from": FROM_DATE, "to": TO_SECS, "count": 20, "skip": 1}
        assert list(normalize_fetch_all_params(params).items()) == [
            ("contact_id", "cont_1"),
            ("from", FROM_SECS),
            ("to", TO_SECS),
            ("count", 20),
            ("skip", 1),
        ]

    def test_count_above_maximum_is_rejected(self):
        with pytest.raises(ValidationError, match="maximum of 100"):
            normalize_fetch_all_params({"count": 101})
        assert normalize_fetch_all_params({"count": 100})["count"] == 100

    @pytest.mark.parametrize("count", [100.5, "100.5", "1e3"])
    def test_count_is_checked_before_truncation(self, count):
        with pytest.raises(ValidationError, match="maximum of 100"):
            normalize_fetch_all_params({"count": count})

    def test_fractional_values_within_maximum_are_truncated(self):
        query = normalize_fetch_all_params({"count": 20.7, "skip": "3"})
        assert query == {"count": 20, "skip": 3}

    @pytest.mark.parametrize("count", [True, float("nan"), "-inf"])
    def test_non_integer_like_count_is_rejected(self, count):
        with pytest.raises(ValidationError, match="must be an integer"):
            normalize_fetch_all_params({"count": count})

    def test_zero_count_falls_back_to_default(self):
        assert normalize_fetch_all_params({"count": 0})["count"] == 10

    def test_non_numeric_count_is_rejected(self):
        with pytest.raises(ValidationError):
            normalize_fetch_all_params({"count": "many"})

    def test_booleans_are_lowercased(self):
        assert normalize_fetch_all_params({"active": True})["active"] == "true"

    def test_input_is_not_mutated(self):
        params = {"from": FROM_DATE}
        normalize_fetch_all_params(params)
        assert params == {"from": FROM_DATE}


class TestContacts:
    def test_create_sends_params_verbatim(self, client, adapter):
        params = {
            "name": "test",
            "email": "test@razorpay.com",
            "contact": "123456789",
            "notes": {"note1": "This is note1", "note2": "This is note2"},
        }

        client.contacts.create(params)

        assert len(adapter.requests) == 1
        assert adapter.last.method == "POST"
        assert adapter.last.url == f"{API}/contacts"
        assert adapter.last_json() == params

    @pytest.mark.parametrize("name", ["ab", "x" * 51])
    def test_name_length_is_checked(self, client, adapter, name):
        with pytest.raises(ValidationError):
            client.contacts.create({"name": name})
        assert adapter.requests == []

    def test_create_requires_name(self, client):
        with pytest.raises(ConfigurationError):
            client.contacts.create({"email": "test@razorpay.com"})

    def test_update_and_toggle(self, client, adapter):
        client.contacts.update("cont_1", {"name": "Gaurav Kumar"})
        assert (adapter.last.method, adapter.last.url) == ("PATCH", f"{API}/contacts/cont_1")
        assert adapter.last_json() == {"name": "Gaurav Kumar"}

        client.contacts.toggle_active("cont_1", False)
        assert adapter.last_json() == {"active": False}

        with pytest.raises(ConfigurationError):
            client.contacts.toggle_active("cont_1", None)

    def test_fetch_and_fetch_all(self, client, adapter):
        client.contacts.fetch("cont_1")
        assert adapter.last.url == f"{API}/contacts/cont_1"

        client.contacts.fetch_all({"name": "Gaurav", "active": True})
        assert query_of(adapter.last) == [
            ("name", "Gaurav"),
            ("active", "true"),
            ("count", "10"),
            ("skip", "0"),
        ]

    def test_missing_id(self, client, adapter):
        with pytest.raises(ConfigurationError):
            client.contacts.fetch("")
        assert adapter.requests == []


class TestFundAccounts:
    def test_create(self, client, adapter):
        params = {
            "account_type": AccountType.VPA,
            "contact_id": "1",
            "vpa": {"address": "vpaaddress"},
        }

        client.fund_accounts.create(params)

        assert adapter.last.url == f"{API}/fund_accounts"
        assert adapter.last_json() == {
            "account_type": "vpa",
            "contact_id": "1",
            "vpa": {"address": "vpaaddress"},
        }

    @pytest.mark.parametrize("account_type", ["vpa", "card", "bank_account", "wallet"])
    def test_details_for_account_type_are_required(self, client, adapter, account_type):
        with pytest.raises(ValidationError, match=account_type):
            client.fund_accounts.create({"account_type": account_type, "contact_id": "1"})
        assert adapter.requests == []

    def test_toggle_active(self, client, adapter):
        client.fund_accounts.toggle_active("fa_1234", False)
        assert (adapter.last.method, adapter.last.url) == ("PATCH", f"{API}/fund_accounts/fa_1234")
        assert adapter.last_json() == {"active": False}

        with pytest.raises(ConfigurationError):
            client.fund_accounts.toggle_active("", True)

    def test_fetch_all(self, client, adapter):
        client.fund_accounts.fetch_all(
            {"contact_id": "cont_1234", "from": FROM_DATE, "to": TO_SECS, "count": 20, "skip": 1}
        )
        assert adapter.last.url == (
            f"{API}/fund_accounts?contact_id=cont_1234&from={FROM_SECS}"
            f"&to={TO_SECS}&count=20&skip=1"
        )

    def test_fetch(self, client, adapter):
        client.fund_accounts.fetch("fa_1234")
        assert adapter.last.url == f"{API}/fund_accounts/fa_1234"


class TestPayouts:
    def test_create(self, client, adapter):
        params = {
            "account_number": "1234",
            "fund_account_id": "fa_1234",
            "amount": 1000,
            "currency": "INR",
            "mode": "IMPS",
            "purpose": PayoutPurpose.CASHBACK,
        }

        client.payouts.create(params)

        assert adapter.last.url == f"{API}/payouts"
        assert adapter.last_json() == {**params, "purpose": "cashback"}

    def test_cancel(self, client, adapter):
        client.payouts.cancel("pout_1234")
        assert (adapter.last.method, adapter.last.url) == ("POST", f"{API}/payouts/pout_1234/cancel")

    def test_fetch_all_applies_defaults(self, client, adapter):
        client.payouts.fetch_all("1234", {"reference_id": "1234"})

        assert len(adapter.requests) == 1
        assert adapter.last.method == "GET"
        assert adapter.last.url == (
            f"{API}/payouts?account_number=1234&reference_id=1234&count=10&skip=0"
        )

    def test_fetch_all_with_dates(self, client, adapter):
        client.payouts.fetch_all(
            "1234",
            {"reference_id": "1234", "from": FROM_DATE, "to": TO_SECS, "count": 20, "skip": 1},
        )
        assert adapter.last.url == (
            f"{API}/payouts?account_number=1234&reference_id=1234"
            f"&from={FROM_SECS}&to={TO_SECS}&count=20&skip=1"
        )

    def test_fetch_all_rejects_large_count_before_sending(self, client, adapter):
        with pytest.raises(ValidationError):
            client.payouts.fetch_all("1234", {"count": 101})
        assert adapter.requests == []

    def test_fetch_all_requires_account_number(self, client):
        with pytest.raises(ConfigurationError):
            client.payouts.fetch_all("", {})

    def test_api_error_surfaces(self, client, adapter):
        adapter.reply(400, BAD_REQUEST)

        with pytest.raises(ApiError) as excinfo:
            client.payouts.fetch("pout_1234")

        assert excinfo.value.status_code == 400
        assert excinfo.value.detail.code == "BAD_REQUEST_ERROR"


class TestPayoutLinks:
    def test_create_with_contact_id(self, client, adapter):
        params = {
            "account_number": "1234",
            "amount": 1000,
            "currency": "INR",
            "purpose": "cashback",
            "receipt": "1234",
            "contact": {"id": "1234"},
        }

        client.payout_links.create(params)

        assert adapter.last.url == f"{API}/payout-links"
        assert adapter.last_json() == params

    def test_expire_by_is_normalized(self, client, adapter):
        client.payout_links.create(
            {"contact": {"id": "cont_1"}, "expire_by": datetime(2030, 1, 1, tzinfo=timezone.utc)}
        )
        assert adapter.last_json()["expire_by"] == 1893456000

    def test_contact_without_id_needs_name(self, client, adapter):
        with pytest.raises(ValidationError, match="name"):
            client.payout_links.create({"contact": {"email": "a@b.c"}})
        assert adapter.requests == []

    def test_contact_without_id_needs_email_or_phone(self, client):
        with pytest.raises(ValidationError, match="either contact or email"):
            client.payout_links.create({"contact": {"name": "Gaurav"}})

    def test_contact_with_name_and_phone_is_accepted(self, client, adapter):
        client.payout_links.create({"contact": {"name": "Gaurav", "contact": "9999999999"}})
        assert len(adapter.requests) == 1

    def test_missing_contact(self, client):
        with pytest.raises(ConfigurationError):
            client.payout_links.create({"amount": 1000})

    def test_cancel_fetch_and_fetch_all(self, client, adapter):
        client.payout_links.cancel("poutlk_1234")
        assert adapter.last.url == f"{API}/payout-links/poutlk_1234/cancel"

        client.payout_links.fetch("poutlk_1234")
        assert adapter.last.url == f"{API}/payout-links/poutlk_1234"

        client.payout_links.fetch_all({"contact_id": "cont_1234", "from": FROM_DATE, "count": 20})
        assert query_of(adapter.last) == [
            ("contact_id", "cont_1234"),
            ("from", str(FROM_SECS)),
            ("count", "20"),
            ("skip", "0"),
        ]


class TestTransactions:
    def test_fetch_all(self, client, adapter):
        client.transactions.fetch_all(
            "1234", {"from": FROM_DATE, "to": TO_SECS, "count": 20, "skip": 1}
        )
        assert adapter.last.url == (
            f"{API}/transactions?account_number=1234&from={FROM_SECS}"
            f"&to={TO_SECS}&count=20&skip=1"
        )

    def test_fetch(self, client, adapter):
        client.transactions.fetch("txn_1234")
        assert adapter.last.url == f"{API}/transactions/txn_1234"

    def test_missing_id(self, client):
        with pytest.raises(ConfigurationError):
            client.transactions.fetch(None)
