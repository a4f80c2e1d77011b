from datetime import date, datetime, timedelta, timezone

import pytest

from omise.enums import RecipientType, SearchScope, TransactionType
from omise.models import (
    BillingShipping,
    Items,
    Receipt,
    Recipient,
    References,
    Refund,
    Resource,
    Schedule,
    ScannableCode,
    SearchResult,
    Source,
    Token,
    Transaction,
    Transfer,
)
from omise.schedule import ChargeDetail, Period, Status, Weekday


def _base(object_name, object_id):
    return {
        "object": object_name,
        "id": object_id,
        "livemode": False,
        "location": f"/{object_name}s/{object_id}",
        "created_at": "2015-06-02T09:20:47Z",
    }


BANK_ACCOUNT = {
    "object": "bank_account",
    "brand": "bbl",
    "last_digits": "6789",
    "name": "Somchai Prasert",
    "created": "2015-06-02T09:22:08Z",
}

RECIPIENT = {
    **_base("recipient", "recp_test_50894vc13y8z4v51iuc"),
    "verified": False,
    "active": False,
    "name": "Somchai Prasert",
    "email": "somchai@example.com",
    "description": "Default recipient",
    "type": "individual",
    "tax_id": None,
    "bank_account": BANK_ACCOUNT,
    "failure_code": None,
    "metadata": {"Hello": "World"},
}

REFUND = {
    **_base("refund", "rfnd_test_4yqmv79ahghsiz23y3c"),
    "status": "closed",
    "voided": False,
    "funding_amount": 10000,
    "amount": 10000,
    "currency": "thb",
    "funding_currency": "THB",
    "charge": "chrg_test_4yq7duw15p9hdrjp8oq",
    "transaction": "trxn_test_4yqmv79fzpy0gmz5mmq",
    "metadata": {"color": "red"},
}

SCHEDULE = {
    **_base("schedule", "schd_57z9hj228pusa652nk1"),
    "status": "active",
    "every": 3,
    "period": "week",
    "on": {"weekdays": ["monday", "saturday"], "days_of_month": None, "weekday_of_month": None},
    "in_words": "Every 3 weeks on Monday and Saturday",
    "start_date": "2017-05-15",
    "end_date": "2018-05-15",
    "charge": {
        "amount": 100000,
        "currency": "thb",
        "customer": "cust_test_57z9e1nce0wvbbkvef1",
        "card": None,
        "description": None,
    },
    "transfer": None,
    "occurrences": {"object": "list", "data": [], "total": 0},
    "next_occurrences": ["2017-05-15", "2017-05-20"],
}

TOKN_OBJECT = {
    **_base("token", "tokn_test_5086xl7ddjbases4sq3i"),
    "used": False,
    "card": {"object": "card", "id": "card_test_5086xl7amxfysl0ac5l", "brand": "Visa"},
}

TRANSACTION = {
    **_base("transaction", "trxn_test_4yq7duwb9jts1vxgqua"),
    "source": "chrg_test_4yq7duw15p9hdrjp8oq",
    "type": "credit",
    "amount": 96094,
    "currency": "thb",
    "transferable": "2015-06-09T09:20:47Z",
}

TRANSFER = {
    **_base("transfer", "trsf_test_4yqacz8t3cbipcj766u"),
    "recipient": "recp_test_50894vc13y8z4v51iuc",
    "bank_account": BANK_ACCOUNT,
    "sent": False,
    "paid": False,
    "fee": 3000,
    "amount": 192188,
    "currency": "thb",
    "failure_code": None,
    "failure_message": None,
    "transaction": None,
    "metadata": {},
}

RECEIPT = {
    **_base("receipt", "rcpt_test_12345"),
    "number": "1",
    "date": "2017-06-01T00:00:00Z",
    "customer_name": "John Doe",
    "customer_address": "Bangkok",
    "customer_tax_id": "tax_123",
    "customer_email": "john.doe@example.com",
    "customer_statement_name": "JOHN",
    "company_name": "Example Co",
    "company_address": "Bangkok",
    "company_tax_id": "tax_456",
    "charge_fee": 100,
    "voided_fee": 0,
    "transfer_fee": 0,
    "subtotal": 100,
    "vat": 7,
    "wht": 0,
    "total": 107,
    "credit_note": False,
    "currency": "thb",
}

SOURCE = {
    **_base("source", "src_test_5mygxph6d55vvy8nn9i"),
    "type": "wechat_pay",
    "flow": "offline",
    "amount": 20000,
    "currency": "thb",
    "scannable_code": {
        "object": "barcode",
        "type": "qr",
        "image": {"object": "document", "filename": "qrcode.svg"},
    },
    "references": {"barcode": "placeholder", "expires_at": "2017-06-03T10:00:00.5+07:00"},
    "zero_interest_installments": False,
    "platform_type": "WEB",
    "ip": "192.168.1.1",
}


def test_recipient_fields():
    recipient = Recipient.from_dict(RECIPIENT)
    assert recipient.id == "recp_test_50894vc13y8z4v51iuc"
    assert recipient.type is RecipientType.INDIVIDUAL
    assert recipient.bank_account["last_digits"] == "6789"
    assert recipient.created == datetime(2015, 6, 2, 9, 20, 47, tzinfo=timezone.utc)


def test_refund_fields():
    refund = Refund.from_dict(REFUND)
    assert refund.charge == "chrg_test_4yq7duw15p9hdrjp8oq"
    assert refund.transaction == "trxn_test_4yqmv79fzpy0gmz5mmq"
    assert refund.status == "closed"
    assert refund.funding_currency == "THB"
    assert refund.funding_amount == 10000


def test_schedule_nested_objects():
    schedule = Schedule.from_dict(SCHEDULE)
    assert schedule.status is Status.ACTIVE
    assert schedule.period is Period.WEEK
    assert schedule.on.weekdays == [Weekday.MONDAY, Weekday.SATURDAY]
    assert isinstance(schedule.charge, ChargeDetail)
    assert schedule.charge.amount == 100000
    assert schedule.transfer is None
    assert schedule.next_occurrences[0] == date(2017, 5, 15)


def test_transaction_type_and_time():
    tx = Transaction.from_dict(TRANSACTION)
    assert tx.type is TransactionType.CREDIT
    assert tx.transferable == datetime(2015, 6, 9, 9, 20, 47, tzinfo=timezone.utc)


def test_source_nested_objects():
    source = Source.from_dict(SOURCE)
    assert isinstance(source.scannable_code, ScannableCode)
    assert source.scannable_code.type == "qr"
    assert isinstance(source.references, References)
    assert source.references.expires_at.utcoffset() == timedelta(hours=7)
    assert source.references.expires_at.microsecond == 500000
    assert source.ip == "192.168.1.1"


def test_unknown_keys_are_kept():
    data = {**TRANSFER, "deleted": True}
    transfer = Transfer.from_dict(data)
    assert transfer.extra == {"deleted": True}
    assert transfer.to_dict() == data


def test_resource_defaults_serialise_nulls():
    assert Resource().to_dict() == {
        "object": "",
        "id": "",
        "livemode": False,
        "location": None,
        "created_at": None,
    }


def test_time_formatting_uses_z_for_utc():
    receipt = Receipt(date=datetime(2017, 5, 1, tzinfo=timezone.utc))
    assert receipt.to_dict()["date"] == "2017-05-01T00:00:00Z"


def test_search_result_decodes_items_by_scope():
    data = {
        **_base("search", "search_test_1"),
        "scope": "refund",
        "query": "amount:1000",
        "filters": {},
        "page": 1,
        "total": 1,
        "total_pages": 3,
        "order": "chronological",
        "data": [REFUND],
    }
    result = SearchResult.from_dict(data)
    assert result.scope is SearchScope.REFUND
    assert result.query == "amount:1000"
    assert result.page == 1
    assert result.total_pages == 3
    assert isinstance(result.data[0], Refund)
    assert result.data[0].id == "rfnd_test_4yqmv79ahghsiz23y3c"
    assert result.to_dict() == data


def test_search_result_keeps_unknown_scope_items_raw():
    result = SearchResult.from_dict({"scope": "charge", "data": [{"id": "chrg_test_54i01932u4ts67cop81"}]})
    assert result.data == [{"id": "chrg_test_54i01932u4ts67cop81"}]


def test_billing_shipping_omits_empty_street2():
    address = BillingShipping(
        country="TH", city="Bangkok", postal_code="10240", state="Bangkok", street1="Road 1"
    )
    assert address.to_dict() == {
        "country": "TH",
        "city": "Bangkok",
        "postal_code": "10240",
        "state": "Bangkok",
        "street1": "Road 1",
    }
    assert BillingShipping(street2="Floor 2").to_dict()["street2"] == "Floor 2"


def test_items_omits_empty_fields():
    assert Items(amount=100).to_dict() == {"amount": 100}
    assert Items(amount=100, quantity=2, sku="sku1").to_dict() == {
        "amount": 100,
        "sku": "sku1",
        "quantity": 2,
    }


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        Refund.from_dict({"amount": "ten"})


def test_bad_time_raises():
    with pytest.raises(ValueError):
        Receipt.from_dict({"date": "yesterday"})


def test_bad_date_raises():
    with pytest.raises(ValueError):
        Schedule.from_dict({"start_date": "15/05/2017"})


def test_non_mapping_raises():
    with pytest.raises(TypeError):
        Token.from_dict([1, 2])