# omise

Building blocks for working with the Omise payment API from Python. The
package has no third-party dependencies.

- **Resource models** (`omise.models`): `Receipt`, `Recipient`, `References`,
  `Refund`, `ScannableCode`, `Schedule`, `SearchResult`, `Source`, `Token`,
  `Transaction` and `Transfer`, plus `BillingShipping` and `Items` used in
  source requests. Each is a dataclass with `from_dict()` to build it from
  decoded JSON and `to_dict()` to turn it back into the same JSON shape.
- **Enumerations** (`omise.enums`): `Ordering`, `RecipientType`, `SearchScope`,
  `SourceOfFunds`, `TransactionType`.
- **Schedule pieces** (`omise.schedule`): `Period`, `Status`,
  `OccurrenceStatus`, `Weekday`, and the `On`, `ChargeDetail` and
  `TransferDetail` objects embedded in a schedule.
- **Operations** (`omise.operations`): one class per API call, in the modules
  `events`, `links`, `occurrences`, `receipts`, `recipients`, `refunds`,
  `schedules`, `search`, `sources`, `tokens`, `transactions` and `transfers`,
  with the shared pieces in `omise.operations.base`.
- **Webhooks** (`omise.webhook`): a WSGI application that decodes incoming
  events and hands them to your handler.
- **Transport** (`omise.transport`): `create_ssl_context()` returns a verifying
  TLS client context that refuses anything older than TLS 1.2.

## Installation

```
pip install .
```

## Describing a request

Every operation has `describe()`, returning a `Description` with `endpoint`
(`Endpoint.API` or `Endpoint.VAULT`), `method`, `path`, `content_type` and
`api_key`; `payload()`, returning the request body as a dictionary; and
`to_json()`, giving that body as compact JSON.

```python
from omise.operations.refunds import CreateRefund

refund = CreateRefund(charge_id="chrg_test_4yq7duw15p9hdrjp8oq", amount=10000)

description = refund.describe()
print(description.method, description.path)
# POST /charges/chrg_test_4yq7duw15p9hdrjp8oq/refunds

print(refund.to_json())
# {"amount":10000}
```

Optional fields left at their empty defaults are left out of the body: a
refund without metadata sends only its amount.

`CreateSource` is described with `api_key="public"`; `CreateToken` and
`RetrieveToken` go to `Endpoint.VAULT`. `CreateToken` wraps its fields in a
`card` object.

### Lists

List operations take paging, date range and ordering as keyword arguments,
shared through `ListParams`:

```python
from datetime import datetime, timezone

from omise.enums import Ordering
from omise.operations.transfers import ListTransfers

listing = ListTransfers(
    limit=100,
    from_=datetime(2017, 5, 1, tzinfo=timezone.utc),
    order=Ordering.CHRONOLOGICAL,
)
print(listing.describe().path)  # /transfers
print(listing.to_json())
# {"limit":100,"order":"chronological","from":"2017-05-01T00:00:00Z"}
```

### Recipients

`CreateRecipient` and `UpdateRecipient` take a `BankAccountRequest`; the
`bank_account` object is always sent.

### Schedules

```python
from omise.operations.schedules import CreateChargeSchedule
from omise.schedule import Period, Weekday

create = CreateChargeSchedule(
    every=3,
    period=Period.WEEK,
    weekdays=[Weekday.MONDAY, Weekday.SATURDAY],
    start_date="2017-05-15",
    end_date="2018-05-15",
    customer="customer_id",
    amount=100000,
)
print(create.payload()["on"])  # {'weekdays': ['monday', 'saturday']}
```

For monthly schedules, `days_of_month` takes precedence over
`weekday_of_month`. Dates must be given as `YYYY-MM-DD`; anything else raises
`ValueError`. `CreateTransferSchedule` works the same way with `recipient` and
either `amount` or `percentage_of_balance`.

## Reading responses

Decode the JSON body of a response and build the matching model:

```python
from omise.models import Refund

refund = Refund.from_dict(response_json)
print(refund.id, refund.amount, refund.status)
```

Timestamps become `datetime` objects and dates become `date` objects; enum
fields hold the enum member, or the plain string for values the enum does not
know. Keys a model does not define are kept in its `extra` dictionary and
written back by `to_dict()`. A value of the wrong JSON type raises `TypeError`.

`SearchResult.from_dict()` turns its `data` items into `Recipient`, `Refund`
or `Transfer` objects for those scopes; items of other scopes stay
dictionaries.

## Receiving webhooks

`webhook_app(handler)` returns a `WebhookApp`, a WSGI application. It reads
the request body, decodes it as a JSON object and calls
`handler(environ, start_response, event)` (or `handler.handle_event(...)` if
the handler has that method), returning whatever the handler returns. A body
that is empty or not a JSON object gets `400 Bad Request` without reaching the
handler. The event is passed as a plain dictionary.

## What this package does not do

- It does not send requests. Operations describe a call and its body; pair
  them with the HTTP client of your choice, the host names for the API and
  vault endpoints, and your keys.
- There are no models for charges, customers, cards, bank accounts, disputes,
  documents, events or links. Where those appear inside another object (a
  transfer's `bank_account`, a token's `card`, a schedule's `occurrences`),
  they are kept as plain dictionaries.

## Running the tests

```
pip install ".[test]"
pytest
```