"""Unit tests for the MailerLite models and scalar decoders."""

from datetime import datetime, timezone

import pytest
from pydantic import BaseModel, ValidationError

from mailerlite.models import (
    ErrorDetail,
    ErrorResponse,
    Field,
    FieldType,
    FieldUpdate,
    NewField,
    NewSubscriberInGroup,
    Stats,
    Subscriber,
    SubscriptionType,
    Timestamp,
    WeakInt,
)

NEW_YEAR_2021 = datetime(2021, 1, 1, tzinfo=timezone.utc)


class WeakIntHolder(BaseModel):
    value: WeakInt


class TimestampHolder(BaseModel):
    value: Timestamp


@pytest.mark.unit
@pytest.mark.parametrize("raw", ['{"value": 42}', '{"value": "42"}'])
def test_weak_int_accepts_number_and_numeric_string(raw):
    assert WeakIntHolder.model_validate_json(raw).value == 42


@pytest.mark.unit
def test_weak_int_accepts_signed_string():
    assert WeakIntHolder.model_validate_json('{"value": "-7"}').value == -7


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    ['{"value": "forty-two"}', '{"value": true}', '{"value": 4.5}', '{"value": "4_2"}'],
)
def test_weak_int_rejects_non_integers(raw):
    with pytest.raises(ValidationError):
        WeakIntHolder.model_validate_json(raw)


@pytest.mark.unit
def test_timestamp_from_unix_seconds():
    assert TimestampHolder.model_validate_json('{"value": 1609459200}').value == NEW_YEAR_2021


@pytest.mark.unit
def test_timestamp_from_unix_milliseconds():
    value = TimestampHolder.model_validate_json('{"value": 1609459200000}').value
    assert value == NEW_YEAR_2021


@pytest.mark.unit
def test_timestamp_from_date_time_string():
    value = TimestampHolder.model_validate_json('{"value": "2021-01-01 00:00:00"}').value
    assert value == NEW_YEAR_2021
    assert value.tzinfo is not None


@pytest.mark.unit
def test_timestamp_seconds_near_year_3000_stay_seconds():
    # 2999-12-31 23:59:59 UTC
    value = TimestampHolder.model_validate_json('{"value": 32503679999}').value
    assert value.year == 2999


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw", ['{"value": "2021-01-01T00:00:00Z"}', '{"value": "yesterday"}', '{"value": false}']
)
def test_timestamp_rejects_other_formats(raw):
    with pytest.raises(ValidationError):
        TimestampHolder.model_validate_json(raw)


@pytest.mark.unit
def test_timestamp_serializes_to_api_format():
    holder = TimestampHolder(value=NEW_YEAR_2021)
    assert holder.model_dump_json() == '{"value":"2021-01-01 00:00:00"}'


@pytest.mark.unit
def test_timestamp_naive_datetime_is_taken_as_utc():
    holder = TimestampHolder(value=datetime(2021, 1, 1))
    assert holder.value == NEW_YEAR_2021


SUBSCRIBER_JSON = {
    "id": 1343965485,
    "name": "John",
    "email": "john@example.com",
    "sent": 3,
    "opened": 1,
    "clicked": 0,
    "type": "active",
    "country_id": "LT",
    "signup_ip": "127.0.0.1",
    "signup_timestamp": "2020-12-31 23:00:00",
    "confirmation_ip": None,
    "confirmation_timestamp": None,
    "fields": [{"key": "city", "value": "Vilnius", "type": "TEXT"}],
    "date_subscribe": "2021-01-01 00:00:00",
    "date_unsubscribe": None,
    "date_created": 1609459200,
    "date_updated": None,
}


@pytest.mark.unit
def test_subscriber_decodes_mixed_timestamp_encodings():
    subscriber = Subscriber.model_validate(SUBSCRIBER_JSON)

    assert subscriber.type is SubscriptionType.ACTIVE
    assert subscriber.date_subscribe == NEW_YEAR_2021
    assert subscriber.date_created == NEW_YEAR_2021
    assert subscriber.date_unsubscribe is None
    assert subscriber.fields[0].key == "city"
    assert subscriber.fields[0].value == "Vilnius"


@pytest.mark.unit
def test_subscriber_ignores_unknown_keys():
    subscriber = Subscriber.model_validate({**SUBSCRIBER_JSON, "brand_new": 1})
    assert not hasattr(subscriber, "brand_new")


@pytest.mark.unit
def test_subscriber_round_trips_through_json():
    subscriber = Subscriber.model_validate(SUBSCRIBER_JSON)
    assert Subscriber.model_validate_json(subscriber.model_dump_json()) == subscriber


@pytest.mark.unit
def test_field_round_trips_through_json():
    field = Field.model_validate(
        {
            "id": "7",
            "title": "City",
            "key": "city",
            "type": "TEXT",
            "date_updated": "2021-01-01 00:00:00",
            "date_created": 1609459200000,
        }
    )
    assert field.id == 7
    assert field.type is FieldType.TEXT
    assert Field.model_validate_json(field.model_dump_json()) == field


@pytest.mark.unit
def test_stats_round_trips_through_json():
    stats = Stats.model_validate(
        {
            "subscribed": 10,
            "unsubscribed": 2,
            "campaigns": 4,
            "sent_emails": 40,
            "open_rate": 0.5,
            "click_rate": 0.25,
            "bounce_rate": 0.01,
        }
    )
    assert Stats.model_validate_json(stats.model_dump_json()) == stats


@pytest.mark.unit
def test_payloads_leave_out_unset_members():
    assert NewField(title="City").to_payload() == {"title": "City"}
    assert FieldUpdate().to_payload() == {}
    assert NewSubscriberInGroup(
        email="a@b.c", resubscribe=False, type=SubscriptionType.UNCONFIRMED
    ).to_payload() == {"email": "a@b.c", "resubscribe": False, "type": "unconfirmed"}


@pytest.mark.unit
def test_payload_round_trips_with_unset_members():
    new_subscriber = NewSubscriberInGroup(email="a@b.c", fields={"city": "Vilnius"})
    restored = NewSubscriberInGroup.model_validate(new_subscriber.to_payload())
    assert restored == new_subscriber


@pytest.mark.unit
def test_error_detail_string():
    assert str(ErrorDetail(code=4, message="Not found")) == "Not found (code: 4)"
    assert str(ErrorDetail(message="Oops")) == "Oops"


@pytest.mark.unit
def test_error_response_decodes_payload():
    body = '{"error": {"code": 4, "message": "Not found"}}'
    error = ErrorResponse.model_validate_json(body).error
    assert error.code == 4
    assert error.message == "Not found"


@pytest.mark.unit
@pytest.mark.parametrize(
    "body, code, message",
    [
        ('{"error": {"code": 123, "message": null}}', 123, ""),
        ('{"error": {"code": "123", "message": "Bad"}}', 0, "Bad"),
        ('{"error": {"code": true, "message": 5}}', 0, ""),
        ('{"error": null}', 0, ""),
        ('{"error": "boom"}', 0, ""),
    ],
)
def test_error_response_decodes_members_independently(body, code, message):
    error = ErrorResponse.model_validate_json(body).error
    assert error.code == code
    assert error.message == message
