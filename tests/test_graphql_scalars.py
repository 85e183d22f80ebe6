"""GraphQL scalar adapters: URI and DateTime."""

from datetime import datetime, timezone

from adapters.graphql_scalars import decode_datetime, decode_uri, encode_datetime, encode_uri


def test_uri_roundtrip():
    uri = decode_uri("https://github.com/octocat?tab=repositories")
    assert uri.netloc == "github.com"
    assert encode_uri(uri) == "https://github.com/octocat?tab=repositories"


def test_datetime_decoding_is_utc():
    assert decode_datetime("2018-05-11T10:20:30Z") == datetime(2018, 5, 11, 10, 20, 30, tzinfo=timezone.utc)


def test_bad_datetime_falls_back_to_now(caplog):
    before = datetime.now(timezone.utc)
    value = decode_datetime("yesterday-ish")
    assert value >= before
    assert "Unparseable GraphQL DateTime" in caplog.text


def test_encode_datetime_is_identity():
    now = datetime.now(timezone.utc)
    assert encode_datetime(now) is now
