import pytest

from lint_refs.exceptions import InvalidEventPayloadError, UnrecoverableError
from lint_refs.models import EventPayload
from lint_refs.payload import load_payload, parse_payload

from tests.utils import sample_path


def test_load_payload_from_file():
    payload = load_payload(sample_path("workflow_dispatch.json"))

    assert payload.repository.full_name == "test-org/test-repo"
    assert payload.repository.default_branch == "develop"


def test_load_payload_without_path():
    assert load_payload("") == EventPayload()


def test_load_payload_missing_file(tmp_path, caplog):
    path = tmp_path / "does-not-exist.json"

    with caplog.at_level("WARNING"):
        payload = load_payload(str(path))

    assert payload == EventPayload()
    assert "does not exist" in caplog.text


def test_load_payload_malformed_file(tmp_path):
    path = tmp_path / "event.json"
    path.write_text('{"repository": {"default_branch": ')

    with pytest.raises(InvalidEventPayloadError) as excinfo:
        load_payload(str(path))

    assert str(path) in str(excinfo.value)
    assert isinstance(excinfo.value, UnrecoverableError)


def test_load_payload_not_utf8(tmp_path):
    path = tmp_path / "event.json"
    path.write_bytes(b'{"repository": "\xff\xfe\xfd"}')

    with pytest.raises(InvalidEventPayloadError):
        load_payload(str(path))


@pytest.mark.parametrize("raw", ["[]", "null", '"main"', "42"])
def test_parse_payload_non_object(raw, caplog):
    with caplog.at_level("WARNING"):
        payload = parse_payload(raw)

    assert payload == EventPayload()
    assert "not an object" in caplog.text


def test_parse_payload_empty_object():
    assert parse_payload("{}") == EventPayload()


def test_load_payload_directory(tmp_path):
    with pytest.raises(InvalidEventPayloadError) as excinfo:
        load_payload(str(tmp_path))

    assert "cannot be read" in str(excinfo.value)


def test_parse_payload_too_deeply_nested():
    with pytest.raises(InvalidEventPayloadError):
        parse_payload("[" * 100000)
