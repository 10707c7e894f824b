import pytest

from bucket_lister.domain.value_objects import InvocationEvent, ResponseEnvelope


class TestResponseEnvelope:
    def test_success_shape(self):
        envelope = ResponseEnvelope.success(["alpha", "beta"])

        assert envelope.status_code == 200
        assert envelope.is_success
        assert envelope.body == {
            "message": "Successfully retrieved buckets",
            "buckets": ["alpha", "beta"],
        }

    def test_failure_shape(self):
        envelope = ResponseEnvelope.failure("Access Denied")

        assert envelope.status_code == 500
        assert not envelope.is_success
        assert envelope.body == {"message": "Error listing buckets: Access Denied"}

    def test_success_copies_names(self):
        names = ["alpha"]
        envelope = ResponseEnvelope.success(names)

        names.append("beta")

        assert envelope.body["buckets"] == ["alpha"]

    def test_to_dict(self):
        assert ResponseEnvelope.success([]).to_dict() == {
            "statusCode": 200,
            "body": {"message": "Successfully retrieved buckets", "buckets": []},
        }

    def test_to_dict_is_detached(self):
        envelope = ResponseEnvelope.success(["alpha"])

        wire = envelope.to_dict()
        wire["body"]["buckets"].append("beta")

        assert envelope.body["buckets"] == ["alpha"]

    def test_envelope_is_immutable(self):
        envelope = ResponseEnvelope.success([])

        with pytest.raises(AttributeError):
            envelope.status_code = 500


class TestInvocationEvent:
    def test_wraps_mapping(self):
        event = InvocationEvent.from_raw({"key": "value"})

        assert event["key"] == "value"
        assert dict(event) == {"key": "value"}
        assert len(event) == 1

    def test_rejects_item_assignment(self):
        event = InvocationEvent.from_raw({"key": "value"})

        with pytest.raises(TypeError):
            event.data["key"] = "changed"

    def test_none_is_empty(self):
        assert dict(InvocationEvent.from_raw(None)) == {}

    def test_non_mapping_payload(self):
        event = InvocationEvent.from_raw(["a", "b"])

        assert dict(event) == {"payload": ["a", "b"]}

    def test_from_raw_is_idempotent(self):
        event = InvocationEvent.from_raw({"key": "value"})

        assert InvocationEvent.from_raw(event) is event

    def test_repr_shows_content(self):
        assert repr(InvocationEvent.from_raw({"a": 1})) == "{'a': 1}"
