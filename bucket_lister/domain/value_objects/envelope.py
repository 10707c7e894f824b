from dataclasses import dataclass, field
from typing import Any

SUCCESS_MESSAGE = "Successfully retrieved buckets"
FAILURE_PREFIX = "Error listing buckets: "


@dataclass(frozen=True)
class ResponseEnvelope:
    """The ``{statusCode, body}`` shape returned for every invocation."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, bucket_names: list[str]) -> "ResponseEnvelope":
        return cls(
            status_code=200,
            body={"message": SUCCESS_MESSAGE, "buckets": list(bucket_names)},
        )

    @classmethod
    def failure(cls, description: str) -> "ResponseEnvelope":
        return cls(status_code=500, body={"message": FAILURE_PREFIX + description})

    @property
    def is_success(self) -> bool:
        return self.status_code == 200

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the mapping handed back to the runtime."""
        body = dict(self.body)
        if "buckets" in body:
            body["buckets"] = list(body["buckets"])
        return {"statusCode": self.status_code, "body": body}
