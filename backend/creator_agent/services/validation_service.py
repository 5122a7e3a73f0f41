from typing import Any, List, get_args

from pydantic import TypeAdapter, ValidationError

from ..models import AgentRequest, ValidationIssue

_request_adapter = TypeAdapter(AgentRequest)

ACTIONS = tuple(
    get_args(member.model_fields["action"].annotation)[0]
    for member in get_args(get_args(AgentRequest)[0])
)


_EXPECTED_TYPES = {
    "string_type": "text",
    "int_type": "integer",
    "bool_type": "boolean",
    "list_type": "list",
    "model_type": "object",
    "dict_type": "object",
}


class RequestValidationFailed(Exception):
    """Raised when a request body does not match any accepted shape."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        super().__init__(f"{len(issues)} validation issue(s)")


def _to_issue(error: dict) -> ValidationIssue:
    path = list(error["loc"])
    # Tagged unions prefix the location with the matched tag
    if path and path[0] in ACTIONS:
        path = path[1:]

    code = error["type"]
    message = error["msg"]
    if code in ("union_tag_invalid", "union_tag_not_found"):
        path = ["action"]
        message = f"Expected action to be one of: {', '.join(ACTIONS)}"
    elif code == "missing":
        message = "Missing required field"
    elif code in _EXPECTED_TYPES:
        expected = _EXPECTED_TYPES[code]
        message = f"Expected {expected}, got {type(error['input']).__name__}"

    return ValidationIssue(path=path, code=code, message=message)


def validate_request(body: Any):
    """Validate an untrusted request body against the three action shapes.

    Returns the typed action model on success. Raises RequestValidationFailed
    with every violation found otherwise. The body is never mutated.
    """
    if not isinstance(body, dict):
        raise RequestValidationFailed([
            ValidationIssue(
                path=[],
                code="object_type",
                message=f"Expected object, got {type(body).__name__}",
            )
        ])

    try:
        return _request_adapter.validate_python(body)
    except ValidationError as e:
        raise RequestValidationFailed([_to_issue(err) for err in e.errors()]) from e
