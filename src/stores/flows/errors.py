from enum import Enum

class FlowErrorKind(Enum):
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    TRANSPORT = "TRANSPORT"


class InputValidationError(ValueError):
    """Rejected before any call to the generation provider."""


class FlowError(Exception):
    """
    Failure of one prompt flow. The message reads "<flow label>: <detail>" so it
    can be shown to the user as is; `flow_name` and `kind` say where and what.
    """
    kind: FlowErrorKind = None

    def __init__(self, flow_name: str, label: str, detail: str):
        self.flow_name = flow_name
        self.label = label
        self.detail = detail
        super().__init__(f"{label}: {detail}")


class EmptyResponseError(FlowError):
    kind = FlowErrorKind.EMPTY_RESPONSE


class MalformedResponseError(FlowError):
    kind = FlowErrorKind.MALFORMED_RESPONSE


class TransportError(FlowError):
    kind = FlowErrorKind.TRANSPORT
