"""
Wire models for the bulb's JSON line protocol
One request object per line, terminated by CRLF
"""

from typing import List, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError, field_validator

from .errors import ProtocolError

DEFAULT_PORT = 55443

# Transition passed with every setter: animate the change over 500 ms
EFFECT = "smooth"
DURATION_MS = 500

TERMINATOR = b"\r\n"

# Serialized as a bare JSON number or string, never tagged
Param = Union[StrictInt, StrictStr]


class Request(BaseModel):
    id: int = Field(..., ge=0, le=0xFFFF)
    method: str = Field(..., min_length=1)
    params: List[Param] = Field(default_factory=list)

    @field_validator("params")
    @classmethod
    def _check_int_params(cls, params: List[Param]) -> List[Param]:
        for param in params:
            if isinstance(param, int) and not 0 <= param <= 0xFFFF:
                raise ValueError(f"integer parameter {param} out of range 0-65535")
        return params


def build_request(request_id: int, method: str, params: List[Param]) -> Request:
    """Validate a request, surfacing failures as ProtocolError"""
    try:
        return Request(id=request_id, method=method, params=params)
    except ValidationError as e:
        raise ProtocolError(f"cannot encode {method} request: {e}") from e


def encode_request(request: Request) -> bytes:
    """Serialize a request to one compact JSON line"""
    return request.model_dump_json().encode("utf-8") + TERMINATOR
