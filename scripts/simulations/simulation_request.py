"""User input for a new simulation and the record built from it."""

from __future__ import annotations

import base64
import json
import time

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config import PAYLOAD_PREFIX, SEVERITY_LEVELS

from .errors import SimulationValidationError
from .simulation_record import SimulationRecord
from .simulation_status import SimulationStatus


class SimulationRequest(BaseModel):
    """Form data for a new simulation.

    ``severity`` is supplied by the caller rather than picked at random.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    disaster_type: str = Field(min_length=1)
    location: str = Field(min_length=1)
    parameters: str = Field(default="")
    severity: int = Field(ge=1, le=SEVERITY_LEVELS)

    @classmethod
    def parse(cls, **fields) -> SimulationRequest:
        """Validate raw form fields.

        Raises:
            SimulationValidationError: Listing every invalid field.
        """
        try:
            return cls(**fields)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
                for err in e.errors()
            )
            raise SimulationValidationError(problems) from e

    def opaque_payload(self) -> str:
        """Base64 of the form as JSON, with the payload marker.

        This only encodes the form; nothing is encrypted.
        """
        form = {
            "disasterType": self.disaster_type,
            "location": self.location,
            "parameters": self.parameters,
        }
        encoded = base64.b64encode(json.dumps(form, ensure_ascii=False).encode("utf-8"))
        return PAYLOAD_PREFIX + encoded.decode("ascii")

    def to_record(self, created_at: int | None = None) -> SimulationRecord:
        """New pending record for this request."""
        return SimulationRecord(
            payload=self.opaque_payload(),
            created_at=int(time.time()) if created_at is None else created_at,
            disaster_type=self.disaster_type,
            severity=self.severity,
            status=SimulationStatus.PENDING,
        )
