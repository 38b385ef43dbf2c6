"""
SiteVerifyRequest DTO

Parameters submitted to the siteverify service.
"""

from typing import Dict, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field


class SiteVerifyRequest(BaseModel):
    """
    Request DTO for the siteverify endpoint.

    Attributes:
        secret: Shared key between the site and the service
        response: User response token supplied by the client widget
        remote_ip: End user's IP address
        version: Client library version sent alongside the request
    """
    model_config = ConfigDict(frozen=True)

    secret: str = Field(..., repr=False, description="Shared site secret")
    response: str = Field(..., min_length=1, description="User response token")
    remote_ip: Optional[str] = Field(None, description="End user's IP address")
    version: Optional[str] = Field(None, description="Client library version")

    def to_form_data(self) -> Dict[str, str]:
        """Form fields with the service's parameter names; unset ones omitted."""
        params = {"secret": self.secret, "response": self.response}
        if self.remote_ip:
            params["remoteip"] = self.remote_ip
        if self.version:
            params["version"] = self.version
        return params

    def to_query_string(self) -> str:
        return urlencode(self.to_form_data())
