"""Application gateway models."""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from mgmtops.domain.operation.models import UserFacingModel


class RedirectType(str, Enum):
    """HTTP redirect status used by a redirect configuration."""

    PERMANENT = "Permanent"
    FOUND = "Found"
    SEE_OTHER = "SeeOther"
    TEMPORARY = "Temporary"


class RedirectConfiguration(BaseModel):
    """A redirect configuration inside an application gateway."""

    model_config = ConfigDict(frozen=True)

    name: str
    redirect_type: RedirectType = RedirectType.PERMANENT
    target_listener_id: Optional[str] = None
    target_url: Optional[str] = None
    include_path: Optional[bool] = None
    include_query_string: Optional[bool] = None
    id: Optional[str] = None
    other_properties: Dict[str, Any] = Field(default_factory=dict)


class ApplicationGateway(UserFacingModel):
    """
    An application gateway as seen by the caller.

    Properties the toolkit does not model are kept in other_properties so the
    gateway can be written back without losing them.
    """

    name: str
    resource_group_name: str
    id: Optional[str] = None
    location: Optional[str] = None
    provisioning_state: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)
    redirect_configurations: Tuple[RedirectConfiguration, ...] = ()
    other_properties: Dict[str, Any] = Field(default_factory=dict)
