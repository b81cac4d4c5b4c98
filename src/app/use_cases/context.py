"""Request metadata shared by use cases that write sessions or audit entries."""

from typing import Optional

from pydantic import BaseModel


class ClientContext(BaseModel):
    """Client IP and user agent as seen by the HTTP layer"""

    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
