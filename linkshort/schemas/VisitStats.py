from pydantic import BaseModel, Field
from typing import List

class VisitStats(BaseModel):
    count: int
    # Parallel arrays: index i of both lists is one distinct (ip, user agent) pair
    ip_addresses: List[str] = Field(default_factory=list, alias="ipAddresses")
    user_agents: List[str] = Field(default_factory=list, alias="userAgents")

    model_config = {"populate_by_name": True}
