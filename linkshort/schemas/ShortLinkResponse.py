from pydantic import BaseModel, Field

# Response DTOs
class ShortLinkResponse(BaseModel):
    # short link, e.g. https://sho.rt/k3x9q0v2m1abc
    url: str
    link_id: int = Field(..., alias="linkId")

    model_config = {"populate_by_name": True}
