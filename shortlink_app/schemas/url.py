from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    # Plain str: targets are stored as given, not normalized like HttpUrl would
    url: str = Field(..., description="The original URL to be shortened")


class ShortenResponse(BaseModel):
    short_url: str = Field(..., description="Base URL followed by the short code")

    model_config = {
        "json_schema_extra": {
            "example": {"short_url": "http://localhost:8080/AbC123"}
        }
    }
