from pydantic import BaseModel, Field


class CookieFetchRequest(BaseModel):
    """Request body for the cookie-authenticated endpoint."""

    url: str = Field(
        ...,
        max_length=2048,
        description="Instagram post, reel or story URL",
        examples=["https://www.instagram.com/p/Cxyz123_-/"],
    )
    cookie: str | None = Field(
        default=None,
        repr=False,
        description="Session cookie overriding the server-wide one for this request",
    )
