from pydantic import BaseModel


class InvocationError(BaseModel):
    error_type: str | None = None
    error_message: str | None = None
