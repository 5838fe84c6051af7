from pydantic import BaseModel


class GenerateResponse(BaseModel):
    success: bool
    text: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, text: str) -> "GenerateResponse":
        return cls(success=True, text=text)

    @classmethod
    def fail(cls, error: str) -> "GenerateResponse":
        return cls(success=False, error=error)
