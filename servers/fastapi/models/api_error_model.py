from pydantic import BaseModel


class APIErrorModel(BaseModel):
    error: str
