from pydantic import BaseModel


class ErrorReport(BaseModel):
    title: str
    message: str
