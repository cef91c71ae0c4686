from pydantic import BaseModel


class MentorResponse(BaseModel):
    id: str
    name: str
    specialties: list[str]

    class Config:
        from_attributes = True
