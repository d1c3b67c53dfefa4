from pydantic import BaseModel, Field
from typing import Optional


class EmployeeBase(BaseModel):
    name: str
    age: int = Field(..., ge=0)
    gender: str
    salary: float


class EmployeeCreate(EmployeeBase):
    id: Optional[str] = None  # caller-supplied ObjectId hex, generated when omitted


class EmployeeUpdate(EmployeeBase):
    pass


class Employee(EmployeeBase):
    id: str

    @classmethod
    def from_document(cls, doc: dict) -> "Employee":
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            age=doc["age"],
            gender=doc["gender"],
            salary=doc["salary"],
        )
