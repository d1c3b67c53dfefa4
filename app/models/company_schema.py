from pydantic import BaseModel, Field
from typing import List, Optional

from app.models.employee_schema import Employee
from app.models.schema import Pageable


class CompanyRequest(BaseModel):
    companyName: str = Field(..., min_length=1)
    employeesId: List[str] = Field(default_factory=list)


class Company(BaseModel):
    companyId: Optional[str] = None
    companyName: str
    employeesId: List[str] = Field(default_factory=list)

    @classmethod
    def from_document(cls, doc: dict) -> "Company":
        return cls(
            companyId=str(doc["_id"]),
            companyName=doc["companyName"],
            employeesId=list(doc.get("employeesId", [])),
        )

    def to_document(self) -> dict:
        return {"companyName": self.companyName, "employeesId": list(self.employeesId)}


class CompanyResponse(BaseModel):
    companyId: str
    companyName: str
    employeesNumber: int
    employees: List[Employee]


class CompanyPage(BaseModel):
    content: List[CompanyResponse]
    pageable: Pageable
    totalElements: int
    totalPages: int
